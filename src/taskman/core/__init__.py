"""
Core domain.

Components:
- models.py: Task, ServiceStatus
- errors.py: TaskError + TaskErrorKind
- ports.py: Storage protocol
- sorting.py: TaskSortType
- service.py: TaskService (validation + status + logging)
- state.py: AppState passed to command handlers
"""
