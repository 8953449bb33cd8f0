"""
taskman: a console task manager.

Packages:
- core/: task model, errors, storage port, sort policy, service, app state
- storage/: in-memory storage adapter + derived lookups
- cli/: command parsing/registry, rendering, bootstrap, entrypoint
- connectors/: console REPL loop
"""

__version__ = "0.1.0"
