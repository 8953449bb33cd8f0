# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a
local .env file, gitignored). Every variable is optional.

This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKMAN_APP_NAME": "Name shown in the banner and goodbye line (default: Task Manager).",
    "TASKMAN_LOG_LEVEL": "Console (stderr) logging level (default: WARNING).",
    "TASKMAN_LOG_DIR": "Directory for taskman.log (default: .local/taskman).",
    "TASKMAN_LOG_TO_FILE": "Write the DEBUG log file (true/false, default: true).",
    # Console
    "TASKMAN_ID_PREFIX_LEN": "Characters of the task id shown in the list (default: 8).",
    "TASKMAN_EXIT_ON_EOF": "Stop the loop when stdin closes (true/false, default: true).",
    "TASKMAN_USE_EMOJI": "Use emoji status glyphs instead of [x]/[ ] (default: true).",
    # Service
    "TASKMAN_REORDER_ON_COMPLETE": (
        "Move a completed task to the end of the list (true/false, default: false)."
    ),
}
