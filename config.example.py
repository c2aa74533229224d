# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
All variables are optional. Tasks are never written to disk; TASKBOARD_DATA_DIR only holds the log.
"""

ENV_VARS = {
    # App / logging
    "TASKBOARD_APP_NAME": "App display name in logs (default: taskboard).",
    "TASKBOARD_LOG_LEVEL": "Console logging level (default: WARNING; the log file always gets DEBUG).",
    "TASKBOARD_DATA_DIR": "Directory for taskboard.log (default: .local/taskboard).",
    "TASKBOARD_LOG_TO_FILE": "Write the log file (true/false, default: true).",
    # Console
    "TASKBOARD_COLOR": "ANSI colors for priorities (true/false, default: true).",
    "TASKBOARD_SEED_DEMO": "Create the two example tasks on start (true/false, default: true).",
    "TASKBOARD_PAUSE_AFTER_ACTION": "Wait for Enter after each menu action (true/false, default: true).",
}
