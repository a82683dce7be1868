# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "ORION_APP_NAME": "App name, also the log file stem (default: orion).",
    "ORION_LOG_LEVEL": "Console logging level (default: INFO).",
    # Paths (gitignored)
    "ORION_DATA_DIR": "Local data directory (default: data).",
    "ORION_TASKS_PATH": "Task storage file (default: <data_dir>/tasks.csv).",
    # Storage policy
    "ORION_STRICT_WRITES": (
        "true: a failed save raises TaskStoreWriteError; false: it is only logged (default: true)."
    ),
}
