# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Nothing here is secret; .env is still gitignored because paths are machine-specific.

This file exists to make the repo self-documenting even without opening .env.
"""

ENV_VARS = {
    # App / logging
    "TODO_APP_NAME": "App display name, also the list title (default: local-todo).",
    "TODO_LOG_LEVEL": "Console logging level; WARNING is the floor (default: INFO).",
    # Paths (gitignored)
    "TODO_DATA_DIR": "Local data directory for logs and storage (default: .local/todo).",
    "TODO_STORAGE_PATH": "Key/value SQLite path (default: <data_dir>/storage.sqlite3).",
    # Storage records
    "TODO_TASKS_KEY": "Record name holding the tasks JSON array (default: todos).",
    "TODO_USERS_KEY": "Record name holding the signup users JSON array (default: users).",
    "TODO_STORAGE_QUOTA_BYTES": "Total size cap for all records; 0 disables (default: 5242880).",
    # Presenter behaviour
    "TODO_FILTER_MODE": "status (all/pending/in-progress/completed) or text (substring).",
    "TODO_STATUS_STYLE": "select (/status <row> <status>) or cycle (/status <row> advances).",
}
