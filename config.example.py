# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
Use:
- .env (local, gitignored)
- config_local.py (local safe overrides, gitignored)
"""

ENV_VARS = {
    # App / logging
    "TICKLIST_APP_NAME": "App display name (default: ticklist).",
    "TICKLIST_LOG_LEVEL": "Console logging level (default: INFO). The log file always gets DEBUG.",
    # Display
    "TICKLIST_DARK_MODE": "Start in dark mode (true/false, default: false).",
    "TICKLIST_COLOR": "Use ANSI colours (true/false; default: true unless NO_COLOR is set).",
    # Paths (gitignored)
    "TICKLIST_DATA_DIR": "Local data directory, also holds ticklist.log (default: .local/ticklist).",
    "TICKLIST_PREFS_DB_PATH": "Preferences SQLite path (default: <data_dir>/prefs.sqlite3).",
}
