import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geoattend"),
}

DEBUG = True

# IANA zone used for "today", check-in timestamps and late/early classification
OFFICE_TIMEZONE = os.getenv("OFFICE_TIMEZONE", "Asia/Jakarta")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOG_DIR = os.getenv("LOG_DIR", "logs")

RECENT_LOG_LIMIT = int(os.getenv("RECENT_LOG_LIMIT", "5"))
ANOMALY_HISTORY_LIMIT = int(os.getenv("ANOMALY_HISTORY_LIMIT", "30"))

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
# Optional: also insert the default office settings row
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "1")))
