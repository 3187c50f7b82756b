import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "geoattend"),
}

DEBUG = False

OFFICE_TIMEZONE = os.getenv("OFFICE_TIMEZONE", "Asia/Jakarta")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "/var/log/geoattend")

RECENT_LOG_LIMIT = int(os.getenv("RECENT_LOG_LIMIT", "5"))
ANOMALY_HISTORY_LIMIT = int(os.getenv("ANOMALY_HISTORY_LIMIT", "30"))

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
