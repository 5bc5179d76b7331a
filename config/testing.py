import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "attendance_tracker_test"),
}

PORT = 5000
CORS_ORIGINS = "*"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FILE = None

# Cheap hashing keeps the suite fast.
PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
