import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hostel_leave_test"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

LEAVE_DATA_SOURCE = "offline"
LEAVE_API_URL = "http://leave-api.test"
LEAVE_API_TOKEN = ""
LEAVE_CACHE_BACKEND = "memory"
LEAVE_CACHE_PATH = ""
