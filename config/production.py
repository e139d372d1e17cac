import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hostel_leave"),
}

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

LEAVE_DATA_SOURCE = os.getenv("LEAVE_DATA_SOURCE", "remote")
LEAVE_API_URL = os.getenv("LEAVE_API_URL", "http://localhost:5000")
LEAVE_API_TOKEN = os.getenv("LEAVE_API_TOKEN", "")
LEAVE_API_CONNECT_TIMEOUT = float(os.getenv("LEAVE_API_CONNECT_TIMEOUT", "5"))
LEAVE_API_READ_TIMEOUT = float(os.getenv("LEAVE_API_READ_TIMEOUT", "30"))
LEAVE_CACHE_BACKEND = os.getenv("LEAVE_CACHE_BACKEND", "mysql")
LEAVE_CACHE_PATH = os.getenv("LEAVE_CACHE_PATH", "/var/lib/hostel_leave/cache.json")
