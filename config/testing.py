import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"
LOG_FILE = None

STORAGE_BACKEND = "memory"
STORAGE_DIR = os.getenv("STORAGE_DIR", "instance/test-storage")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "salon_test_db"),
}

AUTO_INIT_DB = False
