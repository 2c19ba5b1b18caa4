import os

from config.config import DB_CONFIG, MAX_CONTENT_LENGTH  # noqa: F401

SECRET_KEY = "test-secret"

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "test-uploads")
LOG_LEVEL = "DEBUG"

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))
