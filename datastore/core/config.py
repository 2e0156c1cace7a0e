import os
APP_TITLE = os.getenv("APP_TITLE", "Datastore")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
HOST = os.getenv("DATASTORE_HOST", "127.0.0.1")
PORT = int(os.getenv("DATASTORE_PORT", "3030"))
LOCK_TIMEOUT = float(os.getenv("DATASTORE_LOCK_TIMEOUT", "5.0"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
