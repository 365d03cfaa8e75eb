# catalog_service/config.py
import os


HOST = os.environ.get("CATALOG_HOST", "0.0.0.0")
PORT = int(os.environ.get("CATALOG_PORT", "8080"))
LOG_LEVEL = os.environ.get("CATALOG_LOG_LEVEL", "INFO").upper()
