"""Configuration constants."""

import os

STORE_URL = os.environ.get("SECRET_STORE_URL", "http://localhost:8080")
NAMESPACE = "sman"

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
PORT = int(os.environ.get("PORT", "5001"))
