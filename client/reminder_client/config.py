"""Configuration for the reminder API client."""
from __future__ import annotations

import os

BACKEND_BASE_URL = os.getenv("BACKEND_BASE_URL", "http://localhost:8080")
REQUEST_TIMEOUT = int(os.getenv("BACKEND_TIMEOUT_SECONDS", "30"))
