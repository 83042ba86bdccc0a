# -*- coding: utf-8 -*-
"""
Application settings, read from the environment or from a local .env file.
"""

from starlette.config import Config
from starlette.datastructures import CommaSeparatedStrings, Secret

config = Config(".env")

ENVIRONMENT = config("ENVIRONMENT", default="development")

DATABASE_URL = config("DATABASE_URL", default="sqlite:///./college_events.db")

# --- Session cookie ---
SECRET_KEY = config("SECRET_KEY", cast=Secret, default="dev-secret-key-change-me")
SESSION_COOKIE = config("SESSION_COOKIE", default="college_events_session")
SESSION_MAX_AGE = config("SESSION_MAX_AGE", cast=int, default=60 * 60 * 8)  # 8 hours
HTTPS_ONLY = config("HTTPS_ONLY", cast=bool, default=False)

CORS_ORIGINS = config("CORS_ORIGINS", cast=CommaSeparatedStrings, default="*")

# --- Pre-provisioned administrator ---
ADMIN_USERNAME = config("ADMIN_USERNAME", default="admin")
ADMIN_PASSWORD = config("ADMIN_PASSWORD", cast=Secret, default="admin123")

LOG_LEVEL = config("LOG_LEVEL", default="INFO")
LOG_FILE = config("LOG_FILE", default=None)
