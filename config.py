# config.py
"""
Application configuration loaded from the environment.

Values are read once at import time (after loading `.env`), the same way the
database module resolves its connection settings.
"""
import logging
import os
from urllib.parse import quote_plus

from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _as_bool(value: str) -> bool:
     return value.strip().lower() in ("1", "true", "yes", "on")


# Database
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")
SQL_ECHO = _as_bool(os.getenv("SQL_ECHO", "false"))


def build_database_url() -> str:
     """
     Resolve the SQLAlchemy URL.

     DATABASE_URL wins when set (e.g. sqlite for local runs); otherwise the
     MS SQL Server URL is assembled from the DB_* variables.
     """
     url = os.getenv("DATABASE_URL")
     if url:
          return url
     safe_user = quote_plus(DB_USER or "")
     safe_pass = quote_plus(DB_PASS or "")
     return f"mssql+pymssql://{safe_user}:{safe_pass}@{DB_SERVER}:{DB_PORT}/{DB_NAME}"


DATABASE_URL = build_database_url()

# Auth
JWT_SECRET = os.getenv("JWT_SECRET", "change-me")
JWT_ALGORITHM = "HS256"
JWT_EXPIRE_HOURS = int(os.getenv("JWT_EXPIRE_HOURS", "8"))
CONFIRMATION_TOKEN_TTL_MINUTES = 60

# HTTP
CORS_ORIGINS = [origin for origin in os.getenv("CORS_ORIGINS", "").split(",") if origin]
PORT = int(os.getenv("PORT", "10000"))

# Localization
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

# Email (Brevo)
BREVO_API_KEY = os.getenv("BREVO_API_KEY")
EMAIL_SENDER = os.getenv("EMAIL_SENDER", "noreply@haladesk.app")
EMAIL_DELIVERY_ENABLED = _as_bool(os.getenv("EMAIL_DELIVERY_ENABLED", "true"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging() -> None:
     """Configure root logging once for the API process."""
     logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
