# config.py
"""
Environment configuration for the LandlordOS backend.

Values come from the process environment, with a local `.env` file
loaded first (real environment variables win).
"""
import os

from dotenv import load_dotenv

# Load .env
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
     return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


# Environment
APP_ENV = os.getenv("APP_ENV", "development").strip().lower()
IS_DEV = APP_ENV in ("dev", "development")

# JWT
DEV_JWT_SECRET = "landlordos-dev-secret-change-me"
JWT_SECRET = (os.getenv("JWT_SECRET") or DEV_JWT_SECRET).strip()
ALGORITHM = "HS256"
ACCESS_TOKEN_HOURS = int(os.getenv("ACCESS_TOKEN_HOURS", "24"))

# Bcrypt cost factor (tests lower this)
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# Database
DATABASE_URL = os.getenv("DATABASE_URL", "").strip()
DATABASE_PATH = os.getenv("DATABASE_PATH", "landlordos.db")
DB_SERVER = os.getenv("DB_SERVER")
DB_PORT = os.getenv("DB_PORT", "1433")
DB_USER = os.getenv("DB_USER")
DB_PASS = os.getenv("DB_PASS")
DB_NAME = os.getenv("DB_NAME")
SQL_ECHO = _env_bool("SQL_ECHO", "false")
AUTO_CREATE_TABLES = _env_bool("AUTO_CREATE_TABLES", "true")

# HTTP
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
PORT = int(os.getenv("PORT", "3000"))

# Domain defaults
DEFAULT_CURRENCY = os.getenv("DEFAULT_CURRENCY", "TZS")

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
