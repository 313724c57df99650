"""
Application configuration and settings.
Centralized environment variables and constants.
"""
import logging
import os
from dotenv import load_dotenv

load_dotenv()

# -----------------------------------------------------------------------------
# Environment
# -----------------------------------------------------------------------------
# ENV controls environment-specific behavior (dev, uat, prod).
ENV = os.getenv("ENV", "dev").lower()
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# -----------------------------------------------------------------------------
# HTTP Server
# -----------------------------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))

API_TITLE = "Employee Registry API"
API_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# Random User API (bulk import source)
# -----------------------------------------------------------------------------
RANDOM_USER_API_URL = os.getenv("RANDOM_USER_API_URL", "https://randomuser.me/api/")
# "es" yields Spanish names
RANDOM_USER_NATIONALITY = os.getenv("RANDOM_USER_NATIONALITY", "es")
RANDOM_USER_FIELDS = os.getenv("RANDOM_USER_FIELDS", "name,email,phone,dob,picture,login")
RANDOM_USER_TIMEOUT_S = float(os.getenv("RANDOM_USER_TIMEOUT_S", "10"))

# -----------------------------------------------------------------------------
# Import Configuration
# -----------------------------------------------------------------------------
IMPORT_DEFAULT_COUNT = int(os.getenv("IMPORT_DEFAULT_COUNT", "5"))
CONSOLE_IMPORT_MAX = int(os.getenv("CONSOLE_IMPORT_MAX", "10"))

# Generated salaries fall in [SALARY_MIN, SALARY_MAX)
SALARY_MIN = int(os.getenv("SALARY_MIN", "1000"))
SALARY_MAX = int(os.getenv("SALARY_MAX", "5000"))


def configure_logging(level: str = LOG_LEVEL) -> None:
    """Configure root logging once for an entry point."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
