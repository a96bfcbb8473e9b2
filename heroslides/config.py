import os
from functools import lru_cache

# Prefer loading environment variables from a .env file if python-dotenv is available
try:
    from dotenv import load_dotenv, find_dotenv
    _env_path = find_dotenv(usecwd=True)
    if _env_path:
        load_dotenv(_env_path, override=False)
except ImportError:
    pass


class Settings:
    DATABASE_URL: str = os.getenv("DATABASE_URL")
    # Primary admin identity; used to seed the server and as client credentials
    ADMIN_EMAIL: str = os.getenv("ADMIN_EMAIL")
    ADMIN_PASSWORD: str = os.getenv("ADMIN_PASSWORD")
    # Optional comma separated list of additional admin emails
    ADMIN_EMAILS: str = os.getenv("ADMIN_EMAILS")
    API_BASE_URL: str = os.getenv("API_BASE_URL", "http://localhost:8000")
    REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "10"))
    # Shown in the slide table when a slide image cannot be loaded
    FALLBACK_IMAGE_URL: str = os.getenv("FALLBACK_IMAGE_URL", "/public/logo.png")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def admin_emails(self) -> set:
        emails = {e.strip().lower() for e in (self.ADMIN_EMAILS or "").split(",") if e.strip()}
        if self.ADMIN_EMAIL:
            emails.add(self.ADMIN_EMAIL.strip().lower())
        return emails


@lru_cache
def get_settings():
    return Settings()
