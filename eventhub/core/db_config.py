import os

from eventhub.services.errors import ConfigurationError

# Database configuration
DATABASE_URL_ENV = "DATABASE_URL"
DATABASE_ECHO_ENV = "DATABASE_ECHO"


def get_database_url() -> str:
    url = os.getenv(DATABASE_URL_ENV, "").strip()
    if not url:
        raise ConfigurationError(
            f"Please define the {DATABASE_URL_ENV} environment variable."
        )
    return url


def get_database_echo() -> bool:
    return os.getenv(DATABASE_ECHO_ENV, "").strip().lower() in ("1", "true", "yes")
