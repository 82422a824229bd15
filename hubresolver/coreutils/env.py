from dotenv import load_dotenv
import os

load_dotenv()  # take environment variables from .env

TRUTHY_VALUES = {"true", "1", "yes", "on"}


def env_get(key: str, default: str | None = None) -> str | None:
    """Get environment variable or return default."""
    return os.getenv(key, default)


def env_flag(key: str, default: bool = False) -> bool:
    """Read a boolean environment variable ("true", "1", "yes", "on")."""
    value = env_get(key)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES
