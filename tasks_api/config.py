import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv(".env")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Read listening address and log level from the environment."""
    port = os.getenv("TASKS_API_PORT", "8080")
    try:
        port = int(port)
    except ValueError:
        raise ValueError(f"TASKS_API_PORT must be an integer, got {port!r}") from None
    return Settings(
        host=os.getenv("TASKS_API_HOST", "0.0.0.0"),
        port=port,
        log_level=os.getenv("TASKS_API_LOG_LEVEL", "INFO").upper(),
    )
