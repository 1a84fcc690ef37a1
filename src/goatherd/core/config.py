from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

# .env file sits in the project root (parent of src/)
# Only use if it exists (CI uses environment variables directly)
# Path: core/config.py -> goatherd -> src -> project root -> .env
_ENV_FILE = Path(__file__).parent.parent.parent.parent / ".env"
_ENV_FILE = _ENV_FILE if _ENV_FILE.exists() else None

DATA_DIR_NAME = ".goatherd"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Chat-completion API used by the advisor
    openai_api_key: str | None = None
    chat_api_url: str = "https://api.openai.com/v1/chat/completions"
    chat_model: str = "gpt-3.5-turbo"
    chat_max_tokens: int = 300
    chat_temperature: float = 0.7
    chat_timeout: float = 30.0
    # 1 = a single exchange per advice request, no retries
    chat_max_attempts: int = 1

    # Where the six record collections are stored (GOATHERD_DATA_DIR)
    # If not set, .goatherd/ in the project root is used
    goatherd_data_dir: Path | None = None

    # Display units for CLI output ("metric" = kg/L/ha, "imperial" = lb/gal/acres)
    # Note: records are always stored in kg, litres and acres
    display_units: Literal["imperial", "metric"] = "metric"

    # Bootstrap page check
    bootstrap_url: str | None = None
    bootstrap_marker: str | None = None
    attribution_timeout: float = 4.0  # seconds to wait for conversion data
    bootstrap_fallback_delay: float = 7.0  # fetch anyway after this long
    bootstrap_request_timeout: float = 10.0
    bootstrap_deadline: float = 20.0  # give up on the fetch entirely

    log_level: str = "INFO"


@lru_cache
def _default_data_dir() -> Path:
    """Find .goatherd/ in the project root.

    Looks for project root by finding a .git directory,
    then returns .goatherd/ within that root.
    """
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / ".git").exists():
            data_dir = parent / DATA_DIR_NAME
            data_dir.mkdir(exist_ok=True)
            return data_dir
    # Fallback to current working directory
    data_dir = Path.cwd() / DATA_DIR_NAME
    data_dir.mkdir(exist_ok=True)
    return data_dir


def get_data_dir() -> Path:
    """Get the directory holding the record collections.

    GOATHERD_DATA_DIR wins when set; otherwise the project-root default.
    """
    if settings.goatherd_data_dir is not None:
        settings.goatherd_data_dir.mkdir(parents=True, exist_ok=True)
        return settings.goatherd_data_dir
    return _default_data_dir()


settings = Settings()
