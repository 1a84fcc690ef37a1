"""Core module - configuration, logging, errors and units."""

from goatherd.core import units
from goatherd.core.config import get_data_dir, settings
from goatherd.core.errors import (
    AdvisorError,
    BootstrapError,
    ChatAPIError,
    ChatResponseError,
    RecordNotFoundError,
    RetryableError,
)
from goatherd.core.logging_config import setup_logging
from goatherd.core.units import (
    format_area,
    format_feed,
    format_milk,
    is_imperial,
)

__all__ = [
    "units",
    "settings",
    "get_data_dir",
    "setup_logging",
    "AdvisorError",
    "BootstrapError",
    "ChatAPIError",
    "ChatResponseError",
    "RecordNotFoundError",
    "RetryableError",
    # Unit display helpers
    "format_area",
    "format_feed",
    "format_milk",
    "is_imperial",
]
