"""Goat herd management tools.

This package keeps goat herd records in local JSON storage, derives herd
analytics from them, and asks a chat-completion API for farm advice.

Subpackages:
- goatherd.core: Configuration, logging, errors and display units
- goatherd.data: Goat, breeding, feeding, pasture and equipment records and the record store
- goatherd.analysis: Health alerts, breeding calendar, milk trends and inventory summaries
- goatherd.advisor: Prompt templates and the chat-completion advice provider
- goatherd.shell: Bootstrap page resolution
- goatherd.cli: Command-line tools
"""

# Re-export common items for convenience
from goatherd.core import get_data_dir, settings
from goatherd.data import FarmStore

__all__ = [
    "settings",
    "get_data_dir",
    "FarmStore",
]

__version__ = "0.1.0"
