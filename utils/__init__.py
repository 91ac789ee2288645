"""
Utility modules for the biodata engine.
"""

from .formatting import format_date_display, format_timestamp
from .config import Config

__all__ = ["format_date_display", "format_timestamp", "Config"]
