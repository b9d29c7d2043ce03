"""Locate, read and parse Titanium tiapp.xml project files."""

from tiapp.errors import (
    TiappArgumentError,
    TiappConfigError,
    TiappError,
    TiappNotFoundError,
    TiappParseError,
)
from tiapp.locator import TIAPP_FILENAME, find_tiapp
from tiapp.tiapp import Tiapp

__version__ = "0.1.0"

__all__ = [
    "TIAPP_FILENAME",
    "Tiapp",
    "TiappArgumentError",
    "TiappConfigError",
    "TiappError",
    "TiappNotFoundError",
    "TiappParseError",
    "find_tiapp",
]
