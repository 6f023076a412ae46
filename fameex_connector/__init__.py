"""
FameEX Connector

Async client for the FameEX spot REST trading API.
"""

from .client import FameexClient
from .config import FameexSettings
from .exceptions import ConfigurationError, FameexError, FameexRequestError

__all__ = [
    "ConfigurationError",
    "FameexClient",
    "FameexError",
    "FameexRequestError",
    "FameexSettings",
]
