"""
Connector Utilities Package

Common utility functions and helpers.
"""

from .params import get_params_string, trim_any

__all__ = [
    "get_params_string",
    "trim_any",
]
