"""
Utility functions and helpers.

Provides common utilities used across the codebase.
"""

from gitsource.utils.logging_config import setup_logging, get_logger
from gitsource.utils.validation import path_exists
from gitsource.utils.http import fetch_endpoint

__all__ = [
    "setup_logging",
    "get_logger",
    "path_exists",
    "fetch_endpoint",
]
