"""
Core module containing configuration and the exception hierarchy.
"""

from gitsource.core.config import Config, GitSourceConfig
from gitsource.core.exceptions import (
    GitSourceError,
    GitCommandError,
    RepoNotFoundError,
    AuthenticationFailedError,
    RevisionNotFoundError,
    InvalidURLError,
    UnsupportedHostError,
    FetchError,
    RegistryError,
    SampleNotFoundError,
)

__all__ = [
    "Config",
    "GitSourceConfig",
    "GitSourceError",
    "GitCommandError",
    "RepoNotFoundError",
    "AuthenticationFailedError",
    "RevisionNotFoundError",
    "InvalidURLError",
    "UnsupportedHostError",
    "FetchError",
    "RegistryError",
    "SampleNotFoundError",
]
