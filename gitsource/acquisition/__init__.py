"""
Repository acquisition module.

Handles cloning, revision checkout and failure classification for
remote git repositories.
"""

from gitsource.acquisition.repository import GitSource, redact_url
from gitsource.acquisition.classifier import GitFailure, classify_git_output
from gitsource.acquisition.git_handler import GitHandler

__all__ = [
    "GitSource",
    "redact_url",
    "GitFailure",
    "classify_git_output",
    "GitHandler",
]
