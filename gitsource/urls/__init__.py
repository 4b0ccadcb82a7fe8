"""
URL normalization for GitHub raw-content access.
"""

from gitsource.urls.github import (
    convert_github_url,
    get_context,
    update_git_link,
    validate_github_url,
)

__all__ = [
    "convert_github_url",
    "get_context",
    "update_git_link",
    "validate_github_url",
]
