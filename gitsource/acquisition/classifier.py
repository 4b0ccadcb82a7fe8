"""
Git error classifier for clone and checkout failures.

Maps the combined output of a failed git command onto a failure
category so the acquirer can raise a specific exception.

The signatures are English message fragments printed by git and by
the hosting provider. They can break across git versions, providers
and locales; extend SIGNATURES rather than matching output at call
sites.
"""

import re
from enum import Enum
from typing import Dict, Iterable, Optional, Pattern


class GitFailure(Enum):
    """Recognized git failure categories."""

    REPO_NOT_FOUND = "repo_not_found"
    REVISION_NOT_FOUND = "revision_not_found"
    AUTHENTICATION_FAILED = "authentication_failed"


# Checked in insertion order; case-sensitive.
SIGNATURES: Dict[GitFailure, Pattern] = {
    GitFailure.REPO_NOT_FOUND: re.compile(r"repository .* not found"),
    GitFailure.REVISION_NOT_FOUND: re.compile(
        r"pathspec .* did not match any file\(s\) known to git"
    ),
    GitFailure.AUTHENTICATION_FAILED: re.compile(r"Authentication failed .*"),
}

CLONE_FAILURES = (GitFailure.REPO_NOT_FOUND, GitFailure.AUTHENTICATION_FAILED)
CHECKOUT_FAILURES = (GitFailure.REVISION_NOT_FOUND,)


def classify_git_output(
    output: str,
    categories: Optional[Iterable[GitFailure]] = None,
) -> Optional[GitFailure]:
    """
    Classify git command output.

    Args:
        output: Combined stdout and stderr of the failed command.
        categories: Categories to check, in order. Defaults to all.

    Returns:
        The first matching category, or None when nothing matches.
    """
    if not output:
        return None

    for category in categories or SIGNATURES:
        if SIGNATURES[category].search(output):
            return category

    return None
