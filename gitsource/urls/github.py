"""
GitHub URL helpers.

Converts GitHub browse URLs into raw.githubusercontent.com links that
serve file bytes directly, so a single file (e.g. a devfile) can be
fetched without cloning the repository.
"""

import posixpath
import re
from pathlib import Path
from typing import Union
from urllib.parse import SplitResult, urlsplit, urlunsplit

from gitsource.core.exceptions import InvalidURLError, UnsupportedHostError

GITHUB_HOST = "github.com"
RAW_GITHUB_HOST = "raw.githubusercontent.com"
DEFAULT_BRANCH = "main"

# Only a suffix at the very end of the URL
GIT_SUFFIX = re.compile(r"\.git$")

# Context values that mean "repository root"
ROOT_CONTEXTS = ("", ".", "./")


def _parse(url: str) -> SplitResult:
    try:
        parsed = urlsplit(url)
        # Port is validated lazily by urllib
        parsed.port
    except ValueError as e:
        raise InvalidURLError(url, e) from e
    return parsed


def _split_netloc(parsed: SplitResult):
    """Split netloc into (userinfo prefix, host[:port])."""
    userinfo, sep, host = parsed.netloc.rpartition("@")
    return userinfo + sep, host


def convert_github_url(url: str, revision: str = "", context: str = "") -> str:
    """
    Convert a GitHub repository URL to its raw-content form.

    Args:
        url: Browse URL, e.g. https://github.com/org/repo or
            https://github.com/org/repo/tree/<ref>/<dir>.
        revision: Branch, tag or commit; "main" is assumed when empty.
            Ignored for /tree/ URLs, which already name their ref.
        context: Directory inside the repository; "", "." and "./" mean
            the root.

    Returns:
        The raw-content URL. URLs whose host is not GitHub, or is already
        a raw host, are returned with only the .git and / suffixes removed.

    Raises:
        InvalidURLError: If the URL cannot be parsed.
    """
    url = GIT_SUFFIX.sub("", url)
    if url.endswith("/"):
        url = url[:-1]

    parsed = _parse(url)
    userinfo, host = _split_netloc(parsed)

    if "github" not in host or "raw" in host:
        return url

    segments = parsed.path.split("/")
    # segments[0] is empty, [1] the owner, [2] the repository
    tree_index = next(
        (i for i in range(3, len(segments) - 1) if segments[i] == "tree"),
        None,
    )
    if tree_index is not None:
        # Raw URLs name the ref directly, without the "tree" marker
        del segments[tree_index]
    else:
        segments.append(revision or DEFAULT_BRANCH)

    if context not in ROOT_CONTEXTS:
        if context.startswith("/"):
            context = context[1:]
        segments.append(context)

    if host == GITHUB_HOST:
        host = RAW_GITHUB_HOST

    return urlunsplit(
        parsed._replace(netloc=userinfo + host, path="/".join(segments))
    )


def get_context(local_path: Union[str, Path], level: int) -> str:
    """
    Rebuild a relative context by backtracking from the end of a path.

    get_context("/work/repo/app/src", 2) returns "app/src"; a level of
    zero returns "./".
    """
    context = "./"
    current = Path(local_path)
    for _ in range(level):
        context = posixpath.normpath(posixpath.join(current.name, context))
        current = current.parent
    return context


def update_git_link(repo: str, revision: str, context: str) -> str:
    """
    Turn a relative link into a full raw-content URL.

    A context that is already an http(s) link is returned untouched.
    """
    if context.startswith("http"):
        return context
    return convert_github_url(repo, revision, context)


def validate_github_url(url: str) -> None:
    """
    Check that a URL is hosted on GitHub.

    Any host containing "github" is accepted, including subdomains.

    Raises:
        InvalidURLError: If the URL cannot be parsed.
        UnsupportedHostError: If the host is not GitHub.
    """
    parsed = _parse(url)
    _, host = _split_netloc(parsed)
    if "github" not in host:
        raise UnsupportedHostError(url)
