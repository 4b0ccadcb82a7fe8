"""
Repository descriptor and credential helpers.

A GitSource names what to clone. When it carries an access token the
token is embedded in the clone URL, so every URL or command output that
can reach a log line or an exception is passed through redact_url or
scrub_secret first.
"""

from dataclasses import dataclass, field
from urllib.parse import urlsplit, urlunsplit

from gitsource.core.exceptions import InvalidURLError

HTTPS_PREFIX = "https://"
REDACTED = "***"


@dataclass(frozen=True)
class GitSource:
    """A remote repository to acquire."""

    repo_url: str
    # Empty means the remote's default branch
    revision: str = ""
    token: str = field(default="", repr=False)

    def clone_url(self) -> str:
        """URL handed to git clone, with the token embedded when set."""
        if not self.token:
            return self.repo_url
        return inject_token(self.repo_url, self.token)

    def display_url(self) -> str:
        """URL safe to show in logs and error messages."""
        return redact_url(self.repo_url)


def inject_token(url: str, token: str) -> str:
    """
    Embed an access token in an https URL.

    e.g. https://token:<token>@github.com/owner/repo.git

    Raises:
        InvalidURLError: If the URL does not use the https scheme.
    """
    if not url.startswith(HTTPS_PREFIX):
        raise InvalidURLError(
            redact_url(url),
            ValueError("token authentication requires an https:// URL"),
        )
    return f"{HTTPS_PREFIX}token:{token}@{url[len(HTTPS_PREFIX):]}"


def redact_url(url: str) -> str:
    """Replace any password in the URL's userinfo with a placeholder."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url

    if "@" not in parts.netloc:
        return url

    userinfo, _, host = parts.netloc.rpartition("@")
    user, sep, _ = userinfo.partition(":")
    if sep:
        userinfo = f"{user}:{REDACTED}"
    else:
        # A lone userinfo component may itself be a token
        userinfo = REDACTED
    return urlunsplit(parts._replace(netloc=f"{userinfo}@{host}"))


def scrub_secret(text: str, secret: str) -> str:
    """Remove every occurrence of a secret from free-form text."""
    if not secret or not text:
        return text
    return text.replace(secret, REDACTED)
