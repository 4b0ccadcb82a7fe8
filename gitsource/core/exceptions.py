"""
Custom exceptions for gitsource.

Provides a hierarchy of exceptions for git acquisition, URL handling,
HTTP fetches and registry lookups, so callers can react to a specific
failure (missing repository, bad credentials, unknown revision) instead
of parsing messages.

URLs stored on these exceptions are expected to be redacted already;
see gitsource.acquisition.repository.redact_url.
"""


class GitSourceError(Exception):
    """Base exception for all gitsource errors."""

    def __init__(self, message: str, stage: str = None, details: dict = None):
        super().__init__(message)
        self.stage = stage
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.stage:
            return f"[{self.stage}] {base_msg}"
        return base_msg


class GitCommandError(GitSourceError):
    """Raised when a git command fails for an unclassified reason."""

    def __init__(self, message: str, output: str = "", details: dict = None):
        details = dict(details or {})
        details.setdefault("output", output)
        super().__init__(message, stage="Git", details=details)
        self.output = output


class RepoNotFoundError(GitCommandError):
    """Raised when the remote repository does not exist or is not visible."""

    def __init__(self, url: str, output: str = ""):
        super().__init__(
            f"repository not found: {url}",
            output=output,
            details={"url": url},
        )
        self.url = url


class AuthenticationFailedError(GitCommandError):
    """Raised when the remote rejects the supplied credentials."""

    def __init__(self, url: str, output: str = ""):
        super().__init__(
            f"authentication failed for repository: {url}",
            output=output,
            details={"url": url},
        )
        self.url = url


class RevisionNotFoundError(GitCommandError):
    """Raised when a requested revision does not exist in the repository."""

    def __init__(self, url: str, revision: str, output: str = ""):
        super().__init__(
            f"revision {revision!r} not found in repository: {url}",
            output=output,
            details={"url": url, "revision": revision},
        )
        self.url = url
        self.revision = revision


class InvalidURLError(GitSourceError):
    """Raised when a URL cannot be parsed or used."""

    def __init__(self, url: str, error: Exception = None):
        reason = f": {error}" if error else ""
        super().__init__(
            f"invalid URL {url}{reason}",
            stage="URL",
            details={"url": url, "error": str(error) if error else None},
        )
        self.url = url
        self.error = error


class UnsupportedHostError(GitSourceError):
    """Raised when a URL is not hosted on GitHub."""

    def __init__(self, url: str):
        super().__init__(
            f"source git url {url} is not from github",
            stage="URL",
            details={"url": url},
        )
        self.url = url


class FetchError(GitSourceError):
    """Raised when an HTTP fetch fails or returns a non-200 status."""

    def __init__(self, endpoint: str, status_code: int = None, reason: str = None):
        if status_code is not None:
            message = f"received a non-200 status ({status_code}) when fetching {endpoint}"
        else:
            message = f"failed to fetch {endpoint}: {reason}"
        super().__init__(
            message,
            stage="Fetch",
            details={"endpoint": endpoint, "status_code": status_code},
        )
        self.endpoint = endpoint
        self.status_code = status_code


class RegistryError(GitSourceError):
    """Raised when the devfile registry index cannot be read."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Registry", details=details)


class SampleNotFoundError(RegistryError):
    """Raised when no sample with the requested name has an origin remote."""

    def __init__(self, name: str, registry_url: str):
        super().__init__(
            f"unable to find sample with a name {name} in the registry",
            details={"name": name, "registry_url": registry_url},
        )
        self.name = name
