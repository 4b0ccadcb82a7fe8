"""
Git operations handler for repository acquisition.

Clones a remote repository into a caller-owned directory, checks out
an optional revision and reports the current branch. Failures are
classified into specific exceptions; any access token is kept out of
logs and error messages.
"""

import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import List, Optional, Union

from gitsource.acquisition.classifier import (
    CHECKOUT_FAILURES,
    CLONE_FAILURES,
    GitFailure,
    classify_git_output,
)
from gitsource.acquisition.repository import GitSource, scrub_secret
from gitsource.core.config import Config, GitConfig
from gitsource.core.exceptions import (
    AuthenticationFailedError,
    GitCommandError,
    RepoNotFoundError,
    RevisionNotFoundError,
)
from gitsource.utils.validation import path_exists

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class GitHandler:
    """
    Handles git operations for repository acquisition.

    Every public method spawns at most one git process and blocks until
    it exits. There is no locking: callers acquiring into the same
    directory concurrently must serialize themselves.
    """

    def __init__(self, config: Optional[GitConfig] = None):
        self.config = config or Config.get().git
        self._git_available = shutil.which(self.config.git_binary) is not None

    def clone_repository(self, clone_path: PathLike, source: GitSource) -> None:
        """
        Clone a repository and check out its requested revision.

        Args:
            clone_path: Target directory. Created if missing; never removed.
            source: Repository URL, optional revision and optional token.

        Raises:
            InvalidURLError: If a token is supplied for a non-https URL.
            RepoNotFoundError: If the remote repository does not exist.
            AuthenticationFailedError: If the remote rejects the credentials.
            RevisionNotFoundError: If the revision is unknown to the clone.
            GitCommandError: For any other git failure.
        """
        clone_path = Path(clone_path).absolute()
        display_url = source.display_url()

        self._ensure_directory(clone_path)
        clone_url = source.clone_url()

        logger.info(f"Cloning repository: {display_url}")
        returncode, output = self._run(
            ["clone", clone_url, str(clone_path)],
            cwd=clone_path,
            env=self._non_interactive_env(),
        )
        output = scrub_secret(output, source.token)

        if returncode != 0:
            failure = classify_git_output(output, CLONE_FAILURES)
            if failure is GitFailure.REPO_NOT_FOUND:
                raise RepoNotFoundError(display_url, output)
            if failure is GitFailure.AUTHENTICATION_FAILED:
                raise AuthenticationFailedError(display_url, output)
            raise GitCommandError(
                f"failed to clone the repo {display_url}: {output.strip()}",
                output=output,
                details={"url": display_url},
            )

        if source.revision:
            self._checkout(clone_path, source, display_url)

        logger.info(f"Repository cloned to: {clone_path}")

    def get_current_branch(self, repo_path: PathLike) -> str:
        """
        Get the current branch of a cloned repository.

        A detached HEAD is reported as "HEAD".

        Raises:
            GitCommandError: If the branch cannot be read.
        """
        returncode, output = self._run(
            ["rev-parse", "--abbrev-ref", "HEAD"],
            cwd=Path(repo_path),
        )
        if returncode != 0:
            raise GitCommandError(
                f"failed to get the branch from the repo: {output.strip()}",
                output=output,
                details={"path": str(repo_path)},
            )
        return output.split("\n")[0].rstrip()

    def _checkout(self, clone_path: Path, source: GitSource, display_url: str) -> None:
        logger.info(f"Checking out revision {source.revision!r}")
        returncode, output = self._run(["checkout", source.revision], cwd=clone_path)
        if returncode == 0:
            return

        output = scrub_secret(output, source.token)
        if classify_git_output(output, CHECKOUT_FAILURES) is GitFailure.REVISION_NOT_FOUND:
            raise RevisionNotFoundError(display_url, source.revision, output)
        raise GitCommandError(
            f"failed to checkout the revision {source.revision!r}: {output.strip()}",
            output=output,
            details={"url": display_url, "revision": source.revision},
        )

    def _ensure_directory(self, clone_path: Path) -> None:
        try:
            exists = path_exists(clone_path)
        except OSError as e:
            logger.debug(f"Could not inspect {clone_path}: {e}")
            exists = False

        if exists:
            return

        # Missing ancestors get the same mode as the leaf; existing ones are untouched
        missing = [p for p in (*reversed(clone_path.parents), clone_path) if not p.exists()]
        try:
            for directory in missing:
                directory.mkdir(mode=self.config.clone_dir_mode, exist_ok=True)
        except OSError as e:
            # git clone reports the unusable path itself
            logger.warning(f"Failed to create clone directory {clone_path}: {e}")

    def _non_interactive_env(self) -> dict:
        env = os.environ.copy()
        env["GIT_TERMINAL_PROMPT"] = "0"
        env["GIT_ASKPASS"] = self.config.askpass_program
        return env

    def _run(self, args: List[str], cwd: Path, env: Optional[dict] = None):
        """Run git and return (returncode, combined stdout/stderr)."""
        if not self._git_available:
            raise GitCommandError(
                f"Git is not available on this system ({self.config.git_binary})"
            )

        logger.debug(f"Running git {args[0]} in {cwd}")
        try:
            result = subprocess.run(
                [self.config.git_binary, *args],
                cwd=cwd,
                env=env,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
            )
        except OSError as e:
            raise GitCommandError(f"failed to run git {args[0]}: {e}") from e

        return result.returncode, result.stdout or ""
