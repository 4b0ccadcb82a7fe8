"""
Devfile registry sample lookups.

Reads the sample index of a devfile registry (GET <registry>/index/sample)
to resolve a sample's git origin and to list the sample devfile types.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from gitsource.core.config import Config
from gitsource.core.exceptions import RegistryError, SampleNotFoundError
from gitsource.utils.http import fetch_endpoint

logger = logging.getLogger(__name__)

SAMPLE_INDEX_PATH = "/index/sample"
ORIGIN_REMOTE = "origin"


@dataclass
class DevfileType:
    """Sample classification used for component detection."""

    name: str
    language: str = ""
    project_type: str = ""
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "language": self.language,
            "projectType": self.project_type,
            "tags": self.tags,
        }


@dataclass
class RegistryEntry:
    """One sample from a registry index."""

    name: str
    language: str = ""
    project_type: str = ""
    tags: List[str] = field(default_factory=list)
    git_remotes: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict) -> "RegistryEntry":
        """Create an entry from a registry index JSON object."""
        git = data.get("git") or {}
        return cls(
            name=data.get("name", ""),
            language=data.get("language", ""),
            project_type=data.get("projectType", ""),
            tags=list(data.get("tags") or []),
            git_remotes=dict(git.get("remotes") or {}),
        )

    def to_devfile_type(self) -> DevfileType:
        return DevfileType(
            name=self.name,
            language=self.language,
            project_type=self.project_type,
            tags=list(self.tags),
        )


class RegistryClient:
    """
    Client for a devfile registry's sample index.

    The index is fetched on every call; nothing is cached.
    """

    def __init__(
        self,
        registry_url: Optional[str] = None,
        fetcher: Callable[[str], bytes] = fetch_endpoint,
    ):
        self.registry_url = (registry_url or Config.get().registry.registry_url).rstrip("/")
        self._fetch = fetcher

    def get_index(self) -> List[RegistryEntry]:
        """
        Fetch and parse the sample index.

        Raises:
            FetchError: If the index cannot be downloaded.
            RegistryError: If the index is not a JSON list.
        """
        endpoint = self.registry_url + SAMPLE_INDEX_PATH
        logger.debug(f"Fetching registry index: {endpoint}")

        body = self._fetch(endpoint)
        try:
            data = json.loads(body)
        except ValueError as e:
            raise RegistryError(
                f"invalid registry index from {endpoint}: {e}",
                details={"registry_url": self.registry_url},
            ) from e

        if not isinstance(data, list):
            raise RegistryError(
                f"unexpected registry index format from {endpoint}",
                details={"registry_url": self.registry_url},
            )

        return [RegistryEntry.from_dict(item) for item in data if isinstance(item, dict)]

    def get_devfile_types(self) -> List[DevfileType]:
        """List the devfile types of every sample in the registry."""
        return [entry.to_devfile_type() for entry in self.get_index()]

    def get_repo_from_registry(self, name: str) -> str:
        """
        Get the origin git remote of a named sample.

        Raises:
            SampleNotFoundError: If no sample with that name has an origin.
        """
        for entry in self.get_index():
            origin = entry.git_remotes.get(ORIGIN_REMOTE)
            if entry.name == name and origin:
                return origin

        raise SampleNotFoundError(name, self.registry_url)
