"""
Configuration management for gitsource.

Provides centralized configuration for git acquisition, HTTP fetches
and registry lookups with sensible defaults.
"""

import os
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv


@dataclass
class GitConfig:
    """Configuration for git command invocation."""

    # Executable used for clone, checkout and rev-parse
    git_binary: str = "git"

    # Program git calls for credentials; echoing keeps it non-interactive
    askpass_program: str = "/bin/echo"

    # Permissions for clone directories created on demand (no world access)
    clone_dir_mode: int = 0o750


@dataclass
class HttpConfig:
    """Configuration for HTTP fetches."""

    # Per-read timeout, also used as the cap on the whole request
    timeout: float = 30.0


@dataclass
class RegistryConfig:
    """Configuration for devfile registry lookups."""

    registry_url: str = "https://registry.devfile.io"


@dataclass
class GitSourceConfig:
    """Master configuration combining all section configurations."""

    git: GitConfig = field(default_factory=GitConfig)
    http: HttpConfig = field(default_factory=HttpConfig)
    registry: RegistryConfig = field(default_factory=RegistryConfig)

    # Enable verbose logging
    verbose: bool = False

    # Default parent directory for clones made from the CLI
    work_dir: str = "./data/repos"


class Config:
    """
    Central configuration manager providing access to all settings.

    Supports loading from environment variables and configuration files.
    """

    _instance: Optional["Config"] = None
    _config: GitSourceConfig = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._config = GitSourceConfig()
        return cls._instance

    @classmethod
    def get(cls) -> GitSourceConfig:
        """Get the current configuration."""
        if cls._instance is None:
            cls()
        return cls._instance._config

    @classmethod
    def reset(cls) -> GitSourceConfig:
        """Restore default configuration."""
        instance = cls()
        instance._config = GitSourceConfig()
        return instance._config

    @classmethod
    def load_from_file(cls, config_path: str) -> GitSourceConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file.

        Returns:
            Loaded GitSourceConfig instance.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r") as f:
            data = json.load(f)

        instance = cls()
        instance._config = cls._dict_to_config(data)
        return instance._config

    @classmethod
    def load_from_env(cls, dotenv_path: Optional[str] = None) -> GitSourceConfig:
        """
        Load configuration from environment variables.

        Variables are prefixed with GITSOURCE_. A .env file is read first
        without overriding variables that are already set.

        Returns:
            GitSourceConfig with environment overrides applied.
        """
        load_dotenv(dotenv_path or find_dotenv(usecwd=True), override=False)

        instance = cls()
        config = instance._config

        if os.getenv("GITSOURCE_GIT_BINARY"):
            config.git.git_binary = os.getenv("GITSOURCE_GIT_BINARY")

        if os.getenv("GITSOURCE_ASKPASS"):
            config.git.askpass_program = os.getenv("GITSOURCE_ASKPASS")

        if os.getenv("GITSOURCE_HTTP_TIMEOUT"):
            config.http.timeout = float(os.getenv("GITSOURCE_HTTP_TIMEOUT"))

        if os.getenv("GITSOURCE_REGISTRY_URL"):
            config.registry.registry_url = os.getenv("GITSOURCE_REGISTRY_URL")

        if os.getenv("GITSOURCE_WORK_DIR"):
            config.work_dir = os.getenv("GITSOURCE_WORK_DIR")

        if os.getenv("GITSOURCE_VERBOSE"):
            config.verbose = os.getenv("GITSOURCE_VERBOSE").lower() in ("true", "1", "yes")

        return config

    @staticmethod
    def _dict_to_config(data: dict) -> GitSourceConfig:
        """Convert a dictionary to GitSourceConfig."""
        config = GitSourceConfig()

        if "git" in data:
            config.git = GitConfig(**data["git"])

        if "http" in data:
            config.http = HttpConfig(**data["http"])

        if "registry" in data:
            config.registry = RegistryConfig(**data["registry"])

        if "verbose" in data:
            config.verbose = data["verbose"]

        if "work_dir" in data:
            config.work_dir = data["work_dir"]

        return config

    @classmethod
    def save_to_file(cls, config_path: str) -> None:
        """
        Save current configuration to a JSON file.

        Args:
            config_path: Path to save the configuration file.
        """
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        data = cls._config_to_dict(cls.get())

        with open(config_path, "w") as f:
            json.dump(data, f, indent=2)

    @staticmethod
    def _config_to_dict(config: GitSourceConfig) -> dict:
        """Convert GitSourceConfig to a dictionary."""
        return {
            "git": {
                "git_binary": config.git.git_binary,
                "askpass_program": config.git.askpass_program,
                "clone_dir_mode": config.git.clone_dir_mode,
            },
            "http": {
                "timeout": config.http.timeout,
            },
            "registry": {
                "registry_url": config.registry.registry_url,
            },
            "verbose": config.verbose,
            "work_dir": config.work_dir,
        }
