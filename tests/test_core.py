"""
Unit tests for core module components.
"""

import json
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from gitsource.core.config import (
    Config,
    GitSourceConfig,
    GitConfig,
    HttpConfig,
    RegistryConfig,
)
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


class TestConfig(unittest.TestCase):
    """Tests for configuration management."""

    def setUp(self):
        Config.reset()

    def tearDown(self):
        Config.reset()

    def test_default_config(self):
        """Test that default configuration is created correctly."""
        config = GitSourceConfig()

        self.assertIsInstance(config.git, GitConfig)
        self.assertIsInstance(config.http, HttpConfig)
        self.assertIsInstance(config.registry, RegistryConfig)
        self.assertFalse(config.verbose)

    def test_git_config_defaults(self):
        """Test git configuration defaults."""
        config = GitConfig()

        self.assertEqual(config.git_binary, "git")
        self.assertEqual(config.askpass_program, "/bin/echo")
        self.assertEqual(config.clone_dir_mode, 0o750)

    def test_http_and_registry_defaults(self):
        """Test HTTP timeout and registry URL defaults."""
        self.assertEqual(HttpConfig().timeout, 30.0)
        self.assertEqual(RegistryConfig().registry_url, "https://registry.devfile.io")

    def test_get_returns_singleton_config(self):
        """Test that Config.get returns the same instance every time."""
        self.assertIs(Config.get(), Config.get())

    def test_config_save_and_load(self):
        """Test configuration serialization and deserialization."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_path = Path(tmpdir) / "config.json"

            Config.get().http.timeout = 5.0
            Config.save_to_file(str(config_path))

            self.assertTrue(config_path.exists())

            with open(config_path) as f:
                data = json.load(f)

            self.assertIn("git", data)
            self.assertIn("http", data)
            self.assertIn("registry", data)

            Config.reset()
            loaded = Config.load_from_file(str(config_path))
            self.assertEqual(loaded.http.timeout, 5.0)
            self.assertEqual(loaded.git.clone_dir_mode, 0o750)

    def test_load_missing_file(self):
        """Test loading a configuration file that does not exist."""
        with self.assertRaises(FileNotFoundError):
            Config.load_from_file("/nonexistent/config.json")

    def test_load_from_env(self):
        """Test environment and .env overrides."""
        with tempfile.TemporaryDirectory() as tmpdir:
            dotenv_path = Path(tmpdir) / ".env"
            dotenv_path.write_text("GITSOURCE_REGISTRY_URL=https://registry.example.com\n")

            with patch.dict(os.environ, {
                "GITSOURCE_HTTP_TIMEOUT": "5",
                "GITSOURCE_GIT_BINARY": "/usr/local/bin/git",
                "GITSOURCE_VERBOSE": "yes",
            }):
                config = Config.load_from_env(str(dotenv_path))

        self.assertEqual(config.http.timeout, 5.0)
        self.assertEqual(config.git.git_binary, "/usr/local/bin/git")
        self.assertEqual(config.registry.registry_url, "https://registry.example.com")
        self.assertTrue(config.verbose)


class TestExceptions(unittest.TestCase):
    """Tests for custom exceptions."""

    def test_base_error(self):
        """Test base error formatting."""
        error = GitSourceError("Test error", stage="test", details={"key": "value"})

        self.assertEqual(str(error), "[test] Test error")
        self.assertEqual(error.stage, "test")
        self.assertEqual(error.details, {"key": "value"})

    def test_base_error_without_stage(self):
        """Test base error without a stage."""
        self.assertEqual(str(GitSourceError("plain")), "plain")

    def test_git_command_error(self):
        """Test the generic git error keeps the raw output."""
        error = GitCommandError("clone failed", output="fatal: boom")

        self.assertEqual(error.stage, "Git")
        self.assertEqual(error.output, "fatal: boom")
        self.assertEqual(error.details["output"], "fatal: boom")

    def test_classified_errors_are_git_errors(self):
        """Test classified errors can be caught as GitCommandError."""
        errors = [
            RepoNotFoundError("https://github.com/org/repo"),
            AuthenticationFailedError("https://github.com/org/repo"),
            RevisionNotFoundError("https://github.com/org/repo", "v9"),
        ]
        for error in errors:
            self.assertIsInstance(error, GitCommandError)
            self.assertIn("https://github.com/org/repo", str(error))

    def test_revision_not_found_error(self):
        """Test revision not found names the revision."""
        error = RevisionNotFoundError("https://github.com/org/repo", "v9", "pathspec ...")

        self.assertEqual(error.revision, "v9")
        self.assertIn("'v9'", str(error))
        self.assertEqual(error.details["revision"], "v9")

    def test_invalid_url_error(self):
        """Test invalid URL error carries the underlying error."""
        cause = ValueError("Invalid IPv6 URL")
        error = InvalidURLError("https://[bad", cause)

        self.assertIs(error.error, cause)
        self.assertIn("Invalid IPv6 URL", str(error))
        self.assertEqual(error.stage, "URL")

    def test_unsupported_host_error(self):
        """Test unsupported host message."""
        error = UnsupportedHostError("https://gitlab.com/org/repo")

        self.assertIn("is not from github", str(error))

    def test_fetch_error(self):
        """Test fetch error for status and transport failures."""
        status_error = FetchError("https://example.com/x", status_code=404)
        transport_error = FetchError("https://example.com/x", reason="timed out")

        self.assertIn("404", str(status_error))
        self.assertIn("https://example.com/x", str(status_error))
        self.assertIsNone(transport_error.status_code)
        self.assertIn("timed out", str(transport_error))

    def test_sample_not_found_error(self):
        """Test sample not found is a registry error."""
        error = SampleNotFoundError("nodejs-basic", "https://registry.devfile.io")

        self.assertIsInstance(error, RegistryError)
        self.assertIn("nodejs-basic", str(error))
        self.assertEqual(error.details["registry_url"], "https://registry.devfile.io")


if __name__ == "__main__":
    unittest.main()
