"""
Unit tests for GitHub URL conversion and validation.
"""

import unittest
from pathlib import Path

from gitsource.core.exceptions import InvalidURLError, UnsupportedHostError
from gitsource.urls.github import (
    convert_github_url,
    get_context,
    update_git_link,
    validate_github_url,
)


class TestConvertGithubURL(unittest.TestCase):
    """Tests for raw-content URL conversion."""

    def test_default_branch(self):
        """Test that main is assumed when no revision is given."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo", "", ""),
            "https://raw.githubusercontent.com/org/repo/main",
        )

    def test_revision_and_context(self):
        """Test revision and context are appended in order."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo", "v1.2", "src"),
            "https://raw.githubusercontent.com/org/repo/v1.2/src",
        )

    def test_tree_url_ignores_revision(self):
        """Test /tree/<ref>/ URLs keep their own ref."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo/tree/v1.2/src", "ignored", ""),
            "https://raw.githubusercontent.com/org/repo/v1.2/src",
        )

    def test_tree_url_with_ref_only(self):
        """Test a /tree/<ref> URL without a subdirectory."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo/tree/dev"),
            "https://raw.githubusercontent.com/org/repo/dev",
        )

    def test_tree_url_with_context(self):
        """Test context is still appended to a /tree/ URL."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo/tree/dev", "", "app"),
            "https://raw.githubusercontent.com/org/repo/dev/app",
        )

    def test_strips_git_suffix(self):
        """Test a trailing .git is removed."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo.git", "dev"),
            "https://raw.githubusercontent.com/org/repo/dev",
        )

    def test_strips_trailing_slash(self):
        """Test a trailing slash is removed."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo/"),
            "https://raw.githubusercontent.com/org/repo/main",
        )

    def test_git_inside_name_is_kept(self):
        """Test .git is only stripped at the very end."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo.github.io"),
            "https://raw.githubusercontent.com/org/repo.github.io/main",
        )

    def test_root_contexts_add_nothing(self):
        """Test ".", "./" and "" contexts mean the repository root."""
        for context in ("", ".", "./"):
            with self.subTest(context=context):
                self.assertEqual(
                    convert_github_url("https://github.com/org/repo", "v1", context),
                    "https://raw.githubusercontent.com/org/repo/v1",
                )

    def test_leading_slash_in_context(self):
        """Test one leading slash is trimmed from the context."""
        self.assertEqual(
            convert_github_url("https://github.com/org/repo", "v1", "/deploy/k8s"),
            "https://raw.githubusercontent.com/org/repo/v1/deploy/k8s",
        )

    def test_non_github_host_unchanged(self):
        """Test non-GitHub URLs are returned without rewriting."""
        self.assertEqual(
            convert_github_url("https://gitlab.com/org/repo", "main", ""),
            "https://gitlab.com/org/repo",
        )

    def test_raw_host_unchanged(self):
        """Test an already raw URL is not converted twice."""
        url = "https://raw.githubusercontent.com/org/repo/main/devfile.yaml"
        self.assertEqual(convert_github_url(url, "v1", "src"), url)

    def test_github_subdomain_keeps_host(self):
        """Test only github.com itself is rewritten to the raw host."""
        self.assertEqual(
            convert_github_url("https://github.example.com/org/repo", "v1"),
            "https://github.example.com/org/repo/v1",
        )

    def test_invalid_url(self):
        """Test an unparsable URL raises InvalidURLError."""
        with self.assertRaises(InvalidURLError):
            convert_github_url("https://[github.com/org/repo")

    def test_invalid_port(self):
        """Test a non-numeric port raises InvalidURLError."""
        with self.assertRaises(InvalidURLError):
            convert_github_url("https://github.com:abc/org/repo")


class TestGetContext(unittest.TestCase):
    """Tests for context backtracking."""

    def test_level_zero(self):
        """Test that zero levels gives the current directory marker."""
        self.assertEqual(get_context("/work/repo/app/src", 0), "./")

    def test_one_level(self):
        """Test the last path component is returned."""
        self.assertEqual(get_context("/work/repo/app/src", 1), "src")

    def test_two_levels_root_to_leaf(self):
        """Test components are joined root to leaf."""
        self.assertEqual(get_context("/work/repo/app/src", 2), "app/src")

    def test_accepts_path_objects(self):
        """Test Path input and trailing separators."""
        self.assertEqual(get_context(Path("repo/app/src/"), 3), "repo/app/src")

    def test_levels_past_root_stay_relative(self):
        """Test the filesystem root adds nothing to the context."""
        self.assertEqual(get_context("/a", 2), "a")
        self.assertEqual(get_context("/a/b", 5), "a/b")


class TestUpdateGitLink(unittest.TestCase):
    """Tests for link updating."""

    def test_absolute_link_passthrough(self):
        """Test an http context is returned untouched."""
        link = "https://example.com/devfile.yaml"
        self.assertEqual(update_git_link("https://github.com/org/repo", "v1", link), link)

    def test_relative_link_converted(self):
        """Test a relative context is converted to a raw URL."""
        self.assertEqual(
            update_git_link("https://github.com/org/repo", "v1", "app"),
            "https://raw.githubusercontent.com/org/repo/v1/app",
        )


class TestValidateGithubURL(unittest.TestCase):
    """Tests for GitHub host validation."""

    def test_github_hosts_accepted(self):
        """Test hosts containing github are accepted."""
        for url in (
            "https://github.com/org/repo",
            "https://raw.githubusercontent.com/org/repo/main/devfile.yaml",
            "https://github.mycorp.com/org/repo",
        ):
            with self.subTest(url=url):
                self.assertIsNone(validate_github_url(url))

    def test_other_hosts_rejected(self):
        """Test non-GitHub hosts are rejected."""
        with self.assertRaises(UnsupportedHostError) as ctx:
            validate_github_url("https://gitlab.com/org/repo")
        self.assertIn("gitlab.com/org/repo", str(ctx.exception))

    def test_path_only_rejected(self):
        """Test a string without a host is rejected."""
        with self.assertRaises(UnsupportedHostError):
            validate_github_url("github/org/repo")

    def test_malformed_url_rejected(self):
        """Test a malformed URL raises InvalidURLError."""
        with self.assertRaises(InvalidURLError):
            validate_github_url("https://[github.com")


if __name__ == "__main__":
    unittest.main()
