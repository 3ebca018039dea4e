"""
Unit tests for the ignore policy.

Tests literal name classification for directories and files, and the
hidden-entry rule that lets a leading dot in the query opt in to dotfiles.
"""

import pytest

from workspace_finder.models.config import IgnoreConfig
from workspace_finder.tools.ignore_policy import IgnorePolicy, Verdict


class TestIgnorePolicy:
    """Test cases for IgnorePolicy.classify."""

    def setup_method(self):
        """Set up a small policy."""
        self.policy = IgnorePolicy(
            ignored_dirs=["node_modules", "target"],
            ignored_files=["yarn.lock", "Thumbs.db"]
        )

    def test_ignored_directory(self):
        assert self.policy.classify("node_modules", is_dir=True) is Verdict.SKIP
        assert self.policy.classify("target", is_dir=True) is Verdict.SKIP

    def test_ignored_file(self):
        assert self.policy.classify("yarn.lock", is_dir=False) is Verdict.SKIP
        assert self.policy.classify("Thumbs.db", is_dir=False) is Verdict.SKIP

    def test_directory_names_do_not_apply_to_files(self):
        """A file that happens to share an ignored directory name is kept."""
        assert self.policy.classify("target", is_dir=False) is Verdict.KEEP
        assert self.policy.classify("yarn.lock", is_dir=True) is Verdict.KEEP

    def test_exact_match_only(self):
        """Membership is literal equality, not a prefix or glob."""
        assert self.policy.classify("node_modules_backup", is_dir=True) is Verdict.KEEP
        assert self.policy.classify("Node_Modules", is_dir=True) is Verdict.KEEP
        assert self.policy.classify("my-yarn.lock", is_dir=False) is Verdict.KEEP

    def test_regular_entries_kept(self):
        assert self.policy.classify("src", is_dir=True) is Verdict.KEEP
        assert self.policy.classify("index.ts", is_dir=False) is Verdict.KEEP

    @pytest.mark.parametrize("name,is_dir", [(".env", False), (".github", True)])
    def test_hidden_entries_skipped_by_default(self, name, is_dir):
        assert self.policy.classify(name, is_dir) is Verdict.SKIP
        assert self.policy.classify(name, is_dir, query_text="env") is Verdict.SKIP

    def test_leading_dot_query_opts_in_to_hidden(self):
        assert self.policy.classify(".env", False, query_text=".env") is Verdict.KEEP
        assert self.policy.classify(".github", True, query_text=".") is Verdict.KEEP

    def test_ignored_hidden_name_stays_skipped(self):
        """The ignore lists win over the dotfile opt-in."""
        policy = IgnorePolicy(ignored_dirs=[".git"], ignored_files=[".DS_Store"])
        assert policy.classify(".git", True, query_text=".git") is Verdict.SKIP
        assert policy.classify(".DS_Store", False, query_text=".DS") is Verdict.SKIP

    def test_should_skip(self):
        assert self.policy.should_skip("node_modules", True)
        assert not self.policy.should_skip("src", True)


class TestIgnorePolicyFromConfig:
    """Test cases for building a policy from configuration."""

    def test_default_lists(self):
        policy = IgnorePolicy.from_config()
        assert "node_modules" in policy.ignored_dirs
        assert ".git" in policy.ignored_dirs
        assert ".DS_Store" in policy.ignored_files
        assert "package-lock.json" in policy.ignored_files

    def test_custom_lists(self):
        policy = IgnorePolicy.from_config(IgnoreConfig(directories=["vendor"], files=["go.sum"]))
        assert policy.ignored_dirs == frozenset({"vendor"})
        assert policy.ignored_files == frozenset({"go.sum"})
        assert policy.classify("node_modules", True) is Verdict.KEEP
