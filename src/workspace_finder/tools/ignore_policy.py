"""
Ignore policy for the Workspace Finder.

Classifies directory and file names that must never be scanned or returned.
Names are compared literally against the final path component.
"""

from enum import Enum
from typing import Iterable, Optional

from ..models.config import IgnoreConfig


class Verdict(Enum):
    """Outcome of classifying a directory entry."""
    SKIP = "skip"
    KEEP = "keep"


class IgnorePolicy:
    """
    Static classification of entry names.

    An entry is skipped when its name is in the ignored set for its kind, or
    when it is hidden (leading '.') and the query does not itself start with
    a dot.
    """

    def __init__(self, ignored_dirs: Iterable[str], ignored_files: Iterable[str]):
        self.ignored_dirs = frozenset(ignored_dirs)
        self.ignored_files = frozenset(ignored_files)

    @classmethod
    def from_config(cls, config: Optional[IgnoreConfig] = None) -> 'IgnorePolicy':
        """Build a policy from configuration, falling back to the default lists."""
        config = config or IgnoreConfig()
        return cls(config.directories, config.files)

    def classify(self, name: str, is_dir: bool, query_text: str = "") -> Verdict:
        """
        Classify a single directory entry.

        Args:
            name: Final path component of the entry
            is_dir: Whether the entry is a directory
            query_text: Raw query text; a leading dot opts in to hidden entries

        Returns:
            Verdict.SKIP or Verdict.KEEP
        """
        if is_dir and name in self.ignored_dirs:
            return Verdict.SKIP
        if not is_dir and name in self.ignored_files:
            return Verdict.SKIP
        if name.startswith('.') and not query_text.startswith('.'):
            return Verdict.SKIP
        return Verdict.KEEP

    def should_skip(self, name: str, is_dir: bool, query_text: str = "") -> bool:
        return self.classify(name, is_dir, query_text) is Verdict.SKIP

    def __repr__(self) -> str:
        return f"IgnorePolicy(dirs={len(self.ignored_dirs)}, files={len(self.ignored_files)})"
