"""
Filesystem walker for the Workspace Finder.

This module traverses a workspace directory tree, applies the ignore policy
and the match filter, and collects matching files. Traversal is bounded by a
result limit and a maximum depth, and a per-walk visited set keyed by
canonical path makes symlink cycles terminate.
"""

import os
from pathlib import Path, PurePath
from typing import Dict, List, Optional, Iterator, Tuple, Union
import logging

from ..models.search_query import DEFAULT_MAX_DEPTH
from ..models.search_results import FileEntry
from .ignore_policy import IgnorePolicy, Verdict
from .matching import matches


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


class VisitedSet:
    """
    Canonical paths already processed during one walk.

    Canonicalization resolves symlinks strictly. When that fails (broken
    link, permission problem, resolution loop) the raw absolute path is used
    instead, which still rejects exact repeats of the same path.
    """

    def __init__(self):
        self._paths = set()

    @staticmethod
    def canonicalize(path: PathLike) -> str:
        try:
            return str(Path(path).resolve(strict=True))
        except (OSError, RuntimeError) as e:
            logger.debug(f"Falling back to raw path for {path}: {e}")
            return os.path.abspath(path)

    def add(self, path: PathLike) -> bool:
        """
        Record a path as visited.

        Returns:
            False if the canonical path had already been recorded
        """
        canonical = self.canonicalize(path)
        if canonical in self._paths:
            return False
        self._paths.add(canonical)
        return True

    def __contains__(self, path: PathLike) -> bool:
        return self.canonicalize(path) in self._paths

    def __len__(self) -> int:
        return len(self._paths)


class FSWalker:
    """
    Depth-first walker that collects files matching a query.

    The walk uses an explicit stack of directory frames instead of recursion.
    Entries of a directory are processed in listing order, and a kept
    subdirectory is descended into as soon as it is met, so the visiting
    order equals a recursive pre-order walk.

    Soft failures never abort the walk:
    - a directory that cannot be listed is treated as empty
    - an entry whose name is not valid text is skipped
    - a path that cannot be canonicalized is tracked by its raw path
    """

    def __init__(self, policy: Optional[IgnorePolicy] = None, max_depth: int = DEFAULT_MAX_DEPTH):
        """
        Initialize the filesystem walker.

        Args:
            policy: Ignore policy to apply (defaults to the built-in lists)
            max_depth: Deepest directory level that is listed, the root being 0
        """
        self.policy = policy or IgnorePolicy.from_config()
        self.max_depth = max_depth
        self._stats = self._new_stats()

    @staticmethod
    def _new_stats() -> Dict[str, int]:
        return {
            'directories_traversed': 0,
            'entries_scanned': 0,
            'entries_ignored': 0,
            'files_matched': 0,
            'duplicates_skipped': 0,
            'errors': 0
        }

    def walk(self, root: PathLike, query_text: str, limit: int) -> List[FileEntry]:
        """
        Walk a directory tree and collect matching files.

        The caller is responsible for checking that root is an existing
        directory.

        Args:
            root: Directory to walk
            query_text: Raw query text
            limit: Maximum number of entries to collect

        Returns:
            Matching files in traversal order, at most limit of them
        """
        root_path = Path(root).absolute()
        query_lower = query_text.lower()
        results: List[FileEntry] = []

        if limit <= 0:
            return results

        visited = VisitedSet()
        visited.add(root_path)

        stack: List[Tuple[Iterator[os.DirEntry], int]] = []
        frame = self._enter_directory(root_path, 0)
        if frame is not None:
            stack.append(frame)

        while stack and len(results) < limit:
            entries, depth = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            subdir = self._process_entry(entry, root_path, query_text, query_lower, visited, results)
            if subdir is not None:
                frame = self._enter_directory(subdir, depth + 1)
                if frame is not None:
                    stack.append(frame)

        return results

    def _enter_directory(self, dir_path: Path, depth: int) -> Optional[Tuple[Iterator[os.DirEntry], int]]:
        """Open a stack frame for a directory, or None if it lies beyond max_depth."""
        if depth > self.max_depth:
            return None
        self._stats['directories_traversed'] += 1
        return iter(self._list_directory(dir_path)), depth

    def _list_directory(self, dir_path: Path) -> List[os.DirEntry]:
        """
        List the immediate entries of a directory.

        The listing handle is closed before the entries are processed. An
        unreadable directory yields no entries.
        """
        try:
            with os.scandir(dir_path) as it:
                return list(it)
        except OSError as e:
            logger.debug(f"Cannot list directory {dir_path}: {e}")
            self._stats['errors'] += 1
            return []

    def _process_entry(self, entry: os.DirEntry, root_path: Path, query_text: str,
                       query_lower: str, visited: VisitedSet,
                       results: List[FileEntry]) -> Optional[Path]:
        """
        Apply the per-entry pipeline.

        Returns:
            The directory to descend into, or None
        """
        if not visited.add(entry.path):
            self._stats['duplicates_skipped'] += 1
            return None

        name = entry.name
        if not self._is_text(name):
            logger.debug(f"Skipping entry with undecodable name in {os.path.dirname(entry.path)}")
            self._stats['errors'] += 1
            return None

        is_dir = self._entry_is_dir(entry)
        if self.policy.classify(name, is_dir, query_text) is Verdict.SKIP:
            self._stats['entries_ignored'] += 1
            return None

        self._stats['entries_scanned'] += 1
        relative_path = PurePath(entry.path).relative_to(root_path).as_posix()

        if not is_dir and matches(query_lower, name, relative_path) and self._entry_is_file(entry):
            results.append(FileEntry(path=relative_path, name=name, is_dir=False))
            self._stats['files_matched'] += 1

        return Path(entry.path) if is_dir else None

    @staticmethod
    def _is_text(name: str) -> bool:
        # Undecodable bytes survive listing as lone surrogates
        try:
            name.encode('utf-8')
        except UnicodeEncodeError:
            return False
        return True

    @staticmethod
    def _entry_is_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir()
        except OSError:
            return False

    @staticmethod
    def _entry_is_file(entry: os.DirEntry) -> bool:
        try:
            return entry.is_file()
        except OSError:
            return False

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the last walk.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._new_stats()
