"""
Discovery query facade for the Workspace Finder.

This is the single entry point the rest of an application calls to locate a
project file: validate the root, walk it, rank the matches.
"""

import time
from pathlib import Path
from typing import List, Optional
import logging

from .models.config import FinderConfig
from .models.search_query import SearchQuery
from .models.search_results import FileEntry, SearchResults
from .tools.fs_walker import FSWalker
from .tools.ignore_policy import IgnorePolicy
from .tools.matching import rank_entries


logger = logging.getLogger(__name__)

INVALID_ROOT_MESSAGE = "directory does not exist"


class SearchError(Exception):
    """Base class for errors that abort a discovery query."""
    pass


class InvalidRootError(SearchError):
    """Raised when the search root is missing or is not a directory."""

    def __init__(self, root: str):
        super().__init__(INVALID_ROOT_MESSAGE)
        self.root = root


class FileDiscovery:
    """
    Runs discovery queries against workspace directories.

    The instance only holds immutable settings. Every query gets its own
    walker, visited set and result buffer, so one instance may serve
    concurrent callers from several threads.
    """

    def __init__(self, config: Optional[FinderConfig] = None):
        """
        Initialize the discovery facade.

        Args:
            config: Search configuration (defaults to the built-in settings)
        """
        self.config = config or FinderConfig()
        self.policy = IgnorePolicy.from_config(self.config.ignore)

    def build_query(self, directory: str, query: str = "", limit: Optional[int] = None) -> SearchQuery:
        """Create a SearchQuery, applying the configured default and maximum limits."""
        limits = self.config.limits
        if limit is None:
            limit = limits.default_limit
        return SearchQuery(
            root=directory,
            text=query,
            limit=min(limit, limits.max_limit),
            max_depth=limits.max_depth
        )

    def search(self, directory: str, query: str = "", limit: Optional[int] = None) -> SearchResults:
        """
        Search a directory tree for files matching the query.

        Args:
            directory: Root directory to search
            query: Raw query text; empty matches every file
            limit: Maximum number of results

        Returns:
            SearchResults with at most limit ranked entries

        Raises:
            InvalidRootError: If directory does not exist or is not a directory
        """
        search_query = self.build_query(directory, query, limit)
        return self.execute(search_query)

    def execute(self, search_query: SearchQuery) -> SearchResults:
        """
        Execute a prepared query.

        Raises:
            InvalidRootError: If the query root does not exist or is not a directory
        """
        root_path = self._validate_root(search_query.root)

        logger.info(f"Searching {root_path} for '{search_query.text}' (limit {search_query.limit})")
        start = time.perf_counter()

        walker = FSWalker(self.policy, max_depth=search_query.max_depth)
        found = walker.walk(root_path, search_query.text, search_query.limit)
        entries = rank_entries(found)

        results = SearchResults(
            query=search_query,
            entries=entries,
            execution_time=time.perf_counter() - start,
            stats=walker.get_stats()
        )
        logger.info(str(results))
        return results

    @staticmethod
    def _validate_root(root: str) -> Path:
        if not root:
            raise InvalidRootError(root)
        root_path = Path(root).absolute()
        if not root_path.is_dir():
            logger.warning(f"Search root is not an existing directory: {root_path}")
            raise InvalidRootError(root)
        return root_path


def search(directory: str, query: str = "", limit: Optional[int] = None,
           config: Optional[FinderConfig] = None) -> List[FileEntry]:
    """
    Convenience function to run a single discovery query.

    Args:
        directory: Root directory to search
        query: Raw query text
        limit: Maximum number of results (configured default if None)
        config: Search configuration (optional)

    Returns:
        Ranked list of matching files

    Raises:
        InvalidRootError: If directory does not exist or is not a directory
    """
    return FileDiscovery(config).search(directory, query, limit).entries
