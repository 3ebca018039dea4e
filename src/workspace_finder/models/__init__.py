"""
Data models for the Workspace Finder.

This module contains the core data structures used throughout the system.
"""

from .config import FinderConfig, IgnoreConfig, LimitsConfig
from .search_query import SearchQuery
from .search_results import FileEntry, SearchResults

__all__ = [
    'FinderConfig',
    'IgnoreConfig',
    'LimitsConfig',
    'SearchQuery',
    'FileEntry',
    'SearchResults',
]
