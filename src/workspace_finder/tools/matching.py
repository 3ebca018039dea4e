"""
Match filter and result ranker for the Workspace Finder.

Inclusion is a plain case-insensitive substring test; relevance is decided
afterwards by ordering on relative path length.
"""

from typing import Iterable, List

from ..models.search_results import FileEntry


def matches(query_lower: str, name: str, relative_path: str) -> bool:
    """
    Check whether an entry matches the query.

    Args:
        query_lower: Lower-cased query text
        name: Final path component of the entry
        relative_path: Root-relative, '/'-separated path of the entry

    Returns:
        True if the query is empty or is a substring of the name or the path
    """
    if not query_lower:
        return True
    return query_lower in name.lower() or query_lower in relative_path.lower()


def rank_key(entry: FileEntry) -> tuple:
    # Shorter paths sit closer to the project root
    return (len(entry.path), entry.path.lower())


def rank_entries(entries: Iterable[FileEntry]) -> List[FileEntry]:
    """
    Order matched entries by relevance.

    Shorter relative paths come first; ties are broken by case-insensitive
    comparison of the path. The sort is stable.

    Args:
        entries: Entries in traversal order

    Returns:
        New list in ranked order
    """
    return sorted(entries, key=rank_key)
