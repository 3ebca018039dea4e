"""
Search results data models for the Workspace Finder.

This module defines the result element emitted for each matching file and
the ranked result set returned by a discovery query.
"""

from typing import Dict, List, Any
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .search_query import SearchQuery


class FileEntry(BaseModel):
    """
    A single file found by a discovery query.

    Attributes:
        path: Path relative to the search root, always '/'-separated
        name: Final path component
        is_dir: Always False for emitted results; directories are never returned
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., min_length=1, description="Root-relative path")
    name: str = Field(..., min_length=1, description="Final path component")
    is_dir: bool = Field(False, description="Whether the entry is a directory")

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: str) -> str:
        """Normalize separators so results look the same on every platform."""
        return v.replace('\\', '/')

    def get_directory(self) -> str:
        """Get the root-relative directory containing this file ('' at the root)."""
        head, _, _ = self.path.rpartition('/')
        return head

    def get_depth(self) -> int:
        """Get the number of directories between the root and this file."""
        return self.path.count('/')

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation used by the command layer."""
        return {'path': self.path, 'name': self.name, 'isDir': self.is_dir}

    def __str__(self) -> str:
        return self.path


class SearchResults(BaseModel):
    """
    Ranked results of a discovery query.

    Attributes:
        query: The query that produced these results
        entries: Matching files, ordered by the result ranker
        execution_time: Time taken to execute the search in seconds
        stats: Traversal counters collected by the walker
        timestamp: When the search was executed
    """

    query: SearchQuery = Field(..., description="The original search query")
    entries: List[FileEntry] = Field(default_factory=list, description="Ranked file entries")
    execution_time: float = Field(0.0, ge=0.0, description="Time taken to execute the search")
    stats: Dict[str, int] = Field(default_factory=dict, description="Traversal statistics")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the search was executed")

    def get_match_count(self) -> int:
        """Get the number of returned entries."""
        return len(self.entries)

    def get_paths(self) -> List[str]:
        """Get the relative paths in ranked order."""
        return [entry.path for entry in self.entries]

    def reached_limit(self) -> bool:
        """Check whether traversal stopped because the result limit was reached."""
        return self.get_match_count() >= self.query.limit

    def to_response(self) -> List[Dict[str, Any]]:
        """Convert entries to the list of dictionaries sent to callers."""
        return [entry.to_dict() for entry in self.entries]

    def to_dict(self) -> Dict[str, Any]:
        """Convert search results to dictionary representation."""
        return {
            'query': self.query.to_dict(),
            'entries': self.to_response(),
            'match_count': self.get_match_count(),
            'execution_time': self.execution_time,
            'stats': dict(self.stats),
            'timestamp': self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation of search results."""
        parts = [f"Found {self.get_match_count()} files"]
        parts.append(f"Scanned {self.stats.get('entries_scanned', 0)} entries")
        parts.append(f"Took {self.execution_time:.2f}s")

        errors = self.stats.get('errors', 0)
        if errors:
            parts.append(f"Errors: {errors}")

        return " | ".join(parts)
