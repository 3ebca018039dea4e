"""
Search query data model for the Workspace Finder.

This module defines the immutable input of a single discovery query: the root
directory, the raw query text, the result limit and the depth bound.
"""

from typing import Dict, Any
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_MAX_DEPTH = 10


class SearchQuery(BaseModel):
    """
    Represents one file discovery query.

    The query text is kept verbatim; matching lower-cases it and the hidden
    entry rule looks at its first character, so no stripping is applied.

    Attributes:
        root: Directory to search, absolute or relative to the working directory
        text: Raw query text (may be empty, which matches every file)
        limit: Maximum number of results to return
        max_depth: Deepest directory level listed, the root being level 0
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., description="Directory to search")
    text: str = Field("", description="Raw query text")
    limit: int = Field(..., ge=0, description="Maximum number of results")
    max_depth: int = Field(DEFAULT_MAX_DEPTH, ge=0, description="Maximum traversal depth")

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Expand the user directory; existence is checked by the search itself."""
        return str(Path(v).expanduser()) if v else v

    @property
    def text_lower(self) -> str:
        """Query text in the form the match filter compares against."""
        return self.text.lower()

    def includes_hidden(self) -> bool:
        """Check whether the user opted in to dotfiles by typing a leading dot."""
        return self.text.startswith('.')

    def get_root_path(self) -> Path:
        """Get the root as an absolute path without resolving symlinks."""
        return Path(self.root).absolute()

    def to_dict(self) -> Dict[str, Any]:
        """Convert the search query to a dictionary representation."""
        return self.model_dump()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchQuery':
        """Create a SearchQuery instance from a dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        """String representation of the search query."""
        parts = [f"Query: '{self.text}'"]
        parts.append(f"Root: {self.root}")
        parts.append(f"Limit: {self.limit}")
        parts.append(f"Max depth: {self.max_depth}")
        return " | ".join(parts)
