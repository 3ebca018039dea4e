"""
Command layer for the Workspace Finder.

These functions form the request/response boundary used by the surrounding
menubar application. Search results travel as plain dictionaries and
failures as human-readable error strings.
"""

from pathlib import Path
from typing import Any, Dict, Optional
import logging

from pydantic import BaseModel, Field, ValidationError

from .models.config import FinderConfig
from .search import FileDiscovery, SearchError


logger = logging.getLogger(__name__)


class CommandError(Exception):
    """Raised when a file command fails; the message is shown to the user."""
    pass


class SearchRequest(BaseModel):
    """
    Payload of a search command.

    Attributes:
        directory: Root directory to search
        query: Raw query text
        limit: Maximum number of results
    """

    directory: str = Field(..., description="Root directory to search")
    query: str = Field("", description="Raw query text")
    limit: int = Field(50, ge=0, description="Maximum number of results")


def search_files(directory: str, query: str, limit: int,
                 config: Optional[FinderConfig] = None) -> Dict[str, Any]:
    """
    Run a discovery query and wrap the outcome for the caller.

    Returns:
        {"results": [{"path", "name", "isDir"}, ...]} on success,
        {"error": message} when the query fails
    """
    try:
        results = FileDiscovery(config).search(directory, query, limit)
    except SearchError as e:
        return {'error': str(e)}
    return {'results': results.to_response()}


def handle_request(payload: Dict[str, Any], config: Optional[FinderConfig] = None) -> Dict[str, Any]:
    """
    Validate a raw search payload and dispatch it.

    Args:
        payload: Mapping with directory, query and limit keys

    Returns:
        The search_files response, or {"error": message} for a malformed payload
    """
    try:
        request = SearchRequest.model_validate(payload)
    except ValidationError as e:
        logger.warning(f"Rejected malformed search request: {e.error_count()} errors")
        return {'error': f"invalid request: {e.errors()[0]['msg']}"}
    return search_files(request.directory, request.query, request.limit, config)


def read_file(path: str) -> str:
    """
    Read a UTF-8 text file.

    Raises:
        CommandError: If the file cannot be read or decoded
    """
    try:
        return Path(path).read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise CommandError(str(e)) from e


def write_file(path: str, content: str) -> None:
    """
    Write text to a file, replacing any existing content.

    Raises:
        CommandError: If the file cannot be written
    """
    try:
        Path(path).write_text(content, encoding='utf-8')
    except OSError as e:
        raise CommandError(str(e)) from e


def file_exists(path: str) -> bool:
    """Check whether a path exists."""
    return Path(path).exists()
