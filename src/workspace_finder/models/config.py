"""
Configuration data models for the Workspace Finder.

This module defines the data structures for managing search configuration,
including the static ignore lists and the traversal limits.
"""

from typing import Dict, List, Any
from pydantic import BaseModel, Field, ValidationError, field_validator


DEFAULT_IGNORED_DIRS = [
    ".git",
    ".svn",
    ".hg",
    "node_modules",
    "bower_components",
    ".next",
    ".nuxt",
    ".turbo",
    ".cache",
    ".parcel-cache",
    "dist",
    "build",
    "out",
    "target",
    "coverage",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    "venv",
    ".venv",
    ".idea",
    ".vscode",
]

DEFAULT_IGNORED_FILES = [
    ".DS_Store",
    "Thumbs.db",
    "desktop.ini",
    "package-lock.json",
    "yarn.lock",
    "pnpm-lock.yaml",
    "bun.lockb",
    "Cargo.lock",
    "poetry.lock",
    "Gemfile.lock",
    "composer.lock",
]

# Characters that would turn a literal name into a path or a glob
_FORBIDDEN_NAME_CHARS = set('/\\*?[]')


def _validate_names(names: List[str], kind: str) -> List[str]:
    cleaned = []
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"Ignored {kind} names cannot be empty")
        name = name.strip()
        bad = _FORBIDDEN_NAME_CHARS.intersection(name)
        if bad:
            raise ValueError(
                f"Ignored {kind} name '{name}' must be a literal name, "
                f"found {''.join(sorted(bad))}"
            )
        if name not in cleaned:
            cleaned.append(name)
    return cleaned


class IgnoreConfig(BaseModel):
    """
    Static ignore lists applied to every search.

    Entries are literal final path components, compared by exact string
    equality. Glob or gitignore syntax is not supported.

    Attributes:
        directories: Directory names that are never scanned
        files: File names that are never returned
    """

    directories: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_DIRS),
        description="Directory names that are never scanned"
    )
    files: List[str] = Field(
        default_factory=lambda: list(DEFAULT_IGNORED_FILES),
        description="File names that are never returned"
    )

    @field_validator('directories')
    @classmethod
    def validate_directories(cls, v: List[str]) -> List[str]:
        return _validate_names(v, "directory")

    @field_validator('files')
    @classmethod
    def validate_files(cls, v: List[str]) -> List[str]:
        return _validate_names(v, "file")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class LimitsConfig(BaseModel):
    """
    Configuration for traversal limits.

    Attributes:
        max_depth: Deepest directory level that is listed (root is 0)
        default_limit: Result cap used when the caller gives none
        max_limit: Upper bound accepted for a caller supplied limit
    """

    max_depth: int = Field(10, ge=0, description="Deepest directory level that is listed")
    default_limit: int = Field(50, ge=0, description="Default maximum number of results")
    max_limit: int = Field(1000, gt=0, description="Largest accepted result limit")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return self.model_dump()


class FinderConfig(BaseModel):
    """
    Main configuration class for the Workspace Finder.

    Attributes:
        ignore: Static ignore lists
        limits: Traversal limits
    """

    ignore: IgnoreConfig = Field(default_factory=IgnoreConfig, description="Static ignore lists")
    limits: LimitsConfig = Field(default_factory=LimitsConfig, description="Traversal limits")

    def validate_configuration(self) -> List[str]:
        """
        Check the configuration for settings that are valid but suspicious.

        Returns:
            List of warning messages
        """
        warnings = []

        if self.limits.default_limit > self.limits.max_limit:
            warnings.append(
                f"default_limit ({self.limits.default_limit}) exceeds "
                f"max_limit ({self.limits.max_limit}) and will be capped"
            )

        if self.limits.max_depth > 32:
            warnings.append(f"Very deep max_depth ({self.limits.max_depth}) may slow down searches")

        if not self.ignore.directories:
            warnings.append("No ignored directories configured - dependency and VCS folders will be scanned")

        return warnings

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary representation."""
        return {
            'ignore': self.ignore.to_dict(),
            'limits': self.limits.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FinderConfig':
        """Create configuration from dictionary."""
        return cls.model_validate(data)

    def __str__(self) -> str:
        """String representation of the configuration."""
        return (
            f"FinderConfig(ignored_dirs={len(self.ignore.directories)}, "
            f"ignored_files={len(self.ignore.files)}, max_depth={self.limits.max_depth})"
        )


def validate_config_dict(config_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Validate a raw configuration dictionary.

    Args:
        config_data: Raw configuration data

    Returns:
        Validated configuration data

    Raises:
        ValueError: If the data contains unknown sections or invalid values
    """
    if not isinstance(config_data, dict):
        raise ValueError(f"Configuration must be a mapping, got {type(config_data).__name__}")

    known_sections = {'ignore', 'limits'}
    unknown = set(config_data) - known_sections
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    try:
        config = FinderConfig.model_validate(config_data)
    except ValidationError as e:
        raise ValueError(str(e)) from e

    return config.to_dict()
