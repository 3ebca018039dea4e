"""
YAML configuration parser for the Workspace Finder.

This module loads, validates and saves the YAML file that customizes the
ignore lists and traversal limits. It handles configuration file discovery,
merging of user values over the defaults, and error reporting.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, Optional, List, Union
import logging
from dataclasses import dataclass

from ..models.config import FinderConfig, validate_config_dict


logger = logging.getLogger(__name__)


@dataclass
class ConfigParseResult:
    """
    Result of configuration parsing operation.

    Attributes:
        config: The parsed and validated configuration
        warnings: List of non-fatal warnings
        config_path: Path to the configuration file used
        is_default: Whether default configuration was used
    """
    config: FinderConfig
    warnings: List[str]
    config_path: Optional[Path]
    is_default: bool


class ConfigurationError(Exception):
    """Raised when configuration parsing or validation fails."""
    pass


class ConfigParser:
    """
    YAML configuration parser with validation and error handling.

    Sections present in the file replace the corresponding defaults key by
    key; sections left out keep their default values.
    """

    DEFAULT_CONFIG_NAMES = [
        '.workspacefinder.yaml',
        '.workspacefinder.yml',
        'workspacefinder.yaml',
        'workspacefinder.yml',
    ]

    def __init__(self, strict_mode: bool = False):
        """
        Initialize the configuration parser.

        Args:
            strict_mode: If True, treat warnings as errors
        """
        self.strict_mode = strict_mode
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    def get_search_paths(self) -> List[Path]:
        """Directories searched for a configuration file, in priority order."""
        return [
            Path.cwd(),
            Path.home(),
            Path.home() / '.config' / 'workspace-finder',
        ]

    def load_config(self, config_path: Optional[Union[str, Path]] = None) -> ConfigParseResult:
        """
        Load and parse configuration from file or use defaults.

        Args:
            config_path: Path to configuration file. If None, searches for default files.

        Returns:
            ConfigParseResult containing parsed configuration and metadata

        Raises:
            ConfigurationError: If configuration is invalid or file cannot be read
        """
        if config_path:
            config_path = Path(config_path)
            if not config_path.exists():
                raise ConfigurationError(f"Configuration file not found: {config_path}")
            config_data = self._load_yaml_file(config_path)
            is_default = False
        else:
            config_path, config_data = self._find_and_load_config()
            is_default = config_data is None

        merged = self._merge_with_defaults(config_data or {})
        validated_data = self._validate_config_data(merged)
        finder_config = FinderConfig.from_dict(validated_data)

        warnings = finder_config.validate_configuration()
        if is_default:
            warnings.append("No configuration file found, using default settings")

        if self.strict_mode and warnings:
            raise ConfigurationError(f"Configuration warnings in strict mode: {'; '.join(warnings)}")

        self.logger.info(f"Configuration loaded successfully from {config_path or 'defaults'}")

        return ConfigParseResult(
            config=finder_config,
            warnings=warnings,
            config_path=config_path,
            is_default=is_default
        )

    def _find_and_load_config(self) -> tuple[Optional[Path], Optional[Dict[str, Any]]]:
        """
        Find and load configuration file from default locations.

        Returns:
            Tuple of (config_path, config_data) or (None, None) if not found
        """
        for search_path in self.get_search_paths():
            for config_name in self.DEFAULT_CONFIG_NAMES:
                config_file = search_path / config_name
                if config_file.is_file():
                    try:
                        config_data = self._load_yaml_file(config_file)
                    except ConfigurationError as e:
                        self.logger.warning(f"Failed to load {config_file}: {e}")
                        continue
                    self.logger.info(f"Found configuration file: {config_file}")
                    return config_file, config_data

        self.logger.info("No configuration file found, using defaults")
        return None, None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """
        Load and parse YAML file.

        Raises:
            ConfigurationError: If file cannot be read or parsed
        """
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                content = f.read()

            if not content.strip():
                self.logger.warning(f"Configuration file is empty: {file_path}")
                return {}

            data = yaml.safe_load(content)

            if data is None:
                return {}

            if not isinstance(data, dict):
                raise ConfigurationError(f"Configuration file must contain a YAML object, got {type(data).__name__}")

            return data

        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {file_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Cannot read configuration file {file_path}: {e}") from e

    def _merge_with_defaults(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        merged = self._get_default_config()
        for section, values in config_data.items():
            if isinstance(values, dict) and isinstance(merged.get(section), dict):
                merged[section] = {**merged[section], **values}
            else:
                merged[section] = values
        return merged

    def _validate_config_data(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate configuration data structure and values.

        Raises:
            ConfigurationError: If configuration is invalid
        """
        try:
            return validate_config_dict(config_data)
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

    def _get_default_config(self) -> Dict[str, Any]:
        """Get the default configuration as a dictionary."""
        return FinderConfig().to_dict()

    def save_config(self, config: FinderConfig, output_path: Union[str, Path]) -> None:
        """
        Save configuration to YAML file.

        Raises:
            ConfigurationError: If file cannot be written
        """
        try:
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)

            yaml_content = self._generate_yaml_with_comments(config.to_dict())

            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(yaml_content)

            self.logger.info(f"Configuration saved to {output_path}")

        except OSError as e:
            raise ConfigurationError(f"Cannot write configuration file {output_path}: {e}") from e

    def _generate_yaml_with_comments(self, config_dict: Dict[str, Any]) -> str:
        """Generate YAML content with a comment above each section."""
        lines = [
            "# Workspace Finder Configuration",
            "# Names are literal file or directory names, not glob patterns",
            "",
        ]

        sections = [
            ("ignore", "Names that are never scanned (directories) or returned (files)"),
            ("limits", "Traversal depth and result limits"),
        ]

        for section_name, comment in sections:
            if section_name in config_dict:
                lines.append(f"# {comment}")
                section_yaml = yaml.dump({section_name: config_dict[section_name]},
                                         default_flow_style=False,
                                         sort_keys=False)
                lines.append(section_yaml.rstrip())
                lines.append("")

        return "\n".join(lines)

    def validate_config_file(self, config_path: Union[str, Path]) -> List[str]:
        """
        Validate a configuration file without loading it.

        Returns:
            List of validation errors (empty if valid)
        """
        config_path = Path(config_path)
        if not config_path.exists():
            return [f"Configuration file not found: {config_path}"]

        try:
            config_data = self._load_yaml_file(config_path)
            self._validate_config_data(self._merge_with_defaults(config_data))
        except ConfigurationError as e:
            return [str(e)]

        return []

    def get_config_template(self) -> str:
        """Get a template configuration file containing the default settings."""
        return self._generate_yaml_with_comments(self._get_default_config())


def load_config(config_path: Optional[Union[str, Path]] = None, strict_mode: bool = False) -> ConfigParseResult:
    """
    Convenience function to load configuration.

    Raises:
        ConfigurationError: If configuration is invalid
    """
    parser = ConfigParser(strict_mode=strict_mode)
    return parser.load_config(config_path)


def validate_config_file(config_path: Union[str, Path]) -> List[str]:
    """Convenience function to validate a configuration file."""
    parser = ConfigParser()
    return parser.validate_config_file(config_path)


def create_config_template(output_path: Union[str, Path]) -> None:
    """
    Create a template configuration file.

    Raises:
        ConfigurationError: If template cannot be created
    """
    parser = ConfigParser()
    template_content = parser.get_config_template()

    try:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(template_content)

    except OSError as e:
        raise ConfigurationError(f"Cannot create template file {output_path}: {e}") from e
