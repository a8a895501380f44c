"""
Configuration loader for specfix.

Loads rewriter options from .specfix.config.json / .specfix.config.yaml in the
project root. Mapping order is preserved so alias precedence follows the file.
"""

import json
import yaml
import logging
import dataclasses
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass

from .exceptions import ConfigurationError
from .models import AliasTable, ExtensionChoice

logger = logging.getLogger(__name__)


@dataclass
class RewriterOptions:
    """Options supplied once per run."""

    # Ordered alias entries, None means aliasing is off
    alias: Optional[AliasTable] = None
    # Target extension, None means extensions are left alone
    extension: Optional[ExtensionChoice] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'alias': self.alias.to_dict() if self.alias is not None else None,
            'extension': self.extension.value if self.extension else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RewriterOptions':
        """Create from dictionary, ignoring unknown keys."""
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration must be a mapping, got {type(data).__name__}")

        valid_keys = {f.name for f in dataclasses.fields(cls)}
        filtered_data = {k: v for k, v in data.items() if k in valid_keys}

        alias = filtered_data.get('alias')
        if alias is not None and not isinstance(alias, (dict, AliasTable)):
            raise ConfigurationError("'alias' must be a mapping of alias keys to targets")

        return cls(
            alias=alias if alias is None or isinstance(alias, AliasTable) else AliasTable.from_mapping(alias),
            extension=ExtensionChoice.from_value(filtered_data.get('extension')),
        )


class ConfigLoader:
    """Loads rewriter configuration from a project directory."""

    CONFIG_FILES = [
        '.specfix.config.json',
        '.specfix.config.yaml',
        '.specfix.config.yml',
    ]

    @classmethod
    def load(cls, project_path: Union[str, Path]) -> RewriterOptions:
        """
        Load configuration from project directory.

        Args:
            project_path: Path to project root

        Returns:
            RewriterOptions from the first config file found, or defaults
        """
        project_path = Path(project_path)

        for config_file in cls.CONFIG_FILES:
            config_path = project_path / config_file
            if config_path.exists():
                logger.info(f"Loading config from: {config_path}")
                return cls.load_file(config_path)

        logger.info("No config file found, using defaults")
        return RewriterOptions()

    @classmethod
    def load_file(cls, config_path: Union[str, Path]) -> RewriterOptions:
        """Load config from a JSON or YAML file."""
        config_path = Path(config_path)
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.suffix in ['.yaml', '.yml']:
                    data = yaml.safe_load(f) or {}
                else:
                    data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse config file {config_path}: {e}", str(config_path))
        except OSError as e:
            raise ConfigurationError(f"Failed to read config file {config_path}: {e}", str(config_path))

        try:
            return RewriterOptions.from_dict(data)
        except ConfigurationError as e:
            raise ConfigurationError(f"{e.message} (in {config_path})", str(config_path))


def load_config(project_path: Union[str, Path]) -> RewriterOptions:
    """Shorthand for ConfigLoader.load()"""
    return ConfigLoader.load(project_path)
