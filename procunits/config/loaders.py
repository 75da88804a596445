"""
Configuration loading with validation.

Supports YAML and JSON formats with JSON Schema validation.
"""

import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
import jsonschema
import logging

from procunits.config.flowsheet_config import (
    FlowsheetConfig, StreamConfig, DeviceConfig, ConnectionConfig
)
from procunits.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA_PATH = Path(__file__).parent / "schemas" / "flowsheet_schema_v1.json"


class ConfigLoader:
    """
    Configuration loader with schema validation.

    Example:
        loader = ConfigLoader()
        config = loader.load_yaml("flowsheets/reactor_mixer.yaml")
    """

    def __init__(self, schema_path: Optional[Path] = None):
        """
        Initialize configuration loader.

        Args:
            schema_path: Path to JSON schema file (uses default if None)
        """
        if schema_path is None:
            schema_path = DEFAULT_SCHEMA_PATH

        self.schema_path = Path(schema_path)
        self.schema = self._load_schema()

    def _load_schema(self) -> Dict[str, Any]:
        """Load JSON schema from file."""
        try:
            with open(self.schema_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not load schema from {self.schema_path}: {e}")
            return {}

    def load_yaml(self, config_path: Path | str) -> FlowsheetConfig:
        """
        Load configuration from YAML file.

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            logger.error(f"Config file not found: {config_path}")
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Failed to parse YAML: {e}") from e

        return self.load_dict(config_dict)

    def load_json(self, config_path: Path | str) -> FlowsheetConfig:
        """
        Load configuration from JSON file.

        Raises:
            ConfigurationError: If file not found or validation fails
        """
        config_path = Path(config_path)

        if not config_path.exists():
            logger.error(f"Config file not found: {config_path}")
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Failed to parse JSON: {e}") from e

        return self.load_dict(config_dict)

    def load_dict(self, config_dict: Dict[str, Any]) -> FlowsheetConfig:
        """
        Convert dictionary to FlowsheetConfig with validation.

        Args:
            config_dict: Configuration dictionary from YAML/JSON

        Raises:
            ConfigurationError: If validation fails
        """
        if not isinstance(config_dict, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping, got {type(config_dict).__name__}"
            )

        # JSON Schema validation
        if self.schema:
            try:
                jsonschema.validate(instance=config_dict, schema=self.schema)
                logger.debug("JSON schema validation passed")
            except jsonschema.ValidationError as e:
                raise ConfigurationError(f"Schema validation failed: {e.message}") from e

        try:
            config = self._build_flowsheet_config(config_dict)
        except (TypeError, KeyError) as e:
            raise ConfigurationError(f"Failed to build FlowsheetConfig: {e}") from e

        # Dataclass validation
        try:
            config.validate()
        except ValueError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}") from e

        logger.info(f"Loaded configuration: {config.name} v{config.version}")
        return config

    def _build_flowsheet_config(self, d: Dict[str, Any]) -> FlowsheetConfig:
        """Build FlowsheetConfig from dictionary (manual construction)."""
        return FlowsheetConfig(
            name=str(d.get('name', 'flowsheet')),
            version=str(d.get('version', '1.0')),
            streams=[
                StreamConfig(id=s['id'], mass_flow=float(s.get('mass_flow', 0.0)))
                for s in d.get('streams', [])
            ],
            devices=[
                DeviceConfig(
                    id=dev['id'],
                    type=dev['type'],
                    inputs=dev.get('inputs'),
                    double=bool(dev.get('double', False)),
                )
                for dev in d.get('devices', [])
            ],
            connections=[ConnectionConfig(**c) for c in d.get('connections', [])],
            sequence=list(d.get('sequence', [])),
        )


def load_flowsheet_config(config_path: Path | str) -> FlowsheetConfig:
    """
    Convenience function to load flowsheet configuration.

    Automatically detects YAML or JSON based on file extension.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        Validated FlowsheetConfig instance

    Example:
        config = load_flowsheet_config("flowsheets/reactor_mixer.yaml")
    """
    loader = ConfigLoader()
    config_path = Path(config_path)

    if config_path.suffix in ['.yaml', '.yml']:
        return loader.load_yaml(config_path)
    elif config_path.suffix == '.json':
        return loader.load_json(config_path)
    else:
        raise ConfigurationError(f"Unsupported file format: {config_path.suffix}")
