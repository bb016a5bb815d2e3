"""Configuration Manager implementation for the Sentence Alignment engine.

This module provides functionality to load, validate, and save the engine
configuration: diff token modes per side, sentence terminators, edit
history depth and the diff color scheme.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..models.enums import DiffKind, TokenMode
from .models import (
    ConfigurationError,
    EngineConfiguration,
    ValidationResult,
)


logger = logging.getLogger(__name__)

CONFIG_FILENAME = "engine.json"

_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")


class ConfigurationManager:
    """
    Manager for engine configuration.

    Handles loading, validation, and access to the engine settings.
    """

    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize the configuration manager.

        Args:
            config_dir: Optional directory path for configuration files.
        """
        self._config_dir = Path(config_dir) if config_dir else None
        self._configuration = EngineConfiguration()
        self._is_loaded = False

    @property
    def configuration(self) -> EngineConfiguration:
        """Get the current engine configuration."""
        return self._configuration

    @property
    def is_loaded(self) -> bool:
        """Check if configuration has been loaded."""
        return self._is_loaded

    def load_configuration(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> ValidationResult:
        """
        Load and validate the engine configuration.

        Supports loading from:
        - JSON file path
        - Dictionary with settings

        Missing keys keep their defaults.

        Args:
            source: File path or dictionary.

        Returns:
            ValidationResult indicating success or failure with details.

        Raises:
            ConfigurationError: If validation fails and configuration cannot be applied.
        """
        raw_data = self._parse_source(source)
        if not isinstance(raw_data, dict):
            result = ValidationResult(is_valid=False)
            result.add_error("Engine configuration must be a JSON object")
            raise ConfigurationError(
                "Engine configuration validation failed",
                validation_result=result
            )

        result, configuration = self._validate_configuration(raw_data)

        if not result.is_valid or configuration is None:
            raise ConfigurationError(
                "Engine configuration validation failed",
                validation_result=result
            )

        for warning in result.warnings:
            logger.warning("Engine configuration: %s", warning)

        self._configuration = configuration
        self._is_loaded = True

        return result

    def _validate_configuration(
        self,
        data: Dict[str, Any]
    ) -> tuple[ValidationResult, Optional[EngineConfiguration]]:
        """Validate a configuration dictionary."""
        result = ValidationResult(is_valid=True)
        defaults = EngineConfiguration()

        known_fields = set(defaults.to_dict())
        for key in data:
            if key not in known_fields:
                result.add_warning(f"Unknown configuration key '{key}' ignored")

        # Token modes
        modes = {}
        valid_modes = [mode.value for mode in TokenMode]
        for mode_field in ["source_token_mode", "target_token_mode"]:
            value = data.get(mode_field, getattr(defaults, mode_field).value)
            if value not in valid_modes:
                result.add_error(f"'{mode_field}' must be one of {valid_modes}")
            else:
                modes[mode_field] = TokenMode(value)

        terminators = data.get("sentence_terminators", defaults.sentence_terminators)
        if not isinstance(terminators, str) or not terminators:
            result.add_error("'sentence_terminators' must be a non-empty string")
        elif any(char.isspace() for char in terminators):
            result.add_error("'sentence_terminators' must not contain whitespace")

        history_limit = data.get("history_limit", defaults.history_limit)
        if not isinstance(history_limit, int) or isinstance(history_limit, bool):
            result.add_error("'history_limit' must be an integer")
        elif history_limit <= 0:
            result.add_error("'history_limit' must be positive")

        colors = dict(defaults.color_scheme)
        color_data = data.get("color_scheme", {})
        if not isinstance(color_data, dict):
            result.add_error("'color_scheme' must be an object")
        else:
            valid_kinds = [kind.value for kind in DiffKind]
            for kind, color in color_data.items():
                if kind not in valid_kinds:
                    result.add_error(f"'color_scheme' key '{kind}' must be one of {valid_kinds}")
                elif not isinstance(color, str) or not _COLOR_RE.match(color):
                    result.add_error(f"'color_scheme.{kind}' must be a #rrggbb color")
                else:
                    colors[kind] = color

        version = data.get("version", defaults.version)
        if not isinstance(version, int) or version < 1:
            result.add_error("'version' must be a positive integer")

        metadata = data.get("metadata", {})
        if not isinstance(metadata, dict):
            result.add_error("'metadata' must be an object")

        if not result.is_valid:
            return result, None

        configuration = EngineConfiguration(
            source_token_mode=modes["source_token_mode"],
            target_token_mode=modes["target_token_mode"],
            sentence_terminators=terminators,
            history_limit=history_limit,
            color_scheme=colors,
            version=version,
            metadata=metadata,
        )

        return result, configuration

    def _parse_source(
        self,
        source: Union[str, Path, Dict[str, Any]]
    ) -> Any:
        """Parse configuration source into raw data."""
        if isinstance(source, (str, Path)):
            path = Path(source)
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {path}")
            try:
                with open(path, "r", encoding="utf-8") as f:
                    return json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e
        return source

    def load_from_directory(self, config_dir: Optional[Union[str, Path]] = None) -> ValidationResult:
        """
        Load configuration from a directory.

        Expects an optional engine.json file; a directory without one keeps
        the defaults.

        Args:
            config_dir: Directory to load from. Uses current config_dir if None.

        Returns:
            ValidationResult of the load.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if config_dir is None:
            raise ConfigurationError("No configuration directory specified")
        if not config_dir.is_dir():
            raise ConfigurationError(f"Configuration directory not found: {config_dir}")

        self._config_dir = config_dir
        config_file = config_dir / CONFIG_FILENAME
        if not config_file.exists():
            logger.info("No %s in %s, using defaults", CONFIG_FILENAME, config_dir)
            return ValidationResult(is_valid=True)

        return self.load_configuration(config_file)

    def save_to_directory(
        self,
        config_dir: Optional[Union[str, Path]] = None
    ) -> Path:
        """
        Save current configuration to a directory.

        Args:
            config_dir: Directory to save to. Uses current config_dir if None.

        Returns:
            Path of the written file.
        """
        config_dir = Path(config_dir) if config_dir else self._config_dir
        if config_dir is None:
            raise ConfigurationError("No configuration directory specified")

        config_dir.mkdir(parents=True, exist_ok=True)
        config_file = config_dir / CONFIG_FILENAME
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(self._configuration.to_dict(), f, indent=2, ensure_ascii=False)

        return config_file

    def reset(self) -> None:
        """Reset configuration to defaults."""
        self._configuration = EngineConfiguration()
        self._is_loaded = False

    def to_dict(self) -> Dict[str, Any]:
        """Export current configuration as dictionary."""
        return self._configuration.to_dict()
