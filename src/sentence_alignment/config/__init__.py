"""Configuration management for the Sentence Alignment engine."""

from .config_manager import ConfigurationManager
from .models import (
    ConfigurationError,
    EngineConfiguration,
    ValidationResult,
)

__all__ = [
    "ConfigurationManager",
    "ConfigurationError",
    "EngineConfiguration",
    "ValidationResult",
]
