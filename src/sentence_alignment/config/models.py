"""Data models for configuration management."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..diff.diff_highlighter import DEFAULT_COLOR_SCHEME
from ..models.enums import DiffKind, Side, TokenMode


DEFAULT_SENTENCE_TERMINATORS = ".!?。！？"

DEFAULT_COLORS: Dict[str, str] = {
    kind.value: color for kind, color in DEFAULT_COLOR_SCHEME.items()
}


@dataclass
class ValidationResult:
    """Result of configuration or alignment validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add an error message."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            is_valid=self.is_valid and other.is_valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings
        )


class ConfigurationError(Exception):
    """Exception raised for configuration errors."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


@dataclass
class EngineConfiguration:
    """
    Complete engine configuration.

    Token modes are chosen per side: the source language is compared word
    by word, the target language character by character.
    """
    source_token_mode: TokenMode = TokenMode.WORD
    target_token_mode: TokenMode = TokenMode.CHAR
    sentence_terminators: str = DEFAULT_SENTENCE_TERMINATORS
    history_limit: int = 100
    color_scheme: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_COLORS))
    version: int = 1
    metadata: Dict[str, Any] = field(default_factory=dict)

    def token_mode_for(self, side: Side) -> TokenMode:
        """Get the diff token mode for texts written in the given side's language."""
        if Side.parse(side) is Side.SOURCE:
            return self.source_token_mode
        return self.target_token_mode

    def diff_colors(self) -> Dict[DiffKind, str]:
        """Get the color scheme keyed by DiffKind."""
        return {DiffKind(kind): color for kind, color in self.color_scheme.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_token_mode": self.source_token_mode.value,
            "target_token_mode": self.target_token_mode.value,
            "sentence_terminators": self.sentence_terminators,
            "history_limit": self.history_limit,
            "color_scheme": dict(self.color_scheme),
            "version": self.version,
            "metadata": dict(self.metadata),
        }
