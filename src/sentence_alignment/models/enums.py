"""Enumerations for the Sentence Alignment engine."""

from enum import Enum
from typing import Union


class TokenMode(Enum):
    """Tokenization granularity used when diffing."""
    CHAR = "char"
    WORD = "word"


class DiffKind(Enum):
    """Classification of a diff span."""
    MATCH = "match"
    INSERT = "insert"
    DELETE = "delete"


class Side(Enum):
    """Column of an alignment row."""
    SOURCE = "source"
    TARGET = "target"

    def flip(self) -> "Side":
        """Return the opposite column."""
        if self is Side.SOURCE:
            return Side.TARGET
        return Side.SOURCE

    @classmethod
    def parse(cls, value: Union["Side", str]) -> "Side":
        """
        Coerce a side given as an enum member or a string.

        The legacy column names "en" and "zh" map to SOURCE and TARGET.

        Raises:
            ValueError: If the value names no known side.
        """
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        if normalized in _LEGACY_SIDE_NAMES:
            return _LEGACY_SIDE_NAMES[normalized]
        return cls(normalized)


_LEGACY_SIDE_NAMES = {
    "en": Side.SOURCE,
    "zh": Side.TARGET,
}


class PairStatus(Enum):
    """Completeness of an alignment row."""
    COMPLETE = "complete"
    SOURCE_ONLY = "source_only"
    TARGET_ONLY = "target_only"
    EMPTY = "empty"
