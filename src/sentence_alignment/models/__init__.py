"""Data models and enums for the Sentence Alignment engine."""

from .enums import DiffKind, PairStatus, Side, TokenMode
from .diff import DiffSpan, DiffSummary
from .alignment import (
    AlignmentList,
    AlignmentPair,
    AlignmentStats,
    SentencePairRecord,
)

__all__ = [
    # Enums
    "DiffKind",
    "PairStatus",
    "Side",
    "TokenMode",
    # Diff models
    "DiffSpan",
    "DiffSummary",
    # Alignment models
    "AlignmentList",
    "AlignmentPair",
    "AlignmentStats",
    "SentencePairRecord",
]
