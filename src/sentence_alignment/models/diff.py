"""Diff data models for the Sentence Alignment engine."""

from dataclasses import dataclass
from typing import Any, Dict

from .enums import DiffKind


@dataclass(frozen=True)
class DiffSpan:
    """
    A maximal run of tokens sharing one diff classification.

    MATCH text is shared by reference and attempt, INSERT text exists only
    in the attempt and DELETE text exists only in the reference.
    """
    kind: DiffKind
    text: str

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "text": self.text}


@dataclass(frozen=True)
class DiffSummary:
    """Token counts for a computed diff."""
    matched: int
    inserted: int
    deleted: int
    reference_length: int
    attempt_length: int

    @property
    def accuracy(self) -> float:
        """Share of reference tokens reproduced by the attempt."""
        if self.reference_length == 0:
            return 1.0 if self.attempt_length == 0 else 0.0
        return self.matched / self.reference_length

    @property
    def is_exact(self) -> bool:
        return self.inserted == 0 and self.deleted == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": self.matched,
            "inserted": self.inserted,
            "deleted": self.deleted,
            "reference_length": self.reference_length,
            "attempt_length": self.attempt_length,
            "accuracy": self.accuracy,
            "is_exact": self.is_exact,
        }
