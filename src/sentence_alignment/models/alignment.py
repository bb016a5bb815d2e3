"""Alignment data models for the Sentence Alignment engine."""

from dataclasses import dataclass, replace
from typing import Any, Dict, List

from .enums import PairStatus, Side


@dataclass(frozen=True)
class AlignmentPair:
    """
    One row of a bilingual alignment.

    Correlates a source-language segment with a target-language segment.
    Either side may be empty while the alignment is being edited.
    """
    source_text: str = ""
    target_text: str = ""

    def text_for(self, side: Side) -> str:
        """Get the text of the given column."""
        if side is Side.SOURCE:
            return self.source_text
        return self.target_text

    def with_text(self, side: Side, text: str) -> "AlignmentPair":
        """Return a copy with the given column replaced."""
        if side is Side.SOURCE:
            return replace(self, source_text=text)
        return replace(self, target_text=text)

    @property
    def status(self) -> PairStatus:
        """Classify the row by trim-emptiness of each side."""
        has_source = self.source_text.strip() != ""
        has_target = self.target_text.strip() != ""
        if has_source and has_target:
            return PairStatus.COMPLETE
        if has_source:
            return PairStatus.SOURCE_ONLY
        if has_target:
            return PairStatus.TARGET_ONLY
        return PairStatus.EMPTY

    @property
    def is_complete(self) -> bool:
        return self.status is PairStatus.COMPLETE

    def to_dict(self) -> Dict[str, str]:
        return {"source_text": self.source_text, "target_text": self.target_text}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AlignmentPair":
        """Build a pair from a dictionary, accepting legacy en/zh keys."""
        source = data.get("source_text", data.get("en", ""))
        target = data.get("target_text", data.get("zh", ""))
        return cls(source_text=source or "", target_text=target or "")


# Ordered rows in reading order of both languages.
AlignmentList = List[AlignmentPair]


@dataclass
class AlignmentStats:
    """Row counts per completeness category."""
    total: int = 0
    complete: int = 0
    source_only: int = 0
    target_only: int = 0
    empty: int = 0

    @property
    def is_ready(self) -> bool:
        """
        Whether the alignment can be committed.

        Every non-empty row must be paired on both sides and at least one
        complete row must exist.
        """
        return self.complete > 0 and self.source_only == 0 and self.target_only == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total": self.total,
            "complete": self.complete,
            "source_only": self.source_only,
            "target_only": self.target_only,
            "empty": self.empty,
            "ready": self.is_ready,
        }


@dataclass
class SentencePairRecord:
    """
    Permanent sentence pair produced when an alignment is finalized.

    Attributes:
        id: Record identifier of the form "{article_id}_{paragraph_id}_s{index}".
        source_text: Source-language sentence.
        target_text: Target-language sentence.
        source_type: Identifier of the article the pair was imported from.
        source_index: Position of the pair within its paragraph.
        paragraph_id: Identifier of the paragraph the pair belongs to.
        created_at: Creation time in epoch milliseconds.
    """
    id: str
    source_text: str
    target_text: str
    source_type: str
    source_index: int
    paragraph_id: str
    created_at: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "source_text": self.source_text,
            "target_text": self.target_text,
            "source_type": self.source_type,
            "source_index": self.source_index,
            "paragraph_id": self.paragraph_id,
            "created_at": self.created_at,
        }
