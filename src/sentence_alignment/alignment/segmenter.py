"""Heuristic sentence segmentation for building an initial alignment."""

import re
import time
from typing import List, Optional

from ..config.models import DEFAULT_SENTENCE_TERMINATORS
from ..models.alignment import AlignmentPair, SentencePairRecord
from .editor import zip_segments


def _sentence_pattern(terminators: str) -> "re.Pattern[str]":
    chars = re.escape(terminators) + r"\n"
    return re.compile(rf"[^{chars}]+[{chars}]*|[^{chars}]+$")


def split_into_sentences(text: str, terminators: Optional[str] = None) -> List[str]:
    """
    Split text into sentences at terminal punctuation or newlines.

    Args:
        text: Paragraph text in either language.
        terminators: Sentence-ending characters; defaults to English and
            Chinese full stops, exclamation and question marks.

    Returns:
        Trimmed, non-empty sentences in order.
    """
    if not text:
        return []
    matches = _sentence_pattern(terminators or DEFAULT_SENTENCE_TERMINATORS).findall(text)
    if not matches:
        return [text]
    sentences = [match.strip() for match in matches]
    return [sentence for sentence in sentences if sentence]


def build_alignment(
    source_text: str,
    target_text: str,
    terminators: Optional[str] = None,
) -> List[AlignmentPair]:
    """Segment both sides and zip them into an initial alignment."""
    return zip_segments(
        split_into_sentences(source_text, terminators),
        split_into_sentences(target_text, terminators),
    )


def pairs_to_records(
    pairs: List[AlignmentPair],
    article_id: str,
    paragraph_id: str,
    created_at: Optional[int] = None,
) -> List[SentencePairRecord]:
    """
    Convert alignment rows into permanent sentence pair records.

    Args:
        pairs: Rows in reading order.
        article_id: Identifier of the source article.
        paragraph_id: Identifier of the paragraph.
        created_at: Creation time in epoch milliseconds; defaults to now.

    Returns:
        One record per row, indexed by row position.
    """
    if created_at is None:
        created_at = int(time.time() * 1000)
    return [
        SentencePairRecord(
            id=f"{article_id}_{paragraph_id}_s{i}",
            source_text=pair.source_text,
            target_text=pair.target_text,
            source_type=article_id,
            source_index=i,
            paragraph_id=paragraph_id,
            created_at=created_at,
        )
        for i, pair in enumerate(pairs)
    ]


def split_paragraph_to_records(
    source_text: str,
    target_text: str,
    article_id: str,
    paragraph_id: str,
    terminators: Optional[str] = None,
) -> List[SentencePairRecord]:
    """Segment a bilingual paragraph straight into sentence pair records."""
    pairs = build_alignment(source_text, target_text, terminators)
    return pairs_to_records(pairs, article_id, paragraph_id)
