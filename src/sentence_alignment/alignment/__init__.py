"""Alignment editing module for the Sentence Alignment engine."""

from .editor import (
    clean_empty_pairs,
    get_alignment_stats,
    insert_gap,
    merge_up,
    remove_gap,
    split_at,
    update_text,
    zip_segments,
)
from .segmenter import (
    build_alignment,
    pairs_to_records,
    split_into_sentences,
    split_paragraph_to_records,
)
from .session import AlignmentNotReadyError, AlignmentSession

__all__ = [
    "insert_gap",
    "remove_gap",
    "merge_up",
    "split_at",
    "update_text",
    "clean_empty_pairs",
    "get_alignment_stats",
    "zip_segments",
    "split_into_sentences",
    "build_alignment",
    "pairs_to_records",
    "split_paragraph_to_records",
    "AlignmentSession",
    "AlignmentNotReadyError",
]
