"""
Sentence Alignment Engine

Translation diffing and bilingual sentence alignment editing for
translation practice.
"""

__version__ = "0.1.0"

# Export main components
from .models.enums import DiffKind, PairStatus, Side, TokenMode
from .models.diff import DiffSpan, DiffSummary
from .models.alignment import (
    AlignmentList,
    AlignmentPair,
    AlignmentStats,
    SentencePairRecord,
)
from .diff import (
    DiffHighlighter,
    compute_diff,
    diff_summary,
    reconstruct_attempt,
    reconstruct_reference,
    tokenize,
)
from .alignment import (
    AlignmentNotReadyError,
    AlignmentSession,
    build_alignment,
    clean_empty_pairs,
    get_alignment_stats,
    insert_gap,
    merge_up,
    remove_gap,
    split_at,
    split_into_sentences,
    update_text,
    zip_segments,
)
from .config import (
    ConfigurationError,
    ConfigurationManager,
    EngineConfiguration,
    ValidationResult,
)

__all__ = [
    "DiffKind",
    "PairStatus",
    "Side",
    "TokenMode",
    "DiffSpan",
    "DiffSummary",
    "AlignmentList",
    "AlignmentPair",
    "AlignmentStats",
    "SentencePairRecord",
    "DiffHighlighter",
    "compute_diff",
    "diff_summary",
    "reconstruct_attempt",
    "reconstruct_reference",
    "tokenize",
    "AlignmentNotReadyError",
    "AlignmentSession",
    "build_alignment",
    "clean_empty_pairs",
    "get_alignment_stats",
    "insert_gap",
    "merge_up",
    "remove_gap",
    "split_at",
    "split_into_sentences",
    "update_text",
    "zip_segments",
    "ConfigurationError",
    "ConfigurationManager",
    "EngineConfiguration",
    "ValidationResult",
]
