"""Translation diff module for the Sentence Alignment engine."""

from .tokenizer import tokenize, token_separator
from .diff_engine import (
    attempt_tokens,
    compute_diff,
    diff_summary,
    lcs_table,
    reconstruct_attempt,
    reconstruct_reference,
    reference_tokens,
)
from .diff_highlighter import DiffHighlighter

__all__ = [
    "tokenize",
    "token_separator",
    "lcs_table",
    "compute_diff",
    "diff_summary",
    "reference_tokens",
    "attempt_tokens",
    "reconstruct_reference",
    "reconstruct_attempt",
    "DiffHighlighter",
]
