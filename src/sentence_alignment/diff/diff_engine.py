"""LCS-based token diff between a reference translation and an attempt.

The diff is computed over tokens (characters or whitespace-delimited words)
with a dynamic-programming longest-common-subsequence table, then the
single-token edit script is coalesced into maximal spans for display.
"""

import logging
from typing import Iterable, List, Optional, Tuple, Union

from ..models.diff import DiffSpan, DiffSummary
from ..models.enums import DiffKind, TokenMode
from .tokenizer import coerce_mode, token_separator, tokenize


logger = logging.getLogger(__name__)


def lcs_table(reference_tokens: List[str], attempt_tokens: List[str]) -> List[List[int]]:
    """
    Build the LCS length table for two token sequences.

    Args:
        reference_tokens: Tokens of the reference (m tokens).
        attempt_tokens: Tokens of the attempt (n tokens).

    Returns:
        (m + 1) x (n + 1) table where cell [i][j] holds the LCS length of
        the first i reference tokens and the first j attempt tokens.
    """
    m = len(reference_tokens)
    n = len(attempt_tokens)
    dp = [[0] * (n + 1) for _ in range(m + 1)]

    for i in range(1, m + 1):
        for j in range(1, n + 1):
            if reference_tokens[i - 1] == attempt_tokens[j - 1]:
                dp[i][j] = dp[i - 1][j - 1] + 1
            else:
                dp[i][j] = max(dp[i - 1][j], dp[i][j - 1])

    return dp


def edit_script(
    reference_tokens: List[str],
    attempt_tokens: List[str],
) -> List[Tuple[DiffKind, str]]:
    """
    Backtrack the LCS table into a token-level edit script.

    When neither diagonal applies, the attempt side is consumed first on
    ties (dp[i][j-1] >= dp[i-1][j]), so extra text is reported before
    missing text at the same position.

    Returns:
        (kind, token) pairs in reading order.
    """
    dp = lcs_table(reference_tokens, attempt_tokens)
    i = len(reference_tokens)
    j = len(attempt_tokens)
    steps: List[Tuple[DiffKind, str]] = []

    while i > 0 or j > 0:
        if i > 0 and j > 0 and reference_tokens[i - 1] == attempt_tokens[j - 1]:
            steps.append((DiffKind.MATCH, reference_tokens[i - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or dp[i][j - 1] >= dp[i - 1][j]):
            steps.append((DiffKind.INSERT, attempt_tokens[j - 1]))
            j -= 1
        else:
            steps.append((DiffKind.DELETE, reference_tokens[i - 1]))
            i -= 1

    steps.reverse()
    return steps


def coalesce(steps: Iterable[Tuple[DiffKind, str]], mode: Union[TokenMode, str]) -> List[DiffSpan]:
    """Merge adjacent same-kind tokens into maximal spans."""
    separator = token_separator(mode)
    spans: List[DiffSpan] = []
    current_kind: Optional[DiffKind] = None
    current_tokens: List[str] = []

    for kind, token in steps:
        if kind is current_kind:
            current_tokens.append(token)
            continue
        if current_kind is not None:
            spans.append(DiffSpan(current_kind, separator.join(current_tokens)))
        current_kind = kind
        current_tokens = [token]

    if current_kind is not None:
        spans.append(DiffSpan(current_kind, separator.join(current_tokens)))

    return spans


def compute_diff(
    reference: str,
    attempt: str,
    mode: Union[TokenMode, str] = TokenMode.WORD,
) -> List[DiffSpan]:
    """
    Compute the display diff between a reference and a user attempt.

    Args:
        reference: Reference translation.
        attempt: User-submitted translation.
        mode: Token granularity; WORD joins merged tokens with a single
            space, CHAR joins them with nothing.

    Returns:
        Ordered, maximal spans. Empty when both inputs are empty.
    """
    mode = coerce_mode(mode)
    reference_tokens = tokenize(reference, mode)
    attempt_tokens = tokenize(attempt, mode)

    spans = coalesce(edit_script(reference_tokens, attempt_tokens), mode)

    logger.debug(
        "Diffed %d reference tokens against %d attempt tokens into %d spans (%s mode)",
        len(reference_tokens),
        len(attempt_tokens),
        len(spans),
        mode.value,
    )
    return spans


def _side_tokens(
    spans: Iterable[DiffSpan],
    kinds: Tuple[DiffKind, ...],
    mode: Union[TokenMode, str],
) -> List[str]:
    tokens: List[str] = []
    for span in spans:
        if span.kind in kinds:
            tokens.extend(tokenize(span.text, mode))
    return tokens


def reference_tokens(spans: Iterable[DiffSpan], mode: Union[TokenMode, str] = TokenMode.WORD) -> List[str]:
    """Tokens of the reference recovered from MATCH and DELETE spans."""
    return _side_tokens(spans, (DiffKind.MATCH, DiffKind.DELETE), mode)


def attempt_tokens(spans: Iterable[DiffSpan], mode: Union[TokenMode, str] = TokenMode.WORD) -> List[str]:
    """Tokens of the attempt recovered from MATCH and INSERT spans."""
    return _side_tokens(spans, (DiffKind.MATCH, DiffKind.INSERT), mode)


def reconstruct_reference(spans: Iterable[DiffSpan], mode: Union[TokenMode, str] = TokenMode.WORD) -> str:
    return token_separator(mode).join(reference_tokens(spans, mode))


def reconstruct_attempt(spans: Iterable[DiffSpan], mode: Union[TokenMode, str] = TokenMode.WORD) -> str:
    return token_separator(mode).join(attempt_tokens(spans, mode))


def diff_summary(spans: List[DiffSpan], mode: Union[TokenMode, str] = TokenMode.WORD) -> DiffSummary:
    """
    Count tokens per diff kind.

    Args:
        spans: Spans returned by compute_diff.
        mode: The mode the spans were computed with.

    Returns:
        DiffSummary with per-kind token counts.
    """
    counts = {kind: 0 for kind in DiffKind}
    for span in spans:
        counts[span.kind] += len(tokenize(span.text, mode))

    return DiffSummary(
        matched=counts[DiffKind.MATCH],
        inserted=counts[DiffKind.INSERT],
        deleted=counts[DiffKind.DELETE],
        reference_length=counts[DiffKind.MATCH] + counts[DiffKind.DELETE],
        attempt_length=counts[DiffKind.MATCH] + counts[DiffKind.INSERT],
    )
