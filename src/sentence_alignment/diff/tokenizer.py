"""Tokenization for translation diffs."""

import re
from typing import List, Union

from ..models.enums import TokenMode

_WHITESPACE_RE = re.compile(r"\s+")


def coerce_mode(mode: Union[TokenMode, str]) -> TokenMode:
    """Accept a TokenMode or its string value."""
    if isinstance(mode, TokenMode):
        return mode
    return TokenMode(str(mode).strip().lower())


def tokenize(text: str, mode: Union[TokenMode, str] = TokenMode.WORD) -> List[str]:
    """
    Split text into diff tokens.

    CHAR mode yields one token per character, which suits scripts that do
    not delimit words with whitespace. WORD mode splits on whitespace runs
    after trimming.

    Args:
        text: Text to tokenize.
        mode: Token granularity.

    Returns:
        List of tokens; empty for empty input.
    """
    mode = coerce_mode(mode)
    if mode is TokenMode.CHAR:
        return list(text)
    stripped = text.strip()
    if not stripped:
        return []
    return _WHITESPACE_RE.split(stripped)


def token_separator(mode: Union[TokenMode, str]) -> str:
    """Separator re-synthesized between tokens of one span."""
    return " " if coerce_mode(mode) is TokenMode.WORD else ""
