"""Diff highlighting for translation feedback."""

import html
from typing import Dict, List, Optional, Union

from ..models.diff import DiffSpan
from ..models.enums import DiffKind, TokenMode
from .diff_engine import compute_diff, diff_summary
from .tokenizer import coerce_mode, token_separator


DEFAULT_COLOR_SCHEME: Dict[DiffKind, str] = {
    DiffKind.MATCH: "#ffffff",   # White
    DiffKind.INSERT: "#c8e6c9",  # Green
    DiffKind.DELETE: "#ffcdd2",  # Red
}


class DiffHighlighter:
    """
    Highlights differences between a reference and a user attempt.

    Produces styled segments for insertions (extra user text), deletions
    (missed reference text) and matches.
    """

    def __init__(self, color_scheme: Optional[Dict[DiffKind, str]] = None):
        """
        Initialize the diff highlighter.

        Args:
            color_scheme: Optional per-kind colors overriding the defaults.
        """
        self.color_scheme = dict(DEFAULT_COLOR_SCHEME)
        if color_scheme:
            self.color_scheme.update(color_scheme)

    def highlight(
        self,
        reference: str,
        attempt: str,
        mode: Union[TokenMode, str] = TokenMode.WORD,
    ) -> Dict:
        """
        Generate a highlighted diff.

        Args:
            reference: Reference translation.
            attempt: User attempt.
            mode: Token granularity.

        Returns:
            Dictionary with diff segments and styling information.
        """
        mode = coerce_mode(mode)
        spans = compute_diff(reference, attempt, mode)
        return {
            'segments': self.segments_for(spans),
            'reference': reference,
            'attempt': attempt,
            'mode': mode.value,
            'summary': diff_summary(spans, mode).to_dict(),
        }

    def segments_for(self, spans: List[DiffSpan]) -> List[Dict]:
        """Attach styling and side flags to computed spans."""
        segments = []
        for span in spans:
            segments.append({
                'text': span.text,
                'kind': span.kind.value,
                'color': self.color_scheme[span.kind],
                'reference': span.kind is not DiffKind.INSERT,
                'attempt': span.kind is not DiffKind.DELETE,
            })
        return segments

    def generate_html_diff(
        self,
        reference: str,
        attempt: str,
        mode: Union[TokenMode, str] = TokenMode.WORD,
    ) -> str:
        """
        Generate HTML representation of the diff.

        Args:
            reference: Reference translation.
            attempt: User attempt.
            mode: Token granularity.

        Returns:
            HTML string with styled diff.
        """
        mode = coerce_mode(mode)
        spans = compute_diff(reference, attempt, mode)
        return self.render_html(spans, mode)

    def render_html(self, spans: List[DiffSpan], mode: Union[TokenMode, str] = TokenMode.WORD) -> str:
        html_parts = []
        for span in spans:
            text = html.escape(span.text, quote=False)
            color = self.color_scheme[span.kind]
            if span.kind is DiffKind.DELETE:
                html_parts.append(
                    f'<span class="diff-delete" style="background-color: {color}; text-decoration: line-through;">{text}</span>'
                )
            elif span.kind is DiffKind.INSERT:
                html_parts.append(
                    f'<span class="diff-insert" style="background-color: {color}; font-weight: bold;">{text}</span>'
                )
            else:
                html_parts.append(f'<span class="diff-match">{text}</span>')
        return token_separator(mode).join(html_parts)

    def classify_attempt(self, reference: str, attempt: str, mode: Union[TokenMode, str] = TokenMode.WORD) -> str:
        """
        Classify an attempt for visual emphasis.

        Returns:
            'exact', 'close' (at least 80% of reference tokens matched),
            or 'needs_work'.
        """
        summary = diff_summary(compute_diff(reference, attempt, mode), mode)
        if summary.is_exact:
            return 'exact'
        elif summary.accuracy >= 0.8:
            return 'close'
        else:
            return 'needs_work'
