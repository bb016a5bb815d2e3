"""Minimal FastAPI application for the Sentence Alignment engine.

This module exposes the stateless diff and alignment operations over HTTP
so the browser front end can call them with plain JSON. The server keeps no
alignment state: every request carries the full list of pairs and receives
the edited list back.

Usage (from project root, after installing fastapi and uvicorn):

    uvicorn sentence_alignment.api.app:app --reload
"""

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from ..alignment import editor
from ..alignment.segmenter import build_alignment
from ..config import ConfigurationError, ConfigurationManager, EngineConfiguration
from ..diff import DiffHighlighter, compute_diff, diff_summary
from ..models.alignment import AlignmentPair
from ..models.enums import Side, TokenMode


logger = logging.getLogger(__name__)


def _load_configuration_from_env() -> EngineConfiguration:
    """Load engine configuration from SENTENCE_ALIGNMENT_CONFIG_DIR if set.

    Falls back to defaults when the variable is unset.
    """
    config_dir = os.getenv("SENTENCE_ALIGNMENT_CONFIG_DIR")
    manager = ConfigurationManager()
    if config_dir:
        try:
            manager.load_from_directory(config_dir)
        except ConfigurationError as exc:
            logger.error("Ignoring invalid configuration in %s: %s", config_dir, exc.message)
            manager.reset()
    return manager.configuration


class PairModel(BaseModel):
    source_text: str = ""
    target_text: str = ""

    def to_pair(self) -> AlignmentPair:
        return AlignmentPair(source_text=self.source_text, target_text=self.target_text)


class DiffRequest(BaseModel):
    reference: str
    attempt: str
    mode: Optional[TokenMode] = None
    side: Side = Field(
        Side.SOURCE,
        description="Language of the texts; selects the configured token mode when mode is omitted",
    )


class SegmentRequest(BaseModel):
    source_text: str
    target_text: str


class AlignmentRequest(BaseModel):
    pairs: List[PairModel] = Field(default_factory=list)
    index: int = 0
    side: Side = Side.SOURCE
    char_position: Optional[int] = None
    new_text: Optional[str] = None


class StatsRequest(BaseModel):
    pairs: List[PairModel] = Field(default_factory=list)


def create_app(configuration: Optional[EngineConfiguration] = None) -> FastAPI:
    """Build the API application around an engine configuration."""
    config = configuration or _load_configuration_from_env()
    highlighter = DiffHighlighter(color_scheme=config.diff_colors())
    application = FastAPI(title="Sentence Alignment API", version="0.1.0")

    def _mode_for(request: DiffRequest) -> TokenMode:
        return request.mode or config.token_mode_for(request.side)

    @application.post("/api/diff")
    async def diff(request: DiffRequest) -> dict:
        """Compute the feedback spans for a submitted translation."""
        mode = _mode_for(request)
        spans = compute_diff(request.reference, request.attempt, mode)
        return {
            "mode": mode.value,
            "spans": [span.to_dict() for span in spans],
            "summary": diff_summary(spans, mode).to_dict(),
        }

    @application.post("/api/diff/html")
    async def diff_html(request: DiffRequest) -> dict:
        mode = _mode_for(request)
        return {"html": highlighter.generate_html_diff(request.reference, request.attempt, mode)}

    @application.post("/api/segment")
    async def segment(request: SegmentRequest) -> dict:
        """Split a bilingual paragraph into an initial alignment."""
        pairs = build_alignment(request.source_text, request.target_text, config.sentence_terminators)
        return {
            "pairs": [pair.to_dict() for pair in pairs],
            "stats": editor.get_alignment_stats(pairs).to_dict(),
        }

    @application.post("/api/alignment/stats")
    async def alignment_stats(request: StatsRequest) -> dict:
        pairs = [pair.to_pair() for pair in request.pairs]
        return editor.get_alignment_stats(pairs).to_dict()

    @application.post("/api/alignment/{operation}")
    async def edit_alignment(operation: str, request: AlignmentRequest) -> dict:
        """Apply one editor operation and return the edited alignment.

        Dropped edits (stale index, non-empty gap, invalid split) are not
        errors; they come back with changed set to false.
        """
        pairs = [pair.to_pair() for pair in request.pairs]

        if operation == "insert-gap":
            updated = editor.insert_gap(pairs, request.index, request.side)
        elif operation == "remove-gap":
            updated = editor.remove_gap(pairs, request.index, request.side)
        elif operation == "merge-up":
            updated = editor.merge_up(pairs, request.index, request.side)
        elif operation == "split":
            if request.char_position is None:
                raise HTTPException(status_code=422, detail="char_position is required for split")
            updated = editor.split_at(pairs, request.index, request.side, request.char_position)
        elif operation == "update-text":
            if request.new_text is None:
                raise HTTPException(status_code=422, detail="new_text is required for update-text")
            updated = editor.update_text(pairs, request.index, request.side, request.new_text)
        elif operation == "clean":
            updated = editor.clean_empty_pairs(pairs)
        else:
            raise HTTPException(status_code=404, detail=f"Unknown alignment operation: {operation}")

        return {
            "pairs": [pair.to_dict() for pair in updated],
            "changed": updated != pairs,
            "stats": editor.get_alignment_stats(updated).to_dict(),
        }

    return application


app = create_app()
