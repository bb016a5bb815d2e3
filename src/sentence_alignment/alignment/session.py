"""Interactive alignment editing session with undo history."""

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Sequence

from ..config.models import ValidationResult
from ..models.alignment import AlignmentPair, AlignmentStats, SentencePairRecord
from ..models.enums import Side
from . import editor
from .segmenter import pairs_to_records


logger = logging.getLogger(__name__)


class AlignmentNotReadyError(Exception):
    """Raised when an alignment is finalized before every row is paired."""

    def __init__(self, message: str, validation_result: Optional[ValidationResult] = None):
        super().__init__(message)
        self.message = message
        self.validation_result = validation_result


class AlignmentSession:
    """
    Owns an alignment while a user corrects it.

    Applies the pure editor operations, keeps undo/redo stacks of previous
    lists and records every action. Edits that the editor drops (stale
    index, non-empty gap) leave the history untouched.
    """

    def __init__(
        self,
        initial_pairs: Optional[Sequence[AlignmentPair]] = None,
        history_limit: int = 100,
    ):
        """
        Initialize the session.

        Args:
            initial_pairs: Starting alignment, usually zipped segmentations.
            history_limit: Maximum number of undo steps kept.
        """
        if history_limit <= 0:
            raise ValueError("history_limit must be positive")
        self._pairs: List[AlignmentPair] = list(initial_pairs or [])
        self._undo_stack: List[List[AlignmentPair]] = []
        self._redo_stack: List[List[AlignmentPair]] = []
        self.history_limit = history_limit
        self.action_history: List[Dict] = []

    @property
    def pairs(self) -> List[AlignmentPair]:
        """Get a copy of the current alignment."""
        return list(self._pairs)

    @property
    def stats(self) -> AlignmentStats:
        return editor.get_alignment_stats(self._pairs)

    @property
    def is_ready(self) -> bool:
        return self.stats.is_ready

    @property
    def can_undo(self) -> bool:
        return bool(self._undo_stack)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def insert_gap(self, index: int, side: Side) -> bool:
        return self._apply("insert_gap", index, side, lambda p: editor.insert_gap(p, index, side))

    def remove_gap(self, index: int, side: Side) -> bool:
        return self._apply("remove_gap", index, side, lambda p: editor.remove_gap(p, index, side))

    def merge_up(self, index: int, side: Side) -> bool:
        return self._apply("merge_up", index, side, lambda p: editor.merge_up(p, index, side))

    def split_at(self, index: int, side: Side, char_position: int) -> bool:
        return self._apply(
            "split_at",
            index,
            side,
            lambda p: editor.split_at(p, index, side, char_position),
            char_position=char_position,
        )

    def update_text(self, index: int, side: Side, new_text: str) -> bool:
        return self._apply(
            "update_text",
            index,
            side,
            lambda p: editor.update_text(p, index, side, new_text),
            new_text=new_text,
        )

    def undo(self) -> bool:
        """
        Restore the alignment before the last applied edit.

        Returns:
            True if an edit was undone.
        """
        if not self._undo_stack:
            return False
        self._redo_stack.append(self._pairs)
        self._pairs = self._undo_stack.pop()
        self._record("undo", None, None, changed=True)
        return True

    def redo(self) -> bool:
        """
        Re-apply the last undone edit.

        Returns:
            True if an edit was redone.
        """
        if not self._redo_stack:
            return False
        self._push_undo(self._pairs)
        self._pairs = self._redo_stack.pop()
        self._record("redo", None, None, changed=True)
        return True

    def validate(self) -> ValidationResult:
        """
        Check whether the alignment can be committed.

        Returns:
            ValidationResult with an error per unpaired category and a
            warning for fully empty rows, which finalization discards.
        """
        result = ValidationResult(is_valid=True)
        stats = self.stats

        if stats.source_only:
            result.add_error(f"{stats.source_only} row(s) have source text only")
        if stats.target_only:
            result.add_error(f"{stats.target_only} row(s) have target text only")
        if stats.complete == 0:
            result.add_error("Alignment has no complete rows")
        if stats.empty:
            result.add_warning(f"{stats.empty} empty row(s) will be removed")

        return result

    def finalize(self, article_id: str, paragraph_id: str) -> List[SentencePairRecord]:
        """
        Convert the alignment into permanent sentence pair records.

        Args:
            article_id: Identifier of the source article.
            paragraph_id: Identifier of the paragraph being aligned.

        Returns:
            One record per non-empty row.

        Raises:
            AlignmentNotReadyError: If any row is unpaired or none is complete.
        """
        result = self.validate()
        if not result.is_valid:
            raise AlignmentNotReadyError(
                "Alignment is not ready to commit",
                validation_result=result
            )

        cleaned = editor.clean_empty_pairs(self._pairs)
        records = pairs_to_records(cleaned, article_id, paragraph_id)
        logger.info(
            "Finalized %d sentence pairs for %s/%s", len(records), article_id, paragraph_id
        )
        self._record("finalize", None, None, changed=True, count=len(records))
        return records

    def get_action_history(self) -> List[Dict]:
        """
        Get the history of all actions.

        Returns:
            List of action records.
        """
        return self.action_history.copy()

    def _apply(
        self,
        action: str,
        index: int,
        side: Side,
        operation: Callable[[List[AlignmentPair]], List[AlignmentPair]],
        **details,
    ) -> bool:
        """Run an editor operation and keep history if it changed anything."""
        side = Side.parse(side)
        updated = operation(self._pairs)
        changed = updated != self._pairs

        if changed:
            self._push_undo(self._pairs)
            self._redo_stack.clear()
            self._pairs = updated
        else:
            logger.debug("%s at row %d on %s side had no effect", action, index, side.value)

        self._record(action, index, side, changed=changed, **details)
        return changed

    def _push_undo(self, pairs: List[AlignmentPair]) -> None:
        self._undo_stack.append(pairs)
        if len(self._undo_stack) > self.history_limit:
            del self._undo_stack[0]

    def _record(
        self,
        action: str,
        index: Optional[int],
        side: Optional[Side],
        changed: bool,
        **details,
    ) -> None:
        action_record = {
            'action': action,
            'index': index,
            'side': side.value if side else None,
            'changed': changed,
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        action_record.update(details)
        self.action_history.append(action_record)
