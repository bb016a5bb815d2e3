"""Unit tests for the alignment editing session."""

import pytest

from sentence_alignment.alignment import AlignmentNotReadyError, AlignmentSession
from sentence_alignment.models.alignment import AlignmentPair
from sentence_alignment.models.enums import Side


def P(source, target):
    return AlignmentPair(source_text=source, target_text=target)


@pytest.fixture
def session():
    return AlignmentSession([P("A", "甲"), P("B", "乙")])


class TestAlignmentSession:
    """Test AlignmentSession functionality."""

    def test_initial_state(self, session):
        """Test a new session has no history."""
        assert session.pairs == [P("A", "甲"), P("B", "乙")]
        assert not session.can_undo
        assert not session.can_redo
        assert session.is_ready

    def test_pairs_returns_copy(self, session):
        """Test callers cannot mutate the session's list."""
        pairs = session.pairs
        pairs.append(P("X", "叉"))
        assert len(session.pairs) == 2

    def test_does_not_alias_initial_list(self):
        """Test the initial list is copied."""
        initial = [P("A", "甲")]
        session = AlignmentSession(initial)
        session.insert_gap(0, Side.SOURCE)
        assert initial == [P("A", "甲")]

    def test_edit_and_undo(self, session):
        """Test an applied edit can be undone."""
        assert session.insert_gap(1, Side.SOURCE) is True
        assert session.pairs == [P("A", "甲"), P("", "乙"), P("B", "")]
        assert not session.is_ready

        assert session.undo() is True
        assert session.pairs == [P("A", "甲"), P("B", "乙")]
        assert session.can_redo

    def test_redo(self, session):
        """Test an undone edit can be redone."""
        session.merge_up(1, Side.TARGET)
        session.undo()

        assert session.redo() is True
        assert session.pairs == [P("A", "甲 乙"), P("B", "")]
        assert not session.can_redo

    def test_new_edit_clears_redo(self, session):
        """Test redo history is discarded after a new edit."""
        session.update_text(0, Side.SOURCE, "Alpha")
        session.undo()
        session.update_text(1, Side.SOURCE, "Beta")

        assert not session.can_redo

    def test_noop_edit_keeps_history(self, session):
        """Test dropped edits are recorded but not undoable."""
        assert session.remove_gap(0, Side.SOURCE) is False
        assert session.split_at(5, Side.TARGET, 1) is False
        assert not session.can_undo

        history = session.get_action_history()
        assert [record['action'] for record in history] == ['remove_gap', 'split_at']
        assert all(record['changed'] is False for record in history)
        assert history[1]['char_position'] == 1

    def test_undo_redo_on_empty_history(self, session):
        """Test undo and redo report when nothing happened."""
        assert session.undo() is False
        assert session.redo() is False

    def test_history_limit(self, session):
        """Test the undo stack is bounded."""
        limited = AlignmentSession(session.pairs, history_limit=2)
        limited.update_text(0, Side.SOURCE, "1")
        limited.update_text(0, Side.SOURCE, "2")
        limited.update_text(0, Side.SOURCE, "3")

        assert limited.undo()
        assert limited.undo()
        assert not limited.undo()
        assert limited.pairs[0].source_text == "1"

    def test_invalid_history_limit(self):
        """Test the history limit must be positive."""
        with pytest.raises(ValueError):
            AlignmentSession([], history_limit=0)

    def test_action_history_records_details(self, session):
        """Test action records carry index, side and new text."""
        session.update_text(1, "target", "乙乙")

        record = session.get_action_history()[0]
        assert record['action'] == 'update_text'
        assert record['index'] == 1
        assert record['side'] == 'target'
        assert record['new_text'] == "乙乙"
        assert record['changed'] is True
        assert 'timestamp' in record

    def test_validate(self):
        """Test validation reports unpaired and empty rows."""
        session = AlignmentSession([P("A", "甲"), P("B", ""), P("", "")])

        result = session.validate()

        assert not result.is_valid
        assert any("source text only" in error for error in result.errors)
        assert any("empty row" in warning for warning in result.warnings)

    def test_validate_no_complete_rows(self):
        """Test an alignment without complete rows is invalid."""
        result = AlignmentSession([P("", "")]).validate()
        assert "Alignment has no complete rows" in result.errors

    def test_finalize_not_ready(self):
        """Test finalizing an unpaired alignment raises."""
        session = AlignmentSession([P("A", "甲"), P("", "乙")])

        with pytest.raises(AlignmentNotReadyError) as exc_info:
            session.finalize("art", "p1")

        assert "target text only" in str(exc_info.value.validation_result.errors)

    def test_finalize_cleans_and_converts(self):
        """Test finalization drops empty rows and builds records."""
        session = AlignmentSession([P("A", "甲"), P(" ", ""), P("B", "乙")])

        records = session.finalize("art", "p1")

        assert [record.id for record in records] == ["art_p1_s0", "art_p1_s1"]
        assert [record.source_text for record in records] == ["A", "B"]
        assert session.get_action_history()[-1]['action'] == 'finalize'
