"""Integration tests for the import, align, finalize and practice workflow."""

import pytest

from sentence_alignment import (
    AlignmentNotReadyError,
    AlignmentSession,
    ConfigurationManager,
    DiffHighlighter,
    Side,
    build_alignment,
    compute_diff,
    diff_summary,
    reconstruct_reference,
)
from sentence_alignment.models.enums import DiffKind


SOURCE_PARAGRAPH = "I like tea. It is warm. Thank you."
TARGET_PARAGRAPH = "我喜欢茶，它很暖和。谢谢。"


@pytest.fixture
def configuration():
    manager = ConfigurationManager()
    manager.load_configuration({"history_limit": 10})
    return manager.configuration


@pytest.fixture
def session(configuration):
    pairs = build_alignment(SOURCE_PARAGRAPH, TARGET_PARAGRAPH, configuration.sentence_terminators)
    return AlignmentSession(pairs, history_limit=configuration.history_limit)


def test_heuristic_segmentation_is_misaligned(session):
    """Test the heuristic split leaves one source-only row."""
    stats = session.stats

    assert stats.total == 3
    assert stats.complete == 2
    assert stats.source_only == 1
    assert not session.is_ready
    with pytest.raises(AlignmentNotReadyError):
        session.finalize("article_1", "p0")


def test_fix_by_splitting_target(session):
    """Test splitting the merged target sentence pairs every row."""
    assert session.split_at(0, Side.TARGET, 5)

    assert [pair.target_text for pair in session.pairs] == ["我喜欢茶，", "它很暖和。", "谢谢。"]
    assert session.is_ready

    records = session.finalize("article_1", "p0")

    assert [record.id for record in records] == [
        "article_1_p0_s0",
        "article_1_p0_s1",
        "article_1_p0_s2",
    ]
    assert records[1].source_text == "It is warm."
    assert records[1].target_text == "它很暖和。"


def test_fix_by_merging_source(session):
    """Test merging the source sentences also pairs every row."""
    assert session.merge_up(1, Side.SOURCE)

    pairs = session.pairs
    assert len(pairs) == 2
    assert pairs[0].source_text == "I like tea. It is warm."
    assert pairs[1].source_text == "Thank you."
    assert pairs[1].target_text == "谢谢。"
    assert session.is_ready


def test_undo_back_to_heuristic(session):
    """Test a sequence of edits can be unwound completely."""
    original = session.pairs
    session.insert_gap(0, Side.SOURCE)
    session.remove_gap(0, Side.SOURCE)
    session.split_at(0, Side.TARGET, 5)

    while session.undo():
        pass

    assert session.pairs == original


def test_practice_against_finalized_records(session, configuration):
    """Test diffing attempts against finalized pairs in both languages."""
    session.split_at(0, Side.TARGET, 5)
    record = session.finalize("article_1", "p0")[1]

    source_mode = configuration.token_mode_for(Side.SOURCE)
    spans = compute_diff(record.source_text, "It is very warm.", source_mode)
    assert [span.kind for span in spans] == [DiffKind.MATCH, DiffKind.INSERT, DiffKind.MATCH]
    assert reconstruct_reference(spans, source_mode) == record.source_text

    target_mode = configuration.token_mode_for(Side.TARGET)
    target_spans = compute_diff(record.target_text, "它很暖。", target_mode)
    summary = diff_summary(target_spans, target_mode)
    assert summary.deleted == 1
    assert summary.matched == 4

    html = DiffHighlighter(configuration.diff_colors()).generate_html_diff(
        record.target_text, "它很暖。", target_mode
    )
    assert 'class="diff-delete"' in html
