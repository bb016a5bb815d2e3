"""Pure edit operations on a bilingual alignment.

Every operation takes a list of AlignmentPair and returns a new list. The
caller's list is never mutated. Invalid indices and positions are silent
no-ops: the result equals the input, so a stale UI action degrades into a
dropped edit instead of an error.

Structural edits (gap insert/remove, merge, split) act on a single column.
The edited column is rebuilt as a new list, the other column is read at its
original indices, and the two are re-zipped row by row to the longer length,
padding with empty strings.
"""

import logging
from typing import List, Sequence, Union

from ..models.alignment import AlignmentPair, AlignmentStats
from ..models.enums import PairStatus, Side


logger = logging.getLogger(__name__)

SideLike = Union[Side, str]


def _column(pairs: Sequence[AlignmentPair], side: Side) -> List[str]:
    return [pair.text_for(side) for pair in pairs]


def _rezip(
    column: List[str],
    side: Side,
    other_column: List[str],
    drop_trailing_empty: bool = True,
) -> List[AlignmentPair]:
    """
    Pair an edited column with the untouched other column.

    Args:
        column: The edited column.
        side: Which side the edited column belongs to.
        other_column: The other column at its original indices.
        drop_trailing_empty: Drop the last synthesized row when it is
            empty on both sides.

    Returns:
        Rows up to max(len(column), len(other_column)).
    """
    max_len = max(len(column), len(other_column))
    result: List[AlignmentPair] = []

    for i in range(max_len):
        text = column[i] if i < len(column) else ""
        other_text = other_column[i] if i < len(other_column) else ""
        if drop_trailing_empty and i == max_len - 1 and text == "" and other_text == "":
            continue
        pair = AlignmentPair()
        pair = pair.with_text(side, text).with_text(side.flip(), other_text)
        result.append(pair)

    return result


def _in_range(pairs: Sequence[AlignmentPair], index: int) -> bool:
    return 0 <= index < len(pairs)


def zip_segments(source_segments: Sequence[str], target_segments: Sequence[str]) -> List[AlignmentPair]:
    """
    Create an alignment from two independently segmented sentence lists.

    The shorter list is padded with empty strings.
    """
    max_len = max(len(source_segments), len(target_segments))
    return [
        AlignmentPair(
            source_text=source_segments[i] if i < len(source_segments) else "",
            target_text=target_segments[i] if i < len(target_segments) else "",
        )
        for i in range(max_len)
    ]


def insert_gap(pairs: Sequence[AlignmentPair], index: int, side: SideLike) -> List[AlignmentPair]:
    """
    Insert an empty cell into one column, shifting that column down.

    The other column keeps its rows and is padded at the end, so the
    result always has one row more than the input.

    Args:
        pairs: Current alignment.
        index: Position of the new empty cell, 0..len(pairs) inclusive.
        side: Column receiving the gap.

    Returns:
        New alignment, or a copy of the input if index is out of range.
    """
    side = Side.parse(side)
    if index < 0 or index > len(pairs):
        logger.debug("insert_gap ignored: index %d out of range for %d rows", index, len(pairs))
        return list(pairs)

    column = _column(pairs, side)
    column = column[:index] + [""] + column[index:]

    return _rezip(column, side, _column(pairs, side.flip()), drop_trailing_empty=False)


def remove_gap(pairs: Sequence[AlignmentPair], index: int, side: SideLike) -> List[AlignmentPair]:
    """
    Remove an empty cell from one column, shifting that column up.

    Cells holding any text (whitespace included) are never removed.

    Args:
        pairs: Current alignment.
        index: Row of the cell to remove.
        side: Column holding the cell.

    Returns:
        New alignment, or a copy of the input if the index is out of range
        or the cell is not empty.
    """
    side = Side.parse(side)
    if not _in_range(pairs, index):
        logger.debug("remove_gap ignored: index %d out of range for %d rows", index, len(pairs))
        return list(pairs)

    if pairs[index].text_for(side) != "":
        logger.debug("remove_gap refused: %s cell at row %d is not empty", side.value, index)
        return list(pairs)

    column = _column(pairs, side)
    column = column[:index] + column[index + 1:]

    return _rezip(column, side, _column(pairs, side.flip()))


def merge_up(pairs: Sequence[AlignmentPair], index: int, side: SideLike) -> List[AlignmentPair]:
    """
    Merge one cell into the cell above it on the same column.

    The texts are joined with a single space; blank parts are skipped, so
    merging into an empty cell relocates the text.

    Args:
        pairs: Current alignment.
        index: Row whose cell moves up; must be at least 1.
        side: Column to merge in.

    Returns:
        New alignment, or a copy of the input if index is out of range.
    """
    side = Side.parse(side)
    if index <= 0 or index >= len(pairs):
        logger.debug("merge_up ignored: index %d out of range for %d rows", index, len(pairs))
        return list(pairs)

    column = _column(pairs, side)
    merged = " ".join(text for text in (column[index - 1], column[index]) if text.strip() != "")
    column = column[:index - 1] + [merged] + column[index + 1:]

    return _rezip(column, side, _column(pairs, side.flip()))


def split_at(
    pairs: Sequence[AlignmentPair],
    index: int,
    side: SideLike,
    char_position: int,
) -> List[AlignmentPair]:
    """
    Split one cell into two consecutive rows of the same column.

    Args:
        pairs: Current alignment.
        index: Row of the cell to split.
        side: Column to split in.
        char_position: Character offset into the cell text; both halves
            must receive at least one character.

    Returns:
        New alignment with the trimmed head at index and the trimmed tail
        at index + 1, or a copy of the input when the split is invalid.
    """
    side = Side.parse(side)
    if not _in_range(pairs, index):
        logger.debug("split_at ignored: index %d out of range for %d rows", index, len(pairs))
        return list(pairs)

    text = pairs[index].text_for(side)
    if char_position <= 0 or char_position >= len(text):
        logger.debug(
            "split_at ignored: position %d outside text of length %d", char_position, len(text)
        )
        return list(pairs)

    head = text[:char_position].strip()
    tail = text[char_position:].strip()

    column = _column(pairs, side)
    column = column[:index] + [head, tail] + column[index + 1:]

    return _rezip(column, side, _column(pairs, side.flip()))


def update_text(
    pairs: Sequence[AlignmentPair],
    index: int,
    side: SideLike,
    new_text: str,
) -> List[AlignmentPair]:
    """Replace one cell verbatim; live typing is never trimmed."""
    side = Side.parse(side)
    if not _in_range(pairs, index):
        logger.debug("update_text ignored: index %d out of range for %d rows", index, len(pairs))
        return list(pairs)

    return [
        pair.with_text(side, new_text) if i == index else pair
        for i, pair in enumerate(pairs)
    ]


def clean_empty_pairs(pairs: Sequence[AlignmentPair]) -> List[AlignmentPair]:
    """Drop rows that are empty on both sides after trimming."""
    return [pair for pair in pairs if pair.status is not PairStatus.EMPTY]


def get_alignment_stats(pairs: Sequence[AlignmentPair]) -> AlignmentStats:
    """
    Count rows per completeness category.

    Args:
        pairs: Alignment to classify.

    Returns:
        AlignmentStats whose four categories sum to total.
    """
    stats = AlignmentStats(total=len(pairs))

    for pair in pairs:
        status = pair.status
        if status is PairStatus.COMPLETE:
            stats.complete += 1
        elif status is PairStatus.SOURCE_ONLY:
            stats.source_only += 1
        elif status is PairStatus.TARGET_ONLY:
            stats.target_only += 1
        else:
            stats.empty += 1

    return stats
