"""Test the line/offset cursor over wrapped lines."""

import pytest

from typetest.cursor import CursorModel, LinePosition


def walk_to(lengths, steps):
    cursor = CursorModel.from_lengths(lengths)
    for _ in range(steps):
        cursor.advance()
    return cursor


def test_starts_at_origin():
    cursor = CursorModel([LinePosition(row=5, column=10, length=4)])
    assert cursor.position == (0, 0)
    assert cursor.absolute_position() == (5, 10)
    assert cursor.is_at_start()


def test_advance_within_line():
    cursor = CursorModel([LinePosition(row=5, column=10, length=4)])
    assert cursor.advance() == (5, 11)
    assert cursor.position == (0, 1)


def test_advance_wraps_to_next_line():
    cursor = CursorModel([
        LinePosition(row=3, column=7, length=3),
        LinePosition(row=4, column=9, length=2),
    ])
    cursor.advance()
    cursor.advance()
    assert cursor.position == (0, 2)
    assert cursor.advance() == (4, 9)
    assert cursor.position == (1, 0)


def test_advance_clamps_at_end():
    cursor = walk_to([2, 2], 3)
    assert cursor.position == (1, 1)
    assert cursor.is_at_end()
    cursor.advance()
    assert cursor.position == (1, 1)


def test_retreat_wraps_to_previous_line_end():
    cursor = CursorModel([
        LinePosition(row=3, column=7, length=3),
        LinePosition(row=4, column=9, length=2),
    ])
    for _ in range(3):
        cursor.advance()
    assert cursor.retreat() == (3, 9)
    assert cursor.position == (0, 2)


def test_retreat_clamps_at_start():
    cursor = CursorModel.from_lengths([3])
    cursor.retreat()
    assert cursor.position == (0, 0)


def test_single_character_lines():
    cursor = CursorModel.from_lengths([1, 1, 1])
    cursor.advance()
    assert cursor.position == (1, 0)
    cursor.advance()
    assert cursor.position == (2, 0)
    cursor.retreat()
    assert cursor.position == (1, 0)


def test_index_matches_flat_stream():
    lengths = [3, 1, 4]
    for steps in range(sum(lengths)):
        assert walk_to(lengths, steps).index == steps


@pytest.mark.parametrize("lengths", [[1], [5], [3, 1, 4], [2, 2, 2, 2], [1, 1]])
def test_advance_then_retreat_is_identity(lengths):
    total = sum(lengths)
    for steps in range(total):
        cursor = walk_to(lengths, steps)
        before = cursor.position
        at_end = cursor.is_at_end()
        cursor.advance()
        cursor.retreat()
        if at_end:
            # Advance is a no-op at the end, so retreat moves back one
            assert cursor.position != before or total == 1
        else:
            assert cursor.position == before


@pytest.mark.parametrize("lengths", [[1], [5], [3, 1, 4], [2, 2, 2, 2], [1, 1]])
def test_retreat_then_advance_is_identity(lengths):
    for steps in range(sum(lengths)):
        cursor = walk_to(lengths, steps)
        before = cursor.position
        at_start = cursor.is_at_start()
        cursor.retreat()
        cursor.advance()
        if not at_start:
            assert cursor.position == before


def test_rejects_empty_lines():
    with pytest.raises(ValueError):
        CursorModel([])
    with pytest.raises(ValueError):
        CursorModel.from_lengths([3, 0])
