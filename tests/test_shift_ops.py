import pytest

from tilemerge.components.board import Position
from tilemerge.components.direction import Direction
from tilemerge.systems.shift_ops import TileMove, shift_tiles
from helpers import rows_of, store_from_rows

EMPTY = [0, 0, 0, 0]


def _single_row(row):
    return [list(row), list(EMPTY), list(EMPTY), list(EMPTY)]


def test_four_equal_tiles_merge_pairwise_left():
    store = store_from_rows(_single_row([2, 2, 2, 2]))
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store)[0] == [4, 4, 0, 0]
    assert result.score_gained == 8
    assert result.changed


def test_no_equal_neighbours_leaves_row_unchanged():
    store = store_from_rows(_single_row([2, 4, 2, 0]))
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store)[0] == [2, 4, 2, 0]
    assert result.score_gained == 0
    assert not result.changed
    assert result.moves == [] and result.merges == []


def test_run_of_three_merges_leading_pair_only():
    store = store_from_rows(_single_row([2, 2, 2, 0]))
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store)[0] == [4, 2, 0, 0]
    assert result.score_gained == 4


def test_merged_tile_does_not_merge_again():
    store = store_from_rows(_single_row([4, 4, 8, 0]))
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store)[0] == [8, 8, 0, 0]
    assert result.score_gained == 8


def test_gaps_are_compacted_before_merging():
    store = store_from_rows(_single_row([2, 0, 2, 4]))
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store)[0] == [4, 4, 0, 0]
    assert result.score_gained == 4


@pytest.mark.parametrize(
    "row, expected, gained",
    [
        ([2, 2, 2, 0], [0, 0, 2, 4], 4),
        ([2, 2, 2, 2], [0, 0, 4, 4], 8),
        ([4, 0, 0, 2], [0, 0, 4, 2], 0),
    ],
)
def test_shift_right(row, expected, gained):
    store = store_from_rows(_single_row(row))
    result = shift_tiles(store, Direction.RIGHT)
    assert rows_of(store)[0] == expected
    assert result.score_gained == gained


def test_shift_up_compacts_toward_top_row():
    # Column x=0 holds 2, 2, 4 from the bottom; top edge is y=3.
    rows = [
        [2, 0, 0, 0],
        [2, 0, 0, 0],
        [4, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    store = store_from_rows(rows)
    result = shift_tiles(store, Direction.UP)
    column = [row[0] for row in rows_of(store)]
    assert column == [0, 0, 4, 4]
    assert result.score_gained == 4


def test_shift_down_compacts_toward_bottom_row():
    rows = [
        [0, 0, 0, 0],
        [0, 8, 0, 0],
        [0, 8, 0, 0],
        [0, 2, 0, 0],
    ]
    store = store_from_rows(rows)
    result = shift_tiles(store, Direction.DOWN)
    column = [row[1] for row in rows_of(store)]
    assert column == [16, 2, 0, 0]
    assert result.score_gained == 16


def test_equal_values_on_different_rows_never_merge():
    rows = [
        [0, 0, 0, 2],
        [2, 0, 0, 0],
        [0, 0, 0, 0],
        [0, 0, 0, 0],
    ]
    store = store_from_rows(rows)
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store)[:2] == [[2, 0, 0, 0], [2, 0, 0, 0]]
    assert result.merges == []


def test_each_row_restarts_at_leading_edge():
    rows = [
        [2, 2, 0, 0],
        [0, 0, 2, 2],
        [8, 0, 4, 4],
        [0, 16, 0, 0],
    ]
    store = store_from_rows(rows)
    result = shift_tiles(store, Direction.LEFT)
    assert rows_of(store) == [
        [4, 0, 0, 0],
        [4, 0, 0, 0],
        [8, 8, 0, 0],
        [16, 0, 0, 0],
    ]
    assert result.score_gained == 16


def test_moves_and_merges_are_reported():
    store = store_from_rows(_single_row([0, 2, 0, 0]))
    tile = store.get(Position(1, 0))
    result = shift_tiles(store, Direction.LEFT)
    assert result.moves == [TileMove(source=Position(1, 0), target=Position(0, 0), value=2)]
    assert store.get(Position(0, 0)) is tile

    store = store_from_rows(_single_row([0, 2, 0, 2]))
    result = shift_tiles(store, Direction.LEFT)
    [merge] = result.merges
    assert merge.position == Position(0, 0)
    assert merge.value == 4
    assert merge.source == Position(1, 0)
    assert merge.absorbed == Position(3, 0)
    assert result.moves == [TileMove(source=Position(1, 0), target=Position(0, 0), value=4)]


def test_merge_in_place_counts_as_change():
    store = store_from_rows(_single_row([2, 2, 0, 0]))
    result = shift_tiles(store, Direction.LEFT)
    assert result.moves == []
    assert len(result.merges) == 1
    assert result.changed


def test_empty_board_shift_is_noop():
    store = store_from_rows([list(EMPTY) for _ in range(4)])
    result = shift_tiles(store, Direction.UP)
    assert not result.changed
    assert len(store) == 0
