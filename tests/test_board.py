"""
Board engine tests: gravity placement, rejected moves, read accessors.
"""

import random

import pytest

from conftest import NO_WIN_GRID, place_all
from minifour.core.board import Board
from minifour.errors import ColumnFull, InvalidColumn, PlacementError
from minifour.types import Cell, Player


def _gravity_holds(board):
    for c in range(board.cols):
        seen_piece = False
        for r in range(board.rows):
            if board.cell(r, c) is not Cell.EMPTY:
                seen_piece = True
            elif seen_piece:
                return False
    return True


class TestBoardBasics:
    def test_new_board_is_empty_5x7(self, board):
        view = board.rows_view()
        assert len(view) == 5
        assert all(len(row) == 7 for row in view)
        assert all(v is Cell.EMPTY for row in view for v in row)
        assert board.piece_count() == 0
        assert board.valid_moves() == list(range(7))
        assert not board.is_full()

    def test_rows_view_is_a_snapshot(self, board):
        view = board.rows_view()
        board.place(3, Player.HUMAN)
        assert view[4][3] is Cell.EMPTY
        assert board.rows_view()[4][3] is Cell.HUMAN

    def test_grid_shape_is_checked(self):
        with pytest.raises(ValueError):
            Board(grid=[[0] * 7 for _ in range(6)])

    def test_copy_is_independent(self, board):
        board.place(0, Player.HUMAN)
        other = board.copy()
        other.place(0, Player.COMPUTER)
        assert board.piece_count() == 1
        assert other.piece_count() == 2

    def test_player_cells_are_distinct(self):
        assert Player.HUMAN.cell is Cell.HUMAN
        assert Player.COMPUTER.cell is Cell.COMPUTER
        assert Player.HUMAN.other() is Player.COMPUTER
        assert Player.COMPUTER.other() is Player.HUMAN


class TestPlacement:
    @pytest.mark.parametrize("col", range(7))
    def test_first_piece_lands_on_bottom_row(self, board, col):
        assert board.place(col, Player.HUMAN) == (4, col)
        assert board.cell(4, col) is Cell.HUMAN

    def test_stacking_fills_upwards(self, board):
        rows = [r for r, _ in place_all(board, [0] * 5)]
        assert rows == [4, 3, 2, 1, 0]

    def test_lands_on_lowest_empty_row(self, board):
        board.place(2, Player.HUMAN)
        board.place(2, Player.COMPUTER)
        assert board.place(2, Player.HUMAN) == (2, 2)
        assert board.cell(3, 2) is Cell.COMPUTER

    def test_full_column_rejected_without_mutation(self, board):
        place_all(board, [5] * 5)
        before = board.rows_view()
        with pytest.raises(ColumnFull) as exc:
            board.place(5, Player.COMPUTER)
        assert exc.value.column == 5
        assert board.rows_view() == before
        assert 5 not in board.valid_moves()

    @pytest.mark.parametrize("col", [-1, 7, 100, -50])
    def test_out_of_range_rejected_without_mutation(self, board, col):
        board.place(0, Player.HUMAN)
        before = board.rows_view()
        with pytest.raises(InvalidColumn):
            board.place(col, Player.HUMAN)
        assert board.rows_view() == before

    @pytest.mark.parametrize("col", ["3", 2.0, None, True])
    def test_non_integer_column_rejected(self, board, col):
        with pytest.raises(InvalidColumn):
            board.place(col, Player.HUMAN)
        assert board.piece_count() == 0

    def test_placement_errors_are_value_errors(self, board):
        with pytest.raises(ValueError):
            board.place(8, Player.HUMAN)
        assert issubclass(InvalidColumn, PlacementError)
        assert issubclass(ColumnFull, PlacementError)

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_random_sequences_keep_count_and_gravity(self, board, seed):
        rng = random.Random(seed)
        player = Player.HUMAN
        placed = 0
        for _ in range(60):
            col = rng.randrange(-1, 8)
            expected_row = None
            if 0 <= col < 7 and board.cell(0, col) is Cell.EMPTY:
                expected_row = max(r for r in range(5) if board.cell(r, col) is Cell.EMPTY)
            try:
                row, _ = board.place(col, player)
            except PlacementError:
                assert expected_row is None
                continue
            assert row == expected_row
            placed += 1
            player = player.other()
            assert board.piece_count() == placed
            assert _gravity_holds(board)

    def test_full_board(self, full_board):
        assert full_board.is_full()
        assert full_board.valid_moves() == []
        assert full_board.piece_count() == 35
        assert sum(v == 1 for row in NO_WIN_GRID for v in row) == 18
