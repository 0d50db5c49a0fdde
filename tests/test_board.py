"""Tests for the connect-four board."""

import sys
sys.path.insert(0, '.')

import pytest

from connect4.game import (
    Board, EMPTY, RED, YELLOW, ColumnFullError, ColumnOutOfRangeError,
    DoubleWinnerError, GameAlreadyOverError, InvalidBoardError,
    InvalidCoordinateError,
)

# Row offsets of a 7x6 fill with no run longer than 3 in any direction
DRAW_ROW_SHIFT = [0, 0, 1, 1, 1, 0]


def draw_color(row, col):
    return RED if (DRAW_ROW_SHIFT[row] + col) % 2 == 0 else YELLOW


def paired_columns(a, b):
    """Fill two columns of opposite patterns with alternating turns, RED first."""
    return [a, b, a, b, b, a, b, a, b, a, a, b]


# 42 alternating moves that end in the drawn pattern above
DRAW_MOVES = (
    paired_columns(0, 1) + paired_columns(2, 3) +
    [4, 5, 6, 5, 4, 4, 6, 6, 5, 4, 5, 6, 5, 4, 4, 6, 6, 5]
)


def fill_draw(board):
    """Play the drawn game, RED and YELLOW alternating from RED."""
    color = RED
    for col in DRAW_MOVES:
        board.place(col, color)
        color = YELLOW if color == RED else RED


class TestBoard:
    """Test cases for Board class."""

    def test_initial_state(self):
        """Board should start empty with default 7x6 connect-four size."""
        board = Board()
        assert (board.width, board.height, board.win_length) == (7, 6, 4)
        assert board.count_empty() == 42
        assert board.column_height == [0] * 7
        assert not board.is_game_over
        assert board.winner == EMPTY

    def test_invalid_dimensions(self):
        """Streak length must fit on the board."""
        with pytest.raises(InvalidBoardError):
            Board(7, 6, 7)
        with pytest.raises(InvalidBoardError):
            Board(7, 6, 1)
        with pytest.raises(InvalidBoardError):
            Board(0, 6, 4)

    def test_place_drops_to_bottom(self):
        """Pieces stack from row 0 upwards."""
        board = Board()
        assert board.place(3, RED) == 3
        assert board.place(3, YELLOW) == 10
        assert board.get(0, 3) == RED
        assert board.get(1, 3) == YELLOW
        assert board.column_height[3] == 2

    def test_column_out_of_range(self):
        """Columns outside 0..width-1 are rejected."""
        board = Board()
        with pytest.raises(ColumnOutOfRangeError):
            board.place(7, RED)
        with pytest.raises(ColumnOutOfRangeError):
            board.place(-1, RED)
        assert board.count_empty() == 42

    def test_full_column_leaves_board_unchanged(self):
        """Placing into a full column raises and changes nothing."""
        board = Board()
        for i in range(board.height):
            board.place(0, RED if i % 2 == 0 else YELLOW)

        cells = list(board.cells)
        heights = list(board.column_height)
        with pytest.raises(ColumnFullError):
            board.place(0, RED)
        assert board.cells == cells
        assert board.column_height == heights

    def test_play_move_is_one_indexed(self):
        """play_move takes columns 1..width."""
        board = Board()
        board.play_move(1, RED)
        board.play_move(7, YELLOW)
        assert board.get(0, 0) == RED
        assert board.get(0, 6) == YELLOW

        with pytest.raises(InvalidCoordinateError):
            board.play_move(0, RED)
        with pytest.raises(InvalidCoordinateError):
            board.play_move(8, RED)

    def test_horizontal_win_on_fourth_piece(self):
        """Winner is set exactly when the fourth piece lands."""
        board = Board()
        for col in range(3):
            board.place(col, RED)
            assert not board.is_winner(RED)
        assert not board.is_game_over

        board.place(3, RED)
        assert board.is_winner(RED)
        assert board.winner == RED
        assert board.is_game_over

    def test_no_moves_after_game_over(self):
        """Placing after a win raises GameAlreadyOverError."""
        board = Board()
        for _ in range(4):
            board.place(0, YELLOW)
        assert board.winner == YELLOW

        with pytest.raises(GameAlreadyOverError):
            board.place(1, RED)

    def test_draw(self):
        """42 alternating moves without any line end in a draw."""
        assert len(DRAW_MOVES) == 42
        board = Board()
        fill_draw(board)

        assert board.cells == [draw_color(row, col)
                               for row in range(6) for col in range(7)]
        assert board.is_full()
        assert board.is_game_over
        assert board.winner == EMPTY
        assert board.determine_winner() == EMPTY
        assert board.count_pieces(RED) == 21
        assert board.count_pieces(YELLOW) == 21

    def test_double_winner(self):
        """Both players winning at once is a corrupted board."""
        board = Board()
        for col in range(4):
            board.set_cell(board.to_index(0, col), RED)
            board.set_cell(board.to_index(1, col), YELLOW)

        with pytest.raises(DoubleWinnerError):
            board.determine_winner()

    def test_cell_index_out_of_range(self):
        """Cell indices never wrap around to the other end of the board."""
        board = Board()
        for index in (-1, board.size):
            with pytest.raises(InvalidCoordinateError):
                board.is_legal_move(index)
            with pytest.raises(InvalidCoordinateError):
                board.set_cell(index, RED)
            with pytest.raises(InvalidCoordinateError):
                board.undo(index)
        assert board.count_empty() == 42

    def test_set_cell_and_undo(self):
        """set_cell/undo touch only the cell."""
        board = Board()
        board.set_cell(0, RED)
        assert board.get(0, 0) == RED
        assert board.column_height[0] == 0

        board.undo(0)
        assert board.get(0, 0) == EMPTY

    def test_legal_cells(self):
        """Legal cells are the lowest empty cell of every column, highest index first."""
        board = Board()
        assert board.legal_cells() == [6, 5, 4, 3, 2, 1, 0]

        board.place(2, RED)
        legal = board.legal_cells()
        assert legal == [9, 6, 5, 4, 3, 1, 0]
        for index in legal:
            assert board.is_legal_move(index)
        assert not board.is_legal_move(2)
        assert not board.is_legal_move(16)

    def test_reset(self):
        """Reset clears pieces, heights and flags."""
        board = Board()
        for _ in range(4):
            board.place(5, RED)
        board.reset()

        assert board.count_empty() == 42
        assert board.column_height == [0] * 7
        assert not board.is_game_over
        assert board.winner == EMPTY

    def test_render(self):
        """Rendering prints the top row first."""
        board = Board(4, 4, 3)
        board.place(0, RED)
        board.place(1, YELLOW)

        lines = board.render().splitlines()
        assert lines[0] == 'Current Board:'
        assert lines[2] == '  1 2 3 4'
        assert lines[3] == '1 _ _ _ _'
        assert lines[-1] == '4 R Y _ _'
        assert str(board) == board.render()
