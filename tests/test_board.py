import pytest

from core.board import Board, Player, BOARD_SIZE, count_pieces
from core.exceptions import ColumnFull, InvalidColumn
from tests.conftest import M, C, _, play_all

EMPTY_ROW = "⬜⬛⬛⬛⬛⬜"
BOTTOM = "⬜⬜⬜⬜⬜⬜"


def lines(board):
    return board.render().splitlines()


def test_new_board_is_empty(board):
    assert lines(board) == [EMPTY_ROW] * 4 + [BOTTOM]
    assert board.winner() is None
    assert not board.board_full()
    assert count_pieces(board) == 0


def test_render_is_newline_terminated(board):
    board.play(M, 0)
    text = board.render()
    assert text.endswith(BOTTOM + "\n")
    assert text == str(board)
    assert text == board.copy().render()


def test_play_drops_to_bottom(board):
    board.play(M, 0)
    assert lines(board) == [EMPTY_ROW] * 3 + ["⬜🥛⬛⬛⬛⬜", BOTTOM]


@pytest.mark.parametrize("column", [-1, 4, 10])
def test_play_out_of_bounds(board, column):
    with pytest.raises(InvalidColumn):
        board.play(M, column)
    assert board == Board()


def test_play_full_column(board):
    play_all(board, [(M, 0), (C, 0), (M, 0), (C, 0)])
    before = board.copy()

    with pytest.raises(ColumnFull):
        board.play(M, 0)

    assert board == before
    assert lines(board) == [
        "⬜🍪⬛⬛⬛⬜",
        "⬜🥛⬛⬛⬛⬜",
        "⬜🍪⬛⬛⬛⬜",
        "⬜🥛⬛⬛⬛⬜",
        BOTTOM,
    ]


def test_column_height_tracks_moves(board):
    moves = [(M, 0), (C, 1), (M, 1), (C, 3), (M, 3), (C, 3)]
    play_all(board, moves)
    assert [board.column_height(col) for col in range(BOARD_SIZE)] == [1, 2, 0, 3]
    assert not board.column_full(3)
    board.play(M, 3)
    assert board.column_full(3)


def test_column_full_rejects_bad_column(board):
    with pytest.raises(InvalidColumn):
        board.column_full(BOARD_SIZE)


def test_full_board_of_one_player(board):
    for col in range(BOARD_SIZE):
        for _row in range(BOARD_SIZE):
            board.play(M, col)
        with pytest.raises(ColumnFull):
            board.play(M, col)

    assert board.board_full()
    assert board.winner() == M
    assert lines(board) == ["⬜🥛🥛🥛🥛⬜"] * 4 + [BOTTOM, "🥛 wins!"]


def test_no_winner_below_four(board):
    play_all(board, [(M, 0), (M, 1), (M, 2), (C, 3)])
    assert board.winner() is None
    play_all(board, [(C, 0), (C, 0), (C, 0)])
    assert board.winner() is None


def test_horizontal_winner(board):
    play_all(board, [(M, 0), (M, 1), (M, 2), (M, 3)])
    assert board.winner() == M
    assert lines(board) == [EMPTY_ROW] * 3 + ["⬜🥛🥛🥛🥛⬜", BOTTOM, "🥛 wins!"]


def test_vertical_winner(board):
    play_all(board, [(C, 0)] * 4)
    assert board.winner() == C
    assert lines(board)[-1] == "🍪 wins!"


def test_anti_diagonal_winner(board):
    play_all(board, [
        (C, 0),
        (M, 1), (C, 1),
        (C, 2), (M, 2), (C, 2),
        (M, 3), (C, 3), (M, 3), (C, 3),
    ])
    assert board.winner() == C
    assert lines(board) == [
        "⬜⬛⬛⬛🍪⬜",
        "⬜⬛⬛🍪🥛⬜",
        "⬜⬛🍪🥛🍪⬜",
        "⬜🍪🥛🍪🥛⬜",
        BOTTOM,
        "🍪 wins!",
    ]


def test_diagonal_winner(board):
    play_all(board, [
        (C, 0), (M, 0), (C, 0), (M, 0),
        (M, 1), (C, 1), (M, 1),
        (C, 2), (M, 2),
        (M, 3),
    ])
    assert board.winner() == M
    assert lines(board) == [
        "⬜🥛⬛⬛⬛⬜",
        "⬜🍪🥛⬛⬛⬜",
        "⬜🥛🍪🥛⬛⬜",
        "⬜🍪🥛🍪🥛⬜",
        BOTTOM,
        "🥛 wins!",
    ]


def test_full_board_no_winner(board):
    play_all(board, [
        (M, 0), (M, 0), (C, 0), (C, 0),
        (C, 1), (C, 1), (M, 1), (M, 1),
        (M, 2), (M, 2), (C, 2), (C, 2),
        (M, 3), (M, 3), (C, 3), (C, 3),
    ])
    assert board.board_full()
    assert board.winner() is None
    assert board.is_terminal()
    assert lines(board) == [
        "⬜🍪🥛🍪🍪⬜",
        "⬜🍪🥛🍪🍪⬜",
        "⬜🥛🍪🥛🥛⬜",
        "⬜🥛🍪🥛🥛⬜",
        BOTTOM,
        "No winner.",
    ]


def test_first_row_found_wins():
    # 第 0 列和第 3 列同時連成四顆，由上往下先掃到第 0 列
    board = Board.from_rows([
        [C, C, C, C],
        [_, _, _, _],
        [_, _, _, _],
        [M, M, M, M],
    ])
    assert board.winner() == C


def test_reset_clears_board(board):
    play_all(board, [(M, 0), (C, 1), (M, 2)])
    board.reset()
    assert board == Board()
    assert count_pieces(board) == 0


def test_cells_snapshot_is_detached(board):
    cells = board.cells
    board.play(C, 2)
    assert cells[BOARD_SIZE - 1][2] is None
    assert board.cells[BOARD_SIZE - 1][2] == C


def test_from_rows_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Board.from_rows([[M, C]])


def test_player_tokens_and_glyphs():
    assert Player("milk") is M
    assert Player("cookie") is C
    assert M.glyph == "🥛"
    assert C.glyph == "🍪"
