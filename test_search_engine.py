import random

import pytest

from core.board_state import BoardState, Cell, Move
from core.search_engine import SearchEngine


CORNERS = [Move(0, 0), Move(0, 2), Move(2, 0), Move(2, 2)]
EDGES = [Move(0, 1), Move(1, 0), Move(1, 2), Move(2, 1)]


def test_answers_center_with_a_corner():
    board = BoardState.from_rows(["---", "-X-", "---"])
    engine = SearchEngine()

    move = engine.choose_move(board, Cell.O)

    assert move in CORNERS
    assert move not in EDGES
    # First corner in row-major order wins the tie
    assert move == Move(0, 0)


def test_edge_reply_to_center_loses():
    board = BoardState.from_rows(["---", "-X-", "---"])
    scores = dict(SearchEngine().score_moves(board, Cell.O))

    for corner in CORNERS:
        assert scores[corner] == 0
    for edge in EDGES:
        assert scores[edge] < 0


def test_takes_immediate_win():
    board = BoardState.from_rows(["XX-", "OO-", "---"])
    engine = SearchEngine()

    assert engine.choose_move(board, Cell.X) == Move(0, 2)
    assert dict(engine.score_moves(board, Cell.X))[Move(0, 2)] == 10


def test_prefers_own_win_over_block():
    board = BoardState.from_rows(["XX-", "OO-", "---"])
    assert SearchEngine().choose_move(board, Cell.O) == Move(1, 2)


@pytest.mark.parametrize("symbol", [Cell.X, Cell.O])
def test_last_cell_ends_in_draw(symbol):
    board = BoardState.from_rows(["XOX", "XOO", "OX-"])
    engine = SearchEngine()

    move = engine.choose_move(board, symbol)
    assert move == Move(2, 2)

    board.apply_move(move.row, move.col, symbol)
    assert board.winner() == Cell.EMPTY
    assert board.is_full()
    assert board.is_terminal()


def test_blocks_opponent_win():
    board = BoardState.from_rows(["XX-", "-O-", "---"])
    engine = SearchEngine()

    move = engine.choose_move(board, Cell.O)
    assert move == Move(0, 2)

    scores = dict(engine.score_moves(board, Cell.O))
    for other, score in scores.items():
        if other != Move(0, 2):
            assert score < scores[Move(0, 2)]


def test_blocks_column_threat():
    board = BoardState.from_rows(["O-X", "--X", "---"])
    assert SearchEngine().choose_move(board, Cell.O) == Move(2, 2)


def test_equal_wins_go_to_first_cell():
    # X wins on the top row or the left column
    board = BoardState.from_rows(["XX-", "X-O", "-OO"])
    scores = dict(SearchEngine().score_moves(board, Cell.X))
    assert scores[Move(0, 2)] == 10
    assert scores[Move(2, 0)] == 10
    assert SearchEngine().choose_move(board, Cell.X) == Move(0, 2)


def test_prefers_slower_loss():
    # X has a double threat after the block, but blocking still delays the loss
    board = BoardState.from_rows(["O-X", "--X", "---"])
    scores = dict(SearchEngine().score_moves(board, Cell.O))
    assert scores[Move(2, 2)] == -7
    for other, score in scores.items():
        if other != Move(2, 2):
            assert score == -9


def test_search_leaves_board_unchanged():
    board = BoardState.from_rows(["X--", "-O-", "--X"])
    snapshot = board.copy()

    SearchEngine().choose_move(board, Cell.O)

    assert board == snapshot


def test_never_picks_occupied_cell():
    rng = random.Random(5)
    engine = SearchEngine()
    checked = 0
    while checked < 25:
        board = BoardState()
        symbol = Cell.X
        for _ in range(rng.randint(2, 7)):
            if board.is_terminal():
                break
            move = rng.choice(board.empty_cells())
            board.apply_move(move.row, move.col, symbol)
            symbol = symbol.opponent()
        if board.is_terminal():
            continue

        snapshot = board.copy()
        move = engine.choose_move(board, symbol)

        assert move in board.empty_cells()
        assert board == snapshot
        checked += 1


def test_counts_positions():
    board = BoardState.from_rows(["XOX", "XOO", "OX-"])
    engine = SearchEngine()
    engine.choose_move(board, Cell.X)
    assert engine.positions_evaluated == 1


def test_rejects_finished_board():
    engine = SearchEngine()
    with pytest.raises(ValueError):
        engine.choose_move(BoardState.from_rows(["XOX", "XOO", "OXX"]), Cell.X)
    with pytest.raises(ValueError):
        engine.choose_move(BoardState.from_rows(["XXX", "OO-", "---"]), Cell.O)


def test_rejects_empty_symbol():
    with pytest.raises(ValueError):
        SearchEngine().choose_move(BoardState(), Cell.EMPTY)


def test_board_restored_when_search_fails(monkeypatch):
    board = BoardState.from_rows(["X--", "-O-", "---"])
    snapshot = board.copy()
    real_winner = BoardState.winner
    calls = []

    def failing_winner(self):
        calls.append(1)
        if len(calls) == 50:
            raise RuntimeError("lookup failed")
        return real_winner(self)

    monkeypatch.setattr(BoardState, "winner", failing_winner)

    with pytest.raises(RuntimeError):
        SearchEngine().choose_move(board, Cell.X)

    monkeypatch.undo()
    assert board == snapshot
    assert len(board.empty_cells()) == 7
