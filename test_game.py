"""
Tests for the Othello board engine.
"""
import numpy as np
import pytest

from othello.game import Board, ConfigurationError, Coord, ErrorKind, ResultError


def owner(board, coord):
    cell = board.get_cell(coord).unwrap()
    return cell.player.id if cell else None


def test_initial_board():
    """Test the initial board setup."""
    board = Board()

    assert (board.width, board.height) == (8, 8)
    assert owner(board, (4, 4)) == "W"
    assert owner(board, (5, 4)) == "B"
    assert owner(board, (5, 5)) == "W"
    assert owner(board, (4, 5)) == "B"
    assert len(list(board.cells())) == 4


def test_first_player():
    board = Board()
    assert board.get_current_player().unwrap().id == "B"

    board = Board(players=["W", "B"])
    assert board.get_current_player().unwrap().id == "W"


def test_valid_moves():
    """Test valid move generation."""
    board = Board()
    valid_moves = board.get_next_valid_coords().unwrap()

    expected_moves = {(3, 4), (4, 3), (5, 6), (6, 5)}
    assert set(valid_moves) == expected_moves
    assert len(valid_moves) == 4


def test_occupied_cell_rejected():
    board = Board()
    before = board.get_board_state()

    result = board.next((4, 4))

    assert not result
    assert result.error is ErrorKind.NOT_VALID_COORD
    assert np.array_equal(board.get_board_state(), before)
    assert board.turns == ()
    assert board.get_current_player().unwrap().id == "B"


def test_empty_cell_without_capture_rejected():
    board = Board()
    assert board.next((1, 1)).error is ErrorKind.NOT_VALID_COORD
    assert board.get_cell((1, 1)).unwrap() is None


def test_out_of_range_move_rejected():
    board = Board()
    assert board.next((0, 4)).error is ErrorKind.NOT_VALID_COORD
    assert board.next((9, 9)).error is ErrorKind.NOT_VALID_COORD


def test_make_move():
    """Test making a move and capturing a piece."""
    board = Board()

    assert board.next((3, 4))
    assert owner(board, (3, 4)) == "B"
    assert owner(board, (4, 4)) == "B"
    assert owner(board, (5, 4)) == "B"
    # Untouched pieces stay put
    assert owner(board, (5, 5)) == "W"
    assert owner(board, (4, 5)) == "B"

    assert board.get_current_player().unwrap().id == "W"
    assert len(board.turns) == 1
    turn = board.turns[0]
    assert turn.player.id == "B"
    assert turn.coord == Coord(3, 4)


def test_legal_moves_follow_current_player():
    board = Board()
    board.next((3, 4)).unwrap()

    # White's replies to the perpendicular opening
    assert set(board.get_next_valid_coords().unwrap()) == {(3, 3), (3, 5), (5, 3)}

    board.next((3, 5)).unwrap()
    assert owner(board, (3, 5)) == "W"
    assert owner(board, (4, 5)) == "W"
    assert board.get_current_player().unwrap().id == "B"


def test_capture_in_several_directions():
    """A single move flips sandwiched pieces along every qualifying line."""
    board = Board()
    board.next((3, 4)).unwrap()   # B
    board.next((3, 5)).unwrap()   # W, flips (4,5)

    # B at (5,6) sandwiches (5,5) northwards and (4,5) north-westwards
    assert Coord(5, 6) in board.get_next_valid_coords().unwrap()
    board.next((5, 6)).unwrap()

    for coord in [(5, 6), (5, 5), (4, 5), (3, 4), (4, 4), (5, 4)]:
        assert owner(board, coord) == "B"
    assert owner(board, (3, 5)) == "W"


def test_no_capture_past_empty_or_edge():
    """Opposing pieces followed by an empty cell or the edge are not captured."""
    board = Board(width=4, height=4)
    # 4x4 seeds (2,2)=W (3,2)=B (2,3)=B (3,3)=W
    assert owner(board, (2, 2)) == "W"
    board.next((1, 2)).unwrap()   # B flips (2,2)
    assert owner(board, (2, 2)) == "B"

    # W at (3,1) flips (3,2) southwards; the south-west line through (2,2)
    # ends in an empty cell, so (2,2) stays black
    board.next((3, 1)).unwrap()
    assert owner(board, (3, 2)) == "W"
    assert owner(board, (2, 2)) == "B"

    # B at (4,2) flips (3,2) westwards; the north-west line through (3,1)
    # runs off the board and the south-west line through (3,3) ends empty
    board.next((4, 2)).unwrap()
    assert owner(board, (3, 2)) == "B"
    assert owner(board, (3, 1)) == "W"
    assert owner(board, (3, 3)) == "W"


def test_idempotent_queries():
    board = Board()
    first = board.get_next_valid_coords().unwrap()
    assert board.get_next_valid_coords().unwrap() == first
    assert board.get_cell((4, 4)) == board.get_cell((4, 4))

    board.next((3, 4)).unwrap()
    second = board.get_next_valid_coords().unwrap()
    assert second != first
    assert board.get_next_valid_coords().unwrap() == second


@pytest.mark.parametrize("coord", [(0, 1), (1, 0), (9, 1), (1, 9), (0, 0), (9, 9)])
def test_get_cell_out_of_range(coord):
    board = Board()
    result = board.get_cell(coord)
    assert result.error is ErrorKind.COORD_OUT_OF_RANGE
    with pytest.raises(ResultError):
        result.unwrap()


def test_get_cell_corners_in_range():
    board = Board()
    for coord in [(1, 1), (8, 1), (1, 8), (8, 8)]:
        assert board.get_cell(coord).ok
        assert board.get_cell(coord).unwrap() is None


def test_three_player_rotation():
    board = Board(players=["R", "G", "B"])

    assert (board.width, board.height) == (9, 9)
    # 3x3 starting block with ownership rotating along rows and columns
    assert owner(board, (4, 4)) == "G"
    assert owner(board, (5, 4)) == "B"
    assert owner(board, (6, 4)) == "R"
    assert owner(board, (4, 5)) == "B"
    assert len(list(board.cells())) == 9

    order = []
    for _ in range(4):
        player = board.get_current_player().unwrap()
        order.append(player.id)
        move = board.get_next_valid_coords().unwrap()[0]
        board.next(move).unwrap()
    assert order == ["R", "G", "B", "R"]


def test_configuration_errors():
    with pytest.raises(ConfigurationError):
        Board(players=["B"])
    with pytest.raises(ConfigurationError):
        Board(players=["B", "B"])
    with pytest.raises(ConfigurationError):
        Board(width=1, height=1)
    with pytest.raises(ConfigurationError):
        Board(width=0, height=8)
    # Configuration errors are also ValueErrors
    with pytest.raises(ValueError):
        Board(players=[])


def test_reduced_variant():
    board = Board(captures=False)

    valid = board.get_next_valid_coords().unwrap()
    assert len(valid) == 60
    assert Coord(1, 1) in valid

    assert board.next((4, 4)).error is ErrorKind.CELL_OCCUPIED
    result = board.next((0, 1))
    assert result.error is ErrorKind.CELL_GET_ERROR
    assert result.cause.error is ErrorKind.COORD_OUT_OF_RANGE

    # Would flip (4,4) under the capture rule
    board.next((3, 4)).unwrap()
    assert owner(board, (3, 4)) == "B"
    assert owner(board, (4, 4)) == "W"
    assert board.get_current_player().unwrap().id == "W"

    # Any empty cell is playable
    board.next((1, 1)).unwrap()
    assert owner(board, (1, 1)) == "W"
    assert len(board.get_next_valid_coords().unwrap()) == 58


def test_board_state_array():
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8)
    assert state[3, 3] == 2      # W at (4,4)
    assert state[3, 4] == 1      # B at (5,4)
    assert np.sum(state == 0) == 60


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.next((3, 4)).unwrap()

    assert owner(board, (4, 4)) == "W"
    assert board.turns == ()
    assert owner(clone, (4, 4)) == "B"


def test_str():
    board = Board()
    lines = str(board).splitlines()
    assert lines[3] == ". . . W B . . ."
    assert lines[-1] == "Current player: B"
