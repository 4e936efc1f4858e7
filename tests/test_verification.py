import pytest

from panelcut import optimize, verify_result
from panelcut.errors import LayoutError
from panelcut.models import (
    BoardLayout, Cut, OptimizationConfig, OptimizationResult, PieceSpec, PlacedPiece, Shelf,
)


def single_board_result(pieces, cuts=(), size=(1000, 1000)):
    shelf = Shelf(x=0, width=size[0], y=0, height=max(p.height for p in pieces))
    shelf.pieces = list(pieces)
    board = BoardLayout(index=0, width=size[0], height=size[1], shelves=[shelf])
    return OptimizationResult(boards=[board], pieces=list(pieces), cuts=list(cuts), utilization=0.0,
                              board_width=size[0], board_height=size[1])


def piece(pid, x, y, w=100, h=100):
    return PlacedPiece(pid, "A", w, h, False, x, y, 0, 0)


def test_valid_result_passes(default_config, mixed_specs):
    result = optimize(default_config, mixed_specs)
    assert verify_result(result, default_config, mixed_specs, strict=True) == []


def test_detects_missing_pieces():
    config = OptimizationConfig(board_width=1000, board_height=1000, kerf=3)
    result = single_board_result([piece("#1", 0, 0)])

    problems = verify_result(result, config, [PieceSpec("A", 100, 100, 2)])
    assert any("requested 2" in p for p in problems)


def test_detects_piece_outside_board():
    config = OptimizationConfig(board_width=1000, board_height=1000, kerf=3)
    result = single_board_result([piece("#1", 950, 0)])

    problems = verify_result(result, config, [PieceSpec("A", 100, 100, 1)])
    assert any("outside board" in p for p in problems)


def test_detects_overlap_and_wrong_gap():
    config = OptimizationConfig(board_width=1000, board_height=1000, kerf=3)
    result = single_board_result([piece("#1", 0, 0), piece("#2", 101, 0)])

    problems = verify_result(result, config, [PieceSpec("A", 100, 100, 2)])
    assert any("overlap" in p for p in problems)
    assert any("gap" in p for p in problems)


def test_detects_duplicate_cuts():
    config = OptimizationConfig(board_width=1000, board_height=1000, kerf=3)
    cut = Cut(1, 'H', 0, 100, 1000, 100, 0)
    result = single_board_result([piece("#1", 0, 0)], cuts=[cut, Cut(2, 'H', 0, 100, 1000, 100, 0)])

    problems = verify_result(result, config, [PieceSpec("A", 100, 100, 1)])
    assert any("duplicate cut" in p for p in problems)


def test_strict_mode_raises():
    config = OptimizationConfig(board_width=1000, board_height=1000, kerf=3)
    result = single_board_result([piece("#1", 0, 0), piece("#2", 50, 0)])

    with pytest.raises(LayoutError):
        verify_result(result, config, [PieceSpec("A", 100, 100, 2)], strict=True)
