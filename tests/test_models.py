import dataclasses

import pytest

from panelcut.models import (
    BoardLayout, Cut, Objective, OptimizationConfig, OptimizationResult, PieceSpec, PlacedPiece, Shelf,
)


def test_piece_spec_validity():
    assert PieceSpec("A", 100, 200, 1).is_valid
    assert not PieceSpec("A", 0, 200, 1).is_valid
    assert not PieceSpec("A", 100, -5, 1).is_valid
    assert not PieceSpec("A", 100, 200, 0).is_valid


def test_config_defaults_and_immutability():
    config = OptimizationConfig()
    assert (config.board_width, config.board_height, config.kerf) == (2800, 2070, 3)
    assert config.objective == Objective.BALANCED
    assert config.is_valid
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.kerf = 5


def test_config_invalid_values():
    assert not OptimizationConfig(board_width=0).is_valid
    assert not OptimizationConfig(board_height=-1).is_valid
    assert not OptimizationConfig(kerf=-1).is_valid


def test_objective_accepts_plain_strings():
    assert Objective("waste") is Objective.WASTE
    assert Objective.CUTS == "cuts"


def test_placed_piece_edges():
    piece = PlacedPiece("#1", "A", 300, 200, False, 10, 20, 0, 0)
    assert piece.right == 310
    assert piece.bottom == 220
    assert piece.area == 60000
    with pytest.raises(dataclasses.FrozenInstanceError):
        piece.x = 0


def test_shelf_next_x_and_slack():
    shelf = Shelf(x=100, width=500, y=0, height=200)
    assert shelf.next_x(3) == 100
    shelf.pieces.append(PlacedPiece("#1", "A", 200, 200, False, 100, 0, 0, 0))
    shelf.used_width = 200
    assert shelf.next_x(3) == 303
    assert shelf.slack == 300


def test_cut_key():
    cut = Cut(1, 'V', 10, 0, 10, 100, 2)
    assert cut.key == (2, 'V', 10, 0, 10, 100)
    assert cut.length == 100


def test_board_area_and_pieces():
    shelf = Shelf(x=0, width=500, y=0, height=200)
    shelf.pieces.append(PlacedPiece("#1", "A", 200, 200, False, 0, 0, 0, 0))
    board = BoardLayout(index=0, width=500, height=400, shelves=[shelf])
    assert board.area == 200000
    assert [p.id for p in board.pieces] == ["#1"]


def test_result_summary():
    result = OptimizationResult(boards=[], pieces=[], cuts=[], utilization=0.0,
                                board_width=100, board_height=100)
    assert result.summary() == {
        'utilization': 0.0,
        'board_count': 0,
        'cut_count': 0,
        'piece_count': 0,
        'unplaced_count': 0,
    }
    assert result.to_dict()['boards'] == []
