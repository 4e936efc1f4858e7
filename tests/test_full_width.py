import pytest

from panelcut.models import Objective, OptimizationConfig, PieceSpec
from panelcut.strategies import FullWidthPacker
from panelcut.strategies.full_width import sort_key_for


@pytest.mark.parametrize("objective, expected", [
    (Objective.WASTE, ["#2", "#1", "#3"]),
    (Objective.CUTS, ["#1", "#2", "#3"]),
    (Objective.BALANCED, ["#2", "#1", "#3"]),
])
def test_sort_key_per_objective(make_items, objective, expected):
    # #1: 길지만 가늘다, #2: 면적 최대, #3: 작다
    items = make_items((900, 100), (500, 500), (100, 100))
    assert [it.id for it in sorted(items, key=sort_key_for(objective))] == expected


def test_fills_existing_board_before_new_one():
    packer = FullWidthPacker(1000, 1000, kerf=0, allow_rotation=False)
    packing = packer.pack([
        PieceSpec("A", 1000, 600, 1),
        PieceSpec("B", 1000, 500, 1),
        PieceSpec("C", 300, 300, 1),
    ])

    assert len(packing.boards) == 2
    by_spec = {p.spec_id: p for p in packing.pieces}
    assert by_spec["A"].board_index == 0
    assert by_spec["B"].board_index == 1
    # C는 두 번째 원판이 아니라 첫 번째 원판의 남은 밴드로
    assert by_spec["C"].board_index == 0
    assert by_spec["C"].y == 600


def test_existing_shelf_prefers_tightest_orientation():
    packer = FullWidthPacker(1000, 1000, kerf=0, allow_rotation=True)
    packing = packer.pack([PieceSpec("P", 600, 500, 1), PieceSpec("Q", 500, 300, 1)])

    by_spec = {p.spec_id: p for p in packing.pieces}
    p, q = by_spec["P"], by_spec["Q"]
    assert p.rotated and (p.width, p.height) == (500, 600)
    assert not q.rotated
    assert (q.x, q.y) == (500, 0)
    assert len(packing.boards[0].shelves) == 1


def test_new_shelf_starts_after_kerf():
    packer = FullWidthPacker(1000, 1000, kerf=3, allow_rotation=False)
    packing = packer.pack([PieceSpec("A", 1000, 300, 2)])

    shelves = packing.boards[0].shelves
    assert [s.y for s in shelves] == [0, 303]
    assert all(s.x == 0 and s.width == 1000 for s in shelves)


def test_rotation_used_when_only_rotated_fits():
    packer = FullWidthPacker(1000, 2000, kerf=3, allow_rotation=True)
    packing = packer.pack([PieceSpec("D", 1500, 800, 1)])

    piece = packing.pieces[0]
    assert piece.rotated
    assert (piece.width, piece.height) == (800, 1500)


def test_oversized_item_is_skipped():
    packer = FullWidthPacker(1000, 1000, kerf=3, allow_rotation=False)
    packing = packer.pack([PieceSpec("X", 1200, 100, 1), PieceSpec("A", 200, 100, 1)])

    assert [p.spec_id for p in packing.pieces] == ["A"]


def test_from_config_carries_objective():
    config = OptimizationConfig(objective=Objective.CUTS, kerf=5)
    packer = FullWidthPacker.from_config(config)

    assert packer.objective == Objective.CUTS
    assert packer.kerf == 5
    assert (packer.board_width, packer.board_height) == (2800, 2070)
