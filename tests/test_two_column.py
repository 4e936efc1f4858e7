from panelcut.models import Orientation, PieceSpec
from panelcut.strategies import TwoColumnSplitPacker
from panelcut.strategies.two_column import ShelfSimulation


def scenario_packer(config):
    return TwoColumnSplitPacker.from_config(config)


def test_split_candidates_filtered_and_descending(make_items):
    packer = TwoColumnSplitPacker(1500, 5000, kerf=3)
    items = make_items((930, 750), (300, 1460), (200, 40))

    assert packer.split_candidates(items) == [930, 750, 300, 200, 40]


def test_columns_leave_kerf_between():
    packer = TwoColumnSplitPacker(1500, 5000, kerf=3)
    assert packer.columns(930) == ((0, 930), (933, 567))


def test_simulation_opens_new_row():
    sim = ShelfSimulation(col_width=500)
    sim = sim.simulate(Orientation(300, 200), kerf=5)
    assert (sim.total_height, sim.row_height, sim.row_remaining) == (0, 200, 200)

    sim = sim.simulate(Orientation(300, 100), kerf=5)
    assert (sim.total_height, sim.row_height, sim.row_remaining) == (205, 100, 200)
    assert sim.predicted_height == 305


def test_scenario_a_single_board(scenario_a):
    config, specs = scenario_a
    packing = scenario_packer(config).pack(specs)

    assert packing is not None
    assert len(packing.boards) == 1
    assert len(packing.pieces) == 18
    assert len(packing.boards[0].column_splits) == 1


def test_allocation_respects_column_widths(scenario_a, make_items):
    config, _ = scenario_a
    packer = scenario_packer(config)
    items = make_items((930, 750), (300, 800))

    left, right = packer.allocate(930, items)
    # 930 폭 조각은 오른쪽 열(567)에 들어갈 수 없음
    assert [it.width for it in left] == [930]
    assert [it.width for it in right] == [300]


def test_evaluate_is_repeatable_and_does_not_touch_input(scenario_a):
    config, specs = scenario_a
    packer = scenario_packer(config)
    items = packer.expand_pieces(specs)
    snapshot = list(items)

    first = packer.evaluate(930, items)
    second = packer.evaluate(930, items)

    assert first is not None
    assert first == second
    assert items == snapshot


def test_materialize_places_every_item(scenario_a):
    config, specs = scenario_a
    packer = scenario_packer(config)
    items = packer.expand_pieces(specs)

    evaluation = packer.evaluate(930, items)
    packing = packer.materialize(evaluation)

    assert len(packing.pieces) == len(items)
    assert packing.boards[0].column_splits == [930]
    assert all(p.right <= 930 or p.x >= 933 for p in packing.pieces)


def test_no_candidate_returns_none():
    # 유일한 후보 980은 (0, W-50) 범위 밖
    packer = TwoColumnSplitPacker(1000, 1000, kerf=3)
    assert packer.pack([PieceSpec("A", 980, 980, 1)]) is None


def test_column_overflow_invalidates_split():
    packer = TwoColumnSplitPacker(1000, 1000, kerf=3, allow_rotation=False)
    assert packer.pack([PieceSpec("A", 600, 600, 2)]) is None
