import matplotlib

matplotlib.use("Agg")

import pytest

from panelcut.models import Item, OptimizationConfig, PieceSpec


@pytest.fixture
def default_config():
    return OptimizationConfig()


@pytest.fixture
def mixed_specs():
    """여러 크기가 섞인 일반적인 주문"""
    return [
        PieceSpec("A", 800, 600, 4),
        PieceSpec("B", 600, 400, 4),
        PieceSpec("C", 400, 300, 6),
    ]


@pytest.fixture
def scenario_a():
    config = OptimizationConfig(
        board_width=1500,
        board_height=5000,
        kerf=3,
        allow_rotation=True,
        force_two_columns=True,
    )
    specs = [
        PieceSpec("A", 930, 750, 5),
        PieceSpec("B", 300, 800, 3),
        PieceSpec("C", 450, 600, 4),
        PieceSpec("D", 200, 300, 6),
    ]
    return config, specs


def _make_items(*sizes, spec_id="S"):
    return [Item(f"#{i + 1}", spec_id, w, h) for i, (w, h) in enumerate(sizes)]


@pytest.fixture
def make_items():
    """(w, h) 튜플들로 Item 목록을 만드는 함수"""
    return _make_items
