"""동적 다중 열 + 다중 시작(multi-start) 전략

열을 필요할 때마다 만들고, 여러 정렬 순서로 독립 실행한 뒤 가장 좋은 결과를 고른다.
"""

from __future__ import annotations
import logging
import random
from dataclasses import dataclass, field

from ..models import (
    EPSILON, BoardLayout, Item, OptimizationConfig, Orientation, PieceSpec, PlacedPiece, Shelf,
)
from ..packing import Packing, PackingStrategy

logger = logging.getLogger(__name__)

SORT_ORDERS = ('height', 'width', 'area', 'maxdim', 'random')


@dataclass
class ColumnState:
    """열 1개의 진행 상태"""
    x: float
    width: float
    shelves: list[Shelf] = field(default_factory=list)
    next_y: float = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def current_shelf(self) -> Shelf | None:
        return self.shelves[-1] if self.shelves else None


@dataclass
class RunResult:
    """정렬 순서 1개의 실행 결과"""
    order: str
    packing: Packing
    utilization: float
    cuts: int


class MultiColumnPacker(PackingStrategy):
    """전략: 동적 다중 열 / 다중 시작 (원판 1장)

    각 정렬 순서마다:
    - 생성 순서대로 첫 번째로 받아주는 열에 배치 (현재 밴드 또는 새 밴드)
    - 어느 열도 못 받으면 다음 빈 x 위치에 조각 폭만큼의 새 열 생성
    - 새 열도 안 되면 해당 실행은 실패
    """

    name = "multi_column"
    label = "Multi-column"

    def __init__(self, board_width: int, board_height: int, kerf: int = 3, allow_rotation: bool = True,
                 seed: int = 42, orders: tuple[str, ...] = SORT_ORDERS) -> None:
        super().__init__(board_width, board_height, kerf, allow_rotation)
        self.seed = seed
        self.orders = orders

    @classmethod
    def from_config(cls, config: OptimizationConfig) -> MultiColumnPacker:
        return cls(config.board_width, config.board_height, config.kerf, config.allow_rotation,
                   seed=config.random_seed)

    def pack(self, specs: list[PieceSpec]) -> Packing | None:
        items = self.expand_pieces(specs)
        if not items:
            return None

        runs = []
        for order in self.orders:
            packing = self.run(self.sort_items(items, order))
            if packing is None:
                logger.debug("multi-column run '%s' failed", order)
                continue
            runs.append(RunResult(order, packing, self.utilization(packing), self.count_cuts(packing.boards)))

        if not runs:
            return None

        best = runs[0]
        for candidate in runs[1:]:
            if self._better(candidate, best):
                best = candidate
        logger.debug("multi-column: %d/%d runs succeeded, best order '%s' (%d cuts)",
                     len(runs), len(self.orders), best.order, best.cuts)
        return best.packing

    @staticmethod
    def _better(a: RunResult, b: RunResult) -> bool:
        """사용률 높은 쪽, 같으면 절단 수 적은 쪽"""
        if abs(a.utilization - b.utilization) > EPSILON:
            return a.utilization > b.utilization
        return a.cuts < b.cuts

    def sort_items(self, items: list[Item], order: str) -> list[Item]:
        """정렬 순서별 새 목록 반환 (입력 목록은 건드리지 않음)"""
        if order == 'height':
            return sorted(items, key=lambda it: (-it.height, -it.width))
        if order == 'width':
            return sorted(items, key=lambda it: (-it.width, -it.height))
        if order == 'area':
            return sorted(items, key=lambda it: -it.area)
        if order == 'maxdim':
            return sorted(items, key=lambda it: (-it.max_dim, -it.min_dim))
        if order == 'random':
            shuffled = list(items)
            random.Random(self.seed).shuffle(shuffled)
            return shuffled
        raise ValueError(f"unknown sort order: {order}")

    def run(self, ordered: list[Item]) -> Packing | None:
        """정렬된 순서로 한 번 배치. 한 조각이라도 실패하면 None"""
        board = self.new_board(0)
        columns: list[ColumnState] = []

        for item in ordered:
            piece = self._place_in_columns(columns, item)
            if piece is None:
                piece = self._open_column(board, columns, item)
            if piece is None:
                return None

        board.shelves = [shelf for col in columns for shelf in col.shelves]
        return self.finalize([board])

    def _place_in_columns(self, columns: list[ColumnState], item: Item) -> PlacedPiece | None:
        orientations = self.orientations(item)
        for col in columns:
            usable = [o for o in orientations if o.width <= col.width + EPSILON]
            if not usable:
                continue

            # 현재 밴드
            shelf = col.current_shelf
            if shelf is not None:
                x = shelf.next_x(self.kerf)
                for o in usable:
                    if o.height <= shelf.height + EPSILON and x + o.width <= shelf.right + EPSILON:
                        return self.place(shelf, item, o, x, 0, len(col.shelves) - 1)

            # 같은 열의 새 밴드
            for o in usable:
                if col.next_y + o.height <= self.board_height + EPSILON:
                    return self._new_shelf(col, item, o)

        return None

    def _open_column(self, board: BoardLayout, columns: list[ColumnState], item: Item) -> PlacedPiece | None:
        x = 0 if not columns else max(col.right for col in columns) + self.kerf
        for o in self.orientations(item):
            if x + o.width <= self.board_width + EPSILON and o.height <= self.board_height + EPSILON:
                col = ColumnState(x=x, width=o.width)
                columns.append(col)
                if x > 0:
                    # 분할선은 이전 열의 오른쪽 경계 (2열 분할과 같은 규칙)
                    board.column_splits.append(x - self.kerf)
                return self._new_shelf(col, item, o)
        return None

    def _new_shelf(self, col: ColumnState, item: Item, orientation: Orientation) -> PlacedPiece:
        shelf = Shelf(x=col.x, width=col.width, y=col.next_y, height=orientation.height)
        col.shelves.append(shelf)
        col.next_y = shelf.bottom + self.kerf
        return self.place(shelf, item, orientation, col.x, 0, len(col.shelves) - 1)
