"""2열 분할 탐색 전략 - 수직 분할 위치 후보를 모두 평가해 최적 분할 선택"""

from __future__ import annotations
import logging
from dataclasses import dataclass

from ..models import EPSILON, BoardLayout, Item, Orientation, PieceSpec
from ..packing import Packing
from .shelf_column import ShelfColumnPacker

logger = logging.getLogger(__name__)

# 오른쪽 열 최소 여유 (mm)
MIN_RIGHT_MARGIN = 50


@dataclass
class ShelfSimulation:
    """배치 없이 열의 밴드 상태만 추적하는 시뮬레이터"""
    col_width: float
    total_height: float = 0
    row_height: float = 0
    row_remaining: float | None = None

    def __post_init__(self):
        if self.row_remaining is None:
            self.row_remaining = self.col_width

    def simulate(self, orientation: Orientation, kerf: float) -> ShelfSimulation:
        """조각 1개를 추가한 다음 상태 (자신은 변경하지 않음)"""
        total, row_h, remaining = self.total_height, self.row_height, self.row_remaining
        need = orientation.width if remaining == self.col_width else orientation.width + kerf
        if need <= remaining + EPSILON:
            remaining -= need
            row_h = max(row_h, orientation.height)
        else:
            if row_h > 0:
                total += row_h + kerf
            row_h = orientation.height
            remaining = self.col_width - orientation.width
        return ShelfSimulation(self.col_width, total, row_h, remaining)

    @property
    def predicted_height(self) -> float:
        return self.total_height + self.row_height


@dataclass(frozen=True)
class SplitEvaluation:
    """분할 후보 1개의 평가 결과"""
    split_x: int
    left_items: tuple[Item, ...]
    right_items: tuple[Item, ...]
    cuts: int
    slack: float
    utilization: float

    @property
    def score(self) -> tuple:
        # 절단 수 ↑, 여유 폭 ↑, 사용률 ↓ 순 (작을수록 좋음)
        return (self.cuts, self.slack, -self.utilization)


class TwoColumnSplitPacker(ShelfColumnPacker):
    """전략: 원판 1장 / 2열

    분할 후보마다 evaluate()로 점수를 매기고, 최고 후보만 materialize()로 다시 배치한다.
    두 함수 모두 item 목록의 복사본만 다룬다.
    """

    name = "two_column"
    label = "Two columns"

    def pack(self, specs: list[PieceSpec]) -> Packing | None:
        items = self.expand_pieces(specs)
        if not items:
            return None

        evaluations = []
        for split_x in self.split_candidates(items):
            evaluation = self.evaluate(split_x, items)
            if evaluation is not None:
                evaluations.append(evaluation)

        if not evaluations:
            logger.debug("two-column search: no valid split for %d items", len(items))
            return None

        best = min(evaluations, key=lambda e: e.score)
        logger.debug(
            "two-column search: %d valid splits, best x=%s (cuts=%d, slack=%s)",
            len(evaluations), best.split_x, best.cuts, best.slack,
        )
        return self.materialize(best)

    def split_candidates(self, items: list[Item]) -> list[int]:
        """조각 너비/높이 합집합 중 (0, W-50) 범위, 큰 값부터"""
        values = set()
        for item in items:
            values.add(item.width)
            values.add(item.height)
        return sorted(
            (v for v in values
             if 0 < v < self.board_width - MIN_RIGHT_MARGIN and self.board_width - v - self.kerf > 0),
            reverse=True,
        )

    def columns(self, split_x: int) -> tuple[tuple[float, float], tuple[float, float]]:
        """(왼쪽 열 x, 너비), (오른쪽 열 x, 너비)"""
        return (0, split_x), (split_x + self.kerf, self.board_width - split_x - self.kerf)

    def best_orientation(self, item: Item, col_width: float) -> Orientation | None:
        return self.best_column_orientation(item, col_width, self.board_height)

    def allocate(self, split_x: int, items: list[Item]) -> tuple[list[Item], list[Item]] | None:
        """탐욕적 좌/우 열 할당. 두 열 모두 못 받는 조각이 있으면 None"""
        (_, left_w), (_, right_w) = self.columns(split_x)
        ordered = sorted(items, key=lambda it: -it.max_dim)

        left: list[Item] = []
        right: list[Item] = []
        sim_left = ShelfSimulation(left_w)
        sim_right = ShelfSimulation(right_w)

        for item in ordered:
            fit_left = self.best_orientation(item, left_w)
            fit_right = self.best_orientation(item, right_w)

            if fit_left and not fit_right:
                left.append(item)
                sim_left = sim_left.simulate(fit_left, self.kerf)
            elif fit_right and not fit_left:
                right.append(item)
                sim_right = sim_right.simulate(fit_right, self.kerf)
            elif fit_left and fit_right:
                next_left = sim_left.simulate(fit_left, self.kerf)
                next_right = sim_right.simulate(fit_right, self.kerf)
                if next_left.predicted_height <= next_right.predicted_height:
                    left.append(item)
                    sim_left = next_left
                else:
                    right.append(item)
                    sim_right = next_right
            else:
                return None

        return left, right

    def _pack_split(self, split_x: int, left: list[Item], right: list[Item]) -> BoardLayout | None:
        (left_x, left_w), (right_x, right_w) = self.columns(split_x)

        left_pack = self.pack_column(left_x, left_w, list(left), start_y=0, board_index=0)
        if not left_pack.success:
            return None
        right_pack = self.pack_column(right_x, right_w, list(right), start_y=0, board_index=0)
        if not right_pack.success:
            return None

        board = self.new_board(0)
        board.column_splits = [split_x]
        board.shelves = sorted(left_pack.shelves + right_pack.shelves, key=lambda s: (s.y, s.x))
        return board

    def evaluate(self, split_x: int, items: list[Item]) -> SplitEvaluation | None:
        """분할 후보 평가 (배치는 버리고 점수만 반환)"""
        allocation = self.allocate(split_x, list(items))
        if allocation is None:
            return None
        left, right = allocation

        board = self._pack_split(split_x, left, right)
        if board is None:
            return None
        if len(board.pieces) != len(items):
            return None

        placed_area = sum(p.area for p in board.pieces)
        return SplitEvaluation(
            split_x=split_x,
            left_items=tuple(left),
            right_items=tuple(right),
            cuts=self.count_cuts([board]),
            slack=self.total_slack([board]),
            utilization=placed_area / (self.board_width * self.board_height),
        )

    def materialize(self, evaluation: SplitEvaluation) -> Packing | None:
        """선택된 분할을 다시 배치 (evaluate와 같은 결과)"""
        board = self._pack_split(evaluation.split_x, list(evaluation.left_items), list(evaluation.right_items))
        if board is None:
            return None
        return self.finalize([board])
