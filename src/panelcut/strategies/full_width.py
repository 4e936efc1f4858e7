"""전체 폭 Guillotine 폴백 전략 - 원판 전체 폭 밴드, 필요한 만큼 원판 추가"""

from __future__ import annotations

from ..models import (
    EPSILON, BoardLayout, Item, Objective, OptimizationConfig, Orientation, PieceSpec, PlacedPiece, Shelf,
)
from ..packing import Packing, PackingStrategy


def sort_key_for(objective: Objective):
    """목표별 정렬 키 (모두 내림차순)

    - waste: 면적 우선
    - cuts: 최대 치수 우선
    - balanced: 반둘레(w + h) 우선, 다음 면적
    """
    if objective == Objective.WASTE:
        return lambda it: (-it.area, -it.max_dim)
    if objective == Objective.CUTS:
        return lambda it: (-it.max_dim, -it.area)
    return lambda it: (-(it.width + it.height), -it.area)


class FullWidthPacker(PackingStrategy):
    """전략: 전체 폭 밴드 (fill-first)

    기존 원판의 기존 밴드 → 기존 원판의 새 밴드 → 새 원판 순으로 시도.
    단일 패스, 되돌림 없음. 원판에 안 들어가는 조각은 건너뛴다.
    """

    name = "full_width"
    label = "Full-width guillotine"

    def __init__(self, board_width: int, board_height: int, kerf: int = 3, allow_rotation: bool = True,
                 objective: Objective = Objective.BALANCED) -> None:
        super().__init__(board_width, board_height, kerf, allow_rotation)
        self.objective = objective

    @classmethod
    def from_config(cls, config: OptimizationConfig) -> FullWidthPacker:
        return cls(config.board_width, config.board_height, config.kerf, config.allow_rotation,
                   objective=config.objective)

    def pack(self, specs: list[PieceSpec]) -> Packing:
        items = sorted(self.expand_pieces(specs), key=sort_key_for(self.objective))
        boards: list[BoardLayout] = []

        for item in items:
            orientations = self.board_orientations(item)
            if not orientations:
                continue

            placed = None
            for board in boards:
                placed = self._place_in_board(board, item, orientations)
                if placed:
                    break

            if placed is None:
                board = self.new_board(len(boards))
                boards.append(board)
                self._place_in_board(board, item, orientations)

        return self.finalize(boards)

    def _next_shelf_y(self, board: BoardLayout) -> float:
        if not board.shelves:
            return 0
        return board.shelves[-1].bottom + self.kerf

    def _place_in_board(self, board: BoardLayout, item: Item,
                        orientations: list[Orientation]) -> PlacedPiece | None:
        # 1. 기존 밴드 (위에서 아래로)
        for shelf_index, shelf in enumerate(board.shelves):
            x = shelf.next_x(self.kerf)
            # 오른쪽 경계에 가장 잘 맞는 방향 우선 (남는 폭 최소)
            fitting = [
                o for o in orientations
                if o.height <= shelf.height + EPSILON and x + o.width <= shelf.right + EPSILON
            ]
            if fitting:
                orientation = min(fitting, key=lambda o: shelf.right - (x + o.width))
                return self.place(shelf, item, orientation, x, board.index, shelf_index)

        # 2. 새 전체 폭 밴드
        y = self._next_shelf_y(board)
        remaining = self.board_height - y
        if remaining <= 0:
            return None
        for orientation in orientations:
            if orientation.height <= remaining + EPSILON:
                shelf = Shelf(x=0, width=self.board_width, y=y, height=orientation.height)
                board.shelves.append(shelf)
                return self.place(shelf, item, orientation, 0, board.index, len(board.shelves) - 1)

        return None
