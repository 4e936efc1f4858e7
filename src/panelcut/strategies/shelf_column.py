"""선반(shelf) 패킹 전략 - NFDH (Next-Fit Decreasing Height)"""

from __future__ import annotations
from dataclasses import dataclass, field

from ..models import EPSILON, Item, Orientation, PieceSpec, PlacedPiece, Shelf
from ..packing import Packing, PackingStrategy


@dataclass
class ColumnPacking:
    """열 1개 패킹 결과. 실패하면 success=False, 나머지는 비어 있음"""
    success: bool
    shelves: list[Shelf] = field(default_factory=list)
    placed: list[PlacedPiece] = field(default_factory=list)
    used_height: float = 0

    @classmethod
    def failed(cls) -> ColumnPacking:
        return cls(success=False)


class ShelfColumnPacker(PackingStrategy):
    """전략: 단일 열 NFDH

    pack_column()은 열 분할 전략들이 공유하는 핵심 루틴이다.
    all-or-nothing: 한 조각이라도 못 넣으면 전체 실패.
    """

    name = "shelf_column"
    label = "Single column"

    def pack(self, specs: list[PieceSpec]) -> Packing | None:
        items = self.expand_pieces(specs)
        board = self.new_board(0)
        column = self.pack_column(0, self.board_width, items, start_y=0, board_index=0)
        if not column.success:
            return None
        board.shelves = column.shelves
        return self.finalize([board])

    def best_column_orientation(self, item: Item, col_width: float, max_height: float) -> Orientation | None:
        """열 너비에 맞는 방향 중 가장 높은 것 (동률이면 max(w, h) 큰 쪽)"""
        feasible = [
            o for o in self.orientations(item)
            if o.width <= col_width + EPSILON and o.height <= max_height + EPSILON
        ]
        if not feasible:
            return None
        return max(feasible, key=lambda o: (o.height, max(o.width, o.height)))

    def pack_column(self, col_x: float, col_width: float, items: list[Item],
                    start_y: float = 0, board_index: int = 0) -> ColumnPacking:
        """열 [col_x, col_x + col_width) 안에 items를 밴드 단위로 배치"""
        remaining_height = self.board_height - start_y
        oriented: list[tuple[Item, Orientation]] = []
        for item in items:
            orientation = self.best_column_orientation(item, col_width, remaining_height)
            if orientation is None:
                return ColumnPacking.failed()
            oriented.append((item, orientation))

        # 높이 내림차순, 동률이면 max 치수 내림차순
        oriented.sort(key=lambda pair: (-pair[1].height, -max(pair[1].width, pair[1].height)))

        shelves: list[Shelf] = []
        placed: list[PlacedPiece] = []
        col_right = col_x + col_width
        y = start_y

        while oriented:
            shelf_height = oriented[0][1].height
            if y + shelf_height > self.board_height + EPSILON:
                return ColumnPacking.failed()

            # 밴드 높이 이하인 조각 전부 추출 (head만이 아니라)
            candidates = [pair for pair in oriented if pair[1].height <= shelf_height]
            oriented = [pair for pair in oriented if pair[1].height > shelf_height]

            shelf = Shelf(x=col_x, width=col_width, y=y, height=shelf_height)
            pushed_back = []
            for item, orientation in candidates:
                x = shelf.next_x(self.kerf)
                if x + orientation.width <= col_right + EPSILON:
                    placed.append(self.place(shelf, item, orientation, x, board_index, len(shelves)))
                else:
                    pushed_back.append((item, orientation))

            # 못 넣은 조각은 정렬 순서 그대로 남은 목록 앞에 되돌림
            oriented = pushed_back + oriented
            shelves.append(shelf)

            # 밴드 뒤 kerf까지 원판 안에 있어야 함
            y = y + shelf_height + self.kerf
            if y > self.board_height + EPSILON:
                return ColumnPacking.failed()

        used_height = shelves[-1].bottom - start_y if shelves else 0
        return ColumnPacking(success=True, shelves=shelves, placed=placed, used_height=used_height)
