"""
기본 클래스 모듈
- Packing: 전략 실행 결과 (원판 + 배치 조각)
- PackingStrategy: 패킹 전략 베이스 클래스
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, replace

from .cuts import compute_cuts
from .models import (
    EPSILON, BoardLayout, Item, OptimizationConfig, Orientation, PieceSpec, PlacedPiece, Shelf,
)


@dataclass
class Packing:
    """전략 1회 실행 결과"""
    boards: list[BoardLayout]
    pieces: list[PlacedPiece]

    @property
    def placed_area(self) -> int:
        return sum(p.area for p in self.pieces)


class PackingStrategy(ABC):
    """패킹 전략 베이스 클래스

    pack()은 모든 조각을 배치하면 Packing, 전략이 실패하면 None을 반환한다.
    """

    name: str = "base"
    label: str = "Base"

    def __init__(self, board_width: int, board_height: int, kerf: int = 3, allow_rotation: bool = True) -> None:
        self.board_width: int = board_width
        self.board_height: int = board_height
        self.kerf: int = kerf
        self.allow_rotation: bool = allow_rotation

    @classmethod
    def from_config(cls, config: OptimizationConfig) -> PackingStrategy:
        return cls(config.board_width, config.board_height, config.kerf, config.allow_rotation)

    @abstractmethod
    def pack(self, specs: list[PieceSpec]) -> Packing | None:
        """조각들을 원판에 배치

        Args:
            specs: 배치할 조각 사양 목록 (수량 포함)

        Returns:
            Packing 또는 전략 실패 시 None
        """
        pass

    def expand_pieces(self, specs: list[PieceSpec]) -> list[Item]:
        """조각을 개별 아이템으로 확장 (#1, #2, ...)"""
        items: list[Item] = []
        counter = 1
        for spec in specs:
            for _ in range(spec.quantity):
                items.append(Item(f"#{counter}", spec.id, spec.width, spec.height))
                counter += 1
        return items

    def orientations(self, item: Item) -> list[Orientation]:
        """가능한 배치 방향 (원래 방향 우선, 정사각형은 회전 생략)"""
        options = [Orientation(item.width, item.height, False)]
        if self.allow_rotation and item.width != item.height:
            options.append(Orientation(item.height, item.width, True))
        return options

    def board_orientations(self, item: Item) -> list[Orientation]:
        """원판에 들어가는 방향만, 높은 것 우선"""
        options = [
            o for o in self.orientations(item)
            if o.width <= self.board_width + EPSILON and o.height <= self.board_height + EPSILON
        ]
        options.sort(key=lambda o: (-o.height, -o.width))
        return options

    def new_board(self, index: int) -> BoardLayout:
        return BoardLayout(index=index, width=self.board_width, height=self.board_height)

    def utilization(self, packing: Packing) -> float:
        board_area = len(packing.boards) * self.board_width * self.board_height
        if board_area <= 0:
            return 0.0
        return packing.placed_area / board_area

    def count_cuts(self, boards: list[BoardLayout]) -> int:
        return len(compute_cuts(boards, self.kerf))

    def total_slack(self, boards: list[BoardLayout]) -> float:
        return sum(shelf.slack for board in boards for shelf in board.shelves)

    def place(self, shelf: Shelf, item: Item, orientation: Orientation, x: float,
              board_index: int, shelf_index: int) -> PlacedPiece:
        """밴드에 조각을 추가하고 used_width 갱신"""
        piece = PlacedPiece(
            id=item.id,
            spec_id=item.spec_id,
            width=orientation.width,
            height=orientation.height,
            rotated=orientation.rotated,
            x=x,
            y=shelf.y,
            board_index=board_index,
            shelf_index=shelf_index,
        )
        shelf.pieces.append(piece)
        shelf.used_width = piece.right - shelf.x
        return piece

    def finalize(self, boards: list[BoardLayout]) -> Packing:
        """밴드를 (y, x) 순으로 정렬하고 원판/밴드 인덱스를 다시 매김

        PlacedPiece는 불변이므로 인덱스가 바뀌면 새 인스턴스로 교체한다.
        """
        pieces: list[PlacedPiece] = []
        for board_index, board in enumerate(boards):
            board.index = board_index
            board.shelves.sort(key=lambda s: (s.y, s.x))
            board.column_splits = sorted(set(board.column_splits))
            for shelf_index, shelf in enumerate(board.shelves):
                shelf.pieces = [
                    p if (p.board_index, p.shelf_index) == (board_index, shelf_index)
                    else replace(p, board_index=board_index, shelf_index=shelf_index)
                    for p in sorted(shelf.pieces, key=lambda p: p.x)
                ]
                pieces.extend(shelf.pieces)
        return Packing(boards=boards, pieces=pieces)
