"""
데이터 모델 모듈
- PieceSpec: 입력 조각 사양 (불변)
- PlacedPiece: 배치된 개별 조각 (불변)
- Shelf: 열(column) 안의 수평 밴드
- BoardLayout: 원판 한 장의 배치 결과
- Cut: 절단선 (불변)
- OptimizationConfig / OptimizationResult: 엔진 입출력 값 객체
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from enum import Enum

# 모든 치수 비교에 쓰는 허용 오차
EPSILON = 1e-6


class Objective(str, Enum):
    """최적화 목표"""
    WASTE = "waste"
    CUTS = "cuts"
    BALANCED = "balanced"


@dataclass(frozen=True)
class PieceSpec:
    """조각 사양 (id, 너비, 높이, 수량)"""
    id: str
    width: int
    height: int
    quantity: int = 1

    @property
    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0 and self.quantity > 0


@dataclass(frozen=True)
class Item:
    """패킹 대상 개별 인스턴스 (PieceSpec 수량만큼 확장)"""
    id: str
    spec_id: str
    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def max_dim(self) -> int:
        return max(self.width, self.height)

    @property
    def min_dim(self) -> int:
        return min(self.width, self.height)


@dataclass(frozen=True)
class Orientation:
    """배치 방향 후보 (회전 반영 후 크기)"""
    width: int
    height: int
    rotated: bool = False


@dataclass(frozen=True)
class PlacedPiece:
    """배치된 조각. 좌상단 원점 기준 좌표, 회전 반영 후 크기"""
    id: str
    spec_id: str
    width: int
    height: int
    rotated: bool
    x: float
    y: float
    board_index: int
    shelf_index: int

    @property
    def area(self) -> int:
        return self.width * self.height

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Shelf:
    """열 안의 수평 밴드 (strip)

    height는 밴드에서 가장 높은 조각, used_width는 x 기준 가장 오른쪽 점유 경계
    """
    x: float
    width: float
    y: float
    height: int
    pieces: list[PlacedPiece] = field(default_factory=list)
    used_width: float = 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def slack(self) -> float:
        return self.width - self.used_width

    def next_x(self, kerf: float) -> float:
        """다음 조각이 놓일 x 좌표"""
        if not self.pieces:
            return self.x
        return self.x + self.used_width + kerf


@dataclass
class BoardLayout:
    """원판 한 장의 배치"""
    index: int
    width: int
    height: int
    shelves: list[Shelf] = field(default_factory=list)
    column_splits: list[float] = field(default_factory=list)
    utilization: float = 0.0

    @property
    def pieces(self) -> list[PlacedPiece]:
        return [piece for shelf in self.shelves for piece in shelf.pieces]

    @property
    def area(self) -> int:
        return self.width * self.height


@dataclass(frozen=True)
class Cut:
    """절단선. orientation은 'H'(수평) 또는 'V'(수직)"""
    id: int
    orientation: str
    x1: float
    y1: float
    x2: float
    y2: float
    board_index: int

    @property
    def key(self) -> tuple:
        return (self.board_index, self.orientation, self.x1, self.y1, self.x2, self.y2)

    @property
    def length(self) -> float:
        return abs(self.x2 - self.x1) + abs(self.y2 - self.y1)


@dataclass(frozen=True)
class OptimizationConfig:
    """엔진 설정 값 객체 (기본값: 2800×2070 원판, 톱날 3mm)"""
    board_width: int = 2800
    board_height: int = 2070
    kerf: int = 3
    allow_rotation: bool = True
    force_two_columns: bool = False
    objective: Objective = Objective.BALANCED
    use_advanced_optimizer: bool = False
    random_seed: int = 42

    @property
    def is_valid(self) -> bool:
        return self.board_width > 0 and self.board_height > 0 and self.kerf >= 0


@dataclass(frozen=True)
class UnplacedPiece:
    """배치하지 못한 조각 인스턴스"""
    spec_id: str
    width: int
    height: int
    reason: str


@dataclass(frozen=True)
class HeuristicTrace:
    """시도한 전략 1개의 결과 요약"""
    id: str
    label: str
    utilization: float
    boards: int
    cuts: int
    selected: bool = False
    succeeded: bool = True


@dataclass
class OptimizationResult:
    """최적화 결과"""
    boards: list[BoardLayout]
    pieces: list[PlacedPiece]
    cuts: list[Cut]
    utilization: float
    board_width: int
    board_height: int
    unplaced: list[UnplacedPiece] = field(default_factory=list)
    strategy: str | None = None
    heuristics: list[HeuristicTrace] = field(default_factory=list)

    @property
    def board_count(self) -> int:
        return len(self.boards)

    @property
    def cut_count(self) -> int:
        return len(self.cuts)

    @property
    def piece_count(self) -> int:
        return len(self.pieces)

    def summary(self) -> dict:
        """기록/저장용 요약 지표"""
        return {
            'utilization': self.utilization,
            'board_count': self.board_count,
            'cut_count': self.cut_count,
            'piece_count': self.piece_count,
            'unplaced_count': len(self.unplaced),
        }

    def to_dict(self) -> dict:
        """직렬화용 dict 변환 (렌더링/내보내기 협력자용)"""
        return {
            **self.summary(),
            'board_width': self.board_width,
            'board_height': self.board_height,
            'strategy': self.strategy,
            'boards': [asdict(board) for board in self.boards],
            'pieces': [asdict(piece) for piece in self.pieces],
            'cuts': [asdict(cut) for cut in self.cuts],
            'unplaced': [asdict(u) for u in self.unplaced],
            'heuristics': [asdict(h) for h in self.heuristics],
        }
