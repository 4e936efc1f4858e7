"""배치 결과 검증 - 보존, 경계, 겹침, kerf 간격, 절단선 중복"""

from __future__ import annotations
from collections import Counter
from itertools import combinations

from .errors import LayoutError
from .models import EPSILON, OptimizationConfig, OptimizationResult, PieceSpec

# 소수점 좌표(kerf/2) 비교용
TOLERANCE = 1e-3


def _overlap(a, b, kerf: float) -> bool:
    """kerf만큼 넓힌 a가 b와 내부적으로 겹치는지"""
    gap = kerf - TOLERANCE if kerf > 0 else -TOLERANCE
    return (a.x < b.right + gap and b.x < a.right + gap and
            a.y < b.bottom + gap and b.y < a.bottom + gap)


def verify_result(result: OptimizationResult, config: OptimizationConfig,
                  specs: list[PieceSpec], strict: bool = False) -> list[str]:
    """결과가 배치 불변식을 지키는지 검사

    Returns:
        위반 사항 목록 (비어 있으면 통과)

    Raises:
        LayoutError: strict=True이고 위반이 있을 때
    """
    problems: list[str] = []
    kerf = config.kerf

    # 보존: 배치 + 미배치 == 요청 수량
    placed = Counter(p.spec_id for p in result.pieces)
    unplaced = Counter(u.spec_id for u in result.unplaced)
    requested = Counter()
    for spec in specs:
        if spec.is_valid:
            requested[spec.id] += spec.quantity
    for spec_id, qty in requested.items():
        if placed[spec_id] + unplaced[spec_id] != qty:
            problems.append(
                f"{spec_id}: placed {placed[spec_id]} + unplaced {unplaced[spec_id]} != requested {qty}"
            )

    # 경계
    for p in result.pieces:
        if (p.x < -EPSILON or p.y < -EPSILON or
                p.right > config.board_width + TOLERANCE or p.bottom > config.board_height + TOLERANCE):
            problems.append(f"{p.id}: outside board at ({p.x}, {p.y}) {p.width}x{p.height}")

    # 겹침 (같은 원판)
    by_board: dict[int, list] = {}
    for p in result.pieces:
        by_board.setdefault(p.board_index, []).append(p)
    for board_pieces in by_board.values():
        for a, b in combinations(board_pieces, 2):
            if _overlap(a, b, kerf):
                problems.append(f"{a.id} and {b.id} overlap (kerf {kerf})")

    # kerf 간격: 밴드 내 인접 조각, 같은 열의 연속 밴드
    for board in result.boards:
        for shelf in board.shelves:
            row = sorted(shelf.pieces, key=lambda p: p.x)
            for left, right in zip(row, row[1:]):
                if abs(right.x - left.right - kerf) > TOLERANCE:
                    problems.append(f"{left.id} -> {right.id}: gap {right.x - left.right} != kerf {kerf}")

        columns: dict[tuple, list] = {}
        for shelf in board.shelves:
            columns.setdefault((shelf.x, shelf.width), []).append(shelf)
        for shelves in columns.values():
            shelves = sorted(shelves, key=lambda s: s.y)
            for upper, lower in zip(shelves, shelves[1:]):
                if abs(lower.y - upper.bottom - kerf) > TOLERANCE:
                    problems.append(
                        f"board {board.index}: shelves at y={upper.y} and y={lower.y} not separated by kerf"
                    )

    # 절단선 중복
    keys = Counter(cut.key for cut in result.cuts)
    for key, count in keys.items():
        if count > 1:
            problems.append(f"duplicate cut {key}")

    if strict and problems:
        raise LayoutError(problems[0])
    return problems
