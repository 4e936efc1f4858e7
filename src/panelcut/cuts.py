"""절단선 재구성 모듈 - 완성된 배치에서 Guillotine 절단 목록 생성 (중복 제거)"""

from __future__ import annotations

from .models import EPSILON, BoardLayout, Cut


def compute_cuts(boards: list[BoardLayout], kerf: float) -> list[Cut]:
    """원판 배치에서 절단선 목록 생성

    원판마다 다음 순서로 생성:
    1. 열 분할선 (전체 높이 수직 절단)
    2. 각 밴드 하단 수평 절단 (원판 하단 경계는 제외)
    3. 밴드 내 인접 조각 사이 수직 절단 (kerf 중앙)
    4. 마지막 조각이 밴드 오른쪽 경계에 닿지 않으면 마감 수직 절단
    5. 밴드보다 낮은 조각의 하단 수평 trim 절단

    같은 (원판, 방향, 양 끝점) 키는 한 번만 기록된다.
    """
    cuts: list[Cut] = []
    seen: set[tuple] = set()

    def add(orientation, x1, y1, x2, y2, board_index):
        key = (board_index, orientation, x1, y1, x2, y2)
        if key in seen:
            return
        seen.add(key)
        cuts.append(Cut(len(cuts) + 1, orientation, x1, y1, x2, y2, board_index))

    for board in boards:
        b = board.index

        for x in board.column_splits:
            add('V', x, 0, x, board.height, b)

        for shelf in board.shelves:
            y = shelf.bottom
            if y < board.height - EPSILON:
                add('H', shelf.x, y, shelf.right, y, b)

        for shelf in board.shelves:
            row = sorted(shelf.pieces, key=lambda p: p.x)

            for left in row[:-1]:
                x = left.right + kerf / 2
                add('V', x, shelf.y, x, shelf.bottom, b)

            if row:
                last_right = row[-1].right
                slack = shelf.right - last_right
                if slack > EPSILON:
                    # 자투리가 kerf보다 좁으면 자투리 중앙에서 절단
                    x = last_right + min(kerf, slack) / 2
                    add('V', x, shelf.y, x, shelf.bottom, b)

            for piece in row:
                if piece.height < shelf.height - EPSILON:
                    y = piece.bottom
                    add('H', piece.x, y, piece.right, y, b)

    return cuts


def cuts_for_board(cuts: list[Cut], board_index: int) -> list[Cut]:
    return [cut for cut in cuts if cut.board_index == board_index]
