"""시각화 모듈 - 배치 결과를 그림/텍스트 보고서로 출력 (결과는 읽기만 함)"""

from __future__ import annotations

import matplotlib.pyplot as plt
import matplotlib.patches as patches
from matplotlib.patches import Rectangle as MPLRect

from .cuts import cuts_for_board
from .models import OptimizationResult, PieceSpec


def spec_colors(specs: list[PieceSpec]) -> dict:
    """조각 사양 id별 색상"""
    spec_ids = sorted({spec.id for spec in specs})
    return {spec_id: plt.cm.Set3(i / max(len(spec_ids), 1)) for i, spec_id in enumerate(spec_ids)}


def print_report(result: OptimizationResult) -> None:
    """원판별 배치/절단 보고서 출력"""
    for board in result.boards:
        board_cuts = cuts_for_board(result.cuts, board.index)
        print(f"\n{'='*60}")
        print(f"원판 {board.index + 1}")
        print(f"배치된 조각: {len(board.pieces)}개")
        print(f"절단 횟수: {len(board_cuts)}회")
        if board.column_splits:
            print(f"열 분할: {', '.join(f'{x:.0f}' for x in board.column_splits)}mm")

        print("\n절단 목록:")
        for cut in board_cuts:
            direction = "수평" if cut.orientation == 'H' else "수직"
            print(f"  {cut.id:3d}. {direction} ({cut.x1:.1f},{cut.y1:.1f}) → ({cut.x2:.1f},{cut.y2:.1f}) 길이 {cut.length:.0f}mm")

        print("\n조각 위치:")
        for piece in board.pieces:
            rotated = " (회전)" if piece.rotated else ""
            print(f"  [{piece.id}] {piece.spec_id}: ({piece.x:.0f},{piece.y:.0f}) "
                  f"{piece.width}×{piece.height}{rotated}")

        print(f"\n  사용률: {board.utilization * 100:.1f}%")

    print(f"\n{'='*60}")
    print(f"전략: {result.strategy or '-'}")
    print(f"총 사용 원판: {result.board_count}장")
    print(f"총 절단 횟수: {result.cut_count}회")
    print(f"전체 사용률: {result.utilization * 100:.1f}%")
    if result.unplaced:
        print(f"⚠️  배치하지 못한 조각: {len(result.unplaced)}개")
        for u in result.unplaced:
            print(f"  - {u.spec_id} {u.width}×{u.height}: {u.reason}")


def render_result(result: OptimizationResult, specs: list[PieceSpec], output_path=None, dpi: int = 150):
    """원판별 subplot에 조각과 절단선을 그림

    Args:
        result: 최적화 결과
        specs: 원본 조각 사양 (색상/범례용)
        output_path: 지정하면 PNG로 저장

    Returns:
        matplotlib Figure (원판이 없으면 None)
    """
    if not result.boards:
        return None

    colors = spec_colors(specs)
    n = len(result.boards)
    aspect = result.board_height / result.board_width
    fig, axes = plt.subplots(1, n, figsize=(5 * n, 5 * aspect + 1))
    if n == 1:
        axes = [axes]

    for ax, board in zip(axes, result.boards):
        ax.add_patch(MPLRect((0, 0), board.width, board.height,
                             fill=False, edgecolor='black', linewidth=2))

        for piece in board.pieces:
            ax.add_patch(MPLRect((piece.x, piece.y), piece.width, piece.height,
                                 linewidth=1, edgecolor='black',
                                 facecolor=colors.get(piece.spec_id, 'lightgray'), alpha=0.7))
            label = f"{piece.spec_id}\n{piece.width}×{piece.height}"
            if piece.rotated:
                label += "\n(R)"
            ax.text(piece.x + piece.width / 2, piece.y + piece.height / 2, label,
                    ha='center', va='center', fontsize=7, fontweight='bold')

        # 절단선: 수평 빨강, 수직 파랑
        for cut in cuts_for_board(result.cuts, board.index):
            color = 'r' if cut.orientation == 'H' else 'b'
            ax.plot([cut.x1, cut.x2], [cut.y1, cut.y2], f'{color}-', linewidth=1.5, alpha=0.8)
            ax.text((cut.x1 + cut.x2) / 2, (cut.y1 + cut.y2) / 2, str(cut.id),
                    ha='center', va='center', fontsize=6, color=color,
                    bbox=dict(boxstyle='circle,pad=0.2', facecolor='white', edgecolor=color, linewidth=1))

        ax.set_xlim(0, board.width)
        ax.set_ylim(0, board.height)
        ax.invert_yaxis()
        ax.set_aspect('equal')
        ax.set_xlabel('width (mm)')
        ax.set_ylabel('height (mm)')
        ax.set_title(f'Board {board.index + 1} ({board.width}×{board.height})\n'
                     f'{board.utilization * 100:.1f}% | {len(cuts_for_board(result.cuts, board.index))} cuts',
                     fontsize=10, fontweight='bold')
        ax.grid(True, alpha=0.3)

    legend_elements = [patches.Patch(facecolor=color, alpha=0.7, edgecolor='black', label=spec_id)
                       for spec_id, color in colors.items()]
    if legend_elements:
        fig.legend(handles=legend_elements, loc='upper center', ncol=min(len(legend_elements), 8))

    fig.tight_layout()
    if output_path is not None:
        fig.savefig(output_path, dpi=dpi, bbox_inches='tight')
        print(f"\n시각화 파일 저장: {output_path}")
    return fig
