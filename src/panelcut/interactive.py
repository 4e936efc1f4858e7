#!/usr/bin/env python3
"""대화형 재단 최적화 CLI"""

from .models import Objective, OptimizationConfig, PieceSpec
from .optimizer import optimize
from .verification import verify_result

DEFAULT_PIECES = [
    PieceSpec("A", 800, 310, 2),
    PieceSpec("B", 644, 310, 3),
    PieceSpec("C", 371, 270, 4),
    PieceSpec("D", 369, 640, 2),
]


def get_positive_int_input(prompt: str, default: int | None = None, allow_zero: bool = False) -> int | None:
    """양수 정수 입력을 받는 헬퍼 함수

    Args:
        prompt: 사용자에게 보여줄 프롬프트 메시지
        default: 기본값 (None이면 필수 입력)
        allow_zero: 0 허용 여부 (kerf용)

    Returns:
        입력받은 정수, 또는 에러 시 None
    """
    user_input = input(prompt).strip()

    # 빈 입력 처리
    if user_input == "":
        if default is not None:
            return default
        print("❌ 오류: 값을 입력해주세요.")
        return None

    # 정수 변환 시도
    try:
        value = int(user_input)
    except ValueError:
        print("❌ 오류: 숫자를 입력해주세요.")
        return None

    if value < 0 or (value == 0 and not allow_zero):
        print("❌ 오류: 양수를 입력해주세요.")
        return None
    return value


def get_yes_no_input(prompt: str, default: bool) -> bool:
    answer = input(prompt).strip().lower()
    if not answer:
        return default
    return answer in ("y", "yes", "예")


def get_objective_input() -> Objective:
    answer = input("최적화 목표 (waste/cuts/balanced, 기본값 balanced): ").strip().lower()
    try:
        return Objective(answer or "balanced")
    except ValueError:
        print("⚠️  알 수 없는 목표, balanced 사용")
        return Objective.BALANCED


def get_pieces_input() -> list[PieceSpec]:
    """조각 입력 (빈 줄로 종료, 바로 빈 줄이면 예제 조각 사용)

    형식: id 너비 높이 수량  (예: A 600 400 2)
    """
    print("\n조각 입력 (형식: id 너비 높이 수량, 빈 줄로 종료, 바로 Enter면 예제 사용)")
    specs = []
    while True:
        line = input("  조각: ").strip()
        if not line:
            break
        parts = line.split()
        if len(parts) != 4:
            print("❌ 오류: 'id 너비 높이 수량' 형식으로 입력해주세요.")
            continue
        try:
            width, height, quantity = (int(v) for v in parts[1:])
        except ValueError:
            print("❌ 오류: 너비/높이/수량은 숫자여야 합니다.")
            continue
        specs.append(PieceSpec(parts[0], width, height, quantity))
    return specs or list(DEFAULT_PIECES)


def run_interactive():
    """대화형 CLI 실행"""
    print("="*60)
    print("판재 재단 최적화 - 2단계 Guillotine Cut")
    print("="*60)

    # 원판 크기 입력
    board_width = get_positive_int_input("원판 너비 (mm, 기본값 2800): ", default=2800)
    if board_width is None:
        return

    board_height = get_positive_int_input("원판 높이 (mm, 기본값 2070): ", default=2070)
    if board_height is None:
        return

    print(f"✓ 원판 크기: {board_width}×{board_height}mm")

    # 톱날 두께 입력
    kerf = get_positive_int_input("톱날 두께 (kerf, mm, 기본값 3): ", default=3, allow_zero=True)
    if kerf is None:
        return
    print(f"✓ 톱날 두께: {kerf}mm")

    allow_rotation = get_yes_no_input("조각 회전 허용? (y/n, 기본값 y): ", default=True)
    if allow_rotation:
        print("✓ 회전 허용 (결이 없는 재질)")
    else:
        print("✓ 회전 금지 (결이 있는 재질)")

    force_two_columns = get_yes_no_input("2열 분할 사용? (y/n, 기본값 n): ", default=False)
    use_advanced = get_yes_no_input("다중 열 최적화 사용? (y/n, 기본값 n): ", default=False)
    objective = get_objective_input()

    specs = get_pieces_input()

    config = OptimizationConfig(
        board_width=board_width,
        board_height=board_height,
        kerf=kerf,
        allow_rotation=allow_rotation,
        force_two_columns=force_two_columns,
        objective=objective,
        use_advanced_optimizer=use_advanced,
    )

    result = optimize(config, specs)

    # 시각화 (matplotlib는 출력 단계에서만 로드)
    from .visualizer import print_report, render_result

    print_report(result)

    problems = verify_result(result, config, specs)
    if problems:
        print("\n  ❌ 검증 실패:")
        for problem in problems:
            print(f"    - {problem}")
    else:
        print("\n  ✅ 모든 검증 통과")

    if result.boards:
        render_result(result, specs, output_path="panelcut_layout.png")
