"""예외 정의

정상적인 배치 실패(조각 초과, 전략 실패)는 예외가 아니라 결과 데이터로 보고한다.
예외는 배치 결과가 불변식을 깨는 경우 같은 프로그래밍 오류에만 쓴다.
"""


class PanelcutError(Exception):
    """패키지 공통 예외"""


class LayoutError(PanelcutError):
    """배치 결과가 불변식을 위반함"""
