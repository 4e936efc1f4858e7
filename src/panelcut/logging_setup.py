"""로깅 설정 (CLI / 웹 서버 진입점 전용, 라이브러리는 핸들러를 설치하지 않음)"""

import logging


def setup_logging(log_level: str = "INFO") -> None:
    """루트 로거 설정

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR, CRITICAL
    """
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )
    logging.getLogger('matplotlib').setLevel(logging.WARNING)
    logging.getLogger('PIL').setLevel(logging.WARNING)
