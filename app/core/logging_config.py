# app/core/logging_config.py

"""
애플리케이션 전역 로깅 설정 모듈입니다.
각 모듈은 `logging.getLogger(__name__)`으로 로거를 얻고, 여기서는 루트 로거만 구성합니다.
"""

import logging

from app.core.config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def configure_logging() -> None:
    """설정값(LOG_LEVEL, DEBUG_MODE)에 따라 루트 로거를 한 번만 초기화합니다."""
    global _configured
    if _configured:
        return

    level = logging.DEBUG if settings.DEBUG_MODE else getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    # SQL 로그는 DEBUG_MODE 에서만 엔진 echo 로 출력합니다.
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    _configured = True
