"""환경 설정

.env 파일과 환경변수에서 CLI 설정을 읽습니다.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class Settings:
    """CLI 설정

    Attributes:
        log_level: 로그 레벨 이름 (DEBUG, INFO, ...)
        use_color: 터미널 색상 사용 여부
    """

    log_level: str = DEFAULT_LOG_LEVEL
    use_color: bool = True


def load_settings(
    log_level: str | None = None,
    no_color: bool = False,
) -> Settings:
    """설정 로드

    인자로 넘긴 값이 환경변수보다 우선합니다.

    Args:
        log_level: 로그 레벨 (None이면 USERSAPP_LOG_LEVEL)
            알 수 없는 값이면 경고 후 기본값 사용
        no_color: True면 색상 비활성화

    Returns:
        Settings
    """
    load_dotenv()

    level = (log_level or os.getenv("USERSAPP_LOG_LEVEL", DEFAULT_LOG_LEVEL)).upper()
    if level not in LOG_LEVELS:
        logger.warning("알 수 없는 로그 레벨 %r, %s 사용", level, DEFAULT_LOG_LEVEL)
        level = DEFAULT_LOG_LEVEL
    color_disabled = no_color or bool(os.getenv("USERSAPP_NO_COLOR") or os.getenv("NO_COLOR"))

    return Settings(log_level=level, use_color=not color_disabled)


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """stderr 로깅 설정 (프롬프트 출력과 섞이지 않도록)"""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"알 수 없는 로그 레벨: {level}")

    logging.basicConfig(level=numeric, format=LOG_FORMAT)
