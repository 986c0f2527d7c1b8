"""
로깅 설정 모듈
"""
import logging
from typing import Optional

from .constants import DEFAULT_LOGGER_NAME, LOG_FORMAT, LOG_LEVEL


def setup_logger(name: str = __name__, log_file: Optional[str] = None) -> logging.Logger:
    """로거 설정 및 반환"""

    logger = logging.getLogger(name)

    if logger.handlers:
        return logger

    logger.setLevel(LOG_LEVEL)

    formatter = logging.Formatter(LOG_FORMAT)

    # 콘솔 핸들러
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVEL)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # 파일 핸들러 (경로가 주어진 경우에만)
    if log_file:
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(LOG_LEVEL)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = None) -> logging.Logger:
    """로거 가져오기 (setup_logger의 별칭)"""
    if name is None:
        return logger
    return setup_logger(name)


# 기본 로거
logger = setup_logger(DEFAULT_LOGGER_NAME)
