"""
Utils 패키지

- logger: 검증기 공통 로거 (SAIDValidator)
- constants: 주민번호 형식, 판정 기준, 로깅 설정
"""
from .logger import logger, setup_logger, get_logger
from .constants import *
from .constants import __all__ as _constants_all

__all__ = ['logger', 'setup_logger', 'get_logger'] + _constants_all
