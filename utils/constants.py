"""
상수 정의 모듈

남아공 주민번호(SA ID) 형식: YYMMDDSSSSCAZ
    YY   - 출생년도 끝 2자리
    MM   - 출생월 (01-12)
    DD   - 출생일 (01-31)
    SSSS - 성별 일련번호 (0000-4999 여성, 5000-9999 남성)
    C    - 시민권 (0: 시민, 1: 영주권자, 2: 과거 발급분)
    A    - 과거 인종 코드 (현재 미사용)
    Z    - Luhn 체크섬
"""
import logging
import re

__all__ = [
    'SA_ID_LENGTH',
    'SA_ID_PATTERN',
    'SEGMENT_SLICES',
    'GENDER_MALE_THRESHOLD',
    'CITIZENSHIP_CITIZEN_DIGIT',
    'VALID_CITIZENSHIP_DIGITS',
    'ID_MASK_VISIBLE',
    'DEFAULT_LOGGER_NAME',
    'LOG_LEVEL',
    'LOG_FORMAT',
    'INVALID_REASON_MESSAGES',
]

# =========================================================
# 주민번호 형식
# =========================================================

SA_ID_LENGTH = 13

# ASCII 숫자만 허용 (\d는 유니코드 숫자도 매칭하므로 사용하지 않음)
SA_ID_PATTERN = re.compile(r'[0-9]{%d}' % SA_ID_LENGTH)

# 세그먼트 경계 (시작, 끝)
SEGMENT_SLICES = {
    'year_part': (0, 2),
    'month_part': (2, 4),
    'day_part': (4, 6),
    'gender_sequence': (6, 10),
    'citizenship_digit': (10, 11),
    'legacy_digit': (11, 12),
    'checksum_digit': (12, 13),
}

# =========================================================
# 필드 판정 기준
# =========================================================

GENDER_MALE_THRESHOLD = 5000

CITIZENSHIP_CITIZEN_DIGIT = '0'
VALID_CITIZENSHIP_DIGITS = frozenset({'0', '1', '2'})

# 로그 출력 시 마스킹하지 않는 앞자리 수 (생년월일)
ID_MASK_VISIBLE = 6

# =========================================================
# 로깅
# =========================================================

DEFAULT_LOGGER_NAME = 'SAIDValidator'
LOG_LEVEL = logging.INFO
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# =========================================================
# 무효 사유 메시지
# =========================================================

INVALID_REASON_MESSAGES = {
    'INVALID_FORMAT': 'ID must be exactly 13 digits.',
    'INVALID_DATE': 'The date of birth in this ID is not valid.',
    'INVALID_CITIZENSHIP_DIGIT': 'The citizenship indicator is not recognised.',
    'INVALID_CHECKSUM': 'This ID number has been entered incorrectly.',
}
