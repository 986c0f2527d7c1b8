"""
검증기 패키지

[사용법]
    from validators import parse, is_valid, get_age

    result = parse("9001049818080")
    if result.valid:
        print(result.gender, result.citizenship)
    else:
        print(result.reason, describe_reason(result.reason))

[검증기 인터페이스]
    from validators import SAIDValidator

    validator = SAIDValidator()
    is_valid, reason = validator.validate_full(value)
"""
from .base_validator import BaseValidator
from .luhn_validator import LuhnValidator, luhn
from .sa_id_validator import (
    SAIDValidator,
    parse,
    is_valid,
    get_date_of_birth,
    get_gender,
    get_age,
    get_citizenship,
    describe_reason,
    resolve_year,
    calculate_age,
)
from .types import (
    IDResult,
    ParsedID,
    InvalidID,
    InvalidReason,
    Gender,
    CitizenshipStatus,
    RawSegments,
)

__all__ = [
    # ============================================
    # 검증기
    # ============================================
    'BaseValidator',
    'SAIDValidator',
    'LuhnValidator',

    # ============================================
    # 편의 함수
    # ============================================
    'parse',
    'is_valid',
    'get_date_of_birth',
    'get_gender',
    'get_age',
    'get_citizenship',
    'luhn',
    'describe_reason',
    'resolve_year',
    'calculate_age',

    # ============================================
    # 결과 타입
    # ============================================
    'IDResult',
    'ParsedID',
    'InvalidID',
    'InvalidReason',
    'Gender',
    'CitizenshipStatus',
    'RawSegments',
]
