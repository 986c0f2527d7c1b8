"""
주민번호 파싱 결과 타입

[구조]
- RawSegments: 13자리를 고정 폭으로 자른 7개 세그먼트
- ParsedID:    모든 검증 통과 (valid=True)
- InvalidID:   첫 번째로 실패한 검증 사유 (valid=False)
- IDResult:    ParsedID | InvalidID
"""
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import Union


class Gender(str, Enum):
    """성별 일련번호로 판정한 성별"""
    MALE = 'male'
    FEMALE = 'female'


class CitizenshipStatus(str, Enum):
    """시민권 자리로 판정한 시민권 상태"""
    CITIZEN = 'citizen'
    PERMANENT_RESIDENT = 'permanent_resident'


class InvalidReason(str, Enum):
    """무효 사유 (검증 순서대로)"""
    INVALID_FORMAT = 'INVALID_FORMAT'
    INVALID_DATE = 'INVALID_DATE'
    INVALID_CITIZENSHIP_DIGIT = 'INVALID_CITIZENSHIP_DIGIT'
    INVALID_CHECKSUM = 'INVALID_CHECKSUM'


@dataclass(frozen=True)
class RawSegments:
    """주민번호 원본 세그먼트 (앞자리 0 유지)"""
    year_part: str          # YY
    month_part: str         # MM
    day_part: str           # DD
    gender_sequence: str    # SSSS
    citizenship_digit: str  # C
    legacy_digit: str       # A
    checksum_digit: str     # Z

    def join(self) -> str:
        """세그먼트를 순서대로 이어 붙인 13자리 문자열"""
        return (
            self.year_part + self.month_part + self.day_part
            + self.gender_sequence + self.citizenship_digit
            + self.legacy_digit + self.checksum_digit
        )


@dataclass(frozen=True)
class ParsedID:
    """검증을 모두 통과한 주민번호"""
    id_number: str
    date_of_birth: date
    age: int
    gender: Gender
    citizenship: CitizenshipStatus
    is_citizen: bool
    segments: RawSegments
    valid: bool = field(default=True, init=False)


@dataclass(frozen=True)
class InvalidID:
    """검증에 실패한 주민번호"""
    id_number: str
    reason: InvalidReason
    valid: bool = field(default=False, init=False)


IDResult = Union[ParsedID, InvalidID]
