"""
남아공 주민번호(SA ID) 검증기

[검증 전략]
- 앞뒤 공백 제거 후 아래 순서로 검증, 첫 번째 실패 사유만 반환
  1. 형식: 정확히 13자리 ASCII 숫자
  2. 생년월일: 실제 존재하는 날짜, 오늘 이후 불가
  3. 시민권 자리: 0, 1, 2만 허용
  4. Luhn 체크섬
- 모두 통과하면 생년월일, 나이, 성별, 시민권을 산출
- 실패는 예외가 아닌 InvalidID로 반환

[사용법]
    from validators import parse

    result = parse("9001049818080")
    if result.valid:
        print(result.date_of_birth, result.gender, result.age)
    else:
        print(result.reason)
"""
from datetime import date, datetime
from typing import Optional, Tuple

from utils.constants import (
    SA_ID_PATTERN, SEGMENT_SLICES, GENDER_MALE_THRESHOLD,
    CITIZENSHIP_CITIZEN_DIGIT, VALID_CITIZENSHIP_DIGITS, INVALID_REASON_MESSAGES,
)
from utils.logger import logger
from .base_validator import BaseValidator
from .luhn_validator import luhn
from .types import (
    CitizenshipStatus, Gender, IDResult, InvalidID, InvalidReason, ParsedID, RawSegments,
)


# =========================================================
# 순수 함수 (오늘 날짜는 인자로 받음)
# =========================================================

def extract_segments(id_number: str) -> RawSegments:
    """
    13자리 문자열을 세그먼트로 분리

    형식 검증을 통과한 값에만 호출할 것 (여기서는 검증하지 않음)
    """
    return RawSegments(**{
        name: id_number[start:end]
        for name, (start, end) in SEGMENT_SLICES.items()
    })


def resolve_year(yy: int, today: date) -> int:
    """
    2자리 년도를 4자리로 변환

    2000년대가 올해를 넘지 않으면 2000년대, 넘으면 1900년대.
    두 세기 모두 가능한 경우 항상 젊은 쪽(2000년대)으로 판정한다.
    """
    year_2000 = 2000 + yy
    if year_2000 <= today.year:
        return year_2000
    return 1900 + yy


def parse_birth_date(segments: RawSegments, today: date) -> Optional[date]:
    """생년월일 파싱 (무효면 None)"""
    try:
        yy = int(segments.year_part)
        month = int(segments.month_part)
        day = int(segments.day_part)
    except ValueError:
        return None

    # 월/일 범위 체크
    if month < 1 or month > 12:
        return None
    if day < 1 or day > 31:
        return None

    # 실제 달력상 날짜 체크 (2월 30일 등)
    try:
        birth_date = date(resolve_year(yy, today), month, day)
    except ValueError:
        return None

    # 미래 날짜 불가
    if birth_date > today:
        return None

    return birth_date


def calculate_age(birth_date: date, today: date) -> int:
    """만 나이 계산 (올해 생일이 지나지 않았으면 1을 뺌)"""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def describe_reason(reason: InvalidReason) -> str:
    """무효 사유 안내 문구"""
    return INVALID_REASON_MESSAGES[InvalidReason(reason).value]


# =========================================================
# 검증기
# =========================================================

class SAIDValidator(BaseValidator):
    """남아공 주민번호 검증기"""

    def parse(self, value: str, today: Optional[date] = None) -> IDResult:
        """
        주민번호 파싱 및 검증

        Args:
            value: 검증할 주민번호 (앞뒤 공백 허용)
            today: 기준일 (None이면 오늘)

        Returns:
            ParsedID (모두 통과) 또는 InvalidID (첫 번째 실패 사유)
        """
        id_number = self.normalize(value)
        if today is None:
            today = date.today()
        elif isinstance(today, datetime):
            today = today.date()

        # 1. 형식
        if not SA_ID_PATTERN.fullmatch(id_number):
            return self._invalid(id_number, InvalidReason.INVALID_FORMAT)

        segments = extract_segments(id_number)

        # 2. 생년월일
        birth_date = parse_birth_date(segments, today)
        if birth_date is None:
            return self._invalid(id_number, InvalidReason.INVALID_DATE)

        # 3. 시민권 자리
        citizenship_digit = segments.citizenship_digit
        if citizenship_digit not in VALID_CITIZENSHIP_DIGITS:
            return self._invalid(id_number, InvalidReason.INVALID_CITIZENSHIP_DIGIT)

        # 4. 체크섬
        if not luhn(id_number):
            return self._invalid(id_number, InvalidReason.INVALID_CHECKSUM)

        # 모두 통과 → 필드 산출
        if int(segments.gender_sequence) >= GENDER_MALE_THRESHOLD:
            gender = Gender.MALE
        else:
            gender = Gender.FEMALE

        # 2(과거 발급분)는 영주권자로 취급
        is_citizen = citizenship_digit == CITIZENSHIP_CITIZEN_DIGIT
        if is_citizen:
            citizenship = CitizenshipStatus.CITIZEN
        else:
            citizenship = CitizenshipStatus.PERMANENT_RESIDENT

        return ParsedID(
            id_number=id_number,
            date_of_birth=birth_date,
            age=calculate_age(birth_date, today),
            gender=gender,
            citizenship=citizenship,
            is_citizen=is_citizen,
            segments=segments,
        )

    def validate(self, value: str, context: str = "", today: Optional[date] = None) -> bool:
        """유효한 주민번호면 True"""
        return self.parse(value, today).valid

    def validate_full(self, value: str, today: Optional[date] = None) -> Tuple[bool, str]:
        """
        전체 검증 (사유 포함)

        Returns:
            (is_valid, reason)
            - (True, ""): 모두 통과
            - (False, "INVALID_..."): 첫 번째 실패 사유
        """
        result = self.parse(value, today)
        if result.valid:
            return True, ""
        return False, result.reason.value

    def _invalid(self, id_number: str, reason: InvalidReason) -> InvalidID:
        logger.debug(f"주민번호 검증 실패 ({reason.value}): {self.mask(id_number)}")
        return InvalidID(id_number=id_number, reason=reason)


# =========================================================
# 편의 함수 (모두 parse 한 곳을 거침)
# =========================================================

_default_validator = SAIDValidator()


def parse(id_number: str, today: Optional[date] = None) -> IDResult:
    """주민번호 파싱 (SAIDValidator.parse)"""
    return _default_validator.parse(id_number, today)


def is_valid(id_number: str, today: Optional[date] = None) -> bool:
    """유효한 주민번호면 True"""
    return parse(id_number, today).valid


def get_date_of_birth(id_number: str, today: Optional[date] = None) -> Optional[date]:
    """생년월일 (무효면 None)"""
    result = parse(id_number, today)
    return result.date_of_birth if result.valid else None


def get_gender(id_number: str, today: Optional[date] = None) -> Optional[Gender]:
    """성별 (무효면 None)"""
    result = parse(id_number, today)
    return result.gender if result.valid else None


def get_age(id_number: str, today: Optional[date] = None) -> Optional[int]:
    """만 나이 (무효면 None)"""
    result = parse(id_number, today)
    return result.age if result.valid else None


def get_citizenship(id_number: str, today: Optional[date] = None) -> Optional[CitizenshipStatus]:
    """시민권 상태 (무효면 None)"""
    result = parse(id_number, today)
    return result.citizenship if result.valid else None
