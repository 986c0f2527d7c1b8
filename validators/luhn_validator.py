"""
Luhn 체크섬 검증기

[검증 전략]
- 오른쪽 끝 자리부터 왼쪽으로 진행
- 두 번째 자리마다 2배, 9보다 크면 9를 뺌
- 합계가 10의 배수면 유효
- 빈 문자열은 유효 (합계 0), 길이 확인은 호출하는 쪽의 책임
"""
from .base_validator import BaseValidator

ASCII_DIGITS = frozenset('0123456789')


class LuhnValidator(BaseValidator):
    """Luhn (mod 10) 검증기"""

    def validate(self, value: str, context: str = "") -> bool:
        """
        Luhn 검증

        숫자가 아닌 문자가 하나라도 있으면 즉시 False.
        입력값을 정규화하지 않는다 (공백도 숫자가 아닌 문자로 취급).
        """
        total = 0
        should_double = False

        for char in reversed(value):
            if char not in ASCII_DIGITS:
                return False

            digit = int(char)
            if should_double:
                digit *= 2
                if digit > 9:
                    digit -= 9

            total += digit
            should_double = not should_double

        return total % 10 == 0

    def check_digit(self, stem: str) -> str:
        """
        체크 디짓 계산

        stem 뒤에 붙였을 때 Luhn 검증을 통과하는 한 자리 숫자를 반환한다.

        Raises:
            ValueError: stem에 숫자가 아닌 문자가 있을 때
        """
        if any(char not in ASCII_DIGITS for char in stem):
            raise ValueError(f"숫자가 아닌 문자 포함: {stem!r}")

        for candidate in '0123456789':
            if self.validate(stem + candidate):
                return candidate

        # 0-9 중 정확히 하나가 항상 통과하므로 도달하지 않음
        raise ValueError(f"체크 디짓 계산 실패: {stem!r}")


_default_validator = LuhnValidator()


def luhn(digits: str) -> bool:
    """숫자 문자열이 Luhn 검증을 통과하면 True"""
    return _default_validator.validate(digits)
