"""
검증기 기본 클래스

[역할]
- 입력 정규화 (앞뒤 공백 제거)
- 로그용 마스킹
- 공통 인터페이스 정의
"""
from abc import ABC, abstractmethod

from utils.constants import ID_MASK_VISIBLE


class BaseValidator(ABC):
    """검증기 기본 클래스"""

    @staticmethod
    def normalize(value) -> str:
        """
        입력값 정규화

        문자열로 변환한 뒤 앞뒤 공백만 제거한다.
        중간의 공백이나 하이픈은 그대로 두며, 형식 검증에서 걸러진다.
        """
        return str(value).strip()

    @staticmethod
    def mask(value: str) -> str:
        """로그 출력용 마스킹 (생년월일 6자리만 노출)"""
        if len(value) <= ID_MASK_VISIBLE:
            return '*' * len(value)
        return value[:ID_MASK_VISIBLE] + '*' * (len(value) - ID_MASK_VISIBLE)

    @abstractmethod
    def validate(self, value: str, context: str = "") -> bool:
        """
        검증

        Args:
            value: 검증할 값
            context: 주변 컨텍스트 (참고용)

        Returns:
            bool: 유효하면 True
        """
        pass
