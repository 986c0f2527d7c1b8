"""
Luhn 검증기 테스트
- 알려진 유효/무효 주민번호
- 숫자가 아닌 문자, 빈 문자열
- 체크 디짓 계산
"""
import unittest

from validators import LuhnValidator, luhn


class TestLuhn(unittest.TestCase):
    """luhn() 테스트"""

    def test_valid_sa_id(self):
        """유효한 주민번호"""
        self.assertTrue(luhn("9001049818080"))
        self.assertTrue(luhn("8001015009087"))
        self.assertTrue(luhn("7805050050082"))

    def test_altered_digit(self):
        """마지막 자리 변경 → 실패"""
        self.assertFalse(luhn("9001049818081"))

    def test_non_digit(self):
        """숫자가 아닌 문자 포함 → 실패"""
        self.assertFalse(luhn("900104981808A"))
        self.assertFalse(luhn("9001049818 080"))
        self.assertFalse(luhn("-"))

    def test_unicode_digit_rejected(self):
        """ASCII가 아닌 숫자 (아라비아-인도 숫자) → 실패"""
        self.assertFalse(luhn("٠"))

    def test_empty_string(self):
        """빈 문자열은 유효 (합계 0)"""
        self.assertTrue(luhn(""))

    def test_known_card_number(self):
        """카드번호도 동일 알고리즘"""
        self.assertTrue(luhn("4532015112830366"))
        self.assertFalse(luhn("1234567890123456"))


class TestLuhnValidator(unittest.TestCase):
    """LuhnValidator 테스트"""

    def setUp(self):
        self.validator = LuhnValidator()

    def test_validate_matches_function(self):
        for value in ("9001049818080", "9001049818081", "", "abc"):
            self.assertEqual(self.validator.validate(value), luhn(value))

    def test_check_digit(self):
        """체크 디짓 계산"""
        self.assertEqual(self.validator.check_digit("900104981808"), "0")
        self.assertEqual(self.validator.check_digit("800101500908"), "7")
        self.assertEqual(self.validator.check_digit("780505005008"), "2")

    def test_check_digit_result_passes(self):
        stem = "850715123408"
        self.assertTrue(luhn(stem + self.validator.check_digit(stem)))

    def test_check_digit_non_digit(self):
        """숫자가 아닌 stem → ValueError"""
        with self.assertRaises(ValueError):
            self.validator.check_digit("90010498180A")


if __name__ == "__main__":
    unittest.main()
