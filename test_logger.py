"""
로깅 설정 테스트
"""
import logging
import os
import tempfile
import unittest

from utils import logger, setup_logger, get_logger
from utils.constants import DEFAULT_LOGGER_NAME


class TestLogger(unittest.TestCase):
    """setup_logger / get_logger 테스트"""

    def _cleanup(self, log):
        for handler in list(log.handlers):
            handler.close()
            log.removeHandler(handler)

    def test_default_logger(self):
        self.assertEqual(logger.name, DEFAULT_LOGGER_NAME)
        self.assertIs(get_logger(), logger)

    def test_console_only_by_default(self):
        log = setup_logger('test.console')
        self.addCleanup(self._cleanup, log)

        self.assertEqual(len(log.handlers), 1)
        self.assertIsInstance(log.handlers[0], logging.StreamHandler)

    def test_idempotent(self):
        """이미 설정된 로거는 핸들러를 추가하지 않음"""
        log = setup_logger('test.idempotent')
        self.addCleanup(self._cleanup, log)

        again = setup_logger('test.idempotent')
        self.assertIs(again, log)
        self.assertEqual(len(log.handlers), 1)

    def test_get_logger_named(self):
        log = get_logger('test.named')
        self.addCleanup(self._cleanup, log)
        self.assertEqual(log.name, 'test.named')
        self.assertTrue(log.handlers)

    def test_file_handler(self):
        """log_file 지정 시 파일에도 기록"""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'validator.log')
            log = setup_logger('test.file', log_file=path)
            try:
                self.assertEqual(len(log.handlers), 2)
                log.info("주민번호 검증 시작")
                for handler in log.handlers:
                    handler.flush()

                with open(path, 'r', encoding='utf-8') as f:
                    content = f.read()
                self.assertIn("주민번호 검증 시작", content)
                self.assertIn("test.file - INFO", content)
            finally:
                self._cleanup(log)


class TestUtilsExports(unittest.TestCase):
    """utils 패키지 공개 이름"""

    def test_constants_exported(self):
        import utils
        self.assertIn('SA_ID_PATTERN', utils.__all__)
        self.assertIn('INVALID_REASON_MESSAGES', utils.__all__)
        self.assertEqual(utils.SA_ID_LENGTH, 13)

    def test_stdlib_modules_not_exported(self):
        import utils
        self.assertNotIn('re', utils.__all__)
        self.assertNotIn('logging', utils.__all__)
        self.assertFalse(hasattr(utils, 're'))


if __name__ == "__main__":
    unittest.main()
