"""
Test suite for `sexpkit.util.logging`.
"""
import logging
import unittest

from sexpkit.util.debug import Debug
from sexpkit.util.logging import default_log_level, get_logger, log_and_raise


class TestLogging(unittest.TestCase):
    """
    Tests for the logging helpers.
    """

    def setUp(self) -> None:  # noqa: D102
        self.is_debug = Debug.is_debug

    def tearDown(self) -> None:  # noqa: D102
        Debug.is_debug = self.is_debug

    def test_default_log_level(self):
        """
        Verify that the level follows the debugging status.
        """
        Debug.is_debug = True
        self.assertEqual(default_log_level(), logging.DEBUG)
        self.assertEqual(get_logger("sexpkit.test").level, logging.DEBUG)
        Debug.is_debug = False
        self.assertEqual(default_log_level(), logging.INFO)
        self.assertEqual(get_logger("sexpkit.test").level, logging.INFO)

    def test_log_and_raise(self):
        """
        Verify that the error is both logged and raised.
        """
        logger = logging.getLogger("sexpkit.test.raise")
        logger.setLevel(logging.DEBUG)
        error = ValueError("bad value")
        with self.assertLogs(logger, logging.WARNING) as cm:
            with self.assertRaises(ValueError) as raised:
                log_and_raise(logger, error, logging.WARNING)
        self.assertIs(raised.exception, error)
        self.assertEqual(cm.output, ["WARNING:sexpkit.test.raise:bad value"])


if __name__ == '__main__':
    unittest.main()
