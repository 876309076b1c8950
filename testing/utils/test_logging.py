"""Tests for logging configuration."""

import logging
import unittest
from unittest.mock import patch

from src.utils.logging import configure_logging


class TestConfigureLogging(unittest.TestCase):
    """Tests for configure_logging."""

    def setUp(self) -> None:
        """Remember root logger state."""
        self.root_logger = logging.getLogger()
        self.saved_handlers = list(self.root_logger.handlers)
        self.saved_level = self.root_logger.level

    def tearDown(self) -> None:
        """Restore root logger state."""
        self.root_logger.handlers[:] = self.saved_handlers
        self.root_logger.setLevel(self.saved_level)

    @patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"})
    def test_sets_level_from_environment(self) -> None:
        """Test that LOG_LEVEL controls the root level."""
        configure_logging()

        self.assertEqual(self.root_logger.level, logging.DEBUG)

    @patch.dict("os.environ", {}, clear=True)
    def test_defaults_to_info(self) -> None:
        """Test the default level."""
        configure_logging()

        self.assertEqual(self.root_logger.level, logging.INFO)

    @patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"})
    def test_installs_single_handler(self) -> None:
        """Test that repeated calls leave exactly one handler."""
        configure_logging()
        configure_logging()

        self.assertEqual(len(self.root_logger.handlers), 1)

    @patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"})
    def test_http_libraries_stay_at_info(self) -> None:
        """Test that urllib3 does not log at DEBUG."""
        configure_logging()

        self.assertEqual(logging.getLogger("urllib3").level, logging.INFO)

    @patch.dict("os.environ", {"LOG_LEVEL": "VERBOSE"})
    def test_invalid_level_raises(self) -> None:
        """Test that an unknown level name is rejected."""
        with self.assertRaises(ValueError):
            configure_logging()


if __name__ == "__main__":
    unittest.main()
