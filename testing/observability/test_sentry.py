"""Tests for Sentry setup."""

import unittest
from unittest.mock import MagicMock, patch

from src.observability.sentry import init_sentry


class TestInitSentry(unittest.TestCase):
    """Tests for init_sentry."""

    @patch.dict("os.environ", {}, clear=True)
    @patch("src.observability.sentry.sentry_sdk.init")
    def test_no_dsn_is_a_no_op(self, mock_init: MagicMock) -> None:
        """Test that Sentry stays off without a DSN."""
        init_sentry()

        mock_init.assert_not_called()

    @patch.dict(
        "os.environ",
        {"SENTRY_DSN": "https://key@sentry.example.com/1", "APP_ENV": "production"},
        clear=True,
    )
    @patch("src.observability.sentry.sentry_sdk.init")
    def test_initialises_with_dsn(self, mock_init: MagicMock) -> None:
        """Test that the DSN and environment are passed to Sentry."""
        init_sentry()

        mock_init.assert_called_once()
        kwargs = mock_init.call_args.kwargs
        self.assertEqual(kwargs["dsn"], "https://key@sentry.example.com/1")
        self.assertEqual(kwargs["environment"], "production")
        self.assertFalse(kwargs["send_default_pii"])


if __name__ == "__main__":
    unittest.main()
