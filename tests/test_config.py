import os
import unittest
from pathlib import Path
from unittest.mock import patch

from config import AppConfig


@patch("config.load_dotenv", lambda: None)
class AppConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = AppConfig.from_env()
        self.assertEqual(cfg.api_base, "https://codeforces.com/api")
        self.assertEqual(cfg.submission_count, 10000)
        self.assertEqual(cfg.contest_window, 50)
        self.assertIsNone(cfg.timezone)
        self.assertEqual(cfg.log_level, "INFO")

    def test_env_values(self) -> None:
        env = {
            "CF_API_BASE": "http://localhost:8080/api/",
            "CF_SUBMISSION_COUNT": "500",
            "CF_INSIGHTS_OUTPUT": "/tmp/reports",
            "CF_INSIGHTS_TZ": "Asia/Karachi",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = AppConfig.from_env()
        self.assertEqual(cfg.api_base, "http://localhost:8080/api")
        self.assertEqual(cfg.submission_count, 500)
        self.assertEqual(cfg.output_root, Path("/tmp/reports"))
        self.assertEqual(cfg.timezone.zone, "Asia/Karachi")

    def test_invalid_int(self) -> None:
        with patch.dict(os.environ, {"CF_SUBMISSION_COUNT": "lots"}, clear=True):
            with self.assertRaises(RuntimeError):
                AppConfig.from_env()

    def test_window_below_one(self) -> None:
        with patch.dict(os.environ, {"CF_CONTEST_WINDOW": "0"}, clear=True):
            with self.assertRaises(RuntimeError):
                AppConfig.from_env()

    def test_invalid_log_level(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "VERBOSE"}, clear=True):
            with self.assertRaises(RuntimeError):
                AppConfig.from_env()

    def test_log_level_is_upper_cased(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            self.assertEqual(AppConfig.from_env().log_level, "DEBUG")

    def test_unknown_timezone(self) -> None:
        with patch.dict(os.environ, {"CF_INSIGHTS_TZ": "Mars/Olympus"}, clear=True):
            with self.assertRaises(RuntimeError):
                AppConfig.from_env()

    def test_overrides(self) -> None:
        cfg = AppConfig().with_overrides(output_root=Path("out"), timezone_name="UTC")
        self.assertEqual(cfg.output_root, Path("out"))
        self.assertEqual(cfg.timezone_name, "UTC")
        self.assertEqual(AppConfig().with_overrides(), AppConfig())


if __name__ == "__main__":
    unittest.main()
