from __future__ import annotations

from dataclasses import dataclass, replace
import logging
import os
from datetime import tzinfo
from pathlib import Path
from typing import Optional

import pytz
from dotenv import load_dotenv


@dataclass(frozen=True)
class AppConfig:
    api_base: str = "https://codeforces.com/api"

    # user.status returns the most recent submissions first
    submission_count: int = 10000

    contest_window: int = 50
    graph_width: int = 50

    output_root: Path = Path(".")

    timezone_name: Optional[str] = None  # None -> system local time

    log_level: str = "INFO"

    @property
    def timezone(self) -> Optional[tzinfo]:
        if not self.timezone_name:
            return None
        return pytz.timezone(self.timezone_name)

    def with_overrides(self, *, output_root: Optional[Path] = None, timezone_name: Optional[str] = None) -> "AppConfig":
        cfg = self
        if output_root is not None:
            cfg = replace(cfg, output_root=output_root)
        if timezone_name:
            cfg = replace(cfg, timezone_name=timezone_name)
        return cfg

    @staticmethod
    def from_env() -> "AppConfig":
        load_dotenv()

        def _int(name: str, default: int) -> int:
            raw = os.getenv(name, str(default)).strip()
            try:
                return int(raw)
            except ValueError as ex:
                raise RuntimeError(f"{name} must be int. Got '{raw}'.") from ex

        def _positive_int(name: str, default: int) -> int:
            value = _int(name, default)
            if value < 1:
                raise RuntimeError(f"{name} must be at least 1. Got '{value}'.")
            return value

        log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        if not isinstance(logging.getLevelName(log_level), int):
            raise RuntimeError(f"LOG_LEVEL must be a logging level name. Got '{log_level}'.")

        timezone_name = os.getenv("CF_INSIGHTS_TZ", "").strip() or None
        if timezone_name is not None:
            try:
                pytz.timezone(timezone_name)
            except pytz.UnknownTimeZoneError as ex:
                raise RuntimeError(f"CF_INSIGHTS_TZ is not a known timezone: '{timezone_name}'.") from ex

        return AppConfig(
            api_base=os.getenv("CF_API_BASE", "https://codeforces.com/api").strip().rstrip("/"),
            submission_count=_positive_int("CF_SUBMISSION_COUNT", 10000),
            contest_window=_positive_int("CF_CONTEST_WINDOW", 50),
            output_root=Path(os.getenv("CF_INSIGHTS_OUTPUT", "").strip() or Path.cwd()),
            timezone_name=timezone_name,
            log_level=log_level,
        )
