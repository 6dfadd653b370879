from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import pytz

from collect import fetch_user_info, fetch_rating_history, fetch_submissions, download_avatar
from config import AppConfig
from export_txt import REPORT_FILES, write_reports
from process import aggregate
from structs import UserProfile, ContestEntry, Submission
from utils import dict_to_model, dicts_to_models

logger = logging.getLogger(__name__)


def prompt_username() -> str:
    return input("Enter Codeforces username: ").strip()


def fetch_insights(handle: str, cfg: AppConfig) -> str:
    """Fetch, aggregate and write every report for one handle; returns the folder."""
    print(f"\nFetching insights for {handle}...\n")

    user = dict_to_model(UserProfile, fetch_user_info(handle, cfg))
    contests = dicts_to_models(ContestEntry, fetch_rating_history(handle, cfg))
    submissions = dicts_to_models(Submission, fetch_submissions(handle, cfg))

    stats = aggregate(submissions, cfg.timezone)
    directory = write_reports(handle, user, contests, stats, cfg)

    download_avatar(user.titlePhoto, directory)

    print(f"Insights saved in folder: {directory}")
    print("Files: " + " | ".join(REPORT_FILES))
    return directory


def run(handles: List[str], cfg: AppConfig) -> List[str]:
    written = []
    for handle in handles:
        try:
            written.append(fetch_insights(handle, cfg))
        except Exception as e:
            logger.error("Error fetching %s: %s", handle, e)
    return written


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Write Codeforces profile insights to text files")
    parser.add_argument("handles", nargs="*", help="Codeforces handles, processed in order")
    parser.add_argument("--output-dir", type=Path, help="Where insights-<handle> folders are created")
    parser.add_argument("--timezone", help="IANA timezone for dates, months and hours (default: system local)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    cfg = AppConfig.from_env().with_overrides(output_root=args.output_dir, timezone_name=args.timezone)

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    if args.timezone:
        try:
            pytz.timezone(args.timezone)
        except pytz.UnknownTimeZoneError:
            print(f"Unknown timezone: {args.timezone}", file=sys.stderr)
            return 2

    handles = args.handles
    if not handles:
        handle = prompt_username()
        if not handle:
            print("Username is invalid.", file=sys.stderr)
            return 1
        handles = [handle]

    run(handles, cfg)
    return 0


if __name__ == "__main__":
    sys.exit(main())
