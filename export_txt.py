import logging
import math
import os
from datetime import tzinfo
from typing import List, Optional

from config import AppConfig
from process import by_count, by_rating, by_month, by_hour
from structs import UserProfile, ContestEntry, InsightStats
from utils import format_date

logger = logging.getLogger(__name__)

REPORT_FILES = [
    "insights.txt",
    "contests.txt",
    "problems.txt",
    "languages.txt",
    "tags.txt",
    "rating_graph.txt",
    "problems_per_rating.txt",
]

BAR = "█"

def _or(value, default):
    return default if value is None else value

def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))

def output_dir(handle: str, root) -> str:
    return os.path.join(str(root), f"insights-{handle}")

def render_insights(handle: str, user: UserProfile, contests: List[ContestEntry],
                    stats: InsightStats, timezone: Optional[tzinfo] = None) -> str:
    """Full summary: profile, counts, every breakdown and first/last solve dates."""
    lines = [
        f"Codeforces Insights for {handle}",
        "==============================",
        f"Handle: {user.handle}",
        f"Name: {_or(user.firstName, '')} {_or(user.lastName, '')}",
        f"Contribution: {_or(user.contribution, 'N/A')}",
        f"Friends: {_or(user.friendOfCount, 0)}",
        f"Organization: {_or(user.organization, 'N/A')}",
        f"Country: {_or(user.country, 'N/A')}",
        f"Avatar: {_or(user.titlePhoto, 'N/A')}",
        f"Registration: {format_date(user.registrationTimeSeconds, timezone)}",
        "",
        f"Current Rating: {_or(user.rating, 'Unrated')}",
        f"Max Rating: {_or(user.maxRating, 'Unrated')}",
        f"Rank: {_or(user.rank, 'Unrated')}",
        f"Max Rank: {_or(user.maxRank, 'Unrated')}",
        f"Number of Contests: {len(contests)}",
        f"Problems Solved: {len(stats.solved)}",
        f"Languages Used: {len(stats.languages)}",
        f"Problem Tags Counted: {len(stats.tags)}",
        "",
        "Languages Breakdown:",
    ]
    lines += [f" - {lang}: {count}" for lang, count in by_count(stats.languages)]
    lines += ["", "Problem Tags Breakdown:"]
    lines += [f" - {tag}: {count}" for tag, count in by_count(stats.tags)]
    lines += ["", "Problems per Rating:"]
    lines += [f" - {rating}: {count}" for rating, count in by_rating(stats.ratings)]
    lines += ["", "Submission Verdicts:"]
    lines += [f" - {verdict}: {count}" for verdict, count in by_count(stats.verdicts)]
    lines += ["", "Problems per Month:"]
    lines += [f" - {month}: {count}" for month, count in by_month(stats.months)]
    lines += ["", "Most Active Hours (0-23):"]
    lines += [f" - {hour}:00 => {count}" for hour, count in by_hour(stats.hours)]
    lines += [
        "",
        f"First Problem Solved: {format_date(stats.first_solved, timezone)}",
        f"Last Problem Solved: {format_date(stats.last_solved, timezone)}",
    ]
    return "\n".join(lines) + "\n"

def recent(contests: List[ContestEntry], window: int) -> List[ContestEntry]:
    # contests[-0:] would be the whole list
    return contests[max(len(contests) - max(window, 0), 0):]

def render_contests(contests: List[ContestEntry], window: int = 50) -> str:
    text = f"Last {window} Contests (Name | Rating | Delta)\n"
    for contest in recent(contests, window):
        sign = "+" if contest.delta >= 0 else ""
        text += f"{contest.contestName} | {contest.newRating} | {sign}{contest.delta}\n"
    return text

def render_problems(stats: InsightStats) -> str:
    return "\n".join(stats.solved)

def render_languages(stats: InsightStats) -> str:
    text = "Languages used:\n"
    for lang, count in by_count(stats.languages):
        text += f"{lang}: {count}\n"
    return text

def render_tags(stats: InsightStats) -> str:
    text = "Problem tags frequency:\n"
    for tag, count in by_count(stats.tags):
        text += f"{tag}: {count}\n"
    return text

def bar_lengths(ratings: List[int], width: int = 50) -> List[int]:
    """Scale ratings onto [0, width]; the scale always includes zero."""
    hi = max(ratings + [0])
    lo = min(ratings + [0])
    span = (hi - lo) or 1
    return [_round_half_up(width * (r - lo) / span) for r in ratings]

def render_rating_graph(contests: List[ContestEntry], window: int = 50, width: int = 50) -> str:
    text = f"Rating Graph (last {window} contests):\n"
    ratings = [c.newRating for c in recent(contests, window)]
    for rating, bars in zip(ratings, bar_lengths(ratings, width)):
        text += f"{rating} | {BAR * bars}\n"
    return text

def render_ratings(stats: InsightStats) -> str:
    text = "Problems solved per rating:\n"
    for rating, count in by_rating(stats.ratings):
        text += f"{rating}: {count}\n"
    return text

def _write(directory: str, name: str, content: str) -> None:
    with open(os.path.join(directory, name), "w", encoding="utf-8", newline="") as f:
        f.write(content)

def write_reports(handle: str, user: UserProfile, contests: List[ContestEntry],
                  stats: InsightStats, cfg: AppConfig) -> str:
    directory = output_dir(handle, cfg.output_root)
    os.makedirs(directory, exist_ok=True)
    tz = cfg.timezone

    _write(directory, "insights.txt", render_insights(handle, user, contests, stats, tz))
    _write(directory, "contests.txt", render_contests(contests, cfg.contest_window))
    _write(directory, "problems.txt", render_problems(stats))
    _write(directory, "languages.txt", render_languages(stats))
    _write(directory, "tags.txt", render_tags(stats))
    _write(directory, "rating_graph.txt", render_rating_graph(contests, cfg.contest_window, cfg.graph_width))
    _write(directory, "problems_per_rating.txt", render_ratings(stats))
    logger.info("Wrote %d report files to %s", len(REPORT_FILES), directory)
    return directory
