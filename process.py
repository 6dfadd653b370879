from datetime import tzinfo
from typing import Dict, List, Optional, Tuple, TypeVar, Union
from structs import Submission, InsightStats, UNKNOWN_RATING
from utils import to_local_datetime, month_key

K = TypeVar("K")

def _bump(table: Dict, key) -> None:
    if key not in table:
        table[key] = 0
    table[key] += 1

def aggregate(submissions: List[Submission], timezone: Optional[tzinfo] = None) -> InsightStats:
    """Build frequency tables over a user's submissions.

    Verdicts are counted for every judged submission; every other table only
    counts accepted ones. `submissions` is scanned in the order the API
    returned it, which also decides the first/last accepted timestamps.
    """
    solved = set()
    languages = dict()
    tags = dict()
    ratings = dict()
    verdicts = dict()
    months = dict()
    hours = dict()
    for submission in submissions:
        if submission.verdict:
            _bump(verdicts, submission.verdict)
        if not submission.accepted:
            continue
        problem = submission.problem
        solved.add(problem.key)
        _bump(languages, submission.programmingLanguage)
        _bump(ratings, UNKNOWN_RATING if problem.rating is None else problem.rating)
        for tag in problem.tags:
            _bump(tags, tag)
        time = to_local_datetime(submission.creationTimeSeconds, timezone)
        _bump(months, month_key(time))
        _bump(hours, time.hour)

    accepted = [s.creationTimeSeconds for s in submissions if s.accepted]

    return InsightStats(
        solved=sorted(solved),
        languages=languages,
        tags=tags,
        ratings=ratings,
        verdicts=verdicts,
        months=months,
        hours=hours,
        first_solved=accepted[0] if accepted else None,
        last_solved=accepted[-1] if accepted else None,
    )

def by_count(table: Dict[K, int]) -> List[Tuple[K, int]]:
    # sorted() is stable, ties stay in encounter order
    return sorted(table.items(), key=lambda item: item[1], reverse=True)

def _rating_order(rating: Union[int, str]) -> Tuple[int, int]:
    if rating == UNKNOWN_RATING:
        return (1, 0)
    return (0, int(rating))

def by_rating(table: Dict[Union[int, str], int]) -> List[Tuple[Union[int, str], int]]:
    return sorted(table.items(), key=lambda item: _rating_order(item[0]))

def by_month(table: Dict[str, int]) -> List[Tuple[str, int]]:
    return sorted(table.items())

def by_hour(table: Dict[int, int]) -> List[Tuple[int, int]]:
    return sorted(table.items())
