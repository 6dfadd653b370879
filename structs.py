from pydantic import BaseModel
from typing import List, Dict, Optional, Union

UNKNOWN_RATING = "Unknown"

class UserProfile(BaseModel):
    handle: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    contribution: Optional[int] = None
    friendOfCount: Optional[int] = None
    organization: Optional[str] = None
    country: Optional[str] = None
    titlePhoto: Optional[str] = None
    registrationTimeSeconds: Optional[int] = None
    rating: Optional[int] = None
    maxRating: Optional[int] = None
    rank: Optional[str] = None
    maxRank: Optional[str] = None

class Problem(BaseModel):
    contestId: Optional[int] = None
    index: str = ""
    rating: Optional[int] = None
    tags: List[str] = []

    @property
    def key(self) -> str:
        prefix = "" if self.contestId is None else str(self.contestId)
        return f"{prefix}{self.index}"

class Submission(BaseModel):
    creationTimeSeconds: int = 0
    problem: Problem
    programmingLanguage: str = ""
    # absent while the submission is still in queue or skipped
    verdict: Optional[str] = None

    @property
    def accepted(self) -> bool:
        return self.verdict == "OK"

class ContestEntry(BaseModel):
    contestId: Optional[int] = None
    contestName: str
    rank: Optional[int] = None
    oldRating: int
    newRating: int
    ratingUpdateTimeSeconds: Optional[int] = None

    @property
    def delta(self) -> int:
        return self.newRating - self.oldRating

class InsightStats(BaseModel):
    solved: List[str] = []
    languages: Dict[str, int] = {}
    tags: Dict[str, int] = {}
    ratings: Dict[Union[int, str], int] = {}
    verdicts: Dict[str, int] = {}
    months: Dict[str, int] = {}
    hours: Dict[int, int] = {}
    first_solved: Optional[int] = None
    last_solved: Optional[int] = None
