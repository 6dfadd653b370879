from datetime import datetime, tzinfo
from typing import List, Optional, Type, TypeVar
from pydantic import BaseModel

T = TypeVar("T", bound=BaseModel)

def dict_to_model(model_cls: Type[T], data: dict) -> T:
    valid_keys = set(model_cls.model_fields.keys())
    filtered = {k: v for k, v in data.items() if k in valid_keys}
    return model_cls(**filtered)

def dicts_to_models(model_cls: Type[T], items: List[dict]) -> List[T]:
    return [dict_to_model(model_cls, item) for item in items]

def to_local_datetime(timestamp: int, timezone: Optional[tzinfo] = None) -> datetime:
    """Interpret epoch seconds in `timezone`, or the system local zone when None."""
    if timezone is None:
        return datetime.fromtimestamp(timestamp)
    return datetime.fromtimestamp(timestamp, tz=timezone)

def format_date(timestamp: Optional[int], timezone: Optional[tzinfo] = None, missing: str = "N/A") -> str:
    if timestamp is None:
        return missing
    dt = to_local_datetime(timestamp, timezone)
    return f"{dt.month}/{dt.day}/{dt.year}"

def month_key(dt: datetime) -> str:
    return dt.strftime("%Y-%m")
