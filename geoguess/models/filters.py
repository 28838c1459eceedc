import math
import re
from dataclasses import dataclass
from typing import FrozenSet, Optional, Sequence, Tuple, Union
from uuid import UUID

# User and thumbnail references: a token of letters, digits and `_.:-`
REFERENCE_ID_PATTERN = r'^[A-Za-z0-9][A-Za-z0-9_.:-]{0,99}$'
_REFERENCE_ID = re.compile(REFERENCE_ID_PATTERN)

def is_valid_id(value) -> bool:
    """Guess ids are UUIDs"""
    if not isinstance(value, str) or not value:
        return False
    try:
        UUID(value)
    except ValueError:
        return False
    return True

def is_valid_reference(value) -> bool:
    return isinstance(value, str) and _REFERENCE_ID.fullmatch(value) is not None

@dataclass(frozen=True)
class NoFilter:
    pass

@dataclass(frozen=True)
class ScoreAtLeast:
    minimum: float

@dataclass(frozen=True)
class UserEquals:
    user_id: str

@dataclass(frozen=True)
class UserIn:
    user_ids: FrozenSet[str]

@dataclass(frozen=True)
class Combined:
    filters: Tuple["GuessFilter", ...]

GuessFilter = Union[NoFilter, ScoreAtLeast, UserEquals, UserIn, Combined]

def parse_score(raw: Optional[str]) -> Optional[float]:
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    # "nan" and "inf" parse as floats but are not usable bounds
    if not math.isfinite(value):
        return None
    return value

def build_guess_filter(scored_at_least: Optional[str] = None, user_ids: Sequence[str] = ()) -> GuessFilter:
    """
    Map the `scoredAtLeast` and `userID` query parameters to a filter.

    A repeated `userID` keeps only its well-formed references, so a list made
    only of malformed ones matches nothing. A single malformed `userID` is ignored.
    """
    filters = []

    minimum = parse_score(scored_at_least)
    if minimum is not None:
        filters.append(ScoreAtLeast(minimum))

    if len(user_ids) > 1:
        filters.append(UserIn(frozenset(u for u in user_ids if is_valid_reference(u))))
    elif len(user_ids) == 1 and is_valid_reference(user_ids[0]):
        filters.append(UserEquals(user_ids[0]))

    if not filters:
        return NoFilter()
    if len(filters) == 1:
        return filters[0]
    return Combined(tuple(filters))
