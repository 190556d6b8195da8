from __future__ import annotations

import math
import re
from typing import Any, Callable, Iterable, Sequence

from dataprofile_web.domain.models import BOOLEAN, DATE, EMPTY, NUMBER, STRING

NUMBER_PATTERN = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")
DATE_PATTERN = re.compile(r"\d{4}[-/]\d{1,2}[-/]\d{1,2}|\d{1,2}[-/]\d{1,2}[-/]\d{2,4}")
BOOLEAN_VALUES = frozenset({"true", "false", "0", "1", "yes", "no"})


def as_text(value: Any) -> str:
    """Stringify a cell the way the browser client renders it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    # Nested JSON is never a date or boolean; skip repr() of arbitrarily deep values
    if isinstance(value, dict):
        return "[object Object]"
    if isinstance(value, list):
        return "[object Array]"
    return str(value)


def is_missing(value: Any) -> bool:
    return value is None or value == ""


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, (int, float)):
        try:
            return math.isfinite(value)
        except OverflowError:
            return False
    if not isinstance(value, str) or not NUMBER_PATTERN.fullmatch(value):
        return False
    return math.isfinite(float(value))


def is_date(value: Any) -> bool:
    return DATE_PATTERN.fullmatch(as_text(value)) is not None


def is_boolean(value: Any) -> bool:
    return as_text(value).lower() in BOOLEAN_VALUES


# First match wins; numbers must be checked before booleans so 0/1 columns stay numeric
CLASSIFIERS: Sequence[tuple[str, Callable[[Any], bool]]] = (
    (NUMBER, is_number),
    (DATE, is_date),
    (BOOLEAN, is_boolean),
)


def detect_data_type(values: Iterable[Any]) -> str:
    present = [v for v in values if not is_missing(v)]
    if not present:
        return EMPTY

    for type_name, matches in CLASSIFIERS:
        if all(matches(v) for v in present):
            return type_name

    return STRING
