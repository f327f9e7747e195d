"""Lenient parsing for numeric and date fields coming from forms and files.

Numeric fields never fail: anything unparseable, negative or non-finite
becomes 0. A leading numeric prefix is honoured ("42km" -> 42), the way a
browser number parse behaves.
"""

import math
import re
from datetime import date, datetime, timezone
from typing import Any, Union

from dateutil.parser import isoparse

_FLOAT_PREFIX = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INT_PREFIX = re.compile(r"^\s*[+-]?\d+")
_FULL_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}")


def parse_float(value: Any) -> float:
    """Parse a non-negative float, falling back to 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        match = _FLOAT_PREFIX.match(str(value))
        if not match:
            return 0.0
        number = float(match.group(0))
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0.0
    return number


def parse_int(value: Any) -> int:
    """Parse a non-negative integer (truncating decimals), falling back to 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        number = int(value)
    elif isinstance(value, int):
        number = value
    else:
        match = _INT_PREFIX.match(str(value))
        if not match:
            return 0
        number = int(match.group(0))
    return max(number, 0)


def parse_date(value: Union[str, date, datetime]) -> date:
    """
    Normalize to a calendar date.

    Timezone-aware datetimes are converted to UTC before the date is taken;
    naive datetimes and ISO strings are read as UTC already.
    Raises ValueError for strings that are not full ISO dates (YYYY-MM-DD,
    optionally followed by a time).
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not _FULL_DATE.match(text):
        raise ValueError(f"Not a YYYY-MM-DD date: {text!r}")
    return parse_date(isoparse(text))
