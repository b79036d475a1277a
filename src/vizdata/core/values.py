"""Value tags and ordering rules for cell values.

Cell values are open-ended Python objects. For sorting they are classified
into a small set of tags, each with a natural total order. Values of
different tags are never compared with each other, with one exception:
None (the null tag) orders before every other value.
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from typing import Any, Iterable

from vizdata.core.errors import ComparisonError


class ColumnType(str, Enum):
    """
    Declared scalar type of a column.

    Values:
        STRING: Text values.
        NUMBER: Integers, floats and decimals.
        BOOLEAN: True / False.
        DATE: Calendar dates without a time part.
        DATETIME: Dates with a time of day.
        TIMEOFDAY: A time of day without a date.
    """

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    DATETIME = "datetime"
    TIMEOFDAY = "timeofday"

    @classmethod
    def parse(cls, value: ColumnType | str | None) -> ColumnType:
        """Return the ColumnType for a tag name (case-insensitive, default string)."""
        if value is None:
            return cls.STRING
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            allowed = ", ".join(t.value for t in cls)
            raise ValueError(
                f"Invalid column type: '{value}' (expected one of {allowed})"
            ) from exc


class ValueTag(str, Enum):
    """Runtime classification of a cell value used for ordering."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    DATE = "date"
    DATETIME = "datetime"
    TIMEOFDAY = "timeofday"
    OTHER = "other"


_NUMBER_TYPES = (int, float, Decimal, Fraction)


def value_tag(value: Any) -> ValueTag:
    """Classify a cell value into its ValueTag."""
    if value is None:
        return ValueTag.NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return ValueTag.BOOLEAN
    if isinstance(value, _NUMBER_TYPES):
        return ValueTag.NUMBER
    if isinstance(value, str):
        return ValueTag.STRING
    # datetime before date: datetime is a date subclass
    if isinstance(value, dt.datetime):
        return ValueTag.DATETIME
    if isinstance(value, dt.date):
        return ValueTag.DATE
    if isinstance(value, dt.time):
        return ValueTag.TIMEOFDAY
    return ValueTag.OTHER


def check_comparable(values: Iterable[Any]) -> ValueTag | None:
    """
    Ensure all non-null values share one tag.

    Returns:
        The shared tag, or None if every value is null.

    Raises:
        ComparisonError: If two values carry different tags.
    """
    seen: ValueTag | None = None
    first: Any = None
    for value in values:
        tag = value_tag(value)
        if tag is ValueTag.NULL:
            continue
        if seen is None:
            seen, first = tag, value
        elif tag is not seen:
            raise ComparisonError(
                f"Cannot compare {tag.value} value {value!r} "
                f"with {seen.value} value {first!r}"
            )
    return seen


def sort_key(value: Any) -> tuple[bool, Any]:
    """Key placing nulls before all other values of the same column."""
    if value is None:
        return (False, 0)
    return (True, value)
