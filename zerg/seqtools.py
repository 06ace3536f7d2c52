"""Parsing of parameter strings and helpers over sequences."""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T", bound=Hashable)

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def parse_int(text: str) -> int:
    """Parse a leading 32-bit integer, ignoring leading whitespace and trailing text."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value


def parse_float(text: str) -> float:
    """Parse a leading floating-point number, ignoring leading whitespace and trailing text."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    literal = match.group(1)
    value = float(literal)
    if math.isinf(value) and "inf" not in literal.lower():
        raise OverflowError(f"number out of range: {text!r}")
    return value


def parse_bool(text: str) -> bool:
    """``"true"``, ``"True"`` and ``"1"`` are true; anything else is false."""
    return text in ("true", "1", "True")


def _to_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        return "%f" % value
    return str(value)


def head(items: Sequence[Any], n: int = 0) -> str:
    """The first ``n`` items (all if ``n`` is 0), each followed by a comma."""
    count = len(items) if n == 0 else min(n, len(items))
    return "".join(_to_string(item) + "," for item in items[:count])


def is_subset(items: Iterable[T], subset: Iterable[T]) -> bool:
    """Whether ``items`` contains every element of ``subset``, counting repeats."""
    available = Counter(items)
    wanted = Counter(subset)
    return all(available[key] >= count for key, count in wanted.items())


def has_common_element(a: Iterable[T], b: Iterable[T]) -> bool:
    """Whether the two collections share at least one element."""
    return not set(a).isdisjoint(b)


def dedupe_keep_order(items: Iterable[T]) -> list[T]:
    """Drop repeated elements, keeping the first occurrence of each."""
    return list(dict.fromkeys(items))


def _format_scalar(value: Any) -> str:
    if isinstance(value, float):
        return "%g" % value
    if isinstance(value, bool):
        return str(int(value))
    return str(value)


def format_items(items: Iterable[Any]) -> str:
    """Space-separated rendering of a collection, each element followed by a space.

    Sets are rendered in sorted order; a sequence of lists or tuples is
    rendered one row per line.
    """
    if isinstance(items, (set, frozenset)):
        items = sorted(items)
    rows = list(items)
    if rows and all(isinstance(row, (list, tuple)) for row in rows):
        return "".join(format_items(row) + "\n" for row in rows)
    return "".join(_format_scalar(item) + " " for item in rows)