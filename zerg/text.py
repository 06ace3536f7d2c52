"""String helpers: splitting, trimming, wrapping, placeholder substitution."""

from __future__ import annotations

import random
import string
from collections.abc import Iterable, Mapping
from typing import Any

from zerg.seqtools import parse_int

_WHITESPACE = " \t\n\v\f\r"
_ALPHANUM = string.digits + string.ascii_uppercase + string.ascii_lowercase
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_MIN_WRAP_WIDTH = 16
_BOOL_NAMES = {False: "false", True: "true"}


def split(text: str, delimiter: str = " ") -> list[str]:
    """Split on every occurrence of ``delimiter``, keeping empty fields."""
    return text.split(delimiter)


def split_instrument_id(text: str) -> tuple[str, str]:
    """Split ``"code.market"`` at the first dot; the market is empty if there is none."""
    code, _, market = text.partition(".")
    return code, market


def gbk_to_utf8(data: bytes) -> str:
    """Decode GBK-encoded bytes into text."""
    return bytes(data).decode("gbk")


def to_upper(text: str) -> str:
    """Upper-case ASCII letters, leaving every other character alone."""
    return text.translate(_TO_UPPER)


def to_lower(text: str) -> str:
    """Lower-case ASCII letters, leaving every other character alone."""
    return text.translate(_TO_LOWER)


def replace_all(text: str, old: str, new: str) -> str:
    """Replace every non-overlapping occurrence of ``old``; an empty ``old`` changes nothing."""
    if not old or not text:
        return text
    return text.replace(old, new)


def ltrim(text: str) -> str:
    """Strip leading whitespace."""
    return text.lstrip(_WHITESPACE)


def rtrim(text: str) -> str:
    """Strip trailing whitespace."""
    return text.rstrip(_WHITESPACE)


def trim(text: str) -> str:
    """Strip whitespace at both ends."""
    return text.strip(_WHITESPACE)


def word_wrap(text: str, max_line_size: int) -> list[str]:
    """Break ``text`` into lines of at most ``max_line_size`` characters.

    Lines break at whitespace; a word longer than a line is cut and marked
    with a trailing ``-``. Widths below 16 are raised to 16.
    """
    width = max(max_line_size, _MIN_WRAP_WIDTH)
    lines: list[str] = []
    size = len(text)
    start = 0
    while size - start > width:
        end = start + width
        while end > start and text[end - 1] not in _WHITESPACE:
            end -= 1
        while end > start and text[end - 1] in _WHITESPACE:
            end -= 1
        if end == start:
            end = start + width - 1
            lines.append(text[start:end] + "-")
        else:
            lines.append(text[start:end])
        start = end
        while start < size and text[start] in _WHITESPACE:
            start += 1
    if start < size:
        lines.append(text[start:])
    return lines


def bool_string(value: int) -> str:
    """Return ``"true"`` or ``"false"`` for a boolean or integer flag."""
    if not isinstance(value, int):
        raise TypeError(f"expected bool or int, got {type(value).__name__}")
    return _BOOL_NAMES[value != 0]


def starts_with(text: str, prefix: str) -> bool:
    """Whether ``text`` begins with ``prefix``."""
    return text.startswith(prefix)


def ends_with(text: str, suffix: str) -> bool:
    """Whether ``text`` ends with ``suffix``."""
    return text.endswith(suffix)


def random_string(length: int, seed: int = 0) -> str:
    """Random alphanumeric string; a non-zero ``seed`` makes it reproducible."""
    rng: random.Random = random.Random(seed) if seed else random.SystemRandom()
    return "".join(rng.choice(_ALPHANUM) for _ in range(length))


def expand_names(text: str) -> list[str]:
    """Expand a comma-separated list of names with ``prefix[a-b]suffix`` ranges.

    ``"f[1-3],g"`` becomes ``["f1", "f2", "f3", "g"]``. Empty entries are
    dropped and malformed brackets are kept verbatim.
    """
    names: list[str] = []
    for pattern in text.split(","):
        if not pattern:
            continue
        open_at = pattern.find("[")
        close_at = pattern.find("]")
        if open_at < 0 or close_at < open_at:
            names.append(pattern)
            continue
        prefix = pattern[:open_at]
        suffix = pattern[close_at + 1:]
        bounds = pattern[open_at + 1:close_at].split("-")
        if len(bounds) != 2:
            names.append(pattern)
            continue
        first, last = (parse_int(bound) for bound in bounds)
        names.extend(f"{prefix}{index}{suffix}" for index in range(first, last + 1))
    return names


def format_general(value: float) -> str:
    """Format a number the way ``%g`` does."""
    return "%g" % value


def replace_placeholders(text: str, holders: Mapping[str, str]) -> str:
    """Substitute each ``${name}`` with ``holders[name]``, names taken in sorted order."""
    for name in sorted(holders):
        text = replace_all(text, "${" + name + "}", holders[name])
    return text


def string_join(items: Iterable[Any], delimiter: str = " ") -> str:
    """Join the string forms of ``items`` with ``delimiter``."""
    return delimiter.join(str(item) for item in items)