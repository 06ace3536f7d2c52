"""Date and time helpers working with epoch seconds, YYYYMMDD dates and HHMMSS times."""

from __future__ import annotations

import calendar
import datetime as _dt
import re
import time

from zerg.text import replace_all, to_lower

ONE_SECOND_NANO = 1_000_000_000
DAY_NIGHT_SPLIT = 180000000
DAY_START_SPLIT = 60000000
ONE_DAY_LONG = 240000000

_U64 = 2**64
_SECOND_US = 1_000_000
_MINUTE_US = 60 * _SECOND_US
_HOUR_US = 60 * _MINUTE_US

# Checked in this order; the first unit found in the text wins.
_UNITS: tuple[tuple[str, int], ...] = (
    ("milliseconds", 1000),
    ("millisecond", 1000),
    ("ms", 1000),
    ("minutes", _MINUTE_US),
    ("minute", _MINUTE_US),
    ("min", _MINUTE_US),
    ("hours", _HOUR_US),
    ("hour", _HOUR_US),
    ("macroseconds", 1),
    ("macrosecond", 1),
    ("seconds", _SECOND_US),
    ("second", _SECOND_US),
    ("sec", _SECOND_US),
    ("quarter", 15 * _MINUTE_US),
    ("us", 1),
    ("q", 15 * _MINUTE_US),
    ("m", _MINUTE_US),
    ("s", _SECOND_US),
    ("h", _HOUR_US),
)

_UNSIGNED_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]+)")


def _parse_unsigned(text: str) -> int:
    match = _UNSIGNED_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    value = int(match.group(2))
    if value >= _U64:
        raise OverflowError(f"number out of range: {text!r}")
    if match.group(1) == "-":
        value = -value % _U64
    return value


def _digit(text: str, index: int) -> int:
    if index >= len(text):
        raise ValueError(f"{text!r} is too short")
    return ord(text[index]) - ord("0")


def _mktime(year: int, month: int, day: int, hour: int, minute: int, second: int) -> int:
    return int(time.mktime((year, month, day, hour, minute, second, 0, 0, -1)))


def micros_since_epoch() -> int:
    """Microseconds since the Unix epoch."""
    return time.time_ns() // 1000


def nanos_since_epoch() -> int:
    """Nanoseconds since the Unix epoch."""
    return time.time_ns()


def weekdays_in_year(year: int) -> list[int]:
    """Every Monday-to-Friday date of ``year`` as YYYYMMDD integers."""
    days: list[int] = []
    for month in range(1, 13):
        for day in range(1, calendar.monthrange(year, month)[1] + 1):
            if _dt.date(year, month, day).weekday() < 5:
                days.append(year * 10000 + month * 100 + day)
    return days


def human_readable_microsecond(text: str) -> int:
    """Parse an interval such as ``"100ms"``, ``"10 min"`` or ``"2h"`` into microseconds.

    A bare number is taken as milliseconds; an empty string is 0.
    """
    lowered = to_lower(text)
    for token, scale in _UNITS:
        pos = lowered.find(token)
        if pos >= 0:
            return scale * _parse_unsigned(lowered[:pos]) % _U64
    if text:
        return _parse_unsigned(lowered) * 1000 % _U64
    return 0


def human_readable_millisecond(text: str) -> int:
    """Parse an interval like :func:`human_readable_microsecond`, in milliseconds."""
    return human_readable_microsecond(text) // 1000


def nanos_to_seconds(nanos: int) -> float:
    """Seconds as a float, keeping microsecond precision."""
    seconds, rest = divmod(nanos, ONE_SECOND_NANO)
    return float(seconds) + (rest // 1000) / 1_000_000.0


def seconds_to_nanos(seconds: float) -> int:
    """Nanoseconds for ``seconds``, rounded to the nearest microsecond."""
    whole = int(seconds)
    micros = int((seconds - whole) * 1_000_000.0 + 0.5 // 1) if False else int(
        _floor(((seconds - whole) * 1_000_000.0) + 0.5)
    )
    return whole * ONE_SECOND_NANO + micros * 1000


def _floor(value: float) -> int:
    whole = int(value)
    return whole - 1 if value < whole else whole


def nano_to_date(nano: int = 0) -> int:
    """UTC date of ``nano`` (now if 0) as YYYYMMDD."""
    if nano == 0:
        nano = nanos_since_epoch()
    tm = time.gmtime(nano // ONE_SECOND_NANO)
    return tm.tm_year * 10000 + tm.tm_mon * 100 + tm.tm_mday


def time_to_string(epoch: int) -> str:
    """Local ``YYYY-MM-DD HH:MM:SS`` for epoch seconds, or ``"N/A"`` for 0."""
    if not epoch:
        return "N/A"
    tm = time.localtime(epoch)
    return (
        f"{tm.tm_year:4d}-{tm.tm_mon:02d}-{tm.tm_mday:02d} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}"
    )


def time_to_hms(epoch: int) -> int:
    """Local time of day of ``epoch`` as HHMMSS."""
    tm = time.localtime(epoch)
    return tm.tm_hour * 10000 + tm.tm_min * 100 + tm.tm_sec


def split_hms(hms: int) -> tuple[int, int, int]:
    """Split HHMMSS into ``(hour, minute, second)``."""
    return hms // 10000, (hms % 10000) // 100, hms % 100


def ntime_to_string(nano: int) -> str:
    """Local ``YYYY-MM-DD HH:MM:SS`` for nanoseconds since the epoch."""
    return time_to_string(nano // ONE_SECOND_NANO)


def epoch_from_ymdhms(ymd: int, hms: int) -> int:
    """Epoch seconds of the local time given as YYYYMMDD and HHMMSS."""
    day = ymd % 100
    month = (ymd // 100) % 100
    year = ymd // 10000
    second = hms % 100
    minute = (hms // 100) % 100
    hour = hms // 10000
    return _mktime(year, month, day, hour, minute, second)


def ntime_from_double(ymdhms: float) -> int:
    """Nanoseconds since the epoch for a local time written as ``YYYYMMDD.HHMMSS``."""
    date = int(ymdhms)
    hms = int((ymdhms - date) * 1000000)
    return ONE_SECOND_NANO * epoch_from_ymdhms(date, hms)


def _format_with_fraction(seconds: int, millis: int) -> str:
    tm = time.localtime(seconds)
    return (
        f"{tm.tm_year:4d}-{tm.tm_mon:02d}-{tm.tm_mday:02d} "
        f"{tm.tm_hour:02d}:{tm.tm_min:02d}:{tm.tm_sec:02d}.{millis:03d}"
    )


def micros_to_string(micros: int) -> str:
    """Local ``YYYY-MM-DD HH:MM:SS.mmm`` for microseconds since the epoch."""
    seconds, rest = divmod(micros, 1_000_000)
    return _format_with_fraction(seconds, rest // 1000)


def nanos_to_string(nanos: int) -> str:
    """Local ``YYYY-MM-DD HH:MM:SS.mmm`` for nanoseconds since the epoch."""
    seconds, rest = divmod(nanos, ONE_SECOND_NANO)
    return _format_with_fraction(seconds, rest // 1_000_000)


def string_to_second_intraday(text: str, fmt: str) -> int:
    """Seconds since midnight for an ``HHMM[SS]`` string; ``fmt`` must be ``"HHMMSS"``.

    Raises ``ValueError`` when the format is unknown or the time is out of range.
    """
    if fmt == "HHMMSS" and len(text) >= 4:
        hour = 10 * _digit(text, 0) + _digit(text, 1)
        minute = 10 * _digit(text, 2) + _digit(text, 3)
        second = 0
        if len(text) >= 6:
            second = 10 * _digit(text, 0) + _digit(text, 1)
        if 0 <= hour <= 23 and 0 <= minute <= 59 and 0 <= second <= 59:
            return hour * 3600 + minute * 60 + second
    raise ValueError(f"cannot read {text!r} as {fmt!r}")


def string_to_millisecond_intraday(text: str, fmt: str) -> int:
    """Milliseconds since midnight for ``HHMMSS.MMM``; ``fmt`` must be ``"HHMMSS.MMM"``."""
    if fmt != "HHMMSS.MMM":
        raise ValueError(f"unknown format {fmt!r}")
    millis = string_to_second_intraday(text, "HHMMSS") * 1000
    if len(text) == 10:
        millis += 100 * _digit(text, 7) + 10 * _digit(text, 8) + _digit(text, 9)
    return millis


def now_string() -> str:
    """Local time now as ``YYYYMMDD.HHMMSS``."""
    return time.strftime("%Y%m%d.%H%M%S", time.localtime())


def now_local_string() -> str:
    """Local time now as ``YYYY-MM-DD HH:MM:SS.mmm``."""
    return micros_to_string(micros_since_epoch())


def now_cob() -> int:
    """Today's local date as YYYYMMDD."""
    tm = time.localtime()
    return tm.tm_year * 10000 + tm.tm_mon * 100 + tm.tm_mday


def now_hms() -> int:
    """Local time now as HHMMSS."""
    tm = time.localtime()
    return tm.tm_hour * 10000 + tm.tm_min * 100 + tm.tm_sec


def year_from_cob(cob: int) -> int:
    """Year part of YYYYMMDD."""
    return cob // 10000


def month_from_cob(cob: int) -> int:
    """Month part of YYYYMMDD."""
    return (cob // 100) % 100


def day_from_cob(cob: int) -> int:
    """Day part of YYYYMMDD."""
    return cob % 100


def intraday_time_hms(text: str) -> int:
    """``"23:59:59"`` to ``235959``."""
    return (
        _digit(text, 0) * 100000
        + _digit(text, 1) * 10000
        + _digit(text, 3) * 1000
        + _digit(text, 4) * 100
        + _digit(text, 6) * 10
        + _digit(text, 7)
    )


def usec_hms(text: str, ms: int = 0) -> int:
    """Microseconds since midnight for ``"HH:MM:SS"`` plus ``ms`` milliseconds."""
    hour = _digit(text, 0) * 10 + _digit(text, 1)
    minute = _digit(text, 3) * 10 + _digit(text, 4)
    second = _digit(text, 6) * 10 + _digit(text, 7)
    return (hour * 3600 + minute * 60 + second) * 1_000_000 + ms * 1000


def intraday_time_hm(text: str) -> int:
    """``"23:59"`` to ``2359``."""
    return _digit(text, 0) * 1000 + _digit(text, 1) * 100 + _digit(text, 3) * 10 + _digit(text, 4)


def cob_from_string(text: str) -> int:
    """``"20171112"`` to ``20171112``."""
    value = 0
    for index in range(8):
        value = value * 10 + _digit(text, index)
    return value


def cob_from_dash(text: str) -> int:
    """``"2017-11-12"`` to ``20171112``."""
    value = 0
    for index in (0, 1, 2, 3, 5, 6, 8, 9):
        value = value * 10 + _digit(text, index)
    return value


def time_string_to_epoch(text: str) -> float:
    """Epoch seconds for a local time written ``"YYYYMMDD HH:MM:SS"``."""
    parsed = _dt.datetime.strptime(text.strip(), "%Y%m%d %H:%M:%S")
    return float(
        _mktime(parsed.year, parsed.month, parsed.day, parsed.hour, parsed.minute, parsed.second)
    )


def replace_time_placeholder(text: str, date: int = 0, time_ms: int = -1) -> str:
    """Fill ``${YYYY}``, ``${MM}``, ``${DD}``, ``${YYYYMMDD}``, ``${YYYYMM}``, ``${MMDD}``,
    ``${HHMMSS}`` and ``${HHMMSSmmm}``.

    ``date`` is YYYYMMDD (today if not positive); ``time_ms`` is HHMMSSmmm
    (now if negative).
    """
    now = _dt.datetime.now()
    if date <= 0:
        year, month, day = f"{now.year:04d}", f"{now.month:02d}", f"{now.day:02d}"
    else:
        year = f"{date // 10000:04d}"
        month = f"{(date % 10000) // 100:02d}"
        day = f"{date % 100:02d}"
    if time_ms >= 0:
        stamp = f"{time_ms // 1000:06d}"
        stamp_ms = f"{time_ms:09d}"
    else:
        stamp = now.strftime("%H%M%S")
        stamp_ms = stamp + f"{now.microsecond // 1000:03d}"
    for holder, value in (
        ("${YYYY}", year),
        ("${MM}", month),
        ("${DD}", day),
        ("${YYYYMMDD}", year + month + day),
        ("${YYYYMM}", year + month),
        ("${MMDD}", month + day),
        ("${HHMMSS}", stamp),
        ("${HHMMSSmmm}", stamp_ms),
    ):
        text = replace_all(text, holder, value)
    return text


def next_date(cob: int) -> int:
    """The calendar day after the YYYYMMDD date ``cob``."""
    noon = _mktime(cob // 10000, (cob // 100) % 100, cob % 100, 12, 0, 0)
    tm = time.localtime(noon + 24 * 60 * 60)
    return tm.tm_year * 10000 + tm.tm_mon * 100 + tm.tm_mday