"""Timestamped logging to standard output."""

from __future__ import annotations

import time
from typing import NoReturn

from zerg.timeutil import now_string

_FAIL_PAUSE_SECONDS = 0.001


def log(message: str) -> None:
    """Print ``message`` prefixed with the local time in brackets and flush."""
    print(f"[{now_string()}]{message}", flush=True)


def fail(message: str) -> NoReturn:
    """Log ``message``, pause briefly, then raise it as a ``RuntimeError``."""
    log(message)
    time.sleep(_FAIL_PAUSE_SECONDS)
    raise RuntimeError(message)