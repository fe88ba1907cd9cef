from __future__ import annotations

import os
import time
from contextlib import contextmanager
from typing import Iterator

# POSIX TZ rules, usable without a system zoneinfo database.
UTC = "UTC0"
PARIS = "CET-1CEST,M3.5.0,M10.5.0/3"


@contextmanager
def local_tz(rule: str) -> Iterator[None]:
    """Temporarily switch the process local timezone."""
    old = os.environ.get("TZ")
    os.environ["TZ"] = rule
    time.tzset()
    try:
        yield
    finally:
        if old is None:
            os.environ.pop("TZ", None)
        else:
            os.environ["TZ"] = old
        time.tzset()
