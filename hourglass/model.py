# hourglass/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from .util.duration import whole_seconds


@dataclass(frozen=True)
class Tick:
    """One redraw of the progress line."""

    elapsed: dt.timedelta
    remaining: dt.timedelta
    total: dt.timedelta
    width: int

    @property
    def elapsed_s(self) -> int:
        return whole_seconds(self.elapsed)

    @property
    def remaining_s(self) -> int:
        return whole_seconds(self.remaining)

    @property
    def total_s(self) -> int:
        # A target less than a second away still counts as one second.
        return max(1, whole_seconds(self.total))

    @property
    def percent(self) -> int:
        return self.elapsed_s * 100 // self.total_s

    @property
    def done(self) -> bool:
        return self.remaining < dt.timedelta(0)
