# hourglass/render/loop.py
from __future__ import annotations

import datetime as dt
import sys
import time
from typing import Callable, Optional, TextIO

from hourglass.model import Tick
from hourglass.render.bar import build_progress_line
from hourglass.util.console import eprint, obs_enabled, terminal_width
from hourglass.util.tz import local_now

DEFAULT_INTERVAL_S = 1.0


def run_countdown(
    target: dt.datetime,
    start: dt.datetime,
    *,
    stream: Optional[TextIO] = None,
    interval: float = DEFAULT_INTERVAL_S,
    now_fn: Callable[[], dt.datetime] = local_now,
    sleep: Callable[[float], None] = time.sleep,
    width_fn: Callable[[TextIO], int] = terminal_width,
) -> int:
    """Redraw the progress line until `target` has passed.

    The loop keeps drawing while the remaining time is >= 0 and sleeps a
    fixed `interval` between redraws (no drift correction). It stops right
    after the zero-second line, the only one ending in a newline. Width is
    re-queried every tick; a TerminalSizeError from `width_fn` propagates.

    Returns the number of lines drawn.
    """
    out = stream if stream is not None else sys.stdout
    total = target - start
    remaining = total
    drawn = 0
    last_eol = "\n"

    while remaining >= dt.timedelta(0):
        width = width_fn(out)
        elapsed = now_fn() - start
        tick = Tick(elapsed=elapsed, remaining=remaining, total=total, width=width)

        line = build_progress_line(tick)
        out.write(line)
        out.flush()
        drawn += 1
        last_eol = line[-1]
        if last_eol == "\n":
            break

        sleep(interval)
        # Remaining and elapsed come from separate clock reads, so a frame can
        # pair a fresh percent with a remaining time one interval old.
        remaining = target - now_fn()

    if last_eol != "\n":
        # The zero-second tick was skipped; leave the cursor on a fresh line.
        if obs_enabled():
            eprint("[hourglass.loop] WARN: final tick skipped, terminating line")
        out.write("\n")
        out.flush()

    return drawn
