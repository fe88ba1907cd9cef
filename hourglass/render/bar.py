# hourglass/render/bar.py
from __future__ import annotations

from typing import Tuple

from hourglass.model import Tick
from hourglass.util.duration import format_duration

# "[", ">", "]", "%" and the two separating spaces.
EXTRA_CHAR_NB = 6


def bar_geometry(tick: Tick, remaining_text: str) -> Tuple[int, int]:
    """Return (filled, bar_width) for the progress bar of `tick`."""
    bar_width = tick.width - EXTRA_CHAR_NB - len(str(tick.percent)) - len(remaining_text)
    bar_width = max(0, bar_width)
    sec_size = bar_width / tick.total_s
    filled = int(sec_size * tick.elapsed_s)
    return min(max(0, filled), bar_width), bar_width


def line_ending(tick: Tick) -> str:
    return "\n" if tick.remaining_s == 0 else "\r"


def build_progress_line(tick: Tick) -> str:
    """Render one progress line, including its "\\r" or "\\n" terminator.

    Layout: [=====>     ] 42% 1h 3m
    """
    remaining_text = format_duration(tick.remaining)
    filled, bar_width = bar_geometry(tick, remaining_text)
    bar = "=" * filled + ">" + " " * (bar_width - filled)
    return f"[{bar}] {tick.percent}% {remaining_text}{line_ending(tick)}"
