"""hourglass.api

Stable *library* entrypoint for hourglass.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from hourglass.model import Tick
from hourglass.render.bar import build_progress_line
from hourglass.render.loop import run_countdown
from hourglass.util.console import TerminalSizeError, terminal_width
from hourglass.util.duration import format_duration
from hourglass.util.timeparse import TargetHourError, parse_target_hour

__version__ = "0.1.0"


# --- Public API exports ---------------------------------------------------
_PUBLIC_EXPORTS = (
    "TargetHourError",
    "TerminalSizeError",
    "Tick",
    "__version__",
    "build_progress_line",
    "format_duration",
    "parse_target_hour",
    "run_countdown",
    "terminal_width",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
