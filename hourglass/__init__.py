"""hourglass Python package.

Public API:
  - import from `hourglass.api` (preferred) or `import hourglass` (re-export)
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__all__ = list(_api.__all__)

from .api import (
    TargetHourError,
    TerminalSizeError,
    Tick,
    __version__,
    build_progress_line,
    format_duration,
    parse_target_hour,
    run_countdown,
    terminal_width,
)
