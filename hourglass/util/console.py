# hourglass/util/console.py
from __future__ import annotations

import os
import sys
from typing import Any, Optional, TextIO


class TerminalSizeError(RuntimeError):
    """Raised when the terminal width cannot be determined."""


def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def obs_enabled() -> bool:
    v = (os.getenv("HOURGLASS_OBS_LOG", "") or "").strip().lower()
    return v in {"1", "true", "yes", "on"}


def terminal_width(stream: Optional[TextIO] = None) -> int:
    """Return the current terminal width in columns.

    A positive integer in the COLUMNS environment variable wins, as with
    shutil.get_terminal_size. Otherwise the terminal behind `stream`
    (default: sys.stdout) is queried. There is no fallback size: a stream
    that is not attached to a terminal raises TerminalSizeError.
    """
    raw = (os.getenv("COLUMNS", "") or "").strip()
    if raw:
        try:
            cols = int(raw)
        except ValueError:
            cols = 0
        if cols > 0:
            return cols
        if obs_enabled():
            eprint(f"[hourglass.console] WARN: ignoring invalid COLUMNS={raw!r}")

    out = stream if stream is not None else sys.stdout
    try:
        fd = out.fileno()
        return os.get_terminal_size(fd).columns
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalSizeError(f"No terminal size found ({e})") from e
