from __future__ import annotations

import argparse
import math
import os
import sys

from .api import __version__
from .render.loop import DEFAULT_INTERVAL_S, run_countdown
from .util.console import TerminalSizeError, eprint, obs_enabled
from .util.duration import format_duration
from .util.timeparse import TargetHourError, parse_target_hour
from .util.tz import local_now

SUMMARY_TIME_FORMAT = "%d/%m/%Y %H:%M:%S"
# Longest redraw interval accepted: one day.
MAX_INTERVAL_S = 86400.0


def parse_interval(raw: str) -> float:
    try:
        v = float(str(raw).strip())
    except ValueError:
        raise ValueError(f"{raw!r} is not a number")
    if not math.isfinite(v) or v <= 0 or v > MAX_INTERVAL_S:
        raise ValueError(f"{raw!r} (must be > 0 and <= {MAX_INTERVAL_S:g} seconds)")
    return v


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="hourglass",
        description="Count down to a clock time with a progress bar in the terminal.",
    )
    ap.add_argument("target_hour", metavar="TARGET_HOUR", help="Target time of day: H, H:M or H:M:S (24h clock)")
    ap.add_argument(
        "--interval",
        default=os.getenv("HOURGLASS_INTERVAL", str(DEFAULT_INTERVAL_S)),
        help="Seconds between redraws (default: env HOURGLASS_INTERVAL or 1.0)",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = ap.parse_args(argv)

    try:
        interval = parse_interval(args.interval)
    except ValueError as e:
        raise SystemExit(f"Invalid --interval value: {e}")

    try:
        target = parse_target_hour(args.target_hour)
    except TargetHourError as e:
        raise SystemExit(f"Invalid target hour {args.target_hour!r}: {e}")

    start = local_now()
    total = target - start
    if obs_enabled():
        eprint(f"[hourglass.cli] start={start.isoformat()} target={target.isoformat()} interval={interval}")

    print(f"Waiting for {format_duration(total)} until {target.strftime(SUMMARY_TIME_FORMAT)}", flush=True)

    try:
        run_countdown(target, start, interval=interval)
    except TerminalSizeError as e:
        raise SystemExit(f"Cannot determine terminal size: {e}")
    except KeyboardInterrupt:
        print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
