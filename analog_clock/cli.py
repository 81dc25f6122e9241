#!/usr/bin/env python3
"""
Terminal Analog Clock
A live analog clock with hour, minute and second hands drawn in the terminal.

Usage: analog-clock [--width N] [--seconds MODE] [--face STYLE] [--markers STYLE]

Controls:
- s: Cycle second hand (off, tick, sweep)
- c: Cycle face (full circle, ticks, hour ticks, blank)
- n: Cycle hour markers (off, numbers, dots)
- m: Toggle continuous minute hand
- e: Toggle drawing only the tip of the second hand
- +/-: Widen/narrow the clock
- q: Quit
"""

import argparse
import logging
import os
import signal
import sys

from rich.console import Console

from . import __version__
from .loop import RenderLoop
from .render import DEFAULT_LABELS, HandLabels, compose_frame
from .state import DEFAULT_WIDTH, MIN_WIDTH, DisplayState, FaceStyle, MarkerStyle, SecondMode
from .terminal import AnsiTerminal, CursesTerminal, print_frame
from .timesource import system_time

logger = logging.getLogger("analog_clock")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def clock_width(value):
    """argparse type for --width"""
    width = int(value)
    if width < MIN_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be at least {MIN_WIDTH}")
    return width


def hand_label(value):
    """argparse type for the hand label options"""
    if not value:
        raise argparse.ArgumentTypeError("label must not be empty")
    return value


def build_parser():
    parser = argparse.ArgumentParser(description="Live analog clock for the terminal")
    parser.add_argument("-w", "--width", type=clock_width, default=DEFAULT_WIDTH,
                        help=f"Clock width in columns (default: {DEFAULT_WIDTH}, minimum: {MIN_WIDTH})")
    parser.add_argument("--seconds", choices=SecondMode.ORDER, default=SecondMode.TICK,
                        help="Second hand mode (default: tick)")
    parser.add_argument("--face", choices=FaceStyle.ORDER, default=FaceStyle.FULL_CIRCLE,
                        help="Face style (default: full)")
    parser.add_argument("--markers", choices=MarkerStyle.ORDER, default=MarkerStyle.NUMERIC,
                        help="Hour markers (default: numeric)")
    parser.add_argument("--no-continuous-minutes", action="store_true",
                        help="Move the minute hand in whole minutes")
    parser.add_argument("--tip-only", action="store_true",
                        help="Draw only the outer end of the second hand")
    parser.add_argument("--hour-label", type=hand_label, default=DEFAULT_LABELS.hour,
                        help="Text repeated along the hour hand")
    parser.add_argument("--minute-label", type=hand_label, default=DEFAULT_LABELS.minute,
                        help="Text repeated along the minute hand")
    parser.add_argument("--second-label", type=hand_label, default=DEFAULT_LABELS.second,
                        help="Text repeated along the second hand")
    parser.add_argument("--no-color", action="store_true", help="Draw without colors")
    parser.add_argument("--backend", choices=["curses", "ansi"],
                        default="ansi" if os.name == "nt" else "curses",
                        help="Terminal backend (default: curses, ansi on Windows)")
    parser.add_argument("--once", action="store_true",
                        help="Print a single frame and exit")
    parser.add_argument("--log-file", help="Write a log to this file")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO",
                        help="Log level (default: INFO)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def setup_logging(log_file, level):
    """Log to a file only; the terminal belongs to the clock."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level))


def state_from_args(args):
    return DisplayState(
        second_mode=args.seconds,
        face_style=args.face,
        marker_style=args.markers,
        width=args.width,
        continuous_minutes=not args.no_continuous_minutes,
        second_tip_only=args.tip_only,
    )


def run_clock(args, state, labels):
    """Open a terminal session and run the clock until it is quit."""
    backend = AnsiTerminal if args.backend == "ansi" else CursesTerminal
    with backend(use_colors=not args.no_color) as terminal:
        loop = RenderLoop(
            state,
            time_source=system_time,
            key_source=terminal.poll_key,
            flush=terminal.flush,
            size_source=terminal.size,
            on_shutdown=terminal.shutdown,
            labels=labels,
        )
        previous = signal.signal(signal.SIGTERM, lambda signum, frame: loop.request_stop())
        try:
            return loop.run()
        finally:
            signal.signal(signal.SIGTERM, previous if previous is not None else signal.SIG_DFL)


def main(argv=None):
    """Entry point for the clock application"""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_file, args.log_level)

    console = Console()
    state = state_from_args(args)
    labels = HandLabels(args.hour_label, args.minute_label, args.second_label)
    logger.info("Analog clock %s starting with %r", __version__, state)

    if args.once:
        print_frame(compose_frame(state, system_time(), labels), console,
                    use_colors=not args.no_color)
        return 0

    if args.backend == "curses" and os.name == "nt":
        console.print("[red]Error: the curses backend is not available on Windows, "
                      "use --backend ansi[/red]")
        return 2

    try:
        frames = run_clock(args, state, labels)
    except KeyboardInterrupt:
        logger.info("Interrupted")
        console.print("\nClock terminated. Goodbye!")
        return 0
    except Exception as e:
        logger.exception("Clock stopped by an error")
        console.print(f"[red]Error: {e}[/red]")
        return 1

    logger.info("Clock stopped after %d frames", frames)
    console.print("Clock terminated. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
