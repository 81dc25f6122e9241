"""
Terminal sessions that feed keys to the clock and put its frames on screen.

Two backends are available: a curses session, and a plain ANSI session driven
by colorama for terminals where curses is unavailable. Both are context
managers whose teardown restores the terminal on every exit path.
"""

import codecs
import locale
import logging
import os
import queue
import shutil
import sys
import threading
import time
from typing import Optional, Tuple

import colorama
from colorama import Cursor, Fore, Style
from colorama.ansi import clear_screen
from rich.console import Console
from rich.text import Text

from .screen import Layer, ScreenBuffer

if os.name != "nt":
    import curses
    import select
    import termios
    import tty

logger = logging.getLogger(__name__)

LAYER_COLORS = {
    Layer.FACE: "green",
    Layer.MARKER: "white",
    Layer.HOUR: "red",
    Layer.MINUTE: "yellow",
    Layer.SECOND: "cyan",
}

HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
ENTER_ALT_SCREEN = "\033[?1049h"
EXIT_ALT_SCREEN = "\033[?1049l"


def centered_origin(screen_cols: int, screen_rows: int, buffer: ScreenBuffer) -> Tuple[int, int]:
    """Top-left (row, col) that centers the buffer, pinned to the screen corner when too big."""
    return max(0, (screen_rows - buffer.rows) // 2), max(0, (screen_cols - buffer.cols) // 2)


class CursesTerminal:
    """Curses session: non-blocking keys, hidden cursor, centered frames."""

    def __init__(self, use_colors: bool = True):
        self.use_colors = use_colors
        self.stdscr = None
        self.color_pairs = {}

    def __enter__(self):
        locale.setlocale(locale.LC_ALL, "")
        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.cbreak()
            self.stdscr.keypad(True)
            self.stdscr.nodelay(True)
            try:
                curses.curs_set(0)
            except curses.error:
                logger.debug("Terminal cannot hide the cursor")
            if self.use_colors and curses.has_colors():
                self.init_colors()
        except Exception:
            self.shutdown()
            raise
        logger.info("Curses session started")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False

    def init_colors(self):
        """Initialize one color pair per clock layer."""
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK

        for pair_num, layer in enumerate(Layer.ALL, start=1):
            foreground = getattr(curses, "COLOR_" + LAYER_COLORS[layer].upper())
            curses.init_pair(pair_num, foreground, background)
            self.color_pairs[layer] = pair_num

    def poll_key(self) -> Optional[str]:
        """Return a pending key or None without blocking."""
        key = self.stdscr.getch()
        # -1 means no input; larger codes are special keys such as KEY_RESIZE
        if key < 0 or key > 255:
            return None
        return chr(key)

    def size(self) -> Tuple[int, int]:
        height, width = self.stdscr.getmaxyx()
        return width, height

    def flush(self, buffer: ScreenBuffer):
        """Draw the frame centered on the screen."""
        height, width = self.stdscr.getmaxyx()
        top, left = centered_origin(width, height, buffer)
        self.stdscr.erase()

        for i, runs in enumerate(buffer.runs()):
            y = top + i
            if y >= height:
                break
            x = left
            for text, layer in runs:
                # curses raises when writing the bottom-right cell
                limit = width - x - (1 if y == height - 1 else 0)
                if limit <= 0:
                    break
                text = text[:limit]
                if layer is not None:
                    attr = curses.color_pair(self.color_pairs.get(layer, 0))
                    self.stdscr.addstr(y, x, text, attr)
                x += len(text)

        self.stdscr.refresh()

    def shutdown(self):
        """Restore the terminal; safe to call more than once."""
        if self.stdscr is None:
            return
        self.stdscr.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self.stdscr = None
        logger.info("Curses session closed")


class AnsiTerminal:
    """ANSI session using colorama, with keys read on a background thread."""

    def __init__(self, use_colors: bool = True, stream=None, input_stream=None):
        self.use_colors = use_colors
        self.stream = stream or sys.stdout
        self.input_stream = input_stream or sys.stdin
        self.input_queue = queue.Queue()
        self.input_thread = None
        self.input_error = None
        self.running = False
        self.old_settings = None
        self._last_layout = None

    def __enter__(self):
        colorama.init()
        self.running = True
        try:
            if os.name != "nt":
                self.old_settings = termios.tcgetattr(self.input_stream)
                tty.setcbreak(self.input_stream.fileno())
            self.stream.write(ENTER_ALT_SCREEN + HIDE_CURSOR)
            self.stream.flush()
        except Exception:
            self.shutdown()
            raise

        self.input_thread = threading.Thread(target=self.input_handler, daemon=True)
        self.input_thread.start()
        logger.info("ANSI session started")
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False

    def input_handler(self):
        """Handle keyboard input in a separate thread"""
        try:
            if os.name == "nt":
                import msvcrt
                while self.running:
                    if msvcrt.kbhit():
                        self.input_queue.put(msvcrt.getwch())
                    else:
                        time.sleep(0.05)
                return

            # select cannot see bytes buffered inside sys.stdin, so read the fd
            fd = self.input_stream.fileno()
            decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")
            while self.running:
                if not select.select([fd], [], [], 0.1)[0]:
                    continue
                data = os.read(fd, 64)
                if not data:
                    logger.info("Input closed")
                    return
                for char in decoder.decode(data):
                    self.input_queue.put(char)
        except (OSError, ValueError) as error:
            # Raised again from poll_key so the render loop sees it
            self.input_error = error

    def poll_key(self) -> Optional[str]:
        """Return a pending key or None without blocking."""
        if self.input_error is not None:
            raise self.input_error
        try:
            return self.input_queue.get_nowait()
        except queue.Empty:
            return None

    def size(self) -> Tuple[int, int]:
        columns, lines = shutil.get_terminal_size()
        return columns, lines

    def flush(self, buffer: ScreenBuffer):
        """Draw the frame centered on the screen, clearing it when the layout changes."""
        cols, rows = self.size()
        top, left = centered_origin(cols, rows, buffer)
        layout = (cols, rows, buffer.rows, buffer.cols)

        out = []
        if layout != self._last_layout:
            out.append(clear_screen())
            self._last_layout = layout

        for i, runs in enumerate(buffer.runs()):
            y = top + i
            if y >= rows:
                break
            # Cursor.POS is 1-based
            out.append(Cursor.POS(left + 1, y + 1))
            budget = cols - left
            for text, layer in runs:
                if budget <= 0:
                    break
                text = text[:budget]
                budget -= len(text)
                if self.use_colors and layer is not None:
                    color = getattr(Fore, LAYER_COLORS[layer].upper())
                    out.append(color + text + Style.RESET_ALL)
                else:
                    out.append(text)

        self.stream.write("".join(out))
        self.stream.flush()

    def shutdown(self):
        """Restore the terminal; safe to call more than once."""
        if not self.running:
            return
        self.running = False
        if self.input_thread is not None:
            self.input_thread.join(timeout=0.5)
        if self.old_settings is not None:
            termios.tcsetattr(self.input_stream, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None
        self.stream.write(Style.RESET_ALL + SHOW_CURSOR + EXIT_ALT_SCREEN)
        self.stream.flush()
        colorama.deinit()
        logger.info("ANSI session closed")


def print_frame(buffer: ScreenBuffer, console: Optional[Console] = None, use_colors: bool = True):
    """Print a single frame with rich, outside of any terminal session."""
    console = console or Console()
    for runs in buffer.runs():
        line = Text()
        for text, layer in runs:
            style = LAYER_COLORS[layer] if use_colors and layer is not None else None
            line.append(text, style=style)
        console.print(line, no_wrap=True, overflow="crop")
