# python/wirecube/display.py
# Terminal presentation of rendered frames via ANSI control sequences
# - Cursor hidden on init and restored on teardown
# - Each frame is written in one piece after a cursor-home sequence
# - Optional full-screen clear between frames and a fixed foreground colour

from __future__ import annotations

import contextlib
import logging
import sys
from typing import Iterator, Optional, Protocol, Sequence, TextIO

from .config import ANSI_COLORS

logger = logging.getLogger(__name__)

CSI = "\033["
CURSOR_HOME = CSI + "H"
CURSOR_HIDE = CSI + "?25l"
CURSOR_SHOW = CSI + "?25h"
CLEAR_SCREEN = CSI + "2J"
RESET_ATTRS = CSI + "0m"


class Display(Protocol):
    def init(self) -> None: ...
    def present(self, rows: Sequence[str]) -> None: ...
    def teardown(self) -> None: ...


class AnsiDisplay:
    """Writes frames to a text stream using VT100/ANSI escapes."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        clear_screen: bool = False,
        color: Optional[str] = None,
    ):
        if color is not None and color not in ANSI_COLORS:
            raise ValueError(f"Unknown color: {color!r}")
        self.stream = stream if stream is not None else sys.stdout
        self.clear_screen = clear_screen
        self.color = color
        self.frames_presented = 0
        self._active = False

    def init(self) -> None:
        prefix = CURSOR_HIDE
        if self.color is not None:
            prefix += f"{CSI}{ANSI_COLORS[self.color]}m"
        self.stream.write(prefix)
        self.stream.flush()
        self._active = True
        logger.debug("display initialised (clear_screen=%s, color=%s)", self.clear_screen, self.color)

    def present(self, rows: Sequence[str]) -> None:
        parts = [CLEAR_SCREEN, CURSOR_HOME] if self.clear_screen else [CURSOR_HOME]
        for row in rows:
            parts.append(row)
            parts.append("\n")
        self.stream.write("".join(parts))
        self.stream.flush()
        self.frames_presented += 1

    def teardown(self) -> None:
        if not self._active:
            return
        suffix = RESET_ATTRS if self.color is not None else ""
        self.stream.write(suffix + CURSOR_SHOW)
        self.stream.flush()
        self._active = False
        logger.debug("display restored after %d frames", self.frames_presented)


@contextlib.contextmanager
def display_session(display: Display) -> Iterator[Display]:
    """Initialise ``display`` and guarantee ``teardown`` on any exit."""

    display.init()
    try:
        yield display
    finally:
        display.teardown()
