"""Raw keyboard polling for the live dashboard.

Uses termios non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) rather than
``tty.setraw()`` so Rich Live's alternate screen keeps rendering correctly
over SSH. The previous terminal attributes are restored on exit.
"""

from __future__ import annotations

import logging
import os
import select
import sys

logger = logging.getLogger(__name__)


class TerminalError(RuntimeError):
    pass


class KeyInput:
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdin
        self.fd: int | None = None
        self._saved = None

    def __enter__(self) -> "KeyInput":
        try:
            import termios
        except ImportError as exc:
            raise TerminalError("keyboard input needs a POSIX terminal (termios unavailable)") from exc

        try:
            fd = self.stream.fileno()
        except (AttributeError, OSError, ValueError) as exc:
            raise TerminalError("stdin has no file descriptor") from exc
        if not os.isatty(fd):
            raise TerminalError("stdin is not a terminal; use --once or --json")

        try:
            saved = termios.tcgetattr(fd)
            new = termios.tcgetattr(fd)
            new[3] &= ~(termios.ICANON | termios.ECHO)
            new[6][termios.VMIN] = 0
            new[6][termios.VTIME] = 0
            termios.tcsetattr(fd, termios.TCSADRAIN, new)
        except termios.error as exc:
            raise TerminalError(f"cannot configure terminal: {exc}") from exc

        self.fd = fd
        self._saved = saved
        logger.debug("terminal switched to non-canonical mode on fd %d", fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore()

    def restore(self) -> None:
        if self.fd is None or self._saved is None:
            return
        import termios

        try:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved)
        finally:
            logger.debug("terminal attributes restored on fd %d", self.fd)
            self.fd = None
            self._saved = None

    def poll(self, timeout: float) -> str | None:
        """Wait up to ``timeout`` seconds for one key; ``None`` when none arrived."""
        if self.fd is None:
            raise TerminalError("keyboard input is not active")
        ready, _, _ = select.select([self.fd], [], [], timeout)
        if not ready:
            return None
        try:
            data = os.read(self.fd, 1)
        except OSError:
            return None
        return data.decode("utf-8", errors="ignore") or None
