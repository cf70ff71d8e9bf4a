"""Colored console output helpers."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from colorama import Fore, Style, just_fix_windows_console

SUCCESS_COLOR = Fore.GREEN
INFO_COLOR = Fore.WHITE
WARN_COLOR = Fore.YELLOW
ERROR_COLOR = Fore.RED


def _color_disabled_by_env() -> bool:
    return bool(os.environ.get("NO_COLOR"))


class ConsoleWriter:
    """Write single lines to a stream in a given foreground color.

    Each line is followed by a style reset so the terminal returns to the
    color it had before the call.
    """

    def __init__(self, stream: TextIO | None = None, *, use_color: bool = True):
        self._stream = stream
        self.use_color = use_color and not _color_disabled_by_env()
        if self.use_color:
            just_fix_windows_console()

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected/captured stdout is honoured
        return self._stream if self._stream is not None else sys.stdout

    def write_line(self, message: str, color: str | None = None) -> None:
        if self.use_color and color:
            self.stream.write(f"{color}{message}{Style.RESET_ALL}\n")
        else:
            self.stream.write(f"{message}\n")
        self.stream.flush()

    def write_success(self, message: str) -> None:
        self.write_line(message, SUCCESS_COLOR)

    def write_info(self, message: str) -> None:
        self.write_line(message, INFO_COLOR)

    def write_warn(self, message: str) -> None:
        self.write_line(message, WARN_COLOR)

    def write_error(self, message: str) -> None:
        self.write_line(message, ERROR_COLOR)


_default_writer: ConsoleWriter | None = None


def get_default_writer() -> ConsoleWriter:
    global _default_writer
    if _default_writer is None:
        _default_writer = ConsoleWriter()
    return _default_writer


def set_default_writer(writer: ConsoleWriter | None) -> None:
    """Replace the writer used by the module-level helpers (None resets it)."""
    global _default_writer
    _default_writer = writer


def write_success(message: str) -> None:
    get_default_writer().write_success(message)


def write_info(message: str) -> None:
    get_default_writer().write_info(message)


def write_warn(message: str) -> None:
    get_default_writer().write_warn(message)


def write_error(message: str) -> None:
    get_default_writer().write_error(message)


__all__ = [
    "ConsoleWriter",
    "get_default_writer",
    "set_default_writer",
    "write_success",
    "write_info",
    "write_warn",
    "write_error",
]
