"""Coloured terminal output and a character-level diff of program output.

``compare_output`` lines the actual output up with the expected output. Matching
characters pass through; digits and branch characters are shown in green when
they match. Wrong characters are shown in red, and expected characters that
never appeared are shown red and underlined. Escape sequences already present
in the actual output are copied through unchanged.
"""

from __future__ import annotations

import string
import sys
from typing import Iterator, List, Optional

BORDER_CHAR = "~"

_RED_ON = "\033[31m"
_GREEN_ON = "\033[32m"
_COLOR_OFF = "\033[39m"
_NOTFOUND_ON = "\033[31;4m"
_NOTFOUND_OFF = "\033[39;24m"
_BOLD_ON = "\033[1m"
_BOLD_OFF = "\033[22m"

_HIGHLIGHTED = set(string.digits) | {"/", "\\", "_", "-"}


def _stdout_was_tty() -> bool:
    stream = sys.__stdout__
    if stream is None:
        return False
    try:
        return stream.isatty()
    except (ValueError, OSError):
        return False


def _red(char: str) -> str:
    return f"{_RED_ON}{char}{_COLOR_OFF}"


def _green(char: str) -> str:
    return f"{_GREEN_ON}{char}{_COLOR_OFF}"


def _notfound(char: str) -> str:
    return f"{_NOTFOUND_ON}{char}{_NOTFOUND_OFF}"


def output_bold(text: object, enabled: Optional[bool] = None) -> str:
    """Return text wrapped in bold escapes when enabled.

    With ``enabled`` left as None, bold is used when standard output is a terminal.
    """
    if enabled is None:
        enabled = _stdout_was_tty()
    return f"{_BOLD_ON}{text}{_BOLD_OFF}" if enabled else str(text)


def bold_digits(text: str, enabled: Optional[bool] = None) -> str:
    """Return text with every digit and minus sign in bold when enabled."""
    if enabled is None:
        enabled = _stdout_was_tty()
    if not enabled:
        return text
    return "".join(
        f"{_BOLD_ON}{char}{_BOLD_OFF}" if char in string.digits or char == "-" else char
        for char in text
    )


class _Reader:
    """Yields the characters of the actual output, copying escape codes to the sink."""

    def __init__(self, text: str, sink: List[str]) -> None:
        self._chars: Iterator[str] = iter(text)
        self._sink = sink

    def _raw(self) -> Optional[str]:
        return next(self._chars, None)

    def next_char(self) -> Optional[str]:
        """Return the next visible character, or None at the end (or a NUL)."""
        char = self._raw()
        while char == "\033":
            opcode = []
            while char is not None and char not in ("m", "\0"):
                opcode.append(char)
                char = self._raw()
            self._sink.append("".join(opcode) + "m")
            char = self._raw()
        if char is None or char == "\0":
            return None
        return char


def compare_output(actual: str, expected: str) -> str:
    """Return ``actual`` coloured according to how it matches ``expected``."""
    out: List[str] = []
    reader = _Reader(actual, out)
    index = 0

    def take() -> str:
        nonlocal index
        char = expected[index] if index < len(expected) else "\0"
        index += 1
        return char

    char: Optional[str] = None
    while True:
        char = reader.next_char()
        if char is None:
            break
        want = take()

        # Re-synchronise the two texts on border lines and line ends.
        for align in (BORDER_CHAR, "\n"):
            while char != want and (char == align or want == align):
                if char == align and want != char and index < len(expected):
                    out.append(want if want in ("\n", " ") else _notfound(want))
                    want = take()
                elif char is None:
                    break
                if want == align and char != want and char is not None:
                    out.append(_red(char))
                    char = reader.next_char()
                elif index >= len(expected):
                    break

        if char is None:
            break

        if want in _HIGHLIGHTED:
            out.append(_green(char) if char == want else _red(char))
        else:
            out.append(char if char == want else _red(char))

        if index >= len(expected):
            char = reader.next_char()
            break

    while char is not None:
        out.append(_red(char))
        char = reader.next_char()

    for want in expected[index:]:
        out.append(want if want == "\n" else _notfound(want))

    return "".join(out)