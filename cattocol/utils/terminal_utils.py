"""Terminal display utilities for escape-aware text alignment.

This module measures the visible width of text in terminals. Escape
sequences used for color and style occupy no columns, so they are skipped
when measuring but left untouched in the text itself.
"""

import re
from typing import Iterable

ESC = "\x1b"

# CSI final bytes: "@" through "~" (the SGR "m" lives in this range)
CSI_FINAL_BYTES = "".join(chr(code) for code in range(0x40, 0x7F))

# Operating System Command, terminated by BEL or ST (ESC \)
OSC_RE = re.compile(r"\x1b\][^\x07\x1b]*(?:\x07|\x1b\\)")

# Two-character Fe escapes (ESC 7, ESC M, ...); "[" and "]" open CSI/OSC instead
FE_RE = re.compile(r"\x1b[@-Z\\^_]")


class EscapeScanner:
    """Recognizes escape runs that start at a given offset in a line.

    Args:
        final_bytes: Characters accepted as the final byte of a CSI
            sequence. Defaults to the whole CSI final range; pass ``"m"``
            to recognize color/style sequences only.
    """

    def __init__(self, final_bytes: str = CSI_FINAL_BYTES):
        if not final_bytes:
            raise ValueError("final_bytes must contain at least one character")
        self.final_bytes = final_bytes
        finals = "".join(re.escape(char) for char in final_bytes)
        self._csi_re = re.compile(r"\x1b\[[0-?]*[ -/]*[" + finals + "]")

    def scan(self, line: str, offset: int = 0) -> int:
        """Return the length of the escape run starting at ``offset``.

        Returns 0 when no well-formed run starts there. A truncated or
        unknown sequence is never reported, so its characters stay visible.

        Examples:
            >>> EscapeScanner().scan("\\033[31mRed", 0)
            5
            >>> EscapeScanner().scan("\\033[31", 0)
            0
        """
        if offset >= len(line) or line[offset] != ESC:
            return 0

        for pattern in (self._csi_re, OSC_RE, FE_RE):
            match = pattern.match(line, offset)
            if match:
                return match.end() - offset
        return 0

    def strip(self, text: str) -> str:
        """Remove every recognized escape run from ``text``."""
        parts = []
        i = 0
        while i < len(text):
            run = self.scan(text, i)
            if run:
                i += run
                continue
            parts.append(text[i])
            i += 1
        return "".join(parts)


DEFAULT_SCANNER = EscapeScanner()


def strip_escapes(text: str, scanner: EscapeScanner = None) -> str:
    """Remove escape sequences from text, keeping everything visible."""
    return (scanner or DEFAULT_SCANNER).strip(text)


def calculate_display_width(text: str, scanner: EscapeScanner = None) -> int:
    """Calculate the visible width of text in terminal columns.

    Every character outside an escape run counts as one column. Escape runs
    count as zero. Malformed escape prefixes are ordinary visible text.

    Args:
        text: A single line that may contain escape sequences
        scanner: Scanner deciding what counts as an escape run

    Returns:
        Number of terminal columns the text will occupy when displayed

    Examples:
        >>> calculate_display_width("Hello")
        5
        >>> calculate_display_width("\\033[31mRed\\033[0m")
        3
    """
    scanner = scanner or DEFAULT_SCANNER

    width = 0
    i = 0
    while i < len(text):
        run = scanner.scan(text, i)
        if run:
            i += run
            continue
        width += 1
        i += 1

    return width


def max_display_width(lines: Iterable[str], scanner: EscapeScanner = None) -> int:
    """Widest visible width among ``lines``, 0 when there are none."""
    return max((calculate_display_width(line, scanner) for line in lines), default=0)


def pad_to_width(
    text: str,
    target_width: int,
    fill_char: str = " ",
    scanner: EscapeScanner = None,
) -> str:
    """Left-align text in a column by appending fill characters.

    Args:
        text: Text to pad (may contain escape sequences)
        target_width: Target width in terminal columns
        fill_char: Character to use for padding (default: space)
        scanner: Scanner used to measure ``text``

    Returns:
        Padded text, or ``text`` unchanged when it is already wide enough

    Examples:
        >>> pad_to_width("Hello", 10)
        'Hello     '
        >>> pad_to_width("Hello World", 5)
        'Hello World'
    """
    current_width = calculate_display_width(text, scanner)

    if current_width >= target_width:
        return text

    return text + (fill_char * (target_width - current_width))
