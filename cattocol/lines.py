"""Splitting texts into lines."""

from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class LineSequence:
    """Lines of one text, in order.

    ``terminated`` records whether the text ended with a newline, which the
    lines alone cannot express.
    """

    lines: tuple[str, ...]
    terminated: bool = False

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def get(self, index: int) -> str | None:
        """Line at ``index``, or None past the end."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None


def split_lines(text: str) -> LineSequence:
    """Split text on newlines, treating each newline as a line terminator.

    An empty text still yields one empty line. A final newline does not open
    a new line, so "a\\n" is one line and "a\\n\\n" is two. A carriage return
    right before a newline is dropped.

    Examples:
        >>> split_lines("a\\nb").lines
        ('a', 'b')
        >>> split_lines("a\\n\\n").lines
        ('a', '')
        >>> split_lines("").lines
        ('',)
    """
    terminated = text.endswith("\n")
    segments = text.split("\n")
    if terminated:
        segments.pop()

    # Every segment but an unterminated last one was followed by "\n"
    closed = len(segments) if terminated else len(segments) - 1
    lines = []
    for i, segment in enumerate(segments):
        if i < closed and segment.endswith("\r"):
            segment = segment[:-1]
        lines.append(segment)

    return LineSequence(lines=tuple(lines), terminated=terminated)


def non_empty_lines(sequence: LineSequence) -> Iterator[str]:
    """Yield the lines that have content, in order."""
    return (line for line in sequence if line)
