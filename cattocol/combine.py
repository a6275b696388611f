"""Combining two texts into one, as columns or line by line."""

import logging
from dataclasses import dataclass, replace
from itertools import zip_longest
from typing import Iterator

from .lines import LineSequence, non_empty_lines, split_lines
from .utils import EscapeScanner, max_display_width, pad_to_width

logger = logging.getLogger(__name__)

NEWLINE = "\n"
SEPARATOR = " "


@dataclass(frozen=True)
class CombinerConfig:
    """Padding character and the extra padding added after the column."""

    fill: str = " "
    repeat: int = 0

    def __post_init__(self):
        if not isinstance(self.fill, str) or len(self.fill) != 1:
            raise ValueError(f"fill must be a single character, got {self.fill!r}")
        if isinstance(self.repeat, bool) or not isinstance(self.repeat, int) or self.repeat < 0:
            raise ValueError(f"repeat must be a non-negative integer, got {self.repeat!r}")


class CatToCol:
    """Column combiner configured with a fill character and a repeat count.

    Setters return a new combiner and leave the original untouched:

        >>> combiner = CatToCol().fill(" ").repeat(1)
        >>> "".join(combiner.combine_col("ab\\nc", "x\\ny"))
        'ab x\\nc  y'
    """

    def __init__(self, config: CombinerConfig | None = None, scanner: EscapeScanner | None = None):
        self.config = config or CombinerConfig()
        self.scanner = scanner

    def fill(self, fill: str) -> "CatToCol":
        """Change the padding character."""
        return CatToCol(replace(self.config, fill=fill), self.scanner)

    def repeat(self, repeat: int) -> "CatToCol":
        """Change the number of fill characters added after the column."""
        return CatToCol(replace(self.config, repeat=repeat), self.scanner)

    def combine_col(self, text_a: str, text_b: str) -> Iterator[str]:
        """Combine two texts in columns, the first text setting the column width.

        Escape sequences in the first text are kept in the output but do not
        count toward its width. A blank line of the second text gets no
        padding at all.

        Args:
            text_a: Left column text
            text_b: Right column text

        Returns:
            Iterator over output fragments; join them to get the text
        """
        return _combine_col(split_lines(text_a), split_lines(text_b), self.config, self.scanner)

    def __repr__(self) -> str:
        return f"CatToCol(fill={self.config.fill!r}, repeat={self.config.repeat})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, CatToCol):
            return NotImplemented
        return self.config == other.config and self.scanner is other.scanner

    def __hash__(self) -> int:
        return hash((self.config, id(self.scanner)))


def _combine_col(
    lines_a: LineSequence,
    lines_b: LineSequence,
    config: CombinerConfig,
    scanner: EscapeScanner | None,
) -> Iterator[str]:
    tab_stop = max_display_width(lines_a, scanner)
    column_width = tab_stop + config.repeat
    count = max(len(lines_a), len(lines_b))
    logger.debug("combine_col: %d lines, column width %d", count, column_width)

    for index in range(count):
        if index:
            yield NEWLINE
        line_a = lines_a.get(index)
        line_b = lines_b.get(index)

        if not line_b:
            if line_a is not None:
                yield line_a
            continue

        yield pad_to_width(line_a or "", column_width, fill_char=config.fill, scanner=scanner)
        yield line_b

    if lines_a.terminated or lines_b.terminated:
        yield NEWLINE


def combine_col(text_a: str, text_b: str, fill: str = " ", repeat: int = 0) -> Iterator[str]:
    """Combine two texts in columns separated by ``fill`` repeated as needed.

    Examples:
        >>> "".join(combine_col("Text cat\\nTest line.", "Concat\\nMin.", repeat=1))
        'Text cat   Concat\\nTest line. Min.'
    """
    return CatToCol(CombinerConfig(fill=fill, repeat=repeat)).combine_col(text_a, text_b)


def cat_to_col(text_a: str, text_b: str) -> Iterator[str]:
    """Concatenate two texts line by line, separated by a single space.

    A blank line of the second text still gets its separator, so pairing
    with a blank line leaves a trailing space.
    """
    lines_a = split_lines(text_a)
    lines_b = split_lines(text_b)
    logger.debug("cat_to_col: %d and %d lines", len(lines_a), len(lines_b))

    for index, (line_a, line_b) in enumerate(zip_longest(lines_a, lines_b)):
        if index:
            yield NEWLINE
        if line_a is not None:
            yield line_a
        if line_b is not None:
            yield SEPARATOR
            yield line_b

    if lines_a.terminated or lines_b.terminated:
        yield NEWLINE


def by_pairs(text_a: str, text_b: str) -> Iterator[str]:
    """Pair the non-empty lines of two texts, one pair per output line.

    Pairing stops when either text runs out of non-empty lines; the rest of
    the longer text is dropped.
    """
    lines_a = split_lines(text_a)
    lines_b = split_lines(text_b)

    count = 0
    for line_a, line_b in zip(non_empty_lines(lines_a), non_empty_lines(lines_b)):
        if count:
            yield NEWLINE
        yield line_a
        yield SEPARATOR
        yield line_b
        count += 1

    logger.debug("by_pairs: %d pairs", count)
    if count and (lines_a.terminated or lines_b.terminated):
        yield NEWLINE
