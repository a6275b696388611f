"""cattocol - combine two texts into one, as columns or line by line."""

from .combine import CatToCol, CombinerConfig, by_pairs, cat_to_col, combine_col
from .lines import LineSequence, split_lines

__version__ = "0.1.0"

__all__ = [
    "CatToCol",
    "CombinerConfig",
    "LineSequence",
    "by_pairs",
    "cat_to_col",
    "combine_col",
    "split_lines",
]
