from .partial_iso import is_partial_iso, reverse_moves
from .strategy import (
    Terminal,
    Continue,
    DuplicatorStrategy,
    strategy_to_dict,
    strategy_depth,
    format_strategy,
)
from .search import find_duplicator_strategy

__all__ = [
    "is_partial_iso",
    "reverse_moves",
    "Terminal",
    "Continue",
    "DuplicatorStrategy",
    "strategy_to_dict",
    "strategy_depth",
    "format_strategy",
    "find_duplicator_strategy",
]
