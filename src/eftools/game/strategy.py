from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Union

from eftools.core.ids import VertexId


@dataclass(frozen=True)
class Terminal:
    """Duplicator answers `response`; no rounds remain afterwards."""
    response: VertexId


@dataclass(frozen=True)
class Continue:
    """Duplicator answers `response`, then follows `strategy`."""
    response: VertexId
    strategy: "DuplicatorStrategy"


StrategyNode = Union[Terminal, Continue]
DuplicatorStrategy = Dict[VertexId, StrategyNode]


def strategy_to_dict(strategy: Optional[DuplicatorStrategy]):
    """
    Plain JSON-friendly form keyed by canonical vertex strings:
      Terminal(d)      -> "d"
      Continue(d, sub) -> ["d", {...}]
    None (no winning strategy) is returned as None.
    """
    if strategy is None:
        return None
    out = {}
    for v, node in strategy.items():
        if isinstance(node, Continue):
            out[v.key] = [node.response.key, strategy_to_dict(node.strategy)]
        else:
            out[v.key] = node.response.key
    return out


def strategy_depth(strategy: DuplicatorStrategy) -> int:
    """Number of rounds covered; 0 for the empty strategy."""
    if not strategy:
        return 0
    best = 0
    for node in strategy.values():
        if isinstance(node, Continue):
            best = max(best, strategy_depth(node.strategy))
    return best + 1


def format_strategy(strategy: Optional[DuplicatorStrategy], indent: str = "  ") -> str:
    if strategy is None:
        return "no winning strategy"
    if not strategy:
        return "(no moves needed)"
    lines: List[str] = []

    def walk(s: DuplicatorStrategy, depth: int) -> None:
        pad = indent * depth
        for v, node in s.items():
            lines.append(f"{pad}{v} -> {node.response}")
            if isinstance(node, Continue):
                walk(node.strategy, depth + 1)

    walk(strategy, 0)
    return "\n".join(lines)
