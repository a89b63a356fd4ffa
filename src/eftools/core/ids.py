from __future__ import annotations

from dataclasses import dataclass, field
from typing import Hashable, Union


@dataclass(frozen=True, order=True)
class VertexId:
    """
    Opaque vertex identifier.

    Two identifiers denote the same vertex iff their canonical string forms
    agree, so VertexId(1) == VertexId("1").  The canonical `key` is derived
    from `value` once, at construction; only `key` takes part in equality,
    hashing and ordering.
    """
    key: str = field(init=False)
    value: Hashable = field(compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "key", str(self.value))

    @classmethod
    def of(cls, value: Hashable) -> "VertexId":
        if isinstance(value, VertexId):
            return value
        return cls(value)

    def __str__(self) -> str:
        return self.key

    def __repr__(self) -> str:
        return f"VertexId({self.value!r})"


RawId = Union[str, int]


def as_vertex(x: Union[RawId, VertexId]) -> VertexId:
    return VertexId.of(x)
