"""
circcode graph elements: Vertex and Edge

A Vertex is a prefix or suffix of some code word. Its identity is a numeric
index derived from the label, so two vertices with the same label are the
same graph node, and vertices sharing an alphabet have one global order.

An Edge is one proper split of a word: prefix -> suffix. Edges compare by
their endpoint indices only; the label (the reconstructed word) is derived.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from circcode.errors import VertexError


def vertex_index(label: str, alphabet: Sequence[str]) -> int:
    """Read `label` as a little-endian number in base len(alphabet) + 1.

    Digits are 1-based alphabet positions, so no label maps to 0 and
    labels of different lengths never collide.

    Raises:
        VertexError: a symbol of `label` is not in `alphabet`.
    """
    positions = {symbol: pos + 1 for pos, symbol in enumerate(alphabet)}
    base = len(alphabet) + 1
    index = 0
    weight = 1
    for symbol in label:
        if symbol not in positions:
            raise VertexError(f"{symbol!r} of {label!r} is not in the alphabet")
        index += positions[symbol] * weight
        weight *= base
    return index


@dataclass(frozen=True, order=True)
class Vertex:
    """A node of the split graph, identified by its index."""
    index: int
    label: str = field(compare=False)

    @classmethod
    def from_label(cls, label: str, alphabet: Sequence[str]) -> Vertex:
        return cls(vertex_index(label, alphabet), label)

    def __len__(self) -> int:
        return len(self.label)

    def __str__(self) -> str:
        return self.label

    def __repr__(self) -> str:
        return f"<Vertex {self.label} #{self.index}>"


@dataclass(frozen=True)
class Edge:
    """A split of one code word: source label + target label == word."""
    source: Vertex
    target: Vertex
    label: str = field(init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "label", self.source.label + self.target.label)

    @property
    def key(self) -> tuple[int, int]:
        return (self.source.index, self.target.index)

    @property
    def is_loop(self) -> bool:
        return self.source == self.target

    def __str__(self) -> str:
        return f"{self.source} -{self.label}-> {self.target}"

    def __repr__(self) -> str:
        return f"<Edge {self.source.label}→{self.target.label} [{self.label}]>"
