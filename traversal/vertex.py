"""
Vertex model for directed graphs of labeled nodes.

A Vertex holds a value and an ordered list of outgoing neighbours. Graphs may
contain cycles and self-loops. Vertices compare and hash by identity, so two
distinct vertices holding the same value are distinct set members.

Constructors:
    Vertex(value)               - Isolated vertex
    build_graph(values, edges)  - Vertices keyed by name from an adjacency list
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")
K = TypeVar("K")


@dataclass(eq=False)
class Vertex(Generic[T]):
    """Graph node with a value and its outgoing neighbours."""

    value: T
    neighbors: "list[Vertex[T]]" = field(default_factory=list, repr=False)

    @property
    def is_leaf(self) -> bool:
        """A leaf has no outgoing edge."""
        return not self.neighbors

    def connect(self, *targets: "Vertex[T]") -> "Vertex[T]":
        """Appends edges to the given targets, in order, and returns self."""
        self.neighbors.extend(targets)
        return self


def build_graph(
    values: Mapping[K, T], edges: Mapping[K, Sequence[K]] | None = None
) -> dict[K, Vertex[T]]:
    """
    Builds one vertex per key and wires the edges between them.

    Args:
        values: Value held by each vertex, by key.
        edges: Outgoing neighbour keys of each vertex, in order. Keys without
            an entry have no outgoing edge.

    Returns:
        The vertices by key.

    Raises:
        ValueError: If an edge mentions a key without a value.
    """
    vertices = {key: Vertex(value) for key, value in values.items()}
    for source, targets in (edges or {}).items():
        if source not in vertices:
            raise ValueError(f"Edge source {source!r} has no vertex")
        for target in targets:
            if target not in vertices:
                raise ValueError(f"Edge {source!r} -> {target!r}: unknown target")
            vertices[source].neighbors.append(vertices[target])
    return vertices
