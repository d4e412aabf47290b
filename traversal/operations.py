"""
Depth-first traversal operations over Vertex graphs.

Every operation starts a fresh walk from the given vertex with its own visited
set, so calls are independent of each other. Absent starting vertices (None)
are valid input everywhere except for the path search, where both endpoints
are required.

Operations:
    print_vertex_vals(start)                   - Print each reachable value once
    reachable(start)                           - Set of reachable vertices
    max_value(start, default)                  - Largest reachable value
    leaves(start)                              - Reachable vertices without edges
    all_odd(start)                             - Every reachable value is odd
    has_strictly_increasing_path(start, end)   - Increasing path start -> end
"""

import logging
from collections.abc import Iterator
from typing import IO, TypeVar

from utils.algorithms.graph import depth_first_discovery, exists_path

from .vertex import Vertex

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _neighbors(vertex: Vertex[T]) -> list[Vertex[T]]:
    return vertex.neighbors


def _walk(start: Vertex[T] | None) -> Iterator[Vertex[T]]:
    return depth_first_discovery(_neighbors, start)


class GraphTraversal:
    """Stateless depth-first helpers over a caller-owned vertex graph"""

    @staticmethod
    def print_vertex_vals(start: Vertex[T] | None, file: IO[str] | None = None) -> None:
        """
        Prints the value of every vertex reachable from start, start included,
        one per line. Each value is printed once even when reachable through
        several paths. Prints nothing if start is None.
        """
        count = 0
        for vertex in _walk(start):
            print(vertex.value, file=file)
            count += 1
        logger.debug("Printed %d vertex values", count)

    @staticmethod
    def reachable(start: Vertex[T] | None) -> set[Vertex[T]]:
        """
        Returns all vertices reachable from start, start included.

        Returns an empty set if start is None.
        """
        result = set(_walk(start))
        logger.debug("%d vertices reachable from %r", len(result), start)
        return result

    @staticmethod
    def max_value(
        start: Vertex[int] | None, default: int | None = None
    ) -> int | None:
        """
        Returns the largest value among the vertices reachable from start.

        Args:
            start: Starting vertex.
            default: Returned when start is None. Pass `constants.INT_MIN` to
                get a plain integer sentinel instead of None.
        """
        if start is None:
            return default
        best = start.value
        for vertex in _walk(start):
            if vertex.value > best:
                best = vertex.value
        return best

    @staticmethod
    def leaves(start: Vertex[T] | None) -> set[Vertex[T]]:
        """
        Returns the reachable vertices with no outgoing edge, start included
        if it qualifies. Returns an empty set if start is None.
        """
        return {vertex for vertex in _walk(start) if vertex.is_leaf}

    @staticmethod
    def all_odd(start: Vertex[int] | None) -> bool:
        """
        Returns whether every reachable vertex, start included, holds an odd
        value. Stops at the first even value. True if start is None.
        """
        for vertex in _walk(start):
            if vertex.value % 2 == 0:
                logger.debug("Even value %r reachable from %r", vertex.value, start)
                return False
        return True

    @staticmethod
    def has_strictly_increasing_path(
        start: Vertex[int] | None, end: Vertex[int] | None
    ) -> bool:
        """
        Determines whether a path from start to end exists on which each
        vertex holds a value strictly greater than the previous one.

        A vertex is trivially connected to itself by the empty path.

        Raises:
            ValueError: If start or end is None.
        """
        if start is None or end is None:
            raise ValueError("Both start and end vertices are required")
        return exists_path(
            _neighbors, start, end, lambda current, nxt: nxt.value > current.value
        )


print_vertex_vals = GraphTraversal.print_vertex_vals
reachable = GraphTraversal.reachable
max_value = GraphTraversal.max_value
leaves = GraphTraversal.leaves
all_odd = GraphTraversal.all_odd
has_strictly_increasing_path = GraphTraversal.has_strictly_increasing_path
