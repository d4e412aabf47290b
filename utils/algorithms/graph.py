"""
Depth-first utilities for directed graphs that may contain cycles.

Traversals:
    depth_first_discovery(after, root) - DFS yielding each reachable node once

Searches:
    exists_path(after, start, end, step) - DFS with backtracking for a path
                                           whose edges all satisfy `step`

Nodes are tracked by identity (`id`), so distinct nodes comparing equal are
still visited separately. Both functions use an explicit stack and are not
bounded by the interpreter recursion limit.
"""

from collections.abc import Callable, Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

_EXHAUSTED = object()


def depth_first_discovery(
    after: Callable[[T], Iterable[T]], root: T | None
) -> Iterator[T]:
    """
    Yields every node reachable from root, root included, exactly once.

    A node is marked as seen when it is discovered, before its own
    neighbours are expanded, which is what makes cycles terminate.

    Args:
        after: Returns the outgoing neighbours of a node, in order.
        root: Starting node. None yields nothing.
    """
    if root is None:
        return
    # Holds every discovered node so no id is reused during the walk
    seen: dict[int, T] = {id(root): root}
    stack = [root]
    while stack:
        current = stack.pop()
        yield current
        children = list(after(current))
        # Reversed so the first neighbour is expanded first
        for child in reversed(children):
            child_id = id(child)
            if child_id not in seen:
                seen[child_id] = child
                stack.append(child)


def exists_path(
    after: Callable[[T], Iterable[T]],
    start: T,
    end: T,
    step: Callable[[T, T], bool],
) -> bool:
    """
    Tells whether a path from start to end exists whose every edge (u, v)
    satisfies step(u, v).

    The search backtracks across branches. A node is only excluded while it
    is on the current path: once a branch is exhausted its nodes become
    available again to the other branches.

    Args:
        after: Returns the outgoing neighbours of a node, in order.
        start: First node of the path.
        end: Target node. `start is end` is the empty path, always valid.
        step: Predicate every traversed edge must satisfy.
    """
    if start is end:
        return True

    on_path: set[int] = {id(start)}
    stack: list[tuple[T, Iterator[T]]] = [(start, iter(after(start)))]
    while stack:
        current, children = stack[-1]
        child = next(children, _EXHAUSTED)
        if child is _EXHAUSTED:
            # Branch exhausted, backtrack
            stack.pop()
            on_path.discard(id(current))
            continue
        if id(child) in on_path or not step(current, child):
            continue
        if child is end:
            return True
        on_path.add(id(child))
        stack.append((child, iter(after(child))))
    return False


__all__ = [
    "depth_first_discovery",
    "exists_path",
]
