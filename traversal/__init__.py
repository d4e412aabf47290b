"""
Depth-first traversal helpers over directed graphs of labeled vertices.

**Vertices** (vertex.py)
    - Vertex: value plus ordered outgoing neighbours, identity semantics
    - build_graph(values, edges): vertices by key from an adjacency list

**Operations** (operations.py)
    GraphTraversal and its function aliases:
    - print_vertex_vals, reachable, max_value, leaves, all_odd
    - has_strictly_increasing_path

The generic, node-agnostic algorithms live in utils/algorithms/graph.py.
"""

from .operations import (
    GraphTraversal,
    all_odd,
    has_strictly_increasing_path,
    leaves,
    max_value,
    print_vertex_vals,
    reachable,
)
from .vertex import Vertex, build_graph

__all__ = [
    # Vertices
    "Vertex",
    "build_graph",
    # Operations
    "GraphTraversal",
    "print_vertex_vals",
    "reachable",
    "max_value",
    "leaves",
    "all_odd",
    "has_strictly_increasing_path",
]
