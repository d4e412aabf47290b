"""
Type definitions shared by the loader, the display helpers and the CLI.
"""

from typing import Any, NotRequired, TypeAlias, TypedDict

# Raw JSON documents
Json: TypeAlias = dict[str, Any]

VertexKey: TypeAlias = str


class GraphData(TypedDict):
    """Content of a graph file once validated."""

    vertices: dict[VertexKey, Any]
    edges: NotRequired[dict[VertexKey, list[VertexKey]]]
    start: NotRequired[VertexKey]


TraversalReport: TypeAlias = dict[str, Any]
"""Operation name -> result, as produced by utils.display.traversal_report."""
