"""
Module used to import graph descriptions from the data directory
"""

import json
import logging
import os

from constants import DATA
from localtypes import GraphData, Json, VertexKey
from traversal import Vertex, build_graph

logger = logging.getLogger(__name__)


def _validate(data: Json, name: str) -> GraphData:
    if not isinstance(data, dict):
        raise ValueError(f"Error: graph file {name} is not a JSON object")
    if not isinstance(data.get("vertices"), dict):
        raise ValueError(f"Error: 'vertices' missing or not an object in {name}")

    vertices = data["vertices"]
    edges = data.get("edges", {})
    if not isinstance(edges, dict) or not all(
        isinstance(targets, list) for targets in edges.values()
    ):
        raise ValueError(f"Error: 'edges' must map keys to lists in {name}")
    for source, targets in edges.items():
        if source not in vertices:
            raise ValueError(f"Error: edge source {source!r} has no vertex in {name}")
        for target in targets:
            if not isinstance(target, str):
                raise ValueError(
                    f"Error: edge target {target!r} of {source!r} is not a key in {name}"
                )
            if target not in vertices:
                raise ValueError(
                    f"Error: edge {source!r} -> {target!r} has no vertex in {name}"
                )

    start = data.get("start")
    if start is not None and (not isinstance(start, str) or start not in vertices):
        raise ValueError(f"Error: start vertex {start!r} unknown in {name}")

    return GraphData(**data)  # type: ignore[typeddict-item]


def path_to_graph(path: str) -> GraphData:
    with open(os.path.join(DATA, path), "r") as file:
        data = json.load(file)
    return _validate(data, path)


def graph_to_vertices(
    data: GraphData, name: str = "<graph>"
) -> dict[VertexKey, Vertex]:
    try:
        return build_graph(data["vertices"], data.get("edges", {}))
    except ValueError as e:
        raise ValueError(f"Error: invalid edges in {name}: {e}") from e


def load_graph(name: str) -> tuple[dict[VertexKey, Vertex], VertexKey | None]:
    """
    Loads a graph file and builds its vertices.

    Returns:
        The vertices by key and the default start key of the file, if any.
    """
    data = path_to_graph(name)
    vertices = graph_to_vertices(data, name)
    logger.debug(
        "Loaded %s: %d vertices, %d edges",
        name,
        len(vertices),
        sum(len(v.neighbors) for v in vertices.values()),
    )
    return vertices, data.get("start")


def list_graphs() -> list[str]:
    """Names of all graph files in the data directory."""
    if not os.path.isdir(DATA):
        return []
    return sorted(name for name in os.listdir(DATA) if name.endswith(".json"))
