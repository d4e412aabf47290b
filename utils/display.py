from collections.abc import Mapping

from rich.console import Console
from rich.table import Table

from localtypes import TraversalReport, VertexKey
from traversal import GraphTraversal, Vertex


def _is_numeric(vertices: set[Vertex]) -> bool:
    return all(
        isinstance(v.value, int) and not isinstance(v.value, bool) for v in vertices
    )


def traversal_report(
    vertices: Mapping[VertexKey, Vertex],
    start_key: VertexKey,
    end_key: VertexKey | None = None,
) -> TraversalReport:
    """
    Runs every traversal operation from a start vertex.

    Vertex sets are reported as sorted keys. Operations that need integer
    values report None when a reachable value is not an integer.
    """
    keys = {vertex: key for key, vertex in vertices.items()}
    start = vertices[start_key]
    reachable = GraphTraversal.reachable(start)
    numeric = _is_numeric(reachable)

    report: TraversalReport = {
        "start": start_key,
        "reachable": sorted(keys[v] for v in reachable),
        "leaves": sorted(keys[v] for v in GraphTraversal.leaves(start)),
        "max_value": GraphTraversal.max_value(start) if numeric else None,
        "all_odd": GraphTraversal.all_odd(start) if numeric else None,
    }
    if end_key is not None:
        end = vertices[end_key]
        report["end"] = end_key
        report["increasing_path"] = (
            GraphTraversal.has_strictly_increasing_path(start, end)
            if numeric and _is_numeric({end})
            else None
        )
    return report


def _format(value: object) -> str:
    if value is None:
        return "n/a"
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) or "(none)"
    return str(value)


def report_to_table(report: TraversalReport, title: str = "") -> Table:
    table = Table(title=title or None)
    table.add_column("Operation", style="bold")
    table.add_column("Result")
    for name, value in report.items():
        table.add_row(name, _format(value))
    return table


def display_traversal(
    vertices: Mapping[VertexKey, Vertex],
    start_key: VertexKey,
    end_key: VertexKey | None = None,
    console: Console | None = None,
):
    report = traversal_report(vertices, start_key, end_key)
    (console or Console()).print(
        report_to_table(report, title=f"Traversal from {start_key}")
    )


def display_reachable_values(start: Vertex | None):
    print("Reachable values:")
    GraphTraversal.print_vertex_vals(start)
