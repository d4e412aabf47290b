"""
TUI for exploring graph files and their traversals.

Usage:
    uv run python -m utils.io.graph_explorer
"""

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.coordinate import Coordinate
from textual.containers import ScrollableContainer
from textual.screen import Screen
from textual.widgets import (
    DataTable,
    Footer,
    Header,
    Static,
    Label,
)

from localtypes import VertexKey
from traversal import Vertex
from utils.display import report_to_table, traversal_report
from utils.loader import list_graphs, load_graph


def vertex_rows(
    vertices: dict[VertexKey, Vertex],
) -> list[tuple[VertexKey, str, str, Text]]:
    """One row per vertex: key, value, neighbour keys and leaf flag."""
    keys = {vertex: key for key, vertex in vertices.items()}
    rows = []
    for key, vertex in vertices.items():
        neighbors = ", ".join(keys[n] for n in vertex.neighbors)
        leaf = Text("leaf", style="bold green") if vertex.is_leaf else Text("")
        rows.append((key, str(vertex.value), neighbors, leaf))
    return rows


class GraphDetailScreen(Screen):
    """Screen showing the vertices of a graph and a traversal report."""

    BINDINGS = [
        Binding("escape", "pop_screen", "Back"),
        Binding("q", "pop_screen", "Back"),
        Binding("r", "traverse", "Traverse From Vertex"),
    ]

    CSS = """
    GraphDetailScreen {
        background: $surface;
    }

    .graph-title {
        text-align: center;
        text-style: bold;
        padding: 1;
        background: $primary;
        color: $text;
        width: 100%;
    }

    #vertex-table {
        height: auto;
        max-height: 50%;
    }

    #report {
        padding: 1 2;
        height: auto;
    }

    #content {
        height: 100%;
        padding: 1 2;
    }
    """

    def __init__(self, graph_name: str, **kwargs) -> None:
        super().__init__(**kwargs)
        self.graph_name = graph_name
        self.vertices: dict[VertexKey, Vertex] = {}

    def compose(self) -> ComposeResult:
        yield Header()
        yield ScrollableContainer(id="content")
        yield Footer()

    def on_mount(self) -> None:
        """Load the graph and display its vertices."""
        container = self.query_one("#content")

        try:
            self.vertices, start_key = load_graph(self.graph_name)
        except (OSError, ValueError) as e:
            container.mount(Label(f"Cannot load {self.graph_name}: {e}"))
            return

        container.mount(Label(f"Graph: {self.graph_name}", classes="graph-title"))

        table = DataTable(id="vertex-table")
        container.mount(table)
        table.cursor_type = "row"
        table.add_columns("Vertex", "Value", "Neighbors", "Leaf")
        for row in vertex_rows(self.vertices):
            table.add_row(*row, key=row[0])

        container.mount(Static(id="report"))
        if start_key is None and self.vertices:
            start_key = next(iter(self.vertices))
        if start_key is not None:
            self.show_report(start_key)

    def show_report(self, start_key: VertexKey) -> None:
        report = traversal_report(self.vertices, start_key)
        self.query_one("#report", Static).update(
            report_to_table(report, title=f"Traversal from {start_key}")
        )

    def action_traverse(self) -> None:
        """Traverse from the selected vertex."""
        table = self.query_one("#vertex-table", DataTable)
        if table.row_count and table.cursor_row is not None:
            key = str(table.get_cell_at(Coordinate(table.cursor_row, 0)))
            self.show_report(key)

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        if event.row_key.value is not None:
            self.show_report(str(event.row_key.value))


class GraphListScreen(Screen):
    """Main screen showing the list of graph files."""

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("enter", "select_graph", "View Graph"),
    ]

    CSS = """
    GraphListScreen {
        background: $surface;
    }

    DataTable {
        height: 100%;
    }

    DataTable > .datatable--header {
        text-style: bold;
        background: $primary;
    }

    DataTable > .datatable--cursor {
        background: $secondary;
    }
    """

    def compose(self) -> ComposeResult:
        yield Header()
        yield DataTable(id="graph-table")
        yield Footer()

    def on_mount(self) -> None:
        """Populate the graph table."""
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.add_columns("Graph", "Vertices", "Edges", "Start")

        for graph_name in list_graphs():
            try:
                vertices, start_key = load_graph(graph_name)
            except (OSError, ValueError):
                table.add_row(graph_name, "?", "?", "?", key=graph_name)
                continue
            edge_count = sum(len(v.neighbors) for v in vertices.values())
            table.add_row(
                graph_name,
                str(len(vertices)),
                str(edge_count),
                start_key or "-",
                key=graph_name,
            )

    def action_select_graph(self) -> None:
        """Open the selected graph."""
        table = self.query_one(DataTable)
        if table.row_count and table.cursor_row is not None:
            graph_name = str(table.get_cell_at(Coordinate(table.cursor_row, 0)))
            self.app.push_screen(GraphDetailScreen(graph_name))

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Handle double-click on a row."""
        if event.row_key.value is not None:
            self.app.push_screen(GraphDetailScreen(str(event.row_key.value)))


class GraphExplorerApp(App):
    """TUI application for exploring graph traversals."""

    TITLE = "Graph Explorer"
    SUB_TITLE = "Depth-first traversals of graph files"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def on_mount(self) -> None:
        """Push the main screen."""
        self.push_screen(GraphListScreen())

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"


def main():
    """Run the graph explorer."""
    app = GraphExplorerApp()
    app.run()


if __name__ == "__main__":
    main()
