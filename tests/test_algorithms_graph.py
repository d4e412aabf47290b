"""Tests for utils/algorithms/graph.py"""

from typing import Iterator

from utils.algorithms.graph import depth_first_discovery, exists_path


def after(graph: dict[str, list[str]]):
    def neighbours(node: str) -> Iterator[str]:
        return iter(graph.get(node, []))

    return neighbours


class Node:
    """Mutable node so tests can build cycles and equal-valued twins."""

    def __init__(self, value: int):
        self.value = value
        self.children: list["Node"] = []

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


def children(node: Node) -> list[Node]:
    return node.children


class TestDepthFirstDiscovery:
    def test_none_root(self):
        assert list(depth_first_discovery(after({}), None)) == []

    def test_single_node(self):
        assert list(depth_first_discovery(after({}), "A")) == ["A"]

    def test_preorder_on_tree(self):
        """
        A -> B -> D
        A -> C
        """
        graph = {"A": ["B", "C"], "B": ["D"]}
        assert list(depth_first_discovery(after(graph), "A")) == ["A", "B", "D", "C"]

    def test_cycle_terminates(self):
        """A -> B -> C -> A"""
        graph = {"A": ["B"], "B": ["C"], "C": ["A"]}
        assert list(depth_first_discovery(after(graph), "A")) == ["A", "B", "C"]

    def test_self_loop(self):
        graph = {"A": ["A", "B"]}
        assert list(depth_first_discovery(after(graph), "A")) == ["A", "B"]

    def test_shared_child_yielded_once(self):
        """Diamond: A -> B, A -> C, B -> D, C -> D"""
        graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"]}
        result = list(depth_first_discovery(after(graph), "A"))
        assert sorted(result) == ["A", "B", "C", "D"]
        assert len(result) == 4

    def test_identity_not_equality(self):
        """Two distinct nodes with equal values are both visited."""
        root = Node(0)
        first, second = Node(1), Node(1)
        root.children = [first, second]
        result = list(depth_first_discovery(children, root))
        assert len(result) == 3
        assert result[1] is first
        assert result[2] is second

    def test_fresh_nodes_from_after(self):
        """Nodes built on the fly by `after` are all yielded, none dropped."""

        def successor(node: list[int]) -> list[list[int]]:
            return [[node[0] + 1]] if node[0] < 50 else []

        result = [node[0] for node in depth_first_discovery(successor, [0])]
        assert result == list(range(51))

    def test_deep_chain_does_not_recurse(self):
        nodes = [Node(i) for i in range(20_000)]
        for current, nxt in zip(nodes, nodes[1:]):
            current.children.append(nxt)
        assert sum(1 for _ in depth_first_discovery(children, nodes[0])) == 20_000


class TestExistsPath:
    @staticmethod
    def always(_u, _v) -> bool:
        return True

    def test_start_is_end(self):
        assert exists_path(after({}), "A", "A", lambda u, v: False)

    def test_direct_edge(self):
        assert exists_path(after({"A": ["B"]}), "A", "B", self.always)

    def test_no_path(self):
        assert not exists_path(after({"A": ["B"], "C": ["A"]}), "A", "C", self.always)

    def test_cycle_terminates(self):
        graph = {"A": ["B"], "B": ["A"], "C": []}
        assert not exists_path(after(graph), "A", "C", self.always)

    def test_step_predicate_blocks_edges(self):
        graph = {"A": ["B"], "B": ["C"]}
        assert not exists_path(after(graph), "A", "C", lambda u, v: v != "B")

    def test_backtracks_to_other_branch(self):
        """
        A -> B -> D
        A -> C -> E
        Only the second branch reaches E.
        """
        graph = {"A": ["B", "C"], "B": ["D"], "C": ["E"]}
        assert exists_path(after(graph), "A", "E", self.always)

    def test_rejected_edge_does_not_exclude_node(self):
        """
        D is first reached through a rejected edge, then through a valid one:
        A -> B -> D -> E
        A -> C -> D
        """
        graph = {"A": ["B", "C"], "B": ["D"], "C": ["D"], "D": ["E"]}
        assert exists_path(after(graph), "A", "E", lambda u, v: (u, v) != ("B", "D"))
