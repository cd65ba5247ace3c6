import unittest

import pathsym as ps

from ..utils import line_graph

diamond = ps.DictPathGraph(
    {"S": {"A": 1, "B": 2}, "A": {"T": 1}, "B": {"T": 1}},
    heuristic_fn=lambda node, goal: 0 if node == goal else 1,
)


class NoEdgesInto(ps.FilterNeighborsGraph):
    def __init__(self, graph, forbidden):
        super().__init__(graph)
        self.forbidden = forbidden

    def include_edge(self, s, t):
        return t != self.forbidden


class CountingGraph(ps.PathGraph):
    def __init__(self):
        self.calls = []

    def neighbors(self, node):
        self.calls.append(node)
        return [node + 1, node + 2, node + 3]

    def heuristic(self, node, goal):
        return 0


class TestTransformers(unittest.TestCase):
    def test_filter_subclass(self):
        self.assertEqual(ps.astar(diamond, "S", "T"), ["S", "A", "T"])
        g = NoEdgesInto(diamond, "A")
        self.assertEqual(g.neighbors("S"), ["B"])
        result = ps.PathFinder(g).search("S", "T")
        self.assertEqual(result.path, ["S", "B", "T"])
        self.assertEqual(result.cost, 3)

    def test_filter_neighbors(self):
        g = diamond.filter_neighbors(lambda s, t: (s, t) != ("A", "T"))
        self.assertEqual(ps.astar(g, "S", "T"), ["S", "B", "T"])
        self.assertEqual(g.heuristic("S", "T"), 1)

    def test_filter_everything(self):
        g = diamond.filter_neighbors(lambda s, t: False)
        self.assertIs(ps.astar(g, "S", "T"), ps.NOT_FOUND)

    def test_limit_neighbors(self):
        g = line_graph(5).limit_neighbors(1)
        # each node's first neighbor is the one before it
        self.assertEqual(g.neighbors(3), [2])
        self.assertEqual(ps.astar(g, 0, 1), [0, 1])
        self.assertIs(ps.astar(g, 0, 2), ps.NOT_FOUND)

    def test_limit_passes_through_costs(self):
        g = diamond.limit_neighbors(2)
        self.assertEqual(g.edge_cost("S", "B"), 2)
        self.assertEqual(ps.PathFinder(g).search("S", "T").cost, 2)

    def test_limit_consumes_lazily(self):
        inner = CountingGraph()
        g = ps.LimitNeighborsGraph(inner, 2)
        self.assertEqual(g.neighbors(0), [1, 2])
        self.assertEqual(inner.calls, [0])

    def test_limit_must_be_positive(self):
        with self.assertRaises(AssertionError):
            ps.LimitNeighborsGraph(diamond, 0)

    def test_unit_costs(self):
        g = ps.DictPathGraph({"a": ["b"], "b": ["c"]}).with_unit_costs()
        self.assertIsInstance(g, ps.UnitCostGraph)
        result = ps.PathFinder(g).search("a", "c")
        self.assertEqual(result.path, ["a", "b", "c"])
        self.assertEqual(result.cost, 2)

    def test_unit_costs_override_weights(self):
        g = ps.UnitCostGraph(diamond)
        self.assertEqual(g.edge_cost("S", "B"), 1)
        self.assertEqual(ps.PathFinder(g).search("S", "T").cost, 2)

    def test_default_edge_cost_is_zero(self):
        self.assertEqual(CountingGraph().edge_cost(0, 1), 0)
