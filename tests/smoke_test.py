"""
Just checks that the package can be imported and searched with
"""

import unittest

import pathsym as ps


class TestSmoke(unittest.TestCase):
    def test_subpackages(self):
        self.assertIs(ps.search.PathFinder, ps.PathFinder)
        self.assertIs(ps.frontier.PriorityFrontier, ps.PriorityFrontier)
        self.assertIs(ps.path_graph.GridPathGraph, ps.GridPathGraph)

    def test_astar(self):
        g = ps.DictPathGraph.undirected([("A", "B"), ("B", "C")], default_edge_cost=1)
        self.assertEqual(ps.astar(g, "A", "C"), ["A", "B", "C"])
        self.assertIs(ps.astar(g, "A", "Z"), ps.NOT_FOUND)

    def test_grid(self):
        g = ps.GridPathGraph.from_strings(
            [
                "S..",
                "##.",
                "G..",
            ]
        )
        self.assertEqual(
            ps.astar(g, (0, 0), (2, 0)),
            [(0, 0), (0, 1), (0, 2), (1, 2), (2, 2), (2, 1), (2, 0)],
        )
