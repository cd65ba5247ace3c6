import numpy as np

import pathsym as ps


def line_graph(length, default_edge_cost=1):
    """
    Nodes ``0, 1, ..., length - 1``, each connected to the next.
    """
    return ps.DictPathGraph.undirected(
        [(i, i + 1) for i in range(length - 1)], default_edge_cost=default_edge_cost
    )


def random_weighted_graph(seed, num_nodes=12, edge_probability=0.25):
    """
    Random undirected graph over ``0, ..., num_nodes - 1`` with integer edge weights
    between 1 and 9. Returns the edges and the matrix of shortest path costs.
    """
    rng = np.random.RandomState(seed)
    edges = []
    for a in range(num_nodes):
        for b in range(a + 1, num_nodes):
            if rng.rand() < edge_probability:
                edges.append((a, b, int(rng.randint(1, 10))))
    return edges, all_pairs_shortest_paths(num_nodes, edges)


def all_pairs_shortest_paths(num_nodes, edges):
    """
    Floyd-Warshall over undirected weighted ``edges``.
    """
    dist = np.full((num_nodes, num_nodes), np.inf)
    np.fill_diagonal(dist, 0)
    for a, b, cost in edges:
        dist[a, b] = min(dist[a, b], cost)
        dist[b, a] = min(dist[b, a], cost)
    for k in range(num_nodes):
        dist = np.minimum(dist, dist[:, k : k + 1] + dist[k : k + 1, :])
    return dist


def assert_valid_path(test_obj, graph, path, start, end):
    """
    Checks that ``path`` goes from ``start`` to ``end`` along edges of ``graph``, and
    returns its total edge cost.
    """
    test_obj.assertIsNot(path, ps.NOT_FOUND)
    test_obj.assertEqual(path[0], start)
    test_obj.assertEqual(path[-1], end)
    total = 0.0
    for source, target in zip(path, path[1:]):
        test_obj.assertIn(target, list(graph.neighbors(source)))
        total += graph.edge_cost(source, target)
    return total
