import pytest

from fog_network_simulator import Edge, FogNode, NetworkStatistics, generate_network
from fog_network_simulator.metrics import (
    compute_avg_connections,
    compute_degree_distribution,
    compute_edge_length_stats,
)


@pytest.fixture
def small_network():
    nodes = [
        FogNode(0, 0.0, 0.0, 10.0, (0, 0, 0)),
        FogNode(1, 3.0, 4.0, 20.0, (0, 0, 0)),
        FogNode(2, 100.0, 100.0, 5.5, (0, 0, 0)),
    ]
    edges = [Edge(0, 1, 5.0), Edge(1, 0, 5.0)]
    return nodes, edges


def test_panel_statistics(small_network):
    stats = NetworkStatistics.from_network(*small_network)

    assert stats.total_nodes == 3
    assert stats.total_edges == 2
    assert stats.total_resources == pytest.approx(35.5)
    assert stats.avg_connections == pytest.approx(2 / 3)


def test_graph_statistics(small_network):
    stats = NetworkStatistics.from_network(*small_network)

    assert stats.isolated_nodes == 1
    assert stats.reciprocity == pytest.approx(1.0)
    assert stats.degree_distribution == {0: 1, 1: 2}
    assert stats.edge_length_stats["mean"] == pytest.approx(5.0)
    assert stats.edge_length_stats["std"] == pytest.approx(0.0)


def test_empty_network():
    stats = NetworkStatistics.from_network([], [])

    assert stats.avg_connections == 0.0
    assert stats.reciprocity == 0.0
    assert stats.edge_length_stats["max"] == 0.0
    assert compute_avg_connections([], []) == 0.0


def test_degree_distribution_counts_every_node(dense_params):
    nodes, edges = generate_network(dense_params)

    distribution = compute_degree_distribution(nodes, edges)

    assert sum(distribution.values()) == len(nodes)
    assert max(distribution) <= dense_params.max_connections


def test_edge_length_stats():
    stats = compute_edge_length_stats([Edge(0, 1, 1.0), Edge(1, 2, 3.0), Edge(2, 0, 8.0)])

    assert stats["median"] == pytest.approx(3.0)
    assert stats["min"] == 1.0
    assert stats["max"] == 8.0


def test_to_dict(small_network):
    data = NetworkStatistics.from_network(*small_network).to_dict()

    assert data["total_edges"] == 2
    assert set(data) >= {"total_nodes", "total_resources", "avg_connections"}
