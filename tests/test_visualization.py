import matplotlib.pyplot as plt

from fog_network_simulator import NetworkStatistics, generate_network
from fog_network_simulator.visualization import (
    EDGE_COLOR,
    plot_degree_distribution,
    plot_edge_length_histogram,
    plot_network,
    plot_simulation_summary,
)


def test_plot_network_draws_nodes_and_edges(dense_params):
    nodes, edges = generate_network(dense_params)

    ax = plot_network(nodes, edges, dense_params.width, dense_params.height)

    assert len(ax.lines) == len(edges)
    assert len(ax.texts) == len(nodes)
    assert ax.lines[0].get_color() == EDGE_COLOR
    # Screen orientation: y grows downward
    bottom, top = ax.get_ylim()
    assert bottom > top
    plt.close(ax.figure)


def test_plot_network_without_labels(default_params):
    nodes, edges = generate_network(default_params)

    ax = plot_network(nodes, edges, show_labels=False)

    assert len(ax.texts) == 0
    plt.close(ax.figure)


def test_plot_distributions(dense_params):
    nodes, edges = generate_network(dense_params)
    stats = NetworkStatistics.from_network(nodes, edges)

    ax = plot_degree_distribution(stats.degree_distribution)
    assert len(ax.patches) == len(stats.degree_distribution)
    plt.close(ax.figure)

    ax = plot_edge_length_histogram(edges, dense_params.proximity_threshold)
    assert ax.get_legend() is not None
    plt.close(ax.figure)


def test_summary_figure_saves(tmp_path, default_params):
    nodes, edges = generate_network(default_params)

    fig = plot_simulation_summary(nodes, edges, proximity_threshold=50)
    out = tmp_path / "summary.png"
    fig.savefig(out)
    plt.close(fig)

    assert out.exists()
    assert len(fig.axes) == 3
