"""
Visualization utilities for generated fog networks.
"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle
from typing import Dict, List, Optional, Tuple

from .generator import FogNode, Edge
from .metrics import NetworkStatistics
from .utils import to_mpl_color


EDGE_COLOR = '#81C784'


def plot_network(
    nodes: List[FogNode],
    edges: List[Edge],
    width: float = 400,
    height: float = 300,
    ax: Optional[plt.Axes] = None,
    title: str = "Fog Network",
    node_size: float = 200,
    edge_width: float = 2.0,
    edge_color: str = EDGE_COLOR,
    show_labels: bool = True
) -> plt.Axes:
    """
    Plot fog network.

    Nodes are circles in their own colors, edges are straight segments.
    The y axis points down, matching screen coordinates.

    Args:
        nodes: Generated nodes
        edges: Generated edges
        width: Plane width
        height: Plane height
        ax: Matplotlib axis (creates new if None)
        title: Plot title
        node_size: Node marker size
        edge_width: Edge line width
        edge_color: Edge color
        show_labels: Draw node ids inside the circles

    Returns:
        Matplotlib axis
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(9, 7))

    # Draw plane boundary
    ax.add_patch(Rectangle(
        (0, 0), width, height,
        fill=False, edgecolor='gray', linestyle='--', linewidth=1
    ))

    by_id = {node.node_id: node for node in nodes}

    for edge in edges:
        u = by_id[edge.source]
        v = by_id[edge.target]
        ax.plot([u.x, v.x], [u.y, v.y], color=edge_color,
                linewidth=edge_width, zorder=1)

    if nodes:
        positions = np.array([node.position for node in nodes])
        colors = [to_mpl_color(node.color) for node in nodes]
        ax.scatter(
            positions[:, 0], positions[:, 1],
            s=node_size, c=colors, zorder=2,
            edgecolors='black', linewidths=0.5
        )

    if show_labels:
        for node in nodes:
            ax.text(node.x, node.y, str(node.node_id), color='white',
                    fontsize=7, ha='center', va='center', zorder=3)

    ax.set_xlim(-10, width + 10)
    ax.set_ylim(height + 10, -10)
    ax.set_aspect('equal')
    ax.set_title(title, fontsize=12, fontweight='bold')
    ax.grid(True, alpha=0.3)

    return ax


def plot_degree_distribution(
    degree_distribution: Dict[int, int],
    ax: Optional[plt.Axes] = None
) -> plt.Axes:
    """Plot out-degree distribution as a bar chart."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(7, 4))

    degrees = sorted(degree_distribution.keys())
    counts = [degree_distribution[d] for d in degrees]

    ax.bar(degrees, counts, color='#3498DB', alpha=0.7,
           edgecolor='black', linewidth=0.5)

    ax.set_xlabel('Outgoing Connections')
    ax.set_ylabel('Nodes')
    ax.set_title('Connection Distribution', fontweight='bold')
    ax.set_xticks(degrees)
    ax.grid(True, alpha=0.3, axis='y')

    return ax


def plot_edge_length_histogram(
    edges: List[Edge],
    proximity_threshold: Optional[float] = None,
    ax: Optional[plt.Axes] = None,
    num_bins: int = 15
) -> plt.Axes:
    """
    Plot histogram of edge lengths.

    Args:
        edges: Generated edges
        proximity_threshold: Draws a marker at the threshold if given
        ax: Matplotlib axis
        num_bins: Number of bins

    Returns:
        Matplotlib axis
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(7, 4))

    lengths = [edge.length for edge in edges]
    if lengths:
        ax.hist(lengths, bins=num_bins, color=EDGE_COLOR, alpha=0.8,
                edgecolor='black', linewidth=0.5)

    if proximity_threshold is not None:
        ax.axvline(proximity_threshold, color='#E74C3C', linestyle='--',
                   label='Proximity threshold')
        ax.legend()

    ax.set_xlabel('Length')
    ax.set_ylabel('Edges')
    ax.set_title('Edge Length Distribution', fontweight='bold')
    ax.grid(True, alpha=0.3, axis='y')

    return ax


def plot_simulation_summary(
    nodes: List[FogNode],
    edges: List[Edge],
    width: float = 400,
    height: float = 300,
    proximity_threshold: Optional[float] = None,
    figsize: Tuple[int, int] = (14, 9)
) -> plt.Figure:
    """
    Create the network figure with distributions and a statistics panel.

    Args:
        nodes: Generated nodes
        edges: Generated edges
        width: Plane width
        height: Plane height
        proximity_threshold: Threshold shown on the length histogram
        figsize: Figure size

    Returns:
        Matplotlib figure
    """
    stats = NetworkStatistics.from_network(nodes, edges)

    fig = plt.figure(figsize=figsize)
    gs = fig.add_gridspec(2, 3, hspace=0.35, wspace=0.3)

    ax1 = fig.add_subplot(gs[:, :2])
    plot_network(nodes, edges, width, height, ax=ax1,
                 title=f"Network ({len(nodes)} nodes)")

    ax2 = fig.add_subplot(gs[0, 2])
    plot_degree_distribution(stats.degree_distribution, ax=ax2)

    ax3 = fig.add_subplot(gs[1, 2])
    plot_edge_length_histogram(edges, proximity_threshold, ax=ax3)

    summary_text = (
        f"Total Nodes: {stats.total_nodes}    "
        f"Total Connections: {stats.total_edges}    "
        f"Total Network Resources: {stats.total_resources:.2f}    "
        f"Avg Node Connections: {stats.avg_connections:.2f}"
    )
    fig.text(0.5, 0.02, summary_text, fontsize=10, family='monospace',
             ha='center')

    fig.suptitle("Self-Organizing Fog Network Simulation", fontsize=14, fontweight='bold', y=0.98)

    return fig
