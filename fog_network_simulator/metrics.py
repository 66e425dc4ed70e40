"""
Summary statistics for generated fog networks.
"""

import numpy as np
import networkx as nx
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List

from .generator import FogNode, Edge, to_networkx


@dataclass
class NetworkStatistics:
    """Derived view over one generated network."""

    total_nodes: int = 0
    total_edges: int = 0
    total_resources: float = 0.0
    avg_connections: float = 0.0
    isolated_nodes: int = 0
    reciprocity: float = 0.0
    degree_distribution: Dict[int, int] = field(default_factory=dict)
    edge_length_stats: Dict[str, float] = field(default_factory=dict)

    @classmethod
    def from_network(cls, nodes: List[FogNode], edges: List[Edge]) -> "NetworkStatistics":
        """
        Compute all statistics.

        Args:
            nodes: Generated nodes
            edges: Generated edges

        Returns:
            NetworkStatistics instance
        """
        graph = to_networkx(nodes, edges, directed=True)

        return cls(
            total_nodes=len(nodes),
            total_edges=len(edges),
            total_resources=compute_total_resources(nodes),
            avg_connections=compute_avg_connections(nodes, edges),
            isolated_nodes=nx.number_of_isolates(graph),
            reciprocity=compute_reciprocity(graph),
            degree_distribution=compute_degree_distribution(nodes, edges),
            edge_length_stats=compute_edge_length_stats(edges),
        )

    def to_dict(self) -> Dict:
        return {
            "total_nodes": self.total_nodes,
            "total_edges": self.total_edges,
            "total_resources": self.total_resources,
            "avg_connections": self.avg_connections,
            "isolated_nodes": self.isolated_nodes,
            "reciprocity": self.reciprocity,
            "degree_distribution": self.degree_distribution,
            "edge_length_stats": self.edge_length_stats,
        }


def compute_total_resources(nodes: List[FogNode]) -> float:
    """Sum of node resource values."""
    return float(sum(node.resources for node in nodes))


def compute_avg_connections(nodes: List[FogNode], edges: List[Edge]) -> float:
    """Edge count per node, 0 for an empty network."""
    if not nodes:
        return 0.0
    return len(edges) / len(nodes)


def compute_degree_distribution(nodes: List[FogNode], edges: List[Edge]) -> Dict[int, int]:
    """
    Compute outgoing edge count distribution.

    Args:
        nodes: Generated nodes
        edges: Generated edges

    Returns:
        Dict mapping out-degree -> node count
    """
    out_degree = Counter(edge.source for edge in edges)
    degrees = [out_degree.get(node.node_id, 0) for node in nodes]
    return dict(sorted(Counter(degrees).items()))


def compute_edge_length_stats(edges: List[Edge]) -> Dict[str, float]:
    """Mean, median, std, min and max of edge lengths (zeros if no edges)."""
    if not edges:
        return {"mean": 0.0, "median": 0.0, "std": 0.0, "min": 0.0, "max": 0.0}

    lengths = np.array([edge.length for edge in edges])
    return {
        "mean": float(np.mean(lengths)),
        "median": float(np.median(lengths)),
        "std": float(np.std(lengths)),
        "min": float(np.min(lengths)),
        "max": float(np.max(lengths)),
    }


def compute_reciprocity(graph: nx.DiGraph) -> float:
    """Fraction of edges whose reverse edge also exists."""
    if graph.number_of_edges() == 0:
        return 0.0
    return float(nx.reciprocity(graph))
