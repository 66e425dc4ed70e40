"""
Fog network generator: random placement with proximity-based connections.
"""

import numpy as np
import networkx as nx
from dataclasses import dataclass, field
from typing import List, Tuple, Optional

from .config import NetworkParams
from .utils import (
    RGB,
    make_rng,
    euclidean_distance,
    pairwise_distances,
    random_color,
    to_css_rgb,
)


@dataclass
class FogNode:
    """A node of the fog network."""

    node_id: int
    x: float
    y: float
    resources: float
    color: RGB
    connections: List[int] = field(default_factory=list)

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    @property
    def css_color(self) -> str:
        return to_css_rgb(self.color)

    def calculate_proximity(self, other: "FogNode") -> float:
        """Euclidean distance to another node."""
        return euclidean_distance(self.position, other.position)


@dataclass(frozen=True)
class Edge:
    """Link from `source` to `target`, with length fixed at creation."""

    source: int
    target: int
    length: float


class FogNetworkGenerator:
    """Generate a fog network from NetworkParams."""

    def __init__(
        self,
        params: NetworkParams,
        seed: Optional[int] = None,
        verbose: bool = True
    ):
        """
        Initialize generator.

        Args:
            params: Generation parameters
            seed: Random seed (uses params.seed if None)
            verbose: Print progress messages
        """
        self.params = params
        self.verbose = verbose

        if seed is None:
            seed = params.seed
        self.rng = make_rng(seed)

        # Fail early on unknown modes
        params.validate_mode()

    def generate(self) -> Tuple[List[FogNode], List[Edge]]:
        """
        Generate a fresh network.

        Each call draws a new network from the generator's random stream
        and never touches collections returned by previous calls.

        Returns:
            (nodes, edges) tuple
        """
        nodes, edges = generate_network(self.params, rng=self.rng)

        if self.verbose:
            print(f"Generated {self.params.connection_mode} network: "
                  f"Nodes={len(nodes)}, Edges={len(edges)}")

        return nodes, edges


def generate_network(
    params: NetworkParams,
    rng: Optional[np.random.Generator] = None
) -> Tuple[List[FogNode], List[Edge]]:
    """
    Place nodes and connect them by proximity.

    Parameters are assumed to be range-valid (see NetworkParams.clamped).

    Args:
        params: Generation parameters
        rng: Random source (seeded from params.seed if None)

    Returns:
        (nodes, edges), nodes in id order and edges in creation order
    """
    mode = params.validate_mode()
    if rng is None:
        rng = make_rng(params.seed)

    nodes = place_nodes(params, rng)
    distances = pairwise_distances([node.position for node in nodes])

    if mode == "directed":
        edges = assign_directed(nodes, distances, params)
    else:
        edges = assign_undirected(nodes, distances, params)

    return nodes, edges


def place_nodes(params: NetworkParams, rng: np.random.Generator) -> List[FogNode]:
    """
    Create nodes 0..num_nodes-1 with uniform positions, resources and colors.

    Draw order per node is x, y, resources, then the three color channels.
    """
    nodes = []
    for node_id in range(params.num_nodes):
        x = float(rng.uniform(0, params.width))
        y = float(rng.uniform(0, params.height))
        resources = float(rng.uniform(0, params.resource_capacity))
        color = random_color(rng)
        nodes.append(FogNode(node_id, x, y, resources, color))
    return nodes


def assign_directed(
    nodes: List[FogNode],
    distances: np.ndarray,
    params: NetworkParams
) -> List[Edge]:
    """
    Greedy per-node assignment in id order.

    Every node links to the first `max_connections` in-threshold nodes by id,
    not the nearest ones. Only the processing node records the connection,
    so a reverse edge exists only if the other node selects it on its own turn.
    """
    edges = []
    if params.max_connections <= 0 or params.proximity_threshold <= 0:
        return edges

    for node in nodes:
        i = node.node_id
        # The cap check runs while filtering, before this node appends anything
        candidates = [
            other for other in nodes
            if other.node_id != i
            and distances[i, other.node_id] <= params.proximity_threshold
            and len(node.connections) < params.max_connections
        ][:params.max_connections]

        for other in candidates:
            edges.append(Edge(i, other.node_id, float(distances[i, other.node_id])))
            node.connections.append(other.node_id)

    return edges


def assign_undirected(
    nodes: List[FogNode],
    distances: np.ndarray,
    params: NetworkParams
) -> List[Edge]:
    """
    Global greedy assignment over unordered pairs, nearest first.

    A pair is accepted while both endpoints are under the cap; each accepted
    pair yields one edge (lower id -> higher id) recorded on both nodes.
    """
    edges = []
    if params.max_connections <= 0 or params.proximity_threshold <= 0:
        return edges

    n = len(nodes)
    pairs = [
        (float(distances[i, j]), i, j)
        for i in range(n)
        for j in range(i + 1, n)
        if distances[i, j] <= params.proximity_threshold
    ]
    pairs.sort()

    for length, i, j in pairs:
        u, v = nodes[i], nodes[j]
        if (len(u.connections) < params.max_connections
                and len(v.connections) < params.max_connections):
            edges.append(Edge(i, j, length))
            u.connections.append(j)
            v.connections.append(i)

    return edges


def to_networkx(
    nodes: List[FogNode],
    edges: List[Edge],
    directed: bool = True
) -> nx.Graph:
    """
    Convert a generated network to a NetworkX graph.

    Args:
        nodes: Generated nodes
        edges: Generated edges
        directed: Build a DiGraph (True) or an undirected Graph

    Returns:
        Graph with node attributes pos/resources/color and edge attribute length
    """
    graph = nx.DiGraph() if directed else nx.Graph()
    for node in nodes:
        graph.add_node(
            node.node_id,
            pos=node.position,
            resources=node.resources,
            color=node.color,
        )
    for edge in edges:
        graph.add_edge(edge.source, edge.target, length=edge.length)
    return graph
