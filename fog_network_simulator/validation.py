"""
Validation and reporting for generated fog networks.
"""

from collections import Counter
from typing import Dict, List
from shapely.geometry import LineString

from .config import NetworkParams
from .generator import FogNode, Edge
from .metrics import NetworkStatistics


# Absolute tolerance for stored vs. recomputed edge lengths
LENGTH_TOLERANCE = 1e-6


class NetworkValidator:
    """Check structural properties of generated networks and report on them."""

    def __init__(self, params: NetworkParams):
        """
        Initialize validator.

        Args:
            params: Parameters the network was generated with
        """
        self.params = params

    def check(self, nodes: List[FogNode], edges: List[Edge]) -> Dict[str, bool]:
        """
        Evaluate every property.

        Args:
            nodes: Generated nodes
            edges: Generated edges

        Returns:
            Dict mapping property name -> whether it holds
        """
        ids = {node.node_id for node in nodes}
        by_id = {node.node_id: node for node in nodes}
        valid_edges = [e for e in edges if e.source in ids and e.target in ids]

        results = {
            "node_count": len(nodes) == self.params.num_nodes,
            "contiguous_ids": [n.node_id for n in nodes] == list(range(len(nodes))),
            "resources_in_range": all(
                self._resource_in_range(node.resources) for node in nodes
            ),
            "positions_in_bounds": all(
                0 <= node.x <= self.params.width and 0 <= node.y <= self.params.height
                for node in nodes
            ),
            "edge_endpoints_valid": len(valid_edges) == len(edges),
            "no_self_loops": all(e.source != e.target for e in edges),
            "edge_lengths_euclidean": all(
                self._length_matches(e, by_id) for e in valid_edges
            ),
            "edge_lengths_within_threshold": all(
                e.length <= self.params.proximity_threshold for e in edges
            ),
            "outgoing_cap_respected": all(
                count <= self.params.max_connections
                for count in Counter(e.source for e in edges).values()
            ),
        }

        if self.params.connection_mode == "undirected":
            pairs = [frozenset((e.source, e.target)) for e in edges]
            results["no_duplicate_pairs"] = len(set(pairs)) == len(pairs)
            results["connection_cap_respected"] = all(
                len(node.connections) <= self.params.max_connections
                for node in nodes
            )

        return results

    def assert_valid(self, nodes: List[FogNode], edges: List[Edge]) -> None:
        """Raise AssertionError naming the first property that fails."""
        for name, ok in self.check(nodes, edges).items():
            if not ok:
                raise AssertionError(f"Network property violated: {name}")

    def generate_report(self, nodes: List[FogNode], edges: List[Edge]) -> str:
        """Generate markdown report."""
        stats = NetworkStatistics.from_network(nodes, edges)
        checks = self.check(nodes, edges)

        report = []

        report.append(f"# Fog Network Report\n")
        report.append(f"\n## Parameters\n")
        report.append(f"- Nodes: {self.params.num_nodes}\n")
        report.append(f"- Proximity Threshold: {self.params.proximity_threshold}\n")
        report.append(f"- Max Connections: {self.params.max_connections}\n")
        report.append(f"- Resource Capacity: {self.params.resource_capacity}\n")
        report.append(f"- Plane: {self.params.width} × {self.params.height}\n")
        report.append(f"- Connection Mode: {self.params.connection_mode}\n")
        report.append(f"- Seed: {self.params.seed}\n")

        report.append(f"\n## Network Statistics\n")
        report.append(f"- Total Nodes: {stats.total_nodes}\n")
        report.append(f"- Total Connections: {stats.total_edges}\n")
        report.append(f"- Total Network Resources: {stats.total_resources:.2f}\n")
        report.append(f"- Avg Node Connections: {stats.avg_connections:.2f}\n")
        report.append(f"- Isolated Nodes: {stats.isolated_nodes}\n")
        report.append(f"- Reciprocity: {stats.reciprocity:.3f}\n")

        report.append(f"\n### Edge Lengths\n")
        for key, value in stats.edge_length_stats.items():
            report.append(f"- {key.capitalize()}: {value:.2f}\n")

        report.append(f"\n### Connection Distribution\n")
        report.append(f"```\n")
        report.append(f"Outgoing | Nodes\n")
        report.append(f"---------|------\n")
        for degree, count in stats.degree_distribution.items():
            report.append(f"  {degree:4d}   | {count:4d}\n")
        report.append(f"```\n")

        report.append(f"\n## Checks\n")
        for name, ok in checks.items():
            report.append(f"- {'PASS' if ok else 'FAIL'} {name}\n")

        return "".join(report)

    def _resource_in_range(self, value: float) -> bool:
        if self.params.resource_capacity <= 0:
            return value == 0
        return 0 <= value < self.params.resource_capacity

    def _length_matches(self, edge: Edge, by_id: Dict[int, FogNode]) -> bool:
        u = by_id[edge.source]
        v = by_id[edge.target]
        segment = LineString([u.position, v.position])
        return abs(segment.length - edge.length) <= LENGTH_TOLERANCE
