"""
Command-line entry point for generating fog networks.

Usage:
    fog-network --num-nodes 30 --proximity-threshold 80 --seed 7
    fog-network --config params.json --output network.png --report
"""

import argparse
import sys
from typing import List, Optional

from .config import CONNECTION_MODES, NetworkParams
from .generator import FogNetworkGenerator
from .metrics import NetworkStatistics
from .validation import NetworkValidator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate a self-organizing fog network"
    )
    parser.add_argument(
        "--num-nodes",
        type=str,
        default=None,
        help="Number of nodes (1-50)"
    )
    parser.add_argument(
        "--proximity-threshold",
        type=str,
        default=None,
        help="Maximum connection distance (10-200)"
    )
    parser.add_argument(
        "--max-connections",
        type=str,
        default=None,
        help="Outgoing connections per node (1-10)"
    )
    parser.add_argument(
        "--resource-capacity",
        type=str,
        default=None,
        help="Upper bound for node resources"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed (random if omitted)"
    )
    parser.add_argument(
        "--mode",
        type=str,
        default=None,
        choices=CONNECTION_MODES,
        help="Connection assignment mode"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to parameters JSON (optional)"
    )
    parser.add_argument(
        "--regenerate",
        type=int,
        default=1,
        help="Number of successive networks to generate"
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Save the summary figure of the last network to this PNG path"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a markdown report of the last network"
    )
    return parser


def resolve_params(args: argparse.Namespace) -> NetworkParams:
    """Merge config file and CLI values, then clamp them."""
    if args.config:
        print(f"Loading parameters from {args.config}")
        params = NetworkParams.from_json(args.config)
    else:
        params = NetworkParams()

    raw = {
        "num_nodes": args.num_nodes,
        "proximity_threshold": args.proximity_threshold,
        "max_connections": args.max_connections,
        "resource_capacity": args.resource_capacity,
    }
    raw = {key: value for key, value in raw.items() if value is not None}
    params = NetworkParams.from_form(raw, previous=params)

    if args.seed is not None:
        params.seed = args.seed
    if args.mode is not None:
        params.connection_mode = args.mode

    return params.clamped()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        params = resolve_params(args)
        params.validate()
    except (OSError, ValueError, TypeError) as e:
        print(f"✗ Error loading parameters: {e}")
        return 1

    print(f"\n{'='*60}")
    print(f"Fog Network Simulation")
    print(f"{'='*60}")
    print(f"Nodes: {params.num_nodes}")
    print(f"Proximity Threshold: {params.proximity_threshold}")
    print(f"Max Connections: {params.max_connections}")
    print(f"Resource Capacity: {params.resource_capacity}")
    print(f"Mode: {params.connection_mode}")
    print(f"{'='*60}\n")

    generator = FogNetworkGenerator(params)
    validator = NetworkValidator(params)

    nodes, edges = [], []
    for run in range(max(1, args.regenerate)):
        nodes, edges = generator.generate()
        stats = NetworkStatistics.from_network(nodes, edges)
        print(f"Run {run + 1}: "
              f"Resources={stats.total_resources:.2f}, "
              f"Avg Connections={stats.avg_connections:.2f}")

    try:
        validator.assert_valid(nodes, edges)
    except AssertionError as e:
        print(f"✗ Validation failed: {e}")
        return 1

    if args.report:
        print()
        print(validator.generate_report(nodes, edges))

    if args.output:
        import matplotlib
        matplotlib.use('Agg')  # Non-interactive backend
        from .visualization import plot_simulation_summary

        fig = plot_simulation_summary(
            nodes, edges, params.width, params.height,
            proximity_threshold=params.proximity_threshold
        )
        fig.savefig(args.output, dpi=150, bbox_inches='tight')
        print(f"✓ Figure saved to {args.output}")

    print("✓ All done!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
