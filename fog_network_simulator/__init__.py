"""
Self-Organizing Fog Network Simulator

Generates random spatial fog computing networks: nodes scattered in a
bounded plane, linked to nearby peers under a per-node connection cap.
"""

__version__ = "0.1.0"

from .config import NetworkParams
from .generator import Edge, FogNetworkGenerator, FogNode, generate_network
from .metrics import NetworkStatistics

__all__ = [
    "NetworkParams",
    "FogNode",
    "Edge",
    "FogNetworkGenerator",
    "generate_network",
    "NetworkStatistics",
]
