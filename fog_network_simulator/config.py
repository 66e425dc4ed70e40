"""
Configuration management for fog network generation.
"""

import json
import math
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional


# Ranges enforced at the input boundary (the parameter form)
NUM_NODES_RANGE = (1, 50)
PROXIMITY_THRESHOLD_RANGE = (10.0, 200.0)
MAX_CONNECTIONS_RANGE = (1, 10)

CONNECTION_MODES = ("directed", "undirected")

_INT_FIELDS = ("num_nodes", "max_connections")
_FLOAT_FIELDS = ("proximity_threshold", "resource_capacity")


@dataclass
class NetworkParams:
    """Parameters for one fog network generation pass."""

    # Network shape
    num_nodes: int = 20
    proximity_threshold: float = 50.0
    max_connections: int = 5
    resource_capacity: float = 100.0

    # Placement bounds (visualization plane)
    width: float = 400.0
    height: float = 300.0

    # Reproducibility
    seed: Optional[int] = None

    # "directed" keeps the per-node greedy pass, "undirected" assigns
    # deduplicated pairs globally
    connection_mode: str = "directed"

    @classmethod
    def from_json(cls, filepath: str) -> "NetworkParams":
        """Load parameters from JSON file."""
        with open(filepath, 'r') as f:
            data = json.load(f)

        # Shape fields get the same coercion as form input
        raw = {key: data.pop(key) for key in _INT_FIELDS + _FLOAT_FIELDS if key in data}
        return cls.from_form(raw, previous=cls(**data))

    def to_json(self, filepath: str) -> None:
        """Save parameters to JSON file."""
        data = {
            "num_nodes": self.num_nodes,
            "proximity_threshold": self.proximity_threshold,
            "max_connections": self.max_connections,
            "resource_capacity": self.resource_capacity,
            "width": self.width,
            "height": self.height,
            "seed": self.seed,
            "connection_mode": self.connection_mode,
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def from_form(
        cls,
        raw: Dict[str, Any],
        previous: Optional["NetworkParams"] = None
    ) -> "NetworkParams":
        """
        Build parameters from raw form (or CLI) values.

        Counts are parsed as integers and the rest as floats. A value that
        cannot be parsed keeps the previous value, so malformed input never
        reaches the generator. Range clamping is left to `clamped()`.

        Args:
            raw: Mapping of field name -> raw value (string or number)
            previous: Parameters to fall back on (defaults if None)

        Returns:
            New NetworkParams instance
        """
        if previous is None:
            previous = cls()

        updates = {}
        for key, value in raw.items():
            if key in _INT_FIELDS:
                parsed = _parse_number(value, integer=True)
            elif key in _FLOAT_FIELDS:
                parsed = _parse_number(value, integer=False)
            else:
                raise ValueError(f"Unknown network parameter: {key}")

            if parsed is not None:
                updates[key] = parsed

        return replace(previous, **updates)

    def clamped(self) -> "NetworkParams":
        """Return a copy with every parameter clamped to its valid range."""
        return replace(
            self,
            num_nodes=_clamp(int(self.num_nodes), *NUM_NODES_RANGE),
            proximity_threshold=_clamp(
                self.proximity_threshold, *PROXIMITY_THRESHOLD_RANGE
            ),
            max_connections=_clamp(
                int(self.max_connections), *MAX_CONNECTIONS_RANGE
            ),
            resource_capacity=max(0.0, self.resource_capacity),
            width=max(0.0, self.width),
            height=max(0.0, self.height),
        )

    def validate(self) -> None:
        """Raise ValueError on a bad seed or connection mode."""
        if self.seed is not None and (isinstance(self.seed, bool)
                                      or not isinstance(self.seed, int)
                                      or self.seed < 0):
            raise ValueError(f"seed must be a non-negative integer, got {self.seed!r}")
        self.validate_mode()

    def validate_mode(self) -> str:
        """Return the connection mode, raising on unknown values."""
        if self.connection_mode not in CONNECTION_MODES:
            raise ValueError(f"Unknown connection_mode: {self.connection_mode}")
        return self.connection_mode


def _parse_number(value: Any, integer: bool) -> Optional[float]:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return int(number) if integer else number


def _clamp(value, low, high):
    return max(low, min(high, value))
