import matplotlib
matplotlib.use('Agg')  # Non-interactive backend

import pytest

from fog_network_simulator import NetworkParams


@pytest.fixture
def default_params():
    return NetworkParams(seed=1234)


@pytest.fixture
def dense_params():
    return NetworkParams(
        num_nodes=40,
        proximity_threshold=120,
        max_connections=4,
        resource_capacity=50,
        seed=99,
    )
