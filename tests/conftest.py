import numpy as np
import pytest

from pairbody import Body, SimConfig, SimulationState


@pytest.fixture
def two_bodies():
    a = Body(2.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    b = Body(5.0, (10.0, 0.0, 0.0), (0.0, 0.0, 0.0))
    return a, b


@pytest.fixture
def unit_config():
    return SimConfig(G=1.0, body_radius=0.2, default_time_scale=1.0)


@pytest.fixture
def random_bodies():
    rng = np.random.default_rng(1234)

    def make(n):
        return [
            Body(float(rng.choice([2.0, 5.0, 7.0])),
                 rng.uniform(-10.0, 10.0, 3),
                 rng.uniform(-0.5, 0.5, 3))
            for _ in range(n)
        ]

    return make


@pytest.fixture
def clone_state():
    def clone(state, time_scale=None):
        bodies = [b.copy() for b in state.bodies]
        ts = state.time_scale.get() if time_scale is None else time_scale
        return SimulationState(bodies, ts)

    return clone
