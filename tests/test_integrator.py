import itertools

import numpy as np
import pytest

import pairbody.integrator as integrator_module
from pairbody import (
    Body,
    Integrator,
    SimConfig,
    SimulationState,
    TrajectoryRecorder,
    pairwise_velocity_deltas,
)


def test_concrete_two_body_step(unit_config):
    state = SimulationState(
        [Body(2.0, (0.0, 0.0, 0.0)), Body(5.0, (10.0, 0.0, 0.0))], time_scale=1.0
    )
    dt = Integrator(unit_config).step(state, 1.0)

    a, b = state.bodies
    assert dt == 1.0
    np.testing.assert_allclose(a.velocity, [0.05, 0.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(b.velocity, [-0.02, 0.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(a.position, [0.05, 0.0, 0.0], atol=1e-15)
    np.testing.assert_allclose(b.position, [9.98, 0.0, 0.0], atol=1e-12)
    assert state.tick_count == 1


def test_symmetric_equal_masses_move_along_x(unit_config):
    state = SimulationState(
        [Body(3.0, (-4.0, 0.0, 0.0)), Body(3.0, (4.0, 0.0, 0.0))], time_scale=1.0
    )
    Integrator(unit_config).step(state, 0.5)

    left, right = state.bodies
    assert left.velocity[0] > 0.0
    assert right.velocity[0] < 0.0
    assert left.velocity[0] == pytest.approx(-right.velocity[0])
    for b in state.bodies:
        assert b.velocity[1] == 0.0
        assert b.velocity[2] == 0.0
        assert b.position[1] == 0.0
        assert b.position[2] == 0.0


@pytest.mark.parametrize("force_pass", ["pairwise", "vectorized"])
def test_time_scale_linearity(random_bodies, clone_state, force_pass):
    cfg = SimConfig(force_pass=force_pass)
    scaled = SimulationState(random_bodies(6), time_scale=3.0)
    plain = clone_state(scaled, time_scale=1.0)

    Integrator(cfg).step(scaled, 0.02)
    Integrator(cfg).step(plain, 0.06)

    np.testing.assert_allclose(scaled.positions(), plain.positions(), rtol=1e-12, atol=1e-12)
    np.testing.assert_allclose(scaled.velocities(), plain.velocities(), rtol=1e-12, atol=1e-12)


def test_every_pair_evaluated_once(monkeypatch, random_bodies):
    calls = []

    def counting(a, b, G, dt, min_separation):
        calls.append((id(a), id(b)))
        return True

    monkeypatch.setattr(integrator_module, "apply_gravity", counting)

    n = 7
    state = SimulationState(random_bodies(n), time_scale=1.0)
    integ = Integrator(SimConfig())
    integ.step(state, 0.1)

    ids = [id(b) for b in state.bodies]
    expected = list(itertools.combinations(ids, 2))
    assert calls == expected
    assert len(set(calls)) == n * (n - 1) // 2
    assert integ.pairs_in_last_step == n * (n - 1) // 2


def test_forces_use_positions_from_tick_start(unit_config):
    # a drifts only after every pair has been evaluated, so b and c see a at x=0
    bodies = [
        Body(2.0, (0.0, 0.0, 0.0), (5.0, 0.0, 0.0)),
        Body(5.0, (10.0, 0.0, 0.0)),
        Body(7.0, (0.0, 10.0, 0.0)),
    ]
    reference = [b.copy() for b in bodies]
    state = SimulationState(bodies, time_scale=1.0)
    Integrator(unit_config).step(state, 1.0)

    masses = np.array([b.mass for b in reference])
    positions = np.stack([b.position for b in reference])
    dv, _ = pairwise_velocity_deltas(masses, positions, 1.0, 1.0, unit_config.min_separation)
    expected_v = np.stack([b.velocity for b in reference]) + dv

    np.testing.assert_allclose(state.velocities(), expected_v, atol=1e-14)
    np.testing.assert_allclose(state.positions(), positions + expected_v, atol=1e-12)


def test_vectorized_pass_matches_pairwise(random_bodies, clone_state):
    a = SimulationState(random_bodies(10), time_scale=4.0)
    b = clone_state(a)

    pw = Integrator(SimConfig(force_pass="pairwise"))
    vec = Integrator(SimConfig(force_pass="vectorized"))
    for _ in range(5):
        pw.step(a, 0.016)
        vec.step(b, 0.016)

    np.testing.assert_allclose(a.positions(), b.positions(), rtol=1e-10, atol=1e-12)
    np.testing.assert_allclose(a.velocities(), b.velocities(), rtol=1e-10, atol=1e-12)
    assert vec.pairs_in_last_step == 45


def test_time_scale_read_once_per_tick(random_bodies):
    class CountingScale:
        def __init__(self):
            self.reads = 0

        def get(self):
            self.reads += 1
            return 2.0

    state = SimulationState(random_bodies(4), time_scale=1.0)
    state.time_scale = CountingScale()
    dt = Integrator(SimConfig()).step(state, 0.5)

    assert state.time_scale.reads == 1
    assert dt == 1.0


def test_coincident_bodies_counted_and_finite(unit_config):
    state = SimulationState(
        [Body(2.0, (1.0, 2.0, 3.0)), Body(5.0, (1.0, 2.0, 3.0)), Body(7.0, (4.0, 2.0, 3.0))],
        time_scale=1.0,
    )
    integ = Integrator(unit_config)
    integ.step(state, 0.1)

    assert integ.pairs_in_last_step == 3
    assert integ.skipped_pairs_in_last_step == 1
    assert np.all(np.isfinite(state.positions()))
    assert np.all(np.isfinite(state.velocities()))


def test_step_publishes_to_sink(random_bodies):
    state = SimulationState(random_bodies(3), time_scale=1.0)
    recorder = TrajectoryRecorder()
    integ = Integrator(SimConfig())

    integ.step(state, 0.1, sink=recorder)
    integ.step(state, 0.1, sink=recorder)

    df = recorder.to_frame()
    assert len(df) == 6
    assert sorted(df["tick"].unique()) == [1, 2]
    last = df[df["tick"] == 2].sort_values("body")
    np.testing.assert_allclose(last[["x", "y", "z"]].to_numpy(), state.positions())


def test_zero_elapsed_time_changes_nothing(random_bodies):
    state = SimulationState(random_bodies(5), time_scale=4.0)
    p0, v0 = state.positions(), state.velocities()
    Integrator(SimConfig()).step(state, 0.0)
    np.testing.assert_array_equal(state.positions(), p0)
    np.testing.assert_array_equal(state.velocities(), v0)
