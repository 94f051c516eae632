from __future__ import annotations
import logging
from typing import Callable, TYPE_CHECKING

from .constants import FORCE_PASS_VECTORIZED
from .forces import apply_gravity, pairwise_velocity_deltas
from .sim_config import SimConfig
from .sinks import publish_positions

if TYPE_CHECKING:
	from .simulation_state import SimulationState

"""
This central module implements the Integrator class that advances a simulation by one tick. Each step snapshots the time scale once, multiplies the externally supplied elapsed time by it, runs the force pass over every unordered pair of bodies, and only then drifts every body by its new velocity (explicit Euler, velocities first). The pairwise force pass visits pairs (i, j) with i < j in ascending order and applies each exactly once; the vectorized pass evaluates the same pairs with numpy and merges the per-body velocity changes afterwards. Updated positions are published to the rendering sink after the drift. Per-step counters (pairs evaluated, coincident pairs skipped, last dt) are kept for inspection. The implementation assumes the state holds validated bodies and the configuration has been validated.

"""


logger = logging.getLogger(__name__)


class Integrator:

	def __init__(self, config: SimConfig | None = None) -> None:
		self.cfg = config if config is not None else SimConfig()
		self.G = float(self.cfg.G)
		self.min_separation = float(self.cfg.min_separation)

		self.pairs_in_last_step = 0
		self.skipped_pairs_in_last_step = 0
		self.last_dt = 0.0

		self._force_pass: Callable[["SimulationState", float], None] = self._make_force_pass(self.cfg.force_pass)

	def _make_force_pass(self, mode: str) -> Callable[["SimulationState", float], None]:
		if mode == FORCE_PASS_VECTORIZED:
			return self._vectorized_pass
		return self._pairwise_pass

	def _pairwise_pass(self, state: "SimulationState", dt: float) -> None:
		bodies = state.bodies
		n = len(bodies)
		for i in range(n - 1):
			for j in range(i + 1, n):
				self.pairs_in_last_step += 1
				if not apply_gravity(bodies[i], bodies[j], self.G, dt, self.min_separation):
					self.skipped_pairs_in_last_step += 1

	def _vectorized_pass(self, state: "SimulationState", dt: float) -> None:
		n = state.n_bodies
		dv, skipped = pairwise_velocity_deltas(
			state.masses(), state.positions(), self.G, dt, self.min_separation,
		)
		for b, delta in zip(state.bodies, dv):
			b.velocity += delta
		self.pairs_in_last_step = n * (n - 1) // 2
		self.skipped_pairs_in_last_step = skipped

	def drift(self, state: "SimulationState", dt: float) -> None:
		for b in state.bodies:
			b.position += b.velocity * dt

	def step(self, state: "SimulationState", raw_delta_time: float, sink=None) -> float:
		dt = float(raw_delta_time) * state.time_scale.get()

		self.pairs_in_last_step = 0
		self.skipped_pairs_in_last_step = 0

		self._force_pass(state, dt)
		self.drift(state, dt)

		state.tick_count += 1
		self.last_dt = dt

		if sink is not None:
			publish_positions(sink, state.bodies, state.tick_count)

		logger.debug(
			"tick %d: dt=%g pairs=%d skipped=%d",
			state.tick_count, dt, self.pairs_in_last_step, self.skipped_pairs_in_last_step,
		)
		return dt
