"""
This module ties the components together into NBodySimulation, the object a host
application drives.

On construction the simulation validates its SimConfig, either generates the bodies with
the initial condition generator (seeded when a seed is given) or validates the bodies it
was handed, and builds the SimulationState, the Integrator and the time scale control
from the configured default. on_tick is the clock-source handler: it rejects negative or
non-finite elapsed times with InvalidArgument and otherwise advances one tick and
publishes positions to the attached sink. run drives on_tick from any iterable of elapsed
times, and fixed_clock provides a constant-frame clock for headless runs. set_time_scale
is the configuration channel for the time multiplier and may be called from another
thread.
"""

from __future__ import annotations

import itertools
import logging
import math
from typing import Iterable, Iterator, Optional, Sequence

import numpy as np

from .body import Body
from .diagnostics import Diagnostics
from .errors import InvalidArgument
from .initial_condition_generator import GeneratorConfig, InitialConditionGenerator
from .integrator import Integrator
from .sim_config import SimConfig
from .simulation_state import SimulationState
from .simulation_validator import SimulationValidator
from .time_scale import TimeScaleControl


logger = logging.getLogger(__name__)


def fixed_clock(dt: float, ticks: Optional[int] = None) -> Iterator[float]:
	if ticks is None:
		return itertools.repeat(float(dt))
	return itertools.repeat(float(dt), int(ticks))


class NBodySimulation:

	def __init__(
		self,
		config: SimConfig | None = None,
		*,
		bodies: Sequence[Body] | None = None,
		seed: Optional[int] = None,
		sink=None,
	) -> None:
		self.cfg = (config.copy() if config is not None else SimConfig()).validate()

		if bodies is None:
			gen = InitialConditionGenerator(GeneratorConfig.from_sim_config(self.cfg, seed=seed))
			bodies = gen.generate_bodies(self.cfg.body_count)
		else:
			bodies = list(bodies)
			SimulationValidator.check_bodies(bodies)

		self._state = SimulationState(bodies, TimeScaleControl(self.cfg.default_time_scale))
		self._integrator = Integrator(self.cfg)
		self.sink = sink

		logger.info(
			"NBodySimulation created with %d bodies (G=%s, min_separation=%s, force_pass=%s)",
			self._state.n_bodies, self.cfg.G, self.cfg.min_separation, self.cfg.force_pass,
		)

	@classmethod
	def from_arrays(
		cls,
		masses,
		positions,
		velocities,
		config: SimConfig | None = None,
		sink=None,
	) -> "NBodySimulation":
		if not SimulationValidator.state_is_valid(masses, positions, velocities):
			SimulationValidator.report_invalid_state(
				"from_arrays", masses=masses, positions=positions, velocities=velocities,
			)
			raise InvalidArgument("masses, positions and velocities do not describe a valid state")
		m = np.asarray(masses, dtype=float).ravel()
		p = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)
		bodies = [Body(m[i], p[i], v[i]) for i in range(m.size)]
		return cls(config, bodies=bodies, sink=sink)

	@property
	def state(self) -> SimulationState:
		return self._state

	@property
	def bodies(self):
		return self._state.bodies

	@property
	def integrator(self) -> Integrator:
		return self._integrator

	@property
	def n_bodies(self) -> int:
		return self._state.n_bodies

	@property
	def tick_count(self) -> int:
		return self._state.tick_count

	@property
	def time_scale(self) -> float:
		return self._state.time_scale.get()

	@time_scale.setter
	def time_scale(self, value: float) -> None:
		self.set_time_scale(value)

	def set_time_scale(self, value: float) -> None:
		self._state.time_scale.set(value)

	def attach_sink(self, sink) -> None:
		self.sink = sink

	def diagnostics(self) -> Diagnostics:
		return Diagnostics(self._state, self.cfg)

	def on_tick(self, elapsed: float) -> float:
		try:
			elapsed = float(elapsed)
		except (TypeError, ValueError) as exc:
			raise InvalidArgument(f"elapsed time must be a number, got {elapsed!r}") from exc
		if not math.isfinite(elapsed) or elapsed < 0.0:
			raise InvalidArgument(f"elapsed time must be finite and >= 0, got {elapsed!r}")
		return self._integrator.step(self._state, elapsed, self.sink)

	def run(self, clock: Iterable[float], max_ticks: Optional[int] = None) -> int:
		ticks = 0
		if max_ticks is not None:
			clock = itertools.islice(clock, max(0, int(max_ticks)))
		for elapsed in clock:
			self.on_tick(elapsed)
			ticks += 1
		logger.info("run finished after %d tick(s), total ticks %d", ticks, self.tick_count)
		return ticks
