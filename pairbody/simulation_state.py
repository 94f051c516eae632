"""
This module manages the state of a running N-body simulation.

The SimulationState class holds the fixed, ordered tuple of bodies and the shared
TimeScaleControl, and counts completed ticks. Bodies are never inserted, removed or
replaced after construction; they are only mutated in place by the force pass and the
integrator. The masses, positions and velocities methods return fresh numpy snapshots
shaped (N,) and (N, 3) for diagnostics and for the vectorized force pass. It assumes the
bodies were validated before being handed over.
"""

from __future__ import annotations
import numpy as np
from typing import Iterable, Tuple, TYPE_CHECKING

from .constants import DEFAULT_TIME_SCALE
from .time_scale import TimeScaleControl

if TYPE_CHECKING:
	from .body import Body




class SimulationState:

	def __init__(
		self,
		bodies: Iterable["Body"],
		time_scale: TimeScaleControl | float = DEFAULT_TIME_SCALE,
	) -> None:
		self._bodies: Tuple["Body", ...] = tuple(bodies)
		if not isinstance(time_scale, TimeScaleControl):
			time_scale = TimeScaleControl(time_scale)
		self.time_scale: TimeScaleControl = time_scale
		self.tick_count: int = 0

	@property
	def bodies(self) -> Tuple["Body", ...]:
		return self._bodies

	@property
	def n_bodies(self) -> int:
		return len(self._bodies)

	def __len__(self) -> int:
		return len(self._bodies)

	def masses(self) -> np.ndarray:
		return np.array([b.mass for b in self._bodies], dtype=np.float64)

	def positions(self) -> np.ndarray:
		if not self._bodies:
			return np.empty((0, 3), dtype=np.float64)
		return np.stack([b.position for b in self._bodies]).astype(np.float64, copy=True)

	def velocities(self) -> np.ndarray:
		if not self._bodies:
			return np.empty((0, 3), dtype=np.float64)
		return np.stack([b.velocity for b in self._bodies]).astype(np.float64, copy=True)
