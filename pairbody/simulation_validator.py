"""
This module provides validation utilities for N-body simulation states.

The SimulationValidator class offers static methods to check state validity (positive
finite masses, finite 3D positions and velocities, matching lengths) and to report
detailed diagnostics for invalid states through the package logger. check_bodies is the
raising variant used at construction boundaries: it turns the first problem found into
an InvalidArgument naming the offending body. It assumes states should represent
physically meaningful configurations.
"""

from __future__ import annotations
import logging
import math
from typing import Sequence, Tuple, TYPE_CHECKING
import numpy as np

from .errors import InvalidArgument

if TYPE_CHECKING:
	from .body import Body


logger = logging.getLogger(__name__)


Vec3 = Tuple[float, float, float]


class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec3],
		velocities: Sequence[Vec3],
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if m.size == 0:
			return False
		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 3:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		return True

	@staticmethod
	def check_bodies(bodies: Sequence["Body"]) -> None:
		if len(bodies) == 0:
			raise InvalidArgument("a simulation needs at least one body")

		for i, b in enumerate(bodies):
			if not (b.mass > 0.0 and math.isfinite(b.mass)):
				raise InvalidArgument(f"body {i} has invalid mass {b.mass!r}")
			if b.position.shape != (3,) or not np.all(np.isfinite(b.position)):
				raise InvalidArgument(f"body {i} has invalid position {b.position!r}")
			if b.velocity.shape != (3,) or not np.all(np.isfinite(b.velocity)):
				raise InvalidArgument(f"body {i} has invalid velocity {b.velocity!r}")

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
	) -> None:

		logger.warning("[invalid] %s", label)
		if masses is not None:
			logger.warning("masses %s", masses)
		if positions is not None:
			logger.warning("positions %s", positions)
			for i, pos in enumerate(positions):
				if len(pos) != 3:
					logger.warning("  position[%d] has %d dimensions (expected 3)", i, len(pos))
		if velocities is not None:
			logger.warning("velocities %s", velocities)
			for i, vel in enumerate(velocities):
				if len(vel) != 3:
					logger.warning("  velocity[%d] has %d dimensions (expected 3)", i, len(vel))
