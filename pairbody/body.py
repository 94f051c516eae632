"""
This module defines the Body class, a simple data container for individual point
masses in the simulation.

The class stores the mass as a read-only float and the position and velocity as
float64 numpy 3-vectors, and provides a clean string representation for debugging.
Position and velocity arrays are mutated in place by the force pass and the
integrator; the mass never changes after construction. A body carries no rendering
handle: sinks identify it by its index in the simulation state. The class makes no
assumptions about units, leaving those decisions to the configuration. Construction
rejects a non-finite or non-positive mass with InvalidArgument.
"""
import math

import numpy as np

from .errors import InvalidArgument


def _vec3(value, name: str) -> np.ndarray:
	arr = np.array(value, dtype=np.float64).reshape(-1)
	if arr.shape != (3,):
		raise InvalidArgument(f"{name} must have exactly 3 components, got shape {arr.shape}")
	return arr


class Body:
	__slots__ = ("_mass", "position", "velocity")

	def __init__(self, mass: float, position=(0.0, 0.0, 0.0), velocity=(0.0, 0.0, 0.0)):
		m = float(mass)
		if not math.isfinite(m) or m <= 0.0:
			raise InvalidArgument(f"mass must be a positive finite number, got {mass!r}")
		self._mass = m
		self.position = _vec3(position, "position")
		self.velocity = _vec3(velocity, "velocity")

	@property
	def mass(self) -> float:
		return self._mass

	def momentum(self) -> np.ndarray:
		return self._mass * self.velocity

	def copy(self) -> "Body":
		return Body(self._mass, self.position.copy(), self.velocity.copy())

	def __repr__(self) -> str:
		px, py, pz = self.position
		vx, vy, vz = self.velocity
		return (f"Body(mass={self._mass}, position=({px}, {py}, {pz}), "
				f"velocity=({vx}, {vy}, {vz}))")
