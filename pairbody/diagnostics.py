from __future__ import annotations
import itertools, math
import numpy as np
from typing import Tuple, TYPE_CHECKING

from .geometry_cache import pair_geometry
from .physics_utils import center_of_mass
from .sim_config import SimConfig
if TYPE_CHECKING:
    from .simulation_state import SimulationState

"""
This module computes conserved quantities of a running simulation. The Diagnostics class provides kinetic energy, potential energy evaluated with the same minimum-separation clamp the force pass uses, total energy, linear momentum and center of mass position and velocity. Linear momentum is the quantity the pairwise force pass conserves exactly up to rounding; energy is not conserved by explicit Euler and drifts with dt. The potential energy sums over unordered pairs only. It assumes access to simulation state through its array snapshots.

"""




class Diagnostics:

	def __init__(self, state: "SimulationState", config: SimConfig | None = None):
		self.state = state
		self.cfg = config if config is not None else SimConfig()

	def kinetic_energy(self) -> float:
		s = 0.0
		for b in self.state.bodies:
			s += 0.5 * b.mass * float(np.dot(b.velocity, b.velocity))
		return s

	def potential_energy(self) -> float:
		n = self.state.n_bodies
		G = float(self.cfg.G)
		if n < 2 or G == 0.0:
			return 0.0

		m = self.state.masses()
		iu, ju, _, r = pair_geometry(self.state.positions())
		r = np.maximum(r, float(self.cfg.min_separation))
		return -G * float(np.sum(m[iu] * m[ju] / r))

	def total_energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def linear_momentum(self) -> np.ndarray:
		p = np.zeros(3)
		for b in self.state.bodies:
			p += b.momentum()
		return p

	def center_of_mass(self) -> Tuple[np.ndarray, np.ndarray]:
		return center_of_mass(
			self.state.masses(), self.state.positions(), self.state.velocities()
		)

	def min_separation(self) -> float:
		best = math.inf
		for a, b in itertools.combinations(self.state.bodies, 2):
			d = b.position - a.position
			best = min(best, math.sqrt(float(np.dot(d, d))))
		return best
