"""
This module generates the randomized initial conditions of a simulation run.

The InitialConditionGenerator class draws each body's mass uniformly from a small
discrete set, each position component independently and uniformly from the spawn cube,
and each velocity component independently and uniformly from [-v, v]. The GeneratorConfig
dataclass encapsulates these parameters together with the seed. Draws come from a
numpy Generator, so a fixed seed reproduces the same bodies while seed=None falls back
to fresh OS entropy. Methods include generate_single for raw arrays and generate_bodies
for Body instances; the module-level initialize function is the one-call entry point.
Arguments are checked up front and rejected with InvalidArgument. The generator creates
no rendering objects; that remains the caller's responsibility.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .body import Body
from .constants import MASS_CHOICES, MAX_EXTENTS, MIN_EXTENTS, RANDOM_VELOCITY_RANGE
from .errors import InvalidArgument
from .physics_utils import remove_center_of_mass_velocity
from .sim_config import SimConfig, check_bounds, check_count


logger = logging.getLogger(__name__)




@dataclass
class GeneratorConfig:
	mass_choices: Tuple[float, ...] = field(default_factory=lambda: tuple(MASS_CHOICES))
	position_bounds: Tuple[float, float] = (MIN_EXTENTS, MAX_EXTENTS)
	velocity_range: float = RANDOM_VELOCITY_RANGE
	zero_momentum: bool = False
	seed: Optional[int] = None

	@classmethod
	def from_sim_config(cls, cfg: SimConfig, seed: Optional[int] = None) -> "GeneratorConfig":
		return cls(
			mass_choices=tuple(cfg.mass_choices),
			position_bounds=tuple(cfg.spatial_bounds),
			velocity_range=float(cfg.initial_velocity_range),
			zero_momentum=bool(cfg.zero_momentum),
			seed=seed,
		)


class InitialConditionGenerator:

	def __init__(
		self,
		config: GeneratorConfig | None = None,
		rng: np.random.Generator | None = None,
	):
		self.config: GeneratorConfig = config or GeneratorConfig()
		self._mass_choices = self._check_config(self.config)
		if rng is None:
			rng = np.random.default_rng(self.config.seed)
		self.rng = rng

	@staticmethod
	def _check_config(cfg: GeneratorConfig) -> np.ndarray:
		choices = np.asarray(list(cfg.mass_choices), dtype=float).ravel()
		if choices.size == 0:
			raise InvalidArgument("mass_choices must not be empty")
		if not np.all(np.isfinite(choices)) or np.any(choices <= 0.0):
			raise InvalidArgument(f"mass_choices must be positive finite numbers, got {cfg.mass_choices!r}")

		check_bounds("position_bounds", cfg.position_bounds)

		v = float(cfg.velocity_range)
		if not math.isfinite(v) or v < 0.0:
			raise InvalidArgument(f"velocity_range must be finite and >= 0, got {cfg.velocity_range!r}")

		return np.unique(choices)

	def _generate_masses(self, n: int) -> np.ndarray:
		return self.rng.choice(self._mass_choices, size=n)

	def _generate_positions(self, n: int) -> np.ndarray:
		lo, hi = check_bounds("position_bounds", self.config.position_bounds)
		return self.rng.uniform(lo, hi, size=(n, 3))

	def _generate_velocities(self, m: np.ndarray) -> np.ndarray:
		v = float(self.config.velocity_range)
		vel = self.rng.uniform(-v, v, size=(m.size, 3))
		if self.config.zero_momentum:
			vel = remove_center_of_mass_velocity(m, vel)
		return vel

	def generate_single(self, n_bodies: int) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		n = check_count("body count", n_bodies)
		m = self._generate_masses(n)
		p = self._generate_positions(n)
		v = self._generate_velocities(m)
		return m, p, v

	def generate_bodies(self, n_bodies: int) -> List[Body]:
		m, p, v = self.generate_single(n_bodies)
		bodies = [Body(m[i], p[i], v[i]) for i in range(m.size)]
		logger.debug("generated %d bodies (seed=%s)", len(bodies), self.config.seed)
		return bodies


def initialize(
	count: int,
	mass_choices: Iterable[float] = MASS_CHOICES,
	position_bounds: Tuple[float, float] = (MIN_EXTENTS, MAX_EXTENTS),
	velocity_range: float = RANDOM_VELOCITY_RANGE,
	*,
	seed: Optional[int] = None,
	rng: np.random.Generator | None = None,
) -> List[Body]:
	cfg = GeneratorConfig(
		mass_choices=tuple(mass_choices),
		position_bounds=tuple(position_bounds),
		velocity_range=velocity_range,
		seed=seed,
	)
	return InitialConditionGenerator(cfg, rng=rng).generate_bodies(count)
