from __future__ import annotations
from dataclasses import dataclass, field
import math
from typing import Tuple

from .constants import (
    BODY_COUNT,
    BODY_RADIUS,
    DEFAULT_TIME_SCALE,
    FORCE_PASS_PAIRWISE,
    FORCE_PASS_VECTORIZED,
    GRAVITATIONAL_CONSTANT,
    MASS_CHOICES,
    MAX_EXTENTS,
    MIN_EXTENTS,
    RANDOM_VELOCITY_RANGE,
)
from .errors import InvalidArgument

"""
This central configuration module defines all simulation parameters through the SimConfig dataclass. Key parameters include the gravitational constant, the number of bodies and their physical radius (which fixes the minimum separation used for force clamping), the spawn cube and velocity range used by the initial condition generator, the discrete set of masses, the default time scale, and the force pass mode. The class provides a copy method for configuration inheritance and a validate method that rejects non-finite or non-positive values with InvalidArgument before any body is created. It serves as the single source of truth for simulation behavior, with all components referencing this configuration.

"""
_ALLOWED_FORCE_PASSES = {
    FORCE_PASS_PAIRWISE,
    FORCE_PASS_VECTORIZED,
}


def _finite_positive(name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidArgument(f"{name} must be a positive finite number, got {value!r}")


def check_count(name: str, value) -> int:
    try:
        n = int(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}") from exc
    if isinstance(value, bool) or n != value or n <= 0:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    return n


def check_bounds(name: str, bounds) -> Tuple[float, float]:
    try:
        lo, hi = (float(x) for x in bounds)
    except (TypeError, ValueError) as exc:
        raise InvalidArgument(f"{name} must be a (min, max) pair of numbers, got {bounds!r}") from exc
    if not (math.isfinite(lo) and math.isfinite(hi)) or lo > hi:
        raise InvalidArgument(f"{name} must be finite with min <= max, got {bounds!r}")
    return lo, hi


@dataclass
class SimConfig:
    G: float = GRAVITATIONAL_CONSTANT
    body_count: int = BODY_COUNT
    body_radius: float = BODY_RADIUS
    spatial_bounds: Tuple[float, float] = (MIN_EXTENTS, MAX_EXTENTS)
    initial_velocity_range: float = RANDOM_VELOCITY_RANGE
    default_time_scale: float = DEFAULT_TIME_SCALE
    mass_choices: Tuple[float, ...] = field(default_factory=lambda: tuple(MASS_CHOICES))
    force_pass: str = FORCE_PASS_PAIRWISE
    zero_momentum: bool = False

    @property
    def min_separation(self) -> float:
        return 2.0 * float(self.body_radius)

    def validate(self) -> "SimConfig":
        _finite_positive("G", float(self.G))
        _finite_positive("body_radius", float(self.body_radius))
        _finite_positive("default_time_scale", float(self.default_time_scale))

        check_count("body_count", self.body_count)
        check_bounds("spatial_bounds", self.spatial_bounds)

        v = float(self.initial_velocity_range)
        if not math.isfinite(v) or v < 0.0:
            raise InvalidArgument(f"initial_velocity_range must be finite and >= 0, got {v!r}")

        if len(self.mass_choices) == 0:
            raise InvalidArgument("mass_choices must not be empty")
        for m in self.mass_choices:
            _finite_positive("mass choice", float(m))

        if self.force_pass not in _ALLOWED_FORCE_PASSES:
            raise InvalidArgument(
                f"force_pass must be one of {sorted(_ALLOWED_FORCE_PASSES)}, got {self.force_pass!r}"
            )
        return self

    def copy(self) -> "SimConfig":
        new = object.__new__(SimConfig)
        new.__dict__ = dict(getattr(self, "__dict__", {}))
        return new
