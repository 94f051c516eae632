from __future__ import annotations
from typing import Final, Tuple

"""
This module centralizes the named defaults of the simulation. GRAVITATIONAL_CONSTANT, BODY_COUNT, BODY_RADIUS, the spawn cube MIN_EXTENTS/MAX_EXTENTS, RANDOM_VELOCITY_RANGE, DEFAULT_TIME_SCALE and the discrete MASS_CHOICES are read by SimConfig and by the initial condition generator. MIN_SEPARATION is derived from the body radius: two spheres closer than twice their radius are treated as touching. Units are arbitrary and shared by every component.

"""


GRAVITATIONAL_CONSTANT: Final[float] = 1.0
BODY_COUNT: Final[int] = 12
BODY_RADIUS: Final[float] = 0.2
MIN_SEPARATION: Final[float] = 2.0 * BODY_RADIUS

MIN_EXTENTS: Final[float] = -50.0
MAX_EXTENTS: Final[float] = 50.0
RANDOM_VELOCITY_RANGE: Final[float] = 0.7

DEFAULT_TIME_SCALE: Final[float] = 4.0

MASS_CHOICES: Final[Tuple[float, ...]] = (2.0, 5.0, 7.0)

FORCE_PASS_PAIRWISE: Final[str] = "pairwise"
FORCE_PASS_VECTORIZED: Final[str] = "vectorized"


__all__ = [
    "GRAVITATIONAL_CONSTANT",
    "BODY_COUNT",
    "BODY_RADIUS",
    "MIN_SEPARATION",
    "MIN_EXTENTS",
    "MAX_EXTENTS",
    "RANDOM_VELOCITY_RANGE",
    "DEFAULT_TIME_SCALE",
    "MASS_CHOICES",
    "FORCE_PASS_PAIRWISE",
    "FORCE_PASS_VECTORIZED",
]
