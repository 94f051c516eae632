"""
This module implements the pairwise gravitational interaction with distance clamping
for close encounter handling.

The apply_gravity function evaluates Newton's inverse-square law for one pair of bodies
and applies the resulting equal-and-opposite impulses directly to both velocities,
leaving positions untouched. Separations below the minimum separation are clamped to it,
so the force magnitude plateaus instead of diverging. Coincident bodies have no defined
direction; such a pair is skipped for the tick and reported through the return value.
The pairwise_velocity_deltas function provides the same law over every unordered pair at
once using numpy, merging per-body contributions through accumulation buffers so that no
body is written from two pair evaluations at the same time. All functions assume
positive masses and finite positions.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Tuple

import numpy as np
from numpy.typing import NDArray

from .geometry_cache import pair_geometry

if TYPE_CHECKING:
    from .body import Body


logger = logging.getLogger(__name__)




def force_magnitude(a: "Body", b: "Body", G: float, min_separation: float) -> float:
    delta = b.position - a.position
    dist = max(float(np.sqrt(np.dot(delta, delta))), float(min_separation))
    return float(G) * (a.mass * b.mass) / (dist * dist)


def apply_gravity(
    a: "Body",
    b: "Body",
    G: float,
    dt: float,
    min_separation: float,
) -> bool:
    delta = b.position - a.position
    raw = float(np.sqrt(np.dot(delta, delta)))
    if raw == 0.0:
        logger.debug("skipping coincident pair at %s", a.position)
        return False

    dist = max(raw, float(min_separation))
    direction = delta / raw

    force = float(G) * (a.mass * b.mass) / (dist * dist)

    accel_a = force / a.mass
    accel_b = force / b.mass

    a.velocity += direction * (accel_a * dt)
    b.velocity -= direction * (accel_b * dt)
    return True


def pairwise_velocity_deltas(
    masses: NDArray[np.floating],
    positions: NDArray[np.floating],
    G: float,
    dt: float,
    min_separation: float,
) -> Tuple[NDArray[np.floating], int]:

    m = np.asarray(masses, dtype=float)
    q = np.asarray(positions, dtype=float)

    dv = np.zeros_like(q, dtype=float)
    if q.shape[0] < 2 or float(G) == 0.0:
        return dv, 0

    iu, ju, delta, raw = pair_geometry(q)

    valid = raw > 0.0
    skipped = int(np.count_nonzero(~valid))
    if skipped:
        logger.debug("skipping %d coincident pair(s)", skipped)

    iu, ju, delta, raw = iu[valid], ju[valid], delta[valid], raw[valid]
    dist = np.maximum(raw, float(min_separation))
    direction = delta / raw[:, None]

    force = float(G) * (m[iu] * m[ju]) / (dist * dist)

    np.add.at(dv, iu, direction * (force / m[iu] * dt)[:, None])
    np.add.at(dv, ju, -direction * (force / m[ju] * dt)[:, None])
    return dv, skipped
