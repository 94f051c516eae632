from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the pair geometry kernel shared by the vectorized force pass and the diagnostics. The pair_geometry function enumerates every unordered pair (i, j) with i < j in ascending order, and returns the index arrays together with the separation vectors b - a and their lengths, using Einstein summation notation for the squared norms. Self-pairs never appear, so no diagonal masking is required. It assumes (N, 3) position arrays.

"""




__all__ = ["pair_indices", "pair_geometry"]


def pair_indices(n: int) -> Tuple[np.ndarray, np.ndarray]:
    return np.triu_indices(int(n), 1)


def pair_geometry(
    pos: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=float)

    iu, ju = pair_indices(pos.shape[0])
    delta = pos[ju] - pos[iu]
    r2 = np.einsum("ij,ij->i", delta, delta, optimize=True)
    return iu, ju, delta, np.sqrt(r2)
