import numpy as np
from typing import Tuple

"""
This module provides mass-weighted averaging helpers. center_of_mass returns the mass-weighted mean position and velocity of a set of bodies, and remove_center_of_mass_velocity subtracts the latter from every velocity so the system carries zero net momentum. Both handle a single body or zero total mass by returning the input unchanged. They assume (N,) mass arrays and (N, 3) vector arrays.


"""

def center_of_mass(
	masses: np.ndarray, positions: np.ndarray, velocities: np.ndarray
) -> Tuple[np.ndarray, np.ndarray]:
	m = np.asarray(masses, dtype=float)
	total_mass = float(np.sum(m))
	if total_mass == 0 or m.size == 0:
		return np.zeros(3), np.zeros(3)
	r_cm = np.sum(m[:, None] * positions, axis=0) / total_mass
	v_cm = np.sum(m[:, None] * velocities, axis=0) / total_mass
	return r_cm, v_cm


def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	if len(masses) == 1:
		return velocities.copy()
	total_mass = float(np.sum(masses))
	if total_mass == 0 or velocities.size == 0:
		return velocities.copy()
	v_cm = np.sum(masses[:, None] * velocities, axis=0) / total_mass
	return velocities - v_cm
