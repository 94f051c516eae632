"""
This module implements TimeScaleControl, the one runtime-mutable parameter of a running
simulation.

The control wraps a single float multiplier behind a lock so that an operator thread can
push new values while the simulation thread reads it. The integrator calls get exactly
once at the start of every tick, which gives each tick a single consistent value even if
an update lands mid-tick. Values are validated on write: non-finite and non-positive
multipliers are rejected with InvalidArgument rather than being allowed to corrupt the
integration. Listeners registered with subscribe are notified after each accepted change,
outside the lock; a listener that raises is logged and the remaining listeners still run.
"""

from __future__ import annotations
import logging
import math
import threading
from typing import Callable, List

from .constants import DEFAULT_TIME_SCALE
from .errors import InvalidArgument


logger = logging.getLogger(__name__)


def _checked(value: float) -> float:
	try:
		v = float(value)
	except (TypeError, ValueError) as exc:
		raise InvalidArgument(f"time scale must be a number, got {value!r}") from exc
	if not math.isfinite(v) or v <= 0.0:
		raise InvalidArgument(f"time scale must be a positive finite number, got {value!r}")
	return v


class TimeScaleControl:

	def __init__(self, value: float = DEFAULT_TIME_SCALE) -> None:
		self._value = _checked(value)
		self._lock = threading.Lock()
		self._listeners: List[Callable[[float], None]] = []

	def get(self) -> float:
		with self._lock:
			return self._value

	def set(self, value: float) -> None:
		v = _checked(value)
		with self._lock:
			old = self._value
			self._value = v
			listeners = list(self._listeners)
		logger.info("time scale changed from %s to %s", old, v)
		for callback in listeners:
			try:
				callback(v)
			except Exception:
				logger.warning("time scale listener %r failed", callback, exc_info=True)

	def subscribe(self, callback: Callable[[float], None]) -> None:
		with self._lock:
			self._listeners.append(callback)

	def __float__(self) -> float:
		return self.get()

	def __repr__(self) -> str:
		return f"TimeScaleControl({self.get()})"
