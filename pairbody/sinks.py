"""
This module defines the rendering sink contract and the sinks shipped with the package.

A sink is any object with a publish(body_id, position) method; it may also define
flush(tick), which is called once after every body of a tick has been published. The
simulation core never imports a renderer: a sink owns whatever mapping from body index to
visual handle it needs. Delivery is fire-and-forget, so publish_positions logs and
swallows any exception a sink raises and the tick still completes. NullSink discards
everything and TrajectoryRecorder keeps every published position and exposes the
trajectory as a pandas DataFrame with one row per body per tick.
"""

from __future__ import annotations
import logging
from collections import deque
from typing import Deque, List, Optional, Protocol, Sequence, Tuple, TYPE_CHECKING, runtime_checkable

import numpy as np
import pandas as pd

if TYPE_CHECKING:
    from .body import Body


logger = logging.getLogger(__name__)


TRAJECTORY_COLUMNS = ["tick", "body", "x", "y", "z"]


@runtime_checkable
class RenderSink(Protocol):
    def publish(self, body_id: int, position: np.ndarray) -> None:
        ...


class NullSink:
    def publish(self, body_id: int, position: np.ndarray) -> None:
        return None


class TrajectoryRecorder:
    """Records every published position, grouped by the tick passed to flush."""

    def __init__(self, max_ticks: Optional[int] = None) -> None:
        self.max_ticks = max_ticks
        self._pending: List[Tuple[int, float, float, float]] = []
        self._frames: Deque[List[Tuple[int, int, float, float, float]]] = deque(maxlen=max_ticks)

    def publish(self, body_id: int, position: np.ndarray) -> None:
        x, y, z = (float(c) for c in position)
        self._pending.append((int(body_id), x, y, z))

    def flush(self, tick: int) -> None:
        t = int(tick)
        self._frames.append([(t,) + row for row in self._pending])
        self._pending = []

    @property
    def ticks_recorded(self) -> int:
        return len(self._frames)

    def to_frame(self) -> pd.DataFrame:
        rows = [row for frame in self._frames for row in frame]
        return pd.DataFrame(rows, columns=TRAJECTORY_COLUMNS)

    def positions_of(self, body_id: int) -> np.ndarray:
        df = self.to_frame()
        rows = df[df["body"] == int(body_id)].sort_values("tick")
        return rows[["x", "y", "z"]].to_numpy(dtype=float)


def publish_positions(sink, bodies: Sequence["Body"], tick: int) -> int:
    failures = 0
    for i, b in enumerate(bodies):
        try:
            sink.publish(i, b.position.copy())
        except Exception:
            failures += 1
            logger.warning("sink %r failed to publish body %d", sink, i, exc_info=True)

    flush = getattr(sink, "flush", None)
    if flush is not None:
        try:
            flush(tick)
        except Exception:
            failures += 1
            logger.warning("sink %r failed to flush tick %d", sink, tick, exc_info=True)
    return failures
