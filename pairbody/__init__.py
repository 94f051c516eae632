"""
This initialization file serves as the main entry point for the N-body simulation
package, exposing all public APIs through a clean namespace.

It imports and re-exports the data model (Body, SimulationState), configuration
(SimConfig and the named default constants), the initial condition generator, the
pairwise force model, the Integrator, the TimeScaleControl, the rendering sinks,
diagnostics and validation utilities, and the NBodySimulation facade that a host
application drives from its per-frame clock. A NullHandler is attached to the package
logger so the library stays silent unless the host configures logging.
"""

import logging

from .errors import InvalidArgument
from .constants import (
	GRAVITATIONAL_CONSTANT,
	BODY_COUNT,
	BODY_RADIUS,
	MIN_SEPARATION,
	MIN_EXTENTS,
	MAX_EXTENTS,
	RANDOM_VELOCITY_RANGE,
	DEFAULT_TIME_SCALE,
	MASS_CHOICES,
)
from .sim_config import SimConfig
from .body import Body
from .simulation_state import SimulationState
from .time_scale import TimeScaleControl
from .simulation_validator import SimulationValidator

from .forces import apply_gravity, force_magnitude, pairwise_velocity_deltas
from .geometry_cache import pair_geometry
from .physics_utils import center_of_mass, remove_center_of_mass_velocity
from .initial_condition_generator import (
	InitialConditionGenerator,
	GeneratorConfig,
	initialize,
)
from .integrator import Integrator
from .sinks import RenderSink, NullSink, TrajectoryRecorder, publish_positions
from .diagnostics import Diagnostics
from .simulation import NBodySimulation, fixed_clock


logging.getLogger(__name__).addHandler(logging.NullHandler())


__all__ = [
	"InvalidArgument",
	"GRAVITATIONAL_CONSTANT",
	"BODY_COUNT",
	"BODY_RADIUS",
	"MIN_SEPARATION",
	"MIN_EXTENTS",
	"MAX_EXTENTS",
	"RANDOM_VELOCITY_RANGE",
	"DEFAULT_TIME_SCALE",
	"MASS_CHOICES",
	"SimConfig",
	"Body",
	"SimulationState",
	"TimeScaleControl",
	"SimulationValidator",
	"apply_gravity",
	"force_magnitude",
	"pairwise_velocity_deltas",
	"pair_geometry",
	"center_of_mass",
	"remove_center_of_mass_velocity",
	"InitialConditionGenerator",
	"GeneratorConfig",
	"initialize",
	"Integrator",
	"RenderSink",
	"NullSink",
	"TrajectoryRecorder",
	"publish_positions",
	"Diagnostics",
	"NBodySimulation",
	"fixed_clock",
]
