"""
This module defines the single error type raised by the package.

InvalidArgument is raised wherever caller-supplied values are checked: initial
condition generation, configuration validation, time scale updates and clock
input. It subclasses ValueError so callers that already guard numeric input
with ValueError keep working. Per-tick arithmetic never raises it.
"""


class InvalidArgument(ValueError):
	pass


__all__ = ["InvalidArgument"]
