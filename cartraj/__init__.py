"""
cartraj Python Package

Time-parameterized Cartesian trajectories for a robot end-effector moving
between two poses.

Key components:
- QuinticTimeScaling: fifth-order time-scaling law between boundary conditions
- LinePath / CircularArc: time-free path geometry
- linear_with_timing / circular_with_timing: paths under the timing law
- interpolate_angles / frenet_angles: angle-vector orientation
- TrajectoryAssembler: 6-DOF position/velocity/acceleration channels
"""

from . import config
from ._version import __version__
from .geometry import CircularArc, LinePath, PathSamples
from .timing import QuinticTimeScaling, TimeScalingProfile
from .trajectory import (
    SixDofChannel,
    TrajectoryAssembler,
    TrajectorySample,
    circular_with_timing,
    frenet_angles,
    interpolate_angles,
    linear_with_timing,
)
from .utils.errors import (
    DegenerateDirection,
    InvalidSamplePeriod,
    InvalidTimeWindow,
    SampleIndexOutOfRange,
    SingularBoundaryMatrix,
    TrajectoryError,
)

__all__ = [
    "__version__",
    "config",
    "QuinticTimeScaling",
    "TimeScalingProfile",
    "LinePath",
    "CircularArc",
    "PathSamples",
    "linear_with_timing",
    "circular_with_timing",
    "interpolate_angles",
    "frenet_angles",
    "TrajectoryAssembler",
    "TrajectorySample",
    "SixDofChannel",
    "TrajectoryError",
    "InvalidTimeWindow",
    "InvalidSamplePeriod",
    "SingularBoundaryMatrix",
    "DegenerateDirection",
    "SampleIndexOutOfRange",
]
