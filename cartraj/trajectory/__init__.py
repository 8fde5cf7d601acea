from .assembler import SixDofChannel, TrajectoryAssembler, TrajectorySample
from .orientation import FrenetFrame, frame_angles, frenet_angles, frenet_frame, interpolate_angles
from .timed import apply_time_scaling, circular_with_timing, linear_with_timing, timed_path

__all__ = [
    "TrajectoryAssembler",
    "TrajectorySample",
    "SixDofChannel",
    "FrenetFrame",
    "frame_angles",
    "frenet_frame",
    "frenet_angles",
    "interpolate_angles",
    "apply_time_scaling",
    "timed_path",
    "linear_with_timing",
    "circular_with_timing",
]
