from .base import PathGeometry, PathSamples
from .circle import CircularArc
from .line import LinePath
from .vectors import signed_angle

__all__ = [
    "PathGeometry",
    "PathSamples",
    "LinePath",
    "CircularArc",
    "signed_angle",
]
