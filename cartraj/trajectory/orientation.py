"""
End-effector orientation as a 3-parameter angle vector.

Two pieces:
- Frenet frame extraction at the ends of a path, turned into angle vectors.
- Straight-line interpolation between two angle vectors under the quintic
  timing law (not SLERP).

The angle vector is read from the frame matrix R = [t | b | n] as

    phi1 = atan2(sqrt(R02^2 + R12^2), R22)
    phi2 = atan2(R12, R02)
    phi3 = atan2(R21, -R20)

It is not a named Euler convention and there is no inverse. Note that with
b = t x n the frame [t | b | n] is left-handed.
"""

import logging
from dataclasses import dataclass

import numpy as np

from cartraj.geometry import LinePath, PathSamples
from cartraj.geometry.vectors import Vector3Like, as_vector3, unit
from cartraj.utils.errors import DegenerateDirection

from .timed import timed_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrenetFrame:
    tangent: np.ndarray
    normal: np.ndarray
    binormal: np.ndarray

    @property
    def matrix(self) -> np.ndarray:
        """Frame matrix with columns [t | b | n]."""
        return np.column_stack([self.tangent, self.binormal, self.normal])

    def angles(self) -> np.ndarray:
        return frame_angles(self.matrix)


def frame_angles(R: np.ndarray) -> np.ndarray:
    """Angle vector (phi1, phi2, phi3) of a 3x3 frame matrix."""
    R = np.asarray(R, dtype=float)
    if R.shape != (3, 3):
        raise ValueError(f"frame matrix must be 3x3, got shape {R.shape}")
    return np.array(
        [
            np.arctan2(np.sqrt(R[0, 2] ** 2 + R[1, 2] ** 2), R[2, 2]),
            np.arctan2(R[1, 2], R[0, 2]),
            np.arctan2(R[2, 1], -R[2, 0]),
        ]
    )


def frenet_frame(velocity: Vector3Like, acceleration: Vector3Like) -> FrenetFrame:
    """
    Frenet frame from a path's first and second derivative at one point.

    Raises DegenerateDirection when either derivative vanishes, e.g. at a
    point of zero speed or anywhere on a straight line.
    """
    t = unit(as_vector3(velocity))
    if t is None:
        raise DegenerateDirection("zero velocity, tangent is undefined")
    n = unit(as_vector3(acceleration))
    if n is None:
        raise DegenerateDirection("zero acceleration, normal is undefined")
    return FrenetFrame(tangent=np.asarray(t), normal=np.asarray(n), binormal=np.cross(t, n))


def frenet_angles(velocity: np.ndarray, acceleration: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    """
    Angle vectors at the first and last samples of a path.

    Args:
        velocity: (3, N) first derivatives
        acceleration: (3, N) second derivatives

    Returns:
        (phi_initial, phi_final)
    """
    velocity = np.asarray(velocity, dtype=float)
    acceleration = np.asarray(acceleration, dtype=float)
    if velocity.ndim != 2 or velocity.shape[0] != 3 or velocity.shape[1] == 0:
        raise ValueError(f"velocity must have shape (3, N) with N > 0, got {velocity.shape}")
    if acceleration.shape != velocity.shape:
        raise ValueError(
            f"acceleration shape {acceleration.shape} does not match velocity {velocity.shape}"
        )

    phis = []
    for index in (0, velocity.shape[1] - 1):
        frame = frenet_frame(velocity[:, index], acceleration[:, index])
        phis.append(frame.angles())
    logger.debug(f"Frenet angles: phi_i={phis[0].tolist()}, phi_f={phis[1].tolist()}")
    return phis[0], phis[1]


def interpolate_angles(
    phi_initial: Vector3Like, phi_final: Vector3Like, ti: float, tf: float, Ts: float
) -> PathSamples:
    """
    Move the angle vector from phi_i to phi_f along a straight line with
    quintic timing. Equal endpoints give a constant orientation with zero
    derivatives.
    """
    path = LinePath(phi_initial, phi_final)
    if path.is_degenerate:
        logger.debug(f"Orientation held constant at {path.p_initial.tolist()}")
    return timed_path(path, ti, tf, Ts)
