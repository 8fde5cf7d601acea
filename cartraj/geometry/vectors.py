"""
Small 3-vector helpers shared by the path generators.
"""

from collections.abc import Sequence
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray
import spatialmath.base as smb

Vector3Like = Union[Sequence[float], NDArray]


def as_vector3(v: Vector3Like) -> np.ndarray:
    """Return v as a float array of shape (3,); raises ValueError otherwise."""
    return np.array(smb.getvector(v, 3), dtype=float)


def unit(v: np.ndarray) -> Optional[np.ndarray]:
    """Unit vector along v, or None when v is (numerically) zero."""
    return smb.unitvec(v)


def unit_or_zero(v: np.ndarray) -> np.ndarray:
    """Unit vector along v, or the zero vector when v has no direction."""
    u = smb.unitvec(v)
    return np.zeros(3) if u is None else np.asarray(u, dtype=float)


def is_zero(v: np.ndarray) -> bool:
    return bool(smb.iszerovec(v))


def sign(x: float) -> float:
    if x > 0:
        return 1.0
    if x == 0:
        return 0.0
    return -1.0


def signed_angle(v1: np.ndarray, v2: np.ndarray, normal: np.ndarray) -> float:
    """
    Angle from v1 to v2, signed by the side of `normal` the rotation lies on.

    atan2(sign((v1 x v2) . normal) * |v1 x v2|, v1 . v2)
    """
    xprod = np.cross(v1, v2)
    s = sign(float(np.dot(xprod, normal)))
    return float(np.arctan2(s * np.linalg.norm(xprod), np.dot(v1, v2)))
