"""
Circular arc path generator.
"""

import logging

import numpy as np

from cartraj.utils.errors import DegenerateDirection

from .base import ParamLike, PathGeometry, as_param, finish
from .vectors import Vector3Like, as_vector3, signed_angle, unit

logger = logging.getLogger(__name__)


class CircularArc(PathGeometry):
    """
    Arc about `center` from p_i towards p_f, parameterised by arc length.

    The arc lives in the local frame R = [e_x | e_y | e_z]:
        e_x = (p_i - c) / rho
        e_z = r / |r|,  r = (c - p_f) x (c - p_i)
        e_y = e_x x e_z
    and p(s) = c + R @ [rho cos(s/rho), rho sin(s/rho), 0].

    |p_f - c| == rho is assumed, not checked.
    """

    def __init__(self, p_initial: Vector3Like, p_final: Vector3Like, center: Vector3Like):
        self.p_initial = as_vector3(p_initial)
        self.p_final = as_vector3(p_final)
        self.center = as_vector3(center)

        radial = self.p_initial - self.center
        self.radius = float(np.linalg.norm(radial))
        e_x = unit(radial)
        if e_x is None:
            raise DegenerateDirection(f"p_i coincides with the arc center {self.center.tolist()}")

        x = self.center - self.p_final
        y = self.center - self.p_initial
        self.axis_vector = np.cross(x, y)
        e_z = unit(self.axis_vector)
        if e_z is None:
            raise DegenerateDirection(
                "p_i, p_f and center are collinear, arc plane is undefined"
            )
        e_y = np.cross(e_x, e_z)

        self.frame = np.column_stack([e_x, e_y, e_z])
        self.arc_angle = signed_angle(x, y, self.axis_vector)
        self.arc_length = self.radius * self.arc_angle
        logger.debug(
            f"Arc about {self.center.tolist()}: rho={self.radius:.6g}, "
            f"angle={self.arc_angle:.6g} rad, length={self.arc_length:.6g}"
        )

    @property
    def length(self) -> float:
        return self.arc_length

    def _local(self, s: ParamLike):
        arr, scalar = as_param(s)
        theta = arr / self.radius
        return np.cos(theta), np.sin(theta), scalar

    def position(self, s: ParamLike) -> np.ndarray:
        cos_t, sin_t, scalar = self._local(s)
        p_prime = np.vstack([self.radius * cos_t, self.radius * sin_t, np.zeros_like(cos_t)])
        return finish(self.center[:, None] + self.frame @ p_prime, scalar)

    def velocity(self, s: ParamLike) -> np.ndarray:
        cos_t, sin_t, scalar = self._local(s)
        tangent = np.vstack([-sin_t, cos_t, np.zeros_like(cos_t)])
        return finish(self.frame @ tangent, scalar)

    def acceleration(self, s: ParamLike) -> np.ndarray:
        cos_t, sin_t, scalar = self._local(s)
        curvature = np.vstack([-cos_t, -sin_t, np.zeros_like(cos_t)]) / self.radius
        return finish(self.frame @ curvature, scalar)
