"""
Straight-line path generator.
"""

import logging

import numpy as np

from .base import ParamLike, PathGeometry, as_param, finish
from .vectors import Vector3Like, as_vector3, is_zero, unit_or_zero

logger = logging.getLogger(__name__)


class LinePath(PathGeometry):
    """
    Segment from p_i to p_f parameterised by travelled distance.

    p(s) = p_i + s * (p_f - p_i) / |p_f - p_i|

    When p_i == p_f the direction is the zero vector, so the path stays at
    p_i with zero derivatives.
    """

    def __init__(self, p_initial: Vector3Like, p_final: Vector3Like):
        self.p_initial = as_vector3(p_initial)
        self.p_final = as_vector3(p_final)
        support = self.p_final - self.p_initial
        self._length = float(np.linalg.norm(support))
        self.direction = unit_or_zero(support)
        if is_zero(self.direction):
            logger.debug(f"Degenerate line: p_i == p_f == {self.p_initial.tolist()}, path is constant")

    @property
    def length(self) -> float:
        return self._length

    @property
    def is_degenerate(self) -> bool:
        return is_zero(self.direction)

    def position(self, s: ParamLike) -> np.ndarray:
        arr, scalar = as_param(s)
        values = self.p_initial[:, None] + self.direction[:, None] * arr[None, :]
        return finish(values, scalar)

    def velocity(self, s: ParamLike) -> np.ndarray:
        arr, scalar = as_param(s)
        values = np.repeat(self.direction[:, None], len(arr), axis=1)
        return finish(values, scalar)

    def acceleration(self, s: ParamLike) -> np.ndarray:
        arr, scalar = as_param(s)
        return finish(np.zeros((3, len(arr))), scalar)
