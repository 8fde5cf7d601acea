"""
Base path geometry.

A path is a time-free curve p(s) in 3D parameterised by arc length s. Derived
generators provide p(s), dp/ds and d2p/ds2; timing is applied elsewhere.
"""

import logging
import math
from dataclasses import dataclass
from typing import Union

import numpy as np

from cartraj.utils.errors import InvalidSamplePeriod

logger = logging.getLogger(__name__)

ParamLike = Union[float, np.ndarray]


@dataclass(frozen=True)
class PathSamples:
    """
    Sampled 3-row trajectory.

    `param` holds the sample abscissa: arc length for untimed paths, time for
    timed ones. position, velocity and acceleration have shape (3, N).
    """

    param: np.ndarray
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray

    def __len__(self) -> int:
        return len(self.param)


class PathGeometry:
    """Base class for arc-length parameterised paths"""

    @property
    def length(self) -> float:
        raise NotImplementedError

    def position(self, s: ParamLike) -> np.ndarray:
        raise NotImplementedError

    def velocity(self, s: ParamLike) -> np.ndarray:
        """First derivative with respect to s."""
        raise NotImplementedError

    def acceleration(self, s: ParamLike) -> np.ndarray:
        """Second derivative with respect to s."""
        raise NotImplementedError

    def sample_count(self, ds: float) -> int:
        """Number of samples s_k = k*ds strictly inside the path length."""
        if not math.isfinite(ds) or ds <= 0:
            raise InvalidSamplePeriod(f"ds must be positive, got ds={ds}")
        return int(math.floor(self.length / ds))

    def sample(self, ds: float) -> PathSamples:
        """
        Sample the path without a timing law, at s_k = k*ds.

        The final point s = length is not included, matching the time grid.
        """
        n = self.sample_count(ds)
        s = np.arange(max(n, 0), dtype=float) * ds
        logger.debug(f"{type(self).__name__}: {n} untimed samples with ds={ds}")
        return PathSamples(
            param=s,
            position=self.position(s),
            velocity=self.velocity(s),
            acceleration=self.acceleration(s),
        )


def as_param(s: ParamLike) -> tuple[np.ndarray, bool]:
    """Return (s as 1-D float array, whether the input was scalar)."""
    arr = np.asarray(s, dtype=float)
    return np.atleast_1d(arr), arr.ndim == 0


def finish(values: np.ndarray, scalar: bool) -> np.ndarray:
    """Collapse a (3, 1) result back to (3,) for scalar inputs."""
    return values[:, 0] if scalar else values
