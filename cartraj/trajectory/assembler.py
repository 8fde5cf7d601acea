"""
6-DOF trajectory assembly.

Combines a timed Cartesian path with an interpolated angle vector into
position, velocity and acceleration channels sampled on ti + k*Ts.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

import numpy as np

from cartraj.geometry import CircularArc, LinePath, PathSamples
from cartraj.geometry.vectors import Vector3Like, as_vector3
from cartraj.timing import time_grid
from cartraj.utils.errors import SampleIndexOutOfRange

from .orientation import frenet_angles, interpolate_angles
from .timed import circular_with_timing, timed_path

logger = logging.getLogger(__name__)


def _read_only(a: np.ndarray) -> np.ndarray:
    a = np.array(a, dtype=float)
    a.flags.writeable = False
    return a


@dataclass(frozen=True)
class SixDofChannel:
    """
    One derivative order of a 6-DOF trajectory.

    `cartesian` is rows 0-2 (x, y, z) and `angles` is rows 3-5
    (phi1, phi2, phi3), both of shape (3, N).
    """

    cartesian: np.ndarray
    angles: np.ndarray

    def as_matrix(self) -> np.ndarray:
        """Stacked (6, N) matrix."""
        return np.vstack([self.cartesian, self.angles])

    def at(self, k: int) -> np.ndarray:
        return np.concatenate([self.cartesian[:, k], self.angles[:, k]])


@dataclass(frozen=True)
class TrajectorySample:
    index: int
    time: float
    position: np.ndarray
    velocity: np.ndarray
    acceleration: np.ndarray


class TrajectoryAssembler:
    """
    End-effector trajectory from (p_i, phi_i) at ti to (p_f, phi_f) at tf.

    The Cartesian rows follow a straight line, or an arc when `center` is
    given; the angle rows interpolate phi_i -> phi_f. Both use a rest-to-rest
    quintic timing law sampled every Ts seconds on [ti, tf).

    All buffers are computed in the constructor and are read-only.
    """

    def __init__(
        self,
        p_initial: Vector3Like,
        p_final: Vector3Like,
        phi_initial: Vector3Like,
        phi_final: Vector3Like,
        ti: float,
        tf: float,
        Ts: float,
        center: Optional[Vector3Like] = None,
    ):
        """
        Args:
            p_initial: Initial position [x, y, z]
            p_final: Final position [x, y, z]
            phi_initial: Initial angle vector [phi1, phi2, phi3]
            phi_final: Final angle vector [phi1, phi2, phi3]
            ti: Start time (s)
            tf: End time (s), must be > ti
            Ts: Sample period (s), must be > 0
            center: Optional arc center; straight line when None
        """
        self.p_initial = as_vector3(p_initial)
        self.p_final = as_vector3(p_final)
        self.phi_initial = as_vector3(phi_initial)
        self.phi_final = as_vector3(phi_final)
        self.center = None if center is None else as_vector3(center)
        self.ti = float(ti)
        self.tf = float(tf)
        self.Ts = float(Ts)

        self._time = _read_only(time_grid(self.ti, self.tf, self.Ts))
        self._length = len(self._time)

        if self.center is None:
            line = LinePath(self.p_initial, self.p_final)
            if line.is_degenerate:
                logger.warning(
                    f"Initial and final positions coincide at {self.p_initial.tolist()}; "
                    "Cartesian motion is constant"
                )
            cartesian = timed_path(line, self.ti, self.tf, self.Ts)
        else:
            cartesian = circular_with_timing(
                self.p_initial, self.p_final, self.center, self.ti, self.tf, self.Ts
            )
        angles = interpolate_angles(self.phi_initial, self.phi_final, self.ti, self.tf, self.Ts)
        self._check_lengths(cartesian, angles)

        self.positions = SixDofChannel(_read_only(cartesian.position), _read_only(angles.position))
        self.velocities = SixDofChannel(_read_only(cartesian.velocity), _read_only(angles.velocity))
        self.accelerations = SixDofChannel(
            _read_only(cartesian.acceleration), _read_only(angles.acceleration)
        )
        logger.debug(
            f"Assembled {'arc' if self.center is not None else 'line'} trajectory: "
            f"{self._length} samples on [{self.ti}, {self.tf}) with Ts={self.Ts}"
        )

    @classmethod
    def from_frenet(
        cls,
        p_initial: Vector3Like,
        p_final: Vector3Like,
        center: Vector3Like,
        ti: float,
        tf: float,
        Ts: float,
    ) -> "TrajectoryAssembler":
        """
        Arc trajectory whose end orientations come from the path shape.

        phi_i and phi_f are the angle vectors of the Frenet frames at the first
        and last samples of the untimed arc, sampled with ds = Ts.
        """
        arc = CircularArc(p_initial, p_final, center)
        samples = arc.sample(Ts)
        if len(samples) == 0:
            # arc shorter than Ts, use the exact end points
            s = np.array([0.0, arc.length])
            samples = PathSamples(s, arc.position(s), arc.velocity(s), arc.acceleration(s))
        phi_initial, phi_final = frenet_angles(samples.velocity, samples.acceleration)
        return cls(p_initial, p_final, phi_initial, phi_final, ti, tf, Ts, center=center)

    def _check_lengths(self, *parts: PathSamples) -> None:
        for part in parts:
            if len(part) != self._length:
                raise RuntimeError(
                    f"generator produced {len(part)} samples, expected {self._length}"
                )

    @property
    def sample_count(self) -> int:
        return self._length

    def __len__(self) -> int:
        return self._length

    @property
    def time(self) -> np.ndarray:
        return self._time

    def _index(self, k: int) -> int:
        if not 0 <= k < self._length:
            raise SampleIndexOutOfRange(k, self._length)
        return int(k)

    def position(self, k: int) -> np.ndarray:
        """Pose [x, y, z, phi1, phi2, phi3] at sample k."""
        return self.positions.at(self._index(k))

    def velocity(self, k: int) -> np.ndarray:
        return self.velocities.at(self._index(k))

    def acceleration(self, k: int) -> np.ndarray:
        return self.accelerations.at(self._index(k))

    def sample(self, k: int) -> TrajectorySample:
        k = self._index(k)
        return TrajectorySample(
            index=k,
            time=float(self._time[k]),
            position=self.positions.at(k),
            velocity=self.velocities.at(k),
            acceleration=self.accelerations.at(k),
        )

    def iter_samples(self) -> Iterator[TrajectorySample]:
        """Yield samples in time order, one at a time."""
        for k in range(self._length):
            yield self.sample(k)

