"""
Quintic polynomial time-scaling.

Maps time onto a scalar path parameter s(t) so that position, velocity and
acceleration match prescribed values at both ends of [ti, tf].
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Union

import numpy as np
import scipy.linalg

from cartraj.config import BOUNDARY_TOL
from cartraj.utils.errors import InvalidSamplePeriod, InvalidTimeWindow, SingularBoundaryMatrix

logger = logging.getLogger(__name__)

ArrayOrFloat = Union[float, np.ndarray]


def sample_count(ti: float, tf: float, Ts: float) -> int:
    """Number of samples on the half-open grid [ti, tf) with period Ts."""
    if not math.isfinite(Ts) or Ts <= 0:
        raise InvalidSamplePeriod(f"Ts must be positive, got Ts={Ts}")
    if not (math.isfinite(ti) and math.isfinite(tf)):
        raise InvalidTimeWindow(f"times must be finite, got ti={ti}, tf={tf}")
    return int(math.floor((tf - ti) / Ts))


def time_grid(ti: float, tf: float, Ts: float) -> np.ndarray:
    """
    Sample times ti + k*Ts for k in [0, length).

    tf itself is never sampled. Raises InvalidTimeWindow when the grid is empty.
    """
    length = sample_count(ti, tf, Ts)
    if length <= 0:
        raise InvalidTimeWindow(
            f"no samples between ti={ti} and tf={tf} with Ts={Ts} (length={length})"
        )
    return ti + np.arange(length, dtype=float) * Ts


@dataclass(frozen=True)
class TimeScalingProfile:
    """Sampled s(t), s'(t), s''(t) on a time grid."""

    time: np.ndarray
    s: np.ndarray
    sd: np.ndarray
    sdd: np.ndarray

    def __len__(self) -> int:
        return len(self.time)


def _horner(coeffs: np.ndarray, t: ArrayOrFloat) -> ArrayOrFloat:
    result = coeffs[-1] * np.ones_like(t, dtype=float) if isinstance(t, np.ndarray) else coeffs[-1]
    for c in coeffs[-2::-1]:
        result = result * t + c
    return result


class QuinticTimeScaling:
    """
    Fifth-order polynomial s(t) = a0 + a1*t + ... + a5*t^5.

    Here t is measured from ti. The coefficients come from the 6x6 boundary
    system H*a = Q, with H built from the monomial rows and their first and
    second derivatives evaluated at 0 and tf - ti, and every evaluation shifts
    absolute time by ti before applying Horner.
    """

    def __init__(
        self,
        ti: float,
        tf: float,
        qi: float,
        qf: float,
        vi: float = 0.0,
        vf: float = 0.0,
        ai: float = 0.0,
        af: float = 0.0,
    ):
        """
        Args:
            ti: Initial time
            tf: Final time (must be > ti)
            qi: Initial value of the path parameter
            qf: Final value of the path parameter
            vi: Initial velocity (default 0)
            vf: Final velocity (default 0)
            ai: Initial acceleration (default 0)
            af: Final acceleration (default 0)
        """
        values = (ti, tf, qi, qf, vi, vf, ai, af)
        if not all(math.isfinite(v) for v in values):
            raise InvalidTimeWindow(f"boundary conditions must be finite, got {values}")
        if tf <= ti:
            raise InvalidTimeWindow(f"tf must be greater than ti, got ti={ti}, tf={tf}")

        self.ti = float(ti)
        self.tf = float(tf)
        self.boundary_conditions: Dict[str, float] = {
            "qi": float(qi),
            "vi": float(vi),
            "ai": float(ai),
            "qf": float(qf),
            "vf": float(vf),
            "af": float(af),
        }

        self.coeffs = self._solve_coefficients()
        self.vel_coeffs = self.coeffs[1:] * np.arange(1, 6)
        self.acc_coeffs = self.vel_coeffs[1:] * np.arange(1, 5)
        self.jerk_coeffs = self.acc_coeffs[1:] * np.arange(1, 4)
        logger.debug(
            f"Quintic on [{self.ti}, {self.tf}] from q={qi} to q={qf}: coeffs={self.coeffs.tolist()}"
        )

    @staticmethod
    def boundary_matrix(ti: float, tf: float) -> np.ndarray:
        """6x6 matrix H whose rows constrain q, q', q'' at ti then tf."""
        rows = []
        for t in (ti, tf):
            rows.append([1.0, t, t**2, t**3, t**4, t**5])
            rows.append([0.0, 1.0, 2 * t, 3 * t**2, 4 * t**3, 5 * t**4])
            rows.append([0.0, 0.0, 2.0, 6 * t, 12 * t**2, 20 * t**3])
        return np.array(rows, dtype=float)

    def _solve_coefficients(self) -> np.ndarray:
        bc = self.boundary_conditions
        H = self.boundary_matrix(0.0, self.tf - self.ti)
        Q = np.array([bc["qi"], bc["vi"], bc["ai"], bc["qf"], bc["vf"], bc["af"]])
        try:
            return scipy.linalg.solve(H, Q)
        except scipy.linalg.LinAlgError as e:
            raise SingularBoundaryMatrix(
                f"cannot solve boundary system over [0, {self.tf - self.ti}]: {e}"
            ) from e

    def _local(self, t: ArrayOrFloat) -> ArrayOrFloat:
        return t - self.ti

    def position(self, t: ArrayOrFloat) -> ArrayOrFloat:
        """Evaluate s at time t using Horner's method."""
        return _horner(self.coeffs, self._local(t))

    def velocity(self, t: ArrayOrFloat) -> ArrayOrFloat:
        """Evaluate s' at time t using Horner's method."""
        return _horner(self.vel_coeffs, self._local(t))

    def acceleration(self, t: ArrayOrFloat) -> ArrayOrFloat:
        """Evaluate s'' at time t using Horner's method."""
        return _horner(self.acc_coeffs, self._local(t))

    def jerk(self, t: ArrayOrFloat) -> ArrayOrFloat:
        """Evaluate s''' at time t using Horner's method."""
        return _horner(self.jerk_coeffs, self._local(t))

    def evaluate(self, t: ArrayOrFloat, derivative: int = 0) -> ArrayOrFloat:
        """
        Unified evaluation function for any derivative order.

        Args:
            t: Time point(s) to evaluate
            derivative: 0=position, 1=velocity, 2=acceleration, 3=jerk
        """
        if derivative == 0:
            return self.position(t)
        if derivative == 1:
            return self.velocity(t)
        if derivative == 2:
            return self.acceleration(t)
        if derivative == 3:
            return self.jerk(t)
        raise ValueError(f"Derivative order {derivative} not supported (max is 3)")

    def sample(self, Ts: float) -> TimeScalingProfile:
        """Sample s, s', s'' at ti + k*Ts for k in [0, floor((tf - ti) / Ts))."""
        t = time_grid(self.ti, self.tf, Ts)
        return TimeScalingProfile(
            time=t,
            s=self.position(t),
            sd=self.velocity(t),
            sdd=self.acceleration(t),
        )

    def validate_continuity(self, tolerance: float = BOUNDARY_TOL) -> Dict[str, bool]:
        """
        Validate that boundary conditions are satisfied.
        """
        bc = self.boundary_conditions
        return {
            "qi": bool(abs(self.position(self.ti) - bc["qi"]) < tolerance),
            "vi": bool(abs(self.velocity(self.ti) - bc["vi"]) < tolerance),
            "ai": bool(abs(self.acceleration(self.ti) - bc["ai"]) < tolerance),
            "qf": bool(abs(self.position(self.tf) - bc["qf"]) < tolerance),
            "vf": bool(abs(self.velocity(self.tf) - bc["vf"]) < tolerance),
            "af": bool(abs(self.acceleration(self.tf) - bc["af"]) < tolerance),
        }


def quintic_profile(ti: float, tf: float, qi: float, qf: float, Ts: float) -> TimeScalingProfile:
    """Rest-to-rest profile from qi to qf, sampled with period Ts."""
    return QuinticTimeScaling(ti, tf, qi, qf).sample(Ts)
