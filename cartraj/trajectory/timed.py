"""
Timed path generators.

Composes the quintic time-scaling with a path geometry: the path parameter
follows s(t) from 0 to the path length with zero boundary velocity and
acceleration, and the Cartesian derivatives follow from the chain rule

    p_dot  = p'(s) * s_dot
    p_ddot = p''(s) * s_dot**2 + p'(s) * s_ddot
"""

import logging

from cartraj import config
from cartraj.geometry import CircularArc, LinePath, PathGeometry, PathSamples
from cartraj.geometry.vectors import Vector3Like
from cartraj.timing import QuinticTimeScaling, TimeScalingProfile

logger = logging.getLogger(__name__)


def path_time_scaling(path: PathGeometry, ti: float, tf: float) -> QuinticTimeScaling:
    """Rest-to-rest quintic taking s from 0 to the path length over [ti, tf]."""
    return QuinticTimeScaling(ti, tf, 0.0, path.length)


def apply_time_scaling(path: PathGeometry, profile: TimeScalingProfile) -> PathSamples:
    """Evaluate `path` along a sampled time-scaling profile."""
    dp = path.velocity(profile.s)
    ddp = path.acceleration(profile.s)
    samples = PathSamples(
        param=profile.time,
        position=path.position(profile.s),
        velocity=dp * profile.sd,
        acceleration=ddp * profile.sd**2 + dp * profile.sdd,
    )
    if config.TRACE_ENABLED:
        logger.trace(  # type: ignore[attr-defined]
            f"{type(path).__name__} timed over {len(profile)} samples, final s={profile.s[-1]:.6g}"
        )
    return samples


def timed_path(path: PathGeometry, ti: float, tf: float, Ts: float) -> PathSamples:
    """Sample `path` on the grid ti + k*Ts under the quintic timing law."""
    profile = path_time_scaling(path, ti, tf).sample(Ts)
    return apply_time_scaling(path, profile)


def linear_with_timing(
    p_initial: Vector3Like, p_final: Vector3Like, ti: float, tf: float, Ts: float
) -> PathSamples:
    """Straight segment p_i -> p_f with quintic timing."""
    return timed_path(LinePath(p_initial, p_final), ti, tf, Ts)


def circular_with_timing(
    p_initial: Vector3Like,
    p_final: Vector3Like,
    center: Vector3Like,
    ti: float,
    tf: float,
    Ts: float,
) -> PathSamples:
    """Arc about `center` from p_i to p_f with quintic timing."""
    return timed_path(CircularArc(p_initial, p_final, center), ti, tf, Ts)
