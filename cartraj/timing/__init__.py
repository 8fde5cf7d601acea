from .quintic import QuinticTimeScaling, TimeScalingProfile, quintic_profile, sample_count, time_grid

__all__ = [
    "QuinticTimeScaling",
    "TimeScalingProfile",
    "quintic_profile",
    "sample_count",
    "time_grid",
]
