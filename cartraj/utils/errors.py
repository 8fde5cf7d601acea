"""
Custom exception types for the cartraj trajectory pipeline.
Keep this focused and non-redundant; prefer built-ins where appropriate.
"""


class TrajectoryError(RuntimeError):
    """Trajectory generation failure."""

    prefix = "Trajectory Error"

    def __init__(self, message: str):
        self.original_message = message
        super().__init__(f"{self.prefix}: {message}")

    def __str__(self):
        return f"{self.prefix}: {self.original_message}"


class InvalidTimeWindow(TrajectoryError, ValueError):
    """Final time not after initial time, or a sample grid with no samples."""

    prefix = "Invalid Time Window"


class InvalidSamplePeriod(TrajectoryError, ValueError):
    """Sampling period that is not a positive finite number."""

    prefix = "Invalid Sample Period"


class SingularBoundaryMatrix(TrajectoryError):
    """Quintic boundary matrix could not be solved."""

    prefix = "Singular Boundary Matrix"


class DegenerateDirection(TrajectoryError, ValueError):
    """Geometry whose direction, axis or frame is undefined."""

    prefix = "Degenerate Direction"


class SampleIndexOutOfRange(TrajectoryError, IndexError):
    """Sample index outside [0, sample_count)."""

    prefix = "Sample Index Out Of Range"

    def __init__(self, index: int, sample_count: int):
        self.index = index
        self.sample_count = sample_count
        super().__init__(f"index {index} not in [0, {sample_count})")
