"""
Central configuration for cartraj tunables and shared constants.
"""

import logging
import os

TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")
# Add Logger.trace if missing
if not hasattr(logging.Logger, "trace"):

    def _trace(self, msg, *args, **kwargs):
        if self.isEnabledFor(TRACE):
            self._log(TRACE, msg, args, **kwargs)

    logging.Logger.trace = _trace  # type: ignore[attr-defined]
    logging.TRACE = TRACE  # type: ignore[attr-defined]

TRACE_ENABLED = str(os.getenv("CARTRAJ_TRACE", "0")).lower() in ("1", "true", "yes", "on")

logger = logging.getLogger(__name__)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring non-numeric {name}={raw!r}, using {default}")
        return default


# Default sampling period of the trajectory grid (seconds)
DEFAULT_SAMPLE_PERIOD_S: float = _env_float("CARTRAJ_SAMPLE_PERIOD_S", 0.1)

# Tolerance used when checking quintic boundary conditions
BOUNDARY_TOL: float = _env_float("CARTRAJ_BOUNDARY_TOL", 1e-9)

# Log level of the CLI when no -v/-q/--log-level is given
LOG_LEVEL_DEFAULT: str = "WARNING"

# Demo motion (metres / angle-vector radians) used as CLI defaults
DEMO_T_INITIAL_S: float = 0.0
DEMO_T_FINAL_S: float = 2.0
DEMO_P_INITIAL: tuple[float, float, float] = (0.491, -0.008, 1.134)
DEMO_P_FINAL: tuple[float, float, float] = (0.543, -0.464, 0.574)
DEMO_PHI_INITIAL: tuple[float, float, float] = (3.073289, 0.6506525, -1.4879759)
DEMO_PHI_FINAL: tuple[float, float, float] = (0.4884818, 1.4777122, -2.0672861)
