"""
Pytest configuration and shared fixtures for cartraj tests.

Provides the reference motions used across the suite and custom markers.
"""

import os
import sys
import logging
from dataclasses import dataclass

import numpy as np
import pytest

# Add the parent directory to Python path so we can import the package
sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

logger = logging.getLogger(__name__)


@dataclass
class ReferenceMotion:
    """Inputs for one end-to-end trajectory request."""
    p_initial: np.ndarray
    p_final: np.ndarray
    phi_initial: np.ndarray
    phi_final: np.ndarray
    ti: float = 0.0
    tf: float = 2.0
    Ts: float = 0.1

    def args(self):
        return (self.p_initial, self.p_final, self.phi_initial, self.phi_final, self.ti, self.tf, self.Ts)


# ============================================================================
# MOTION FIXTURES
# ============================================================================

@pytest.fixture
def pick_motion() -> ReferenceMotion:
    """Straight approach move with a full orientation change."""
    return ReferenceMotion(
        p_initial=np.array([0.491, -0.008, 1.134]),
        p_final=np.array([0.543, -0.464, 0.574]),
        phi_initial=np.array([3.073289, 0.6506525, -1.4879759]),
        phi_final=np.array([0.4884818, 1.4777122, -2.0672861]),
    )


@pytest.fixture
def quarter_arc():
    """Quarter circle of radius 2 in the XY plane about (1, 1, 0)."""
    center = np.array([1.0, 1.0, 0.0])
    p_initial = center + np.array([2.0, 0.0, 0.0])
    p_final = center + np.array([0.0, 2.0, 0.0])
    return p_initial, p_final, center


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests that test individual components in isolation"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests that exercise the command-line driver"
    )
