"""
Shared fixtures for the liftsweep tests.

All tests drive a plain simpy.Environment; time is in milliseconds.
"""

import sys
from pathlib import Path

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import matplotlib
matplotlib.use("Agg")

import pytest
import simpy

from liftsweep.core.motion_scheduler import MotionScheduler
from liftsweep.core.state import FloorRange
from tests.helpers import RecordingPort


@pytest.fixture
def env():
    return simpy.Environment()


@pytest.fixture
def port(env):
    return RecordingPort(env)


@pytest.fixture
def make_scheduler(env, port):
    """Factory for a scheduler wired to the recording port"""
    def _make(bottom=0, top=2, movement=5000, stoppage=2000, broker=None):
        return MotionScheduler(
            env, "Car", FloorRange(bottom, top),
            movement_interval=movement, stoppage_interval=stoppage,
            port=port, broker=broker
        )
    return _make
