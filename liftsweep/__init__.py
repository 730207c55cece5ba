"""
liftsweep - Single-car sweep elevator simulator

This package provides the call registry and motion scheduler of a
single-car elevator, driven by SimPy, plus the presentation ports,
configuration and event recorder around them.
"""

__version__ = "0.1.0"

from .core.direction import Direction
from .core.errors import CallRejected, InvalidFloor, InvalidDirection
from .core.state import FloorRange, CarState, ElevatorState
from .core.call_registry import CallRegistry
from .core.motion_scheduler import MotionScheduler

from .interfaces.presentation_port import IPresentationPort, NullPresentationPort

from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment

__all__ = [
    'Direction',
    'CallRejected',
    'InvalidFloor',
    'InvalidDirection',
    'FloorRange',
    'CarState',
    'ElevatorState',
    'CallRegistry',
    'MotionScheduler',
    'IPresentationPort',
    'NullPresentationPort',
    'MessageBroker',
    'RealtimeEnvironment',
]
