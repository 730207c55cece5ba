"""Core elevator entities"""

from .entity import Entity
from .direction import Direction
from .state import FloorRange, CarState, ElevatorState
from .call_registry import CallRegistry
from .motion_scheduler import MotionScheduler

__all__ = [
    'Entity',
    'Direction',
    'FloorRange',
    'CarState',
    'ElevatorState',
    'CallRegistry',
    'MotionScheduler',
]
