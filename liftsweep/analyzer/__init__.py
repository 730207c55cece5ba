"""
Elevator run analyzer

Components:
- EventRecorder: records broker traffic, service times and the car trajectory
"""

from .event_recorder import EventRecorder

__all__ = ['EventRecorder']
