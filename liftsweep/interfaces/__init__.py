"""Interfaces between the elevator core and its environment"""

from .presentation_port import IPresentationPort, NullPresentationPort

__all__ = ['IPresentationPort', 'NullPresentationPort']
