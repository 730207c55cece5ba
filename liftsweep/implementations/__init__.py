"""Presentation port implementations"""

from .broker_port import BrokerPresentationPort
from .panel_port import PanelPresentationPort, ACTIVE_COLOR, IDLE_COLOR
from .multicast_port import MulticastPresentationPort

__all__ = [
    'BrokerPresentationPort',
    'PanelPresentationPort',
    'MulticastPresentationPort',
    'ACTIVE_COLOR',
    'IDLE_COLOR',
]
