"""
Presentation Port Interface

Defines the notifications the elevator core sends to whatever renders it.
"""

from abc import ABC, abstractmethod

from ..core.direction import Direction


class IPresentationPort(ABC):
    """
    Interface for the presentation side of the elevator

    The core calls these methods fire-and-forget: return values are ignored
    and implementations must not yield or block the simulation.

    Design Philosophy:
    - The core never knows about colors, sounds or coordinates
    - One notification per observable change in the core
    - Several ports can be combined (see MulticastPresentationPort)

    Usage Examples:
    - BrokerPresentationPort: publishes each notification on the message broker
    - PanelPresentationPort: headless model of the button panel and chime
    """

    @abstractmethod
    def on_button_state_changed(self, floor: int, direction: Direction, pressed: bool):
        """
        A hall call button was lit or turned off

        Args:
            floor: Floor of the button
            direction: Direction of the button
            pressed: True when the call was registered, False when cleared
        """
        pass

    @abstractmethod
    def on_service_start(self, floor: int, direction: Direction):
        """The car stopped at floor to serve a call in direction"""
        pass

    @abstractmethod
    def on_service_end(self, floor: int, direction: Direction):
        """The dwell at floor is over and the call has been cleared"""
        pass

    @abstractmethod
    def on_transition_start(self, from_floor: int, to_floor: int, direction: Direction):
        """
        The car starts travelling to an adjacent floor

        Args:
            from_floor: Floor the car is leaving
            to_floor: Adjacent floor the car is heading to
            direction: Direction of travel
        """
        pass

    @abstractmethod
    def on_transition_end(self, to_floor: int):
        """The car arrived at to_floor"""
        pass

    def on_sweep_start(self, direction: Direction):
        """A sweep with work to do has begun (default: no-op)"""
        pass

    def on_sweep_end(self, direction: Direction, floor: int):
        """A sweep reached the extreme floor (default: no-op)"""
        pass


class NullPresentationPort(IPresentationPort):
    """Port that ignores every notification"""

    def on_button_state_changed(self, floor, direction, pressed):
        pass

    def on_service_start(self, floor, direction):
        pass

    def on_service_end(self, floor, direction):
        pass

    def on_transition_start(self, from_floor, to_floor, direction):
        pass

    def on_transition_end(self, to_floor):
        pass
