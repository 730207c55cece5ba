from typing import Iterable

from ..interfaces.presentation_port import IPresentationPort


class MulticastPresentationPort(IPresentationPort):
    """Forwards every notification to each of several ports, in order"""

    def __init__(self, ports: Iterable[IPresentationPort]):
        self.ports = list(ports)

    def on_button_state_changed(self, floor, direction, pressed):
        for port in self.ports:
            port.on_button_state_changed(floor, direction, pressed)

    def on_service_start(self, floor, direction):
        for port in self.ports:
            port.on_service_start(floor, direction)

    def on_service_end(self, floor, direction):
        for port in self.ports:
            port.on_service_end(floor, direction)

    def on_transition_start(self, from_floor, to_floor, direction):
        for port in self.ports:
            port.on_transition_start(from_floor, to_floor, direction)

    def on_transition_end(self, to_floor):
        for port in self.ports:
            port.on_transition_end(to_floor)

    def on_sweep_start(self, direction):
        for port in self.ports:
            port.on_sweep_start(direction)

    def on_sweep_end(self, direction, floor):
        for port in self.ports:
            port.on_sweep_end(direction, floor)
