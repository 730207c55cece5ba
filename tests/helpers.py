"""Test doubles and helpers shared by the liftsweep tests"""

import simpy

from liftsweep.core.direction import Direction
from liftsweep.interfaces.presentation_port import IPresentationPort

UP = Direction.UP
DOWN = Direction.DOWN


class RecordingPort(IPresentationPort):
    """Presentation port that remembers every notification with its time"""

    def __init__(self, env: simpy.Environment):
        self.env = env
        self.events = []

    def _record(self, name, *args):
        self.events.append((self.env.now, name) + args)

    def on_button_state_changed(self, floor, direction, pressed):
        self._record("button", floor, direction, pressed)

    def on_service_start(self, floor, direction):
        self._record("service_start", floor, direction)

    def on_service_end(self, floor, direction):
        self._record("service_end", floor, direction)

    def on_transition_start(self, from_floor, to_floor, direction):
        self._record("transition_start", from_floor, to_floor, direction)

    def on_transition_end(self, to_floor):
        self._record("transition_end", to_floor)

    def on_sweep_start(self, direction):
        self._record("sweep_start", direction)

    def on_sweep_end(self, direction, floor):
        self._record("sweep_end", direction, floor)

    def names(self):
        return [event[1] for event in self.events]

    def of(self, name):
        return [event for event in self.events if event[1] == name]


def press_at(env, scheduler, time, direction, floor):
    """Schedule a press at an absolute simulation time"""
    def _press():
        yield env.timeout(time - env.now)
        scheduler.press(direction, floor)
    env.process(_press())
