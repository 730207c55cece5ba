"""
Panel Presentation

Headless model of the elevator page: call button colors, the travel chime
and where the car is drawn. Lets a front end (or a test) read the visible
state without the core knowing about any of it.
"""

from typing import Dict, Optional, Tuple

from ..core.direction import Direction
from ..core.state import FloorRange
from ..interfaces.presentation_port import IPresentationPort


ACTIVE_COLOR = "#2e2"
IDLE_COLOR = "#aaa"


class PanelPresentationPort(IPresentationPort):
    """
    Visible state of the building panel

    Chime behavior: it plays while a sweep is under way, pauses while the car
    dwells at a floor, resumes after the dwell and pauses again each time
    the car arrives at a floor.
    """
    def __init__(self, floor_range: FloorRange):
        self.floor_range = floor_range
        # One button per (floor, direction) that can exist: no UP at top, no DOWN at bottom
        self.button_colors: Dict[Tuple[int, Direction], str] = {
            (floor, direction): IDLE_COLOR
            for floor in floor_range.floors
            for direction in (Direction.UP, Direction.DOWN)
            if not floor_range.is_boundary_call(floor, direction)
        }
        self.chime_playing = False
        self.chime_starts = 0
        self.car_floor = floor_range.bottom
        self.target_floor: Optional[int] = None
        self.serving: Optional[Tuple[int, Direction]] = None

    def button_color(self, floor: int, direction) -> str:
        return self.button_colors[(floor, Direction.parse(direction))]

    @property
    def in_transit(self) -> bool:
        return self.target_floor is not None

    def _play_chime(self):
        if not self.chime_playing:
            self.chime_playing = True
            self.chime_starts += 1

    def _pause_chime(self):
        self.chime_playing = False

    def on_button_state_changed(self, floor, direction, pressed):
        key = (floor, direction)
        if key in self.button_colors:
            self.button_colors[key] = ACTIVE_COLOR if pressed else IDLE_COLOR

    def on_sweep_start(self, direction):
        self._play_chime()

    def on_service_start(self, floor, direction):
        self.serving = (floor, direction)
        self._pause_chime()

    def on_service_end(self, floor, direction):
        self.serving = None
        self._play_chime()

    def on_transition_start(self, from_floor, to_floor, direction):
        self.target_floor = to_floor

    def on_transition_end(self, to_floor):
        self.car_floor = to_floor
        self.target_floor = None
        self._pause_chime()

    def on_sweep_end(self, direction, floor):
        self._pause_chime()
