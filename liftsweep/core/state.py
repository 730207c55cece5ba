"""
Elevator State - Floor range, hall call matrix and car position

This module provides the state objects shared by the call registry and the
motion scheduler:
- FloorRange: the contiguous floors served by the car
- CarState: current floor and the two sweep flags
- ElevatorState: the call matrix plus the car, owned by the scheduler
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .direction import Direction
from .errors import InvalidDirection, InvalidFloor


@dataclass(frozen=True)
class FloorRange:
    """
    Contiguous floors from bottom to top inclusive.

    Attributes:
        bottom: Lowest floor index
        top: Highest floor index (must be greater than bottom)
    """
    bottom: int = 0
    top: int = 2

    def __post_init__(self):
        if self.bottom >= self.top:
            raise ValueError(f"bottom floor ({self.bottom}) must be below top floor ({self.top})")

    @property
    def floors(self) -> List[int]:
        return list(range(self.bottom, self.top + 1))

    def contains(self, floor) -> bool:
        # bool is an int subclass; True/False are not floors
        return isinstance(floor, int) and not isinstance(floor, bool) and self.bottom <= floor <= self.top

    def sweep_start(self, direction: Direction) -> int:
        """Extreme floor a sweep in this direction starts from"""
        return self.bottom if direction is Direction.UP else self.top

    def sweep_end(self, direction: Direction) -> int:
        """Extreme floor a sweep in this direction runs to"""
        return self.top if direction is Direction.UP else self.bottom

    def is_boundary_call(self, floor: int, direction: Direction) -> bool:
        """True for UP at the top floor and DOWN at the bottom floor"""
        return floor == self.sweep_end(direction)

    def validate_call(self, floor, direction) -> Direction:
        """
        Check a (floor, direction) pair from outside the core.

        Returns:
            The parsed Direction

        Raises:
            InvalidFloor: If floor is outside the range
            InvalidDirection: If direction is unknown or leads off the shaft
        """
        parsed = Direction.parse(direction)
        if not self.contains(floor):
            raise InvalidFloor(floor, self.bottom, self.top)
        if self.is_boundary_call(floor, parsed):
            raise InvalidDirection(parsed.value, f"no floor beyond floor {floor}")
        return parsed


@dataclass
class CarState:
    """Position of the car and which sweep flag is set"""
    current_floor: int
    moving_up: bool = False
    moving_down: bool = False

    def is_moving(self, direction: Direction) -> bool:
        return self.moving_up if direction is Direction.UP else self.moving_down

    def set_moving(self, direction: Direction, moving: bool):
        if direction is Direction.UP:
            self.moving_up = moving
        else:
            self.moving_down = moving

    @property
    def any_moving(self) -> bool:
        return self.moving_up or self.moving_down


@dataclass
class ElevatorState:
    """
    Process-wide state of the elevator: call flags and car position.

    Created once with every call off and the car at the bottom floor.
    """
    floor_range: FloorRange
    calls: Dict[int, Dict[Direction, bool]] = field(default_factory=dict)
    car: Optional[CarState] = None

    def __post_init__(self):
        if not self.calls:
            self.calls = {
                floor: {Direction.UP: False, Direction.DOWN: False}
                for floor in self.floor_range.floors
            }
        if self.car is None:
            self.car = CarState(current_floor=self.floor_range.bottom)

    def enforce_boundaries(self):
        """Force-clear the two calls that have nowhere to go"""
        self.calls[self.floor_range.top][Direction.UP] = False
        self.calls[self.floor_range.bottom][Direction.DOWN] = False

    def pending_calls(self) -> List[Tuple[int, Direction]]:
        return [
            (floor, direction)
            for floor in self.floor_range.floors
            for direction in (Direction.UP, Direction.DOWN)
            if self.calls[floor][direction]
        ]
