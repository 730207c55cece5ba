from enum import Enum

from .errors import InvalidDirection


class Direction(str, Enum):
    """Travel direction of a hall call or a sweep"""
    UP = "UP"
    DOWN = "DOWN"

    def __str__(self) -> str:
        return self.value

    @property
    def step(self) -> int:
        """Floor increment for one leg in this direction"""
        return 1 if self is Direction.UP else -1

    @property
    def opposite(self) -> "Direction":
        return Direction.DOWN if self is Direction.UP else Direction.UP

    @classmethod
    def parse(cls, value) -> "Direction":
        """
        Convert a Direction or a string such as "UP" / "down" into a Direction.

        Raises:
            InvalidDirection: If value names neither direction
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidDirection(value)
