"""
Call rejection errors

Raised by the validation helpers when a press names a floor or direction
that the car cannot serve. The scheduler's press() entry point catches
them and ignores the press.
"""


class CallRejected(ValueError):
    """Base class for presses that are refused at the entry point"""


class InvalidFloor(CallRejected):
    """Floor outside the configured [bottom, top] range"""

    def __init__(self, floor, bottom: int, top: int):
        self.floor = floor
        self.bottom = bottom
        self.top = top
        super().__init__(f"Invalid floor {floor!r}: must be between {bottom} and {top}")


class InvalidDirection(CallRejected):
    """Direction that is not UP or DOWN, or that leads off the end of the shaft"""

    def __init__(self, direction, reason: str = "must be 'UP' or 'DOWN'"):
        self.direction = direction
        super().__init__(f"Invalid direction {direction!r}: {reason}")
