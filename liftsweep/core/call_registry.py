import simpy

from .direction import Direction
from .state import ElevatorState
from ..interfaces.presentation_port import IPresentationPort


class CallRegistry:
    """
    Hall call buttons of every floor (pressed / not pressed)

    Inputs are assumed valid; the scheduler's press() entry point rejects
    bad floors and directions before they get here.
    """
    def __init__(self, env: simpy.Environment, state: ElevatorState, port: IPresentationPort):
        """
        Args:
            env (simpy.Environment): SimPy environment (for log timestamps)
            state (ElevatorState): State object owned by the motion scheduler
            port (IPresentationPort): Receives button on/off notifications
        """
        self.env = env
        self.state = state
        self.port = port

    def press(self, floor: int, direction: Direction) -> bool:
        """
        Light the button at (floor, direction).

        Returns:
            True if the call is newly registered, False if it was already lit
            or is a boundary call that cannot exist
        """
        calls = self.state.calls
        if self.state.floor_range.is_boundary_call(floor, direction):
            self.state.enforce_boundaries()
            return False
        if calls[floor][direction]:
            print(f"{self.env.now:.2f} [CallRegistry] Button at floor {floor} ({direction}) already lit.")
            return False

        calls[floor][direction] = True
        self.state.enforce_boundaries()
        print(f"{self.env.now:.2f} [CallRegistry] Button pressed at floor {floor} ({direction}). Light ON.")
        self.port.on_button_state_changed(floor, direction, True)
        return True

    def clear(self, floor: int, direction: Direction):
        """Turn the button at (floor, direction) off, whatever its state"""
        self.state.calls[floor][direction] = False
        self.state.enforce_boundaries()
        print(f"{self.env.now:.2f} [CallRegistry] Call served at floor {floor} ({direction}). Light OFF.")
        self.port.on_button_state_changed(floor, direction, False)

    def any_pending(self, direction: Direction) -> bool:
        """True if any floor has a call waiting in direction"""
        return any(self.state.calls[floor][direction] for floor in self.state.floor_range.floors)

    def is_pending(self, floor: int, direction: Direction) -> bool:
        return self.state.calls[floor][direction]

    def pending_calls(self):
        """List of (floor, direction) with the button lit, bottom floor first"""
        return self.state.pending_calls()
