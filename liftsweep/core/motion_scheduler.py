import simpy
from typing import Optional

from .entity import Entity
from .call_registry import CallRegistry
from .direction import Direction
from .errors import CallRejected
from .state import CarState, ElevatorState, FloorRange
from ..infrastructure.message_broker import MessageBroker
from ..interfaces.presentation_port import IPresentationPort, NullPresentationPort


class MotionScheduler(Entity):
    """
    Single-car sweep controller.

    A sweep only starts from an extreme floor: UP from the bottom floor, DOWN
    from the top floor. Once started it runs to the opposite extreme, stopping
    at every floor with a call in the sweep direction. A call pressed while
    the car rests on a middle floor is recorded but does not move the car.
    """

    IDLE = "IDLE"
    SWEEPING_UP = "SWEEPING_UP"
    SWEEPING_DOWN = "SWEEPING_DOWN"

    def __init__(self, env: simpy.Environment, name: str, floor_range: FloorRange,
                 movement_interval: float = 5000, stoppage_interval: float = 2000,
                 port: Optional[IPresentationPort] = None, broker: Optional[MessageBroker] = None):
        """
        Args:
            env: SimPy environment (time unit: milliseconds)
            name: Name of the car, used in logs and broker topics
            floor_range: Floors served by the car
            movement_interval: Travel time between adjacent floors
            stoppage_interval: Dwell time at a floor with a call
            port: Presentation port receiving notifications (default: ignore all)
            broker: Optional message broker for status reports
        """
        if movement_interval < 0 or stoppage_interval < 0:
            raise ValueError("movement_interval and stoppage_interval cannot be negative")

        self.floor_range = floor_range
        self.movement_interval = movement_interval
        self.stoppage_interval = stoppage_interval
        self.port = port if port is not None else NullPresentationPort()
        self.broker = broker
        self.status_topic = f"elevator/{name}/status"

        self.elevator_state = ElevatorState(floor_range)
        self.registry = CallRegistry(env, self.elevator_state, self.port)
        self._sweep_requests = simpy.Store(env)

        super().__init__(env, name)
        self.set_state(self.IDLE)

    @property
    def car(self) -> CarState:
        return self.elevator_state.car

    def _on_state_changed(self, old_state: str, new_state: str):
        super()._on_state_changed(old_state, new_state)
        if self.broker is not None:
            self.env.process(self._report_status())

    def _report_status(self):
        yield self.broker.put(self.status_topic, self.status())

    def status(self) -> dict:
        """Snapshot of the scheduler for reporting"""
        return {
            "timestamp": self.env.now,
            "state": self.state,
            "current_floor": self.car.current_floor,
            "moving_up": self.car.moving_up,
            "moving_down": self.car.moving_down,
            "pending_calls": [[floor, direction.value] for floor, direction in self.registry.pending_calls()],
        }

    # --- Entry point ---

    def press(self, direction, floor) -> bool:
        """
        Hall call button pressed at floor.

        Args:
            direction: Direction.UP / Direction.DOWN or the strings "UP" / "DOWN"
            floor: Floor where the button was pressed

        Returns:
            True if the press was accepted, False if it was rejected
        """
        try:
            direction = self.floor_range.validate_call(floor, direction)
        except CallRejected as e:
            print(f"{self.env.now:.2f} [{self.name}] Press ignored: {e}")
            return False

        self.registry.press(floor, direction)

        car = self.car
        if car.any_moving:
            return True
        if car.current_floor != self.floor_range.sweep_start(direction):
            print(f"{self.env.now:.2f} [{self.name}] Car at floor {car.current_floor} cannot start a {direction} sweep. Call kept pending.")
            return True

        car.set_moving(direction, True)
        self._sweep_requests.put(direction)
        return True

    # --- Sweep process ---

    def run(self):
        """Main process: execute sweep requests one at a time"""
        while True:
            direction = yield self._sweep_requests.get()
            yield from self._sweep(direction)

    def _sweep(self, direction: Direction):
        car = self.car
        end_floor = self.floor_range.sweep_end(direction)

        if not self.registry.any_pending(direction):
            car.set_moving(direction, False)
            print(f"{self.env.now:.2f} [{self.name}] No {direction} calls pending. Sweep aborted.")
            return

        self.set_state(self.SWEEPING_UP if direction is Direction.UP else self.SWEEPING_DOWN)
        self.port.on_sweep_start(direction)

        floor = car.current_floor
        while floor != end_floor:
            if self.registry.is_pending(floor, direction):
                yield from self._serve_floor(floor, direction)
            yield from self._move_one_floor(floor, floor + direction.step, direction)
            # Cleared after every leg, not once per sweep
            car.set_moving(direction, False)
            floor = car.current_floor

        self.port.on_sweep_end(direction, floor)
        self.set_state(self.IDLE)

    def _serve_floor(self, floor: int, direction: Direction):
        print(f"{self.env.now:.2f} [{self.name}] Stopping at floor {floor} ({direction}).")
        self.port.on_service_start(floor, direction)
        yield self.env.timeout(self.stoppage_interval)
        self.registry.clear(floor, direction)
        self.port.on_service_end(floor, direction)

    def _move_one_floor(self, from_floor: int, to_floor: int, direction: Direction):
        print(f"{self.env.now:.2f} [{self.name}] Moving {from_floor} -> {to_floor} ({direction}).")
        self.port.on_transition_start(from_floor, to_floor, direction)
        yield self.env.timeout(self.movement_interval)
        self.car.current_floor = to_floor
        print(f"{self.env.now:.2f} [{self.name}] Arrived at floor {to_floor}.")
        self.port.on_transition_end(to_floor)
