from ..core.direction import Direction
from ..infrastructure.message_broker import MessageBroker
from ..interfaces.presentation_port import IPresentationPort


class BrokerPresentationPort(IPresentationPort):
    """
    Publishes every core notification on the message broker.

    Topics:
        hall_button/floor_<f>/call_on, hall_button/floor_<f>/call_off
        elevator/<name>/service     (SERVICE_START / SERVICE_END)
        elevator/<name>/transition  (TRANSITION_START / TRANSITION_END)
        elevator/<name>/sweep       (SWEEP_START / SWEEP_END)
    """
    def __init__(self, broker: MessageBroker, elevator_name: str):
        self.broker = broker
        self.elevator_name = elevator_name

    def _publish(self, topic: str, message: dict):
        message = {"timestamp": self.broker.get_current_time(), **message}
        self.broker.put(topic, message)

    def on_button_state_changed(self, floor: int, direction: Direction, pressed: bool):
        action = "ON" if pressed else "OFF"
        self._publish(f"hall_button/floor_{floor}/call_{action.lower()}", {
            "floor": floor,
            "direction": direction.value,
            "action": action,
            "elevator_name": self.elevator_name,
        })

    def on_service_start(self, floor: int, direction: Direction):
        self._publish(f"elevator/{self.elevator_name}/service", {
            "event_type": "SERVICE_START",
            "floor": floor,
            "direction": direction.value,
        })

    def on_service_end(self, floor: int, direction: Direction):
        self._publish(f"elevator/{self.elevator_name}/service", {
            "event_type": "SERVICE_END",
            "floor": floor,
            "direction": direction.value,
        })

    def on_transition_start(self, from_floor: int, to_floor: int, direction: Direction):
        self._publish(f"elevator/{self.elevator_name}/transition", {
            "event_type": "TRANSITION_START",
            "from_floor": from_floor,
            "to_floor": to_floor,
            "direction": direction.value,
        })

    def on_transition_end(self, to_floor: int):
        self._publish(f"elevator/{self.elevator_name}/transition", {
            "event_type": "TRANSITION_END",
            "to_floor": to_floor,
        })

    def on_sweep_start(self, direction: Direction):
        self._publish(f"elevator/{self.elevator_name}/sweep", {
            "event_type": "SWEEP_START",
            "direction": direction.value,
        })

    def on_sweep_end(self, direction: Direction, floor: int):
        self._publish(f"elevator/{self.elevator_name}/sweep", {
            "event_type": "SWEEP_END",
            "direction": direction.value,
            "floor": floor,
        })
