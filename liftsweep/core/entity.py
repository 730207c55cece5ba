import simpy
from abc import ABC, abstractmethod
import itertools
from typing import Optional


class Entity(ABC):
    """
    Abstract base class for entities in SimPy simulation.

    Concrete entities implement run() as a generator; it is registered as a
    SimPy process as soon as the entity is constructed.
    """
    # Entity ID counter shared across all class instances
    _entity_id_counter = itertools.count()

    def __init__(self, env: simpy.Environment, name: Optional[str] = None):
        """
        Initialize the entity.

        Args:
            env: The SimPy simulation environment this entity belongs to.
            name: Entity name. If not specified, auto-generated from class name and ID.
        """
        self.env = env
        self.entity_id: int = next(self._entity_id_counter)
        self.name: str = name if name is not None else f"{self.__class__.__name__}_{self.entity_id}"

        # Concrete classes override this in their own __init__
        self.state: str = "initial_state"

        self._process = self.env.process(self.run())

        print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) created.')

    @abstractmethod
    def run(self):
        """
        Generator method that serves as the main SimPy process body for the entity.

        Typically an infinite loop that waits on an event or a Store and
        dispatches on the received item.
        """
        pass

    def set_state(self, new_state: str):
        """
        Transition the entity's state.

        Args:
            new_state: String representing the target state for transition.
        """
        if self.state != new_state:
            old_state = self.state
            self.state = new_state
            self._on_state_changed(old_state, new_state)

    def get_state(self) -> str:
        """Get the current state of the entity."""
        return self.state

    def _on_state_changed(self, old_state: str, new_state: str):
        """
        Hook method called when state changes.
        Subclasses extend this (calling super()) to report their status.
        """
        self._log_state_change(old_state, new_state)

    def _log_state_change(self, old_state: str, new_state: str):
        print(f'{self.env.now:.2f}: Entity "{self.name}" ({self.__class__.__name__}, ID:{self.entity_id}) state transition: {old_state} -> {new_state}')

    @property
    def process(self) -> simpy.Process:
        """
        Get the SimPy process object for this entity.
        """
        return self._process
