"""
Simulation Configuration

Floor range, timing constants and the scripted button presses of a run.
All times are in milliseconds of simulation time.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from ..core.state import FloorRange


@dataclass
class BuildingConfig:
    """Floors served by the car"""
    bottom_floor: int = 0
    top_floor: int = 2

    def __post_init__(self):
        if self.bottom_floor >= self.top_floor:
            raise ValueError(f"bottom_floor ({self.bottom_floor}) must be below top_floor ({self.top_floor})")

    def to_floor_range(self) -> FloorRange:
        return FloorRange(bottom=self.bottom_floor, top=self.top_floor)


@dataclass
class TimingConfig:
    """Elevator timing"""
    movement_interval: float = 5000.0  # ms between adjacent floors
    stoppage_interval: float = 2000.0  # ms dwell at a floor with a call

    def __post_init__(self):
        if self.movement_interval <= 0:
            raise ValueError("movement_interval must be positive")
        if self.stoppage_interval < 0:
            raise ValueError("stoppage_interval cannot be negative")


@dataclass
class PressEvent:
    """One scripted hall call press"""
    time: float
    floor: int
    direction: str

    def __post_init__(self):
        if self.time < 0:
            raise ValueError("press time cannot be negative")


@dataclass
class ScenarioConfig:
    """Scripted presses and run length"""
    duration: float = 60000.0
    presses: List[PressEvent] = field(default_factory=list)

    def __post_init__(self):
        if self.duration <= 0:
            raise ValueError("duration must be positive")
        self.presses = [
            p if isinstance(p, PressEvent) else PressEvent(**p)
            for p in self.presses
        ]


@dataclass
class SimulationConfig:
    """
    Complete simulation configuration

    Combines building, timing and scenario settings.
    """
    building: BuildingConfig
    timing: TimingConfig
    scenario: ScenarioConfig

    elevator_name: str = "Car"
    realtime_factor: float = 0.0  # 0.0 = as fast as possible, 1.0 = realtime
    verbose_broker: bool = False

    def __post_init__(self):
        if self.realtime_factor < 0:
            raise ValueError("realtime_factor cannot be negative")
        if not self.elevator_name:
            raise ValueError("elevator_name cannot be empty")

    @classmethod
    def from_dict(cls, data: dict) -> 'SimulationConfig':
        """Create SimulationConfig from dictionary"""
        sim_data = data.get('simulation', data) or {}

        building_data = sim_data.get('building', {}) or {}
        building = BuildingConfig(
            bottom_floor=building_data.get('bottom_floor', 0),
            top_floor=building_data.get('top_floor', 2)
        )

        timing_data = sim_data.get('timing', {}) or {}
        timing = TimingConfig(
            movement_interval=timing_data.get('movement_interval', 5000.0),
            stoppage_interval=timing_data.get('stoppage_interval', 2000.0)
        )

        scenario_data = sim_data.get('scenario', {}) or {}
        scenario = ScenarioConfig(
            duration=scenario_data.get('duration', 60000.0),
            presses=[PressEvent(**p) for p in scenario_data.get('presses', []) or []]
        )

        return cls(
            building=building,
            timing=timing,
            scenario=scenario,
            elevator_name=sim_data.get('elevator_name', 'Car'),
            realtime_factor=sim_data.get('realtime_factor', 0.0),
            verbose_broker=sim_data.get('verbose_broker', False)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            'simulation': {
                'building': {
                    'bottom_floor': self.building.bottom_floor,
                    'top_floor': self.building.top_floor
                },
                'timing': {
                    'movement_interval': self.timing.movement_interval,
                    'stoppage_interval': self.timing.stoppage_interval
                },
                'scenario': {
                    'duration': self.scenario.duration,
                    'presses': [
                        {'time': p.time, 'floor': p.floor, 'direction': p.direction}
                        for p in self.scenario.presses
                    ]
                },
                'elevator_name': self.elevator_name,
                'realtime_factor': self.realtime_factor,
                'verbose_broker': self.verbose_broker
            }
        }

    def validate(self):
        """Validate configuration consistency"""
        for press in self.scenario.presses:
            if press.time > self.scenario.duration:
                raise ValueError(f"press at {press.time} ms is after the end of the scenario ({self.scenario.duration} ms)")


def default_config() -> SimulationConfig:
    """Three floors, 5000 ms legs, 2000 ms dwell, no presses"""
    return SimulationConfig(building=BuildingConfig(), timing=TimingConfig(), scenario=ScenarioConfig())
