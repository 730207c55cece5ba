from pathlib import Path

import pytest

from liftsweep.config import (
    BuildingConfig,
    ConfigLoader,
    PressEvent,
    ScenarioConfig,
    SimulationConfig,
    TimingConfig,
    default_config,
    load_simulation_config,
    save_simulation_config,
)
from liftsweep.core.state import FloorRange

project_root = Path(__file__).parent.parent.parent


def test_defaults_three_floors():
    config = default_config()

    assert config.building.to_floor_range() == FloorRange(0, 2)
    assert config.timing.movement_interval == 5000.0
    assert config.timing.stoppage_interval == 2000.0
    assert config.scenario.presses == []
    assert config.elevator_name == "Car"


def test_from_dict_with_missing_sections():
    config = SimulationConfig.from_dict({'simulation': {'building': {'top_floor': 5}}})

    assert config.building.bottom_floor == 0
    assert config.building.top_floor == 5
    assert config.timing.movement_interval == 5000.0


def test_from_dict_presses():
    config = SimulationConfig.from_dict({
        'scenario': {
            'duration': 9000,
            'presses': [{'time': 100, 'floor': 1, 'direction': 'UP'}]
        }
    })

    assert config.scenario.duration == 9000
    assert config.scenario.presses == [PressEvent(time=100, floor=1, direction='UP')]


@pytest.mark.parametrize("factory", [
    lambda: BuildingConfig(bottom_floor=2, top_floor=2),
    lambda: TimingConfig(movement_interval=0),
    lambda: TimingConfig(stoppage_interval=-1),
    lambda: ScenarioConfig(duration=0),
    lambda: PressEvent(time=-5, floor=0, direction='UP'),
    lambda: SimulationConfig(BuildingConfig(), TimingConfig(), ScenarioConfig(), realtime_factor=-1),
])
def test_invalid_values_raise(factory):
    with pytest.raises(ValueError):
        factory()


def test_validate_rejects_press_after_end():
    config = SimulationConfig(
        BuildingConfig(), TimingConfig(),
        ScenarioConfig(duration=1000, presses=[{'time': 2000, 'floor': 0, 'direction': 'UP'}])
    )
    with pytest.raises(ValueError):
        config.validate()


def test_save_and_load_yaml(tmp_path):
    config = SimulationConfig(
        BuildingConfig(bottom_floor=-1, top_floor=3),
        TimingConfig(movement_interval=1500, stoppage_interval=500),
        ScenarioConfig(duration=30000, presses=[PressEvent(time=0, floor=-1, direction='UP')]),
        elevator_name="Service",
    )
    path = tmp_path / "nested" / "sim.yaml"

    save_simulation_config(config, path)
    loaded = load_simulation_config(path)

    assert loaded == config


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ConfigLoader.load_simulation(tmp_path / "missing.yaml")


def test_shipped_scenario_loads():
    config = load_simulation_config(project_root / "scenarios" / "simulation" / "three_floor_demo.yaml")

    assert config.building.top_floor == 2
    assert len(config.scenario.presses) == 5
