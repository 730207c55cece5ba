"""
Configuration management package

Provides the simulation configuration classes and their YAML loader.
"""

from .simulation import (
    SimulationConfig,
    BuildingConfig,
    TimingConfig,
    ScenarioConfig,
    PressEvent,
    default_config
)

from .config_loader import (
    ConfigLoader,
    load_simulation_config,
    save_simulation_config
)

__all__ = [
    'SimulationConfig',
    'BuildingConfig',
    'TimingConfig',
    'ScenarioConfig',
    'PressEvent',
    'default_config',
    'ConfigLoader',
    'load_simulation_config',
    'save_simulation_config',
]
