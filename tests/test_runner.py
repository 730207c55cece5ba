"""
End-to-end run of the shipped demo scenario.
"""

from pathlib import Path

from liftsweep.config import BuildingConfig, PressEvent, ScenarioConfig, SimulationConfig, TimingConfig
from liftsweep.core.motion_scheduler import MotionScheduler
from liftsweep.implementations.panel_port import ACTIVE_COLOR
from liftsweep.runner import build_simulation, main, run_simulation
from tests.helpers import UP, DOWN

project_root = Path(__file__).parent.parent
DEMO = project_root / "scenarios" / "simulation" / "three_floor_demo.yaml"


def test_demo_scenario(tmp_path):
    log_path = tmp_path / "demo.jsonl"
    plot_path = tmp_path / "demo.png"

    scheduler, recorder = run_simulation(DEMO, log_path=str(log_path), plot_path=str(plot_path))

    # UP at 0 came in after the car left the ground floor, DOWN at 2 after it left the top
    assert scheduler.registry.pending_calls() == [(0, UP), (2, DOWN)]
    assert scheduler.car.current_floor == 0
    assert scheduler.state == MotionScheduler.IDLE
    assert recorder.service_times == {
        (1, "UP"): [(0, 7000)],
        (1, "DOWN"): [(14000, 7000)],
    }
    assert log_path.exists()
    assert plot_path.exists()


def test_build_simulation_wires_panel():
    config = SimulationConfig(
        BuildingConfig(bottom_floor=0, top_floor=3),
        TimingConfig(movement_interval=1000, stoppage_interval=500),
        ScenarioConfig(duration=20000, presses=[
            PressEvent(time=0, floor=2, direction="UP"),
            PressEvent(time=100, floor=3, direction="UP"),
            PressEvent(time=200, floor=1, direction="DOWN"),
        ]),
    )

    env, scheduler, panel, recorder = build_simulation(config)
    env.run(until=config.scenario.duration)

    assert scheduler.car.current_floor == 3
    assert panel.car_floor == 3
    assert panel.button_color(1, DOWN) == ACTIVE_COLOR
    assert recorder.trajectory[-1] == (3500, 3)


def test_main_accepts_config_path(capsys):
    main([str(DEMO)])

    out = capsys.readouterr().out
    assert "HALL CALL SERVICE SUMMARY" in out
    assert "Press ignored" in out
