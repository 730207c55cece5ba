import sys

import simpy

from .config import SimulationConfig, load_simulation_config
from .core.motion_scheduler import MotionScheduler
from .infrastructure.message_broker import MessageBroker
from .infrastructure.realtime_env import RealtimeEnvironment
from .implementations.broker_port import BrokerPresentationPort
from .implementations.multicast_port import MulticastPresentationPort
from .implementations.panel_port import PanelPresentationPort
from .analyzer.event_recorder import EventRecorder


DEFAULT_SCENARIO = "scenarios/simulation/three_floor_demo.yaml"


def press_script(env, scheduler: MotionScheduler, presses):
    """Replay scripted presses at their scheduled times"""
    for press in sorted(presses, key=lambda p: p.time):
        if press.time > env.now:
            yield env.timeout(press.time - env.now)
        print(f"{env.now:.2f} [Script] Pressing {press.direction} at floor {press.floor}")
        scheduler.press(press.direction, press.floor)


def build_simulation(sim_config: SimulationConfig, env=None):
    """
    Wire environment, broker, ports, scheduler and recorder together.

    Returns:
        (env, scheduler, panel, recorder)
    """
    if env is None:
        if sim_config.realtime_factor > 0:
            env = RealtimeEnvironment(speed_factor=sim_config.realtime_factor)
        else:
            env = simpy.Environment()

    broker = MessageBroker(env, verbose=sim_config.verbose_broker)
    recorder = EventRecorder(env, broker.get_broadcast_pipe())
    recorder.set_simulation_metadata(sim_config.to_dict())
    env.process(recorder.start_listening())

    floor_range = sim_config.building.to_floor_range()
    panel = PanelPresentationPort(floor_range)
    port = MulticastPresentationPort([
        BrokerPresentationPort(broker, sim_config.elevator_name),
        panel,
    ])

    scheduler = MotionScheduler(
        env, sim_config.elevator_name, floor_range,
        movement_interval=sim_config.timing.movement_interval,
        stoppage_interval=sim_config.timing.stoppage_interval,
        port=port, broker=broker
    )
    env.process(press_script(env, scheduler, sim_config.scenario.presses))
    return env, scheduler, panel, recorder


def run_simulation(sim_config_path=DEFAULT_SCENARIO, log_path=None, plot_path=None):
    """
    Set up and run a scripted scenario

    Args:
        sim_config_path: Path to simulation configuration YAML file
        log_path: Optional JSON Lines event log output
        plot_path: Optional trajectory diagram output (PNG)
    """
    print("--- Loading Configuration ---")
    sim_config = load_simulation_config(sim_config_path)
    print(f"Simulation Config: {sim_config_path}")

    print("\n--- Simulation Setup ---")
    env, scheduler, panel, recorder = build_simulation(sim_config)
    print(f"Floors {sim_config.building.bottom_floor}..{sim_config.building.top_floor}, "
          f"movement {sim_config.timing.movement_interval} ms, stoppage {sim_config.timing.stoppage_interval} ms")

    print("\n--- Simulation Start ---")
    env.run(until=sim_config.scenario.duration)
    print("--- Simulation End ---")

    print(f"\nFinal status: {scheduler.status()}")
    recorder.print_summary()

    if log_path:
        recorder.save_event_log(log_path)
    if plot_path:
        recorder.plot_trajectory_diagram(plot_path)
    return scheduler, recorder


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    sim_config_path = argv[0] if len(argv) > 0 else DEFAULT_SCENARIO
    log_path = argv[1] if len(argv) > 1 else None
    plot_path = argv[2] if len(argv) > 2 else None
    run_simulation(sim_config_path, log_path=log_path, plot_path=plot_path)


if __name__ == '__main__':
    main()
