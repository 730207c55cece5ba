import time

import pytest

from liftsweep.core.motion_scheduler import MotionScheduler
from liftsweep.core.state import FloorRange
from liftsweep.infrastructure.message_broker import MessageBroker
from liftsweep.infrastructure.realtime_env import RealtimeEnvironment


def test_zero_speed_runs_without_delay():
    env = RealtimeEnvironment(speed_factor=0.0)
    scheduler = MotionScheduler(env, "Car", FloorRange(0, 2))

    started = time.time()
    scheduler.press("UP", 1)
    env.run(until=30000)

    assert scheduler.car.current_floor == 2
    assert time.time() - started < 5.0


def test_paced_run_waits_for_wall_clock():
    # 200 sim ms at 2x speed -> at least 0.1 s of real time
    env = RealtimeEnvironment(speed_factor=2.0)
    scheduler = MotionScheduler(env, "Car", FloorRange(0, 1), movement_interval=200, stoppage_interval=0)

    started = time.time()
    scheduler.press("UP", 0)
    env.run(until=250)

    assert scheduler.car.current_floor == 1
    assert time.time() - started >= 0.09


def test_set_speed():
    env = RealtimeEnvironment()

    env.set_speed(4.0)
    assert env.get_speed() == 4.0
    with pytest.raises(ValueError):
        env.set_speed(-1)
    with pytest.raises(ValueError):
        RealtimeEnvironment(speed_factor=-0.5)


def test_broker_broadcast_copies_every_message(env):
    broker = MessageBroker(env, verbose=False)

    broker.put("a/topic", {"n": 1})
    broker.put("b/topic", {"n": 2})

    assert broker.get_pipe("a/topic").items == [{"n": 1}]
    assert [item['topic'] for item in broker.get_broadcast_pipe().items] == ["a/topic", "b/topic"]
    assert broker.get_current_time() == 0
