"""
RealtimeEnvironment

A SimPy environment whose clock is paced against the wall clock, so a
sweep can be watched as it happens. Simulation time is in milliseconds.
"""

import simpy
import time


class RealtimeEnvironment(simpy.Environment):
    """
    SimPy environment with real-time synchronization.

    Args:
        speed_factor (float): Speed multiplier for simulation
            - 1.0 = real-time (1000 sim ms = 1 real second)
            - 2.0 = double speed
            - 0.0 = no delay (plain SimPy behavior)
        time_unit (float): Real seconds per simulation time unit (default: 0.001)

    Example:
        >>> env = RealtimeEnvironment(speed_factor=4.0)  # a 5000 ms leg takes 1.25 s
    """

    def __init__(self, speed_factor=1.0, time_unit=0.001, initial_time=0):
        super().__init__(initial_time=initial_time)
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self.time_unit = time_unit
        self.real_start_time = time.time()
        self.sim_start_time = self.now

    def step(self):
        """
        Execute one simulation step, then sleep until the wall clock catches
        up with the simulation clock.
        """
        result = super().step()

        if self.speed_factor > 0:
            sim_elapsed = (self.now - self.sim_start_time) * self.time_unit
            target_real_time = self.real_start_time + (sim_elapsed / self.speed_factor)
            sleep_time = target_real_time - time.time()
            if sleep_time > 0:
                time.sleep(sleep_time)

        return result

    def set_speed(self, speed_factor):
        """Change simulation speed during runtime (resets timing references)"""
        if speed_factor < 0:
            raise ValueError("speed_factor cannot be negative")
        self.speed_factor = speed_factor
        self.real_start_time = time.time()
        self.sim_start_time = self.now

    def get_speed(self):
        return self.speed_factor
