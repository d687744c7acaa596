"""
realtime_env.py

Wall-clock paced SimPy environment for watching a boarding run play back.
"""

import time

import simpy


class RealtimeEnvironment(simpy.Environment):
    """
    simpy.Environment whose step() sleeps so that simulated time advances
    at speed_factor simulated seconds per real second.

    A speed_factor of 0 disables pacing. The host loop already runs
    scale_factor times faster than the modelled cabin, so 1.0 plays the
    cabin back accelerated.
    """

    def __init__(self, speed_factor=1.0, initial_time=0):
        super().__init__(initial_time=initial_time)
        self.speed_factor = 0.0
        self._anchor = (time.monotonic(), self.now)
        self.set_speed(speed_factor)

    def step(self):
        result = super().step()
        if self.speed_factor > 0:
            real_anchor, sim_anchor = self._anchor
            due = real_anchor + (self.now - sim_anchor) / self.speed_factor
            lag = due - time.monotonic()
            if lag > 0:
                time.sleep(lag)
        return result

    def set_speed(self, speed_factor):
        """Change playback speed; pacing restarts from the current instant"""
        if speed_factor < 0:
            raise ValueError(f"speed_factor must be >= 0, got {speed_factor}")
        self.speed_factor = float(speed_factor)
        self._anchor = (time.monotonic(), self.now)

    def get_speed(self):
        return self.speed_factor
