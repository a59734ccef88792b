"""Interactive controller state: current reading, bounded history, random samples."""
import collections
import logging
from typing import NamedTuple

import numpy as np

from .controller import FuzzyController
from .variables import HUMIDITY, TEMPERATURE

log = logging.getLogger(__name__)

HISTORY_LIMIT = 10
DEFAULT_TEMPERATURE = 25.0
DEFAULT_HUMIDITY = 50.0
RANDOM_TEMPERATURE = (10.0, 40.0)
RANDOM_HUMIDITY = (20.0, 90.0)

# (upper bound, status); the last band is open-ended
SPEED_BANDS = ((15.0, "OFF"), (40.0, "LOW"), (65.0, "MEDIUM"))


def classify_speed(speed: float) -> str:
    for bound, status in SPEED_BANDS:
        if speed < bound:
            return status
    return "HIGH"


class Reading(NamedTuple):
    temperature: float
    humidity: float
    fan_speed: float


def _clamp(value, domain):
    # NaN passes through unchanged
    return float(np.clip(value, *domain))


class ControllerSession:
    def __init__(self, controller=None, seed=None):
        self.controller = controller or FuzzyController()
        self.rng = np.random.default_rng(seed)
        self.temperature = DEFAULT_TEMPERATURE
        self.humidity = DEFAULT_HUMIDITY
        self.fan_speed = 0.0
        self.history = collections.deque(maxlen=HISTORY_LIMIT)
        self.update()

    def update(self) -> Reading:
        self.fan_speed = self.controller.compute(self.temperature, self.humidity)
        reading = Reading(self.temperature, self.humidity, self.fan_speed)
        self.history.append(reading)
        log.debug("reading T=%.1f H=%.1f -> %.1f%% [%s]", *reading, classify_speed(self.fan_speed))
        return reading

    def set_temperature(self, value: float) -> Reading:
        """Store `value` clamped to the temperature domain and recompute."""
        self.temperature = _clamp(float(value), TEMPERATURE.domain)
        return self.update()

    def set_humidity(self, value: float) -> Reading:
        """Store `value` clamped to the humidity domain and recompute."""
        self.humidity = _clamp(float(value), HUMIDITY.domain)
        return self.update()

    def randomize(self) -> Reading:
        self.temperature = float(self.rng.uniform(*RANDOM_TEMPERATURE))
        self.humidity = float(self.rng.uniform(*RANDOM_HUMIDITY))
        return self.update()

    def recent(self, n=5):
        return list(reversed(self.history))[:n]

    @property
    def status(self) -> str:
        return classify_speed(self.fan_speed)
