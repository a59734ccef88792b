import logging
from typing import List, NamedTuple, Tuple

from .defuzzify import RESOLUTION, defuzzify
from .fuzzify import fuzzify
from .rules import RuleBase, fire_rules
from .variables import FAN_SPEED, HUMIDITY, TEMPERATURE

log = logging.getLogger(__name__)


class Inference(NamedTuple):
    temperature: List[Tuple[object, float]]
    humidity: List[Tuple[object, float]]
    fired: List[Tuple[object, float]]
    fan_speed: float


class FuzzyController:
    """Mamdani controller mapping (temperature, humidity) to a fan speed.

    The rule base is fixed at construction. Calls share no mutable state,
    so one controller can serve concurrent callers.
    """

    def __init__(self, rules=None, resolution=RESOLUTION):
        if int(resolution) != resolution or resolution < 1:
            raise ValueError(f"resolution must be a positive integer, got {resolution!r}")
        self._rules = RuleBase() if rules is None else RuleBase(rules)
        self._resolution = resolution
        log.info("fuzzy controller ready (%d rules, resolution %d)", len(self._rules), resolution)

    @property
    def rules(self):
        return self._rules

    @property
    def resolution(self):
        return self._resolution

    def fuzzify_temperature(self, value: float):
        return fuzzify(value, TEMPERATURE)

    def fuzzify_humidity(self, value: float):
        return fuzzify(value, HUMIDITY)

    def infer(self, temperature: float, humidity: float) -> Inference:
        log.debug("--- cycle start (temperature=%.3f, humidity=%.3f) ---", temperature, humidity)
        mu_t = self.fuzzify_temperature(temperature)
        mu_h = self.fuzzify_humidity(humidity)
        fired = fire_rules(mu_t, mu_h, self._rules)
        speed = defuzzify(fired, FAN_SPEED, self._resolution)
        log.debug("--- cycle end (fan_speed=%.4f) ---", speed)
        return Inference(mu_t, mu_h, fired, speed)

    def compute(self, temperature: float, humidity: float) -> float:
        return self.infer(temperature, humidity).fan_speed
