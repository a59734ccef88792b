import logging
from typing import List, NamedTuple, Tuple

from .variables import FanSpeedLabel, HumidityLabel, TemperatureLabel
from .fuzzify import degrees

log = logging.getLogger(__name__)


class Rule(NamedTuple):
    """IF temperature IS `temperature` AND humidity IS `humidity` THEN fan speed IS `fan_speed`."""
    temperature: TemperatureLabel
    humidity: HumidityLabel
    fan_speed: FanSpeedLabel


T, H, F = TemperatureLabel, HumidityLabel, FanSpeedLabel

RULE_TABLE = (
    Rule(T.COLD, H.LOW, F.OFF),
    Rule(T.COLD, H.MEDIUM, F.OFF),
    Rule(T.COLD, H.HIGH, F.LOW),
    Rule(T.MILD, H.LOW, F.LOW),
    Rule(T.MILD, H.MEDIUM, F.MEDIUM),
    Rule(T.MILD, H.HIGH, F.MEDIUM),
    Rule(T.HOT, H.LOW, F.MEDIUM),
    Rule(T.HOT, H.MEDIUM, F.HIGH),
    Rule(T.HOT, H.HIGH, F.HIGH),
)
del T, H, F


class RuleBase(tuple):
    """Ordered, immutable rule sequence whose labels are checked on construction."""

    def __new__(cls, rules=RULE_TABLE):
        rules = tuple(Rule(*r) for r in rules)
        for i, r in enumerate(rules, 1):
            for value, labels in zip(r, (TemperatureLabel, HumidityLabel, FanSpeedLabel)):
                if not isinstance(value, labels):
                    raise ValueError(f"Rule {i}: {value!r} is not a {labels.__name__}")
        log.info("rule base loaded with %d rules", len(rules))
        return super().__new__(cls, rules)


# --- firing ---
def fire_rules(temperature_pairs, humidity_pairs, rules) -> List[Tuple[FanSpeedLabel, float]]:
    """Mamdani min-conjunction over `rules`.

    Only rules with strength > 0 contribute, in rule order; the same output
    label may appear more than once. Dropping zero-strength rules does not
    change the defuzzified value since max-aggregation ignores them.
    """
    mu_t, mu_h = degrees(temperature_pairs), degrees(humidity_pairs)
    fired = []
    for r in rules:
        alpha = min(mu_t.get(r.temperature, 0.0), mu_h.get(r.humidity, 0.0))
        if alpha > 0.0:
            fired.append((r.fan_speed, alpha))
    if log.isEnabledFor(logging.DEBUG):
        log.debug("%d of %d rules fired: %s", len(fired), len(rules),
                  [(label.value, round(a, 3)) for label, a in fired])
    return fired
