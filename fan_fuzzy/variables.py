"""Linguistic variables of the fan controller and their fixed fuzzy sets."""
import enum
from typing import NamedTuple, Tuple

import numpy as np

from .membership import build_membership, check_params


class TemperatureLabel(enum.Enum):
    COLD = "Cold"
    MILD = "Mild"
    HOT = "Hot"


class HumidityLabel(enum.Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class FanSpeedLabel(enum.Enum):
    OFF = "Off"
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class Term(NamedTuple):
    label: enum.Enum
    kind: str
    params: Tuple[float, ...]

    @classmethod
    def make(cls, label, kind, *params):
        return cls(label, kind, check_params(kind, params))

    def membership(self, U):
        return build_membership(U, self.kind, self.params)


class LinguisticVariable(NamedTuple):
    name: str
    labels: type
    domain: Tuple[float, float]
    terms: Tuple[Term, ...]

    def term(self, label) -> Term:
        for t in self.terms:
            if t.label is label:
                return t
        raise KeyError(label)


def universe(variable: LinguisticVariable, resolution: int) -> np.ndarray:
    """`resolution + 1` equally spaced sample points covering the variable's domain."""
    lo, hi = variable.domain
    return lo + (np.arange(resolution + 1) / resolution) * (hi - lo)


TEMPERATURE = LinguisticVariable("temperature", TemperatureLabel, (0.0, 50.0), (
    Term.make(TemperatureLabel.COLD, "Trapezoidal", 0, 0, 15, 20),
    Term.make(TemperatureLabel.MILD, "Triangular", 15, 22.5, 30),
    Term.make(TemperatureLabel.HOT, "Trapezoidal", 25, 30, 50, 50),
))

HUMIDITY = LinguisticVariable("humidity", HumidityLabel, (0.0, 100.0), (
    Term.make(HumidityLabel.LOW, "Trapezoidal", 0, 0, 30, 50),
    Term.make(HumidityLabel.MEDIUM, "Triangular", 30, 50, 70),
    Term.make(HumidityLabel.HIGH, "Trapezoidal", 50, 70, 100, 100),
))

FAN_SPEED = LinguisticVariable("fan_speed", FanSpeedLabel, (0.0, 100.0), (
    Term.make(FanSpeedLabel.OFF, "Triangular", 0, 0, 20),
    Term.make(FanSpeedLabel.LOW, "Triangular", 0, 25, 50),
    Term.make(FanSpeedLabel.MEDIUM, "Triangular", 25, 50, 75),
    Term.make(FanSpeedLabel.HIGH, "Triangular", 50, 100, 100),
))
