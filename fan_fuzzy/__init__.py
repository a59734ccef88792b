import logging

from .controller import FuzzyController, Inference
from .defuzzify import RESOLUTION
from .membership import trapezoidal, triangular
from .rules import RULE_TABLE, Rule
from .session import ControllerSession, Reading, classify_speed
from .variables import (
    FAN_SPEED, HUMIDITY, TEMPERATURE,
    FanSpeedLabel, HumidityLabel, LinguisticVariable, TemperatureLabel, Term,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def setup_logging(level=logging.INFO, filename=None):
    logging.basicConfig(
        filename=filename,
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
