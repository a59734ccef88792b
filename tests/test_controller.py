import itertools
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

from fan_fuzzy import FuzzyController, RULE_TABLE
from fan_fuzzy.membership import trapezoidal, triangular
from fan_fuzzy.variables import FanSpeedLabel as F, HumidityLabel as H, TemperatureLabel as T


def test_mild_medium_lands_mid_range(controller):
    mu_t = dict(controller.fuzzify_temperature(25.0))
    assert mu_t[T.HOT] == 0.0
    assert mu_t[T.MILD] > 0.0
    speed = controller.compute(25.0, 50.0)
    assert 40.0 < speed < 60.0
    assert speed == pytest.approx(50.0)


def test_cold_and_dry_gives_off(controller):
    result = controller.infer(5.0, 10.0)
    assert dict(result.temperature)[T.COLD] == 1.0
    assert dict(result.humidity)[H.LOW] == 1.0
    assert result.fired == [(F.OFF, 1.0)]
    assert 0.0 < result.fan_speed < 7.5
    assert result.fan_speed == pytest.approx(7.0)


def test_origin_sits_on_closed_feet(controller):
    result = controller.infer(0.0, 0.0)
    assert dict(result.temperature)[T.COLD] == 0.0
    assert dict(result.humidity)[H.LOW] == 0.0
    assert result.fired == []
    assert result.fan_speed == 0.0


def test_upper_corner_is_zero(controller):
    assert dict(controller.fuzzify_temperature(50.0))[T.HOT] == 0.0
    assert dict(controller.fuzzify_humidity(100.0))[H.HIGH] == 0.0
    assert controller.compute(50.0, 100.0) == 0.0


def test_nothing_fires_returns_exact_zero(controller):
    assert controller.compute(50.0, 0.0) == 0.0
    assert controller.compute(-20.0, 300.0) == 0.0


def test_no_hidden_state(controller):
    rules_before = tuple(controller.rules)
    a1, b1 = controller.compute(21.0, 64.0), controller.compute(64.0, 21.0)
    b2, a2 = controller.compute(64.0, 21.0), controller.compute(21.0, 64.0)
    assert a1 == a2 and b1 == b2
    assert tuple(controller.rules) == rules_before == RULE_TABLE


def test_deterministic_across_controllers():
    assert FuzzyController().compute(33.3, 47.1) == FuzzyController().compute(33.3, 47.1)


@pytest.mark.parametrize("t, h", list(itertools.product(
    [-100.0, 0.0, 7.5, 17.5, 22.5, 27.5, 35.0, 50.0, 1e4],
    [-5.0, 0.0, 25.0, 40.0, 60.0, 85.0, 100.0, 500.0],
)))
def test_output_bounded(controller, t, h):
    speed = controller.compute(t, h)
    assert 0.0 <= speed <= 100.0
    assert np.isfinite(speed)


def test_rises_with_temperature_at_mid_humidity(controller):
    speeds = [controller.compute(t, 50.0) for t in (10.0, 20.0, 22.5, 25.0, 30.0, 40.0)]
    assert all(b >= a - 1e-9 for a, b in zip(speeds, speeds[1:]))
    assert speeds[0] == pytest.approx(7.0)
    assert speeds[-1] == pytest.approx(83.0)


def test_concurrent_calls_agree(controller):
    inputs = [(t, h) for t in np.linspace(0, 50, 11) for h in np.linspace(0, 100, 11)]
    expected = [controller.compute(t, h) for t, h in inputs]
    with ThreadPoolExecutor(max_workers=4) as pool:
        got = list(pool.map(lambda th: controller.compute(*th), inputs))
    assert got == expected


def test_custom_rule_base():
    c = FuzzyController(rules=[(T.MILD, H.MEDIUM, F.HIGH)])
    assert len(c.rules) == 1
    assert c.compute(22.5, 50.0) == pytest.approx(83.0)


def test_invalid_rule_base_fails_at_construction():
    with pytest.raises(ValueError):
        FuzzyController(rules=[("Mild", "Medium", "High")])


def _reference_speed(temperature, humidity):
    """Scalar loop: per-sample max of clipped consequents, sums accumulated in order."""
    mu_t = {
        T.COLD: trapezoidal(temperature, 0, 0, 15, 20),
        T.MILD: triangular(temperature, 15, 22.5, 30),
        T.HOT: trapezoidal(temperature, 25, 30, 50, 50),
    }
    mu_h = {
        H.LOW: trapezoidal(humidity, 0, 0, 30, 50),
        H.MEDIUM: triangular(humidity, 30, 50, 70),
        H.HIGH: trapezoidal(humidity, 50, 70, 100, 100),
    }
    shapes = {F.OFF: (0, 0, 20), F.LOW: (0, 25, 50), F.MEDIUM: (25, 50, 75), F.HIGH: (50, 100, 100)}
    fired = [(r.fan_speed, min(mu_t[r.temperature], mu_h[r.humidity])) for r in RULE_TABLE]
    fired = [(label, a) for label, a in fired if a > 0.0]
    num = den = 0.0
    for i in range(101):
        x = (i / 100) * 100.0
        mu = 0.0
        for label, a in fired:
            mu = max(mu, min(a, triangular(x, *shapes[label])))
        num += x * mu
        den += mu
    return 0.0 if den == 0.0 else num / den


def test_matches_sequential_reference_bit_for_bit(controller):
    for t in np.linspace(-5.0, 55.0, 61):
        for h in np.linspace(-5.0, 105.0, 56):
            assert controller.compute(t, h) == _reference_speed(t, h), (t, h)


@pytest.mark.parametrize("resolution", [0, -3, 2.5])
def test_bad_resolution_fails_at_construction(resolution):
    with pytest.raises(ValueError):
        FuzzyController(resolution=resolution)
