"""Center-of-Area defuzzification over a sampled output universe."""
import logging

import numpy as np

from .variables import FAN_SPEED, universe

log = logging.getLogger(__name__)

RESOLUTION = 100


# --- implication / aggregation (same universe) ---
def imply(alpha, muB):          return np.minimum(alpha, muB)
def aggregate(mus, U):          return np.maximum.reduce([np.zeros_like(U), *mus])


def aggregated_output(fired, variable=FAN_SPEED, resolution=RESOLUTION):
    """Sampled universe and max-aggregated clipped consequents for `fired`."""
    U = universe(variable, resolution)
    mus = [imply(alpha, variable.term(label).membership(U)) for label, alpha in fired]
    return U, aggregate(mus, U)


def centroid(U, mu):
    """Discrete centroid; 0.0 when the aggregated set has no area.

    Sums accumulate one sample at a time, in universe order.
    """
    den = float(np.cumsum(mu)[-1])
    if den == 0.0:
        return 0.0
    return float(np.cumsum(U * mu)[-1]) / den


def defuzzify(fired, variable=FAN_SPEED, resolution=RESOLUTION) -> float:
    U, mu = aggregated_output(fired, variable, resolution)
    value = centroid(U, mu)
    if not fired:
        log.debug("no rule fired, %s defaults to %.1f", variable.name, value)
    else:
        log.debug("defuzzified %s=%.4f from %d contributions", variable.name, value, len(fired))
    return value
