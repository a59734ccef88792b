import logging
from typing import Dict, List, Tuple

from .variables import LinguisticVariable

log = logging.getLogger(__name__)


def fuzzify(value: float, variable: LinguisticVariable) -> List[Tuple[object, float]]:
    """Degree of `value` in every term of `variable`, in term order.

    Values outside the variable's domain are evaluated as they are; the
    shapes saturate, so nothing is clamped or rejected here.
    """
    pairs = [(t.label, t.membership(value)) for t in variable.terms]
    if log.isEnabledFor(logging.DEBUG):
        log.debug("fuzzified %s=%.3f -> %s", variable.name, value,
                  {label.value: round(mu, 3) for label, mu in pairs})
    return pairs


def degrees(pairs) -> Dict[object, float]:
    return dict(pairs)
