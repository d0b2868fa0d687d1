"""Power — P = V × I и обратные формулы."""

from src.core.math.numerical_safeguards import safe_divide
from src.guards.domain_guard import division_failed, ensure_finite


def power(v: float, i: float) -> float:
    return ensure_finite("P", v * i)


def voltage_from_power(p: float, i: float) -> float:
    """V = P / I. DomainViolation если I ~ 0."""
    v, ok = safe_divide(p, i)
    if not ok:
        raise division_failed("I", "I cannot be zero (or near zero).")
    return ensure_finite("V", v)


def current_from_power(p: float, v: float) -> float:
    """I = P / V. DomainViolation если V ~ 0."""
    i, ok = safe_divide(p, v)
    if not ok:
        raise division_failed("V", "V cannot be zero (or near zero).")
    return ensure_finite("I", i)
