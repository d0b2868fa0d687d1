"""
RC Transient — заряд и разряд RC-цепи

ФОРМУЛЫ:
    τ = R·C
    charge%    = 100 · (1 − e^(−t/τ))
    discharge% = 100 · e^(−t/τ)
    t = −τ · ln(1 − p),  p = charge% / 100
    τ = −t / ln(1 − p);  C = τ / R;  R = τ / C

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. charge% строго внутри (0, 100): 0% и 100% дают нулевую или бесконечную τ
2. ln() вызывается только при 1 − p > 0
3. t/τ и −t/ln(1 − p) вычисляются через safe_divide
"""

import math
from typing import Final, NamedTuple

from src.core.math.numerical_safeguards import safe_divide, safe_log
from src.guards.domain_guard import (
    division_failed,
    enforce,
    ensure_finite,
    require_log_domain,
    require_non_negative,
    require_percent_open,
    require_positive,
)

# Имя процентной величины в сообщениях об ошибках
CHARGE_PERCENT: Final[str] = "charge %"

_DIVISION_BY_ZERO: Final[str] = "division by zero."


# =============================================================================
# RESULTS
# =============================================================================


class ChargeLevels(NamedTuple):
    """Уровни заряда и разряда в момент t (проценты)."""

    charge_pct: float
    discharge_pct: float


class TransientResult(NamedTuple):
    """τ и уровни заряда/разряда в момент t."""

    tau: float  # s
    charge_pct: float
    discharge_pct: float


class ComponentSolution(NamedTuple):
    """Найденный компонент (R или C) и соответствующая τ."""

    value: float  # ohm или F
    tau: float  # s


# =============================================================================
# HELPERS
# =============================================================================


def _levels(tau: float, t: float) -> ChargeLevels:
    ratio, ok = safe_divide(t, tau)
    if not ok:
        raise division_failed("tau", "tau cannot be zero (or near zero).")

    decay = math.exp(-ratio)
    return ChargeLevels(
        charge_pct=100.0 * (1.0 - decay),
        discharge_pct=100.0 * decay,
    )


def _tau_for_charge(pct: float, t: float) -> float:
    """τ = −t / ln(1 − p). Предусловия процента проверены вызывающим."""
    ln_value, ok = safe_log(1.0 - pct / 100.0)
    if not ok:
        raise division_failed(CHARGE_PERCENT, "invalid ln() domain.")

    tau, ok = safe_divide(-t, ln_value)
    if not ok:
        raise division_failed(CHARGE_PERCENT, _DIVISION_BY_ZERO)
    return ensure_finite("tau", tau)


# =============================================================================
# FORWARD
# =============================================================================


def transient(r: float, c: float, t: float) -> TransientResult:
    """
    τ, %charge и %discharge по R, C, t.

    Args:
        r: Сопротивление (ohm), > 0
        c: Ёмкость (F), > 0
        t: Время (s), >= 0

    Raises:
        DomainViolation: при нарушении domain или τ ~ 0

    Examples:
        >>> result = transient(1000.0, 1e-6, 0.001)
        >>> round(result.charge_pct, 2), round(result.discharge_pct, 2)
        (63.21, 36.79)
    """
    enforce(
        require_positive("R", r),
        require_positive("C", c),
        require_non_negative("t", t),
    )

    tau = ensure_finite("tau", r * c)
    levels = _levels(tau, t)
    return TransientResult(
        tau=tau,
        charge_pct=levels.charge_pct,
        discharge_pct=levels.discharge_pct,
    )


def transient_from_tau(tau: float, t: float) -> ChargeLevels:
    """%charge и %discharge по заданной τ."""
    enforce(require_positive("tau", tau), require_non_negative("t", t))
    return _levels(tau, t)


# =============================================================================
# INVERSE
# =============================================================================


def time_to_charge(r: float, c: float, pct: float) -> float:
    """
    Время достижения заданного процента заряда: t = −τ·ln(1 − p).

    Raises:
        DomainViolation: R <= 0, C <= 0, pct вне (0, 100)
    """
    enforce(
        require_positive("R", r),
        require_positive("C", c),
        require_percent_open(CHARGE_PERCENT, pct),
        require_log_domain(CHARGE_PERCENT, pct),
    )

    tau = ensure_finite("tau", r * c)
    ln_value, ok = safe_log(1.0 - pct / 100.0)
    if not ok:
        raise division_failed(CHARGE_PERCENT, "invalid ln() domain.")
    return ensure_finite("t", -tau * ln_value)


def capacitance_for_charge(r: float, pct: float, t: float) -> ComponentSolution:
    """C = τ / R, где τ = −t / ln(1 − p)."""
    enforce(
        require_positive("R", r),
        require_non_negative("t", t),
        require_percent_open(CHARGE_PERCENT, pct),
        require_log_domain(CHARGE_PERCENT, pct),
    )

    tau = _tau_for_charge(pct, t)
    c, ok = safe_divide(tau, r)
    if not ok:
        raise division_failed("R", _DIVISION_BY_ZERO)
    return ComponentSolution(value=ensure_finite("C", c), tau=tau)


def resistance_for_charge(c: float, pct: float, t: float) -> ComponentSolution:
    """R = τ / C, где τ = −t / ln(1 − p)."""
    enforce(
        require_positive("C", c),
        require_non_negative("t", t),
        require_percent_open(CHARGE_PERCENT, pct),
        require_log_domain(CHARGE_PERCENT, pct),
    )

    tau = _tau_for_charge(pct, t)
    r, ok = safe_divide(tau, c)
    if not ok:
        raise division_failed("C", _DIVISION_BY_ZERO)
    return ComponentSolution(value=ensure_finite("R", r), tau=tau)
