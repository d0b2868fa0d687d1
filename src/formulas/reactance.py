"""
AC Reactance & Resonance — реактивные сопротивления и резонанс LC

ФОРМУЛЫ:
    X_L = 2π f L            L = X_L / (2π f)        f = X_L / (2π L)
    X_C = 1 / (2π f C)      C = 1 / (2π f X_C)      f = 1 / (2π C X_C)
    f0  = 1 / (2π √(L C))   L = 1 / ((2π f0)² C)    C = 1 / ((2π f0)² L)

Domain:
- f, f0, C, X_C строго > 0 везде, где они в знаменателе или под корнем
- L >= 0 в прямой формуле X_L, L > 0 в остальных

Отказ safe_divide → DomainViolation("invalid denominator.").
"""

import math
from typing import Final

from src.core.math.numerical_safeguards import safe_divide
from src.guards.domain_guard import (
    division_failed,
    enforce,
    ensure_finite,
    require_non_negative,
    require_positive,
)

TWO_PI: Final[float] = 2.0 * math.pi

_INVALID_DENOMINATOR: Final[str] = "invalid denominator."


def _divide(numerator: float, denominator: float, quantity: str) -> float:
    value, ok = safe_divide(numerator, denominator)
    if not ok:
        raise division_failed(quantity, _INVALID_DENOMINATOR)
    return ensure_finite(quantity, value)


# =============================================================================
# INDUCTIVE REACTANCE
# =============================================================================


def inductive_reactance(f: float, l: float) -> float:
    """
    X_L = 2π f L (ohm).

    Examples:
        >>> round(inductive_reactance(50.0, 0.1), 6)
        31.415927
    """
    enforce(require_positive("f", f), require_non_negative("L", l))
    return ensure_finite("X_L", TWO_PI * f * l)


def inductance_from_reactance(xl: float, f: float) -> float:
    """L = X_L / (2π f) (H)."""
    enforce(require_positive("f", f))
    return _divide(xl, TWO_PI * f, "L")


def frequency_from_inductive(xl: float, l: float) -> float:
    """f = X_L / (2π L) (Hz)."""
    enforce(require_positive("L", l))
    return _divide(xl, TWO_PI * l, "f")


# =============================================================================
# CAPACITIVE REACTANCE
# =============================================================================


def capacitive_reactance(f: float, c: float) -> float:
    """X_C = 1 / (2π f C) (ohm)."""
    enforce(require_positive("f", f), require_positive("C", c))
    return _divide(1.0, TWO_PI * f * c, "X_C")


def capacitance_from_reactance(xc: float, f: float) -> float:
    """C = 1 / (2π f X_C) (F)."""
    enforce(require_positive("f", f), require_positive("X_C", xc))
    return _divide(1.0, TWO_PI * f * xc, "C")


def frequency_from_capacitive(xc: float, c: float) -> float:
    """f = 1 / (2π C X_C) (Hz)."""
    enforce(require_positive("C", c), require_positive("X_C", xc))
    return _divide(1.0, TWO_PI * c * xc, "f")


# =============================================================================
# RESONANCE
# =============================================================================


def resonant_frequency(l: float, c: float) -> float:
    """
    Резонансная частота последовательного LC-контура.

    Args:
        l: Индуктивность (H), > 0
        c: Ёмкость (F), > 0

    Returns:
        f0 (Hz)

    Raises:
        DomainViolation: при L <= 0, C <= 0 или 2π√(LC) ~ 0

    Examples:
        >>> round(resonant_frequency(1e-3, 1e-6), 2)
        5032.92
    """
    enforce(require_positive("L", l), require_positive("C", c))
    return _divide(1.0, TWO_PI * math.sqrt(l * c), "f0")


def inductance_for_resonance(f0: float, c: float) -> float:
    """L = 1 / ((2π f0)² C) (H)."""
    enforce(require_positive("f0", f0), require_positive("C", c))
    omega = TWO_PI * f0
    return _divide(1.0, omega * omega * c, "L")


def capacitance_for_resonance(f0: float, l: float) -> float:
    """C = 1 / ((2π f0)² L) (F)."""
    enforce(require_positive("f0", f0), require_positive("L", l))
    omega = TWO_PI * f0
    return _divide(1.0, omega * omega * l, "C")
