"""
Voltage Divider — делитель напряжения из двух резисторов

ФОРМУЛЫ:
    Vout = Vin × R2 / (R1 + R2)
    Vin  = Vout × (R1 + R2) / R2
    R1   = R2 × (Vin / Vout − 1)
    R2   = R1 × Vout / (Vin − Vout)

Все деления выполняются через safe_divide; отказ → DomainViolation с
сообщением, указывающим на нулевой знаменатель.
"""

from src.core.math.numerical_safeguards import safe_divide
from src.guards.domain_guard import division_failed, ensure_finite


def solve_vout(vin: float, r1: float, r2: float) -> float:
    """
    Выходное напряжение делителя.

    Args:
        vin: Входное напряжение (V)
        r1: Верхний резистор (ohm)
        r2: Нижний резистор (ohm)

    Returns:
        Vout (V)

    Raises:
        DomainViolation: если R1 + R2 ~ 0

    Examples:
        >>> solve_vout(10.0, 1000.0, 1000.0)
        5.0
    """
    ratio, ok = safe_divide(r2, r1 + r2)
    if not ok:
        raise division_failed("R1 + R2", "R1 + R2 cannot be zero (or near zero).")
    return ensure_finite("Vout", vin * ratio)


def solve_vin(vout: float, r1: float, r2: float) -> float:
    """
    Входное напряжение по выходному.

    Raises:
        DomainViolation: если R2 ~ 0
    """
    frac, ok = safe_divide(r1 + r2, r2)
    if not ok:
        raise division_failed("R2", "R2 cannot be zero (or near zero).")
    return ensure_finite("Vin", vout * frac)


def solve_r1(vin: float, vout: float, r2: float) -> float:
    """
    Верхний резистор по напряжениям и R2.

    Raises:
        DomainViolation: если Vout ~ 0
    """
    vin_over_vout, ok = safe_divide(vin, vout)
    if not ok:
        raise division_failed("Vout", "Vout cannot be zero (or near zero).")
    return ensure_finite("R1", r2 * (vin_over_vout - 1.0))


def solve_r2(vin: float, vout: float, r1: float) -> float:
    """
    Нижний резистор по напряжениям и R1.

    Raises:
        DomainViolation: если Vin ~ Vout
    """
    frac, ok = safe_divide(vout, vin - vout)
    if not ok:
        raise division_failed("Vin - Vout", "Vin must not equal Vout (denominator near zero).")
    return ensure_finite("R2", r1 * frac)
