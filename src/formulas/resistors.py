"""
Resistors — последовательное и параллельное (2 ветви) соединение

ФОРМУЛЫ:
    Series:       Rt = Σ Ri
    Series miss:  R_missing = Rt − Σ known
    Parallel(2):  Req = R1·R2 / (R1 + R2)
                  R1  = Req·R2 / (R2 − Req)
                  R2  = Req·R1 / (R1 − Req)

Короткое замыкание: если одна из ветвей ТОЧНО равна 0.0, Req = 0 возвращается
напрямую, без safe_divide. Малые ненулевые значения идут по общей формуле и
защищаются epsilon-порогом safe_divide.
"""

from typing import NamedTuple, Sequence

from src.core.math.numerical_safeguards import safe_divide
from src.guards.domain_guard import (
    division_failed,
    enforce,
    ensure_finite,
    require_at_least,
)


# =============================================================================
# RESULTS
# =============================================================================


class SeriesMissingResult(NamedTuple):
    """Недостающий резистор последовательной цепи."""

    missing: float  # Rt − sum_known (ohm)
    sum_known: float  # Σ известных резисторов (ohm)


class ParallelResult(NamedTuple):
    """Эквивалентное сопротивление двух параллельных ветвей."""

    req: float  # ohm
    short_circuit: bool  # True если одна из ветвей точно 0.0


# =============================================================================
# SERIES
# =============================================================================


def series_total(resistances: Sequence[float]) -> float:
    """
    Общее сопротивление последовательной цепи.

    Raises:
        DomainViolation: если список пуст (n < 1)
    """
    enforce(require_at_least("n", len(resistances), 1))

    total = 0.0
    for r in resistances:
        total += r
    return ensure_finite("Rt", total)


def series_missing(rt: float, known: Sequence[float]) -> SeriesMissingResult:
    """
    Недостающий резистор при известном Rt и остальных (n-1) резисторах.

    Args:
        rt: Требуемое общее сопротивление (ohm)
        known: Известные резисторы, len(known) = n - 1

    Raises:
        DomainViolation: если n < 2
    """
    enforce(require_at_least("n", len(known) + 1, 2))

    sum_known = 0.0
    for r in known:
        sum_known += r
    sum_known = ensure_finite("sum_known", sum_known)

    return SeriesMissingResult(
        missing=ensure_finite("R_missing", rt - sum_known),
        sum_known=sum_known,
    )


# =============================================================================
# PARALLEL (2)
# =============================================================================


def parallel_req(r1: float, r2: float) -> ParallelResult:
    """
    Req двух параллельных ветвей.

    Args:
        r1: Первая ветвь (ohm)
        r2: Вторая ветвь (ohm)

    Returns:
        ParallelResult; short_circuit=True при точном нуле в любой ветви

    Raises:
        DomainViolation: если R1 + R2 ~ 0 (например, R1 = -R2)

    Examples:
        >>> parallel_req(100.0, 0.0)
        ParallelResult(req=0.0, short_circuit=True)
        >>> parallel_req(100.0, 100.0)
        ParallelResult(req=50.0, short_circuit=False)
    """
    if r1 == 0.0 or r2 == 0.0:
        return ParallelResult(req=0.0, short_circuit=True)

    req, ok = safe_divide(r1 * r2, r1 + r2)
    if not ok:
        raise division_failed("R1 + R2", "R1 + R2 cannot be zero (or near zero).")
    return ParallelResult(req=ensure_finite("Req", req), short_circuit=False)


def parallel_solve_r1(req: float, r2: float) -> float:
    """R1 по Req и R2. DomainViolation если R2 ~ Req."""
    r1, ok = safe_divide(req * r2, r2 - req)
    if not ok:
        raise division_failed("R2 - Req", "R2 must not equal Req (denominator near zero).")
    return ensure_finite("R1", r1)


def parallel_solve_r2(req: float, r1: float) -> float:
    """R2 по Req и R1. DomainViolation если R1 ~ Req."""
    r2, ok = safe_divide(req * r1, r1 - req)
    if not ok:
        raise division_failed("R1 - Req", "R1 must not equal Req (denominator near zero).")
    return ensure_finite("R2", r2)
