"""
Numerical Safeguards — Safe Math Primitives

Модуль обеспечивает численную устойчивость всех формул калькулятора:
- Безопасное деление с фиксированным epsilon-порогом для знаменателя
- Безопасный натуральный логарифм (domain x > 0)
- Проверка finite-значений (NaN/Inf никогда не выводятся пользователю)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление при |denominator| < EPS_DIVISION никогда не выполняется
2. Все знаменатели, производные от пользовательского ввода, проходят через safe_divide
3. log() никогда не вызывается для x <= 0
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог для знаменателя: |d| < EPS_DIVISION трактуется как ноль
EPS_DIVISION: Final[float] = 1e-12

# Значение частного, возвращаемое при отказе safe_divide
DIVISION_FALLBACK: Final[float] = 0.0


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: float,
    denominator: float,
    eps: float = EPS_DIVISION,
) -> tuple[float, bool]:
    """
    Безопасное деление с защитой от нулевого и почти нулевого знаменателя.

    Args:
        numerator: Числитель
        denominator: Знаменатель
        eps: Минимальный абсолютный порог для знаменателя (default: EPS_DIVISION)

    Returns:
        (quotient, ok):
            - (numerator / denominator, True) если abs(denominator) >= eps
            - (DIVISION_FALLBACK, False) иначе; деление не выполняется

    Examples:
        >>> safe_divide(10.0, 2.0)
        (5.0, True)
        >>> safe_divide(10.0, 0.0)
        (0.0, False)
        >>> safe_divide(10.0, 1e-13)
        (0.0, False)
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    if not abs(denominator) >= eps:
        # NaN в знаменателе тоже попадает сюда
        return (DIVISION_FALLBACK, False)

    return (numerator / denominator, True)


def safe_log(value: float) -> tuple[float, bool]:
    """
    Натуральный логарифм с domain-проверкой.

    Args:
        value: Аргумент логарифма

    Returns:
        (ln(value), True) для finite value > 0, иначе (0.0, False)

    Examples:
        >>> safe_log(1.0)
        (0.0, True)
        >>> safe_log(0.0)
        (0.0, False)
    """
    if not is_valid_float(value) or value <= 0.0:
        return (0.0, False)

    return (math.log(value), True)


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_near_zero(value: float, eps: float = EPS_DIVISION) -> bool:
    """
    Проверка, трактуется ли значение как ноль для деления.

    Тот же критерий, что и в safe_divide: abs(value) < eps.
    """
    return abs(value) < eps
