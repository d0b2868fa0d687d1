"""Domain Guard — предусловия формул

Набор предикатов, проверяемых до вычисления формулы. Каждый предикат
возвращает GuardResult; при нарушении result содержит имя величины,
машинный код причины и сообщение для пользователя.

Правила:
- Частота, L, C в знаменателе / под корнем / под логарифмом → строго > 0
- Время → >= 0
- Процент заряда → строго внутри (0, 100)
- Аргумент логарифма 1 - p/100 → строго > 0
- Счётчики резисторов → не меньше минимума
- Любой результат → finite

Нарушение прерывает только текущий расчёт (DomainViolation), главное
меню продолжает работу.
"""

from dataclasses import dataclass
from typing import Final

from src.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# CONSTANTS
# =============================================================================

PERCENT_MIN: Final[float] = 0.0
PERCENT_MAX: Final[float] = 100.0


# =============================================================================
# EXCEPTIONS
# =============================================================================


class DomainViolation(Exception):
    """
    Нарушение предусловия формулы.

    Прерывает один расчёт; message выводится пользователю как "Error: <message>".
    """

    def __init__(self, quantity: str, block_reason: str, message: str):
        super().__init__(message)
        self.quantity = quantity
        self.block_reason = block_reason
        self.message = message


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class GuardResult:
    """Результат проверки одного предусловия."""

    passed: bool
    quantity: str
    block_reason: str

    # Сообщение для пользователя
    details: str


_PASS_DETAILS: Final[str] = "PASS"


def _passed(quantity: str) -> GuardResult:
    return GuardResult(passed=True, quantity=quantity, block_reason="", details=_PASS_DETAILS)


def _blocked(quantity: str, block_reason: str, details: str) -> GuardResult:
    return GuardResult(passed=False, quantity=quantity, block_reason=block_reason, details=details)


# =============================================================================
# PREDICATES
# =============================================================================


def require_positive(name: str, value: float) -> GuardResult:
    """value > 0 (знаменатель, корень или логарифм)."""
    if value > 0.0:
        return _passed(name)
    return _blocked(name, "not_positive", f"{name} must be > 0.")


def require_non_negative(name: str, value: float) -> GuardResult:
    """value >= 0 (время, индуктивность в прямой формуле)."""
    if value >= 0.0:
        return _passed(name)
    return _blocked(name, "negative", f"{name} must be >= 0.")


def require_at_least(name: str, value: int, minimum: int) -> GuardResult:
    """Целочисленный счётчик не меньше minimum."""
    if value >= minimum:
        return _passed(name)
    return _blocked(name, "count_too_small", f"{name} must be at least {minimum}.")


def require_percent_open(name: str, value: float) -> GuardResult:
    """
    Процент строго внутри (0, 100).

    0% и 100% соответствуют нулевой или бесконечной постоянной времени
    в обратных формулах RC.
    """
    if PERCENT_MIN < value < PERCENT_MAX:
        return _passed(name)
    return _blocked(name, "percent_out_of_range", f"{name} must be in (0,100).")


def require_log_domain(name: str, percent_value: float) -> GuardResult:
    """Аргумент логарифма 1 - p/100 строго > 0."""
    if 1.0 - percent_value / 100.0 > 0.0:
        return _passed(name)
    return _blocked(name, "log_domain", "invalid ln() domain.")


def require_finite(name: str, value: float) -> GuardResult:
    """Результат формулы не NaN/Inf (переполнение)."""
    if is_valid_float(value):
        return _passed(name)
    return _blocked(name, "not_finite", f"{name} is not finite (overflow).")


# =============================================================================
# ENFORCEMENT
# =============================================================================


def enforce(*results: GuardResult) -> None:
    """
    Проверка набора предусловий в заданном порядке.

    Args:
        results: результаты предикатов (порядок = порядок сообщений)

    Raises:
        DomainViolation: для первого нарушенного предусловия
    """
    for result in results:
        if not result.passed:
            raise DomainViolation(result.quantity, result.block_reason, result.details)


def division_failed(quantity: str, message: str) -> DomainViolation:
    """DomainViolation для отказа safe_divide (знаменатель ~ 0)."""
    return DomainViolation(quantity, "near_zero_denominator", message)


def ensure_finite(name: str, value: float) -> float:
    """
    Возвращает value, если оно finite.

    Raises:
        DomainViolation: при NaN/Inf
    """
    enforce(require_finite(name, value))
    return value
