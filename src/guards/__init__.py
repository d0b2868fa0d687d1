"""Guards — предусловия формул калькулятора.

- Положительность и неотрицательность величин
- Процент заряда строго внутри (0, 100)
- Domain логарифма
- Finite-проверка результатов
"""

from .domain_guard import (
    DomainViolation,
    GuardResult,
    division_failed,
    enforce,
    ensure_finite,
    require_at_least,
    require_finite,
    require_log_domain,
    require_non_negative,
    require_percent_open,
    require_positive,
)

__all__ = [
    "DomainViolation",
    "GuardResult",
    "division_failed",
    "enforce",
    "ensure_finite",
    "require_at_least",
    "require_finite",
    "require_log_domain",
    "require_non_negative",
    "require_percent_open",
    "require_positive",
]
