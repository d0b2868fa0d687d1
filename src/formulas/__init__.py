"""Formulas — чистые функции пяти семейств расчётов.

- voltage_divider: Vout / Vin / R1 / R2
- resistors: series total / missing, parallel(2)
- reactance: X_L, X_C, резонанс LC
- rc_transient: τ, %charge, %discharge и обратные формулы
- power: P = V × I

Каждая функция принимает проверенные числа и возвращает finite результат
либо поднимает DomainViolation.
"""

from . import power, rc_transient, reactance, resistors, voltage_divider

__all__ = [
    "power",
    "rc_transient",
    "reactance",
    "resistors",
    "voltage_divider",
]
