"""
Units — Централизованный модуль единиц и числового форматирования

Единственный допустимый способ построить Quantity для записи в лог.
Форматы фиксированы, чтобы строки лога оставались стабильными для сравнения:
- V, ohm, Hz, A, W, s: 6 знаков после запятой
- H: 9 знаков (fixed) для реактивности, научная запись для резонанса
- F: научная запись с 9 знаками
- %: 2 знака после запятой, без пробела перед знаком
"""

from typing import Final

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_valid_float

# =============================================================================
# ФОРМАТЫ
# =============================================================================

FIXED_6: Final[str] = ".6f"
FIXED_9: Final[str] = ".9f"
SCIENTIFIC_9: Final[str] = ".9e"
PERCENT_2: Final[str] = ".2f"
INTEGER: Final[str] = "d"

# Единица, которая пишется вплотную к значению
_ATTACHED_UNITS: Final[frozenset[str]] = frozenset({"%"})


# =============================================================================
# QUANTITY MODEL
# =============================================================================


class Quantity(BaseModel):
    """
    Именованная физическая величина с единицей и правилом форматирования.

    Immutable модель (frozen=True). NaN/Inf отклоняются при создании.
    """

    name: str = Field(..., min_length=1, description="Имя величины (например, 'Vin')")
    value: int | float = Field(..., description="Значение в единицах SI")
    unit: str = Field("", description="Обозначение единицы (например, 'ohm')")
    spec: str = Field(FIXED_6, min_length=1, description="Format spec для значения")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: int | float) -> int | float:
        """Запись в лог никогда не содержит NaN/Inf."""
        if isinstance(v, float) and not is_valid_float(v):
            raise ValueError(f"value must be finite, got {v}")
        return v

    def render(self) -> str:
        """
        Строковое представление "name=value unit".

        Returns:
            Например: "Vin=10.000000 V", "charge=63.21%", "n=3"
        """
        text = f"{self.name}={self.value:{self.spec}}"
        if not self.unit:
            return text
        if self.unit in _ATTACHED_UNITS:
            return text + self.unit
        return f"{text} {self.unit}"


# =============================================================================
# КОНСТРУКТОРЫ ПО ЕДИНИЦАМ
# =============================================================================


def volts(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="V", spec=FIXED_6)


def ohms(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="ohm", spec=FIXED_6)


def hertz(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="Hz", spec=FIXED_6)


def seconds(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="s", spec=FIXED_6)


def amps(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="A", spec=FIXED_6)


def watts(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="W", spec=FIXED_6)


def henries(name: str, value: float, scientific: bool = False) -> Quantity:
    """
    Индуктивность в H.

    Args:
        scientific: научная запись (резонанс) вместо fixed .9f (реактивность)
    """
    spec = SCIENTIFIC_9 if scientific else FIXED_9
    return Quantity(name=name, value=value, unit="H", spec=spec)


def farads(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="F", spec=SCIENTIFIC_9)


def percent(name: str, value: float) -> Quantity:
    return Quantity(name=name, value=value, unit="%", spec=PERCENT_2)


def count(name: str, value: int) -> Quantity:
    return Quantity(name=name, value=value, unit="", spec=INTEGER)
