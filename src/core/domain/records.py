"""
LogRecord — Модель записи журнала расчётов

Immutable Pydantic модель одной строки журнала: модуль, вариант формулы,
входные и выходные величины с единицами. Записи только добавляются в конец
файла и никогда не изменяются.

Формат строки:
    "<module> <variant>: <inputs> -> <outputs> (<annotation>)"
"""

from pydantic import BaseModel, Field

from src.core.domain.units import Quantity


class LogRecord(BaseModel):
    """
    Запись журнала одного расчёта.

    Пример:
        Voltage Divider (Vout): Vin=10.000000 V, R1=1000.000000 ohm,
        R2=1000.000000 ohm -> Vout=5.000000 V
    """

    module: str = Field(..., min_length=1, description="Модуль калькулятора")
    variant: str | None = Field(None, description="Вариант формулы (например, 'solve R1')")
    inputs: tuple[Quantity, ...] = Field(..., min_length=1, description="Входные величины")
    outputs: tuple[Quantity, ...] = Field(..., min_length=1, description="Результаты")
    annotation: str | None = Field(
        None, description="Пояснение в скобках после результатов (например, 'short branch')"
    )

    model_config = {"frozen": True}

    @property
    def title(self) -> str:
        if self.variant:
            return f"{self.module} {self.variant}"
        return self.module

    def render(self) -> str:
        """
        Строка журнала без символа конца строки.

        Returns:
            Отформатированная запись
        """
        inputs = ", ".join(q.render() for q in self.inputs)
        outputs = ", ".join(q.render() for q in self.outputs)
        line = f"{self.title}: {inputs} -> {outputs}"
        if self.annotation:
            line += f" ({self.annotation})"
        return line
