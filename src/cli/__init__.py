"""CLI — терминальный интерфейс калькулятора.

- Prompter: чтение и повторный запрос ввода
- CalculationLog: журнал расчётов
- Calculator: главное меню
"""

from .calculation_log import CalculationLog
from .config import CalculatorConfig
from .prompter import EndOfInput, Prompter

__all__ = [
    "CalculationLog",
    "CalculatorConfig",
    "EndOfInput",
    "Prompter",
]
