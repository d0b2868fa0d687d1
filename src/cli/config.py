"""Конфигурация калькулятора.

Источники (по возрастанию приоритета):
- значения по умолчанию
- переменная окружения EEE_HELPER_LOG_FILE
- аргументы командной строки (--log-file, --verbose)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Final, Mapping, Optional

DEFAULT_LOG_FILE: Final[str] = "eee_log.txt"
LOG_FILE_ENV_VAR: Final[str] = "EEE_HELPER_LOG_FILE"


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    Путь к журналу передаётся в CalculationLog при создании.
    """

    log_path: Path = field(default_factory=lambda: Path(DEFAULT_LOG_FILE))
    verbose: bool = False

    @classmethod
    def from_sources(
        cls,
        log_file: Optional[str] = None,
        verbose: bool = False,
        environ: Optional[Mapping[str, str]] = None,
    ) -> "CalculatorConfig":
        """
        Сборка конфигурации из аргументов и окружения.

        Args:
            log_file: путь из командной строки (приоритетнее окружения)
            verbose: DEBUG-логирование диагностик
            environ: окружение (default: os.environ)
        """
        env = os.environ if environ is None else environ
        path = log_file or env.get(LOG_FILE_ENV_VAR) or DEFAULT_LOG_FILE
        return cls(log_path=Path(path), verbose=verbose)
