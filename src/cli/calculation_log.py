"""
Calculation Log — журнал расчётов в текстовом файле

Одна запись на строку. Файл открывается на дозапись при каждой записи и на
чтение при просмотре; между операциями ничего не удерживается.
Ошибка записи не влияет на работу калькулятора: append возвращает False.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

from src.core.domain.records import LogRecord

logger = logging.getLogger(__name__)

LOG_HEADER = "\n--- Saved Log ---"
EMPTY_LOG_MESSAGE = "No saved calculations yet."


class CalculationLog:
    """Append-only журнал расчётов."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def append(self, record: LogRecord) -> bool:
        """
        Дозапись одной строки.

        Args:
            record: запись расчёта

        Returns:
            True при успехе, False если файл не удалось открыть/записать
        """
        line = record.render()
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
        except OSError as e:
            logger.debug("cannot append to %s: %s", self.path, e)
            return False

        logger.debug("logged: %s", line)
        return True

    def read_lines(self) -> Optional[list[str]]:
        """
        Все строки журнала.

        Returns:
            Список строк без символа конца строки (недекодируемые байты → U+FFFD);
            None если файла нет
        """
        try:
            with open(self.path, "r", encoding="utf-8", errors="replace") as f:
                return [line.rstrip("\n") for line in f]
        except FileNotFoundError:
            return None

    def view(self, out: TextIO) -> None:
        """Вывод журнала или сообщения об его отсутствии."""
        try:
            lines = self.read_lines()
        except OSError as e:
            logger.warning("cannot read %s: %s", self.path, e)
            lines = None

        out.write(LOG_HEADER + "\n")
        if lines is None:
            out.write(EMPTY_LOG_MESSAGE + "\n")
            return

        for line in lines:
            out.write(line + "\n")
