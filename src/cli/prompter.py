"""
Interactive Prompter — чтение и повторный запрос числового ввода

Цикл (не рекурсия): prompt → read line → parse → при ошибке сообщение и повтор.
Конец ввода (EOF) поднимает EndOfInput; меню расчёта завершается молча.
"""

import logging
from typing import Callable, Optional, TextIO

from src.core.math.parsing import ParsedNumber, parse_float, parse_int

logger = logging.getLogger(__name__)


class EndOfInput(Exception):
    """Входной поток исчерпан (EOF)."""


class Prompter:
    """
    Чтение строк из stdin-подобного потока с выводом приглашений в stdout.

    Потоки передаются явно, что позволяет подавать сценарий ввода в тестах.
    """

    def __init__(self, stdin: TextIO, stdout: TextIO):
        self.stdin = stdin
        self.stdout = stdout

    def write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    def say(self, line: str = "") -> None:
        self.stdout.write(line + "\n")

    def read_line(self, prompt: Optional[str] = None) -> str:
        """
        Вывод prompt (если задан) и чтение одной строки.

        Returns:
            Строка без завершающих символов \\r и \\n

        Raises:
            EndOfInput: если ввод исчерпан
        """
        if prompt:
            self.stdout.write(prompt)
            self.stdout.flush()

        line = self.stdin.readline()
        if not line:
            logger.debug("end of input after prompt %r", prompt)
            raise EndOfInput()

        return line.rstrip("\r\n")

    def _read_number(
        self,
        prompt: Optional[str],
        parser: Callable[[str], ParsedNumber],
        retry_message: str,
    ):
        while True:
            text = self.read_line(prompt)
            parsed = parser(text)
            if parsed.ok:
                return parsed.value
            logger.debug("rejected input %r", text)
            self.say(retry_message)

    def read_int(self, prompt: Optional[str] = None) -> int:
        """Повторяет запрос до ввода корректного целого."""
        return self._read_number(prompt, parse_int, "Invalid integer. Try again.")

    def read_float(self, prompt: Optional[str] = None) -> float:
        """Повторяет запрос до ввода корректного числа."""
        return self._read_number(prompt, parse_float, "Invalid number. Try again.")
