"""EEE Helper CLI — главное меню и точка входа.

Главный цикл:
1. Вывод меню и чтение кода (MenuChoice)
2. Запуск меню расчёта; EndOfInput → молча назад, DomainViolation → "Error: ..."
3. Ожидание ввода 'b'/'B' для возврата; EOF здесь → exit status 1

EOF в самом главном меню завершает программу со статусом 0.
"""

import argparse
import logging
import sys
from enum import IntEnum
from typing import Mapping, Optional, Sequence, TextIO

from src.cli.calculation_log import CalculationLog
from src.cli.calculators import (
    Handler,
    power_menu,
    rc_transient_menu,
    reactance_menu,
    resistor_menu,
    voltage_divider_menu,
)
from src.cli.config import CalculatorConfig
from src.cli.prompter import EndOfInput, Prompter
from src.core.math.parsing import parse_int
from src.guards.domain_guard import DomainViolation

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INPUT_ERROR = 1


class MenuChoice(IntEnum):
    """Коды главного меню."""

    VOLTAGE_DIVIDER = 1
    RESISTOR_TOOLS = 2
    AC_REACTANCE = 3
    RC_TRANSIENT = 4
    POWER = 5
    VIEW_LOG = 6
    QUIT = 7


CALCULATORS: Mapping[MenuChoice, Handler] = {
    MenuChoice.VOLTAGE_DIVIDER: voltage_divider_menu,
    MenuChoice.RESISTOR_TOOLS: resistor_menu,
    MenuChoice.AC_REACTANCE: reactance_menu,
    MenuChoice.RC_TRANSIENT: rc_transient_menu,
    MenuChoice.POWER: power_menu,
}

MENU_TEXT = (
    "\n====== EEE Helper CLI ======\n"
    "1) Voltage divider (Vout)\n"
    "2) Resistor tools (series / parallel-2)\n"
    "3) AC reactance & resonance\n"
    "4) RC transient (tau / %charge / %discharge)\n"
    "5) Power (P = V * I)\n"
    "6) View saved log\n"
    "7) Quit\n"
)


class Calculator:
    """Главный цикл калькулятора.

    Держит Prompter и CalculationLog; состояние между расчётами не хранится.
    """

    def __init__(self, io: Prompter, log: CalculationLog):
        self.io = io
        self.log = log

    def parse_choice(self, text: str) -> Optional[MenuChoice]:
        """Код меню или None для нечислового/неизвестного ввода."""
        parsed = parse_int(text)
        if not parsed.ok:
            return None
        try:
            return MenuChoice(parsed.value)
        except ValueError:
            return None

    def run_calculator(self, handler: Handler) -> None:
        """Один расчёт: ошибки domain и EOF не выходят за пределы меню."""
        try:
            handler(self.io, self.log)
        except EndOfInput:
            logger.debug("input exhausted inside %s", handler.__name__)
        except DomainViolation as e:
            logger.debug("domain violation %s: %s", e.block_reason, e.quantity)
            self.io.say(f"Error: {e.message}")

    def wait_back(self) -> bool:
        """
        Ожидание точного ввода 'b' или 'B'.

        Returns:
            True после 'b', False при EOF
        """
        while True:
            try:
                text = self.io.read_line("\nEnter 'b' to go back to the main menu: ")
            except EndOfInput:
                self.io.say("Input error. Exiting.")
                return False
            if text in ("b", "B"):
                return True

    def run(self) -> int:
        """
        Главный цикл.

        Returns:
            Код завершения процесса
        """
        while True:
            self.io.write(MENU_TEXT)
            try:
                text = self.io.read_line("Select: ")
            except EndOfInput:
                return EXIT_OK

            choice = self.parse_choice(text)
            if choice is None:
                self.io.say("Invalid choice.")
                continue

            if choice is MenuChoice.QUIT:
                self.io.say("Bye!")
                return EXIT_OK

            if choice is MenuChoice.VIEW_LOG:
                self.log.view(self.io.stdout)
            else:
                self.run_calculator(CALCULATORS[choice])

            if not self.wait_back():
                return EXIT_INPUT_ERROR


# =============================================================================
# ENTRY POINT
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eee-helper",
        description="Menu-driven calculator for introductory electrical-engineering formulas.",
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Path of the calculation log (default: $EEE_HELPER_LOG_FILE or eee_log.txt)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print debug diagnostics to stderr",
    )
    return parser


def tolerant_stdin() -> TextIO:
    """
    sys.stdin с заменой недекодируемых байтов на U+FFFD.

    Такая строка не проходит разбор числа и запрашивается повторно.
    """
    if hasattr(sys.stdin, "reconfigure"):
        sys.stdin.reconfigure(errors="replace")
    return sys.stdin


def main(
    argv: Optional[Sequence[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    args = build_parser().parse_args(argv)
    config = CalculatorConfig.from_sources(log_file=args.log_file, verbose=args.verbose)

    logging.basicConfig(
        level=logging.DEBUG if config.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger.debug("log file: %s", config.log_path)

    io = Prompter(stdin or tolerant_stdin(), stdout or sys.stdout)
    calculator = Calculator(io, CalculationLog(config.log_path))
    return calculator.run()


if __name__ == "__main__":
    sys.exit(main())
