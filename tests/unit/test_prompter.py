"""
Тесты для Prompter

Сценарии ввода подаются через io.StringIO.
"""

import io

import pytest

from src.cli.prompter import EndOfInput, Prompter


def make_prompter(script: str) -> tuple[Prompter, io.StringIO]:
    out = io.StringIO()
    return Prompter(io.StringIO(script), out), out


class TestReadLine:
    """Тесты read_line"""

    def test_strips_line_endings(self) -> None:
        prompter, _ = make_prompter("abc\r\n")
        assert prompter.read_line() == "abc"

    def test_prompt_written(self) -> None:
        prompter, out = make_prompter("x\n")
        prompter.read_line("Select: ")
        assert out.getvalue() == "Select: "

    def test_empty_line_is_not_eof(self) -> None:
        prompter, _ = make_prompter("\n")
        assert prompter.read_line() == ""

    def test_eof_raises(self) -> None:
        prompter, _ = make_prompter("")
        with pytest.raises(EndOfInput):
            prompter.read_line("R1 (ohms): ")


class TestReadNumbers:
    """Тесты read_int / read_float с повтором"""

    def test_read_float_retries_until_valid(self) -> None:
        prompter, out = make_prompter("abc\n3.4xyz\n\n2.5\n")

        assert prompter.read_float("Vin (V): ") == 2.5
        output = out.getvalue()
        assert output.count("Invalid number. Try again.") == 3
        assert output.count("Vin (V): ") == 4

    def test_read_float_trailing_spaces(self) -> None:
        prompter, out = make_prompter("12 \t\n")

        assert prompter.read_float() == 12.0
        assert "Invalid" not in out.getvalue()

    def test_read_int_retries(self) -> None:
        prompter, out = make_prompter("2abc\n1.5\n3\n")

        assert prompter.read_int("How many resistors? ") == 3
        assert out.getvalue().count("Invalid integer. Try again.") == 2

    def test_read_int_out_of_range(self) -> None:
        prompter, out = make_prompter("9223372036854775808\n5\n")

        assert prompter.read_int() == 5
        assert "Invalid integer. Try again." in out.getvalue()

    def test_eof_during_retry(self) -> None:
        prompter, _ = make_prompter("abc\n")
        with pytest.raises(EndOfInput):
            prompter.read_float("f (Hz): ")

    def test_say_and_write(self) -> None:
        prompter, out = make_prompter("")
        prompter.write("R1 (ohms): ")
        prompter.say("done")
        assert out.getvalue() == "R1 (ohms): done\n"
