"""
Тесты для CalculationLog

Проверяет:
1. Дозапись по одной строке, порядок сохраняется между экземплярами
2. Ошибка открытия файла → False без исключения
3. Просмотр отсутствующего журнала
"""

import io

from src.cli.calculation_log import EMPTY_LOG_MESSAGE, LOG_HEADER, CalculationLog
from src.core.domain import LogRecord, amps, count, ohms, volts, watts


def power_record(p: float) -> LogRecord:
    return LogRecord(module="Power", inputs=(volts("V", 12.0), amps("I", p / 12.0)), outputs=(watts("P", p),))


class TestAppend:
    """Тесты append"""

    def test_append_creates_file(self, tmp_path) -> None:
        log = CalculationLog(tmp_path / "eee_log.txt")

        assert log.append(power_record(6.0)) is True
        assert (tmp_path / "eee_log.txt").read_text(encoding="utf-8") == (
            "Power: V=12.000000 V, I=0.500000 A -> P=6.000000 W\n"
        )

    def test_append_only(self, tmp_path) -> None:
        """Новые записи добавляются в конец, старые не меняются"""
        path = tmp_path / "eee_log.txt"
        path.write_text("earlier session\n", encoding="utf-8")

        CalculationLog(path).append(power_record(6.0))
        CalculationLog(path).append(power_record(24.0))

        assert CalculationLog(path).read_lines() == [
            "earlier session",
            "Power: V=12.000000 V, I=0.500000 A -> P=6.000000 W",
            "Power: V=12.000000 V, I=2.000000 A -> P=24.000000 W",
        ]

    def test_unwritable_path(self, tmp_path) -> None:
        """Файл не открывается → False, исключение не поднимается"""
        log = CalculationLog(tmp_path / "missing_dir" / "eee_log.txt")

        assert log.append(power_record(6.0)) is False
        assert log.read_lines() is None


class TestView:
    """Тесты view"""

    def test_view_missing_file(self, tmp_path) -> None:
        out = io.StringIO()
        CalculationLog(tmp_path / "eee_log.txt").view(out)

        assert out.getvalue() == f"{LOG_HEADER}\n{EMPTY_LOG_MESSAGE}\n"
        assert EMPTY_LOG_MESSAGE == "No saved calculations yet."

    def test_view_existing_file(self, tmp_path) -> None:
        log = CalculationLog(tmp_path / "eee_log.txt")
        record = LogRecord(
            module="Resistors Parallel(2)",
            inputs=(ohms("R1", 100.0), ohms("R2", 0.0)),
            outputs=(count("Req", 0),),
            annotation="short branch",
        )
        log.append(record)

        out = io.StringIO()
        log.view(out)

        assert out.getvalue() == (
            "\n--- Saved Log ---\n"
            "Resistors Parallel(2): R1=100.000000 ohm, R2=0.000000 ohm -> Req=0 (short branch)\n"
        )

    def test_view_empty_file(self, tmp_path) -> None:
        """Пустой файл существует: выводится только заголовок"""
        path = tmp_path / "eee_log.txt"
        path.write_text("", encoding="utf-8")

        out = io.StringIO()
        CalculationLog(path).view(out)

        assert out.getvalue() == f"{LOG_HEADER}\n"

    def test_view_undecodable_bytes(self, tmp_path) -> None:
        """Байты не в UTF-8 заменяются на U+FFFD, просмотр не падает"""
        path = tmp_path / "eee_log.txt"
        path.write_bytes(b"Power: V=1 \xff\n")

        out = io.StringIO()
        CalculationLog(path).view(out)

        assert out.getvalue() == f"{LOG_HEADER}\nPower: V=1 �\n"
