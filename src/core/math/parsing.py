"""
Strict Number Parsing — строгий разбор числового ввода

Строка принимается только если числовая грамматика поглотила всё
непробельное содержимое:
- "12", "12 ", "12\\t"   → success
- "12abc", "", "abc", " " → failure
- значения вне диапазона  → failure

Алгоритм:
1. None или пустая строка → failure
2. Пропуск ведущих пробельных символов, разбор самого длинного числового префикса
3. Пустой префикс или выход за диапазон → failure
4. Пропуск пробелов/табов после префикса
5. Любой оставшийся символ → failure
"""

import re
import string
import sys
from typing import Final, NamedTuple, Optional, Union

# =============================================================================
# ДИАПАЗОНЫ
# =============================================================================

# Диапазон целевого целого типа (signed 64-bit)
INT_MIN: Final[int] = -(2**63)
INT_MAX: Final[int] = 2**63 - 1

# Ведущие пробельные символы, которые пропускаются перед числом
_LEADING_WHITESPACE: Final[str] = " \t\n\v\f\r"

# Допустимый хвост после числа
_TRAILING_WHITESPACE: Final[str] = " \t"

_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:(?P<int>\d+)(?:\.(?P<frac>\d*))?|\.(?P<frac_only>\d+))(?:[eE][+-]?\d+)?"
)

_DIGITS = string.digits + string.ascii_lowercase


# =============================================================================
# RESULT
# =============================================================================


class ParsedNumber(NamedTuple):
    """Результат разбора: значение и признак успеха."""

    value: Optional[Union[int, float]]
    ok: bool


_FAILED: Final[ParsedNumber] = ParsedNumber(value=None, ok=False)


# =============================================================================
# ВСПОМОГАТЕЛЬНЫЕ
# =============================================================================


def _skip(text: str, pos: int, chars: str) -> int:
    while pos < len(text) and text[pos] in chars:
        pos += 1
    return pos


def _only_trailing_whitespace(text: str, pos: int) -> bool:
    return _skip(text, pos, _TRAILING_WHITESPACE) == len(text)


def _match_digits(text: str, pos: int, base: int) -> int:
    """Позиция сразу после последовательности цифр системы base."""
    valid = _DIGITS[:base]
    while pos < len(text) and text[pos].lower() in valid:
        pos += 1
    return pos


# =============================================================================
# INTEGER
# =============================================================================


def parse_int(text: Optional[str], base: int = 10) -> ParsedNumber:
    """
    Строгий разбор целого числа.

    Грамматика: [пробелы] [+-] цифры системы base. Для base=16 допускается
    префикс 0x, для base=0 система определяется по префиксу (0x → 16,
    ведущий 0 → 8, иначе 10).

    Args:
        text: Строка ввода (без символа конца строки)
        base: Основание системы счисления (0 или 2..36)

    Returns:
        ParsedNumber(value, ok)

    Raises:
        ValueError: Если base вне допустимого набора
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"base must be 0 or in [2, 36], got {base}")

    if not text:
        return _FAILED

    pos = _skip(text, 0, _LEADING_WHITESPACE)

    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1

    has_hex_prefix = (
        text[pos:pos + 2].lower() == "0x"
        and pos + 2 < len(text)
        and text[pos + 2].lower() in _DIGITS[:16]
    )
    if base in (0, 16) and has_hex_prefix:
        base = 16
        pos += 2
    elif base == 0:
        base = 8 if text[pos:pos + 1] == "0" else 10

    end = _match_digits(text, pos, base)
    if end == pos:
        return _FAILED

    value = sign * int(text[pos:end], base)
    if not INT_MIN <= value <= INT_MAX:
        return _FAILED

    if not _only_trailing_whitespace(text, end):
        return _FAILED

    return ParsedNumber(value=value, ok=True)


# =============================================================================
# FLOAT
# =============================================================================


def parse_float(text: Optional[str]) -> ParsedNumber:
    """
    Строгий разбор числа с плавающей точкой.

    Грамматика: [пробелы] [+-] (digits[.digits] | .digits) [e[+-]digits].
    Написания "inf"/"nan" не входят в грамматику.

    Range errors:
    - переполнение до Inf → failure
    - underflow до 0.0 при ненулевой мантиссе → failure

    Args:
        text: Строка ввода (без символа конца строки)

    Returns:
        ParsedNumber(value, ok)
    """
    if not text:
        return _FAILED

    pos = _skip(text, 0, _LEADING_WHITESPACE)
    match = _FLOAT_PREFIX.match(text, pos)
    if match is None:
        return _FAILED

    value = float(match.group(0))

    if value in (float("inf"), float("-inf")):
        return _FAILED

    mantissa = "".join(
        match.group(name) or "" for name in ("int", "frac", "frac_only")
    )
    if abs(value) < sys.float_info.min and mantissa.strip("0"):
        # underflow: ненулевые цифры дали 0.0 или субнормальное значение
        return _FAILED

    if not _only_trailing_whitespace(text, match.end()):
        return _FAILED

    return ParsedNumber(value=value, ok=True)
