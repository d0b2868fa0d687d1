"""
Core math modules для EEE Helper

Строгий разбор числового ввода и безопасные математические примитивы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    DIVISION_FALLBACK,
    EPS_DIVISION,
    # Safe operations
    safe_divide,
    safe_log,
    # Checks
    is_near_zero,
    is_valid_float,
)

# Strict parsing
from src.core.math.parsing import (
    INT_MAX,
    INT_MIN,
    ParsedNumber,
    parse_float,
    parse_int,
)

__all__ = [
    # Numerical Safeguards — Epsilon constants
    "DIVISION_FALLBACK",
    "EPS_DIVISION",
    # Numerical Safeguards — Safe operations
    "safe_divide",
    "safe_log",
    # Numerical Safeguards — Checks
    "is_near_zero",
    "is_valid_float",
    # Parsing — Constants
    "INT_MAX",
    "INT_MIN",
    # Parsing — Types
    "ParsedNumber",
    # Parsing — Functions
    "parse_float",
    "parse_int",
]
