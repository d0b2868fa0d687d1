"""
Domain models and value objects.

Contains Quantity (value + unit + format rule) and LogRecord.
"""

from src.core.domain.records import LogRecord
from src.core.domain.units import (
    FIXED_6,
    FIXED_9,
    INTEGER,
    PERCENT_2,
    SCIENTIFIC_9,
    Quantity,
    amps,
    count,
    farads,
    henries,
    hertz,
    ohms,
    percent,
    seconds,
    volts,
    watts,
)

__all__ = [
    # Units module — formats
    "FIXED_6",
    "FIXED_9",
    "INTEGER",
    "PERCENT_2",
    "SCIENTIFIC_9",
    # Units module — model
    "Quantity",
    # Units module — constructors
    "amps",
    "count",
    "farads",
    "henries",
    "hertz",
    "ohms",
    "percent",
    "seconds",
    "volts",
    "watts",
    # Log record
    "LogRecord",
]
