"""Тесты для Domain Guard

Покрытие:
- Предикаты (positive, non-negative, count, percent, log domain, finite)
- enforce: порядок и первое нарушение
- DomainViolation: поля и сообщение
"""

import pytest

from src.guards import (
    DomainViolation,
    GuardResult,
    division_failed,
    enforce,
    ensure_finite,
    require_at_least,
    require_finite,
    require_log_domain,
    require_non_negative,
    require_percent_open,
    require_positive,
)


# =============================================================================
# ТЕСТЫ: предикаты
# =============================================================================


def test_require_positive_pass():
    """PASS: value > 0."""
    result = require_positive("f", 50.0)

    assert result.passed is True
    assert result.quantity == "f"
    assert result.block_reason == ""


@pytest.mark.parametrize("value", [0.0, -0.0, -1.0])
def test_require_positive_block(value):
    """BLOCK: value <= 0."""
    result = require_positive("f", value)

    assert result.passed is False
    assert result.block_reason == "not_positive"
    assert result.details == "f must be > 0."


def test_require_non_negative():
    assert require_non_negative("t", 0.0).passed is True
    blocked = require_non_negative("t", -1e-9)
    assert blocked.passed is False
    assert blocked.block_reason == "negative"
    assert blocked.details == "t must be >= 0."


def test_require_at_least():
    assert require_at_least("n", 2, 2).passed is True
    blocked = require_at_least("n", 1, 2)
    assert blocked.passed is False
    assert blocked.block_reason == "count_too_small"
    assert blocked.details == "n must be at least 2."


@pytest.mark.parametrize("value", [0.0, 100.0, -5.0, 150.0])
def test_require_percent_open_block(value):
    """BLOCK: 0% и 100% и всё вне (0, 100)."""
    result = require_percent_open("charge %", value)

    assert result.passed is False
    assert result.block_reason == "percent_out_of_range"
    assert result.details == "charge % must be in (0,100)."


@pytest.mark.parametrize("value", [1e-9, 50.0, 99.999])
def test_require_percent_open_pass(value):
    assert require_percent_open("charge %", value).passed is True


def test_require_log_domain():
    assert require_log_domain("charge %", 63.2).passed is True
    blocked = require_log_domain("charge %", 100.0)
    assert blocked.passed is False
    assert blocked.block_reason == "log_domain"
    assert blocked.details == "invalid ln() domain."


def test_require_finite():
    assert require_finite("P", 1e308).passed is True
    assert require_finite("P", float("inf")).passed is False
    assert require_finite("P", float("nan")).block_reason == "not_finite"


def test_guard_result_immutable():
    """GuardResult frozen."""
    result = require_positive("f", 1.0)
    with pytest.raises(AttributeError):
        result.passed = False  # type: ignore[misc]


# =============================================================================
# ТЕСТЫ: enforce
# =============================================================================


def test_enforce_all_pass():
    enforce(require_positive("R", 1.0), require_positive("C", 1e-6))


def test_enforce_reports_first_violation():
    """Сообщение берётся из первого нарушенного предусловия."""
    with pytest.raises(DomainViolation) as excinfo:
        enforce(
            require_positive("R", 1.0),
            require_positive("C", 0.0),
            require_non_negative("t", -1.0),
        )

    assert excinfo.value.quantity == "C"
    assert excinfo.value.block_reason == "not_positive"
    assert excinfo.value.message == "C must be > 0."
    assert str(excinfo.value) == "C must be > 0."


def test_enforce_accepts_manual_result():
    with pytest.raises(DomainViolation, match="custom"):
        enforce(GuardResult(passed=False, quantity="x", block_reason="r", details="custom"))


def test_division_failed():
    violation = division_failed("I", "I cannot be zero (or near zero).")

    assert isinstance(violation, DomainViolation)
    assert violation.block_reason == "near_zero_denominator"
    assert violation.quantity == "I"


def test_ensure_finite():
    assert ensure_finite("XL", 3.0) == 3.0
    with pytest.raises(DomainViolation, match="XL is not finite"):
        ensure_finite("XL", float("inf"))
