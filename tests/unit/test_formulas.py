"""
Тесты для формул калькулятора

Проверяемые инварианты:
1. Численные значения контрольных примеров
2. Отказ safe_divide → DomainViolation с сообщением про знаменатель
3. Domain guard срабатывает до вычисления
4. Короткое замыкание параллельной ветви: точный ноль vs малое значение
5. Все результаты finite
"""

import math

import pytest

from src.formulas import power, rc_transient, reactance, resistors, voltage_divider
from src.guards import DomainViolation

# =============================================================================
# ТЕСТЫ: Voltage Divider
# =============================================================================


class TestVoltageDivider:
    """Тесты делителя напряжения."""

    def test_vout(self):
        """Vin=10, R1=R2=1000 → Vout=5."""
        assert f"{voltage_divider.solve_vout(10.0, 1000.0, 1000.0):.6f}" == "5.000000"

    def test_vin(self):
        assert voltage_divider.solve_vin(5.0, 1000.0, 1000.0) == pytest.approx(10.0)

    def test_r1(self):
        assert voltage_divider.solve_r1(10.0, 2.5, 1000.0) == pytest.approx(3000.0)

    def test_r2(self):
        assert voltage_divider.solve_r2(10.0, 2.5, 3000.0) == pytest.approx(1000.0)

    def test_vout_zero_total_resistance(self):
        with pytest.raises(DomainViolation, match=r"R1 \+ R2 cannot be zero"):
            voltage_divider.solve_vout(10.0, 100.0, -100.0)

    def test_vin_zero_r2(self):
        with pytest.raises(DomainViolation, match="R2 cannot be zero"):
            voltage_divider.solve_vin(5.0, 1000.0, 0.0)

    def test_r1_zero_vout(self):
        with pytest.raises(DomainViolation, match="Vout cannot be zero"):
            voltage_divider.solve_r1(10.0, 1e-13, 1000.0)

    def test_r2_equal_voltages(self):
        with pytest.raises(DomainViolation, match="Vin must not equal Vout"):
            voltage_divider.solve_r2(5.0, 5.0, 1000.0)

    def test_overflow_rejected(self):
        with pytest.raises(DomainViolation, match="not finite"):
            voltage_divider.solve_vin(1e308, 1e308, 1e-6)


# =============================================================================
# ТЕСТЫ: Resistors
# =============================================================================


class TestResistors:
    """Тесты последовательного и параллельного соединения."""

    def test_series_total(self):
        assert resistors.series_total([100.0, 220.0, 330.0]) == pytest.approx(650.0)

    def test_series_total_empty(self):
        with pytest.raises(DomainViolation, match="n must be at least 1"):
            resistors.series_total([])

    def test_series_missing(self):
        result = resistors.series_missing(1000.0, [220.0, 330.0])

        assert result.missing == pytest.approx(450.0)
        assert result.sum_known == pytest.approx(550.0)

    def test_series_missing_requires_known(self):
        with pytest.raises(DomainViolation, match="n must be at least 2"):
            resistors.series_missing(1000.0, [])

    def test_parallel_req(self):
        result = resistors.parallel_req(100.0, 100.0)

        assert result.req == pytest.approx(50.0)
        assert result.short_circuit is False

    @pytest.mark.parametrize("r1, r2", [(100.0, 0.0), (0.0, 100.0), (0.0, 0.0), (-0.0, 5.0)])
    def test_parallel_exact_zero_is_short(self, r1, r2):
        """Точный ноль в ветви → Req = 0 без деления."""
        result = resistors.parallel_req(r1, r2)

        assert result.req == 0.0
        assert result.short_circuit is True

    def test_parallel_tiny_branch_uses_general_formula(self):
        """Малое ненулевое значение идёт по общей формуле."""
        result = resistors.parallel_req(1e-13, 100.0)

        assert result.short_circuit is False
        assert result.req == pytest.approx(1e-13)

    def test_parallel_opposite_branches(self):
        """R1 = -R2 → R1 + R2 = 0 → отказ safe_divide."""
        with pytest.raises(DomainViolation, match=r"R1 \+ R2 cannot be zero"):
            resistors.parallel_req(100.0, -100.0)

    def test_parallel_tiny_branches_near_zero_sum(self):
        """Обе ветви малы: R1 + R2 < eps → отказ."""
        with pytest.raises(DomainViolation):
            resistors.parallel_req(1e-13, 1e-13)

    def test_parallel_solve_r1(self):
        assert resistors.parallel_solve_r1(50.0, 100.0) == pytest.approx(100.0)

    def test_parallel_solve_r2(self):
        assert resistors.parallel_solve_r2(75.0, 300.0) == pytest.approx(100.0)

    def test_parallel_solve_equal_values(self):
        with pytest.raises(DomainViolation, match="R2 must not equal Req"):
            resistors.parallel_solve_r1(100.0, 100.0)
        with pytest.raises(DomainViolation, match="R1 must not equal Req"):
            resistors.parallel_solve_r2(100.0, 100.0)


# =============================================================================
# ТЕСТЫ: AC Reactance & Resonance
# =============================================================================


class TestReactance:
    """Тесты реактивных сопротивлений и резонанса."""

    def test_inductive_reactance(self):
        assert reactance.inductive_reactance(50.0, 0.1) == pytest.approx(31.4159265, abs=1e-6)

    def test_inductive_reactance_zero_inductance_allowed(self):
        assert reactance.inductive_reactance(50.0, 0.0) == 0.0

    def test_inductive_reactance_guards(self):
        with pytest.raises(DomainViolation, match="f must be > 0"):
            reactance.inductive_reactance(0.0, 0.1)
        with pytest.raises(DomainViolation, match="L must be >= 0"):
            reactance.inductive_reactance(50.0, -0.1)

    def test_inductance_from_reactance(self):
        assert reactance.inductance_from_reactance(31.4159265, 50.0) == pytest.approx(0.1, rel=1e-6)

    def test_frequency_from_inductive(self):
        assert reactance.frequency_from_inductive(31.4159265, 0.1) == pytest.approx(50.0, rel=1e-6)

    def test_frequency_from_inductive_guard(self):
        with pytest.raises(DomainViolation, match="L must be > 0"):
            reactance.frequency_from_inductive(10.0, 0.0)

    def test_tiny_frequency_invalid_denominator(self):
        """f > 0, но 2πf < eps → отказ safe_divide."""
        with pytest.raises(DomainViolation, match="invalid denominator"):
            reactance.inductance_from_reactance(10.0, 1e-14)

    def test_capacitive_reactance(self):
        expected = 1.0 / (2.0 * math.pi * 1000.0 * 1e-6)
        assert reactance.capacitive_reactance(1000.0, 1e-6) == pytest.approx(expected)

    def test_capacitive_round_trip_formulas(self):
        xc = reactance.capacitive_reactance(1000.0, 1e-6)

        assert reactance.capacitance_from_reactance(xc, 1000.0) == pytest.approx(1e-6)
        assert reactance.frequency_from_capacitive(xc, 1e-6) == pytest.approx(1000.0)

    def test_capacitive_guards(self):
        with pytest.raises(DomainViolation, match="C must be > 0"):
            reactance.capacitive_reactance(1000.0, 0.0)
        with pytest.raises(DomainViolation, match="X_C must be > 0"):
            reactance.capacitance_from_reactance(-1.0, 1000.0)
        with pytest.raises(DomainViolation, match="C must be > 0"):
            reactance.frequency_from_capacitive(100.0, -1e-6)

    def test_resonant_frequency(self):
        """L=1e-3, C=1e-6 → f0 ≈ 5032.92 Hz."""
        assert reactance.resonant_frequency(1e-3, 1e-6) == pytest.approx(5032.92, abs=0.1)

    def test_resonance_inverse(self):
        f0 = reactance.resonant_frequency(1e-3, 1e-6)

        assert reactance.inductance_for_resonance(f0, 1e-6) == pytest.approx(1e-3)
        assert reactance.capacitance_for_resonance(f0, 1e-3) == pytest.approx(1e-6)

    def test_resonance_guards(self):
        with pytest.raises(DomainViolation, match="L must be > 0"):
            reactance.resonant_frequency(0.0, 1e-6)
        with pytest.raises(DomainViolation, match="f0 must be > 0"):
            reactance.inductance_for_resonance(0.0, 1e-6)
        with pytest.raises(DomainViolation, match="L must be > 0"):
            reactance.capacitance_for_resonance(5000.0, -1.0)

    def test_resonance_product_underflow(self):
        """L·C underflow → 2π√(LC) = 0 → отказ safe_divide."""
        with pytest.raises(DomainViolation, match="invalid denominator"):
            reactance.resonant_frequency(1e-200, 1e-200)


# =============================================================================
# ТЕСТЫ: RC Transient
# =============================================================================


class TestRCTransient:
    """Тесты RC переходного процесса."""

    def test_forward(self):
        """R=1000, C=1e-6, t=0.001 → τ=0.001, 63.21%, 36.79%."""
        result = rc_transient.transient(1000.0, 1e-6, 0.001)

        assert f"{result.tau:.6f}" == "0.001000"
        assert result.charge_pct == pytest.approx(63.21, abs=0.01)
        assert result.discharge_pct == pytest.approx(36.79, abs=0.01)

    def test_forward_at_zero_time(self):
        result = rc_transient.transient(1000.0, 1e-6, 0.0)

        assert result.charge_pct == 0.0
        assert result.discharge_pct == 100.0

    def test_forward_guards(self):
        with pytest.raises(DomainViolation, match="R must be > 0"):
            rc_transient.transient(0.0, 1e-6, 0.001)
        with pytest.raises(DomainViolation, match="C must be > 0"):
            rc_transient.transient(1000.0, -1e-6, 0.001)
        with pytest.raises(DomainViolation, match="t must be >= 0"):
            rc_transient.transient(1000.0, 1e-6, -0.001)

    def test_forward_tiny_tau(self):
        """τ < eps → отказ деления t/τ."""
        with pytest.raises(DomainViolation, match="tau cannot be zero"):
            rc_transient.transient(1e-7, 1e-7, 1.0)

    def test_time_to_charge(self):
        t = rc_transient.time_to_charge(1000.0, 1e-6, 63.2120558828558)
        assert t == pytest.approx(0.001, rel=1e-9)

    @pytest.mark.parametrize("pct", [0.0, 100.0, -1.0, 101.0])
    def test_time_to_charge_percent_boundaries(self, pct):
        """0% и 100% → domain violation."""
        with pytest.raises(DomainViolation, match=r"charge % must be in \(0,100\)"):
            rc_transient.time_to_charge(1000.0, 1e-6, pct)

    def test_from_tau(self):
        levels = rc_transient.transient_from_tau(0.001, 0.001)

        assert levels.charge_pct == pytest.approx(63.21, abs=0.01)
        assert levels.discharge_pct == pytest.approx(36.79, abs=0.01)
        assert levels.charge_pct + levels.discharge_pct == pytest.approx(100.0)

    def test_from_tau_guards(self):
        with pytest.raises(DomainViolation, match="tau must be > 0"):
            rc_transient.transient_from_tau(0.0, 1.0)
        with pytest.raises(DomainViolation, match="t must be >= 0"):
            rc_transient.transient_from_tau(1.0, -1.0)

    def test_capacitance_for_charge(self):
        solution = rc_transient.capacitance_for_charge(1000.0, 63.2120558828558, 0.001)

        assert solution.tau == pytest.approx(0.001, rel=1e-9)
        assert solution.value == pytest.approx(1e-6, rel=1e-9)

    def test_resistance_for_charge(self):
        solution = rc_transient.resistance_for_charge(1e-6, 63.2120558828558, 0.001)

        assert solution.tau == pytest.approx(0.001, rel=1e-9)
        assert solution.value == pytest.approx(1000.0, rel=1e-9)

    @pytest.mark.parametrize("pct", [0.0, 100.0])
    def test_inverse_percent_boundaries(self, pct):
        with pytest.raises(DomainViolation):
            rc_transient.capacitance_for_charge(1000.0, pct, 0.001)
        with pytest.raises(DomainViolation):
            rc_transient.resistance_for_charge(1e-6, pct, 0.001)

    def test_tiny_percent_division_by_zero(self):
        """1 − p/100 округляется до 1.0 → ln = 0 → отказ деления."""
        with pytest.raises(DomainViolation, match="division by zero"):
            rc_transient.capacitance_for_charge(1000.0, 1e-20, 0.001)

    def test_tiny_resistance_division_by_zero(self):
        with pytest.raises(DomainViolation, match="division by zero"):
            rc_transient.capacitance_for_charge(1e-13, 50.0, 0.001)


# =============================================================================
# ТЕСТЫ: Power
# =============================================================================


class TestPower:
    """Тесты P = V × I."""

    def test_power(self):
        assert power.power(12.0, 0.5) == pytest.approx(6.0)

    def test_voltage(self):
        assert power.voltage_from_power(6.0, 0.5) == pytest.approx(12.0)

    def test_current(self):
        assert power.current_from_power(6.0, 12.0) == pytest.approx(0.5)

    def test_voltage_zero_current(self):
        """I=0 → "I cannot be zero", без исключений кроме DomainViolation."""
        with pytest.raises(DomainViolation, match="I cannot be zero"):
            power.voltage_from_power(6.0, 0.0)

    def test_current_zero_voltage(self):
        with pytest.raises(DomainViolation, match="V cannot be zero"):
            power.current_from_power(6.0, 1e-13)

    def test_power_overflow(self):
        with pytest.raises(DomainViolation, match="P is not finite"):
            power.power(1e200, 1e200)
