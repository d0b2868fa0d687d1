"""Меню расчётов — пять семейств формул.

Каждое меню: заголовок, выбор варианта, чтение входов через Prompter,
вызов чистой формулы из src.formulas, вывод результата и запись LogRecord.

Исключения:
- EndOfInput пробрасывается наверх (молчаливый выход в главное меню)
- DomainViolation пробрасывается наверх (вывод "Error: ..." в главном цикле)
"""

from typing import Callable, Mapping, Optional, Sequence

from src.cli.calculation_log import CalculationLog
from src.cli.prompter import Prompter
from src.core.domain.records import LogRecord
from src.core.domain.units import (
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
from src.formulas import power, rc_transient, reactance, resistors, voltage_divider
from src.guards.domain_guard import require_at_least

Handler = Callable[[Prompter, CalculationLog], None]

INVALID_SELECTION = "Invalid selection."
COUNT_NOT_POSITIVE = "Count must be positive."


def _record(
    log: CalculationLog,
    module: str,
    inputs: Sequence[Quantity],
    outputs: Sequence[Quantity],
    variant: Optional[str] = None,
    annotation: Optional[str] = None,
) -> None:
    log.append(
        LogRecord(
            module=module,
            variant=variant,
            inputs=tuple(inputs),
            outputs=tuple(outputs),
            annotation=annotation,
        )
    )


def _dispatch(io: Prompter, log: CalculationLog, handlers: Mapping[int, Handler]) -> None:
    """Выбор варианта по коду; неизвестный код → "Invalid selection."."""
    mode = io.read_int("Select: ")
    handler = handlers.get(mode)
    if handler is None:
        io.say(INVALID_SELECTION)
        return
    handler(io, log)


# =============================================================================
# 1) VOLTAGE DIVIDER
# =============================================================================


def _divider_vout(io: Prompter, log: CalculationLog) -> None:
    vin = io.read_float("Vin (V): ")
    r1 = io.read_float("R1 (ohms): ")
    r2 = io.read_float("R2 (ohms): ")

    vout = voltage_divider.solve_vout(vin, r1, r2)
    io.say(f"Vout = {vout:.6f} V")
    _record(
        log, "Voltage Divider",
        [volts("Vin", vin), ohms("R1", r1), ohms("R2", r2)],
        [volts("Vout", vout)],
        variant="(Vout)",
    )


def _divider_vin(io: Prompter, log: CalculationLog) -> None:
    vout = io.read_float("Vout (V): ")
    r1 = io.read_float("R1 (ohms): ")
    r2 = io.read_float("R2 (ohms): ")

    vin = voltage_divider.solve_vin(vout, r1, r2)
    io.say(f"Vin = {vin:.6f} V")
    _record(
        log, "Voltage Divider",
        [volts("Vout", vout), ohms("R1", r1), ohms("R2", r2)],
        [volts("Vin", vin)],
        variant="(Vin)",
    )


def _divider_r1(io: Prompter, log: CalculationLog) -> None:
    vin = io.read_float("Vin (V): ")
    vout = io.read_float("Vout (V): ")
    r2 = io.read_float("R2 (ohms): ")

    r1 = voltage_divider.solve_r1(vin, vout, r2)
    io.say(f"R1 = {r1:.6f} ohms")
    _record(
        log, "Voltage Divider",
        [volts("Vin", vin), volts("Vout", vout), ohms("R2", r2)],
        [ohms("R1", r1)],
        variant="(R1)",
    )


def _divider_r2(io: Prompter, log: CalculationLog) -> None:
    vin = io.read_float("Vin (V): ")
    vout = io.read_float("Vout (V): ")
    r1 = io.read_float("R1 (ohms): ")

    r2 = voltage_divider.solve_r2(vin, vout, r1)
    io.say(f"R2 = {r2:.6f} ohms")
    _record(
        log, "Voltage Divider",
        [volts("Vin", vin), volts("Vout", vout), ohms("R1", r1)],
        [ohms("R2", r2)],
        variant="(R2)",
    )


def voltage_divider_menu(io: Prompter, log: CalculationLog) -> None:
    io.say("\n--- Voltage Divider ---")
    io.say("Solve:")
    io.say("1) Vout given Vin, R1, R2")
    io.say("2) Vin  given Vout, R1, R2")
    io.say("3) R1   given Vin, Vout, R2")
    io.say("4) R2   given Vin, Vout, R1")

    _dispatch(io, log, {
        1: _divider_vout,
        2: _divider_vin,
        3: _divider_r1,
        4: _divider_r2,
    })


# =============================================================================
# 2) RESISTOR TOOLS
# =============================================================================


def _series_total(io: Prompter, log: CalculationLog) -> None:
    n = io.read_int("How many resistors? ")
    if not require_at_least("n", n, 1).passed:
        io.say(COUNT_NOT_POSITIVE)
        return

    values = []
    for index in range(1, n + 1):
        io.write(f"R{index} (ohms): ")
        values.append(io.read_float())

    total = resistors.series_total(values)
    io.say(f"R_total(series) = {total:.6f} ohms")
    _record(log, "Resistors Series", [count("n", n)], [ohms("Rt", total)])


def _series_missing(io: Prompter, log: CalculationLog) -> None:
    n = io.read_int("Total number of series resistors n: ")
    guard = require_at_least("n", n, 2)
    if not guard.passed:
        io.say(guard.details)
        return

    rt = io.read_float("Target Rt (ohms): ")
    known = []
    for index in range(1, n):
        io.write(f"Known R{index} (ohms): ")
        known.append(io.read_float())

    result = resistors.series_missing(rt, known)
    io.say(f"Missing resistor = {result.missing:.6f} ohms")
    _record(
        log, "Resistors Series Missing",
        [count("n", n), ohms("Rt", rt), ohms("sum_known", result.sum_known)],
        [ohms("R_missing", result.missing)],
    )


def _parallel_req(io: Prompter, log: CalculationLog) -> None:
    r1 = io.read_float("R1 (ohms): ")
    r2 = io.read_float("R2 (ohms): ")

    result = resistors.parallel_req(r1, r2)
    inputs = [ohms("R1", r1), ohms("R2", r2)]
    if result.short_circuit:
        io.say("Req = 0 ohms (one branch is a short).")
        _record(
            log, "Resistors Parallel(2)", inputs,
            [count("Req", 0)],
            annotation="short branch",
        )
        return

    io.say(f"R_eq(parallel,2) = {result.req:.6f} ohms")
    _record(log, "Resistors Parallel(2)", inputs, [ohms("Req", result.req)])


def _parallel_r1(io: Prompter, log: CalculationLog) -> None:
    req = io.read_float("Req (ohms): ")
    r2 = io.read_float("R2  (ohms): ")

    r1 = resistors.parallel_solve_r1(req, r2)
    io.say(f"R1 = {r1:.6f} ohms")
    _record(
        log, "Resistors Parallel(2)",
        [ohms("Req", req), ohms("R2", r2)],
        [ohms("R1", r1)],
        variant="solve R1",
    )


def _parallel_r2(io: Prompter, log: CalculationLog) -> None:
    req = io.read_float("Req (ohms): ")
    r1 = io.read_float("R1  (ohms): ")

    r2 = resistors.parallel_solve_r2(req, r1)
    io.say(f"R2 = {r2:.6f} ohms")
    _record(
        log, "Resistors Parallel(2)",
        [ohms("Req", req), ohms("R1", r1)],
        [ohms("R2", r2)],
        variant="solve R2",
    )


def _series_group(io: Prompter, log: CalculationLog) -> None:
    io.say("\nSeries modes:")
    io.say("1) Total Rt given n resistors")
    io.say("2) Missing resistor given Rt and the other (n-1)")
    _dispatch(io, log, {1: _series_total, 2: _series_missing})


def _parallel_group(io: Prompter, log: CalculationLog) -> None:
    io.say("\nParallel(2) modes:")
    io.say("1) Req given R1 and R2")
    io.say("2) R1  given Req and R2")
    io.say("3) R2  given Req and R1")
    _dispatch(io, log, {1: _parallel_req, 2: _parallel_r1, 3: _parallel_r2})


def resistor_menu(io: Prompter, log: CalculationLog) -> None:
    io.say("\n--- Resistor Tools ---")
    io.say("1) Series")
    io.say("2) Parallel (2 resistors)")
    _dispatch(io, log, {1: _series_group, 2: _parallel_group})


# =============================================================================
# 3) AC REACTANCE & RESONANCE
# =============================================================================


def _xl(io: Prompter, log: CalculationLog) -> None:
    f = io.read_float("f (Hz): ")
    l = io.read_float("L (H): ")

    xl = reactance.inductive_reactance(f, l)
    io.say(f"X_L = {xl:.6f} ohms")
    _record(
        log, "AC Inductive Reactance",
        [hertz("f", f), henries("L", l)],
        [ohms("XL", xl)],
    )


def _xl_solve_l(io: Prompter, log: CalculationLog) -> None:
    xl = io.read_float("X_L (ohms): ")
    f = io.read_float("f (Hz): ")

    l = reactance.inductance_from_reactance(xl, f)
    io.say(f"L = {l:.9f} H")
    _record(
        log, "AC Inductive Reactance",
        [ohms("XL", xl), hertz("f", f)],
        [henries("L", l)],
        variant="solve L",
    )


def _xl_solve_f(io: Prompter, log: CalculationLog) -> None:
    xl = io.read_float("X_L (ohms): ")
    l = io.read_float("L (H): ")

    f = reactance.frequency_from_inductive(xl, l)
    io.say(f"f = {f:.6f} Hz")
    _record(
        log, "AC Inductive Reactance",
        [ohms("XL", xl), henries("L", l)],
        [hertz("f", f)],
        variant="solve f",
    )


def _xc(io: Prompter, log: CalculationLog) -> None:
    f = io.read_float("f (Hz): ")
    c = io.read_float("C (F): ")

    xc = reactance.capacitive_reactance(f, c)
    io.say(f"X_C = {xc:.6f} ohms")
    _record(
        log, "AC Capacitive Reactance",
        [hertz("f", f), farads("C", c)],
        [ohms("XC", xc)],
    )


def _xc_solve_c(io: Prompter, log: CalculationLog) -> None:
    xc = io.read_float("X_C (ohms): ")
    f = io.read_float("f (Hz): ")

    c = reactance.capacitance_from_reactance(xc, f)
    io.say(f"C = {c:.9e} F")
    _record(
        log, "AC Capacitive Reactance",
        [ohms("XC", xc), hertz("f", f)],
        [farads("C", c)],
        variant="solve C",
    )


def _xc_solve_f(io: Prompter, log: CalculationLog) -> None:
    xc = io.read_float("X_C (ohms): ")
    c = io.read_float("C (F): ")

    f = reactance.frequency_from_capacitive(xc, c)
    io.say(f"f = {f:.6f} Hz")
    _record(
        log, "AC Capacitive Reactance",
        [ohms("XC", xc), farads("C", c)],
        [hertz("f", f)],
        variant="solve f",
    )


def _resonance_f0(io: Prompter, log: CalculationLog) -> None:
    l = io.read_float("L (H): ")
    c = io.read_float("C (F): ")

    f0 = reactance.resonant_frequency(l, c)
    io.say(f"f0 = {f0:.6f} Hz")
    _record(
        log, "Resonance",
        [henries("L", l, scientific=True), farads("C", c)],
        [hertz("f0", f0)],
    )


def _resonance_l(io: Prompter, log: CalculationLog) -> None:
    f0 = io.read_float("f0 (Hz): ")
    c = io.read_float("C (F): ")

    l = reactance.inductance_for_resonance(f0, c)
    io.say(f"L = {l:.9e} H")
    _record(
        log, "Resonance",
        [hertz("f0", f0), farads("C", c)],
        [henries("L", l, scientific=True)],
        variant="solve L",
    )


def _resonance_c(io: Prompter, log: CalculationLog) -> None:
    f0 = io.read_float("f0 (Hz): ")
    l = io.read_float("L (H): ")

    c = reactance.capacitance_for_resonance(f0, l)
    io.say(f"C = {c:.9e} F")
    _record(
        log, "Resonance",
        [hertz("f0", f0), henries("L", l, scientific=True)],
        [farads("C", c)],
        variant="solve C",
    )


def _inductive_group(io: Prompter, log: CalculationLog) -> None:
    io.say("\nSolve for:")
    io.say("1) X_L given f, L")
    io.say("2) L   given X_L, f")
    io.say("3) f   given X_L, L")
    _dispatch(io, log, {1: _xl, 2: _xl_solve_l, 3: _xl_solve_f})


def _capacitive_group(io: Prompter, log: CalculationLog) -> None:
    io.say("\nSolve for:")
    io.say("1) X_C given f, C")
    io.say("2) C   given X_C, f")
    io.say("3) f   given X_C, C")
    _dispatch(io, log, {1: _xc, 2: _xc_solve_c, 3: _xc_solve_f})


def _resonance_group(io: Prompter, log: CalculationLog) -> None:
    io.say("\nSolve for:")
    io.say("1) f0 given L, C")
    io.say("2) L  given f0, C")
    io.say("3) C  given f0, L")
    _dispatch(io, log, {1: _resonance_f0, 2: _resonance_l, 3: _resonance_c})


def reactance_menu(io: Prompter, log: CalculationLog) -> None:
    io.say("\n--- AC Reactance & Resonance ---")
    io.say("1) Inductive Reactance (X_L)")
    io.say("2) Capacitive Reactance (X_C)")
    io.say("3) Resonance (f0)")
    _dispatch(io, log, {
        1: _inductive_group,
        2: _capacitive_group,
        3: _resonance_group,
    })


# =============================================================================
# 4) RC TRANSIENT
# =============================================================================


def _say_levels(io: Prompter, charge_pct: float, discharge_pct: float) -> None:
    io.say(f"Charge at t: {charge_pct:.2f}%")
    io.say(f"Discharge at t: {discharge_pct:.2f}%")


def _rc_forward(io: Prompter, log: CalculationLog) -> None:
    r = io.read_float("R (ohms): ")
    c = io.read_float("C (F): ")
    t = io.read_float("t (s): ")

    result = rc_transient.transient(r, c, t)
    io.say(f"Tau = {result.tau:.6f} s")
    _say_levels(io, result.charge_pct, result.discharge_pct)
    _record(
        log, "RC Transient",
        [ohms("R", r), farads("C", c), seconds("t", t)],
        [
            seconds("tau", result.tau),
            percent("charge", result.charge_pct),
            percent("discharge", result.discharge_pct),
        ],
    )


def _rc_solve_t(io: Prompter, log: CalculationLog) -> None:
    r = io.read_float("R (ohms): ")
    c = io.read_float("C (F): ")
    pct = io.read_float("Target charge (%): ")

    t = rc_transient.time_to_charge(r, c, pct)
    io.say(f"t = {t:.6f} s")
    _record(
        log, "RC", [ohms("R", r), farads("C", c), percent("charge", pct)],
        [seconds("t", t)],
        variant="solve t",
    )


def _rc_from_tau(io: Prompter, log: CalculationLog) -> None:
    tau = io.read_float("Tau (s): ")
    t = io.read_float("t (s): ")

    levels = rc_transient.transient_from_tau(tau, t)
    _say_levels(io, levels.charge_pct, levels.discharge_pct)
    _record(
        log, "RC from tau,t",
        [seconds("tau", tau), seconds("t", t)],
        [percent("charge", levels.charge_pct), percent("discharge", levels.discharge_pct)],
    )


def _rc_solve_c(io: Prompter, log: CalculationLog) -> None:
    r = io.read_float("R (ohms): ")
    pct = io.read_float("Target charge (%): ")
    t = io.read_float("t (s): ")

    solution = rc_transient.capacitance_for_charge(r, pct, t)
    io.say(f"C = {solution.value:.9e} F (Tau = {solution.tau:.6f} s)")
    _record(
        log, "RC",
        [ohms("R", r), percent("charge", pct), seconds("t", t)],
        [farads("C", solution.value)],
        variant="solve C",
        annotation=seconds("tau", solution.tau).render(),
    )


def _rc_solve_r(io: Prompter, log: CalculationLog) -> None:
    c = io.read_float("C (F): ")
    pct = io.read_float("Target charge (%): ")
    t = io.read_float("t (s): ")

    solution = rc_transient.resistance_for_charge(c, pct, t)
    io.say(f"R = {solution.value:.6f} ohms (Tau = {solution.tau:.6f} s)")
    _record(
        log, "RC",
        [farads("C", c), percent("charge", pct), seconds("t", t)],
        [ohms("R", solution.value)],
        variant="solve R",
        annotation=seconds("tau", solution.tau).render(),
    )


def rc_transient_menu(io: Prompter, log: CalculationLog) -> None:
    io.say("\n--- RC Transient Calculator ---")
    io.say("1) Given R, C, t  -> tau, %charge, %discharge")
    io.say("2) Given R, C, %charge -> t")
    io.say("3) Given tau, t   -> %charge, %discharge")
    io.say("4) Given R, %charge, t -> C")
    io.say("5) Given C, %charge, t -> R")
    _dispatch(io, log, {
        1: _rc_forward,
        2: _rc_solve_t,
        3: _rc_from_tau,
        4: _rc_solve_c,
        5: _rc_solve_r,
    })


# =============================================================================
# 5) POWER
# =============================================================================


def _power_p(io: Prompter, log: CalculationLog) -> None:
    v = io.read_float("V (volts): ")
    i = io.read_float("I (amps):  ")

    p = power.power(v, i)
    io.say(f"P = {p:.6f} W")
    _record(log, "Power", [volts("V", v), amps("I", i)], [watts("P", p)])


def _power_v(io: Prompter, log: CalculationLog) -> None:
    p = io.read_float("P (watts): ")
    i = io.read_float("I (amps):  ")

    v = power.voltage_from_power(p, i)
    io.say(f"V = {v:.6f} V")
    _record(
        log, "Power", [watts("P", p), amps("I", i)], [volts("V", v)],
        variant="solve V",
    )


def _power_i(io: Prompter, log: CalculationLog) -> None:
    p = io.read_float("P (watts): ")
    v = io.read_float("V (volts): ")

    i = power.current_from_power(p, v)
    io.say(f"I = {i:.6f} A")
    _record(
        log, "Power", [watts("P", p), volts("V", v)], [amps("I", i)],
        variant="solve I",
    )


def power_menu(io: Prompter, log: CalculationLog) -> None:
    io.say("\n--- Power Equation ---")
    io.say("Choose using P = V x I:")
    io.say("1) Power  (P)  given V and I")
    io.say("2) Voltage (V) given P and I")
    io.say("3) Current (I) given P and V")
    _dispatch(io, log, {1: _power_p, 2: _power_v, 3: _power_i})
