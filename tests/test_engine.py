import math

import pytest

from efe.engine import EvaluationError, InvalidInputError, check_examples, evaluate, relative_error, resolve


def test_stress_steps_and_result(evaluator):
    res = evaluator.evaluate_id("stress-formula", {"F": 10000, "A": 0.001})
    assert res.result == pytest.approx(1e7)
    assert res.units == "Pa"
    assert res.steps == (
        "Formula: σ = F / A",
        "Given values:",
        "  F = 10000 N",
        "  A = 0.001 m²",
        "σ = F / A = 10000 / 0.001",
        "Result: 1.0000e+7 Pa",
    )
    assert res.accuracy == 1.0
    assert res.warnings == ()

@pytest.mark.parametrize("formula_id, inputs, expected", [
    ("stress-formula", {"F": 10000, "A": 0.001}, 10000000),
    ("ohms-law", {"I": 0.02, "R": 220}, 4.4),
    ("beam-deflection", {"w": 5000, "L": 6, "E": 200000000000, "I": 0.0001}, 0.00421875),
    ("ac-impedance", {"R": 100, "X": 75}, 125),
])
def test_reference_instances(evaluator, formula_id, inputs, expected):
    assert evaluator.evaluate_id(formula_id, inputs).result == pytest.approx(expected, rel=1e-6)

def test_three_phase_angle_is_in_degrees(evaluator):
    res = evaluator.evaluate_id("three-phase-power", {"VL": 480, "IL": 100, "φ": 30})
    assert res.result == pytest.approx(72111, rel=2e-3)
    assert res.result == pytest.approx(math.sqrt(3) * 480 * 100 * math.cos(math.pi / 6))

def test_result_text_matches_step_text(evaluator):
    res = evaluator.evaluate_id("power-formula", {"F": 2000, "v": 30})
    assert res.steps[-1] == "Result: 60000 W"

def test_constant_wins_over_caller_value(shipped_catalog):
    f = shipped_catalog.get("ideal-gas-law")
    assert resolve(f, {"R": 1.0, "n": 1})["R"] == pytest.approx(8.314)
    with_override = evaluate(f, {"n": 1, "R": 1.0, "T": 273.15, "V": 0.0224})
    without = evaluate(f, {"n": 1, "T": 273.15, "V": 0.0224})
    assert with_override.result == without.result

def test_unset_means_zero_but_zero_is_a_value(shipped_catalog):
    f = shipped_catalog.get("power-formula")
    ctx = resolve(f, {"F": None, "v": ""})
    assert dict(ctx) == {"F": 0.0, "v": 0.0}
    assert resolve(f, {"F": 0, "v": float("nan")})["F"] == 0.0
    assert evaluate(f, {}).steps[-1] == "Result: 0 W"

def test_numeric_strings_are_coerced(shipped_catalog):
    assert evaluate(shipped_catalog.get("ohms-law"), {"I": "0.02", "R": "220"}).result == pytest.approx(4.4)

def test_undeclared_inputs_are_ignored(shipped_catalog):
    res = evaluate(shipped_catalog.get("ohms-law"), {"I": 1, "R": 2, "Q": 99})
    assert res.result == 2.0

@pytest.mark.parametrize("bad", ["abc", [1], True, float("inf")])
def test_non_numeric_input_rejected(shipped_catalog, bad):
    with pytest.raises(InvalidInputError, match="ohms-law: input 'I'"):
        evaluate(shipped_catalog.get("ohms-law"), {"I": bad, "R": 1})

def test_warnings_are_monotonic(shipped_catalog):
    f = shipped_catalog.get("stress-formula")
    clean = evaluate(f, {"F": 10, "A": 1})
    one = evaluate(f, {"F": -10, "A": 1})
    two = evaluate(f, {"F": -10, "A": 1e-9})
    assert len(clean.warnings) < len(one.warnings) < len(two.warnings)
    assert clean.accuracy >= one.accuracy >= two.accuracy
    assert one.warnings == ("Applied Force is below minimum recommended value (0)",)
    assert two.accuracy == pytest.approx(0.8)

def test_warnings_never_block(shipped_catalog):
    res = evaluate(shipped_catalog.get("transformer-regulation"), {"E_2nl": 60000, "V_2fl": 60000})
    assert res.result == 0.0
    assert len(res.warnings) == 2

def test_division_by_zero_names_the_formula(shipped_catalog):
    with pytest.raises(EvaluationError, match="stress-formula: division by zero") as err:
        evaluate(shipped_catalog.get("stress-formula"), {"F": 1, "A": 0})
    assert err.value.formula_id == "stress-formula"

def test_math_domain_error_is_wrapped(shipped_catalog):
    with pytest.raises(EvaluationError, match="fractal-dimension"):
        evaluate(shipped_catalog.get("fractal-dimension"), {"N": 0, "r": 0.5})

def test_fallback_for_custom_formula(catalog, evaluator):
    f = catalog.add_custom("Sum", "y = a + b", [{"symbol": "a", "name": "A"}, {"symbol": "b", "name": "B"}])
    res = evaluator.evaluate(f, {"a": 2, "b": 3})
    assert res.result == 5.0
    assert "Direct evaluation: 2 + 3" in res.steps
    assert res.steps[-1] == "Result: 5"

def test_fallback_unresolved_symbol_is_fatal(catalog, evaluator):
    f = catalog.add_custom("Broken", "y = a + c", [{"symbol": "a", "name": "A"}])
    with pytest.raises(EvaluationError, match=f"{f.id}: unresolved symbol.*'c'"):
        evaluator.evaluate(f, {"a": 2})

def test_fallback_respects_constants(catalog, evaluator):
    f = catalog.add_custom("Weight", "W = m × g", [
        {"symbol": "m", "name": "Mass", "unit": "kg"},
        {"symbol": "g", "name": "Gravity", "unit": "m/s²", "value": 9.81},
    ], units="N")
    assert evaluator.evaluate(f, {"m": 10, "g": 1}).result == pytest.approx(98.1)

def test_check_examples_reports_rows(shipped_catalog):
    rows = check_examples(shipped_catalog.get("heat-exchanger-lmtd"))
    assert [r.title for r in rows] == ["Counterflow Cooler", "Balanced Counterflow"]
    assert all(r.passed for r in rows)
    assert rows[1].actual == pytest.approx(25.0)

def test_relative_error_against_zero():
    assert relative_error(0.0, 0.0) == 0.0
    assert relative_error(110.0, 100.0) == pytest.approx(0.1)

def test_result_to_dict(evaluator):
    d = evaluator.evaluate_id("ohms-law", {"I": 0.02, "R": 220}).to_dict()
    assert set(d) == {"result", "steps", "units", "accuracy", "warnings"}
    assert isinstance(d["steps"], list)
