import math

import pytest

from efe.catalog import Catalog
from efe.engine import evaluate, relative_error
from efe.procedures.registry import REGISTRY
from efe.router import select_procedure
from efe.types import ResolvedContext

_CATALOG = Catalog.default()
EXAMPLES = [
    pytest.param(f, ex, id=f"{f.id}:{ex.title}")
    for f in _CATALOG for ex in f.examples
]


@pytest.mark.parametrize("formula, example", EXAMPLES)
def test_worked_example(formula, example):
    res = evaluate(formula, example.inputs)
    assert relative_error(res.result, example.expected_result) <= example.tolerance

def test_every_formula_has_a_procedure():
    assert all(select_procedure(f.id) is not None for f in _CATALOG)

def test_mohr_reports_both_branches_and_returns_the_maximum():
    proc = REGISTRY["mohr-circle-analysis"]
    result, steps = proc(ResolvedContext({"σₓ": 5e7, "σᵧ": 3e7, "τₘᵧ": 2e7}))
    assert result == pytest.approx(4e7 + math.sqrt(5e14))
    assert any(s.startswith("σ₁ = ") and s.endswith("6.2361e+7 Pa") for s in steps)
    assert any(s.startswith("σ₂ = ") and s.endswith("1.7639e+7 Pa") for s in steps)

def test_mohr_variants_do_not_share_symbols():
    # 'σx' and 'σₓ' are different keys; no normalization happens
    plain = REGISTRY["mohr-circle-stress"].symbols
    subscript = REGISTRY["mohr-circle-analysis"].symbols
    assert not set(plain) & set(subscript)

def test_terzaghi_shows_each_term():
    ctx = ResolvedContext({"c": 10000, "γ": 18000, "D": 1.5, "B": 2, "Nc": 20, "Nq": 10, "Nγ": 8})
    result, steps = REGISTRY["soil-bearing-capacity-terzaghi"](ctx)
    assert result == pytest.approx(614000)
    assert "cNc = 10000 × 20 = 200000 Pa" in steps
    assert "γDNq = 18000 × 1.5 × 10 = 270000 Pa" in steps
    assert "0.5γBNγ = 0.5 × 18000 × 2 × 8 = 144000 Pa" in steps

def test_lmtd_equal_differences():
    result, _ = REGISTRY["heat-exchanger-lmtd"](ResolvedContext({"ΔT_1": 40.0, "ΔT_2": 40.0}))
    assert result == 40.0

@pytest.mark.parametrize("formula_id, inputs", [
    ("mohr-coulomb-failure", {"c": 0, "σ": 1000, "φ": 45}),
    ("grain-boundary-energy", {"γ_s": 1, "θ": 180}),
])
def test_angles_are_degrees(formula_id, inputs):
    res = evaluate(_CATALOG.get(formula_id), inputs)
    expected = {"mohr-coulomb-failure": 1000.0, "grain-boundary-energy": 1.0}[formula_id]
    assert res.result == pytest.approx(expected)

def test_faraday_sign():
    res = evaluate(_CATALOG.get("maxwell-faraday"), {"N": 100, "dΦ/dt": -0.01})
    assert res.result == pytest.approx(1.0)
