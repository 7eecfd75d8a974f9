from efe.types import Formula, VariableSpec
from efe.validator import validate, validate_inputs

HEIGHT = VariableSpec(symbol="h", name="Height", unit="m", min=0.001, max=10)


def test_in_range_has_no_warning():
    assert validate(HEIGHT, 1.0) == []

def test_bounds_are_inclusive():
    assert validate(HEIGHT, 0.001) == []
    assert validate(HEIGHT, 10) == []

def test_below_minimum():
    assert validate(HEIGHT, 0) == ["Height is below minimum recommended value (0.001)"]

def test_above_maximum_prints_integral_bound_plainly():
    assert validate(HEIGHT, 11) == ["Height exceeds maximum recommended value (10)"]

def test_unbounded_variable_never_warns():
    free = VariableSpec(symbol="x", name="X", unit="")
    assert validate(free, -1e300) == []
    assert validate(free, 1e300) == []

def test_warnings_follow_declaration_order_and_cover_constants():
    formula = Formula(
        id="t", name="T", description="", formula="y = a + b", category="C",
        discipline="D", difficulty="Basic",
        variables=(
            VariableSpec(symbol="a", name="Alpha", unit="", max=1),
            VariableSpec(symbol="b", name="Beta", unit="", value=5, min=10),
        ),
    )
    assert validate_inputs(formula, {"a": 2, "b": 5}) == [
        "Alpha exceeds maximum recommended value (1)",
        "Beta is below minimum recommended value (10)",
    ]
