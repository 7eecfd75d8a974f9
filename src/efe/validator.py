# -----------------------------------------------------------------------------
# Input validator
# Purpose: Advisory range checks of resolved variable values against the
# declared [min, max] bounds of a formula. Never raises and never blocks an
# evaluation; warnings accumulate in variable-declaration order.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import List, Mapping

from .types import Formula, VariableSpec


def _bound(x: float) -> str:
    # Bounds print as authored: integral floats without a trailing ".0".
    if float(x).is_integer() and abs(x) < 1e16:
        return str(int(x))
    return repr(float(x))


def validate(variable: VariableSpec, value: float) -> List[str]:
    warnings: List[str] = []
    if variable.min is not None and value < variable.min:
        warnings.append(f"{variable.name} is below minimum recommended value ({_bound(variable.min)})")
    if variable.max is not None and value > variable.max:
        warnings.append(f"{variable.name} exceeds maximum recommended value ({_bound(variable.max)})")
    return warnings


def validate_inputs(formula: Formula, context: Mapping[str, float]) -> List[str]:
    """
    Run `validate` over every declared variable of `formula`.
    Constants are checked too: a fixed value configured outside its own
    bounds still surfaces a warning.
    """
    warnings: List[str] = []
    for var in formula.variables:
        warnings.extend(validate(var, context.get(var.symbol, 0.0)))
    return warnings

