# -----------------------------------------------------------------------------
# Safe mathematical evaluator (controlled environment)
# Purpose:
#   Evaluate a purely numeric expression string with SymPy's parser, exposing
#   only whitelisted functions/constants. Anything that does not reduce to a
#   single finite real number is rejected.
# Safety:
#   - Every identifier must be a whitelisted name; anything else is refused
#     before the parser runs, so no implicit Symbols are ever created.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
import re
from tokenize import NAME
from typing import Dict, List

import sympy
from sympy.parsing.sympy_parser import (
    convert_xor,
    implicit_multiplication_application,
    parse_expr,
    standard_transformations,
)


class ExpressionError(Exception): pass


# Whitelisted math functions/constants (log and ln are both natural log)
ALLOWED: Dict[str, object] = {
    "sqrt": sympy.sqrt, "sin": sympy.sin, "cos": sympy.cos, "tan": sympy.tan,
    "asin": sympy.asin, "acos": sympy.acos, "atan": sympy.atan,
    "log": sympy.log, "ln": sympy.log,
    "log10": lambda x: sympy.log(x, 10), "log2": lambda x: sympy.log(x, 2),
    "exp": sympy.exp, "abs": sympy.Abs,
    "pi": sympy.pi, "e": sympy.E,
}


def _integers_as_floats(tokens, local_dict, global_dict):
    # Integer literals become Floats: exact powers such as 9^9^9 are unbounded,
    # float powers overflow to inf and are rejected below.
    return [(NAME, "Float") if tok == (NAME, "Integer") else tok for tok in tokens]


# '^' is exponentiation and "2 pi" / "2(3+4)" are products.
_TRANSFORMS = standard_transformations + (
    _integers_as_floats, implicit_multiplication_application, convert_xor,
)

# One scan, numbers before names, so the 'e' of 1e-05 and the 'x' of 2x
# each land in the right token. Names are Unicode-aware ('σx', 'L₀').
NUMBER = r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
IDENT = r"[^\W\d]\w*"
TOKEN = re.compile(rf"(?P<number>{NUMBER})|(?P<name>{IDENT})")


def unknown_names(expr: str) -> List[str]:
    # Names that would not resolve to a whitelisted function or constant.
    seen: List[str] = []
    for m in TOKEN.finditer(expr):
        tok = m.group("name")
        if tok and tok not in ALLOWED and tok not in seen:
            seen.append(tok)
    return seen


def evaluate_expression(expr: str) -> float:
    """
    Evaluate a numeric expression, e.g. "sqrt(3) * 480 * cos(pi/6)".

    Parameters
    ----------
    expr : str
        Arithmetic over numbers with + - * / ^ **, parentheses, and the
        functions/constants in ALLOWED.

    Returns
    -------
    float
        The evaluated result.

    Raises
    ------
    ExpressionError
        On unknown names, syntax errors, or results that are complex,
        infinite or undefined (division by zero, log(0), ...).
    """
    text = (expr or "").strip()
    if not text:
        raise ExpressionError("empty expression")
    unknown = unknown_names(text)
    if unknown:
        names = ", ".join(f"'{u}'" for u in unknown)
        raise ExpressionError(f"unresolved symbol(s) {names} in '{text}'")
    try:
        parsed = parse_expr(text, local_dict=dict(ALLOWED),
                            transformations=_TRANSFORMS, evaluate=True)
    except Exception as exc:  # parse_expr surfaces SyntaxError, TokenError, TypeError, ...
        raise ExpressionError(f"cannot parse '{text}': {exc}") from exc
    if not isinstance(parsed, sympy.Expr) or parsed.free_symbols:
        raise ExpressionError(f"'{text}' does not reduce to a number")
    value = parsed.evalf()
    if value.has(sympy.zoo, sympy.nan, sympy.oo) or value.is_real is not True:
        raise ExpressionError(f"'{text}' evaluates to a non-finite or complex value ({value})")
    try:
        result = float(value)
    except (OverflowError, TypeError) as exc:
        raise ExpressionError(f"'{text}' does not evaluate to a float ({exc})") from exc
    if not math.isfinite(result):
        raise ExpressionError(f"'{text}' evaluates to a non-finite value")
    return result
