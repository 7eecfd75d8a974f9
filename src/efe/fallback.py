# -----------------------------------------------------------------------------
# Fallback evaluator
# Purpose: Last-resort path for formula ids with no registered procedure
# (user-authored formulas, unregistered catalog entries). Substitutes resolved
# values into the display formula text and evaluates the resulting arithmetic
# through safe_eval.
#   "y = a + b", {a: 2, b: 3}  ->  "2.0 + 3.0"  ->  5.0
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import re
from typing import List, Mapping, Tuple

from .formatting import fmt
from .safe_eval import IDENT, NUMBER, ExpressionError, evaluate_expression, unknown_names

logger = logging.getLogger(__name__)

# Display glyphs -> parser-friendly ASCII. Padded with spaces where the glyph
# can touch an identifier ("2πf", "√x").
GLYPHS = (
    ("×", "*"), ("·", "*"), ("⋅", "*"), ("÷", "/"), ("−", "-"),
    ("√", " sqrt "), ("π", " pi "), ("½", "(1/2)"),
    ("²", "**2"), ("³", "**3"), ("⁴", "**4"),
)


def right_hand_side(formula_text: str) -> str:
    # "y = a + b" -> "a + b"; text without '=' is taken whole.
    _, sep, rhs = (formula_text or "").partition("=")
    return (rhs if sep else formula_text or "").strip()


def normalize_glyphs(expr: str) -> str:
    for glyph, ascii_ in GLYPHS:
        expr = expr.replace(glyph, ascii_)
    return " ".join(expr.split())


def _symbol_pattern(symbols: List[str]) -> re.Pattern:
    # Tokenizes numbers, context symbols and other names in one pass.
    # Longest symbol first so 'σx' wins over 'σ'; a symbol must be a whole
    # token, so 'ab' is never read as 'a' followed by 'b'.
    ordered = sorted((s for s in symbols if s), key=len, reverse=True)
    alternation = "|".join(re.escape(s) for s in ordered)
    return re.compile(rf"(?P<number>{NUMBER})|(?P<symbol>{alternation})(?![\w])|(?P<name>{IDENT})")


def _literal(value: float) -> str:
    # Full precision for evaluation; negatives parenthesized so "x^2" stays (x)^2.
    text = repr(float(value))
    return f"({text})" if value < 0 else text


def _display(value: float) -> str:
    return f"({fmt(value)})" if value < 0 else fmt(value)


def substitute(expr: str, context: Mapping[str, float], render=_literal) -> str:
    if not context:
        return expr
    pattern = _symbol_pattern(list(context.keys()))

    def replace(m: re.Match) -> str:
        sym = m.group("symbol")
        if sym is None:
            return m.group(0)
        value = render(context[sym])
        # "2x" -> "2*3.0", not "23.0"
        if m.start() > 0 and (expr[m.start() - 1].isdigit() or expr[m.start() - 1] == "."):
            return f"*{value}"
        return value

    return pattern.sub(replace, expr)


def evaluate_fallback(formula_text: str, context: Mapping[str, float]) -> Tuple[float, List[str]]:
    """
    Evaluate `formula_text` by direct substitution.

    Returns (result, steps) where steps holds one "Direct evaluation: ..." line
    rendered with formatted numbers. Raises ExpressionError when a token is
    left unresolved or the expression cannot be evaluated to a finite number.
    """
    expr = normalize_glyphs(right_hand_side(formula_text))
    if not expr:
        raise ExpressionError("formula text has no expression to evaluate")
    evaluable = substitute(expr, context)
    unresolved = unknown_names(evaluable)
    if unresolved:
        names = ", ".join(f"'{u}'" for u in unresolved)
        raise ExpressionError(f"unresolved symbol(s) {names} in '{expr}'")
    logger.debug("fallback expression: %s", evaluable)
    result = evaluate_expression(evaluable)
    return result, [f"Direct evaluation: {substitute(expr, context, render=_display)}"]
