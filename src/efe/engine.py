# -----------------------------------------------------------------------------
# Evaluation engine: end-to-end numeric pipeline for one formula
# Responsibilities:
#   • Coerce caller inputs and build the per-call ResolvedContext
#   • Advisory range validation (warnings never block evaluation)
#   • Dispatch by formula id to a registered procedure, else the fallback
#   • Derivation steps, final "Result:" line, accuracy score
#   • Worked-example regression checks against the catalog fixtures
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .catalog import Catalog
from .fallback import evaluate_fallback
from .formatting import fmt, result_line
from .router import select_procedure
from .safe_eval import ExpressionError
from .scoring import score
from .types import EvaluationResult, Formula, MissingSymbolError, ResolvedContext
from .validator import validate_inputs

logger = logging.getLogger(__name__)


class EvaluationError(Exception):
    """Raised when no numeric result can be produced for a formula."""

    def __init__(self, formula_id: str, message: str):
        super().__init__(f"{formula_id}: {message}")
        self.formula_id = formula_id


class InvalidInputError(EvaluationError):
    """A caller value that cannot be read as a number."""


def _is_unset(raw: Any) -> bool:
    if raw is None:
        return True
    if isinstance(raw, str) and not raw.strip():
        return True
    return isinstance(raw, float) and math.isnan(raw)


def _coerce(formula_id: str, symbol: str, raw: Any) -> Optional[float]:
    # None / NaN / blank mean "unset"; 0 is a real value.
    if _is_unset(raw):
        return None
    if isinstance(raw, bool):
        raise InvalidInputError(formula_id, f"input '{symbol}' must be a number, got {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(formula_id, f"input '{symbol}' must be a number, got {raw!r}") from None
    if math.isnan(value):
        return None
    if math.isinf(value):
        raise InvalidInputError(formula_id, f"input '{symbol}' must be finite")
    return value


def resolve(formula: Formula, inputs: Optional[Mapping[str, Any]] = None) -> ResolvedContext:
    """
    Effective value per declared symbol:
      fixed `value` (constants win over caller input) -> caller value -> 0.
    Inputs for undeclared symbols are ignored.
    """
    inputs = dict(inputs or {})
    declared = set(formula.symbols)
    ignored = sorted(s for s in inputs if s not in declared)
    if ignored:
        logger.debug("%s: ignoring undeclared input(s) %s", formula.id, ignored)

    values: Dict[str, float] = {}
    for var in formula.variables:
        supplied = _coerce(formula.id, var.symbol, inputs.get(var.symbol))
        if var.is_constant:
            if supplied is not None and supplied != var.value:
                logger.debug("%s: '%s' is fixed at %s; caller value %s ignored",
                             formula.id, var.symbol, var.value, supplied)
            values[var.symbol] = var.value
        elif supplied is not None:
            values[var.symbol] = supplied
        else:
            values[var.symbol] = 0.0
    return ResolvedContext(values)


def _given_lines(formula: Formula, ctx: ResolvedContext) -> List[str]:
    lines = []
    for var in formula.variables:
        lines.append(f"  {var.symbol} = {fmt(ctx[var.symbol])} {var.unit}".rstrip())
    return lines


class Evaluator:
    def __init__(self, catalog: Optional[Catalog] = None):
        # Catalog is only needed for id lookups; evaluate() takes descriptors.
        self.catalog = catalog

    def resolve(self, formula: Formula, inputs: Optional[Mapping[str, Any]] = None) -> ResolvedContext:
        return resolve(formula, inputs)

    def _compute(self, formula: Formula, ctx: ResolvedContext) -> Tuple[float, List[str]]:
        proc = select_procedure(formula.id)
        if proc is not None:
            logger.debug("%s: dispatching to %s", formula.id, proc.fn.__name__)
            try:
                return proc(ctx)
            except MissingSymbolError as exc:
                raise EvaluationError(formula.id, f"procedure needs symbol '{exc.symbol}', "
                                                  "which the formula does not declare") from exc
            except ZeroDivisionError as exc:
                raise EvaluationError(formula.id, "division by zero") from exc
            except OverflowError as exc:
                raise EvaluationError(formula.id, f"numeric overflow ({exc})") from exc
            except ValueError as exc:
                raise EvaluationError(formula.id, f"math domain error ({exc})") from exc

        logger.warning("%s: no registered procedure, evaluating formula text directly", formula.id)
        try:
            return evaluate_fallback(formula.formula, ctx)
        except ExpressionError as exc:
            raise EvaluationError(formula.id, str(exc)) from exc

    def evaluate(self, formula: Formula, inputs: Optional[Mapping[str, Any]] = None) -> EvaluationResult:
        """
        Evaluate `formula` against caller `inputs` ({symbol: number}).
        Returns an EvaluationResult; raises EvaluationError (naming the formula
        id) when no finite number can be produced.
        """
        ctx = self.resolve(formula, inputs)
        logger.debug("%s: resolved context %r", formula.id, ctx)
        warnings = validate_inputs(formula, ctx)

        result, proc_steps = self._compute(formula, ctx)
        if isinstance(result, complex):
            raise EvaluationError(formula.id, f"result is complex ({result})")
        result = float(result)
        if not math.isfinite(result):
            raise EvaluationError(formula.id, f"result is not finite ({result})")

        steps = [f"Formula: {formula.formula}", "Given values:"]
        steps.extend(_given_lines(formula, ctx))
        steps.extend(proc_steps)
        steps.append(result_line(result, formula.units))
        return EvaluationResult(
            result=result,
            steps=tuple(steps),
            units=formula.units or "",
            accuracy=score(len(warnings)),
            warnings=tuple(warnings),
        )

    def evaluate_id(self, formula_id: str, inputs: Optional[Mapping[str, Any]] = None) -> EvaluationResult:
        # Raises CatalogError for ids the catalog does not know.
        if self.catalog is None:
            self.catalog = Catalog.default()
        return self.evaluate(self.catalog.get(formula_id), inputs)


_default: Optional[Evaluator] = None


def _default_evaluator() -> Evaluator:
    global _default
    if _default is None:
        _default = Evaluator()
    return _default


def evaluate(formula: Formula, inputs: Optional[Mapping[str, Any]] = None) -> EvaluationResult:
    return _default_evaluator().evaluate(formula, inputs)


# ---------------- worked-example regression checks ----------------

@dataclass
class ExampleCheck:
    title: str
    expected: float
    actual: Optional[float]
    relative_error: Optional[float]
    tolerance: float
    passed: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title, "expected": self.expected, "actual": self.actual,
            "relative_error": self.relative_error, "tolerance": self.tolerance,
            "passed": self.passed, "error": self.error,
        }


def relative_error(actual: float, expected: float) -> float:
    if expected == 0:
        return abs(actual)
    return abs(actual - expected) / abs(expected)


def check_examples(formula: Formula, evaluator: Optional[Evaluator] = None) -> List[ExampleCheck]:
    """
    Run every worked example of `formula` and compare against its expected
    result. A failing evaluation is reported as a failed row, not raised.
    """
    evaluator = evaluator or _default_evaluator()
    rows: List[ExampleCheck] = []
    for ex in formula.examples:
        try:
            actual = evaluator.evaluate(formula, ex.inputs).result
        except EvaluationError as exc:
            logger.warning("%s: example '%s' failed to evaluate: %s", formula.id, ex.title, exc)
            rows.append(ExampleCheck(ex.title, ex.expected_result, None, None, ex.tolerance, False, str(exc)))
            continue
        err = relative_error(actual, ex.expected_result)
        passed = err <= ex.tolerance
        if not passed:
            logger.warning("%s: example '%s' expected %s, got %s (rel. error %.2e)",
                           formula.id, ex.title, ex.expected_result, actual, err)
        rows.append(ExampleCheck(ex.title, ex.expected_result, actual, err, ex.tolerance, passed))
    return rows
