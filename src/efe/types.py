# -----------------------------------------------------------------------------
# Types module: Shared dataclasses for the evaluation engine
# Purpose:
#   Define immutable representations for formulas, their variables, worked
#   examples, the per-call resolved context, and evaluation results used
#   across the catalog, router, procedures, and engine.
# -----------------------------------------------------------------------------

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

DIFFICULTIES = ("Basic", "Intermediate", "Advanced")


class MissingSymbolError(KeyError):
    """Raised when a procedure reads a symbol the resolved context lacks."""

    def __init__(self, symbol: str):
        super().__init__(symbol)
        self.symbol = symbol

    def __str__(self) -> str:
        return f"symbol '{self.symbol}' is not declared by the formula"


@dataclass(frozen=True)
class VariableSpec:
    """
    Metadata for one named physical quantity of a formula.
    - symbol: exact lookup key (may contain Unicode subscripts/Greek letters)
    - unit: display string only, never converted
    - value: fixed default; when present the variable is a constant
    - min/max: inclusive advisory bounds, None means unbounded on that side
    """
    symbol: str
    name: str
    unit: str
    value: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    description: str = ""

    @property
    def is_constant(self) -> bool:
        return self.value is not None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"symbol": self.symbol, "name": self.name, "unit": self.unit}
        for key in ("value", "min", "max"):
            if getattr(self, key) is not None:
                out[key] = getattr(self, key)
        if self.description:
            out["description"] = self.description
        return out


@dataclass(frozen=True)
class FormulaExample:
    """
    Worked example attached to a formula; doubles as a regression fixture.
    `tolerance` is relative, loosened only where rounding compounds.
    """
    title: str
    inputs: Dict[str, float]
    expected_result: float
    description: str = ""
    tolerance: float = 1e-3

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title, "inputs": dict(self.inputs),
            "expected_result": self.expected_result,
            "description": self.description, "tolerance": self.tolerance,
        }


@dataclass(frozen=True)
class Formula:
    """
    Represents a single named engineering computation.
    Example:
        id: "stress-formula"
        name: "Mechanical Stress (σ)"
        formula: "σ = F / A"       (display text; also the fallback source)
        units: "Pa"
    Attributes:
        - variables: ordered VariableSpec tuple (entry order, not dispatch order)
        - tags: free-form keywords used by catalog search
        - custom: True for user-authored formulas built at runtime
    """
    id: str
    name: str
    description: str
    formula: str
    variables: Tuple[VariableSpec, ...]
    category: str
    discipline: str
    difficulty: str
    units: str = ""
    tags: Tuple[str, ...] = ()
    examples: Tuple[FormulaExample, ...] = ()
    references: Tuple[str, ...] = ()
    custom: bool = False

    @property
    def symbols(self) -> List[str]:
        return [v.symbol for v in self.variables]

    def variable(self, symbol: str) -> Optional[VariableSpec]:
        return next((v for v in self.variables if v.symbol == symbol), None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id, "name": self.name, "description": self.description,
            "formula": self.formula, "category": self.category,
            "discipline": self.discipline, "difficulty": self.difficulty,
            "units": self.units, "tags": list(self.tags),
            "variables": [v.to_dict() for v in self.variables],
            "examples": [e.to_dict() for e in self.examples],
            "references": list(self.references), "custom": self.custom,
        }


class ResolvedContext(Mapping):
    """
    Read-only mapping from exact symbol string to effective numeric value.
    Built fresh per evaluation call; no Unicode normalization is applied,
    so 'σx' and 'σₓ' are different keys.
    """

    def __init__(self, values: Dict[str, float]):
        self._values = dict(values)

    def __getitem__(self, symbol: str) -> float:
        try:
            return self._values[symbol]
        except KeyError:
            raise MissingSymbolError(symbol) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ResolvedContext({self._values!r})"


@dataclass(frozen=True)
class EvaluationResult:
    # Structured response handed back to callers; never retained by the engine.
    result: float
    steps: Tuple[str, ...]
    units: str
    accuracy: float
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "result": self.result, "steps": list(self.steps), "units": self.units,
            "accuracy": self.accuracy, "warnings": list(self.warnings),
        }
