# -----------------------------------------------------------------------------
# Procedure registry
# Purpose: Map each formula id to the pure function that computes it.
#   - A procedure takes a ResolvedContext and returns (result, steps).
#   - `@procedure(id, *symbols)` registers it along with the exact context
#     keys it reads, so catalog entries can be audited against it.
# Discipline modules register on import; see efe.router.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from ..types import ResolvedContext

ProcedureFn = Callable[[ResolvedContext], Tuple[float, List[str]]]


@dataclass(frozen=True)
class Procedure:
    formula_id: str
    symbols: Tuple[str, ...]   # context keys consumed, exact strings
    fn: ProcedureFn

    def __call__(self, ctx: ResolvedContext) -> Tuple[float, List[str]]:
        return self.fn(ctx)


REGISTRY: Dict[str, Procedure] = {}


def procedure(formula_id: str, *symbols: str):
    def register(fn: ProcedureFn) -> ProcedureFn:
        if formula_id in REGISTRY:
            raise ValueError(f"Procedure already registered for '{formula_id}'")
        REGISTRY[formula_id] = Procedure(formula_id, tuple(symbols), fn)
        return fn
    return register
