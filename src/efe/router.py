# -----------------------------------------------------------------------------
# Router
# Purpose: Resolve a formula id to its registered procedure, and audit a
# catalog against the registry.
#   - Importing this module imports every discipline module, which populates
#     REGISTRY as a side effect.
#   - Unknown ids resolve to None; the engine then takes the fallback path.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import TYPE_CHECKING, List, Optional

from .procedures.registry import REGISTRY, Procedure
from .procedures import chemical, civil, electrical, interdisciplinary, materials, mechanical  # noqa: F401

if TYPE_CHECKING:
    from .catalog import Catalog


def select_procedure(formula_id: str) -> Optional[Procedure]:
    return REGISTRY.get(formula_id)


def registered_ids() -> List[str]:
    return sorted(REGISTRY)


def audit_catalog(catalog: "Catalog") -> List[str]:
    """
    Cross-check every catalog formula that has a registered procedure.
    A finding is reported when the declared variable symbols differ from the
    symbols the procedure reads (an authoring defect: the procedure would
    fail, or a declared input would be silently unused).
    """
    findings: List[str] = []
    for formula in catalog:
        proc = REGISTRY.get(formula.id)
        if proc is None:
            continue
        declared, consumed = set(formula.symbols), set(proc.symbols)
        missing = sorted(consumed - declared)
        unused = sorted(declared - consumed)
        if missing:
            findings.append(f"{formula.id}: procedure reads undeclared symbol(s) {', '.join(missing)}")
        if unused:
            findings.append(f"{formula.id}: declared symbol(s) {', '.join(unused)} never read by the procedure")
    return findings
