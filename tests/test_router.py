import pytest

from efe.procedures.registry import REGISTRY, procedure
from efe.router import audit_catalog, registered_ids, select_procedure
from efe.types import Formula, VariableSpec


def test_registry_size():
    assert len(registered_ids()) == 69
    assert registered_ids() == sorted(registered_ids())

def test_shipped_catalog_is_consistent(shipped_catalog):
    assert audit_catalog(shipped_catalog) == []
    assert set(registered_ids()) == {f.id for f in shipped_catalog}

def test_unknown_id_routes_to_fallback():
    assert select_procedure("custom-1") is None

def test_duplicate_registration_raises():
    with pytest.raises(ValueError, match="already registered for 'ohms-law'"):
        procedure("ohms-law", "I", "R")(lambda ctx: (0.0, []))

def test_audit_reports_symbol_mismatches(catalog):
    original = catalog.get("ohms-law")
    catalog.formulas[catalog.formulas.index(original)] = Formula(
        id="ohms-law", name=original.name, description="", formula=original.formula,
        category=original.category, discipline=original.discipline, difficulty=original.difficulty,
        variables=(VariableSpec("I", "Current", "A"), VariableSpec("Rx", "Resistance", "Ω")),
    )
    findings = audit_catalog(catalog)
    assert "ohms-law: procedure reads undeclared symbol(s) R" in findings
    assert "ohms-law: declared symbol(s) Rx never read by the procedure" in findings
    assert REGISTRY["ohms-law"].symbols == ("I", "R")
