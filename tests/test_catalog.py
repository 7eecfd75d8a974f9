import pytest

from efe.catalog import Catalog, CatalogError
from efe.types import DIFFICULTIES

MINIMAL = """
formulas:
  - id: add
    name: Sum
    formula: "y = a + b"
    category: Test
    discipline: Test
    difficulty: Basic
    variables:
      - { symbol: a, name: A, unit: "" }
      - { symbol: b, name: B, unit: "", min: 1e-9 }
"""


def test_shipped_catalog_loads(shipped_catalog):
    assert len(shipped_catalog) == 69
    assert shipped_catalog.disciplines() == [
        "Mechanical", "Electrical", "Civil", "Chemical", "Materials Science", "Interdisciplinary",
    ]

def test_shipped_catalog_invariants(shipped_catalog):
    ids = [f.id for f in shipped_catalog]
    assert len(ids) == len(set(ids))
    for f in shipped_catalog:
        assert f.difficulty in DIFFICULTIES
        assert f.examples, f.id
        assert len(f.symbols) == len(set(f.symbols)), f.id
        for v in f.variables:
            if v.min is not None and v.max is not None:
                assert v.min <= v.max, (f.id, v.symbol)
        for ex in f.examples:
            assert set(ex.inputs) <= set(f.symbols), f.id

def test_get_and_contains(shipped_catalog):
    f = shipped_catalog.get("stress-formula")
    assert f.formula == "σ = F / A"
    assert f.symbols == ["F", "A"]
    assert "ohms-law" in shipped_catalog
    assert "nope" not in shipped_catalog

def test_unknown_id(shipped_catalog):
    with pytest.raises(CatalogError, match="Unknown formula id: nope"):
        shipped_catalog.get("nope")

def test_unicode_symbols_kept_verbatim(shipped_catalog):
    assert shipped_catalog.get("mohr-circle-stress").symbols == ["σx", "σy", "τxy"]
    assert shipped_catalog.get("mohr-circle-analysis").symbols == ["σₓ", "σᵧ", "τₘᵧ"]

def test_constants_parsed(shipped_catalog):
    R = shipped_catalog.get("ideal-gas-law").variable("R")
    assert R.is_constant and R.value == pytest.approx(8.314)

def test_exponent_literals_read_as_numbers():
    cat = Catalog.from_yaml_text(MINIMAL)
    assert cat.get("add").variable("b").min == pytest.approx(1e-9)

def test_list_formulas_shape(shipped_catalog):
    row = shipped_catalog.list_formulas()[0]
    assert row["id"] == "stress-formula"
    assert row["symbols"] == ["F", "A"]
    assert row["custom"] is False

@pytest.mark.parametrize("bad, message", [
    (MINIMAL.replace("difficulty: Basic", "difficulty: Easy"), "difficulty"),
    (MINIMAL.replace("symbol: b", "symbol: a"), "duplicate symbol"),
    (MINIMAL.replace('name: B, unit: "", min: 1e-9', 'name: B, unit: "", min: 2, max: 1'), "min > max"),
    (MINIMAL.replace('    name: Sum\n', ''), "missing field 'name'"),
    ("formulas: 3", "'formulas' list"),
    ("formulas: [", "not valid YAML"),
])
def test_malformed_catalog_rejected(bad, message):
    with pytest.raises(CatalogError, match=message):
        Catalog.from_yaml_text(bad)

def test_duplicate_ids_rejected():
    doubled = MINIMAL + MINIMAL.split("formulas:\n", 1)[1]
    with pytest.raises(CatalogError, match="duplicate formula id 'add'"):
        Catalog.from_yaml_text(doubled)

def test_example_with_undeclared_symbol_rejected():
    text = MINIMAL + """    examples:
      - { title: Bad, inputs: { c: 1 }, expected_result: 1 }
"""
    with pytest.raises(CatalogError, match="undeclared symbol 'c'"):
        Catalog.from_yaml_text(text)

def test_add_custom(catalog):
    f = catalog.add_custom("Sum", "y = a + b", [{"symbol": "a", "name": "A"}, {"symbol": "b", "name": "B"}])
    assert f.id == "custom-70"
    assert f.custom
    assert catalog.get("custom-70") is f
    assert len(catalog) == 70

def test_add_custom_ids_do_not_collide(catalog):
    first = catalog.add_custom("One", "y = a", [{"symbol": "a", "name": "A"}])
    second = catalog.add_custom("Two", "y = a", [{"symbol": "a", "name": "A"}])
    assert first.id != second.id

@pytest.mark.parametrize("formula, variables, message", [
    ("", [{"symbol": "a", "name": "A"}], "formula text is required"),
    ("y = a", [], "at least one variable"),
    ("y = a", [{"symbol": "", "name": "A"}], "without a symbol"),
    ("y = a", [{"symbol": "a"}], "has no name"),
    ("y = a", [{"symbol": "a", "name": "A"}, {"symbol": "a", "name": "B"}], "duplicate symbol"),
])
def test_add_custom_validation(catalog, formula, variables, message):
    with pytest.raises(CatalogError, match=message):
        catalog.add_custom("Custom", formula, variables)
    assert len(catalog) == 69

def test_custom_id_skips_taken_ids():
    cat = Catalog.from_yaml_text(MINIMAL.replace("id: add", "id: custom-2"))
    created = cat.add_custom("Next", "y = a", [{"symbol": "a", "name": "A"}])
    assert created.id == "custom-3"
