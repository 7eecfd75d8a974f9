# -----------------------------------------------------------------------------
# Catalog loader & accessor
# Purpose: Parse the YAML formula catalog into immutable Formula records and
# serve them by id, in catalog order.
# - Depends on .types (Formula, VariableSpec, FormulaExample).
# - Load-time checks reject authoring defects early (duplicate ids/symbols,
#   unknown difficulty, inverted bounds, example inputs for unknown symbols).
# - add_custom() is the Formula Builder: user-authored entries are appended
#   in memory and always evaluate through the fallback path.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Union

import yaml

from .types import DIFFICULTIES, Formula, FormulaExample, VariableSpec

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).with_name("data") / "catalog.yaml"


# Domain-specific error to signal malformed catalog inputs, missing fields, etc.
class CatalogError(Exception): pass


def _optional_float(raw: Any, what: str, fid: str) -> Optional[float]:
    # YAML 1.1 reads "1e-9" as a string, so every number goes through float().
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise CatalogError(f"{fid}: {what} is not a number ({raw!r})") from None
    if not math.isfinite(value):
        raise CatalogError(f"{fid}: {what} must be finite")
    return value


def _variable(vd: Mapping[str, Any], fid: str) -> VariableSpec:
    symbol = str(vd.get("symbol") or "").strip()
    if not symbol:
        raise CatalogError(f"{fid}: variable without a symbol")
    name = str(vd.get("name") or "").strip()
    if not name:
        raise CatalogError(f"{fid}: variable '{symbol}' has no name")
    var = VariableSpec(
        symbol=symbol,
        name=name,
        unit=str(vd.get("unit", "")),
        value=_optional_float(vd.get("value"), f"'{symbol}'.value", fid),
        min=_optional_float(vd.get("min"), f"'{symbol}'.min", fid),
        max=_optional_float(vd.get("max"), f"'{symbol}'.max", fid),
        description=str(vd.get("description", "")),
    )
    if var.min is not None and var.max is not None and var.min > var.max:
        raise CatalogError(f"{fid}: variable '{symbol}' has min > max")
    return var


def _example(ed: Mapping[str, Any], fid: str, symbols: Sequence[str]) -> FormulaExample:
    title = str(ed.get("title", "")).strip() or "Example"
    inputs: Dict[str, float] = {}
    for sym, raw in (ed.get("inputs") or {}).items():
        if sym not in symbols:
            raise CatalogError(f"{fid}: example '{title}' sets undeclared symbol '{sym}'")
        inputs[sym] = _optional_float(raw, f"example input '{sym}'", fid)
    expected = _optional_float(ed.get("expected_result"), "expected_result", fid)
    if expected is None:
        raise CatalogError(f"{fid}: example '{title}' has no expected_result")
    tolerance = _optional_float(ed.get("tolerance"), "tolerance", fid)
    return FormulaExample(
        title=title, inputs=inputs, expected_result=expected,
        description=str(ed.get("description", "")),
        tolerance=tolerance if tolerance is not None else 1e-3,
    )


def formula_from_dict(fd: Mapping[str, Any], custom: bool = False) -> Formula:
    """
    Materialize one catalog entry. Shape:
        id: stress-formula
        name: "Mechanical Stress (σ)"
        formula: "σ = F / A"
        category / discipline / difficulty / units
        tags: [stress, materials]
        variables:
          - { symbol: F, name: Applied Force, unit: N, min: 0 }
        examples:
          - { title: ..., inputs: {F: 10000, A: 0.001}, expected_result: 1.0e+7 }
        references: ["..."]
    """
    fid = str(fd.get("id") or "").strip()
    if not fid:
        raise CatalogError("formula without an id")
    for key in ("name", "formula", "category", "discipline", "difficulty"):
        if not str(fd.get(key) or "").strip():
            raise CatalogError(f"{fid}: missing field '{key}'")
    if fd["difficulty"] not in DIFFICULTIES:
        raise CatalogError(f"{fid}: difficulty must be one of {', '.join(DIFFICULTIES)}")

    variables = tuple(_variable(vd, fid) for vd in (fd.get("variables") or []))
    if not variables:
        raise CatalogError(f"{fid}: at least one variable is required")
    symbols = [v.symbol for v in variables]
    dupes = sorted({s for s in symbols if symbols.count(s) > 1})
    if dupes:
        raise CatalogError(f"{fid}: duplicate symbol(s) {', '.join(dupes)}")

    return Formula(
        id=fid,
        name=str(fd["name"]),
        description=str(fd.get("description", "")),
        formula=str(fd["formula"]),
        variables=variables,
        category=str(fd["category"]),
        discipline=str(fd["discipline"]),
        difficulty=str(fd["difficulty"]),
        units=str(fd.get("units") or ""),
        tags=tuple(str(t) for t in (fd.get("tags") or [])),
        examples=tuple(_example(ed, fid, symbols) for ed in (fd.get("examples") or [])),
        references=tuple(str(r) for r in (fd.get("references") or [])),
        custom=custom,
    )


@dataclass
class Catalog:
    # Formulas in catalog order; custom entries are appended at the end
    formulas: List[Formula]
    _by_id: Dict[str, Formula] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for f in self.formulas:
            if f.id in self._by_id:
                raise CatalogError(f"duplicate formula id '{f.id}'")
            self._by_id[f.id] = f

    @staticmethod
    def from_yaml_dict(d: Mapping[str, Any]) -> "Catalog":
        """Build a Catalog from a pre-parsed YAML dictionary (top-level `formulas:` list)."""
        if not isinstance(d, Mapping) or not isinstance(d.get("formulas"), list):
            raise CatalogError("catalog must be a mapping with a 'formulas' list")
        catalog = Catalog([formula_from_dict(fd) for fd in d["formulas"]])
        logger.info("loaded %d formulas across %d disciplines", len(catalog), len(catalog.disciplines()))
        return catalog

    @staticmethod
    def from_yaml_text(text: str) -> "Catalog":
        # yaml.safe_load: no arbitrary object constructors
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise CatalogError(f"catalog is not valid YAML: {exc}") from exc
        return Catalog.from_yaml_dict(data)

    @staticmethod
    def from_file(path: Union[str, Path]) -> "Catalog":
        """
        Open a YAML file from disk and parse it into a Catalog.
        UTF-8 is enforced; symbols use Greek letters and subscripts.
        """
        with open(path, "r", encoding="utf-8") as f:
            return Catalog.from_yaml_text(f.read())

    @staticmethod
    def default() -> "Catalog":
        # The catalog shipped inside the package.
        return Catalog.from_file(DEFAULT_CATALOG_PATH)

    # ---- access ---------------------------------------------------------------

    def get(self, formula_id: str) -> Formula:
        try:
            return self._by_id[formula_id]
        except KeyError:
            raise CatalogError(f"Unknown formula id: {formula_id}") from None

    def __contains__(self, formula_id: object) -> bool:
        return formula_id in self._by_id

    def __len__(self) -> int:
        return len(self.formulas)

    def __iter__(self) -> Iterator[Formula]:
        return iter(list(self.formulas))

    def disciplines(self) -> List[str]:
        return list(dict.fromkeys(f.discipline for f in self.formulas))

    def categories(self) -> List[str]:
        return list(dict.fromkeys(f.category for f in self.formulas))

    def list_formulas(self) -> List[Dict[str, Any]]:
        """
        Flattened, UI-friendly listing (id, name, formula, discipline,
        category, difficulty, units, tags, symbols).
        """
        out = []
        for f in self.formulas:
            out.append({
                "id": f.id, "name": f.name, "formula": f.formula,
                "discipline": f.discipline, "category": f.category,
                "difficulty": f.difficulty, "units": f.units,
                "tags": list(f.tags), "symbols": f.symbols, "custom": f.custom,
            })
        return out

    # ---- Formula Builder -------------------------------------------------------

    def _next_custom_id(self) -> str:
        n = len(self.formulas) + 1
        while f"custom-{n}" in self._by_id:
            n += 1
        return f"custom-{n}"

    def add_custom(
        self,
        name: str,
        formula: str,
        variables: Iterable[Mapping[str, Any]],
        units: str = "",
        description: str = "",
        category: str = "Custom",
        discipline: str = "Custom",
        difficulty: str = "Basic",
        tags: Iterable[str] = (),
    ) -> Formula:
        """
        Validate and append a user-authored formula, returning it.
        `variables` holds dicts shaped like catalog variables. Raises
        CatalogError when the text is empty, no variable is declared, or a
        variable lacks a symbol or a name.
        """
        if not (formula or "").strip():
            raise CatalogError("custom formula: formula text is required")
        if not (name or "").strip():
            raise CatalogError("custom formula: name is required")
        fd = {
            "id": self._next_custom_id(), "name": name, "formula": formula,
            "description": description, "category": category,
            "discipline": discipline, "difficulty": difficulty, "units": units,
            "tags": list(tags), "variables": [dict(v) for v in variables],
        }
        created = formula_from_dict(fd, custom=True)
        self.formulas.append(created)
        self._by_id[created.id] = created
        logger.info("added custom formula %s (%s)", created.id, created.name)
        return created
