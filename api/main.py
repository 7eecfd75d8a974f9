# --- Engineering Formula Evaluator API (FastAPI) ------------------------------
# Purpose: Thin HTTP surface over the catalog and the evaluation engine:
# browse/search formulas, evaluate one, author custom formulas, and run the
# worked-example checks. Holds nothing beyond the in-memory catalog.
# ------------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from efe.catalog import Catalog, CatalogError
from efe.config import Settings, configure_logging
from efe.engine import EvaluationError, Evaluator, check_examples
from efe.selector import Selector

# Load .env for external configuration (catalog path, log level, bind address)
settings = Settings.from_env()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title="Engineering Formula Evaluator API")

# Initialize catalog + evaluator + selector from YAML
_catalog = Catalog.from_file(settings.catalog_path)
_evaluator = Evaluator(_catalog)
_selector = Selector(_catalog)

# ----------------------------- Schemas ----------------------------------------
class EvaluateRequest(BaseModel):
    # Formula id plus caller inputs keyed by exact symbol string.
    formula_id: str
    inputs: Dict[str, Optional[float]] = Field(default_factory=dict)

class EvaluateResponse(BaseModel):
    result: float
    steps: List[str]
    units: str
    accuracy: float
    warnings: List[str]

class VariableIn(BaseModel):
    symbol: str
    name: str
    unit: str = ""
    value: Optional[float] = None
    min: Optional[float] = None
    max: Optional[float] = None
    description: str = ""

class CustomFormulaRequest(BaseModel):
    # Formula Builder payload; the id is assigned by the catalog.
    name: str
    formula: str
    variables: List[VariableIn]
    units: str = ""
    description: str = ""
    category: str = "Custom"
    discipline: str = "Custom"
    difficulty: str = "Basic"
    tags: List[str] = Field(default_factory=list)

# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/catalog")
def list_catalog(q: str = "", discipline: Optional[str] = None,
                 category: Optional[str] = None, difficulty: Optional[str] = None):
    """
    List formulas, optionally filtered and ranked by a free-text query.
    'All' (or omitting a filter) disables it.
    """
    ranked = _selector.search(q, discipline=discipline, category=category, difficulty=difficulty)
    by_id = {row["id"]: row for row in _catalog.list_formulas()}
    items = [by_id[s.formula_id] for s in ranked]
    return {"count": len(items), "items": items}

def _formula_or_404(formula_id: str):
    try:
        return _catalog.get(formula_id)
    except CatalogError as e:
        raise HTTPException(status_code=404, detail=str(e))

@app.get("/formulas/{formula_id}")
def get_formula(formula_id: str) -> Dict[str, Any]:
    return _formula_or_404(formula_id).to_dict()

@app.get("/formulas/{formula_id}/examples")
def run_examples(formula_id: str):
    formula = _formula_or_404(formula_id)
    rows = [row.to_dict() for row in check_examples(formula, _evaluator)]
    return {"formula_id": formula.id, "passed": all(r["passed"] for r in rows), "items": rows}

@app.post("/evaluate", response_model=EvaluateResponse)
def evaluate(req: EvaluateRequest):
    """
    Evaluate one formula. 404 for unknown ids; 422 carries the engine's
    message (formula id + cause) when no number can be produced.
    """
    formula = _formula_or_404(req.formula_id)
    try:
        res = _evaluator.evaluate(formula, req.inputs)
    except EvaluationError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return EvaluateResponse(**res.to_dict())

@app.post("/formulas", status_code=201)
def create_formula(req: CustomFormulaRequest) -> Dict[str, Any]:
    try:
        created = _catalog.add_custom(
            name=req.name, formula=req.formula,
            variables=[v.model_dump() for v in req.variables],
            units=req.units, description=req.description, category=req.category,
            discipline=req.discipline, difficulty=req.difficulty, tags=req.tags,
        )
    except CatalogError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return created.to_dict()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("api.main:app", host=settings.api_host, port=settings.api_port)
