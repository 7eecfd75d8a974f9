# -----------------------------------------------------------------------------
# Formula Selector
# Purpose: Filter and rank catalog formulas for browsing, given a free-text
# query and optional discipline / category / difficulty filters.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from .catalog import Catalog
from .types import Formula

TAG_WEIGHT = 1.0
NAME_WEIGHT = 2.0
DESCRIPTION_WEIGHT = 0.5

ALL = "All"


@dataclass
class Scored:
    # Scoring breakdown for a candidate formula (used for audit/explain).
    formula_id: str
    total: float            # final score used for ranking
    tag_hits: int           # tags containing the query
    name_hit: bool
    description_hit: bool


def _active(value: Optional[str]) -> bool:
    return bool(value) and value != ALL


class Selector:
    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def _score(self, f: Formula, q: str) -> Scored:
        # ---- Case-insensitive substring hits on tags, name, description
        tag_hits = sum(1 for t in f.tags if q in t.lower())
        name_hit = q in f.name.lower()
        desc_hit = q in f.description.lower()
        total = TAG_WEIGHT * tag_hits + NAME_WEIGHT * name_hit + DESCRIPTION_WEIGHT * desc_hit
        return Scored(f.id, total, tag_hits, name_hit, desc_hit)

    def _keep(self, f: Formula, discipline: Optional[str], category: Optional[str],
              difficulty: Optional[str]) -> bool:
        if _active(discipline) and f.discipline != discipline:
            return False
        if _active(category) and f.category != category:
            return False
        if _active(difficulty) and f.difficulty != difficulty:
            return False
        return True

    def search(self, query: str = "", discipline: Optional[str] = None,
               category: Optional[str] = None, difficulty: Optional[str] = None) -> List[Scored]:
        """
        Return matching formulas ranked by score, highest first. An empty
        query matches every formula that passes the filters (score 0).
        Ties keep catalog order.
        """
        q = (query or "").strip().lower()
        cands = [f for f in self.catalog if self._keep(f, discipline, category, difficulty)]
        if not q:
            return [Scored(f.id, 0.0, 0, False, False) for f in cands]

        scored = [self._score(f, q) for f in cands]
        scored = [s for s in scored if s.total > 0]
        # list.sort is stable, so equal totals stay in catalog order
        scored.sort(key=lambda s: s.total, reverse=True)
        return scored

    def search_formulas(self, query: str = "", **filters: Optional[str]) -> List[Formula]:
        return [self.catalog.get(s.formula_id) for s in self.search(query, **filters)]
