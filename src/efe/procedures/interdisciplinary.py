# -----------------------------------------------------------------------------
# Interdisciplinary procedures: scaling analysis and dimensionless numbers.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Tuple

from ..formatting import fmt
from ..types import ResolvedContext
from .registry import procedure

Out = Tuple[float, List[str]]


@procedure("fractal-dimension", "N", "r")
def box_counting_dimension(ctx: ResolvedContext) -> Out:
    N, r = ctx["N"], ctx["r"]
    result = -math.log(N) / math.log(r)
    return result, [f"D = -log(N) / log(r) = -log({fmt(N)}) / log({fmt(r)})"]


@procedure("nusselt-number-correlation", "C", "Gr", "Pr", "n")
def nusselt_natural(ctx: ResolvedContext) -> Out:
    C, Gr, Pr, n = ctx["C"], ctx["Gr"], ctx["Pr"], ctx["n"]
    rayleigh = Gr * Pr
    steps = [
        f"Ra = Gr × Pr = {fmt(Gr)} × {fmt(Pr)} = {fmt(rayleigh)}",
        f"Nu = C × Ra^n = {fmt(C)} × {fmt(rayleigh)}^{fmt(n)}",
    ]
    return C * math.pow(rayleigh, n), steps


@procedure("fourier-number", "α", "t", "L")
def fourier_number(ctx: ResolvedContext) -> Out:
    alpha, t, L = ctx["α"], ctx["t"], ctx["L"]
    return alpha * t / L ** 2, [f"Fo = α × t / L² = {fmt(alpha)} × {fmt(t)} / {fmt(L)}²"]
