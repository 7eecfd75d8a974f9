# -----------------------------------------------------------------------------
# Materials science procedures
# Angles: grain-boundary misorientation θ is taken in degrees.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Tuple

from ..formatting import fmt
from ..types import ResolvedContext
from .registry import procedure

Out = Tuple[float, List[str]]


@procedure("grain-boundary-energy", "γ_s", "θ")
def grain_boundary_energy(ctx: ResolvedContext) -> Out:
    gamma_s, theta_deg = ctx["γ_s"], ctx["θ"]
    result = gamma_s * (1 - math.cos(math.radians(theta_deg) / 2))
    return result, [f"γ_gb = γ_s × (1 - cos(θ/2)) = {fmt(gamma_s)} × (1 - cos({fmt(theta_deg)}°/2))"]


@procedure("hall-petch-relation", "σ_0", "k_y", "d")
def hall_petch(ctx: ResolvedContext) -> Out:
    s0, ky, d = ctx["σ_0"], ctx["k_y"], ctx["d"]
    strengthening = ky / math.sqrt(d)
    steps = [
        f"k_y × d^(-1/2) = {fmt(ky)} / √{fmt(d)} = {fmt(strengthening)} Pa",
        f"σ_y = σ_0 + k_y × d^(-1/2) = {fmt(s0)} + {fmt(strengthening)}",
    ]
    return s0 + strengthening, steps


@procedure("young-modulus-calculation", "Δσ", "Δε")
def secant_modulus(ctx: ResolvedContext) -> Out:
    ds, de = ctx["Δσ"], ctx["Δε"]
    return ds / de, [f"E = Δσ / Δε = {fmt(ds)} / {fmt(de)}"]
