# -----------------------------------------------------------------------------
# Chemical engineering procedures
# Purpose: fluid mechanics, thermodynamics, heat transfer, separations and
# reaction engineering.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Tuple

from ..formatting import fmt
from ..types import ResolvedContext
from .registry import procedure

Out = Tuple[float, List[str]]


@procedure("reynolds-number", "ρ", "v", "D", "μ")
def reynolds(ctx: ResolvedContext) -> Out:
    rho, v, D, mu = ctx["ρ"], ctx["v"], ctx["D"], ctx["μ"]
    result = (rho * v * D) / mu
    return result, [f"Re = (ρvD) / μ = ({fmt(rho)} × {fmt(v)} × {fmt(D)}) / {fmt(mu)}"]


@procedure("ideal-gas-law", "n", "R", "T", "V")
def ideal_gas(ctx: ResolvedContext) -> Out:
    n, R, T, V = ctx["n"], ctx["R"], ctx["T"], ctx["V"]
    result = (n * R * T) / V
    return result, [f"P = (nRT) / V = ({fmt(n)} × {fmt(R)} × {fmt(T)}) / {fmt(V)}"]


@procedure("heat-transfer-conduction", "k", "A", "dT", "dx")
def conduction_rate(ctx: ResolvedContext) -> Out:
    # magnitude of the heat flow; the sign in q = -kA(dT/dx) only marks direction
    k, A, dT, dx = ctx["k"], ctx["A"], ctx["dT"], ctx["dx"]
    result = k * A * dT / dx
    return result, [f"q = kA(dT/dx) = {fmt(k)} × {fmt(A)} × {fmt(dT)} / {fmt(dx)}"]


@procedure("fluid-flow-rate", "A", "v")
def flow_rate(ctx: ResolvedContext) -> Out:
    A, v = ctx["A"], ctx["v"]
    return A * v, [f"Q = A × v = {fmt(A)} × {fmt(v)}"]


@procedure("bernoulli-equation", "P1", "ρ", "v1", "g", "h1")
def bernoulli(ctx: ResolvedContext) -> Out:
    P, rho, v, g, h = ctx["P1"], ctx["ρ"], ctx["v1"], ctx["g"], ctx["h1"]
    result = P + 0.5 * rho * v ** 2 + rho * g * h
    steps = [
        "E = P + ½ρv² + ρgh",
        f"E = {fmt(P)} + 0.5×{fmt(rho)}×{fmt(v)}² + {fmt(rho)}×{fmt(g)}×{fmt(h)}",
    ]
    return result, steps


@procedure("pump-power", "ρ", "g", "Q", "H", "η")
def pump_power(ctx: ResolvedContext) -> Out:
    rho, g, Q, H, eta = ctx["ρ"], ctx["g"], ctx["Q"], ctx["H"], ctx["η"]
    result = (rho * g * Q * H) / eta
    return result, [f"P = (ρgQH) / η = ({fmt(rho)} × {fmt(g)} × {fmt(Q)} × {fmt(H)}) / {fmt(eta)}"]


@procedure("pipe-friction", "f", "L", "D", "v", "g")
def darcy_head_loss(ctx: ResolvedContext) -> Out:
    f, L, D, v, g = ctx["f"], ctx["L"], ctx["D"], ctx["v"], ctx["g"]
    result = f * (L / D) * (v ** 2 / (2 * g))
    steps = [
        "hf = f × (L/D) × (v²/2g)",
        f"hf = {fmt(f)} × ({fmt(L)}/{fmt(D)}) × ({fmt(v)}²/(2×{fmt(g)}))",
    ]
    return result, steps


@procedure("navier-stokes-simplified", "μ", "L", "v", "D")
def poiseuille_drop(ctx: ResolvedContext) -> Out:
    mu, L, v, D = ctx["μ"], ctx["L"], ctx["v"], ctx["D"]
    result = 32 * mu * L * v / D ** 2
    return result, [f"ΔP = 32μLv / D² = 32 × {fmt(mu)} × {fmt(L)} × {fmt(v)} / {fmt(D)}²"]


@procedure("distillation-efficiency", "yn", "yn+1", "yn*")
def murphree_efficiency(ctx: ResolvedContext) -> Out:
    yn, y_in, y_eq = ctx["yn"], ctx["yn+1"], ctx["yn*"]
    result = (yn - y_in) / (y_eq - y_in)
    return result, [
        f"EMV = (yn - yn+1) / (yn* - yn+1) = ({fmt(yn)} - {fmt(y_in)}) / ({fmt(y_eq)} - {fmt(y_in)})"
    ]


@procedure("sutherland-viscosity", "μ0", "T", "T0", "S")
def sutherland(ctx: ResolvedContext) -> Out:
    mu0, T, T0, S = ctx["μ0"], ctx["T"], ctx["T0"], ctx["S"]
    ratio = math.pow(T / T0, 1.5)
    correction = (T0 + S) / (T + S)
    steps = [
        "μ = μ0 × (T/T0)^(3/2) × (T0 + S)/(T + S)",
        f"(T/T0)^(3/2) = ({fmt(T)}/{fmt(T0)})^1.5 = {fmt(ratio)}",
        f"(T0 + S)/(T + S) = ({fmt(T0)} + {fmt(S)})/({fmt(T)} + {fmt(S)}) = {fmt(correction)}",
        f"μ = {fmt(mu0)} × {fmt(ratio)} × {fmt(correction)}",
    ]
    return mu0 * ratio * correction, steps


@procedure("heat-exchanger-lmtd", "ΔT_1", "ΔT_2")
def lmtd(ctx: ResolvedContext) -> Out:
    dT1, dT2 = ctx["ΔT_1"], ctx["ΔT_2"]
    if dT1 == dT2:
        # limit of the log mean as the two differences converge
        return dT1, [f"ΔT_1 = ΔT_2 = {fmt(dT1)}, so LMTD = ΔT_1"]
    result = (dT1 - dT2) / math.log(dT1 / dT2)
    return result, [f"LMTD = (ΔT_1 - ΔT_2) / ln(ΔT_1 / ΔT_2) = ({fmt(dT1)} - {fmt(dT2)}) / ln({fmt(dT1)} / {fmt(dT2)})"]


@procedure("pressure-drop-packed-bed", "μ", "v", "d_p", "ρ")
def ergun(ctx: ResolvedContext) -> Out:
    mu, v, dp, rho = ctx["μ"], ctx["v"], ctx["d_p"], ctx["ρ"]
    viscous = 150 * mu * v / dp ** 2
    inertial = 1.75 * rho * v ** 2 / dp
    steps = [
        f"Viscous term: 150 × μ × v / d_p² = 150 × {fmt(mu)} × {fmt(v)} / {fmt(dp)}² = {fmt(viscous)} Pa/m",
        f"Inertial term: 1.75 × ρ × v² / d_p = 1.75 × {fmt(rho)} × {fmt(v)}² / {fmt(dp)} = {fmt(inertial)} Pa/m",
        f"ΔP/L = {fmt(viscous)} + {fmt(inertial)}",
    ]
    return viscous + inertial, steps


@procedure("reactor-conversion", "k", "τ")
def cstr_conversion(ctx: ResolvedContext) -> Out:
    k, tau = ctx["k"], ctx["τ"]
    damkohler = k * tau
    result = damkohler / (1 + damkohler)
    steps = [
        f"k × τ = {fmt(k)} × {fmt(tau)} = {fmt(damkohler)}",
        f"X = k × τ / (1 + k × τ) = {fmt(damkohler)} / (1 + {fmt(damkohler)})",
    ]
    return result, steps
