# -----------------------------------------------------------------------------
# Civil engineering procedures
# Purpose: structural analysis, materials testing, geotechnics, wind and
# seismic loading.
# Angles: Mohr-Coulomb friction angle φ is taken in degrees. Archie's φ is
# porosity, not an angle.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Tuple

from ..formatting import fmt
from ..types import ResolvedContext
from .registry import procedure

Out = Tuple[float, List[str]]


@procedure("beam-deflection", "w", "L", "E", "I")
def beam_deflection(ctx: ResolvedContext) -> Out:
    w, L, E, I = ctx["w"], ctx["L"], ctx["E"], ctx["I"]
    result = (5 * w * math.pow(L, 4)) / (384 * E * I)
    steps = [
        "δ = (5wL⁴) / (384EI)",
        f"δ = (5 × {fmt(w)} × {fmt(L)}⁴) / (384 × {fmt(E)} × {fmt(I)})",
    ]
    return result, steps


@procedure("concrete-strength", "P", "A")
def concrete_strength(ctx: ResolvedContext) -> Out:
    P, A = ctx["P"], ctx["A"]
    return P / A, [f"fc = P / A = {fmt(P)} / {fmt(A)}"]


@procedure("concrete-compressive-strength", "P", "A")
def concrete_compressive_strength(ctx: ResolvedContext) -> Out:
    P, A = ctx["P"], ctx["A"]
    return P / A, [f"fc = P / A = {fmt(P)} / {fmt(A)}"]


@procedure("soil-bearing-capacity", "c", "Nc", "γ", "Df", "Nq", "B", "Nγ")
def bearing_capacity(ctx: ResolvedContext) -> Out:
    c, Nc, gamma, Df = ctx["c"], ctx["Nc"], ctx["γ"], ctx["Df"]
    Nq, B, Ng = ctx["Nq"], ctx["B"], ctx["Nγ"]
    result = c * Nc + gamma * Df * Nq + 0.5 * gamma * B * Ng
    steps = [
        "qu = cNc + γDfNq + 0.5γBNγ",
        f"qu = {fmt(c)}×{fmt(Nc)} + {fmt(gamma)}×{fmt(Df)}×{fmt(Nq)} + 0.5×{fmt(gamma)}×{fmt(B)}×{fmt(Ng)}",
    ]
    return result, steps


@procedure("soil-bearing-capacity-terzaghi", "c", "γ", "D", "B", "Nc", "Nq", "Nγ")
def terzaghi_bearing(ctx: ResolvedContext) -> Out:
    c, gamma, D, B = ctx["c"], ctx["γ"], ctx["D"], ctx["B"]
    Nc, Nq, Ng = ctx["Nc"], ctx["Nq"], ctx["Nγ"]
    cohesion = c * Nc
    surcharge = gamma * D * Nq
    self_weight = 0.5 * gamma * B * Ng
    steps = [
        "qu = cNc + γDNq + 0.5γBNγ",
        f"cNc = {fmt(c)} × {fmt(Nc)} = {fmt(cohesion)} Pa",
        f"γDNq = {fmt(gamma)} × {fmt(D)} × {fmt(Nq)} = {fmt(surcharge)} Pa",
        f"0.5γBNγ = 0.5 × {fmt(gamma)} × {fmt(B)} × {fmt(Ng)} = {fmt(self_weight)} Pa",
    ]
    return cohesion + surcharge + self_weight, steps


@procedure("moment-of-inertia-rectangle", "b", "h")
def rectangle_inertia(ctx: ResolvedContext) -> Out:
    b, h = ctx["b"], ctx["h"]
    return b * h ** 3 / 12, [f"I = bh³/12 = {fmt(b)} × {fmt(h)}³ / 12"]


@procedure("shear-stress", "V", "A")
def shear_stress(ctx: ResolvedContext) -> Out:
    V, A = ctx["V"], ctx["A"]
    return V / A, [f"τ = V / A = {fmt(V)} / {fmt(A)}"]


@procedure("euler-buckling-load", "E", "I", "K", "L")
def euler_buckling_load(ctx: ResolvedContext) -> Out:
    E, I, K, L = ctx["E"], ctx["I"], ctx["K"], ctx["L"]
    effective = K * L
    result = math.pi ** 2 * E * I / effective ** 2
    steps = [
        f"KL = {fmt(K)} × {fmt(L)} = {fmt(effective)} m",
        f"Pcr = (π² × {fmt(E)} × {fmt(I)}) / {fmt(effective)}²",
    ]
    return result, steps


@procedure("soil-consolidation", "Cc", "H", "σ0", "Δσ", "e0")
def consolidation_settlement(ctx: ResolvedContext) -> Out:
    Cc, H, s0, ds, e0 = ctx["Cc"], ctx["H"], ctx["σ0"], ctx["Δσ"], ctx["e0"]
    result = Cc * H * math.log10((s0 + ds) / s0) / (1 + e0)
    steps = [
        "S = (Cc × H × log10((σ0 + Δσ)/σ0)) / (1 + e0)",
        f"S = ({fmt(Cc)} × {fmt(H)} × log10(({fmt(s0)} + {fmt(ds)})/{fmt(s0)})) / (1 + {fmt(e0)})",
    ]
    return result, steps


@procedure("wind-load-pressure", "ρ", "v", "Cp")
def wind_pressure(ctx: ResolvedContext) -> Out:
    rho, v, Cp = ctx["ρ"], ctx["v"], ctx["Cp"]
    return 0.5 * rho * v ** 2 * Cp, [f"p = 0.5 × ρ × v² × Cp = 0.5 × {fmt(rho)} × {fmt(v)}² × {fmt(Cp)}"]


@procedure("seismic-response", "SDS", "T", "T0", "SMS")
def seismic_response(ctx: ResolvedContext) -> Out:
    SDS, T, T0, SMS = ctx["SDS"], ctx["T"], ctx["T0"], ctx["SMS"]
    result = SDS * (1 + (T / T0) * (SMS / SDS - 1))
    return result, [
        f"Sa = SDS × (1 + (T/T0) × (SMS/SDS - 1)) = {fmt(SDS)} × (1 + ({fmt(T)}/{fmt(T0)}) × ({fmt(SMS)}/{fmt(SDS)} - 1))"
    ]


@procedure("archies-law-reservoir", "a", "φ", "m")
def archie_formation_factor(ctx: ResolvedContext) -> Out:
    a, porosity, m = ctx["a"], ctx["φ"], ctx["m"]
    return a / math.pow(porosity, m), [f"F = a / φ^m = {fmt(a)} / {fmt(porosity)}^{fmt(m)}"]


@procedure("mohr-coulomb-failure", "c", "σ", "φ")
def mohr_coulomb(ctx: ResolvedContext) -> Out:
    c, sigma, phi_deg = ctx["c"], ctx["σ"], ctx["φ"]
    result = c + sigma * math.tan(math.radians(phi_deg))
    return result, [f"τ = c + σ × tan(φ) = {fmt(c)} + {fmt(sigma)} × tan({fmt(phi_deg)}°)"]


@procedure("pile-bearing-capacity", "A_p", "q_p", "A_s", "q_s")
def pile_capacity(ctx: ResolvedContext) -> Out:
    Ap, qp, As, qs = ctx["A_p"], ctx["q_p"], ctx["A_s"], ctx["q_s"]
    tip, shaft = Ap * qp, As * qs
    steps = [
        f"Q_p = A_p × q_p = {fmt(Ap)} × {fmt(qp)} = {fmt(tip)} N",
        f"Q_s = A_s × q_s = {fmt(As)} × {fmt(qs)} = {fmt(shaft)} N",
        f"Q_u = Q_p + Q_s = {fmt(tip)} + {fmt(shaft)}",
    ]
    return tip + shaft, steps


@procedure("retaining-wall-pressure", "γ", "H", "K_a")
def active_earth_pressure(ctx: ResolvedContext) -> Out:
    gamma, H, Ka = ctx["γ"], ctx["H"], ctx["K_a"]
    result = 0.5 * gamma * H ** 2 * Ka
    return result, [f"P_a = 0.5 × γ × H² × K_a = 0.5 × {fmt(gamma)} × {fmt(H)}² × {fmt(Ka)}"]
