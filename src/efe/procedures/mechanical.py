# -----------------------------------------------------------------------------
# Mechanical engineering procedures
# Purpose: stress/strain, power, buckling, Mohr's circle, fatigue, machine
# design, thermal radiation. Each returns (result, steps); the engine adds the
# header and the final "Result:" line.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Tuple

from ..formatting import fmt
from ..types import ResolvedContext
from .registry import procedure

Out = Tuple[float, List[str]]


@procedure("stress-formula", "F", "A")
def stress(ctx: ResolvedContext) -> Out:
    F, A = ctx["F"], ctx["A"]
    return F / A, [f"σ = F / A = {fmt(F)} / {fmt(A)}"]


@procedure("strain-formula", "ΔL", "L₀")
def strain(ctx: ResolvedContext) -> Out:
    dL, L0 = ctx["ΔL"], ctx["L₀"]
    return dL / L0, [f"ε = ΔL / L₀ = {fmt(dL)} / {fmt(L0)}"]


@procedure("youngs-modulus", "σ", "ε")
def youngs_modulus(ctx: ResolvedContext) -> Out:
    s, e = ctx["σ"], ctx["ε"]
    return s / e, [f"E = σ / ε = {fmt(s)} / {fmt(e)}"]


@procedure("power-formula", "F", "v")
def mechanical_power(ctx: ResolvedContext) -> Out:
    F, v = ctx["F"], ctx["v"]
    return F * v, [f"P = F × v = {fmt(F)} × {fmt(v)}"]


@procedure("thermal-expansion", "α", "L", "ΔT")
def thermal_expansion(ctx: ResolvedContext) -> Out:
    a, L, dT = ctx["α"], ctx["L"], ctx["ΔT"]
    return a * L * dT, [f"ΔL = αLΔT = {fmt(a)} × {fmt(L)} × {fmt(dT)}"]


@procedure("linear-thermal-expansion", "α", "L0", "ΔT")
def linear_thermal_expansion(ctx: ResolvedContext) -> Out:
    a, L0, dT = ctx["α"], ctx["L0"], ctx["ΔT"]
    return a * L0 * dT, [f"ΔL = α × L0 × ΔT = {fmt(a)} × {fmt(L0)} × {fmt(dT)}"]


@procedure("euler-buckling", "E", "I", "K", "L")
def euler_buckling(ctx: ResolvedContext) -> Out:
    E, I, K, L = ctx["E"], ctx["I"], ctx["K"], ctx["L"]
    result = (math.pi ** 2 * E * I) / (K * L) ** 2
    return result, [f"Pcr = (π²EI) / (KL)² = (π² × {fmt(E)} × {fmt(I)}) / ({fmt(K)} × {fmt(L)})²"]


@procedure("reynolds-number-advanced", "ρ", "v", "D", "μ")
def reynolds_advanced(ctx: ResolvedContext) -> Out:
    rho, v, D, mu = ctx["ρ"], ctx["v"], ctx["D"], ctx["μ"]
    return rho * v * D / mu, [f"Re = ρvD / μ = {fmt(rho)} × {fmt(v)} × {fmt(D)} / {fmt(mu)}"]


@procedure("reynolds-number-pipe", "ρ", "V", "D", "μ")
def reynolds_pipe(ctx: ResolvedContext) -> Out:
    rho, V, D, mu = ctx["ρ"], ctx["V"], ctx["D"], ctx["μ"]
    return rho * V * D / mu, [f"Re = ρ × V × D / μ = {fmt(rho)} × {fmt(V)} × {fmt(D)} / {fmt(mu)}"]


@procedure("fourier-heat-conduction", "k", "A", "T1", "T2", "L")
def fourier_conduction(ctx: ResolvedContext) -> Out:
    k, A, T1, T2, L = ctx["k"], ctx["A"], ctx["T1"], ctx["T2"], ctx["L"]
    result = k * A * (T1 - T2) / L
    return result, [f"q = kA(T1 - T2) / L = {fmt(k)} × {fmt(A)} × ({fmt(T1)} - {fmt(T2)}) / {fmt(L)}"]


def _principal(sx: float, sy: float, txy: float) -> Tuple[float, float]:
    # (average, radius) of Mohr's circle
    avg = (sx + sy) / 2
    radius = math.sqrt(((sx - sy) / 2) ** 2 + txy ** 2)
    return avg, radius


@procedure("mohr-circle-stress", "σx", "σy", "τxy")
def mohr_circle_stress(ctx: ResolvedContext) -> Out:
    sx, sy, txy = ctx["σx"], ctx["σy"], ctx["τxy"]
    avg, radius = _principal(sx, sy, txy)
    steps = [
        "σ₁ = (σₓ + σᵧ)/2 + √[((σₓ - σᵧ)/2)² + τₓᵧ²]",
        f"σ₁ = ({fmt(sx)} + {fmt(sy)})/2 + √[(({fmt(sx)} - {fmt(sy)})/2)² + {fmt(txy)}²]",
        f"σ₁ = {fmt(avg)} + {fmt(radius)}",
    ]
    return avg + radius, steps


@procedure("mohr-circle-analysis", "σₓ", "σᵧ", "τₘᵧ")
def mohr_circle_analysis(ctx: ResolvedContext) -> Out:
    sx, sy, txy = ctx["σₓ"], ctx["σᵧ"], ctx["τₘᵧ"]
    avg, radius = _principal(sx, sy, txy)
    s1, s2 = avg + radius, avg - radius
    steps = [
        "Mohr Circle Analysis:",
        f"σₓ = {fmt(sx)} Pa, σᵧ = {fmt(sy)} Pa, τₓᵧ = {fmt(txy)} Pa",
        f"Average stress: σₐᵥ = (σₓ + σᵧ)/2 = {fmt(avg)} Pa",
        f"Radius: R = √[((σₓ - σᵧ)/2)² + τₓᵧ²] = {fmt(radius)} Pa",
        f"σ₁ = σₐᵥ + R = {fmt(avg)} + {fmt(radius)} = {fmt(s1)} Pa",
        f"σ₂ = σₐᵥ - R = {fmt(avg)} - {fmt(radius)} = {fmt(s2)} Pa",
    ]
    # maximum principal stress is the reported branch
    return s1, steps


@procedure("fatigue-life-sn", "Sf", "S", "b")
def fatigue_life(ctx: ResolvedContext) -> Out:
    Sf, S, b = ctx["Sf"], ctx["S"], ctx["b"]
    return math.pow(Sf / S, b), [f"N = (Sf / S)^b = ({fmt(Sf)} / {fmt(S)})^{fmt(b)}"]


@procedure("heat-exchanger-effectiveness", "Th_in", "Th_out", "Tc_in")
def exchanger_effectiveness(ctx: ResolvedContext) -> Out:
    th_in, th_out, tc_in = ctx["Th_in"], ctx["Th_out"], ctx["Tc_in"]
    result = (th_in - th_out) / (th_in - tc_in)
    return result, [
        f"ε = (Th_in - Th_out) / (Th_in - Tc_in) = ({fmt(th_in)} - {fmt(th_out)}) / ({fmt(th_in)} - {fmt(tc_in)})"
    ]


@procedure("pump-efficiency", "ρ", "g", "Q", "H", "P")
def pump_efficiency(ctx: ResolvedContext) -> Out:
    rho, g, Q, H, P = ctx["ρ"], ctx["g"], ctx["Q"], ctx["H"], ctx["P"]
    hydraulic = rho * g * Q * H
    steps = [
        f"P_hydraulic = ρgQH = {fmt(rho)} × {fmt(g)} × {fmt(Q)} × {fmt(H)} = {fmt(hydraulic)} W",
        f"η = P_hydraulic / P = {fmt(hydraulic)} / {fmt(P)}",
    ]
    return hydraulic / P, steps


@procedure("planck-radiation-law", "λ", "T", "h", "c", "k")
def planck(ctx: ResolvedContext) -> Out:
    lam, T, h, c, k = ctx["λ"], ctx["T"], ctx["h"], ctx["c"], ctx["k"]
    prefactor = 2 * h * c ** 2 / lam ** 5
    exponent = h * c / (lam * k * T)
    result = prefactor / (math.exp(exponent) - 1)
    steps = [
        "B = (2hc²/λ⁵) / (exp(hc/(λkT)) - 1)",
        f"2hc²/λ⁵ = 2 × {fmt(h)} × {fmt(c)}² / {fmt(lam)}⁵ = {fmt(prefactor)}",
        f"hc/(λkT) = {fmt(h)} × {fmt(c)} / ({fmt(lam)} × {fmt(k)} × {fmt(T)}) = {fmt(exponent)}",
        f"B = {fmt(prefactor)} / (exp({fmt(exponent)}) - 1)",
    ]
    return result, steps


@procedure("stefan-boltzmann-law", "σ", "A", "T")
def stefan_boltzmann(ctx: ResolvedContext) -> Out:
    sigma, A, T = ctx["σ"], ctx["A"], ctx["T"]
    return sigma * A * T ** 4, [f"P = σ × A × T⁴ = {fmt(sigma)} × {fmt(A)} × {fmt(T)}⁴"]


@procedure("wiens-displacement-law", "b", "T")
def wien(ctx: ResolvedContext) -> Out:
    b, T = ctx["b"], ctx["T"]
    return b / T, [f"λmax = b / T = {fmt(b)} / {fmt(T)}"]


@procedure("bearing-life-calculation", "C", "P", "n")
def bearing_life(ctx: ResolvedContext) -> Out:
    C, P, n = ctx["C"], ctx["P"], ctx["n"]
    result = math.pow(C / P, n) * 1e6
    return result, [f"L_10 = (C / P)^n × 10^6 = ({fmt(C)} / {fmt(P)})^{fmt(n)} × 10^6"]


@procedure("gear-tooth-bending-stress", "W_t", "F", "m", "Y")
def lewis_bending(ctx: ResolvedContext) -> Out:
    Wt, F, m, Y = ctx["W_t"], ctx["F"], ctx["m"], ctx["Y"]
    result = Wt / (F * m * Y)
    return result, [f"σ = W_t / (F × m × Y) = {fmt(Wt)} / ({fmt(F)} × {fmt(m)} × {fmt(Y)})"]
