# -----------------------------------------------------------------------------
# Electrical engineering procedures
# Purpose: circuit laws, AC reactance/impedance, power systems, induction,
# information capacity and signal ratios.
# Angles: three-phase φ is taken in degrees and converted here.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Tuple

from ..formatting import fmt
from ..types import ResolvedContext
from .registry import procedure

Out = Tuple[float, List[str]]


@procedure("ohms-law", "I", "R")
def ohms_law(ctx: ResolvedContext) -> Out:
    I, R = ctx["I"], ctx["R"]
    return I * R, [f"V = I × R = {fmt(I)} × {fmt(R)}"]


@procedure("electrical-power", "V", "I")
def electrical_power(ctx: ResolvedContext) -> Out:
    V, I = ctx["V"], ctx["I"]
    return V * I, [f"P = V × I = {fmt(V)} × {fmt(I)}"]


@procedure("capacitive-reactance", "f", "C")
def capacitive_reactance(ctx: ResolvedContext) -> Out:
    f, C = ctx["f"], ctx["C"]
    result = 1 / (2 * math.pi * f * C)
    return result, [f"Xc = 1 / (2πfC) = 1 / (2π × {fmt(f)} × {fmt(C)})"]


@procedure("inductive-reactance", "f", "L")
def inductive_reactance(ctx: ResolvedContext) -> Out:
    f, L = ctx["f"], ctx["L"]
    return 2 * math.pi * f * L, [f"XL = 2πfL = 2π × {fmt(f)} × {fmt(L)}"]


@procedure("ac-impedance", "R", "X")
def ac_impedance(ctx: ResolvedContext) -> Out:
    R, X = ctx["R"], ctx["X"]
    result = math.sqrt(R ** 2 + X ** 2)
    return result, [f"Z = √(R² + X²) = √({fmt(R)}² + {fmt(X)}²)"]


@procedure("transformer-ratio", "Np", "Ns")
def transformer_ratio(ctx: ResolvedContext) -> Out:
    Np, Ns = ctx["Np"], ctx["Ns"]
    return Np / Ns, [f"a = Np / Ns = {fmt(Np)} / {fmt(Ns)}"]


@procedure("three-phase-power", "VL", "IL", "φ")
def three_phase_power(ctx: ResolvedContext) -> Out:
    VL, IL, phi_deg = ctx["VL"], ctx["IL"], ctx["φ"]
    result = math.sqrt(3) * VL * IL * math.cos(math.radians(phi_deg))
    steps = [
        "P = √3 × VL × IL × cos(φ)",
        f"P = √3 × {fmt(VL)} × {fmt(IL)} × cos({fmt(phi_deg)}°)",
    ]
    return result, steps


@procedure("maxwell-faraday", "N", "dΦ/dt")
def faraday_induction(ctx: ResolvedContext) -> Out:
    N, rate = ctx["N"], ctx["dΦ/dt"]
    return -N * rate, [f"ε = -N × dΦ/dt = -{fmt(N)} × {fmt(rate)}"]


@procedure("shannon-capacity", "B", "S/N")
def shannon_capacity(ctx: ResolvedContext) -> Out:
    B, snr = ctx["B"], ctx["S/N"]
    result = B * math.log2(1 + snr)
    return result, [f"C = B × log₂(1 + S/N) = {fmt(B)} × log₂(1 + {fmt(snr)})"]


@procedure("voltage-divider-loaded", "Vin", "R1", "R2", "RL")
def loaded_divider(ctx: ResolvedContext) -> Out:
    Vin, R1, R2, RL = ctx["Vin"], ctx["R1"], ctx["R2"], ctx["RL"]
    parallel = R2 * RL / (R2 + RL)
    result = Vin * parallel / (R1 + parallel)
    steps = [
        f"R2 || RL = ({fmt(R2)} × {fmt(RL)}) / ({fmt(R2)} + {fmt(RL)}) = {fmt(parallel)} Ω",
        f"Vout = {fmt(Vin)} × {fmt(parallel)} / ({fmt(R1)} + {fmt(parallel)})",
    ]
    return result, steps


@procedure("magnetic-field-solenoid", "μ0", "n", "I")
def solenoid_field(ctx: ResolvedContext) -> Out:
    mu0, n, I = ctx["μ0"], ctx["n"], ctx["I"]
    return mu0 * n * I, [f"B = μ0 × n × I = {fmt(mu0)} × {fmt(n)} × {fmt(I)}"]


@procedure("signal-noise-ratio", "Psignal", "Pnoise")
def snr_db(ctx: ResolvedContext) -> Out:
    Ps, Pn = ctx["Psignal"], ctx["Pnoise"]
    result = 10 * math.log10(Ps / Pn)
    return result, [f"SNR = 10 × log10(Psignal / Pnoise) = 10 × log10({fmt(Ps)} / {fmt(Pn)})"]


@procedure("skin-effect-resistance", "R_dc", "f", "f_0")
def skin_effect(ctx: ResolvedContext) -> Out:
    Rdc, f, f0 = ctx["R_dc"], ctx["f"], ctx["f_0"]
    result = Rdc * math.sqrt(f / f0)
    return result, [f"R_ac = R_dc × √(f / f_0) = {fmt(Rdc)} × √({fmt(f)} / {fmt(f0)})"]


@procedure("transmission-line-impedance", "L", "C")
def characteristic_impedance(ctx: ResolvedContext) -> Out:
    L, C = ctx["L"], ctx["C"]
    return math.sqrt(L / C), [f"Z_0 = √(L / C) = √({fmt(L)} / {fmt(C)})"]


@procedure("transformer-regulation", "E_2nl", "V_2fl")
def transformer_regulation(ctx: ResolvedContext) -> Out:
    E_nl, V_fl = ctx["E_2nl"], ctx["V_2fl"]
    result = (E_nl - V_fl) / V_fl * 100
    return result, [f"VR = (E_2nl - V_2fl) / V_2fl × 100 = ({fmt(E_nl)} - {fmt(V_fl)}) / {fmt(V_fl)} × 100"]
