# -----------------------------------------------------------------------------
# Number formatting
# Purpose:
#   One rendering rule for every number shown to a user, so derivation steps
#   and final results print identical text for identical values.
#   - |x| >= 1e6, or 0 < |x| < 0.001  -> scientific, 4 decimals ("1.0000e+7")
#   - otherwise                       -> fixed, 6 decimals, trailing zeros and
#                                        a bare trailing point stripped
# -----------------------------------------------------------------------------

from __future__ import annotations

SCI_UPPER = 1e6
SCI_LOWER = 0.001


def format_number(value: float) -> str:
    if abs(value) >= SCI_UPPER or (abs(value) < SCI_LOWER and value != 0):
        # exponent without zero padding: 1.0000e+7, 5.0000e-4
        mantissa, exponent = f"{value:.4e}".split("e")
        return f"{mantissa}e{int(exponent):+d}"
    text = f"{value:.6f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


# Short alias used by the procedure modules when building step strings.
fmt = format_number


def result_line(value: float, units: str) -> str:
    return f"Result: {format_number(value)} {units}".rstrip()
