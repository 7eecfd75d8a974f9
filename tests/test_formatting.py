import pytest

from efe.formatting import format_number, result_line


@pytest.mark.parametrize("value, text", [
    (10000000, "1.0000e+7"),
    (1e6, "1.0000e+6"),
    (999999.5, "999999.5"),
    (0.001, "0.001"),
    (0.0005, "5.0000e-4"),
    (4.4, "4.4"),
    (125.0, "125"),
    (0, "0"),
    (-0.0, "0"),
    (-2.5, "-2.5"),
    (1e-12, "1.0000e-12"),
    (-6.02e23, "-6.0200e+23"),
    (1.5e100, "1.5000e+100"),
])
def test_format_number(value, text):
    assert format_number(value) == text

@pytest.mark.parametrize("x", [1e-5, 0.5, 1234.5, 1e7])
def test_format_is_idempotent(x):
    shown = format_number(x)
    assert format_number(float(shown)) == shown

def test_result_line_drops_trailing_space_without_units():
    assert result_line(4.4, "V") == "Result: 4.4 V"
    assert result_line(0.5, "") == "Result: 0.5"

def test_exponent_is_not_zero_padded():
    assert format_number(62360679.77) == "6.2361e+7"
    assert format_number(0.00421875) == "0.004219"
    assert format_number(2.67041e-5) == "2.6704e-5"
