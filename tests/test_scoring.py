import pytest

from efe.scoring import score


def test_no_warnings_is_full_confidence():
    assert score(0) == 1.0

def test_each_warning_costs_a_tenth():
    assert score(1) == pytest.approx(0.9)
    assert score(3) == pytest.approx(0.7)

def test_clamped_at_zero():
    assert score(10) == pytest.approx(0.0)
    assert score(11) == 0.0
    assert score(50) == 0.0

def test_non_increasing_in_warning_count():
    scores = [score(n) for n in range(15)]
    assert all(a >= b for a, b in zip(scores, scores[1:]))

def test_negative_count_rejected():
    with pytest.raises(ValueError):
        score(-1)
