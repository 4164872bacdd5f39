import numpy as np
import pytest

from distributions import summarize


def test_summarize_list_and_array_agree():
    vals = [1.0, 2.0, 3.0, 4.0]
    a = summarize(vals)
    b = summarize(np.array(vals))
    assert a == b
    assert a.count == 4
    assert a.mean == pytest.approx(2.5)
    assert a.std == pytest.approx(np.std(vals, ddof=1))


def test_summarize_single_value_has_zero_std():
    s = summarize([7.0])
    assert (s.count, s.mean, s.std) == (1, 7.0, 0.0)


def test_summarize_rejects_empty_and_2d():
    with pytest.raises(ValueError):
        summarize([])
    with pytest.raises(ValueError):
        summarize(np.zeros((2, 2)))
