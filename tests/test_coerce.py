from datetime import date, datetime, timezone
from decimal import Decimal
from fractions import Fraction

import numpy as np
import pandas as pd
import pytest

from flot_viz_engine import CoercionError, to_epoch_ms, to_float


@pytest.mark.parametrize("value, expected", [
    (3, 3.0),
    (-2.5, -2.5),
    (np.int16(7), 7.0),
    (np.uint64(9), 9.0),
    (np.float32(0.5), 0.5),
    (np.float64(1e-300), 1e-300),
    (Decimal("0.1"), 0.1),
    (Fraction(1, 4), 0.25),
])
def test_number_like_values_become_floats(value, expected):
    out = to_float(value)
    assert type(out) is float
    assert out == expected


@pytest.mark.parametrize("value", [True, np.bool_(False), "1.5", b"2", None, 1 + 2j, np.complex128(1), object()])
def test_values_without_numeric_intent_are_rejected(value):
    with pytest.raises(CoercionError):
        to_float(value)


def test_large_integers_round_but_out_of_range_fails():
    assert to_float(2 ** 53 + 1) == float(2 ** 53)
    with pytest.raises(CoercionError):
        to_float(10 ** 400)


def test_nan_is_kept_as_float():
    assert np.isnan(to_float(float("nan")))


def test_epoch_ms_conversions():
    assert to_epoch_ms(datetime(1970, 1, 2)) == 86_400_000.0
    assert to_epoch_ms(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 0.0
    assert to_epoch_ms(date(1970, 1, 1)) == 0.0
    assert to_epoch_ms(np.datetime64("1970-01-01T00:00:01")) == 1000.0
    assert to_epoch_ms(pd.Timestamp("2024-01-01", tz="UTC")) == 1_704_067_200_000.0
    assert to_epoch_ms(42) == 42.0
    with pytest.raises(CoercionError):
        to_epoch_ms("2024-01-01")


@pytest.mark.parametrize("value", [pd.NaT, np.datetime64("NaT")])
def test_nat_is_rejected(value):
    with pytest.raises(CoercionError):
        to_epoch_ms(value)
