from __future__ import annotations
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any
import numbers

import numpy as np
import pandas as pd

from .errors import CoercionError


__all__ = ["to_float", "to_epoch_ms"]


_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_float(value: Any) -> float:
    """
    Narrow a number-like value to a 64-bit float.

    Accepts Python ints and floats, Decimal/Fraction, and numpy integer or
    floating scalars. Booleans, strings, complex numbers and None are
    rejected: they have a float() path but no numeric intent.
    """
    # bool is an Integral; numpy.bool_ is not, but both are flags, not numbers
    if isinstance(value, (bool, np.bool_)):
        raise CoercionError(f"cannot coerce boolean {value!r} to float")
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            return float(value)
        except (OverflowError, ValueError) as e:
            raise CoercionError(f"cannot coerce {value!r} to float: {e}") from e
    if isinstance(value, np.generic) and np.issubdtype(value.dtype, np.number) \
            and not np.issubdtype(value.dtype, np.complexfloating):
        return float(value)
    raise CoercionError(f"cannot coerce {type(value).__name__} value {value!r} to float")


def to_epoch_ms(value: Any) -> float:
    """Milliseconds since the Unix epoch, the unit Flot time axes expect."""
    if value is pd.NaT or (isinstance(value, np.datetime64) and np.isnat(value)):
        raise CoercionError("cannot place a missing timestamp (NaT) on a time axis")
    if isinstance(value, np.datetime64):
        return float(value.astype("datetime64[us]").astype(np.int64)) / 1000.0
    if isinstance(value, pd.Timestamp):
        value = value.to_pydatetime()
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return (value - _EPOCH).total_seconds() * 1000.0
    if isinstance(value, date):
        return to_epoch_ms(datetime(value.year, value.month, value.day))
    return to_float(value)
