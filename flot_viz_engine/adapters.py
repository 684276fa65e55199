from __future__ import annotations
from typing import Any, Callable, Iterable, Iterator, List, Tuple
import builtins
import math

import pandas as pd

from .coerce import to_epoch_ms, to_float
from .errors import CoercionError, InvalidArgument


__all__ = [
    "Point",
    "FloatRange",
    "range",
    "mapr",
    "mapv",
    "zip",
    "to_f64",
    "from_frame",
]

Point = Tuple[float, float]


class FloatRange:
    """Evenly spaced floats in [start, stop). Sized and restartable."""

    def __init__(self, start: Any, stop: Any, step: Any):
        self.start = to_float(start)
        self.stop = to_float(stop)
        self.step = to_float(step)
        if not all(math.isfinite(v) for v in (self.start, self.stop, self.step)):
            raise InvalidArgument(f"range bounds and step must be finite: {self!r}")
        if self.step <= 0:
            raise InvalidArgument(f"range step must be positive, got {self.step}")
        self._len = max(0, math.ceil((self.stop - self.start) / self.step))
        # the division can round up by one; every element must stay below stop
        while self._len > 0 and self.start + (self._len - 1) * self.step >= self.stop:
            self._len -= 1

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[float]:
        for i in builtins.range(self._len):
            yield self.start + i * self.step

    def __repr__(self) -> str:
        return f"FloatRange({self.start!r}, {self.stop!r}, {self.step!r})"


def range(start: Any, stop: Any, step: Any) -> FloatRange:
    return FloatRange(start, stop, step)


def mapr(refs: Iterable[Any], f: Callable[[float], Any]) -> Iterator[Point]:
    """
    Pairs (x, f(x)) over a collection that stays usable afterwards.

    `refs` must be re-iterable (list, tuple, FloatRange, ndarray, Series);
    pass one-shot iterators to `mapv` instead.
    """
    if iter(refs) is refs:
        raise InvalidArgument("mapr reads a collection without consuming it; use mapv for iterators")
    return _mapped(refs, f)


def mapv(values: Iterable[Any], f: Callable[[float], Any]) -> Iterator[Point]:
    """Pairs (x, f(x)), consuming `values` (e.g. a generator or builtin range)."""
    return _mapped(values, f)


def _mapped(values: Iterable[Any], f: Callable[[float], Any]) -> Iterator[Point]:
    for v in values:
        x = to_float(v)
        yield x, to_float(f(x))


def zip(xs: Iterable[Any], ys: Iterable[Any]) -> Iterator[Point]:
    """Element-wise (x, y) pairs; stops at the end of the shorter input."""
    for x, y in builtins.zip(xs, ys):
        yield to_float(x), to_float(y)


def to_f64(pairs: Iterable[Any]) -> Iterator[Point]:
    for i, pair in enumerate(pairs):
        try:
            x, y = pair
        except (TypeError, ValueError) as e:
            raise InvalidArgument(f"element {i} is not an (x, y) pair: {pair!r}") from e
        try:
            yield to_float(x), to_float(y)
        except CoercionError as e:
            raise CoercionError(f"element {i}: {e}") from e


def from_frame(df: pd.DataFrame, x: str, y: str) -> Iterator[Point]:
    """(x, y) pairs from two DataFrame columns; datetime columns become epoch ms."""
    _ensure_columns(df, [x, y])
    xconv = _column_converter(df[x])
    yconv = _column_converter(df[y])
    return ((xconv(a), yconv(b)) for a, b in builtins.zip(df[x].tolist(), df[y].tolist()))


def _column_converter(col: pd.Series) -> Callable[[Any], float]:
    if pd.api.types.is_datetime64_any_dtype(col):
        return to_epoch_ms
    return to_float


def _ensure_columns(df: pd.DataFrame, cols: List[str]) -> None:
    missing = [c for c in cols if c not in df.columns]
    if missing:
        raise InvalidArgument(f"columns not found in dataframe: {missing}")
