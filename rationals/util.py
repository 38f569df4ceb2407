import logging
import numbers
import typing

import numpy as np

from .rational import Rational

module_logger = logging.getLogger(__name__)


__all__ = [
    "rational_type",
    "to_rational",
    "to_float_array",
    "to_rational_array",
    "from_integer_arrays"
]


rational_type = typing.Union[str, int, Rational]


def to_rational(value: rational_type) -> Rational:
    """
    Coerce `value` into a Rational. Rational objects are passed through,
    integers get a denominator of 1 and strings are parsed.
    """
    module_logger.debug(f"to_rational: value={value!r}")
    if isinstance(value, Rational):
        return value
    if isinstance(value, numbers.Integral) and not isinstance(value, bool):
        return Rational(value)
    if isinstance(value, str):
        return Rational.from_str(value)
    raise TypeError(
        f"Couldn't convert {value!r} of type {type(value)} to Rational")


def to_float_array(values: typing.Iterable[rational_type]) -> np.ndarray:
    """
    Given some rational-like values, create a float64 numpy array.

    Returns:
        np.ndarray
    """
    rationals = [to_rational(value) for value in values]
    module_logger.debug(f"to_float_array: {len(rationals)} values")
    return np.asarray([float(r) for r in rationals], dtype=np.float64)


def to_rational_array(values: typing.Iterable[rational_type]) -> np.ndarray:
    """
    Object array of Rationals, so that numpy's elementwise operators
    dispatch to Rational arithmetic.
    """
    rationals = [to_rational(value) for value in values]
    arr = np.empty(len(rationals), dtype=object)
    arr[:] = rationals
    return arr


def _is_integer_array(arr: np.ndarray) -> bool:
    # ints past int64 only fit in object arrays
    if not arr.size or np.issubdtype(arr.dtype, np.integer):
        return True
    if arr.dtype != np.dtype(object):
        return False
    return all(isinstance(x, numbers.Integral) and not isinstance(x, bool)
               for x in arr.ravel())


def from_integer_arrays(
    numerators: np.ndarray,
    denominators: np.ndarray
) -> typing.List[Rational]:
    """
    Build Rationals elementwise from two integer arrays of the same shape.
    The result is flattened in C order.
    """
    numerators = np.asarray(numerators)
    denominators = np.asarray(denominators)
    module_logger.debug((f"from_integer_arrays: "
                         f"numerators.shape={numerators.shape}, "
                         f"denominators.shape={denominators.shape}"))
    if numerators.shape != denominators.shape:
        raise ValueError(
            (f"Shape mismatch: numerators have shape {numerators.shape}, "
             f"denominators have shape {denominators.shape}"))
    for arr in (numerators, denominators):
        if not _is_integer_array(arr):
            raise TypeError(f"Expected integer array, got dtype {arr.dtype}")
    return [Rational(int(n), int(d))
            for n, d in zip(numerators.ravel(), denominators.ravel())]
