"""This module describes the procedures that coerce a series to the
``Continuous`` and ``Count`` scitypes.
"""
from __future__ import annotations

import numpy as np
import pandas as pd

from scitypes import types
from scitypes.util.error import (
    NonIntegralValueError, UnsupportedCoercionError, shorten_list
)

from .categorical import decategorize


# integers up to this magnitude are always exact in float64
MAX_EXACT_FLOAT = 2**53


# bounds of int64.  MAX_INT64 rounds up to 2**63 as a float, so float input
# is checked against the half-open interval [-2**63, 2**63) instead.
MIN_INT64 = np.iinfo(np.int64).min
MAX_INT64 = np.iinfo(np.int64).max
INT64_FLOAT_BOUND = 2.0**63


######################
####    PUBLIC    ####
######################


def to_continuous(
    series: pd.Series,
    target: types.ContinuousType
) -> pd.Series:
    """Coerce a series to the ``Continuous`` scitype.

    Parameters
    ----------
    series : pandas.Series
        The series to convert.  This can be boolean, integer, float,
        categorical with numeric levels, or object/string data that can be
        parsed as numbers.
    target : ContinuousType
        The target scitype.

    Returns
    -------
    pandas.Series
        A ``float64`` series with ``NaN`` in place of missing values.

    Raises
    ------
    UnsupportedCoercionError
        If the values are not numeric, are complex, or contain integers that
        float64 cannot store exactly.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd

        >>> to_continuous(pd.Series([1, 2, None], dtype="Int64"), Continuous)
        0    1.0
        1    2.0
        2    NaN
        dtype: float64
    """
    series = as_numeric(series)

    if pd.api.types.is_integer_dtype(series.dtype):
        values = series.dropna().to_numpy(dtype=object)
        inexact = [
            v for v in values.tolist()
            if abs(v) > MAX_EXACT_FLOAT and int(float(v)) != v
        ]
        if inexact:
            raise UnsupportedCoercionError(
                f"integers cannot be represented exactly as floats: "
                f"{shorten_list(inexact)}"
            )

    return as_float(series)


def to_count(
    series: pd.Series,
    target: types.CountType
) -> pd.Series:
    """Coerce a series to the ``Count`` scitype.

    Parameters
    ----------
    series : pandas.Series
        The series to convert.  Floats must be integral and finite.
    target : CountType
        The target scitype.

    Returns
    -------
    pandas.Series
        An ``int64`` series, or a nullable ``Int64`` series if any values are
        missing.

    Raises
    ------
    NonIntegralValueError
        If any non-missing value is fractional or infinite.
    UnsupportedCoercionError
        If the values are not numeric or do not fit in 64 bits.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd

        >>> to_count(pd.Series([1.0, 2.0, 3.0]), Count)
        0    1
        1    2
        2    3
        dtype: int64
        >>> to_count(pd.Series([1.0, None]), Count)
        0       1
        1    <NA>
        dtype: Int64
        >>> to_count(pd.Series([1.5, 2.0]), Count)
        Traceback (most recent call last):
            ...
        scitypes.util.error.NonIntegralValueError: non-integral values at index [0]
    """
    series = as_numeric(series)
    missing = series.isna()

    if pd.api.types.is_bool_dtype(series.dtype):
        series = series.astype("Int64" if missing.any() else np.int64)

    elif pd.api.types.is_float_dtype(series.dtype):
        values = series.to_numpy(dtype=np.float64, na_value=np.nan)
        observed = ~np.isnan(values)
        bad = observed & (~np.isfinite(values) | (values != np.trunc(values)))
        if bad.any():
            raise NonIntegralValueError(
                f"non-integral values at index "
                f"{shorten_list(series.index[bad])}"
            )
        check_int64(values[observed])
        result = pd.array(
            np.where(observed, values, 0).astype(np.int64),
            dtype="Int64"
        )
        result[~observed] = pd.NA
        series = pd.Series(result, index=series.index, name=series.name)

    elif not pd.api.types.is_integer_dtype(series.dtype):
        raise UnsupportedCoercionError(
            f"cannot interpret {series.dtype} values as counts"
        )

    else:
        check_int64(series.dropna().to_numpy())
        series = series.astype("Int64")

    if missing.any():
        return series
    return series.astype(np.int64)


#######################
####    PRIVATE    ####
#######################


def as_numeric(series: pd.Series) -> pd.Series:
    """Convert categorical, object and string data to a numeric series.

    Raises
    ------
    UnsupportedCoercionError
        If the values cannot be parsed as real numbers.
    """
    if isinstance(series.dtype, pd.CategoricalDtype):
        series = decategorize(series)

    dtype = series.dtype
    if pd.api.types.is_complex_dtype(dtype):
        raise UnsupportedCoercionError("complex values have no real scitype")
    if pd.api.types.is_bool_dtype(dtype) or (
        pd.api.types.is_numeric_dtype(dtype) and
        not pd.api.types.is_object_dtype(dtype)
    ):
        return series

    if not (
        pd.api.types.is_object_dtype(dtype) or
        pd.api.types.is_string_dtype(dtype)
    ):
        raise UnsupportedCoercionError(
            f"cannot interpret {dtype} values as numbers"
        )

    # parse object/string data
    try:
        result = pd.to_numeric(series.astype(object))
    except (TypeError, ValueError) as err:
        raise UnsupportedCoercionError(
            f"values could not be parsed as numbers: {err}"
        ) from err

    if pd.api.types.is_object_dtype(result.dtype):  # e.g. huge integers
        raise UnsupportedCoercionError(
            "values could not be represented with a numeric dtype"
        )
    if pd.api.types.is_complex_dtype(result.dtype):
        raise UnsupportedCoercionError("complex values have no real scitype")
    return result


def as_float(series: pd.Series) -> pd.Series:
    """Convert a numeric series to ``float64``, mapping missing values to
    ``NaN``.
    """
    return pd.Series(
        series.to_numpy(dtype=np.float64, na_value=np.nan),
        index=series.index,
        name=series.name
    )


def check_int64(values: np.ndarray) -> None:
    """Ensure that integral values fit in a signed 64-bit integer."""
    if not len(values):
        return
    if values.dtype.kind == "f":
        overflow = (
            values.min() < -INT64_FLOAT_BOUND or
            values.max() >= INT64_FLOAT_BOUND
        )
    else:
        overflow = values.min() < MIN_INT64 or values.max() > MAX_INT64
    if overflow:
        raise UnsupportedCoercionError(
            f"values exceed the range of a 64-bit integer: "
            f"[{values.min()}, {values.max()}]"
        )
