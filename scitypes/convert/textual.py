"""This module describes the procedure that coerces a series to the
``Textual`` scitype.
"""
import pandas as pd

from scitypes import types

from .categorical import decategorize


def to_textual(series: pd.Series, target: types.TextualType) -> pd.Series:
    """Convert every non-missing value to its string representation.

    Missing values are left untouched and the result has ``object`` dtype.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd

        >>> to_textual(pd.Series([1, None, 3], dtype="Int64"), Textual)
        0       1
        1    <NA>
        2       3
        dtype: object
    """
    if isinstance(series.dtype, pd.CategoricalDtype):
        series = decategorize(series)

    missing = series.isna()
    result = series.astype(object)
    result[~missing] = [str(v) for v in series[~missing]]
    return result
