"""This module describes a pair of functions that can be used to convert
to and from categorical data representations, along with the procedure that
coerces a series to a finite scitype.
"""
import numpy as np
import pandas as pd

from scitypes import types
from scitypes.util.error import (
    LevelCountMismatchError, UnsupportedCoercionError, shorten_list
)


def observed_levels(series: pd.Series) -> list:
    """Collect the distinct non-missing values of a series.

    Levels are sorted when the values are mutually comparable, and otherwise
    kept in order of first appearance.
    """
    try:
        unique = pd.unique(series.dropna())
    except TypeError as err:  # unhashable values
        raise UnsupportedCoercionError(
            f"values cannot be used as levels: {err}"
        ) from err

    levels = list(unique)
    try:
        return sorted(levels)
    except TypeError:
        return levels


def categorize(
    series: pd.Series,
    levels: list | None = None,
    ordered: bool = False
) -> pd.Series:
    """Transform a non-categorical series into a categorical series with the
    given levels.

    Parameters
    ----------
    series : pandas.Series
        The series to transform.
    levels : list, optional
        The levels to use for the categorical series.  If this is omitted, then
        levels will be automatically discovered from the observed values.
    ordered : bool, default False
        Indicates whether the resulting levels are ordered.

    Returns
    -------
    pandas.Series
        A categorical series with the same values as the input.  Missing values
        are preserved.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd

        >>> categorize(pd.Series([1, 3, 2]))
        0    1
        1    3
        2    2
        dtype: category
        Categories (3, int64): [1, 2, 3]
    """
    if levels is None:
        levels = observed_levels(series)
    return series.astype(pd.CategoricalDtype(levels, ordered=ordered))


def decategorize(series: pd.Series) -> pd.Series:
    """Transform a categorical series into a non-categorical series.

    Parameters
    ----------
    series : pandas.Series
        The series to transform.

    Returns
    -------
    pandas.Series
        A non-categorical series with the same values as the input.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd

        >>> decategorize(pd.Series([1, 2, 3], dtype="category"))
        0    1
        1    2
        2    3
        dtype: int64
    """
    return pd.Series(
        np.asarray(series.array),
        index=series.index,
        name=series.name
    )


def to_finite(
    series: pd.Series,
    target: types.FiniteType
) -> pd.Series:
    """Coerce a series to a ``Finite``, ``Multiclass`` or ``OrderedFactor``
    scitype.

    Categorical series keep their levels and codes; only the orderedness flag
    changes.  When ``target`` fixes a number of levels, unused categories are
    dropped first.  Anything else is categorized using its observed distinct
    non-missing values as levels.

    Raises
    ------
    LevelCountMismatchError
        If ``target`` fixes a number of levels that differs from the number
        that were observed.
    """
    is_categorical = isinstance(series.dtype, pd.CategoricalDtype)

    # decide orderedness
    if isinstance(target, types.OrderedFactorType):
        ordered = True
    elif isinstance(target, types.MulticlassType):
        ordered = False
    else:
        ordered = bool(is_categorical and series.dtype.ordered)

    if is_categorical:
        if target.n_levels is not None:
            series = series.cat.remove_unused_categories()
        levels = list(series.dtype.categories)
    else:
        levels = observed_levels(series)

    if target.n_levels is not None and len(levels) != target.n_levels:
        raise LevelCountMismatchError(
            f"{target} requires {target.n_levels} levels, but observed "
            f"{len(levels)}: {shorten_list(levels)}"
        )

    if is_categorical:
        if ordered:
            return series.cat.as_ordered()
        return series.cat.as_unordered()
    return categorize(series, levels, ordered=ordered)
