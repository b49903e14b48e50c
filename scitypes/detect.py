"""This module describes the ``scitype()`` function, which classifies
arbitrary values into the scitype tree according to the active convention.
"""
from __future__ import annotations
from typing import Any, Iterable
import warnings

import numpy as np
import pandas as pd

from scitypes import types
from scitypes import conventions
from scitypes.convention import Convention
from scitypes.shapes import Shape, shape_of
from scitypes.util import table
from scitypes.util.categorical import categorical_values
from scitypes.util.error import NotATableError


######################
####    PUBLIC    ####
######################


def scitype(
    value: Any,
    convention: Convention | None = None
) -> types.ScientificType:
    """Get the scientific type of a value.

    Parameters
    ----------
    value : Any
        The value to classify.  This can be a scalar, a tuple, a 1D or ND
        sequence (list, numpy array, pandas Series/Index/Categorical), or a
        table.
    convention : Convention, optional
        The convention to apply.  Defaults to the active convention of the
        default registry.

    Returns
    -------
    ScientificType
        The scitype of ``value``.  This function never raises for ordinary
        values; anything that cannot be interpreted is classified as
        ``Unknown``.

    Notes
    -----
    Results depend only on the value and the convention.  Sequences are
    classified as ``Array[U]``, where ``U`` is the union of the scitypes of
    their elements.  Typed arrays take a vectorized path through
    :meth:`Convention.classify_dtype`, and everything else is scanned
    elementwise.

    Examples
    --------
    .. doctest::

        >>> scitype(3.14)
        Continuous
        >>> scitype(4)
        Count
        >>> scitype([1, 2, None, 3])
        Array[Union[Count, Missing]]
        >>> scitype((1, 4.5))
        Tuple[Count, Continuous]
        >>> scitype(object())
        Unknown
    """
    if convention is None:
        convention = conventions.registry.current

    try:
        return detect(value, convention)

    # never ignore these errors
    except (KeyboardInterrupt, MemoryError, SystemError, SystemExit):
        raise

    # degrade to Unknown
    except Exception as err:
        warnings.warn(
            f"could not classify {type(value).__name__} object, falling back "
            f"to Unknown: {err}",
            UserWarning,
            stacklevel=2
        )
        return types.Unknown


classify = scitype


def elscitype(
    column: Any,
    convention: Convention | None = None
) -> types.ScientificType:
    """Get the scitype shared by the elements of a sequence.

    This is the ``U`` in ``Array[U]``.  Values that are not sequences return
    ``Unknown``.

    Examples
    --------
    .. doctest::

        >>> elscitype([1.0, 2.5])
        Continuous
        >>> elscitype(pd.Series(["a", None]))
        Union[Missing, Textual]
    """
    result = scitype(column, convention)
    if isinstance(result, types.ArrayType) and result.element is not None:
        return result.element
    return types.Unknown


#######################
####    PRIVATE    ####
#######################


def detect(value: Any, convention: Convention) -> types.ScientificType:
    """Recursive classification, without error handling."""
    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value[()]

    shape = shape_of(value)
    if shape is Shape.TABLE:
        return detect_table(value, convention)
    if shape is Shape.TUPLE:
        return types.Tuple(*(detect(v, convention) for v in value))
    if shape is Shape.SEQUENCE:
        return detect_array(value, convention)
    if shape is Shape.MISSING:
        return types.Missing

    result = convention.classify(value, shape)
    if result is None:
        return types.Unknown
    return result


def detect_table(value: Any, convention: Convention) -> types.ScientificType:
    """Classify a table as ``Table[Union[Array[U1], ..., Array[Un]]]``."""
    try:
        cols = list(table.columns(value))
    except NotATableError:
        return types.Unknown

    return types.Table[
        types.Union(*(detect_array(col, convention) for _, col in cols))
    ]


def detect_array(data: Any, convention: Convention) -> types.ScientificType:
    """Classify a sequence as ``Array[U]``."""
    if isinstance(data, range):
        data = np.arange(data.start, data.stop, data.step)
    ndim = getattr(data, "ndim", 1)

    # vectorized path
    dtype = getattr(data, "dtype", None)
    if dtype is not None and not pd.api.types.is_object_dtype(dtype):
        tag = convention.classify_dtype(dtype)
        if tag is not None:
            missing = np.asarray(pd.isna(data))
            members = []
            if missing.size == 0 or not missing.all():
                members.append(tag)
            if missing.any():
                members.append(types.Missing)
            return types.Array(types.Union(*members), ndim)

    # elementwise path
    return types.Array(
        union_of(detect(v, convention) for v in elements(data)),
        ndim
    )


def elements(data: Any) -> Iterable[Any]:
    """Iterate over the scalar elements of a sequence."""
    if isinstance(getattr(data, "dtype", None), pd.CategoricalDtype):
        return categorical_values(pd.Series(data))
    if isinstance(data, np.ndarray):
        return data.ravel()
    return data


def union_of(tags: Iterable[types.ScientificType]) -> types.ScientificType:
    """Combine element scitypes, treating an empty sequence as ``Unknown``."""
    unique = set(tags)
    if not unique:
        return types.Unknown
    return types.Union(*unique)
