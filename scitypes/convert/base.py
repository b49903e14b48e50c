"""This module defines the ``coerce()`` function, which converts data so that
its element scitypes conform to a requested target.
"""
from __future__ import annotations
from typing import Any, Mapping
import warnings

import numpy as np
import pandas as pd

from scitypes import types
from scitypes import conventions
from scitypes.convention import Convention
from scitypes.decorators.base import FunctionDecorator
from scitypes.decorators.extension import extension_func
from scitypes.detect import elscitype
from scitypes.resolve import resolve_type
from scitypes.util import table
from scitypes.util.error import (
    CoercionError, NotATableError, UnsupportedCoercionError
)
from scitypes.util.type_hints import type_specifier


# conversions
# +================+=====+=====+=====+=====+=====+=====+
# |                | con | cnt | mc  | of  | txt | unk |
# +================+=====+=====+=====+=====+=====+=====+
# | bool / int     |  x  |  x  |  x  |  x  |  x  |     |
# +----------------+-----+-----+-----+-----+-----+-----+
# | float          |  x  |  i  |  x  |  x  |  x  |     |
# +----------------+-----+-----+-----+-----+-----+-----+
# | categorical    |  n  |  n  |  x  |  x  |  x  |     |
# +----------------+-----+-----+-----+-----+-----+-----+
# | string/object  |  p  |  p  |  x  |  x  |  x  |     |
# +----------------+-----+-----+-----+-----+-----+-----+
# i = integral values only, n = numeric levels only, p = parseable only


class columnwise(FunctionDecorator):
    """A basic decorator that breaks up tabular inputs into individual
    columns before continuing with a conversion.

    Targets can be given as a single type specifier, which is broadcast to
    every column, or as a mapping.  Mapping keys are either column names or
    scitypes.  Scitype keys select every column whose non-missing element
    scitype is a subtype of the key.  Named columns take precedence over
    scitype keys, and earlier scitype keys take precedence over later ones.
    """
    # pylint: disable=invalid-name

    def __call__(
        self,
        data: Any,
        target: type_specifier | Mapping[Any, type_specifier],
        **kwargs
    ):
        """Apply the wrapped function for each column independently."""
        if not table.is_table(data):
            if isinstance(target, Mapping):
                raise NotATableError(
                    f"a mapping of targets requires tabular input, not "
                    f"{type(data).__name__}"
                )
            return self.__wrapped__(data, target, **kwargs)

        # build conversion plan
        names = table.column_names(data)
        if isinstance(target, Mapping):
            plan = self.plan(data, target, kwargs.get("convention"))
        else:
            plan = dict.fromkeys(names, target)

        # pass each column individually
        updates = {}
        for name, col in table.columns(data):
            if name not in plan:
                continue
            try:
                updates[name] = self.__wrapped__(col, plan[name], **kwargs)
            except CoercionError as err:
                raise type(err)(f"column {repr(name)}: {err}") from err

        return table.rebuild(data, updates)

    def plan(
        self,
        data: Any,
        target: Mapping[Any, type_specifier],
        convention: Convention | None
    ) -> dict:
        """Assign a target to each selected column of a table."""
        names = table.column_names(data)
        by_name = {
            k: v for k, v in target.items()
            if not isinstance(k, types.ScientificType)
        }
        by_type = [
            (k, v) for k, v in target.items()
            if isinstance(k, types.ScientificType)
        ]

        bad = [k for k in by_name if k not in names]
        if bad:
            raise ValueError(f"column not found: {repr(bad)}")

        result = {}
        for name, col in table.columns(data):
            if name in by_name:
                result[name] = by_name[name]
                continue
            if not by_type:
                continue
            observed = types.nonmissing(elscitype(col, convention))
            if isinstance(observed, types.CompositeType) and not observed:
                continue  # all missing
            for source, dest in by_type:
                if types.issubtype(observed, source):
                    result[name] = dest
                    break

        return result


class catch_errors(FunctionDecorator):
    """A basic decorator that enforces the ``errors`` rule during
    conversions.

    Only recoverable failures are handled here.  Errors that indicate misuse,
    like an unparseable type specifier, always propagate.
    """
    # pylint: disable=invalid-name

    def __call__(
        self,
        data: Any,
        target: type_specifier,
        *args,
        errors: str = "raise",
        **kwargs
    ):
        """Call the wrapped function in a try/except block."""
        try:
            return self.__wrapped__(
                data,
                target,
                *args,
                errors=errors,
                **kwargs
            )

        # process according to `errors` arg
        except CoercionError as err:
            if errors == "raise":
                raise
            if errors == "warn":
                warnings.warn(
                    f"could not coerce to {target}, leaving data unchanged: "
                    f"{err}",
                    UserWarning,
                    stacklevel=4
                )
            return data


######################
####    PUBLIC    ####
######################


@columnwise
@extension_func
@catch_errors
def coerce(
    data: Any,
    target: type_specifier,
    *,
    errors: str = "raise",
    verbosity: int = 1,
    convention: Convention | None = None
) -> pd.Series | pd.DataFrame | dict:
    """Convert data so that its scitype conforms to a target.

    Parameters
    ----------
    data : Any
        A single column (list, numpy array, pandas Series/Index/Categorical)
        or a table (DataFrame or mapping of equal-length columns).
    target : type specifier | Mapping
        The target element scitype, in any format recognized by
        :func:`resolve_type() <scitypes.resolve_type>`.  For tables, this can
        also be a mapping from column names or scitypes to targets.  A single
        target is applied to every column.
    errors : {"raise", "warn", "ignore"}, default "raise"
        The rule to apply when a column cannot be converted.  ``"warn"`` and
        ``"ignore"`` leave the offending column unchanged.
    verbosity : int, default 1
        If positive, warn when missing values are present but the target does
        not admit ``Missing``.
    convention : Convention, optional
        The convention to apply.  Defaults to the active convention.

    Returns
    -------
    pandas.Series | pandas.DataFrame | dict
        A new column or table.  The input is never modified.  Columns that
        already conform are copied unchanged.

    Raises
    ------
    LevelCountMismatchError
        If a finite target fixes a number of levels that differs from the
        number observed.
    NonIntegralValueError
        If fractional values are coerced to ``Count``.
    UnsupportedCoercionError
        If no procedure can satisfy the target.
    NotATableError
        If a mapping of targets is given for non-tabular data.
    ValueError
        If a mapping names a column that does not exist.

    Notes
    -----
    Missing values always survive coercion in their original positions.  A
    target of ``T`` therefore yields ``Union[T, Missing]`` for columns that
    contain missing values.

    Examples
    --------
    .. doctest::

        >>> coerce([1, 2, 3], "continuous")
        0    1.0
        1    2.0
        2    3.0
        dtype: float64
        >>> coerce(pd.Series(["a", "b", "a"]), "multiclass")
        0    a
        1    b
        2    a
        dtype: category
        Categories (2, object): ['a', 'b']
    """
    if convention is None:
        convention = conventions.registry.current

    target = resolve_type(target)
    series = as_series(data)
    current = elscitype(series, convention)
    missing = series.isna()
    allowed = types.Union(target, types.Missing) if missing.any() else target

    if missing.any() and verbosity > 0 and not types.has_missing(target):
        warnings.warn(
            f"data contains {int(missing.sum())} missing value(s), which "
            f"will be preserved.  Coerce to Union[{target}, Missing] to "
            f"silence this warning.",
            UserWarning,
            stacklevel=4
        )

    # already conforming
    if types.issubtype(current, allowed):
        return series.copy()

    # find a procedure
    base = types.nonmissing(target)
    if isinstance(base, types.CompositeType):
        raise UnsupportedCoercionError(
            f"cannot choose a conversion for ambiguous target {target}"
        )
    procedure = convention.coercion(base)
    if procedure is None:
        raise UnsupportedCoercionError(
            f"convention '{convention.name}' has no conversion to {base}"
        )

    result = procedure(series, base)

    # check postconditions
    if not np.array_equal(result.isna().to_numpy(), missing.to_numpy()):
        raise UnsupportedCoercionError(
            f"conversion to {base} did not preserve missing values"
        )
    observed = elscitype(result, convention)
    if not types.issubtype(observed, allowed):
        raise UnsupportedCoercionError(
            f"converting {current} to {target} produced {observed}"
        )
    return result


#######################
####    PRIVATE    ####
#######################


def as_series(data: Any) -> pd.Series:
    """Wrap a single column in a :class:`pandas.Series`.

    Lists are converted with :func:`pandas.array`, so that integers with
    missing values keep an integral dtype.
    """
    if isinstance(data, pd.Series):
        return data
    if isinstance(data, (pd.Index, pd.Categorical, range)):
        return pd.Series(data)
    if isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise TypeError(f"expected a 1D column, not {data.ndim}D array")
        return pd.Series(data)
    if isinstance(data, list):
        try:
            return pd.Series(pd.array(data))
        except (TypeError, ValueError):
            return pd.Series(data, dtype=object)
    raise TypeError(
        f"expected a column or table, not {type(data).__name__}"
    )
