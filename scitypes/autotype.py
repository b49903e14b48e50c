"""This module describes the ``autotype()`` function, which suggests likely
scitypes for the columns of a table using an ordered list of heuristic rules.

Rules
-----
few_to_finite
    Columns with few distinct values are probably categorical.

discrete_to_continuous
    ``Count`` columns are probably measurements.

string_to_class
    String columns are probably class labels.

Custom rules can be added with :func:`register_rule`.
"""
from __future__ import annotations
import math
import numbers
from typing import Any, Callable, Iterable

import pandas as pd

from scitypes import types
from scitypes.convention import Convention
from scitypes.convert.base import as_series
from scitypes.decorators.extension import extension_func
from scitypes.detect import elscitype
from scitypes.schema import kind_of
from scitypes.util import table
from scitypes.util.error import UnknownRuleError
from scitypes.util.type_hints import column_like, table_like


# rule(column, kind, scitype, **options) -> ScientificType | None
rule = Callable[..., "types.ScientificType | None"]


RULES: dict[str, rule] = {}


def register_rule(func: rule = None, *, name: str | None = None) -> rule:
    """Register a heuristic rule for use in :func:`autotype`.

    Parameters
    ----------
    func : Callable
        A function ``rule(column, kind, scitype, **options)`` that returns a
        suggested scitype or ``None`` to abstain.  ``column`` is a
        :class:`pandas.Series`, ``kind`` is the native representation kind
        reported by :func:`pandas.api.types.infer_dtype`, ``scitype`` is the
        suggestion forwarded from the previous rule and ``options`` contains
        the tunables of :func:`autotype`, e.g. ``few_ratio`` and ``nrows``.
    name : str, optional
        The name to register under.  Defaults to ``func.__name__``.

    Raises
    ------
    KeyError
        If a rule of the same name is already registered.

    Examples
    --------
    .. doctest::

        >>> @register_rule
        ... def binary_to_count(column, kind, scitype, **options):
        ...     if kind == "boolean":
        ...         return Count
        ...     return None
    """
    def decorator(f: rule) -> rule:
        _name = f.__name__ if name is None else name
        if _name in RULES:
            raise KeyError(f"rule '{_name}' is already registered")
        RULES[_name] = f
        return f

    if func is None:
        return decorator
    return decorator(func)


######################
####    PUBLIC    ####
######################


@extension_func
def autotype(
    data: table_like,
    rules: tuple = ("few_to_finite",),
    only_changes: bool = False,
    *,
    few_ratio: float = 1.0,
    convention: Convention | None = None
) -> dict[Any, types.ScientificType]:
    """Suggest scitypes for the columns of a table.

    Parameters
    ----------
    data : DataFrame | Mapping
        A table.
    rules : Iterable[str | Callable], default ("few_to_finite",)
        The rules to apply, in order.  Each rule sees the suggestion of the
        one before it, so order matters.
    only_changes : bool, default False
        If ``True``, omit columns whose suggestion matches their current
        scitype.
    few_ratio : float, default 1.0
        Scales the threshold used by ``few_to_finite``.  A column has few
        values if it has at most ``max(2, floor(few_ratio * sqrt(nrows)))``
        distinct non-missing values.
    convention : Convention, optional
        The convention to apply.  Defaults to the active convention.

    Returns
    -------
    dict
        A map from column names to suggested scitypes.  These can be passed
        directly to :func:`coerce() <scitypes.coerce>`.

    Raises
    ------
    NotATableError
        If ``data`` is not a table.
    UnknownRuleError
        If a rule name is not registered.  This is checked before any column
        is processed.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd
        >>> X = pd.DataFrame({"grade": [1, 2, 3, 4] * 25})
        >>> autotype(X)
        {'grade': OrderedFactor[4]}
        >>> autotype(X, rules=("discrete_to_continuous", "few_to_finite"))
        {'grade': Continuous}
    """
    nrows = table.n_rows(data)
    cols = list(table.columns(data))
    options = {"few_ratio": few_ratio, "nrows": nrows}

    funcs = resolve_rules(rules)

    result = {}
    for name, col in cols:
        series = as_series(col)
        original = elscitype(col, convention)
        kind = kind_of(col)

        suggestion = original
        for func in funcs:
            proposed = func(series, kind, suggestion, **options)
            if proposed is not None:
                suggestion = proposed

        if only_changes and suggestion == original:
            continue
        result[name] = suggestion

    return result


#######################
####    BUILTINS    ####
#######################


def with_missing(
    suggestion: types.ScientificType,
    scitype: types.ScientificType
) -> types.ScientificType:
    """Re-attach ``Missing`` to a suggestion if the original admitted it."""
    if types.has_missing(scitype):
        return types.Union(suggestion, types.Missing)
    return suggestion


def n_distinct(column: column_like) -> int:
    return int(pd.Series(column).nunique(dropna=True))


@register_rule
def few_to_finite(
    column: pd.Series,
    kind: str,
    scitype: types.ScientificType,
    *,
    few_ratio: float = 1.0,
    nrows: int | None = None,
    **options
) -> types.ScientificType | None:
    """Columns with few distinct ``Count`` or ``Textual`` values become
    ``OrderedFactor[n]`` (numeric) or ``Multiclass[n]`` (otherwise).
    """
    base = types.nonmissing(scitype)
    if base not in (types.Count, types.Textual):
        return None

    if nrows is None:
        nrows = len(column)
    n = n_distinct(column)
    threshold = max(2, math.floor(few_ratio * math.sqrt(nrows)))
    if not 0 < n <= threshold:
        return None

    numeric = kind in ("integer", "floating", "mixed-integer-float", "decimal")
    if numeric and n > 2:
        return with_missing(types.OrderedFactor(n), scitype)
    return with_missing(types.Multiclass(n), scitype)


@register_rule
def discrete_to_continuous(
    column: pd.Series,
    kind: str,
    scitype: types.ScientificType,
    **options
) -> types.ScientificType | None:
    """``Count`` columns become ``Continuous``."""
    if types.nonmissing(scitype) == types.Count:
        return with_missing(types.Continuous, scitype)
    return None


@register_rule
def string_to_class(
    column: pd.Series,
    kind: str,
    scitype: types.ScientificType,
    **options
) -> types.ScientificType | None:
    """String columns become ``Multiclass[n]``."""
    if kind != "string":
        return None
    n = n_distinct(column)
    if n == 0:
        return None
    return with_missing(types.Multiclass(n), scitype)


#########################
####    ARGUMENTS    ####
#########################


def resolve_rules(val: Iterable[str | rule]) -> tuple[rule, ...]:
    """Look up rule names, passing callables through unchanged."""
    resolved = []
    for r in val:
        if callable(r):
            resolved.append(r)
        elif isinstance(r, str) and r in RULES:
            resolved.append(RULES[r])
        else:
            raise UnknownRuleError(
                f"no rule named {repr(r)} (registered: {list(RULES)})"
            )
    return tuple(resolved)


@autotype.argument
def rules(val: Iterable, context: dict) -> tuple:
    """The heuristic rules to apply, in order."""
    if isinstance(val, str) or callable(val):
        val = (val,)
    val = tuple(val)
    resolve_rules(val)  # fail before any column is processed
    return val


@autotype.argument
def few_ratio(val: float, context: dict) -> float:
    """Scales the distinct-value threshold of ``few_to_finite``."""
    if isinstance(val, bool) or not isinstance(val, numbers.Real):
        raise TypeError(f"`few_ratio` must be a real number, not {repr(val)}")
    if not val > 0:
        raise ValueError(f"`few_ratio` must be positive, not {val}")
    return float(val)
