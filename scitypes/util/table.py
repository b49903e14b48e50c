"""This module adapts the tabular data structures that ``scitypes`` accepts to
a common column interface.

Two kinds of tables are recognized:

    *   :class:`pandas.DataFrame` objects.
    *   Column tables, i.e. mappings from string names to equal-length 1D
        columns (lists, ranges, numpy arrays, pandas Series/Index/Categorical).

Every consumer goes through :func:`columns`, :func:`n_rows` and
:func:`rebuild`, so adding support for another table library only touches
this module.
"""
from __future__ import annotations
from typing import Any, Iterator, Mapping

import numpy as np
import pandas as pd

from .error import NotATableError
from .type_hints import column_like, table_like


def is_column(obj: Any) -> bool:
    """Check whether an object can serve as a single 1D column."""
    if isinstance(obj, (pd.Series, pd.Index, pd.Categorical, list, range)):
        return True
    return isinstance(obj, np.ndarray) and obj.ndim == 1


def is_table(obj: Any) -> bool:
    """Check whether an object satisfies the table interface."""
    if isinstance(obj, pd.DataFrame):
        return True

    # column tables
    if not isinstance(obj, Mapping) or not obj:
        return False
    if not all(isinstance(k, str) and is_column(v) for k, v in obj.items()):
        return False
    return len({len(v) for v in obj.values()}) == 1


def columns(table: table_like) -> Iterator[tuple[Any, column_like]]:
    """Yield ``(name, column)`` pairs in table order.

    Raises
    ------
    NotATableError
        If ``table`` does not satisfy the table interface.
    """
    if isinstance(table, pd.DataFrame):
        return iter(table.items())
    if is_table(table):
        return iter(table.items())
    raise NotATableError(
        f"expected a DataFrame or a mapping of equal-length columns, not "
        f"{type(table).__name__}"
    )


def column_names(table: table_like) -> list:
    """Get the column names of a table in order."""
    return [name for name, _ in columns(table)]


def n_rows(table: table_like) -> int:
    """Get the total number of rows in a table."""
    if isinstance(table, pd.DataFrame):
        return len(table.index)
    for _, col in columns(table):
        return len(col)
    return 0


def rebuild(table: table_like, updates: Mapping[Any, column_like]) -> table_like:
    """Construct a new table of the same kind, replacing selected columns.

    Parameters
    ----------
    table : DataFrame | Mapping
        The original table.  This is never modified.
    updates : Mapping
        New column data for some or all of the columns in ``table``.

    Returns
    -------
    DataFrame | dict
        A new table with the same column order as ``table``.
    """
    if isinstance(table, pd.DataFrame):
        result = table.copy()
        for name, col in updates.items():
            result[name] = col
        return result

    columns(table)  # validate
    return {name: updates.get(name, col) for name, col in table.items()}
