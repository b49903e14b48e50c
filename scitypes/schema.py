"""This module describes the ``schema()`` function, which summarizes the
columns of a table alongside their scitypes.
"""
from __future__ import annotations
from typing import Any, Iterator, NamedTuple

import numpy as np
import pandas as pd

from scitypes import types
from scitypes.convention import Convention
from scitypes.detect import elscitype
from scitypes.util import table
from scitypes.util.type_hints import table_like


class Column(NamedTuple):
    """A single row of a :class:`Schema`."""

    name: Any
    kind: str
    scitype: types.ScientificType


class Schema:
    """A read-only, ordered summary of a table's columns.

    Parameters
    ----------
    columns : Iterable[Column]
        ``(name, kind, scitype)`` rows in table order.
    nrows : int
        The number of rows in the table.

    Examples
    --------
    .. doctest::

        >>> import pandas as pd
        >>> X = pd.DataFrame({"x": [1.0, None], "y": ["a", "b"]})
        >>> print(schema(X))
        name  kind      scitype
        x     floating  Union[Continuous, Missing]
        y     string    Textual
        (2 rows)
    """

    __slots__ = ("_columns", "_nrows")

    def __init__(self, columns, nrows: int):
        object.__setattr__(self, "_columns", tuple(Column(*c) for c in columns))
        object.__setattr__(self, "_nrows", int(nrows))

    @property
    def names(self) -> tuple:
        return tuple(c.name for c in self._columns)

    @property
    def kinds(self) -> tuple[str, ...]:
        return tuple(c.kind for c in self._columns)

    @property
    def scitypes(self) -> tuple[types.ScientificType, ...]:
        return tuple(c.scitype for c in self._columns)

    @property
    def nrows(self) -> int:
        return self._nrows

    def to_frame(self) -> pd.DataFrame:
        """Render this schema as a :class:`pandas.DataFrame`."""
        # unions are iterable, so they are placed one at a time
        scitypes = np.empty(len(self._columns), dtype=object)
        for idx, col in enumerate(self._columns):
            scitypes[idx] = col.scitype
        return pd.DataFrame({
            "name": list(self.names),
            "kind": list(self.kinds),
            "scitype": scitypes,
        })

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __getitem__(self, name: Any) -> Column:
        for col in self._columns:
            if col.name == name:
                return col
        raise KeyError(name)

    def __iter__(self) -> Iterator[Column]:
        return iter(self._columns)

    def __len__(self) -> int:
        return len(self._columns)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Schema):
            return NotImplemented
        return self._columns == other._columns and self._nrows == other._nrows

    def __hash__(self) -> int:
        return hash((self._columns, self._nrows))

    def __str__(self) -> str:
        rows = [("name", "kind", "scitype")]
        rows += [(str(n), k, str(s)) for n, k, s in self._columns]
        widths = [max(len(r[i]) for r in rows) for i in range(2)]
        lines = [
            f"{r[0]:<{widths[0]}}  {r[1]:<{widths[1]}}  {r[2]}" for r in rows
        ]
        lines.append(f"({self._nrows} rows)")
        return "\n".join(lines)

    def __repr__(self) -> str:
        body = ", ".join(f"{repr(n)}: {s}" for n, _, s in self._columns)
        return f"{type(self).__name__}({{{body}}}, nrows={self._nrows})"


def schema(data: table_like, convention: Convention | None = None) -> Schema:
    """Summarize the columns of a table.

    Parameters
    ----------
    data : DataFrame | Mapping
        A table.
    convention : Convention, optional
        The convention to apply.  Defaults to the active convention.

    Returns
    -------
    Schema
        The name, native kind and element scitype of every column.

    Raises
    ------
    NotATableError
        If ``data`` does not satisfy the table interface.
    """
    rows = [
        (name, kind_of(col), elscitype(col, convention))
        for name, col in table.columns(data)
    ]
    return Schema(rows, table.n_rows(data))


def kind_of(column: Any) -> str:
    """Get the native representation kind of a column."""
    if isinstance(column, range):
        return "integer"
    return pd.api.types.infer_dtype(column, skipna=True)
