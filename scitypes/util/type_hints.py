"""This module provides PEP 484-style type hints for ``scitypes`` constructs.
"""
from typing import (
    Any, Iterable, List, Mapping, Protocol, Tuple, Union, runtime_checkable
)

import numpy as np
import numpy.typing
import pandas as pd


#########################
####    ITERABLES    ####
#########################


array_like = numpy.typing.ArrayLike


list_like = Union[
    List,
    Tuple,
    array_like
]


column_like = Union[
    List,
    range,
    np.ndarray,
    pd.Series,
    pd.Index,
    pd.Categorical
]


table_like = Union[
    pd.DataFrame,
    Mapping[str, column_like]
]


#########################
####    PROTOCOLS    ####
#########################


@runtime_checkable
class Leveled(Protocol):
    """A scalar that knows the full level set it was drawn from."""

    value: Any
    categories: Iterable
    ordered: bool


@runtime_checkable
class ImageLike(Protocol):
    """A two-dimensional image exposing PIL-style metadata."""

    mode: str
    size: Tuple[int, int]


# forward reference, resolved in scitypes.types
type_specifier = Union[
    "ScientificType",
    str,
    Iterable[Union["ScientificType", str]]
]
