"""This module describes the baseline convention, which is registered and
active by default.

Scalar rules
------------
=====================================  ==========================================
native shape                           scitype
=====================================  ==========================================
missing marker                         ``Missing`` (handled by the classifier)
integral value (including ``bool``)    ``Count``
any other real number                  ``Continuous``
string                                 ``Textual``
leveled value, unordered               ``Multiclass[N]``
leveled value, ordered                 ``OrderedFactor[N]``
single-channel image                   ``GrayImage[W, H]``
multi-channel image                    ``ColorImage[W, H]``
anything else                          ``Unknown``
=====================================  ==========================================

``N`` is the size of the full level set the value was drawn from, including
levels that are never observed.
"""
from __future__ import annotations
from typing import Any

import pandas as pd

from scitypes import types
from scitypes.convention import Convention
from scitypes.convert import to_continuous, to_count, to_finite, to_textual
from scitypes.shapes import Shape


# PIL modes with a single color channel (with or without alpha)
GRAY_MODES = frozenset({"1", "L", "LA", "La", "I", "F", "I;16", "I;16B",
                        "I;16L", "I;16N"})


def classify(value: Any, shape: Shape) -> types.ScientificType | None:
    """Scalar rules of the baseline convention."""
    if shape is Shape.INTEGRAL:
        return types.Count
    if shape is Shape.NUMERIC:
        return types.Continuous
    if shape is Shape.TEXTUAL:
        return types.Textual
    if shape is Shape.LEVELED:
        family = types.OrderedFactor if value.ordered else types.Multiclass
        return family(len(value.categories))
    if shape is Shape.IMAGE:
        width, height = value.size
        if value.mode in GRAY_MODES:
            return types.GrayImage(width, height)
        return types.ColorImage(width, height)
    return None


def classify_dtype(dtype: Any) -> types.ScientificType | None:
    """Vectorized rules of the baseline convention, keyed on array dtype.

    Returns ``None`` for object, datetime and other dtypes, whose elements are
    scanned individually.
    """
    if isinstance(dtype, pd.CategoricalDtype):
        n = 0 if dtype.categories is None else len(dtype.categories)
        if dtype.ordered:
            return types.OrderedFactor(n)
        return types.Multiclass(n)
    if pd.api.types.is_object_dtype(dtype):
        return None
    if pd.api.types.is_bool_dtype(dtype) or pd.api.types.is_integer_dtype(dtype):
        return types.Count
    if pd.api.types.is_float_dtype(dtype):
        return types.Continuous
    if isinstance(dtype, pd.StringDtype) or getattr(dtype, "kind", None) == "U":
        return types.Textual
    return None


baseline = Convention(
    "baseline",
    classify,
    coercions={
        types.ContinuousType: to_continuous,
        types.CountType: to_count,
        types.FiniteType: to_finite,
        types.TextualType: to_textual,
    },
    classify_dtype=classify_dtype,
)
