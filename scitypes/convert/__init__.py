"""Coercion procedures used by the baseline convention.

Each procedure accepts a 1D :class:`pandas.Series` and a non-union target
scitype, and returns a new series whose element scitype conforms to that
target.  Procedures never modify their input, and they preserve the position
of every missing value.
"""
from .categorical import categorize, decategorize, to_finite
from .numeric import to_continuous, to_count
from .textual import to_textual
