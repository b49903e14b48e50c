"""This package contains various utilities related to ``scitypes``
functionality.

Modules
-------
categorical
    A scalar wrapper that carries the level set of a categorical value.

error
    The ``scitypes`` exception hierarchy and utilities for formatting error
    messages.

table
    A common column interface over pandas DataFrames and column mappings.

type_hints
    type hints for mypy and other static type checkers.
"""
