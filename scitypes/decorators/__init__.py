"""Cooperative function decorators used to build the public API."""
from .base import FunctionDecorator
from .extension import extension_func, ExtensionFunc
