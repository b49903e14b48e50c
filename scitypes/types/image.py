"""This module describes the image scitypes, which are parameterized by their
width and height.
"""
from __future__ import annotations
from typing import Any

from .base import as_dimension
from .scalar import KnownType


class ImageType(KnownType):
    """Two-dimensional images of size ``W x H``."""

    name = "Image"
    parameter_names = ("width", "height")

    def validate_parameters(self, *parameters: Any) -> tuple:
        width, height = super().validate_parameters(*parameters)
        return (
            as_dimension(width, "width"),
            as_dimension(height, "height"),
        )

    @property
    def width(self) -> int | None:
        return None if self.parameters is None else self.parameters[0]

    @property
    def height(self) -> int | None:
        return None if self.parameters is None else self.parameters[1]


class GrayImageType(ImageType):
    """Single-channel images."""

    name = "GrayImage"


class ColorImageType(ImageType):
    """Multi-channel (RGB, RGBA, ...) images."""

    name = "ColorImage"


Image = ImageType()
GrayImage = GrayImageType()
ColorImage = ColorImageType()
