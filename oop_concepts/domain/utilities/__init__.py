"""Utility context - static operations."""

from .math_utils import MathUtils, Number

__all__ = ["MathUtils", "Number"]
