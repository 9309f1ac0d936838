"""Stateless helpers callable without an instance."""
from typing import Union

Number = Union[int, float]


class MathUtils:
    """Namespace for arithmetic helpers."""

    @staticmethod
    def add(a: Number, b: Number) -> Number:
        return a + b
