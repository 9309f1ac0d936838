"""Person context - a single class with a constructor and one method."""

from .aggregate import Person

__all__ = ["Person"]
