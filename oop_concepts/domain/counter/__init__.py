"""Counter context."""

from .aggregate import Counter

__all__ = ["Counter"]
