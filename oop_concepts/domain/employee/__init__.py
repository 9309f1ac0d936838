"""Employee context."""

from .aggregate import DEFAULT_COMPANY, Employee

__all__ = ["Employee", "DEFAULT_COMPANY"]
