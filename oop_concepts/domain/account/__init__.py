"""Account context - encapsulation of a restricted field."""

from .aggregate import BankAccount

__all__ = ["BankAccount"]
