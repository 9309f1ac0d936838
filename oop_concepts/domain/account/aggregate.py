"""Bank account aggregate - encapsulated balance."""
from typing import Any

from pydantic import ConfigDict, PrivateAttr

from oop_concepts.domain.base.entity import Entity
from oop_concepts.domain.base.exceptions import RestrictedFieldError

RESTRICTED_FIELDS = frozenset({"balance"})


class BankAccount(Entity):
    """Account whose balance changes only through ``deposit``.

    The balance lives in a private attribute. It is left out of the model's
    fields, so it cannot be passed at construction, does not appear in
    ``model_dump()``, and reading or assigning ``balance`` from outside fails.
    The underscore slot itself stays reachable by convention only.
    """
    model_config = ConfigDict(extra="forbid")

    owner: str = ""

    _balance: float = PrivateAttr(default=0)

    def __setattr__(self, name: str, value: Any) -> None:
        if name in RESTRICTED_FIELDS:
            raise RestrictedFieldError(self.__class__.__name__, name)
        super().__setattr__(name, value)

    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance. Negative amounts are not rejected."""
        self._balance += amount

    def get_balance(self) -> float:
        return self._balance
