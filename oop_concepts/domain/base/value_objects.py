"""Base value objects - immutable domain primitives compared by value."""
from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for value objects.

    Value objects have no identity: two instances holding the same data are
    equal, and none of their fields can be reassigned after construction.
    """
    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True
    )
