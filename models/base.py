"""
Defines the base class for in-memory entities.

Entities are plain pydantic models owned by the store. They carry no
behaviour of their own; identifiers are integers assigned by the store from
monotonic counters and are never reused within a process lifetime.
"""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """
    Base class for store-owned records.

    Records are validated on assignment so that a merge performed by the
    store can never leave a field holding a value of the wrong type.

    :ivar id: Store-assigned identifier, immutable once assigned.
    :type id: int
    """

    model_config = ConfigDict(validate_assignment=True, from_attributes=True)

    id: int
