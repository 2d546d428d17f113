"""
Behaviours an agent can perform.

A behaviour is an identity token with a display name. It carries no
relationships of its own: the weights linking beliefs to behaviours live
on the belief side (see beliefsim.belief).
"""

import uuid as uuid_lib
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Behaviour:
    """
    A behaviour which can be performed.

    Attributes:
        name: Display name (not unique, ignored for equality)
        uuid: Identity (random if None); two behaviours are equal iff their
            UUIDs are equal
    """

    name: str = field(compare=False)
    uuid: uuid_lib.UUID = field(default_factory=uuid_lib.uuid4)

    def __post_init__(self):
        if self.uuid is None:
            object.__setattr__(self, "uuid", uuid_lib.uuid4())

    def __repr__(self) -> str:
        return f"Behaviour(name={self.name!r})"
