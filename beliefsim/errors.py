"""
Errors raised by the simulation core.

There is a single error kind: a lookup into one of the agent or belief
tables for a key that was never set. Nothing in the core defaults a
missing entry to zero; the caller is responsible for seeding activations,
relationship tables, friend weights and time deltas before ticking.
"""

from typing import Any


class NotFoundError(KeyError):
    """
    A table was queried for a key it does not hold.

    Attributes:
        table: Name of the table that was queried (e.g. "activation")
        key: The missing key
    """

    def __init__(self, table: str, key: Any):
        self.table = table
        self.key = key
        super().__init__(f"{table}: no entry for {key!r}")

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return self.args[0]
