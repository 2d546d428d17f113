"""
Test doubles for beliefs and agents.

StubBelief answers every relationship lookup with a canned value (or raises
NotFoundError when none is configured) and records the calls it receives.
StubAgent exposes only a performed-behaviour record, which is all a friend
needs to provide.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from beliefsim.agent import BaseAgent
from beliefsim.behaviour import Behaviour
from beliefsim.belief import BaseBelief
from beliefsim.errors import NotFoundError


class StubBelief(BaseBelief):
    """Belief returning fixed relationship values."""

    def __init__(
        self,
        name: str,
        belief_value: Optional[float] = None,
        observed_value: Optional[float] = None,
        performing_value: Optional[float] = None,
        uuid=None,
    ):
        super().__init__(name, uuid)
        self.belief_value = belief_value
        self.observed_value = observed_value
        self.performing_value = performing_value
        self.calls: List[Tuple[str, object]] = []

    def _answer(self, table: str, key, value: Optional[float]) -> float:
        self.calls.append((table, key))
        if value is None:
            raise NotFoundError(table, key)
        return value

    def belief_relationship(self, other):
        return self._answer("belief_relationship", other, self.belief_value)

    def set_belief_relationship(self, other, value):
        self.calls.append(("set_belief_relationship", other))
        self.belief_value = value

    def observed_behaviour_relationship(self, behaviour):
        return self._answer("observed_behaviour_relationship", behaviour, self.observed_value)

    def set_observed_behaviour_relationship(self, behaviour, value):
        self.calls.append(("set_observed_behaviour_relationship", behaviour))
        self.observed_value = value

    def performing_behaviour_relationship(self, behaviour):
        return self._answer("performing_behaviour_relationship", behaviour, self.performing_value)

    def set_performing_behaviour_relationship(self, behaviour, value):
        self.calls.append(("set_performing_behaviour_relationship", behaviour))
        self.performing_value = value


class StubAgent(BaseAgent):
    """Agent with a fixed performed record and no beliefs."""

    def __init__(self, performed: Optional[Dict[int, Behaviour]] = None, uuid=None):
        super().__init__(uuid)
        self._performed = dict(performed or {})

    def activation(self, t: int, belief: BaseBelief) -> float:
        raise NotFoundError("activation", t)

    def update_activation(self, t: int, belief: BaseBelief) -> None:
        raise NotFoundError("activation", t - 1)

    def performed(self, t: int) -> Behaviour:
        try:
            return self._performed[t]
        except KeyError:
            raise NotFoundError("performed", t) from None

    def perform(self, t: int, behaviours: Sequence[Behaviour]) -> None:
        self._performed[t] = behaviours[0]
