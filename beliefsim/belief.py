"""
Beliefs and their relationship tables.

A belief holds three independently keyed weight tables:
- belief -> belief: how strongly holding another belief reinforces this one
  (directional; a -> b says nothing about b -> a)
- belief -> observed behaviour: the evidence for this belief carried by
  seeing a peer perform a behaviour
- belief -> performed behaviour: the impetus this belief lends toward
  performing a behaviour

Every lookup of a pair that was never set raises NotFoundError. Setters
upsert, so setting a pair twice keeps the last value.
"""

import uuid as uuid_lib
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from .behaviour import Behaviour
from .errors import NotFoundError


class BaseBelief(ABC):
    """
    Abstract base class for beliefs.

    Identity is the UUID; the name is for display only. Agents key their
    activation and time-delta tables by belief, so subclasses must not
    override equality or hashing.
    """

    def __init__(self, name: str, uuid: Optional[uuid_lib.UUID] = None):
        self._name = name
        self._uuid = uuid if uuid is not None else uuid_lib.uuid4()

    @property
    def name(self) -> str:
        """Display name."""
        return self._name

    @property
    def uuid(self) -> uuid_lib.UUID:
        """Unique identifier."""
        return self._uuid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseBelief):
            return NotImplemented
        return self._uuid == other._uuid

    def __hash__(self) -> int:
        return hash(self._uuid)

    @abstractmethod
    def belief_relationship(self, other: "BaseBelief") -> float:
        """Weight of the relationship from this belief to another."""
        pass

    @abstractmethod
    def set_belief_relationship(self, other: "BaseBelief", value: float) -> None:
        pass

    @abstractmethod
    def observed_behaviour_relationship(self, behaviour: Behaviour) -> float:
        """Evidence for this belief from observing a behaviour."""
        pass

    @abstractmethod
    def set_observed_behaviour_relationship(
        self, behaviour: Behaviour, value: float
    ) -> None:
        pass

    @abstractmethod
    def performing_behaviour_relationship(self, behaviour: Behaviour) -> float:
        """Impetus this belief lends toward performing a behaviour."""
        pass

    @abstractmethod
    def set_performing_behaviour_relationship(
        self, behaviour: Behaviour, value: float
    ) -> None:
        pass

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self._name!r})"


class Belief(BaseBelief):
    """Dict-backed belief."""

    def __init__(self, name: str, uuid: Optional[uuid_lib.UUID] = None):
        super().__init__(name, uuid)
        self._beliefs: Dict[BaseBelief, float] = {}
        self._observed: Dict[Behaviour, float] = {}
        self._performing: Dict[Behaviour, float] = {}

    def belief_relationship(self, other: BaseBelief) -> float:
        try:
            return self._beliefs[other]
        except KeyError:
            raise NotFoundError("belief_relationship", other) from None

    def set_belief_relationship(self, other: BaseBelief, value: float) -> None:
        self._beliefs[other] = float(value)

    def observed_behaviour_relationship(self, behaviour: Behaviour) -> float:
        try:
            return self._observed[behaviour]
        except KeyError:
            raise NotFoundError("observed_behaviour_relationship", behaviour) from None

    def set_observed_behaviour_relationship(
        self, behaviour: Behaviour, value: float
    ) -> None:
        self._observed[behaviour] = float(value)

    def performing_behaviour_relationship(self, behaviour: Behaviour) -> float:
        try:
            return self._performing[behaviour]
        except KeyError:
            raise NotFoundError("performing_behaviour_relationship", behaviour) from None

    def set_performing_behaviour_relationship(
        self, behaviour: Behaviour, value: float
    ) -> None:
        self._performing[behaviour] = float(value)


def create_belief(
    name: str,
    uuid: Optional[uuid_lib.UUID] = None,
    beliefs: Optional[Mapping[BaseBelief, float]] = None,
    observed: Optional[Mapping[Behaviour, float]] = None,
    performing: Optional[Mapping[Behaviour, float]] = None,
) -> Belief:
    """
    Factory function to create a belief with initial relationship tables.

    Args:
        name: Display name
        uuid: Identifier (random if None)
        beliefs: Initial belief -> weight relationships
        observed: Initial observed behaviour -> weight relationships
        performing: Initial performed behaviour -> weight relationships

    Returns:
        Configured Belief instance
    """
    belief = Belief(name, uuid)

    for other, value in (beliefs or {}).items():
        belief.set_belief_relationship(other, value)
    for behaviour, value in (observed or {}).items():
        belief.set_observed_behaviour_relationship(behaviour, value)
    for behaviour, value in (performing or {}).items():
        belief.set_performing_behaviour_relationship(behaviour, value)

    return belief
