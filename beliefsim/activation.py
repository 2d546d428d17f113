"""
Activation engine: per-agent belief activations over time.

The engine owns four sparse tables for one agent:
- activation[t][belief]: strength with which the belief is held at time t
- performed[t]: the behaviour the agent performed at time t
- friends[peer]: strength of the social tie to a peer agent
- time_deltas[belief]: multiplicative change of a belief's activation per step

Activation recurrence (no base case; t=0 must be seeded):

    a(t, b) = delta(b) * a(t-1, b) + contextualise(b, t-1) * observed(b, t-1)

    contextualise(b, t) = exp( sum_{b2 held at t} a(t, b2) * r(b, b2) )
    observed(b, t)      = sum_{(peer, w)} w * o(b, performed(peer, t))

Contextualisation is an unnormalised exponential, so it is strictly
positive and unbounded. Social observation used to update time t reads the
peers' behaviour performed at t-1.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional

import numpy as np

from .behaviour import Behaviour
from .belief import BaseBelief
from .errors import NotFoundError

if TYPE_CHECKING:
    from .agent import BaseAgent


logger = logging.getLogger(__name__)

ActivationMap = Dict[int, Dict[BaseBelief, float]]


class ActivationEngine:
    """
    Stores and advances one agent's belief activations.

    The engine never defaults a missing entry: every lookup of an absent
    time, belief, friend or time delta raises NotFoundError.
    """

    def __init__(self, activations: Optional[Mapping[int, Mapping[BaseBelief, float]]] = None):
        """
        Initialize the engine.

        Args:
            activations: Optional pre-seeded history {t: {belief: activation}}.
                Values are stored unchanged.
        """
        self._activations: ActivationMap = {}
        self._performed: Dict[int, Behaviour] = {}
        self._friends: Dict["BaseAgent", float] = {}
        self._time_deltas: Dict[BaseBelief, float] = {}

        if activations is not None:
            self.seed(activations)

    def seed(self, activations: Mapping[int, Mapping[BaseBelief, float]]) -> None:
        """Copy a pre-seeded activation history into the engine."""
        for t, bucket in activations.items():
            self._activations.setdefault(t, {}).update(bucket)

    # =========================================================================
    # Tables
    # =========================================================================

    @property
    def times(self) -> List[int]:
        """Times with an activation bucket, ascending."""
        return sorted(self._activations)

    def activation(self, t: int, belief: BaseBelief) -> float:
        """Stored activation of a belief at time t."""
        try:
            bucket = self._activations[t]
        except KeyError:
            raise NotFoundError("activation", t) from None
        try:
            return bucket[belief]
        except KeyError:
            raise NotFoundError("activation", (t, belief)) from None

    def held_beliefs(self, t: int) -> List[BaseBelief]:
        """Beliefs with a recorded activation at time t."""
        try:
            return list(self._activations[t])
        except KeyError:
            raise NotFoundError("activation", t) from None

    def performed(self, t: int) -> Behaviour:
        """Behaviour performed at time t."""
        try:
            return self._performed[t]
        except KeyError:
            raise NotFoundError("performed", t) from None

    @property
    def performed_times(self) -> List[int]:
        """Times with a performed behaviour, ascending."""
        return sorted(self._performed)

    def record_performed(self, t: int, behaviour: Behaviour) -> None:
        self._performed[t] = behaviour

    @property
    def friends(self) -> Dict["BaseAgent", float]:
        """Copy of the friend weight table."""
        return dict(self._friends)

    def friend_weight(self, peer: "BaseAgent") -> float:
        try:
            return self._friends[peer]
        except KeyError:
            raise NotFoundError("friend_weight", peer) from None

    def set_friend_weight(self, peer: "BaseAgent", weight: float) -> None:
        self._friends[peer] = float(weight)

    def time_delta(self, belief: BaseBelief) -> float:
        try:
            return self._time_deltas[belief]
        except KeyError:
            raise NotFoundError("time_delta", belief) from None

    def set_time_delta(self, belief: BaseBelief, time_delta: float) -> None:
        self._time_deltas[belief] = float(time_delta)

    # =========================================================================
    # Recurrence
    # =========================================================================

    def contextualise(self, belief: BaseBelief, t: int) -> float:
        """
        Weight putting a belief into the context of the beliefs held at t.

        exp of the activation-weighted sum of the belief's relationships to
        every held belief (itself included when held). An empty held set
        gives exp(0) == 1.0. Large exponents give inf.
        """
        exponent = 0.0
        for other in self.held_beliefs(t):
            exponent += self.activation(t, other) * belief.belief_relationship(other)
        # saturates to inf instead of raising on overflow
        with np.errstate(over="ignore"):
            return float(np.exp(exponent))

    def observed(self, belief: BaseBelief, t: int) -> float:
        """
        Social evidence for a belief from friends' behaviour at time t.

        Sum over friends of tie weight times the belief's observed-behaviour
        relationship to whatever that friend performed at t.
        """
        total = 0.0
        for peer, weight in self._friends.items():
            total += weight * belief.observed_behaviour_relationship(peer.performed(t))
        return total

    def contextual_observed(self, belief: BaseBelief, t: int) -> float:
        return self.contextualise(belief, t) * self.observed(belief, t)

    def update_activation(self, t: int, belief: BaseBelief) -> float:
        """
        Compute and store the activation of a belief at time t from t-1.

        Args:
            t: Time to write
            belief: Belief to update

        Returns:
            The new activation

        Raises:
            NotFoundError: If the time delta or the t-1 activation is unset,
                or any relationship / friend behaviour needed at t-1 is.
        """
        value = (
            self.time_delta(belief) * self.activation(t - 1, belief)
            + self.contextual_observed(belief, t - 1)
        )
        self._activations.setdefault(t, {})[belief] = value
        logger.debug("activation t=%d belief=%s -> %.6g", t, belief.name, value)
        return value

    def as_records(self) -> List[Dict[str, object]]:
        """Flatten the activation table to (time, belief, activation) records."""
        return [
            {"time": t, "belief": belief.name, "uuid": str(belief.uuid), "activation": value}
            for t in self.times
            for belief, value in self._activations[t].items()
        ]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._activations.values())
