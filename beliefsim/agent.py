"""
Agent class integrating belief activations, social ties and behaviour selection.

Each tick an agent:
1. Updates the activation of every belief from the previous step
   (time delta, contextualisation among held beliefs, friends' behaviour)
2. Scores every candidate behaviour by utility and performs one of them
   through its selection policy

Utility of a behaviour at time t:

    utility(beh, t) = sum_{bel held at t} contextualise(bel, t)
                                         * p(bel, beh) * a(t, bel)
                      + environment(beh, t)

Drivers running many agents in parallel should call update_activations()
on every agent, then perform() on every agent, with a barrier after each
phase: activation updates at t+1 read friends' behaviour performed at t,
so every agent must have performed for t before any agent updates for t+1.
"""

import logging
import uuid as uuid_lib
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd

from .activation import ActivationEngine
from .behaviour import Behaviour
from .belief import BaseBelief
from .selection import BaseSelection, SelectionMode, create_selection


logger = logging.getLogger(__name__)


class BaseAgent(ABC):
    """
    Interface for an agent in the simulation.

    Identity is the UUID; agents are used as keys in each other's friend
    tables.
    """

    def __init__(self, uuid: Optional[uuid_lib.UUID] = None):
        self._uuid = uuid if uuid is not None else uuid_lib.uuid4()

    @property
    def uuid(self) -> uuid_lib.UUID:
        """Agent's unique identifier."""
        return self._uuid

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseAgent):
            return NotImplemented
        return self._uuid == other._uuid

    def __hash__(self) -> int:
        return hash(self._uuid)

    @abstractmethod
    def activation(self, t: int, belief: BaseBelief) -> float:
        """Activation of a belief at time t."""
        pass

    @abstractmethod
    def update_activation(self, t: int, belief: BaseBelief) -> None:
        """Update the activation of a belief at time t."""
        pass

    @abstractmethod
    def performed(self, t: int) -> Behaviour:
        """Behaviour performed at time t."""
        pass

    @abstractmethod
    def perform(self, t: int, behaviours: Sequence[Behaviour]) -> None:
        """Choose and perform one of the behaviours at time t."""
        pass

    def update_activations(self, t: int, beliefs: Sequence[BaseBelief]) -> None:
        """
        Update every belief at time t.

        Each update reads only t-1 state, so the order is irrelevant.
        """
        for belief in beliefs:
            self.update_activation(t, belief)

    def tick(
        self,
        t: int,
        behaviours: Sequence[Behaviour],
        beliefs: Sequence[BaseBelief],
    ) -> None:
        """
        Perform one time step: update all activations, then perform.

        Args:
            t: Current time (previous tick must have been t-1)
            behaviours: All candidate behaviours
            beliefs: Beliefs to update
        """
        self.update_activations(t, beliefs)
        self.perform(t, behaviours)


class Agent(BaseAgent):
    """
    An agent whose beliefs drive its behaviour.

    Integrates:
    - Activation engine: activation history, friend weights, time deltas
    - Selection policy: utilities -> performed behaviour

    The activation and performed tables are written only by
    update_activation() and perform(); friend weights and time deltas only
    through their setters.
    """

    def __init__(
        self,
        uuid: Optional[uuid_lib.UUID] = None,
        activations: Optional[Mapping[int, Mapping[BaseBelief, float]]] = None,
        selection: Optional[BaseSelection] = None,
        rng: Optional[np.random.RandomState] = None,
    ):
        """
        Initialize an agent.

        Args:
            uuid: Unique identifier (random if None)
            activations: Pre-seeded activation history {t: {belief: value}}
            selection: Selection policy (proportional if None)
            rng: Random source for the default policy (not allowed
                together with a selection policy, which owns its own)
        """
        if selection is not None and rng is not None:
            raise ValueError("pass either selection or rng, not both")
        super().__init__(uuid)
        self._engine = ActivationEngine(activations)
        self._selection = selection or create_selection(SelectionMode.PROPORTIONAL, rng=rng)

    @property
    def selection(self) -> BaseSelection:
        """Behaviour-selection policy."""
        return self._selection

    @property
    def selection_mode(self) -> SelectionMode:
        return self._selection.mode

    # =========================================================================
    # Tables
    # =========================================================================

    def activation(self, t: int, belief: BaseBelief) -> float:
        """
        Gets the activation of a belief at a time.

        Raises:
            NotFoundError: If the time or the belief is not found
        """
        return self._engine.activation(t, belief)

    def held_beliefs(self, t: int) -> List[BaseBelief]:
        """
        Beliefs held at time t (those with a recorded activation).

        Raises:
            NotFoundError: If the time is not found
        """
        return self._engine.held_beliefs(t)

    def performed(self, t: int) -> Behaviour:
        """
        Gets the behaviour performed at time t.

        Raises:
            NotFoundError: If nothing was performed at t
        """
        return self._engine.performed(t)

    def _add_performed(self, t: int, behaviour: Behaviour) -> None:
        """Record a performed behaviour directly. Used for scenario setup."""
        self._engine.record_performed(t, behaviour)

    @property
    def friends(self) -> Dict[BaseAgent, float]:
        """Copy of the friend weight table."""
        return self._engine.friends

    def friend_weight(self, peer: BaseAgent) -> float:
        """
        Weight of the relationship from this agent to a peer.

        Raises:
            NotFoundError: If this agent is not friends with the peer
        """
        return self._engine.friend_weight(peer)

    def set_friend_weight(self, peer: BaseAgent, weight: float) -> None:
        self._engine.set_friend_weight(peer, weight)

    def time_delta(self, belief: BaseBelief) -> float:
        """
        Multiplicative change of a belief's activation per time step.

        Raises:
            NotFoundError: If the belief has no time delta
        """
        return self._engine.time_delta(belief)

    def set_time_delta(self, belief: BaseBelief, time_delta: float) -> None:
        self._engine.set_time_delta(belief, time_delta)

    # =========================================================================
    # Activation
    # =========================================================================

    def update_activation(self, t: int, belief: BaseBelief) -> None:
        """
        Updates the activation of the belief at time t.

        This is time_delta(b) * activation(t-1, b) + contextual_observed(b, t-1).
        """
        self._engine.update_activation(t, belief)

    def observed(self, belief: BaseBelief, t: int) -> float:
        """Value of observing friends' behaviour relevant to a belief at t."""
        return self._engine.observed(belief, t)

    def contextualise(self, belief: BaseBelief, t: int) -> float:
        """Weight putting a belief into the context of the beliefs held at t."""
        return self._engine.contextualise(belief, t)

    def contextual_observed(self, belief: BaseBelief, t: int) -> float:
        return self._engine.contextual_observed(belief, t)

    # =========================================================================
    # Utility and selection
    # =========================================================================

    def belief_behaviour(self, belief: BaseBelief, behaviour: Behaviour, t: int) -> float:
        """
        Non-contextual impetus to perform a behaviour given a held belief.

        Raises:
            NotFoundError: If the belief is not held at t or has no
                performing relationship to the behaviour
        """
        return belief.performing_behaviour_relationship(behaviour) * self.activation(t, belief)

    def contextual_belief_behaviour(
        self, belief: BaseBelief, behaviour: Behaviour, t: int
    ) -> float:
        return self.contextualise(belief, t) * self.belief_behaviour(belief, behaviour, t)

    def contextual_behaviour(self, behaviour: Behaviour, t: int) -> float:
        """
        Contextual impetus to perform a behaviour given all beliefs held at t.

        Raises:
            NotFoundError: If the time is not found
        """
        total = 0.0
        for belief in self.held_beliefs(t):
            total += self.contextual_belief_behaviour(belief, behaviour, t)
        return total

    def environment(self, behaviour: Behaviour, t: int) -> float:
        """
        Impetus to perform a behaviour due to this agent's environment.

        Override for non-social drivers; must be side-effect free.
        """
        return 0.0

    def utility(self, behaviour: Behaviour, t: int) -> float:
        """contextual_behaviour(b, t) + environment(b, t)."""
        return self.contextual_behaviour(behaviour, t) + self.environment(behaviour, t)

    def perform(self, t: int, behaviours: Sequence[Behaviour]) -> None:
        """
        Choose and perform a behaviour from the candidates at time t.

        The chosen behaviour is retrievable through performed(t).
        """
        utilities = [self.utility(behaviour, t) for behaviour in behaviours]
        chosen = self._selection.select(behaviours, utilities)
        self._engine.record_performed(t, chosen)
        logger.debug(
            "agent %s performed %s at t=%d (%d candidates)",
            self._uuid, chosen.name, t, len(behaviours),
        )

    # =========================================================================
    # Metrics
    # =========================================================================

    def get_activation_dataframe(self) -> pd.DataFrame:
        """
        Activation history in long format.

        Returns:
            DataFrame with columns time, belief, uuid, activation
        """
        return pd.DataFrame(
            self._engine.as_records(),
            columns=["time", "belief", "uuid", "activation"],
        )

    def get_state(self) -> Dict[str, Any]:
        """
        Get current agent state.

        Returns:
            Dict with table sizes and selection policy state
        """
        times = self._engine.times
        state = {
            "uuid": str(self._uuid),
            "num_activations": len(self._engine),
            "first_time": times[0] if times else None,
            "last_time": times[-1] if times else None,
            "num_friends": len(self._engine.friends),
            "performed": {
                t: self._engine.performed(t).name for t in self._engine.performed_times
            },
        }
        state.update(self._selection.get_state())
        return state

    def __repr__(self) -> str:
        return f"Agent(uuid={self._uuid}, selection={self._selection.mode.value})"


def create_agent(
    uuid: Optional[uuid_lib.UUID] = None,
    activations: Optional[Mapping[int, Mapping[BaseBelief, float]]] = None,
    beliefs: Optional[Sequence[BaseBelief]] = None,
    selection_mode: Union[SelectionMode, str] = SelectionMode.PROPORTIONAL,
    default_time_delta: Optional[float] = None,
    random_seed: Optional[int] = None,
    rng: Optional[np.random.RandomState] = None,
) -> Agent:
    """
    Factory function to create an agent with specified configuration.

    Args:
        uuid: Unique identifier (random if None)
        activations: Pre-seeded activation history {t: {belief: value}}
        beliefs: Beliefs that receive default_time_delta
        selection_mode: Selection policy mode
        default_time_delta: Time delta set for every belief in beliefs
            (none set if None)
        random_seed: Seed for a fresh RandomState (ignored if rng given)
        rng: Random source for the selection policy

    Returns:
        Configured Agent instance
    """
    if rng is None and random_seed is not None:
        rng = np.random.RandomState(random_seed)

    agent = Agent(
        uuid=uuid,
        activations=activations,
        selection=create_selection(selection_mode, rng=rng),
    )

    if default_time_delta is not None:
        for belief in beliefs or ():
            agent.set_time_delta(belief, default_time_delta)

    return agent
