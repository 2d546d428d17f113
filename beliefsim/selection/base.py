"""
Abstract base class for behaviour-selection policies.

A policy receives the candidate behaviours of one time step together with
their utilities (same order) and returns the behaviour to perform:
- Proportional: utility-weighted draw over positive-utility candidates
- Greedy: first candidate with maximal utility
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..behaviour import Behaviour


class SelectionMode(Enum):
    """Available behaviour-selection policies."""
    PROPORTIONAL = "proportional"  # Draw among positive utilities, weight = utility
    GREEDY = "greedy"              # Always the first maximal utility


class BaseSelection(ABC):
    """
    Abstract base class for all selection policies.

    Randomness comes only from the injected RandomState so that runs are
    reproducible when a seeded one is supplied.
    """

    def __init__(self, rng: Optional[np.random.RandomState] = None):
        """
        Args:
            rng: Random source (fresh unseeded RandomState if None)
        """
        self._rng = rng if rng is not None else np.random.RandomState()
        self._total_selections = 0
        self._random_selections = 0

    @property
    @abstractmethod
    def mode(self) -> SelectionMode:
        """Return the selection mode."""
        pass

    @property
    def rng(self) -> np.random.RandomState:
        return self._rng

    @abstractmethod
    def select(
        self,
        behaviours: Sequence[Behaviour],
        utilities: Sequence[float],
    ) -> Behaviour:
        """
        Choose one behaviour.

        Args:
            behaviours: Candidate behaviours
            utilities: Utility of each candidate, same order

        Returns:
            The behaviour to perform
        """
        pass

    @staticmethod
    def _scan(
        behaviours: Sequence[Behaviour],
        utilities: Sequence[float],
    ) -> Tuple[Behaviour, List[Behaviour], List[float]]:
        """
        Single pass over the candidates.

        Returns:
            Tuple of (max_behaviour, positive_behaviours, positive_utilities).
            Ties for the maximum go to the earliest candidate.
        """
        if len(behaviours) != len(utilities):
            raise ValueError("behaviours and utilities must have the same length")
        if not behaviours:
            raise ValueError("at least one candidate behaviour is required")

        max_utility = -np.inf
        max_behaviour = behaviours[0]
        positive_behaviours: List[Behaviour] = []
        positive_utilities: List[float] = []

        for behaviour, utility in zip(behaviours, utilities):
            if utility > max_utility:
                max_utility = utility
                max_behaviour = behaviour
            if utility > 0:
                positive_behaviours.append(behaviour)
                positive_utilities.append(utility)

        return max_behaviour, positive_behaviours, positive_utilities

    def get_random_fraction(self) -> Optional[float]:
        """Fraction of selections that needed a random draw."""
        if self._total_selections == 0:
            return None
        return self._random_selections / self._total_selections

    def get_state(self) -> Dict[str, Any]:
        """Current policy state for logging/analysis."""
        return {
            "selection_mode": self.mode.value,
            "total_selections": self._total_selections,
            "random_selections": self._random_selections,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(mode={self.mode.value})"
