"""
Utility-proportional behaviour selection.

Selection rule:
- If at most one candidate has positive utility, perform the candidate with
  the highest utility (first one on ties). This also covers the case where
  every utility is zero or negative.
- Otherwise draw one of the positive-utility candidates with probability
  U_i / sum(U). Non-positive candidates never enter the draw, even when one
  of them ties the maximum.
"""

import logging
from typing import Sequence

import numpy as np

from ..behaviour import Behaviour
from .base import BaseSelection, SelectionMode


logger = logging.getLogger(__name__)


class ProportionalSelection(BaseSelection):
    """Weighted categorical draw over positive utilities."""

    @property
    def mode(self) -> SelectionMode:
        return SelectionMode.PROPORTIONAL

    def select(
        self,
        behaviours: Sequence[Behaviour],
        utilities: Sequence[float],
    ) -> Behaviour:
        max_behaviour, positive_behaviours, positive_utilities = self._scan(
            behaviours, utilities
        )
        self._total_selections += 1

        if len(positive_utilities) <= 1:
            return max_behaviour

        weights = np.asarray(positive_utilities, dtype=float)
        probabilities = weights / weights.sum()
        index = self._rng.choice(len(positive_behaviours), p=probabilities)
        self._random_selections += 1

        logger.debug(
            "drew %s from %d positive candidates (p=%.3f)",
            positive_behaviours[index].name,
            len(positive_behaviours),
            probabilities[index],
        )
        return positive_behaviours[index]
