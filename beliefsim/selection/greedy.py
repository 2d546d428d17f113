"""
Greedy behaviour selection.

Always performs the candidate with the highest utility, first one on ties.
Deterministic baseline for comparing against proportional selection.
"""

from typing import Sequence

from ..behaviour import Behaviour
from .base import BaseSelection, SelectionMode


class GreedySelection(BaseSelection):
    """Best response: argmax of utility."""

    @property
    def mode(self) -> SelectionMode:
        return SelectionMode.GREEDY

    def select(
        self,
        behaviours: Sequence[Behaviour],
        utilities: Sequence[float],
    ) -> Behaviour:
        max_behaviour, _, _ = self._scan(behaviours, utilities)
        self._total_selections += 1
        return max_behaviour
