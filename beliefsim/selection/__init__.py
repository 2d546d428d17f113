"""
Behaviour-selection module.

Provides the policies an agent uses to turn per-behaviour utilities into
one performed behaviour:

1. PROPORTIONAL (default):
   - At most one positive utility: perform the maximum
   - Otherwise: draw among positive utilities with probability ∝ utility

2. GREEDY:
   - Always perform the first maximal utility

Usage:
    from beliefsim.selection import create_selection, SelectionMode

    selection = create_selection(
        mode=SelectionMode.PROPORTIONAL,
        rng=np.random.RandomState(42),
    )
    behaviour = selection.select(behaviours, utilities)
"""

from typing import Optional, Union

import numpy as np

from .base import BaseSelection, SelectionMode
from .greedy import GreedySelection
from .proportional import ProportionalSelection


def create_selection(
    mode: Union[SelectionMode, str] = SelectionMode.PROPORTIONAL,
    rng: Optional[np.random.RandomState] = None,
) -> BaseSelection:
    """
    Factory function to create a selection policy.

    Args:
        mode: Selection mode (enum or string)
        rng: Random source injected into the policy

    Returns:
        Configured selection policy instance
    """
    # Convert string to enum if needed
    if isinstance(mode, str):
        mode = SelectionMode(mode)

    if mode == SelectionMode.PROPORTIONAL:
        return ProportionalSelection(rng=rng)
    elif mode == SelectionMode.GREEDY:
        return GreedySelection(rng=rng)
    else:
        raise ValueError(f"Unknown selection mode: {mode}")


__all__ = [
    "BaseSelection",
    "SelectionMode",
    "ProportionalSelection",
    "GreedySelection",
    "create_selection",
]
