"""
Configuration module for the belief-induced behaviour simulation.

Defines the per-agent parameters a driver uses to build agents:
selection policy, random seeding and the default time delta applied to
every belief an agent is given.

Supports two selection modes:
- PROPORTIONAL: utility-weighted draw over positive utilities
- GREEDY: always the first maximal utility (deterministic baseline)
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from beliefsim.selection import SelectionMode


@dataclass
class AgentConfig:
    """Configuration for agents created by create_agent()."""

    # Selection policy
    selection_mode: Union[SelectionMode, str] = SelectionMode.PROPORTIONAL

    # Randomness (None = unseeded)
    random_seed: Optional[int] = None

    # Activation dynamics
    default_time_delta: Optional[float] = None  # None = caller sets deltas

    def validate(self) -> None:
        """Validate configuration parameters."""
        if isinstance(self.selection_mode, str):
            try:
                self.selection_mode = SelectionMode(self.selection_mode)
            except ValueError:
                raise ValueError(
                    f"selection_mode must be one of "
                    f"{[m.value for m in SelectionMode]}"
                ) from None
        if self.random_seed is not None and self.random_seed < 0:
            raise ValueError("random_seed must be non-negative")
        if self.default_time_delta is not None:
            if not math.isfinite(self.default_time_delta):
                raise ValueError("default_time_delta must be finite")
            if self.default_time_delta < 0:
                raise ValueError("default_time_delta must be non-negative")

    def agent_kwargs(self) -> Dict[str, Any]:
        """Keyword arguments for beliefsim.create_agent()."""
        self.validate()
        return {
            "selection_mode": self.selection_mode,
            "random_seed": self.random_seed,
            "default_time_delta": self.default_time_delta,
        }


# Default configurations
DEFAULT_CONFIG = AgentConfig()

# Seeded draws, beliefs persist unchanged absent social evidence
REPRODUCIBLE_CONFIG = AgentConfig(
    random_seed=42,
    default_time_delta=1.0,
)

# Deterministic baseline for comparison with proportional selection
GREEDY_CONFIG = AgentConfig(
    selection_mode=SelectionMode.GREEDY,
    default_time_delta=1.0,
)
