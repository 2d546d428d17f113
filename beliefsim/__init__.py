"""
Belief-induced behaviour simulation - Core Module.

This package contains the per-agent engine that advances belief
activations under social influence and turns them into performed
behaviours.
"""

from .agent import Agent, BaseAgent, create_agent
from .activation import ActivationEngine
from .behaviour import Behaviour
from .belief import BaseBelief, Belief, create_belief
from .errors import NotFoundError
from .selection import SelectionMode, create_selection

__all__ = [
    "Agent",
    "BaseAgent",
    "create_agent",
    "ActivationEngine",
    "Behaviour",
    "BaseBelief",
    "Belief",
    "create_belief",
    "NotFoundError",
    "SelectionMode",
    "create_selection",
]
