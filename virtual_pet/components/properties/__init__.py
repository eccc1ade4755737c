"""Property component aggregates.

This module re-exports *property* components: the stored attributes of a pet
(:class:`Health`, :class:`Needs`) and its active :class:`Behavior`. Systems
read these dataclasses to decide action legality and attribute effects.

All properties are immutable dataclasses; creating a new instance is how state
changes are expressed between steps. For equipment, see the sibling
:mod:`virtual_pet.components.effects` package.
"""

from .behavior import Behavior
from .health import Health
from .needs import Needs

__all__ = [
    "Behavior",
    "Health",
    "Needs",
]
