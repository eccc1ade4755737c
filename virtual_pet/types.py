"""Common type aliases and enumerations.

``HandlerFn`` is the central extension point of the behavior dispatch table:
every (behavior, action) pair resolves to one pure function over ``State``.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING


# Forward declaration for HandlerFn typing to avoid circular imports:
if TYPE_CHECKING:
    from virtual_pet.state import State

HandlerFn = Callable[["State"], "State"]


class Species(StrEnum):
    """Pet species. Only biases the initial attributes (and the display label)."""

    CAT = auto()
    DRAGON = auto()


class BehaviorName(StrEnum):
    """The five behavioral states a pet can be in."""

    HAPPY = auto()
    NORMAL = auto()
    HUNGRY = auto()
    SLEEPING = auto()
    DEAD = auto()


class ModifierType(StrEnum):
    """Equipment categories (reflected in serialized observations)."""

    HEALTH_BOOST = auto()
    HAPPINESS_AURA = auto()


class OutcomeKind(StrEnum):
    """Whether an action took effect or was absorbed by the current behavior."""

    APPLIED = auto()
    REJECTED = auto()
