"""Modifier stack helpers.

The modifier stack is an ordered ``PVector`` (innermost first). Queries fold
over it from the innermost layer outwards, mirroring how each layer wraps the
one below it.
"""

from typing import Callable, Dict

from pyrsistent.typing import PVector

from virtual_pet.components import HappinessAura, HealthBoost, Modifier
from virtual_pet.state import State
from virtual_pet.types import ModifierType


MODIFIER_FACTORIES: Dict[ModifierType, Callable[[], Modifier]] = {
    ModifierType.HEALTH_BOOST: HealthBoost,
    ModifierType.HAPPINESS_AURA: HappinessAura,
}


def modifier_type(modifier: Modifier) -> ModifierType:
    """Return the category of ``modifier``."""
    if isinstance(modifier, HealthBoost):
        return ModifierType.HEALTH_BOOST
    return ModifierType.HAPPINESS_AURA


def create_modifier(kind: ModifierType) -> Modifier:
    """Instantiate a default modifier of ``kind``."""
    if kind not in MODIFIER_FACTORIES:
        raise ValueError(f"Unknown modifier type: {kind}")
    return MODIFIER_FACTORIES[kind]()


def add_modifier(modifiers: PVector[Modifier], modifier: Modifier) -> PVector[Modifier]:
    """Returns a new stack with ``modifier`` as the outermost layer."""
    return modifiers.append(modifier)


def effective_max_health(state: State) -> int:
    """Stored max health plus every equipped health boost."""
    max_health = state.health.max_health
    for modifier in state.modifiers:
        if isinstance(modifier, HealthBoost):
            max_health += modifier.amount
    return max_health


def turn_happiness_bonus(state: State) -> int:
    """Happiness added after each turn advance by equipped auras."""
    return sum(
        modifier.amount
        for modifier in state.modifiers
        if isinstance(modifier, HappinessAura)
    )


def count_modifiers(state: State, kind: ModifierType) -> int:
    """Number of equipped modifiers of ``kind``."""
    return sum(1 for modifier in state.modifiers if modifier_type(modifier) == kind)
