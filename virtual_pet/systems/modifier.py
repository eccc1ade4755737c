"""Modifier systems.

``equip_system`` pushes a new outermost layer onto the modifier stack.
``aura_system`` runs after the pet's own turn effect and adds every equipped
aura's happiness bonus. Neither touches the stored ``max_health``.
"""

import logging
from dataclasses import replace
from typing import Dict

from virtual_pet.outcome import APPLIED
from virtual_pet.rules import MAX_NEED, MIN_ATTRIBUTE
from virtual_pet.state import State
from virtual_pet.systems.rejection import reject_when_dead
from virtual_pet.types import ModifierType
from virtual_pet.utils.math import clamp
from virtual_pet.utils.modifiers import (
    add_modifier,
    create_modifier,
    turn_happiness_bonus,
)
from virtual_pet.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

EQUIP_MESSAGES: Dict[ModifierType, str] = {
    ModifierType.HEALTH_BOOST: "Equipped Golden Armor! +{amount} HP",
    ModifierType.HAPPINESS_AURA: "Equipped Magic Amulet! +{amount} Happiness/turn",
}


def equip_system(state: State, kind: ModifierType) -> State:
    """Wrap the pet in one more ``kind`` modifier.

    Raises:
        ValueError: If ``kind`` is not a known modifier type.
    """
    modifier = create_modifier(kind)
    if is_terminal_state(state):
        return reject_when_dead(state)
    logger.info("%s equipped %s", state.name, kind)
    return replace(
        state,
        modifiers=add_modifier(state.modifiers, modifier),
        outcome=APPLIED,
        message=EQUIP_MESSAGES[kind].format(amount=modifier.amount),
    )


def aura_system(state: State) -> State:
    """Add the per-turn happiness bonus of all equipped auras."""
    if is_terminal_state(state):
        return state
    bonus = turn_happiness_bonus(state)
    if bonus == 0:
        return state
    needs = state.needs
    happiness = clamp(needs.happiness + bonus, MIN_ATTRIBUTE, MAX_NEED)
    return replace(state, needs=replace(needs, happiness=happiness))
