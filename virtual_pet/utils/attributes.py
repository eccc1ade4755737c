"""Clamped attribute mutation helpers."""

from dataclasses import replace

from virtual_pet.rules import Delta, MAX_NEED, MIN_ATTRIBUTE
from virtual_pet.state import State
from virtual_pet.utils.math import clamp


def apply_delta(state: State, delta: Delta) -> State:
    """Apply ``delta`` to the pet's attributes, clamping every field.

    Health is bounded by the stored ``max_health``. Modifiers only change the
    effective max reported by queries.
    """
    health = state.health
    needs = state.needs
    if delta.health:
        health = replace(
            health,
            health=clamp(
                health.health + delta.health, MIN_ATTRIBUTE, health.max_health
            ),
        )
    needs = replace(
        needs,
        energy=clamp(needs.energy + delta.energy, MIN_ATTRIBUTE, MAX_NEED),
        hunger=clamp(needs.hunger + delta.hunger, MIN_ATTRIBUTE, MAX_NEED),
        happiness=clamp(needs.happiness + delta.happiness, MIN_ATTRIBUTE, MAX_NEED),
    )
    return replace(state, health=health, needs=needs)
