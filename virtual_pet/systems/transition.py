"""Behavior transition policy.

A pure, first-match-wins mapping from attributes to the next behavior, plus
the system that installs the chosen behavior on a ``State``. The sleeping
turn handler never consults this policy: with low energy rule 2 would put the
pet straight back to sleep, so sleep episodes manage their own exit.
"""

import logging
from dataclasses import replace

from virtual_pet.components import Behavior, Health, Needs
from virtual_pet.rules import (
    HAPPY_ENERGY,
    HAPPY_HAPPINESS,
    HAPPY_HUNGER_LIMIT,
    HUNGRY_HUNGER,
    SLEEPY_ENERGY,
)
from virtual_pet.state import State
from virtual_pet.types import BehaviorName

logger = logging.getLogger(__name__)


def transition_policy(health: Health, needs: Needs) -> BehaviorName:
    """Return the behavior implied by the current attributes.

    Rules (first match wins):
        1. ``health <= 0`` -> ``DEAD``
        2. ``energy <= 20`` -> ``SLEEPING``
        3. ``hunger >= 80`` -> ``HUNGRY``
        4. ``happiness >= 70`` and ``hunger < 50`` and ``energy > 50`` -> ``HAPPY``
        5. otherwise -> ``NORMAL``
    """
    if health.health <= 0:
        return BehaviorName.DEAD
    if needs.energy <= SLEEPY_ENERGY:
        return BehaviorName.SLEEPING
    if needs.hunger >= HUNGRY_HUNGER:
        return BehaviorName.HUNGRY
    if (
        needs.happiness >= HAPPY_HAPPINESS
        and needs.hunger < HAPPY_HUNGER_LIMIT
        and needs.energy > HAPPY_ENERGY
    ):
        return BehaviorName.HAPPY
    return BehaviorName.NORMAL


def enter_behavior(state: State, name: BehaviorName) -> State:
    """Install a fresh ``name`` behavior (the sleep counter starts at zero)."""
    if name != state.behavior.name:
        logger.info("%s is now %s", state.name, name)
    return replace(state, behavior=Behavior(name=name))


def transition_system(state: State) -> State:
    """Re-evaluate the behavior from the current attributes."""
    return enter_behavior(state, transition_policy(state.health, state.needs))
