"""Turn advance systems.

Awake behaviors decay by their turn delta and then re-run the transition
policy. A sleeping pet instead rests: energy and health recover, the episode
counter advances, and the pet wakes (always into ``NORMAL``) once it has slept
``WAKE_AFTER_SLEEP_TURNS`` turns or its energy reaches ``WAKE_ENERGY``.
"""

from dataclasses import replace

from virtual_pet.outcome import APPLIED
from virtual_pet.rules import (
    SLEEP_TURN_DELTA,
    TURN_DELTAS,
    WAKE_AFTER_SLEEP_TURNS,
    WAKE_ENERGY,
)
from virtual_pet.state import State
from virtual_pet.systems.transition import enter_behavior, transition_system
from virtual_pet.types import BehaviorName
from virtual_pet.utils.attributes import apply_delta
from virtual_pet.utils.terminal import is_terminal_state


def decay_system(state: State) -> State:
    """Apply the awake behavior's per-turn decay, then transition."""
    state = apply_delta(state, TURN_DELTAS[state.behavior.name])
    state = replace(state, outcome=APPLIED, message=None)
    state = transition_system(state)
    if is_terminal_state(state):
        return replace(state, message=f"{state.name} has passed away...")
    return state


def rest_system(state: State) -> State:
    """One turn asleep; checks both wake conditions itself."""
    sleep_turns = state.behavior.sleep_turns + 1
    state = replace(state, behavior=replace(state.behavior, sleep_turns=sleep_turns))
    state = apply_delta(state, SLEEP_TURN_DELTA)
    state = replace(state, outcome=APPLIED, message=None)

    if sleep_turns >= WAKE_AFTER_SLEEP_TURNS or state.needs.energy >= WAKE_ENERGY:
        state = enter_behavior(state, BehaviorName.NORMAL)
        return replace(state, message=f"{state.name} wakes up refreshed!")
    return state
