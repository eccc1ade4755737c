"""Care action systems (feed, play, sleep).

Feed and play apply the acting behavior's delta from :mod:`virtual_pet.rules`
and then re-run the transition policy. Falling asleep and waking up set the
behavior directly, bypassing the policy.
"""

from dataclasses import replace
from typing import Dict

from virtual_pet.outcome import APPLIED
from virtual_pet.rules import FEED_DELTAS, PLAY_DELTAS
from virtual_pet.state import State
from virtual_pet.systems.transition import enter_behavior, transition_system
from virtual_pet.types import BehaviorName
from virtual_pet.utils.attributes import apply_delta

FEED_MESSAGES: Dict[BehaviorName, str] = {
    BehaviorName.HAPPY: "{name} enjoys the meal!",
    BehaviorName.NORMAL: "{name} eats the food.",
    BehaviorName.HUNGRY: "{name} devours the food hungrily!",
}

PLAY_MESSAGES: Dict[BehaviorName, str] = {
    BehaviorName.HAPPY: "{name} plays joyfully!",
    BehaviorName.NORMAL: "{name} plays a bit.",
}

SLEEP_MESSAGES: Dict[BehaviorName, str] = {
    BehaviorName.HAPPY: "{name} takes a nap...",
    BehaviorName.NORMAL: "{name} goes to sleep...",
}


def _applied(state: State, template: str) -> State:
    return replace(state, outcome=APPLIED, message=template.format(name=state.name))


def feed_system(state: State) -> State:
    """Reduce hunger and raise happiness by the acting behavior's amounts."""
    behavior = state.behavior.name
    state = apply_delta(state, FEED_DELTAS[behavior])
    state = _applied(state, FEED_MESSAGES[behavior])
    return transition_system(state)


def play_system(state: State) -> State:
    """Raise happiness at the cost of energy and hunger."""
    behavior = state.behavior.name
    state = apply_delta(state, PLAY_DELTAS[behavior])
    state = _applied(state, PLAY_MESSAGES[behavior])
    return transition_system(state)


def fall_asleep_system(state: State) -> State:
    """Enter a fresh sleep episode."""
    template = SLEEP_MESSAGES[state.behavior.name]
    state = enter_behavior(state, BehaviorName.SLEEPING)
    return _applied(state, template)


def wake_system(state: State) -> State:
    """Playing with a sleeping pet wakes it up; attributes are untouched."""
    state = enter_behavior(state, BehaviorName.NORMAL)
    return _applied(state, "{name} wakes up!")
