"""Behavior dispatch table.

Every (behavior, action) pair maps to exactly one handler. Awake behaviors
share the generic care and decay systems (their amounts come from the delta
tables in :mod:`virtual_pet.rules`); the remaining cells are either special
transitions (fall asleep, wake up, rest) or rejections.
"""

from typing import Dict, Tuple

from virtual_pet.actions import Action
from virtual_pet.state import State
from virtual_pet.systems.care import (
    fall_asleep_system,
    feed_system,
    play_system,
    wake_system,
)
from virtual_pet.systems.rejection import (
    reject_already_asleep,
    reject_play_when_hungry,
    reject_sleep_when_hungry,
    reject_when_dead,
    reject_while_asleep,
)
from virtual_pet.systems.turn import decay_system, rest_system
from virtual_pet.types import BehaviorName, HandlerFn

HAPPY = BehaviorName.HAPPY
NORMAL = BehaviorName.NORMAL
HUNGRY = BehaviorName.HUNGRY
SLEEPING = BehaviorName.SLEEPING
DEAD = BehaviorName.DEAD

BEHAVIOR_HANDLERS: Dict[Tuple[BehaviorName, Action], HandlerFn] = {
    # feed
    (HAPPY, Action.FEED): feed_system,
    (NORMAL, Action.FEED): feed_system,
    (HUNGRY, Action.FEED): feed_system,
    (SLEEPING, Action.FEED): reject_while_asleep,
    (DEAD, Action.FEED): reject_when_dead,
    # play
    (HAPPY, Action.PLAY): play_system,
    (NORMAL, Action.PLAY): play_system,
    (HUNGRY, Action.PLAY): reject_play_when_hungry,
    (SLEEPING, Action.PLAY): wake_system,
    (DEAD, Action.PLAY): reject_when_dead,
    # sleep
    (HAPPY, Action.SLEEP): fall_asleep_system,
    (NORMAL, Action.SLEEP): fall_asleep_system,
    (HUNGRY, Action.SLEEP): reject_sleep_when_hungry,
    (SLEEPING, Action.SLEEP): reject_already_asleep,
    (DEAD, Action.SLEEP): reject_when_dead,
    # advance turn
    (HAPPY, Action.ADVANCE_TURN): decay_system,
    (NORMAL, Action.ADVANCE_TURN): decay_system,
    (HUNGRY, Action.ADVANCE_TURN): decay_system,
    (SLEEPING, Action.ADVANCE_TURN): rest_system,
    (DEAD, Action.ADVANCE_TURN): reject_when_dead,
}
"""Complete (behavior, action) -> handler table; every pair is present."""


def behavior_system(state: State, action: Action) -> State:
    """Dispatch ``action`` to the handler of the pet's current behavior."""
    return BEHAVIOR_HANDLERS[(state.behavior.name, action)](state)
