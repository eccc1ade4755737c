"""State reducer and turn orchestration.

This module wires the systems together. The exported :func:`step` applies one
core :class:`Action`; :func:`equip` adds a modifier layer; :func:`play_turn`
runs a full driver round (one player command followed by one turn advance).
All three are pure and return a *new* :class:`virtual_pet.state.State`.

Ordering for a turn advance:

1. The current behavior's handler runs (decay + transition, or rest).
2. Modifiers get their post-turn hook (``aura_system``), on the possibly
    already transitioned pet.
3. The turn counter is bumped if the pet was alive to take the turn.
"""

import logging
from dataclasses import replace
from typing import NamedTuple, Tuple

from virtual_pet.actions import CARE_COMMANDS, EQUIP_COMMANDS, Action, Command
from virtual_pet.outcome import APPLIED, Outcome
from virtual_pet.state import State
from virtual_pet.systems.behavior import behavior_system
from virtual_pet.systems.modifier import aura_system, equip_system
from virtual_pet.types import ModifierType

logger = logging.getLogger(__name__)


def step(state: State, action: Action) -> State:
    """Apply one core action to the pet.

    Illegal actions are absorbed by the current behavior: the returned state
    carries a ``REJECTED`` outcome and otherwise equals the input.

    Args:
        state (State): Previous immutable pet state.
        action (Action): Core action to apply.

    Returns:
        State: Next state, with ``outcome`` and ``message`` describing what happened.

    Raises:
        ValueError: If the action is not recognized.
    """
    if action not in list(Action):
        raise ValueError("Action is not valid")

    state = behavior_system(state, Action(action))

    if action == Action.ADVANCE_TURN and state.outcome is not None and state.outcome.applied:
        state = _after_turn(state)

    return state


def _after_turn(state: State) -> State:
    """Run modifier hooks and bump the turn counter."""
    state = aura_system(state)
    return replace(state, turn=state.turn + 1)


def equip(state: State, kind: ModifierType) -> State:
    """Return the pet wrapped in one more ``kind`` modifier.

    The caller must hold on to the returned state; the input is unchanged.
    Equipping a dead pet is rejected.
    """
    return equip_system(state, kind)


class TurnReport(NamedTuple):
    """Result of a driver round.

    Attributes:
        state: State after the turn advance.
        outcome: Outcome of the player's command (not of the turn advance).
        messages: Narrative lines produced during the round, in order.
    """

    state: State
    outcome: Outcome
    messages: Tuple[str, ...]


def play_turn(state: State, command: Command) -> TurnReport:
    """Apply a player command, then advance the turn once.

    The turn advances whatever the command was, including waiting or
    equipping; on a dead pet the advance is a rejected no-op.
    """
    if command not in list(Command):
        raise ValueError("Command is not valid")
    command = Command(command)

    messages: list[str] = []
    if command in CARE_COMMANDS:
        state = step(state, CARE_COMMANDS[command])
    elif command in EQUIP_COMMANDS:
        state = equip(state, EQUIP_COMMANDS[command])
    else:
        state = replace(state, outcome=APPLIED, message=None)
    outcome: Outcome = state.outcome or APPLIED
    if state.message:
        messages.append(state.message)

    state = step(state, Action.ADVANCE_TURN)
    if state.outcome is not None and state.outcome.applied and state.message:
        messages.append(state.message)

    logger.debug("Turn %d finished for %s: %s", state.turn, state.name, command)
    return TurnReport(state=state, outcome=outcome, messages=tuple(messages))
