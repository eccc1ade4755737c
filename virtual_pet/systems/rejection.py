"""Handlers for actions the current behavior absorbs.

Rejections never touch attributes or behavior; they only record a
``REJECTED`` outcome whose reason doubles as the narrative message.
"""

import logging
from dataclasses import replace

from virtual_pet.outcome import rejected
from virtual_pet.state import State

logger = logging.getLogger(__name__)


def reject(state: State, reason: str) -> State:
    """Return ``state`` unchanged apart from a rejection outcome."""
    logger.debug("Rejected action for %s: %s", state.name, reason)
    return replace(state, outcome=rejected(reason), message=reason)


def reject_while_asleep(state: State) -> State:
    return reject(state, f"{state.name} is sleeping! Wake them up first.")


def reject_already_asleep(state: State) -> State:
    return reject(state, f"{state.name} is already sleeping...")


def reject_play_when_hungry(state: State) -> State:
    return reject(state, f"{state.name} is too hungry to play!")


def reject_sleep_when_hungry(state: State) -> State:
    return reject(state, f"{state.name} can't sleep when hungry!")


def reject_when_dead(state: State) -> State:
    return reject(state, f"{state.name} has passed away...")
