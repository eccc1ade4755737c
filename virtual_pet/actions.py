"""Action enumerations.

Defines the four core pet :class:`Action` values handled by the behavior
dispatch table, the driver-level :class:`Command` (one menu choice per turn
round) and a stable integer :class:`GymAction` mapping for Gymnasium
compatibility.

``CARE_COMMANDS`` and ``EQUIP_COMMANDS`` partition the non-waiting commands;
checks like ``if command in EQUIP_COMMANDS`` are preferred over enum name
comparisons.
"""

from enum import IntEnum, StrEnum, auto
from typing import Dict

from virtual_pet.types import ModifierType


class Action(StrEnum):
    """String enum of core pet actions.

    Members:
        FEED, PLAY, SLEEP: Player care actions.
        ADVANCE_TURN: One discrete simulation step (decay / rest).
    """

    FEED = auto()
    PLAY = auto()
    SLEEP = auto()
    ADVANCE_TURN = auto()


class Command(StrEnum):
    """String enum of player choices for one turn round.

    Members:
        FEED, PLAY, SLEEP: Care actions forwarded to the pet.
        EQUIP_HEALTH_BOOST, EQUIP_HAPPINESS_AURA: Add a modifier layer.
        WAIT: Do nothing before the turn advances.
    """

    FEED = auto()
    PLAY = auto()
    SLEEP = auto()
    EQUIP_HEALTH_BOOST = auto()
    EQUIP_HAPPINESS_AURA = auto()
    WAIT = auto()


CARE_COMMANDS: Dict[Command, Action] = {
    Command.FEED: Action.FEED,
    Command.PLAY: Action.PLAY,
    Command.SLEEP: Action.SLEEP,
}

EQUIP_COMMANDS: Dict[Command, ModifierType] = {
    Command.EQUIP_HEALTH_BOOST: ModifierType.HEALTH_BOOST,
    Command.EQUIP_HAPPINESS_AURA: ModifierType.HAPPINESS_AURA,
}


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    FEED = 0  # start at 0 for explicitness
    PLAY = auto()
    SLEEP = auto()
    EQUIP_HEALTH_BOOST = auto()
    EQUIP_HAPPINESS_AURA = auto()
    WAIT = auto()
