"""Effect component aggregates.

This sub-package defines **modifier** components: equipment layered over a
pet without changing its stored attributes. Modifiers are plain data objects
kept in an ordered stack on :class:`virtual_pet.state.State` (equip order,
last is outermost); systems fold over that stack when answering queries or
advancing a turn.

``Modifier`` is provided as a convenience union of every modifier type.

Importing::

    from virtual_pet.components.effects import Modifier, HealthBoost

or via the top-level components package::

    from virtual_pet.components import HappinessAura

"""

from typing import Union
from .happiness_aura import HAPPINESS_AURA_AMOUNT, HappinessAura
from .health_boost import HEALTH_BOOST_AMOUNT, HealthBoost

Modifier = Union[HealthBoost, HappinessAura]

__all__ = [
    "HAPPINESS_AURA_AMOUNT",
    "HEALTH_BOOST_AMOUNT",
    "HappinessAura",
    "HealthBoost",
    "Modifier",
]
