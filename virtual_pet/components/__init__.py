"""virtual_pet.components
=================================

Aggregate import surface for all component dataclasses used by the simulator.

This package separates immutable *properties* (the pet's stored health, needs
and active behavior) from *effects* (equipment modifiers such as the health
boost and the happiness aura).

The symbols re-exported here let downstream code import components from a
single place, e.g.::

    from virtual_pet.components import Health, Needs, HealthBoost

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are transformed by the systems.

"""

# Effects
from .effects import Modifier
from .effects import HappinessAura
from .effects import HealthBoost

# Properties
from .properties import Behavior
from .properties import Health
from .properties import Needs

__all__ = [
    # Effects
    "Modifier",
    "HappinessAura",
    "HealthBoost",
    # Properties
    "Behavior",
    "Health",
    "Needs",
]
