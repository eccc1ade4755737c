"""Core immutable pet `State` dataclass.

This module defines the frozen :class:`State` object that represents a pet at
a single point of the simulation. All systems are pure functions that take a
previous ``State`` (plus inputs such as an ``Action``) and return a *new*
``State``; no mutation happens in-place.

Design notes:

* Stored attributes are split into :class:`Health` (with its stored
    ``max_health``) and :class:`Needs` (energy, hunger, happiness).
* The active behavior is a single :class:`Behavior` value; its ``name`` keys
    the dispatch table in :mod:`virtual_pet.systems.behavior`.
* Equipment is an ordered persistent vector of modifiers (equip order, the
    last entry is the outermost layer). Queries fold over it; nothing in the
    stack ever rewrites the stored attributes it decorates.
* ``DEAD`` is terminal. The reducer short-circuits on terminal states.

See :mod:`virtual_pet.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass
from typing import Any, Optional
from pyrsistent import PMap, PVector, pmap, pvector

from virtual_pet.components import Behavior, Health, Modifier, Needs
from virtual_pet.outcome import Outcome
from virtual_pet.types import Species


@dataclass(frozen=True)
class State:
    """Immutable pet state.

    Instances are *value objects*; every transition creates a new ``State``.

    Attributes:
        name (str): Identifying name, fixed at creation.
        species (Species): Species tag, fixed at creation.
        health (Health): Current and stored maximum hit points.
        needs (Needs): Energy, hunger and happiness.
        behavior (Behavior): Active behavioral state.
        modifiers (PVector[Modifier]): Equipped modifiers, innermost first.
        turn (int): Number of turn advances the pet has lived through.
        outcome (Outcome | None): Result of the last operation.
        message (str | None): Narrative line describing the last operation.
    """

    name: str
    species: Species
    health: Health
    needs: Needs
    behavior: Behavior
    modifiers: PVector[Modifier] = pvector()

    # Status
    turn: int = 0
    outcome: Optional[Outcome] = None
    message: Optional[str] = None

    @property
    def description(self) -> PMap[str, Any]:
        """Sparse serialization of populated fields.

        Returns a persistent map of field name to value, skipping ``None``
        scalars and an empty modifier stack. Useful for lightweight
        diagnostics without dumping empty containers.

        Returns:
            PMap[str, Any]: Persistent map of field name to value for all
            populated fields.
        """
        description: PMap[str, Any] = pmap()
        for field in self.__dataclass_fields__:
            value = getattr(self, field)
            if value is None:
                continue
            if isinstance(value, type(pvector())) and len(value) == 0:
                continue
            description = description.set(field, value)
        return description
