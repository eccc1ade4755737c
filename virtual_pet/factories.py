"""Pet construction.

:class:`PetBlueprint` is a mutable authoring-time description of a pet (the
defaults are the classic starter pet); :func:`to_state` converts it into an
immutable :class:`State`. :func:`create_pet` is the one-call equivalent.

Species bias is applied at conversion time: a dragon's base health gains
``+50`` before it becomes the stored ``max_health``; a cat's base energy gains
``+20``. Out-of-range needs are clamped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from virtual_pet.components import Behavior, Health, Needs
from virtual_pet.rules import MAX_NEED, MIN_ATTRIBUTE, SPECIES_BIAS
from virtual_pet.state import State
from virtual_pet.types import BehaviorName, Species
from virtual_pet.utils.math import clamp

DEFAULT_NAME = "Unnamed"
DEFAULT_HEALTH = 100
DEFAULT_ENERGY = 80
DEFAULT_HUNGER = 30
DEFAULT_HAPPINESS = 70


@dataclass
class PetBlueprint:
    """Mutable bag of starting values, chainable through the ``with_*`` setters."""

    name: str = DEFAULT_NAME
    species: Species = Species.CAT
    health: int = DEFAULT_HEALTH
    energy: int = DEFAULT_ENERGY
    hunger: int = DEFAULT_HUNGER
    happiness: int = DEFAULT_HAPPINESS

    def with_name(self, name: str) -> PetBlueprint:
        self.name = name
        return self

    def with_species(self, species: Union[Species, str]) -> PetBlueprint:
        self.species = Species(str(species).lower())
        return self

    def with_health(self, health: int) -> PetBlueprint:
        self.health = health
        return self

    def with_energy(self, energy: int) -> PetBlueprint:
        self.energy = energy
        return self

    def with_hunger(self, hunger: int) -> PetBlueprint:
        self.hunger = hunger
        return self

    def with_happiness(self, happiness: int) -> PetBlueprint:
        self.happiness = happiness
        return self

    def build(self) -> State:
        return to_state(self)


def to_state(blueprint: PetBlueprint) -> State:
    """Materialize ``blueprint`` into a fresh pet.

    New pets always start out ``HAPPY``; the transition policy first runs
    after their first action.

    Raises:
        ValueError: If the species is unknown or the biased health is not positive.
    """
    species = Species(blueprint.species)
    bias = SPECIES_BIAS[species]
    max_health = blueprint.health + bias.health
    if max_health <= 0:
        raise ValueError(f"Pet max health must be positive, got {max_health}")

    return State(
        name=blueprint.name,
        species=species,
        health=Health(health=max_health, max_health=max_health),
        needs=Needs(
            energy=clamp(blueprint.energy + bias.energy, MIN_ATTRIBUTE, MAX_NEED),
            hunger=clamp(blueprint.hunger + bias.hunger, MIN_ATTRIBUTE, MAX_NEED),
            happiness=clamp(
                blueprint.happiness + bias.happiness, MIN_ATTRIBUTE, MAX_NEED
            ),
        ),
        behavior=Behavior(name=BehaviorName.HAPPY),
    )


def create_pet(
    species: Union[Species, str] = Species.CAT,
    name: str = DEFAULT_NAME,
    health: int = DEFAULT_HEALTH,
    energy: int = DEFAULT_ENERGY,
    hunger: int = DEFAULT_HUNGER,
    happiness: int = DEFAULT_HAPPINESS,
) -> State:
    """Create a pet of ``species`` from base attributes (species bias applied)."""
    return (
        PetBlueprint()
        .with_species(species)
        .with_name(name)
        .with_health(health)
        .with_energy(energy)
        .with_hunger(hunger)
        .with_happiness(happiness)
        .build()
    )
