"""Fixed balancing rules.

Thresholds used by the transition policy and the per-behavior attribute deltas
applied by the care and turn systems. Balancing is intentionally not
configurable; tables are keyed by :class:`BehaviorName` and only list the
behaviors for which the action takes effect.
"""

from dataclasses import dataclass
from typing import Dict

from virtual_pet.types import BehaviorName, Species

MIN_ATTRIBUTE = 0
MAX_NEED = 100

# Transition policy thresholds
SLEEPY_ENERGY = 20
HUNGRY_HUNGER = 80
HAPPY_HAPPINESS = 70
HAPPY_HUNGER_LIMIT = 50
HAPPY_ENERGY = 50

# Sleep episode exit conditions
WAKE_AFTER_SLEEP_TURNS = 2
WAKE_ENERGY = 90


@dataclass(frozen=True)
class Delta:
    """Signed attribute change, applied with clamping."""

    health: int = 0
    energy: int = 0
    hunger: int = 0
    happiness: int = 0


FEED_DELTAS: Dict[BehaviorName, Delta] = {
    BehaviorName.HAPPY: Delta(hunger=-30, happiness=10),
    BehaviorName.NORMAL: Delta(hunger=-25, happiness=5),
    BehaviorName.HUNGRY: Delta(hunger=-40, happiness=15),
}

PLAY_DELTAS: Dict[BehaviorName, Delta] = {
    BehaviorName.HAPPY: Delta(happiness=20, energy=-15, hunger=10),
    BehaviorName.NORMAL: Delta(happiness=15, energy=-20, hunger=10),
}

TURN_DELTAS: Dict[BehaviorName, Delta] = {
    BehaviorName.HAPPY: Delta(energy=-5, hunger=8, happiness=-2),
    BehaviorName.NORMAL: Delta(energy=-5, hunger=10, happiness=-3),
    BehaviorName.HUNGRY: Delta(energy=-8, hunger=12, happiness=-10, health=-5),
}

SLEEP_TURN_DELTA = Delta(energy=20, health=5)

SPECIES_BIAS: Dict[Species, Delta] = {
    Species.CAT: Delta(energy=20),
    Species.DRAGON: Delta(health=50),
}
