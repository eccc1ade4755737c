# tests/unit/test_transition_policy.py

import pytest

from virtual_pet.components import Health, Needs
from virtual_pet.systems.transition import transition_policy
from virtual_pet.types import BehaviorName


@pytest.mark.parametrize(
    "health, energy, hunger, happiness, expected",
    [
        # rule 1: death wins over everything
        (0, 10, 90, 90, BehaviorName.DEAD),
        # rule 2: exhausted
        (50, 20, 90, 90, BehaviorName.SLEEPING),
        (50, 0, 10, 10, BehaviorName.SLEEPING),
        # rule 3: hungry
        (50, 21, 80, 90, BehaviorName.HUNGRY),
        (50, 100, 100, 0, BehaviorName.HUNGRY),
        # rule 4: happy needs all three conditions
        (50, 51, 49, 70, BehaviorName.HAPPY),
        (50, 100, 0, 100, BehaviorName.HAPPY),
        (50, 50, 49, 70, BehaviorName.NORMAL),  # energy not > 50
        (50, 51, 50, 70, BehaviorName.NORMAL),  # hunger not < 50
        (50, 51, 49, 69, BehaviorName.NORMAL),  # happiness below 70
        # rule 5: fallback
        (50, 60, 30, 50, BehaviorName.NORMAL),
    ],
)
def test_transition_policy_first_match(
    health: int, energy: int, hunger: int, happiness: int, expected: BehaviorName
) -> None:
    result = transition_policy(
        Health(health=health, max_health=100),
        Needs(energy=energy, hunger=hunger, happiness=happiness),
    )
    assert result == expected
