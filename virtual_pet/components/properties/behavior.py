from dataclasses import dataclass

from virtual_pet.types import BehaviorName


@dataclass(frozen=True)
class Behavior:
    """Currently active behavioral state.

    Attributes:
        name: Which of the five behaviors governs action effects.
        sleep_turns: Turns spent asleep in the current sleep episode. Only
            meaningful while ``name`` is ``SLEEPING``; every behavior entry
            starts it from zero.
    """

    name: BehaviorName
    sleep_turns: int = 0
