"""Terminal condition helper predicates."""

from virtual_pet.state import State
from virtual_pet.types import BehaviorName


def is_terminal_state(state: State) -> bool:
    """Return True if the pet has died."""
    return state.behavior.name == BehaviorName.DEAD
