from dataclasses import replace

from virtual_pet.actions import Action
from virtual_pet.components import HappinessAura
from virtual_pet.step import equip, step
from virtual_pet.types import BehaviorName, ModifierType, OutcomeKind
from virtual_pet.utils.terminal import is_terminal_state
from tests.test_utils import make_pet_state


def starving_pet(**kwargs: object):
    return make_pet_state(behavior=BehaviorName.HUNGRY, health=5, hunger=90, **kwargs)  # type: ignore[arg-type]


def test_starving_pet_dies() -> None:
    state = step(starving_pet(), Action.ADVANCE_TURN)
    assert state.health.health == 0
    assert state.behavior.name == BehaviorName.DEAD
    assert is_terminal_state(state)
    assert state.turn == 1


def test_aura_does_not_touch_dying_pet() -> None:
    state = step(starving_pet(modifiers=[HappinessAura()]), Action.ADVANCE_TURN)
    assert state.behavior.name == BehaviorName.DEAD
    assert state.needs.happiness == 40


def test_dead_is_terminal_for_every_operation() -> None:
    dead = step(starving_pet(modifiers=[HappinessAura()]), Action.ADVANCE_TURN)
    frozen = replace(dead, outcome=None, message=None)

    state = dead
    for action in [Action.FEED, Action.PLAY, Action.SLEEP, Action.ADVANCE_TURN] * 3:
        state = step(state, action)
        assert state.outcome is not None
        assert state.outcome.kind == OutcomeKind.REJECTED
        assert replace(state, outcome=None, message=None) == frozen

    state = equip(state, ModifierType.HEALTH_BOOST)
    assert state.outcome is not None
    assert state.outcome.kind == OutcomeKind.REJECTED
    assert replace(state, outcome=None, message=None) == frozen
