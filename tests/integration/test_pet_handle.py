from virtual_pet.actions import Command
from virtual_pet.factories import create_pet
from virtual_pet.pet import Pet
from virtual_pet.types import BehaviorName, ModifierType, OutcomeKind, Species
from tests.test_utils import make_pet_state


def test_actions_return_outcomes() -> None:
    pet = Pet(create_pet(Species.CAT, "Mochi"))
    assert pet.feed().applied
    assert pet.hunger == 0
    assert pet.happiness == 80
    assert pet.behavior == BehaviorName.HAPPY
    assert pet.message == "Mochi enjoys the meal!"
    assert pet.sleep().applied
    assert not pet.feed().applied
    assert pet.play().applied
    assert pet.behavior == BehaviorName.NORMAL


def test_equip_returns_new_handle() -> None:
    pet = Pet(create_pet(Species.DRAGON, "Ember"))
    armored = pet.equip(ModifierType.HEALTH_BOOST)
    assert armored is not pet
    assert armored.max_health == 180
    assert pet.max_health == 150
    assert armored.health == 150
    assert len(armored.modifiers) == 1


def test_queries() -> None:
    pet = Pet(create_pet(Species.DRAGON, "Ember"))
    assert pet.name == "Ember"
    assert pet.species == Species.DRAGON
    assert (pet.health, pet.max_health, pet.energy) == (150, 150, 80)
    assert not pet.is_terminal()
    assert pet.advance_turn().applied
    assert pet.state.turn == 1


def test_play_turn_through_handle() -> None:
    pet = Pet(create_pet(Species.CAT, "Mochi"))
    report = pet.play_turn(Command.WAIT)
    assert pet.state is report.state
    assert pet.state.turn == 1


def test_actions_on_dead_pet_return_rejected_outcomes() -> None:
    pet = Pet(make_pet_state(health=0, behavior=BehaviorName.DEAD))
    for outcome in [pet.feed(), pet.play(), pet.sleep(), pet.advance_turn()]:
        assert outcome.kind == OutcomeKind.REJECTED
        assert outcome.reason == "Mochi has passed away..."
