from typing import Iterator, List

from virtual_pet.console import game_loop, run
from virtual_pet.types import BehaviorName, Species
from tests.test_utils import make_pet_state


def scripted(inputs: List[str]):
    it: Iterator[str] = iter(inputs)

    def read(prompt: str) -> str:
        return next(it)

    return read


def test_create_dragon_feed_and_exit() -> None:
    out: List[str] = []
    state = run(read=scripted(["2", "Ember", "1", "6"]), write=out.append)
    assert state.species == Species.DRAGON
    assert state.name == "Ember"
    assert state.turn == 1
    text = "\n".join(out)
    assert "🐉 Dragon Ember has been created!" in text
    assert "Ember enjoys the meal!" in text
    assert "Thanks for playing!" in text
    assert "Game Over" not in text


def test_default_name_and_invalid_choice() -> None:
    out: List[str] = []
    state = run(read=scripted(["1", "", "9", "6"]), write=out.append)
    assert state.name == "Buddy"
    assert state.species == Species.CAT
    assert "❌ Invalid choice!" in out
    assert state.turn == 1


def test_equip_from_menu() -> None:
    out: List[str] = []
    state = run(read=scripted(["1", "Mochi", "4", "5", "6"]), write=out.append)
    assert len(state.modifiers) == 2
    assert "Equipped Golden Armor! +30 HP" in out


def test_loop_ends_on_death() -> None:
    out: List[str] = []
    state = make_pet_state(behavior=BehaviorName.HUNGRY, health=5, hunger=90)
    state = game_loop(state, scripted(["2"]), out.append)
    assert state.behavior.name == BehaviorName.DEAD
    assert "\n💀 Game Over! Mochi has died." in out
