from virtual_pet.components import HealthBoost
from virtual_pet.systems.turn import decay_system, rest_system
from virtual_pet.types import BehaviorName
from tests.test_utils import attributes, make_pet_state


def test_happy_decay() -> None:
    state = make_pet_state(
        behavior=BehaviorName.HAPPY, energy=100, hunger=30, happiness=80
    )
    new_state = decay_system(state)
    assert attributes(new_state) == (100, 100, 95, 38, 78)
    assert new_state.behavior.name == BehaviorName.HAPPY


def test_happy_decay_drops_to_normal() -> None:
    state = make_pet_state(
        behavior=BehaviorName.HAPPY, energy=100, hunger=30, happiness=70
    )
    new_state = decay_system(state)
    assert new_state.needs.happiness == 68
    assert new_state.behavior.name == BehaviorName.NORMAL


def test_normal_decay() -> None:
    new_state = decay_system(make_pet_state())
    assert attributes(new_state) == (100, 100, 55, 40, 47)
    assert new_state.behavior.name == BehaviorName.NORMAL
    assert new_state.message is None


def test_hungry_decay_costs_health() -> None:
    state = make_pet_state(behavior=BehaviorName.HUNGRY, hunger=85)
    new_state = decay_system(state)
    assert attributes(new_state) == (95, 100, 52, 97, 40)
    assert new_state.behavior.name == BehaviorName.HUNGRY


def test_hungry_decay_can_kill() -> None:
    state = make_pet_state(behavior=BehaviorName.HUNGRY, health=5, hunger=85)
    new_state = decay_system(state)
    assert new_state.health.health == 0
    assert new_state.behavior.name == BehaviorName.DEAD
    assert new_state.message == "Mochi has passed away..."


def test_decay_into_sleep_at_energy_20() -> None:
    state = make_pet_state(energy=25)
    new_state = decay_system(state)
    assert new_state.needs.energy == 20
    assert new_state.behavior.name == BehaviorName.SLEEPING


def test_rest_recovers_and_counts() -> None:
    state = make_pet_state(behavior=BehaviorName.SLEEPING, health=90, energy=20)
    new_state = rest_system(state)
    assert new_state.needs.energy == 40
    assert new_state.health.health == 95
    assert new_state.behavior.name == BehaviorName.SLEEPING
    assert new_state.behavior.sleep_turns == 1


def test_rest_heals_up_to_cap() -> None:
    state = make_pet_state(behavior=BehaviorName.SLEEPING, health=98, energy=20)
    assert rest_system(state).health.health == 100


def test_rest_heal_capped_at_stored_max_with_boost() -> None:
    state = make_pet_state(
        behavior=BehaviorName.SLEEPING, energy=20, modifiers=[HealthBoost()]
    )
    new_state = rest_system(state)
    assert new_state.health.health == 100
    assert new_state.health.max_health == 100


def test_rest_wakes_after_two_turns_ignoring_policy() -> None:
    state = make_pet_state(
        behavior=BehaviorName.SLEEPING, energy=10, hunger=95, sleep_turns=1
    )
    new_state = rest_system(state)
    assert new_state.needs.energy == 30
    assert new_state.behavior.name == BehaviorName.NORMAL
    assert new_state.behavior.sleep_turns == 0
    assert new_state.message == "Mochi wakes up refreshed!"


def test_rest_wakes_on_high_energy() -> None:
    state = make_pet_state(behavior=BehaviorName.SLEEPING, energy=75)
    new_state = rest_system(state)
    assert new_state.needs.energy == 95
    assert new_state.behavior.name == BehaviorName.NORMAL
