from virtual_pet.actions import Action
from virtual_pet.factories import create_pet
from virtual_pet.step import equip, step
from virtual_pet.types import BehaviorName, ModifierType, Species
from virtual_pet.utils.modifiers import effective_max_health
from tests.test_utils import make_pet_state


def test_health_boost_adds_exactly_30_on_any_stack() -> None:
    state = create_pet(Species.DRAGON, "Ember")
    for kind in [
        ModifierType.HAPPINESS_AURA,
        ModifierType.HEALTH_BOOST,
        ModifierType.HAPPINESS_AURA,
    ]:
        before = effective_max_health(state)
        boosted = equip(state, ModifierType.HEALTH_BOOST)
        assert effective_max_health(boosted) == before + 30
        state = equip(state, kind)


def test_equip_order_does_not_matter() -> None:
    base = make_pet_state(happiness=50)
    boost_first = equip(
        equip(base, ModifierType.HEALTH_BOOST), ModifierType.HAPPINESS_AURA
    )
    aura_first = equip(
        equip(base, ModifierType.HAPPINESS_AURA), ModifierType.HEALTH_BOOST
    )
    assert effective_max_health(boost_first) == effective_max_health(aura_first) == 130

    boost_first = step(boost_first, Action.ADVANCE_TURN)
    aura_first = step(aura_first, Action.ADVANCE_TURN)
    assert boost_first.needs == aura_first.needs
    assert boost_first.needs.happiness == 62


def test_aura_applies_after_transition() -> None:
    state = equip(make_pet_state(energy=25), ModifierType.HAPPINESS_AURA)
    state = step(state, Action.ADVANCE_TURN)
    assert state.behavior.name == BehaviorName.SLEEPING
    assert state.needs.happiness == 62


def test_aura_applies_while_sleeping() -> None:
    state = make_pet_state(behavior=BehaviorName.SLEEPING, energy=20, happiness=40)
    state = equip(state, ModifierType.HAPPINESS_AURA)
    state = step(state, Action.ADVANCE_TURN)
    assert state.needs.happiness == 55


def test_two_auras_stack() -> None:
    state = make_pet_state(happiness=50)
    state = equip(state, ModifierType.HAPPINESS_AURA)
    state = equip(state, ModifierType.HAPPINESS_AURA)
    state = step(state, Action.ADVANCE_TURN)
    assert state.needs.happiness == 77


def test_boosted_pet_heal_capped_at_stored_max_while_sleeping() -> None:
    state = equip(
        make_pet_state(behavior=BehaviorName.SLEEPING, energy=20),
        ModifierType.HEALTH_BOOST,
    )
    state = step(state, Action.ADVANCE_TURN)
    state = step(state, Action.SLEEP)
    state = step(state, Action.ADVANCE_TURN)
    assert state.health.health == 100
    assert state.health.max_health == 100
    assert effective_max_health(state) == 130


def test_armored_cat_stays_within_stored_max_after_nap() -> None:
    state = equip(create_pet(Species.CAT, "Mochi"), ModifierType.HEALTH_BOOST)
    state = step(state, Action.SLEEP)
    assert state.behavior.name == BehaviorName.SLEEPING
    state = step(state, Action.ADVANCE_TURN)
    assert state.health.health == 100
    assert state.health.health <= state.health.max_health
    assert state.behavior.name == BehaviorName.NORMAL
