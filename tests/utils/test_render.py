# tests/utils/test_render.py

from virtual_pet.components import HappinessAura, HealthBoost
from virtual_pet.types import BehaviorName, Species
from virtual_pet.utils.render import (
    behavior_label,
    display_type,
    modifier_lines,
    render_status,
)
from tests.test_utils import make_pet_state


def test_display_type_decorated_in_equip_order() -> None:
    state = make_pet_state(modifiers=[HealthBoost(), HappinessAura()])
    assert display_type(state) == "🐱 Cat ⚔️ [Armored] ✨ [Amulet]"
    assert display_type(make_pet_state(species=Species.DRAGON)) == "🐉 Dragon"


def test_behavior_label() -> None:
    assert behavior_label(make_pet_state(behavior=BehaviorName.SLEEPING)) == "😴 Sleeping"


def test_status_uses_effective_max_health() -> None:
    state = make_pet_state(modifiers=[HealthBoost()])
    text = render_status(state)
    assert "❤️  Health: 100/130" in text
    assert "🐾 🐱 Cat ⚔️ [Armored] Mochi" in text
    assert "📊 State: 😐 Normal" in text
    assert text.endswith("🛡️  Armor Bonus: +30 Max HP")


def test_modifier_lines() -> None:
    state = make_pet_state(modifiers=[HappinessAura()])
    assert modifier_lines(state) == ["💎 Amulet Bonus: +15 Happiness/turn"]
    assert modifier_lines(make_pet_state()) == []
