"""Text rendering of a pet's status for console and web drivers."""

from typing import Dict, List

from virtual_pet.components import HappinessAura, HealthBoost
from virtual_pet.rules import MAX_NEED
from virtual_pet.state import State
from virtual_pet.types import BehaviorName, ModifierType, Species
from virtual_pet.utils.modifiers import effective_max_health, modifier_type

SPECIES_LABELS: Dict[Species, str] = {
    Species.CAT: "🐱 Cat",
    Species.DRAGON: "🐉 Dragon",
}

BEHAVIOR_LABELS: Dict[BehaviorName, str] = {
    BehaviorName.HAPPY: "😊 Happy",
    BehaviorName.NORMAL: "😐 Normal",
    BehaviorName.HUNGRY: "😠 Hungry",
    BehaviorName.SLEEPING: "😴 Sleeping",
    BehaviorName.DEAD: "💀 Dead",
}

MODIFIER_TAGS: Dict[ModifierType, str] = {
    ModifierType.HEALTH_BOOST: "⚔️ [Armored]",
    ModifierType.HAPPINESS_AURA: "✨ [Amulet]",
}

RULE = "=" * 50


def display_type(state: State) -> str:
    """Species label decorated by every equipped modifier, innermost first."""
    label = SPECIES_LABELS[state.species]
    for modifier in state.modifiers:
        label = f"{label} {MODIFIER_TAGS[modifier_type(modifier)]}"
    return label


def behavior_label(state: State) -> str:
    return BEHAVIOR_LABELS[state.behavior.name]


def modifier_lines(state: State) -> List[str]:
    lines: List[str] = []
    for modifier in state.modifiers:
        if isinstance(modifier, HealthBoost):
            lines.append(f"🛡️  Armor Bonus: +{modifier.amount} Max HP")
        elif isinstance(modifier, HappinessAura):
            lines.append(f"💎 Amulet Bonus: +{modifier.amount} Happiness/turn")
    return lines


def status_lines(state: State) -> List[str]:
    """Status block: type and name, attributes, behavior, modifier bonuses."""
    needs = state.needs
    lines = [
        RULE,
        f"🐾 {display_type(state)} {state.name}",
        f"❤️  Health: {state.health.health}/{effective_max_health(state)}",
        f"⚡ Energy: {needs.energy}/{MAX_NEED}",
        f"🍖 Hunger: {needs.hunger}/{MAX_NEED}",
        f"😊 Happiness: {needs.happiness}/{MAX_NEED}",
        f"📊 State: {behavior_label(state)}",
        RULE,
    ]
    return lines + modifier_lines(state)


def render_status(state: State) -> str:
    return "\n".join(status_lines(state))
