from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import streamlit as st

from virtual_pet.factories import (
    DEFAULT_ENERGY,
    DEFAULT_HAPPINESS,
    DEFAULT_HEALTH,
    DEFAULT_HUNGER,
)
from virtual_pet.gym_env import DEFAULT_MAX_TURNS, VirtualPetEnv
from virtual_pet.types import Species


@dataclass(frozen=True)
class AppConfig:
    species: Species
    name: str
    health: int
    energy: int
    hunger: int
    happiness: int
    max_turns: Optional[int]


def set_default_config() -> None:
    if "config" not in st.session_state:
        st.session_state["config"] = AppConfig(
            species=Species.CAT,
            name="Buddy",
            health=DEFAULT_HEALTH,
            energy=DEFAULT_ENERGY,
            hunger=DEFAULT_HUNGER,
            happiness=DEFAULT_HAPPINESS,
            max_turns=DEFAULT_MAX_TURNS,
        )


def pet_section(current: AppConfig) -> tuple[Species, str]:
    st.subheader("Pet")
    species_list = list(Species)
    species = st.selectbox(
        "Species",
        species_list,
        index=species_list.index(current.species),
        format_func=lambda s: s.capitalize(),
        key="species_select",
    )
    name = st.text_input("Name", value=current.name, key="name_input")
    return species, name or "Buddy"


def stats_section(current: AppConfig) -> tuple[int, int, int, int]:
    st.subheader("Base Stats")
    health = st.number_input("Health", min_value=1, value=current.health)
    energy = st.slider("Energy", 0, 100, current.energy)
    hunger = st.slider("Hunger", 0, 100, current.hunger)
    happiness = st.slider("Happiness", 0, 100, current.happiness)
    return int(health), energy, hunger, happiness


def limits_section(current: AppConfig) -> Optional[int]:
    st.subheader("Episode")
    unlimited = st.checkbox("No turn limit", value=current.max_turns is None)
    if unlimited:
        return None
    max_turns = st.number_input(
        "Turn limit",
        min_value=1,
        value=current.max_turns or DEFAULT_MAX_TURNS,
    )
    return int(max_turns)


def get_config_from_widgets() -> AppConfig:
    current: AppConfig = st.session_state["config"]
    species, name = pet_section(current)
    health, energy, hunger, happiness = stats_section(current)
    max_turns = limits_section(current)
    return AppConfig(
        species=species,
        name=name,
        health=health,
        energy=energy,
        hunger=hunger,
        happiness=happiness,
        max_turns=max_turns,
    )


def make_env_and_reset(config: AppConfig) -> None:
    """Create & reset an environment for ``config``.

    Centralizes session_state bookkeeping (env, obs, info, reward, messages).
    """
    try:
        env = VirtualPetEnv(
            max_turns=config.max_turns,
            species=config.species,
            name=config.name,
            health=config.health,
            energy=config.energy,
            hunger=config.hunger,
            happiness=config.happiness,
        )
    except ValueError as e:
        st.error(f"Pet creation failed: {e}")
        return
    obs, info = env.reset()
    st.session_state["env"] = env
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    st.session_state["total_reward"] = 0.0
    st.session_state["messages"] = []
    st.session_state["game_over"] = False
