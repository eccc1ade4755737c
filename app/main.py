import streamlit as st

from collections import Counter
from typing import Dict, List, Optional
from pyrsistent import thaw
from st_keyup import st_keyup  # type: ignore

from config import (
    AppConfig,
    set_default_config,
    get_config_from_widgets,
    make_env_and_reset,
)
from virtual_pet.actions import GymAction
from virtual_pet.gym_env import VirtualPetEnv
from virtual_pet.rules import MAX_NEED
from virtual_pet.utils.modifiers import effective_max_health
from virtual_pet.utils.render import behavior_label, display_type, modifier_lines
from virtual_pet.utils.terminal import is_terminal_state

st.set_page_config(layout="wide", page_title="Virtual Pet")

KEY_MAP: Dict[str, GymAction] = {
    "f": GymAction.FEED,
    "p": GymAction.PLAY,
    "s": GymAction.SLEEP,
    "a": GymAction.EQUIP_HEALTH_BOOST,
    "m": GymAction.EQUIP_HAPPINESS_AURA,
    "q": GymAction.WAIT,
}


def get_keyboard_action() -> Optional[GymAction]:
    value: str = (
        st_keyup(
            "control",
            label_visibility="collapsed",
            key="pet_key_input",
            placeholder="Type: f feed, p play, s sleep, a armor, m amulet, q wait",
        )
        or ""
    )
    prev_value: str = st.session_state.get("pet_key_input_prev", "")
    st.session_state["pet_key_input_prev"] = value
    if value != prev_value:
        new_values: List[str] = list((Counter(value) - Counter(prev_value)).elements())
        if not new_values:
            return None
        return KEY_MAP.get(new_values[-1])
    return None


def do_action(env: VirtualPetEnv, action: GymAction) -> None:
    if st.session_state.get("game_over"):
        return
    obs, reward, terminated, truncated, info = env.step(action)
    st.session_state["obs"] = obs
    st.session_state["info"] = info
    st.session_state["total_reward"] = float(st.session_state["total_reward"]) + reward
    st.session_state["messages"] = info.get("messages", [])
    st.session_state["game_over"] = terminated or truncated


# --------- Main App ---------

set_default_config()
tab_game, tab_config, tab_state = st.tabs(["Game", "Config", "State"])

with tab_config:
    config: AppConfig = get_config_from_widgets()
    if st.button("Save", key="save_config_btn", use_container_width=True):
        st.session_state["config"] = config
        make_env_and_reset(config)
    st.divider()

with tab_game:
    if "env" not in st.session_state:
        make_env_and_reset(st.session_state["config"])

    env: VirtualPetEnv = st.session_state["env"]
    left_col, right_col = st.columns([0.6, 0.4])

    with right_col:
        if st.button("🔁 New Pet", key="new_pet_btn", use_container_width=True):
            make_env_and_reset(st.session_state["config"])
            env = st.session_state["env"]
        st.divider()

        feed_col, play_col, sleep_col = st.columns([1, 1, 1])
        with feed_col:
            if st.button("🍖 Feed", key="feed_btn", use_container_width=True):
                do_action(env, GymAction.FEED)
        with play_col:
            if st.button("🎾 Play", key="play_btn", use_container_width=True):
                do_action(env, GymAction.PLAY)
        with sleep_col:
            if st.button("😴 Sleep", key="sleep_btn", use_container_width=True):
                do_action(env, GymAction.SLEEP)

        armor_col, amulet_col, wait_col = st.columns([1, 1, 1])
        with armor_col:
            if st.button("🛡️ Armor", key="armor_btn", use_container_width=True):
                do_action(env, GymAction.EQUIP_HEALTH_BOOST)
        with amulet_col:
            if st.button("✨ Amulet", key="amulet_btn", use_container_width=True):
                do_action(env, GymAction.EQUIP_HAPPINESS_AURA)
        with wait_col:
            if st.button("⏳ Wait", key="wait_btn", use_container_width=True):
                do_action(env, GymAction.WAIT)

        action: Optional[GymAction] = get_keyboard_action()
        if action is not None:
            do_action(env, action)

        for message in st.session_state.get("messages", []):
            st.info(message, icon="💬")

    with left_col:
        state = env.state
        if state is not None:
            st.subheader(f"🐾 {display_type(state)} {state.name}")
            st.info(f"**Turn:** {state.turn}", icon="⏳")
            st.info(
                f"**Health:** {state.health.health} / {effective_max_health(state)}",
                icon="❤️",
            )
            st.progress(state.needs.energy / MAX_NEED, text=f"⚡ Energy {state.needs.energy}")
            st.progress(state.needs.hunger / MAX_NEED, text=f"🍖 Hunger {state.needs.hunger}")
            st.progress(
                state.needs.happiness / MAX_NEED,
                text=f"😊 Happiness {state.needs.happiness}",
            )
            st.info(f"**State:** {behavior_label(state)}", icon="📊")
            for line in modifier_lines(state):
                st.caption(line)
            st.info(f"**Total Reward:** {st.session_state['total_reward']}", icon="🏅")

            if st.session_state.get("game_over"):
                if is_terminal_state(state):
                    st.error(f"💀 **Game Over! {state.name} has died.** 💀")
                else:
                    st.success("🎉 **Turn limit reached!** 🎉")

with tab_state:
    if env.state:
        st.json(thaw(env.state.description), expanded=1)
        st.json(st.session_state.get("info", {}), expanded=1)
