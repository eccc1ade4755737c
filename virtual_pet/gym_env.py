"""Gymnasium environment wrapper for the virtual pet.

Each environment step is one driver round: the chosen :class:`Command` is
applied, then the turn advances. Reward is ``1.0`` for every turn the pet
survives. ``terminated`` is ``True`` once the pet dies, ``truncated`` once the
configured turn limit is reached.

Observation schema:

``{"health", "max_health", "energy", "hunger", "happiness", "behavior", "health_boosts", "happiness_auras", "turn"}``

where ``behavior`` is an index into :class:`BehaviorName` and the rest are
``int64`` scalars. ``max_health`` is the effective value.

Usage:

``env = VirtualPetEnv(species="dragon", name="Ember")``

Customization hooks:
    * ``initial_state_fn``: Provide a callable that returns a fully built ``State``.
    * ``max_turns``: Truncation horizon (``None`` for no limit).
"""

import gymnasium as gym
import numpy as np
from typing import Any, Callable, Dict, Optional, Tuple

from virtual_pet.actions import Command, GymAction
from virtual_pet.factories import create_pet
from virtual_pet.state import State
from virtual_pet.step import play_turn
from virtual_pet.types import BehaviorName, ModifierType
from virtual_pet.utils.modifiers import count_modifiers, effective_max_health
from virtual_pet.utils.render import render_status
from virtual_pet.utils.terminal import is_terminal_state

ObsType = Dict[str, Any]

BEHAVIORS = list(BehaviorName)
COMMANDS = [Command[action.name] for action in GymAction]
DEFAULT_MAX_TURNS = 500


def pet_observation_dict(state: State) -> ObsType:
    """Numeric observation of the pet."""
    return {
        "health": np.array(state.health.health, dtype=np.int64),
        "max_health": np.array(effective_max_health(state), dtype=np.int64),
        "energy": np.array(state.needs.energy, dtype=np.int64),
        "hunger": np.array(state.needs.hunger, dtype=np.int64),
        "happiness": np.array(state.needs.happiness, dtype=np.int64),
        "behavior": BEHAVIORS.index(state.behavior.name),
        "health_boosts": np.array(
            count_modifiers(state, ModifierType.HEALTH_BOOST), dtype=np.int64
        ),
        "happiness_auras": np.array(
            count_modifiers(state, ModifierType.HAPPINESS_AURA), dtype=np.int64
        ),
        "turn": np.array(state.turn, dtype=np.int64),
    }


def pet_info_dict(state: State) -> Dict[str, Any]:
    """JSON-friendly description of the pet (names, outcome, last message)."""
    outcome = state.outcome
    return {
        "name": state.name,
        "species": str(state.species),
        "behavior": str(state.behavior.name),
        "sleep_turns": state.behavior.sleep_turns,
        "modifiers": [type(modifier).__name__ for modifier in state.modifiers],
        "outcome": str(outcome.kind) if outcome else None,
        "reason": outcome.reason if outcome else None,
        "message": state.message,
        "phase": "dead" if is_terminal_state(state) else "alive",
    }


class VirtualPetEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for the virtual pet.

    The action space is ``Discrete(len(GymAction))``; see :mod:`virtual_pet.actions`.
    """

    metadata = {"render_modes": ["human", "ansi"]}

    def __init__(
        self,
        render_mode: str = "ansi",
        max_turns: Optional[int] = DEFAULT_MAX_TURNS,
        initial_state_fn: Callable[..., State] = create_pet,
        **kwargs: Any,
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "ansi" to return the status text, "human" to print it.
            max_turns: Episode is truncated after this many turns (``None`` disables).
            initial_state_fn: Callable returning an initial ``State``.
            **kwargs: Forwarded to ``initial_state_fn`` (e.g. species, name, base stats).
        """
        from gymnasium import spaces

        self._initial_state_fn = initial_state_fn
        self._initial_state_kwargs = kwargs
        self._render_mode = render_mode
        self.max_turns = max_turns

        self.state: Optional[State] = None

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "health": int_box(0, 1_000_000),
                "max_health": int_box(1, 1_000_000),
                "energy": int_box(0, 100),
                "hunger": int_box(0, 100),
                "happiness": int_box(0, 100),
                "behavior": spaces.Discrete(len(BEHAVIORS)),
                "health_boosts": int_box(0, 1_000_000),
                "happiness_auras": int_box(0, 1_000_000),
                "turn": int_box(0, 1_000_000_000),
            }
        )
        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode with a freshly created pet.

        Arguments:
            seed: Forwarded to Gymnasium (the simulation itself is deterministic).
            options: Gymnasium options (unused).
        """
        super().reset(seed=seed)
        self.state = self._initial_state_fn(**self._initial_state_kwargs)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one driver round.

        Arguments:
            action: Integer index into the ``GymAction`` enum.

        Returns:
            (observation, reward, terminated, truncated, info)
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        command = COMMANDS[int(action)]

        report = play_turn(self.state, command)
        self.state = report.state

        terminated = is_terminal_state(self.state)
        reward = 0.0 if terminated else 1.0
        truncated = (
            not terminated
            and self.max_turns is not None
            and self.state.turn >= self.max_turns
        )
        info = self._get_info()
        info["command_outcome"] = str(report.outcome.kind)
        info["messages"] = list(report.messages)
        return self._get_obs(), reward, terminated, truncated, info

    def render(self, mode: Optional[str] = None) -> Optional[str]:  # type: ignore
        """Render the current state as a status block."""
        render_mode = mode or self._render_mode
        assert self.state is not None
        text = render_status(self.state)
        if render_mode == "human":
            print(text)
            return None
        elif render_mode == "ansi":
            return text
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        return pet_observation_dict(self.state)

    def _get_info(self) -> Dict[str, object]:
        assert self.state is not None
        return pet_info_dict(self.state)

    def close(self) -> None:
        """Nothing to release."""
        pass
