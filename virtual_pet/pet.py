"""Object-style handle over the pure reducer.

:class:`Pet` keeps the current :class:`State` and exposes the four actions
plus read-only queries. Actions advance the handle's own state and return the
:class:`Outcome`. :meth:`Pet.equip` instead returns a *new* handle for the
decorated pet; callers replace their reference with it (the old handle keeps
the undecorated state and should be dropped).
"""

from __future__ import annotations

from virtual_pet.actions import Action, Command
from virtual_pet.components import Modifier
from virtual_pet.outcome import APPLIED, Outcome
from virtual_pet.state import State
from virtual_pet.step import TurnReport, equip, play_turn, step
from virtual_pet.types import BehaviorName, ModifierType, Species
from virtual_pet.utils.modifiers import effective_max_health
from virtual_pet.utils.terminal import is_terminal_state


class Pet:
    def __init__(self, state: State):
        self._state = state

    @property
    def state(self) -> State:
        return self._state

    # Actions

    def _apply(self, action: Action) -> Outcome:
        self._state = step(self._state, action)
        return self._state.outcome or APPLIED

    def feed(self) -> Outcome:
        return self._apply(Action.FEED)

    def play(self) -> Outcome:
        return self._apply(Action.PLAY)

    def sleep(self) -> Outcome:
        return self._apply(Action.SLEEP)

    def advance_turn(self) -> Outcome:
        return self._apply(Action.ADVANCE_TURN)

    def play_turn(self, command: Command) -> TurnReport:
        report = play_turn(self._state, command)
        self._state = report.state
        return report

    def equip(self, kind: ModifierType) -> Pet:
        """Return a new handle for this pet wrapped in a ``kind`` modifier."""
        return Pet(equip(self._state, kind))

    # Queries

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def species(self) -> Species:
        return self._state.species

    @property
    def health(self) -> int:
        return self._state.health.health

    @property
    def max_health(self) -> int:
        """Effective max health (stored value plus equipped boosts)."""
        return effective_max_health(self._state)

    @property
    def energy(self) -> int:
        return self._state.needs.energy

    @property
    def hunger(self) -> int:
        return self._state.needs.hunger

    @property
    def happiness(self) -> int:
        return self._state.needs.happiness

    @property
    def behavior(self) -> BehaviorName:
        return self._state.behavior.name

    @property
    def modifiers(self) -> tuple[Modifier, ...]:
        return tuple(self._state.modifiers)

    @property
    def message(self) -> str | None:
        return self._state.message

    def is_terminal(self) -> bool:
        return is_terminal_state(self._state)

    def __repr__(self) -> str:
        return f"Pet(name={self.name!r}, species={self.species}, behavior={self.behavior})"
