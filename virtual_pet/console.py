"""Interactive console driver.

Run with ``python -m virtual_pet.console``. Each round prints the status
block and the action menu, applies the chosen command and advances the turn.
The loop ends when the pet dies or the player exits. Input and output are
injectable so the loop can be driven from tests.
"""

import argparse
import logging
import time
from typing import Callable, Dict, Optional, Sequence

from virtual_pet.actions import Command
from virtual_pet.factories import PetBlueprint
from virtual_pet.state import State
from virtual_pet.step import play_turn
from virtual_pet.types import Species
from virtual_pet.utils.render import display_type, render_status
from virtual_pet.utils.terminal import is_terminal_state

logger = logging.getLogger(__name__)

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

DEFAULT_PET_NAME = "Buddy"
EXIT_CHOICE = "6"

MENU_COMMANDS: Dict[str, Command] = {
    "1": Command.FEED,
    "2": Command.PLAY,
    "3": Command.SLEEP,
    "4": Command.EQUIP_HEALTH_BOOST,
    "5": Command.EQUIP_HAPPINESS_AURA,
}

MENU = "\n".join(
    [
        "",
        "📋 Actions:",
        "1. 🍖 Feed",
        "2. 🎾 Play",
        "3. 😴 Sleep",
        "4. 🛡️  Equip Armor (+30 HP)",
        "5. ✨ Equip Amulet (+15 Happiness/turn)",
        "6. 🚪 Exit",
    ]
)

SPECIES_MENU = "\n".join(
    [
        "",
        "🐾 Choose your pet:",
        "1. 🐱 Cat (Higher energy, agile)",
        "2. 🐉 Dragon (Higher health, powerful)",
    ]
)


def create_pet_interactively(read: InputFn, write: OutputFn) -> State:
    """Ask for species and name, then build the pet."""
    blueprint = PetBlueprint()
    write(SPECIES_MENU)
    choice = read("Choice: ").strip()
    blueprint.with_species(Species.DRAGON if choice == "2" else Species.CAT)

    name = read("\n📝 Enter pet name: ").strip()
    blueprint.with_name(name or DEFAULT_PET_NAME)

    state = blueprint.build()
    write(f"\n✅ {display_type(state)} {state.name} has been created!")
    return state


def game_loop(
    state: State, read: InputFn, write: OutputFn, delay: float = 0.0
) -> State:
    """Play rounds until the pet dies or the player exits; returns the last state."""
    while not is_terminal_state(state):
        write("\n" + render_status(state))
        write(MENU)
        choice = read("Choice: ").strip()
        if choice == EXIT_CHOICE:
            break

        command = MENU_COMMANDS.get(choice)
        if command is None:
            write("❌ Invalid choice!")
            command = Command.WAIT

        report = play_turn(state, command)
        state = report.state
        for message in report.messages:
            write(message)

        if delay > 0:
            time.sleep(delay)

    if is_terminal_state(state):
        write(f"\n💀 Game Over! {state.name} has died.")
    write("\n👋 Thanks for playing!")
    return state


def run(
    read: InputFn = input,
    write: OutputFn = print,
    delay: float = 0.0,
) -> State:
    rule = "=" * 60
    write("\n" + rule)
    write("🎮 WELCOME TO VIRTUAL PET SIMULATOR 🎮")
    write(rule)
    state = create_pet_interactively(read, write)
    return game_loop(state, read, write, delay=delay)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Virtual pet simulator")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.0,
        help="Pause in seconds between turns (cosmetic)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level for simulator internals",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )
    try:
        run(delay=args.delay)
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, stopping")


if __name__ == "__main__":
    main()
