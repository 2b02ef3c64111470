"""The adventure: introduction, class choice, boss selection and the hunt loop."""

from __future__ import annotations

import argparse
import copy
import random
import time
from collections.abc import Callable, Sequence
from typing import Optional

from alethvar.abilities import all_abilities
from alethvar.ally import Ally, default_ally
from alethvar.battle import Battle
from alethvar.monster import Monster, default_monsters
from alethvar.player import ClassType, Player

Reader = Callable[[str], str]

DEFAULT_DELAY_MS = 4000
REST_HEALING = 100

_CLASS_MENU = (
    "1. Greataxe (Warrior)",
    "2. Arcane Tome (Mage)",
    "3. Holy Symbol (Cleric)",
    "4. Pair of Daggers (Rogue)",
    "5. Oaken Staff (Druid)",
)

# Menu number -> class and the slice of all_abilities() it fights with.
_CLASSES = {
    1: (ClassType.WARRIOR, slice(1, 5)),
    2: (ClassType.MAGE, slice(5, 9)),
    3: (ClassType.CLERIC, slice(9, 13)),
    4: (ClassType.ROGUE, slice(13, 17)),
    5: (ClassType.DRUID, slice(17, 21)),
}

_INTRO = (
    "\nThe sun sinks behind the Roshan Mountains, draping the village of Alethvar in shadows and fear...",
    "For weeks now, monsters not seen in a generation have stalked the edges of civilization— "
    "reports of eerie howls that echo through the night, ",
    "entire fields are found burnt to a crisp, and there are claws marks that rip through stone. "
    "The people are desperate. The Council of Elders has issued a call: ",
    "brave souls willing to hunt the nightmares will be rewarded with coin, fame… and perhaps answers...",
    "\nIn a smoky tavern lit by flickering lanterns, you rise from your seat. "
    "You are no common traveler— you are a trained adventurer, ",
    "forged by battle and bound by purpose.",
)


def delay(ms: int = DEFAULT_DELAY_MS) -> None:
    """Pause for dramatic effect; ms is scaled to 0.7 of a millisecond each."""
    time.sleep(ms * 700 / 1_000_000)


def wait_for_enter(read: Reader = input) -> None:
    """Pause until the player presses Enter."""
    print("\n(Press Enter to continue...)")
    read("")


def display_enemies(enemies: Sequence[Monster]) -> None:
    """List the bosses numbered from 1."""
    print("\nWhich quarry will you choose hunt?:")
    for number, enemy in enumerate(enemies, start=1):
        print(f"{number}. {enemy.name}")


def choose_enemy(enemies: Sequence[Monster], read: Reader = input) -> Monster:
    """Ask for a boss number and return a fresh copy of that boss."""
    text = read("Choose your target's number: ")
    try:
        choice = int(text.strip())
    except ValueError:
        raise ValueError(f"not a target number: {text!r}") from None
    if not 1 <= choice <= len(enemies):
        raise ValueError(f"no target numbered {choice}")
    return copy.deepcopy(enemies[choice - 1])


def choose_class(player_name: str, read: Reader = input) -> Player:
    """Ask until a valid weapon is chosen and build the matching player."""
    print("\nWhich weapon is readied for battle?: ")
    for line in _CLASS_MENU:
        print(line)
    while True:
        text = read("Enter the item's number: ")
        try:
            choice = int(text.strip())
        except ValueError:
            choice = 0
        if choice in _CLASSES:
            break
        print("Invalid input. Please enter a number between 1 and 5.")

    class_type, picks = _CLASSES[choice]
    abilities = all_abilities()[picks]
    return Player(player_name, 100, 100, 5, 5, abilities, class_type)


def _read_int(read: Reader, prompt: str) -> Optional[int]:
    try:
        return int(read(prompt).strip())
    except ValueError:
        return None


def _select_enemy(enemies: Sequence[Monster], read: Reader) -> Monster:
    while True:
        try:
            return choose_enemy(enemies, read)
        except ValueError:
            print("Invalid choice.")
            display_enemies(enemies)


def _play(read: Reader, rng: random.Random, pause: Callable[[int], None]) -> None:
    print()
    for line in _INTRO:
        print(line)
        pause(DEFAULT_DELAY_MS)

    player_name = read("\nWhat is your name, brave adventurer? ")
    print(f"\nWelcome, {player_name}. Your journey begins now...")
    pause(1500)

    enemies = default_monsters()
    ally: Optional[Ally] = None

    player = choose_class(player_name, read)
    pause(1000)

    while True:
        display_enemies(enemies)
        enemy = _select_enemy(enemies, read)
        wait_for_enter(read)

        Battle(player, enemy, ally, read=read, rng=rng).start()
        print("\n ", end="")
        player.display_inventory()

        print("\nHow would you like to proceed?")
        print("1. Press the attack, continue fighting!")
        print("2. Return to camp and heal before setting out again")
        print("3. Heal and return with an ally to assist you in battle!")
        print("4. Quit the game")
        choice = _read_int(read, "Enter choice: ")

        if choice == 4:
            print(f"\n{player_name} has retired from the adventuring life...")
            return
        if choice == 3:
            player.heal_player(REST_HEALING)
            ally = default_ally()
        elif choice == 2:
            player.heal_player(REST_HEALING)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the text adventure on the terminal."""
    parser = argparse.ArgumentParser(
        prog="alethvar",
        description="A turn-based text adventure against the monsters of Alethvar.",
    )
    parser.parse_args(argv)
    try:
        _play(input, random.Random(), delay)
    except (EOFError, KeyboardInterrupt):
        print("\nThe tale ends here.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())