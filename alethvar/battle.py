"""Turn-based combat between the player, an enemy and an optional ally."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Optional

from alethvar.ally import Ally
from alethvar.monster import Monster
from alethvar.player import Player


@dataclass
class Battle:
    """One fight; the player picks moves, the enemy and ally act at random."""

    player: Player
    enemy: Monster
    ally: Optional[Ally] = None
    read: Callable[[str], str] = input
    rng: random.Random = field(default_factory=random.Random)

    def wait_for_enter(self) -> None:
        print("\n(Press Enter to continue...)")
        self.read("")

    def display_status(self) -> None:
        self.player.display_status()
        self.enemy.display_status()

    def player_turn(self) -> None:
        """Ask for an ability number, counted from 1, and use it on the enemy."""
        print("\nChoose your move:")
        self.player.display_abilities()
        try:
            choice = int(self.read("Enter ability number: ").strip())
        except ValueError:
            choice = 0
        self.player.use_ability(choice - 1, self.enemy)

    def enemy_turn(self) -> None:
        choice = self.rng.randrange(self.enemy.ability_count())
        self.enemy.use_ability(choice, self.player)

    def ally_turn(self) -> None:
        if self.ally is None:
            return
        print(f"\n{self.ally.name} steps in to help!")
        self.ally.assist(self.player, self.enemy, self.rng)
        self.wait_for_enter()

    def start(self) -> bool:
        """Fight until one side falls; return True if the enemy was defeated."""
        print(f"\n{self.player.name} encounters a {self.enemy.name}!")
        while self.player.is_alive() and self.enemy.is_alive():
            self.display_status()
            self.player_turn()
            self.wait_for_enter()

            if not self.enemy.is_alive():
                print(f"\n{self.enemy.name} has been defeated!")
                self.player.add_item(self.enemy.drop_id)
                break

            self.enemy_turn()
            print()

            if self.ally is not None:
                self.ally_turn()

            if not self.player.is_alive():
                print(f"\n{self.player.name} has fallen... The light fades...")
                break

        print("\nThe battle is over.")
        return not self.enemy.is_alive()