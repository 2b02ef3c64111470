"""Base creature with stats, abilities and the ways they change."""

from __future__ import annotations

from dataclasses import dataclass, field

from alethvar.abilities import Ability

MAX_DEFENSE = 50


@dataclass
class Creature:
    """A combatant: player, monster or ally."""

    name: str
    health: int
    max_health: int
    attack: int
    defense: int
    abilities: list[Ability] = field(default_factory=list)

    def is_alive(self) -> bool:
        return self.health > 0

    def take_damage(self, value: int) -> int:
        """Reduce health by value less 1% per defense point; return damage taken."""
        taken = int(value * (1 - self.defense * 0.01))
        self.health = max(self.health - taken, 0)
        print(f"{self.name} takes {taken} damage!")
        return taken

    def heal(self, value: int) -> None:
        self.health = min(self.health + value, self.max_health)
        print(f"{self.name} receives {value} points of healing!")

    def increase_attack(self, value: int) -> None:
        self.attack += value
        print(f"{self.name}'s attack increases by {value}!")

    def decrease_attack(self, value: int) -> None:
        self.attack -= value
        print(f"{self.name}'s attack decreases by {value}!")

    def increase_defense(self, value: int) -> None:
        self.defense += value
        print(f"{self.name}'s defense increases by {value}!")
        if self.defense > MAX_DEFENSE:
            self.defense = MAX_DEFENSE
            print(f"{self.name} has achieved peak hardiness.. further results not guaranteed!")

    def decrease_defense(self, value: int) -> None:
        self.defense -= value
        print(f"{self.name}'s defense decreases by {value}!")

    def display_status(self) -> str:
        """Print the name, health, attack and defense line and return it."""
        line = f" {self.name} - HP: {self.health}, ATK: {self.attack}, DEF: {self.defense}"
        print(line)
        return line

    def display_abilities(self) -> None:
        """List abilities numbered from 1."""
        for number, ability in enumerate(self.abilities, start=1):
            print(f"{number}. {ability.name}")

    def use_ability(self, index: int, target: Creature) -> bool:
        """Use the ability at index on target; return False if index is out of range."""
        if 0 <= index < len(self.abilities):
            ability = self.abilities[index]
            print(f"{self.name} uses {ability.name}!")
            ability.use(self, target)
            return True
        print(f"{self.name} fumbles the action.")
        return False

    def ability_count(self) -> int:
        return len(self.abilities)