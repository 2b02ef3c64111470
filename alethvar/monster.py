"""Monsters: boss enemies with random ability use and a trophy drop."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

from alethvar.abilities import Ability, AbilityType, Effect
from alethvar.creature import Creature


@dataclass
class Monster(Creature):
    """An enemy creature that leaves a named trophy when defeated."""

    drop_id: str = ""

    def take_turn(self, target: Creature, rng=None) -> None:
        """Use a randomly chosen ability on target, if still alive."""
        if not self.is_alive():
            return
        rng = rng or random
        choice = rng.randrange(len(self.abilities))
        print(f"\n {self.name} uses {self.abilities[choice].name}!")
        self.use_ability(choice, target)


_D, _H, _B, _X = AbilityType.DAMAGE, AbilityType.HEAL, AbilityType.BUFF, AbilityType.DEBUFF


def _ability(name: str, *specs: tuple) -> Ability:
    return Ability(name, tuple(Effect(*spec) for spec in specs))


def default_monsters() -> list[Monster]:
    """The bosses a player can choose to hunt, in menu order."""
    return [
        Monster(
            "Displacer Beast", 60, 60, 5, 5,
            [
                _ability("Blur", (_B, 5, "defense")),
                _ability("Shred", (_D, 8), (_X, 3, "defense")),
                _ability("Ferocious Bite", (_D, 8), (_X, 3, "attack")),
                _ability("Brutal Slash", (_D, 13)),
                _ability("Beastial Wrath", (_B, 3, "attack"), (_H, 6)),
            ],
            "Pelt of the Displacer Beast",
        ),
        Monster(
            "Goblin Chieftain", 80, 80, 4, 5,
            [
                _ability("Club", (_D, 8)),
                _ability("Cunning Trap", (_D, 5), (_X, 4, "defense")),
                _ability("Bugbear Bodyguards", (_D, 8), (_B, 3, "attack"), (_H, 5)),
                _ability("Call the Worgs", (_D, 8), (_B, 5, "attack")),
                _ability("War Drums", (_B, 5, "attack"), (_H, 15)),
            ],
            "Goblin Chieftain Mask",
        ),
        Monster(
            "Mind Flayer", 90, 90, 5, 10,
            [
                _ability("Mind Grasp", (_D, 18), (_X, 3, "defense")),
                _ability("Disorient", (_X, 4, "attack"), (_X, 4, "defense")),
                _ability("Illithid Pulse", (_D, 16), (_B, 3, "attack")),
                _ability("Psionic Blast", (_D, 18)),
                _ability("Cerebral Burn", (_D, 12), (_H, 6)),
            ],
            "Tentacle of the Mind Flayer",
        ),
        Monster(
            "Red Wizard of Thay", 95, 95, 9, 2,
            [
                _ability("Dark Ritual", (_B, 4, "attack"), (_B, 4, "defense")),
                _ability("Necrotic Touch", (_D, 10), (_H, 5)),
                _ability("Arcane Chains", (_D, 5), (_X, 3, "attack"), (_X, 3, "defense")),
                _ability("Hellfire Sike", (_D, 20)),
                _ability("Blood Pact", (_H, -5), (_B, 10, "defense")),
            ],
            "Dark Wizard Cloak",
        ),
        Monster(
            "Young Red Dragon", 120, 120, 10, 8,
            [
                _ability("Flame Breath", (_D, 23), (_X, 1, "defense")),
                _ability("Sky Roar", (_B, 8, "attack")),
                _ability("Tail Smash", (_D, 16), (_X, 3, "defense")),
                _ability("Wing Buffet", (_D, 18), (_X, 3, "attack")),
                _ability("Ancient Magic", (_H, 15), (_B, 3, "defense")),
            ],
            "Red Dragon Fang",
        ),
    ]


def any_alive(monsters: Iterable[Monster]) -> bool:
    """True if at least one monster still stands."""
    return any(monster.is_alive() for monster in monsters)