"""Allies that join battle and act on their own."""

from __future__ import annotations

import random
from dataclasses import dataclass

from alethvar.abilities import Ability, AbilityType, Effect
from alethvar.creature import Creature


@dataclass
class Ally(Creature):
    """A companion who either supports the player or strikes the enemy."""

    def assist(self, player: Creature, enemy: Creature, rng=None) -> None:
        """Use a random ability: buffs and heals go to the player, the rest hit the enemy."""
        if not self.abilities:
            return
        rng = rng or random
        chosen = self.abilities[rng.randrange(len(self.abilities))]
        print(f"{self.name} uses {chosen.name}!")
        if not chosen.effects:
            return
        if chosen.effects[0].type in (AbilityType.BUFF, AbilityType.HEAL):
            chosen.use(player, self)
        else:
            chosen.use(self, enemy)


def default_ally() -> Ally:
    """The farmhand who offers help after a rest at camp."""
    abilities = [
        Ability("Inspiring Tune", (Effect(AbilityType.BUFF, 5, "attack"),)),
        Ability("Fresh Tea", (Effect(AbilityType.HEAL, 8),)),
        Ability("Pitchfork Jab", (Effect(AbilityType.DAMAGE, 8),)),
    ]
    return Ally("Billy the Farmhand", 50, 50, 8, 3, abilities)