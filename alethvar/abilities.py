"""Abilities and the effects they apply to creatures."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from alethvar.creature import Creature


class AbilityType(enum.Enum):
    """Kind of effect an ability applies."""

    DAMAGE = "damage"
    HEAL = "heal"
    BUFF = "buff"
    DEBUFF = "debuff"


@dataclass(frozen=True)
class Effect:
    """One effect of an ability: its kind, strength and the stat it touches."""

    type: AbilityType
    value: int
    stat_affected: str = ""


@dataclass(frozen=True)
class Ability:
    """A named ability made of one or more effects."""

    name: str
    effects: tuple[Effect, ...] = ()

    def use(self, user: Creature, target: Creature) -> None:
        """Apply every effect in order; damage scales with the user's attack."""
        for effect in self.effects:
            if effect.type is AbilityType.DAMAGE:
                scale = user.attack * 0.02 + 1
                target.take_damage(int(effect.value * scale))
            elif effect.type is AbilityType.HEAL:
                user.heal(effect.value)
            elif effect.type is AbilityType.BUFF:
                if effect.stat_affected == "attack":
                    user.increase_attack(effect.value)
                elif effect.stat_affected == "defense":
                    user.increase_defense(effect.value)
            elif effect.type is AbilityType.DEBUFF:
                if effect.stat_affected == "attack":
                    target.decrease_attack(effect.value)
                elif effect.stat_affected == "defense":
                    target.decrease_defense(effect.value)


def _ability(name: str, *effects: tuple) -> Ability:
    return Ability(name, tuple(Effect(*spec) for spec in effects))


_D, _H, _B, _X = AbilityType.DAMAGE, AbilityType.HEAL, AbilityType.BUFF, AbilityType.DEBUFF


def all_abilities() -> list[Ability]:
    """Every player ability, indexed as the class selection expects."""
    return [
        _ability("Unused", (_D, 100)),
        _ability("Slash", (_D, 20)),
        _ability("Rage", (_B, 5, "attack"), (_B, 5, "defense")),
        _ability("Intimidating Shout", (_X, 8, "attack")),
        _ability("Rending Blow", (_D, 10), (_X, 6, "defense")),
        _ability("Fireball", (_D, 20), (_X, 3, "defense")),
        _ability("Mage Armor", (_B, 8, "defense")),
        _ability("Health Potion", (_H, 15)),
        _ability("Monologue", (_B, 8, "attack")),
        _ability("Greater Heal", (_H, 25)),
        _ability("Necrotic Touch", (_D, 10), (_H, 10)),
        _ability("Divine Plea", (_B, 5, "attack"), (_H, 10)),
        _ability("Radiant Bolt", (_D, 15), (_X, 3, "defense")),
        _ability("Piercing Arrow", (_D, 15), (_X, 5, "defense")),
        _ability("Stealth", (_B, 3, "defense"), (_B, 5, "attack")),
        _ability("Mind Games", (_X, 5, "defense"), (_B, 5, "attack")),
        _ability("Sneak Attack", (_D, 25)),
        _ability("Nature's Bounty", (_H, 20)),
        _ability("Thorn Whip", (_D, 10), (_X, 5, "attack")),
        _ability("Shapeshift", (_B, 4, "attack"), (_B, 6, "defense")),
        _ability("Wild Strike", (_D, 20), (_X, 3, "attack")),
    ]