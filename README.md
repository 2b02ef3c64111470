# alethvar

A small turn-based text role-playing game for the terminal.

Monsters not seen in a generation stalk the village of Alethvar. You pick a
class, choose which beast to hunt and fight it turn by turn. Defeated bosses
drop trophies that go into a 3 × 3 inventory.

## Playing

Install the package and start the game:

```
pip install .
alethvar
```

The game asks for your name and then for a weapon, which sets your class. It
keeps asking until you enter a number from 1 to 5:

1. Greataxe (Warrior): Slash, Rage, Intimidating Shout, Rending Blow
2. Arcane Tome (Mage): Fireball, Mage Armor, Health Potion, Monologue
3. Holy Symbol (Cleric): Greater Heal, Necrotic Touch, Divine Plea, Radiant Bolt
4. Pair of Daggers (Rogue): Piercing Arrow, Stealth, Mind Games, Sneak Attack
5. Oaken Staff (Druid): Nature's Bounty, Thorn Whip, Shapeshift, Wild Strike

Next you pick your quarry: Displacer Beast, Goblin Chieftain, Mind Flayer, Red
Wizard of Thay or Young Red Dragon. Each hunt is against a fresh copy of the
boss. In each round you choose an ability by number; a number that is not on
the list makes you fumble the turn. The monster answers with an ability chosen
at random. If you have an ally, they step in with an ability of their own:
buffs and heals go to you, attacks go to the enemy.

After each battle you can:

1. press on without resting,
2. return to camp and heal,
3. heal and return with Billy the Farmhand as your ally,
4. retire from adventuring.

End of input or Ctrl-C ends the game at any prompt.

## Rules in brief

- Damage grows by 2% for each point of the attacker's attack. The target's
  defense cuts it by 1% per point.
- Raising defense stops at 50.
- Healing never raises health above its maximum.
- A trophy you already hold stacks. A new trophy takes the first free slot.
  When all nine slots are taken, a new trophy is turned away.

## Using the pieces

The game logic can be used on its own:

```python
import random

from alethvar.abilities import all_abilities
from alethvar.monster import default_monsters
from alethvar.player import ClassType, Player

abilities = all_abilities()
hero = Player("Ayla", 100, 100, 5, 5, abilities[1:5], ClassType.WARRIOR)
dragon = default_monsters()[4]

hero.use_ability(0, dragon)          # Slash
dragon.take_turn(hero, random.Random(7))
hero.add_item(dragon.drop_id)
hero.display_inventory()
```

The modules are:

- `alethvar.abilities`: `AbilityType`, `Effect`, `Ability` and `all_abilities()`.
- `alethvar.creature`: `Creature`, with `take_damage`, `heal`, the attack and
  defense changes, `display_status`, `display_abilities`, `use_ability` and
  `ability_count`.
- `alethvar.monster`: `Monster` (with `drop_id` and `take_turn`),
  `default_monsters()` and `any_alive()`.
- `alethvar.player`: `ClassType`, `InventorySlot` and `Player` (with
  `heal_player`, `add_item` and `display_inventory`).
- `alethvar.ally`: `Ally` (with `assist`) and `default_ally()`.
- `alethvar.battle`: `Battle`, which takes a `read` function for input and a
  `random.Random` for the enemy's and ally's choices; `start()` returns whether
  the enemy was defeated.
- `alethvar.game`: the menus (`choose_class`, `choose_enemy`,
  `display_enemies`, `wait_for_enter`, `delay`) and `main()`.

## What it does not do

There is no saving or loading: a character and its trophies last only as long
as one run of the game.

## Running the tests

```
pip install .[test]
pytest
```