"""The player character, class choice and trophy inventory."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from itertools import chain

from alethvar.creature import Creature

INVENTORY_ROWS = 3
INVENTORY_COLUMNS = 3


class ClassType(enum.Enum):
    """Player classes."""

    WARRIOR = "warrior"
    MAGE = "mage"
    CLERIC = "cleric"
    ROGUE = "rogue"
    DRUID = "druid"


@dataclass
class InventorySlot:
    """One cell of the inventory grid; empty when item_name is blank."""

    item_name: str = ""
    quantity: int = 0

    @property
    def empty(self) -> bool:
        return not self.item_name


def _empty_grid() -> list[list[InventorySlot]]:
    return [[InventorySlot() for _ in range(INVENTORY_COLUMNS)] for _ in range(INVENTORY_ROWS)]


@dataclass
class Player(Creature):
    """The adventurer, with a class and a 3 by 3 trophy inventory."""

    class_type: ClassType = ClassType.WARRIOR
    inventory: list[list[InventorySlot]] = field(default_factory=_empty_grid, init=False)

    def _slots(self) -> Iterator[InventorySlot]:
        return chain.from_iterable(self.inventory)

    def heal_player(self, amount: int) -> None:
        """Rest-based healing outside of battle."""
        self.heal(amount)
        print(f"{self.name} is restored after a long night's rest...")

    def add_item(self, item_name: str) -> bool:
        """Stack onto an existing slot or fill the first empty one; False if full."""
        for slot in self._slots():
            if slot.item_name == item_name:
                slot.quantity += 1
                print(f"You received another {item_name}! Now you have x{slot.quantity}.")
                return True
        for slot in self._slots():
            if slot.empty:
                slot.item_name = item_name
                slot.quantity = 1
                print(f"You received: {item_name}! It has been added to your inventory.")
                return True
        print(f"Your inventory is full! You cannot pick up {item_name}.")
        return False

    def display_inventory(self) -> None:
        print("\n== Inventory ==")
        for row in self.inventory:
            print("".join(f"[{s.item_name} x{s.quantity}]" for s in row if not s.empty))
        print()