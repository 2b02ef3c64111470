from alethvar.player import ClassType, InventorySlot, Player


def _player(health=100, max_health=100):
    return Player("Aria", health, max_health, 5, 5, [], ClassType.MAGE)


def _filled_names(player):
    return [slot.item_name for row in player.inventory for slot in row if slot.item_name]


def test_new_player_has_empty_inventory():
    player = _player()
    assert player.class_type is ClassType.MAGE
    assert _filled_names(player) == []
    assert all(slot.empty for row in player.inventory for slot in row)


def test_add_item_fills_first_slot():
    player = _player()
    assert player.add_item("Red Dragon Fang") is True
    assert player.inventory[0][0] == InventorySlot("Red Dragon Fang", 1)


def test_add_item_stacks_duplicates():
    player = _player()
    player.add_item("Dark Wizard Cloak")
    player.add_item("Dark Wizard Cloak")
    assert player.inventory[0][0].quantity == 2
    assert _filled_names(player) == ["Dark Wizard Cloak"]


def test_add_item_row_major_order():
    player = _player()
    names = [f"item{n}" for n in range(4)]
    for name in names:
        player.add_item(name)
    assert [s.item_name for s in player.inventory[0]] == names[:3]
    assert player.inventory[1][0].item_name == names[3]


def test_add_item_when_full(capsys):
    player = _player()
    names = [f"trophy{n}" for n in range(9)]
    for name in names:
        assert player.add_item(name)
    assert player.add_item("extra") is False
    assert "extra" not in _filled_names(player)
    assert "inventory is full" in capsys.readouterr().out
    assert player.add_item("trophy4") is True
    assert player.inventory[1][1].quantity == 2


def test_heal_player_caps_at_max(capsys):
    player = _player(health=40)
    player.heal_player(100)
    assert player.health == player.max_health
    assert "long night's rest" in capsys.readouterr().out


def test_display_inventory(capsys):
    player = _player()
    player.add_item("Goblin Chieftain Mask")
    capsys.readouterr()
    player.display_inventory()
    out = capsys.readouterr().out
    assert "== Inventory ==" in out
    assert "[Goblin Chieftain Mask x1]" in out


def test_players_do_not_share_inventory():
    first, second = _player(), _player()
    first.add_item("Pelt of the Displacer Beast")
    assert _filled_names(second) == []