from alethvar.ally import Ally, default_ally
from alethvar.creature import Creature


class FixedRng:
    def __init__(self, index):
        self.index = index

    def randrange(self, n):
        assert 0 <= self.index < n
        return self.index


def _pair():
    player = Creature("Hero", 60, 100, 5, 5, [])
    enemy = Creature("Beast", 80, 80, 5, 5, [])
    return player, enemy


def test_default_ally_stats():
    ally = default_ally()
    assert ally.name == "Billy the Farmhand"
    assert (ally.health, ally.max_health, ally.attack, ally.defense) == (50, 50, 8, 3)
    assert [a.name for a in ally.abilities] == ["Inspiring Tune", "Fresh Tea", "Pitchfork Jab"]


def test_buff_goes_to_player():
    ally = default_ally()
    player, enemy = _pair()
    before = player.attack
    ally.assist(player, enemy, FixedRng(0))
    assert player.attack == before + 5
    assert ally.attack == 8
    assert enemy.health == enemy.max_health


def test_heal_goes_to_player():
    ally = default_ally()
    player, enemy = _pair()
    before = player.health
    ally.assist(player, enemy, FixedRng(1))
    assert player.health == before + 8


def test_damage_hits_enemy(capsys):
    ally = default_ally()
    player, enemy = _pair()
    ally.assist(player, enemy, FixedRng(2))
    assert enemy.health < enemy.max_health
    assert player.health == 60
    assert "Billy the Farmhand uses Pitchfork Jab!" in capsys.readouterr().out


def test_no_abilities_does_nothing(capsys):
    ally = Ally("Mute", 10, 10, 1, 1, [])
    player, enemy = _pair()
    ally.assist(player, enemy, FixedRng(0))
    assert capsys.readouterr().out == ""
    assert enemy.health == enemy.max_health