import pytest

from alethvar.abilities import Ability, AbilityType, Effect, all_abilities
from alethvar.creature import Creature


def make(name="Target", health=100, attack=0, defense=0):
    return Creature(name, health, 100, attack, defense, [])


def by_name(name):
    return next(a for a in all_abilities() if a.name == name)


def test_catalogue_order_matches_indices():
    abilities = all_abilities()
    assert len(abilities) == 21
    assert abilities[0].name == "Unused"
    assert abilities[1].name == "Slash"
    assert abilities[20].name == "Wild Strike"


def test_catalogue_names_unique():
    names = [a.name for a in all_abilities()]
    assert len(names) == len(set(names))


def test_damage_without_attack_or_defense_is_exact():
    slash = by_name("Slash")
    user, target = make("User"), make()
    slash.use(user, target)
    assert target.health == 100 - slash.effects[0].value
    assert user.health == 100


def test_damage_scales_with_user_attack():
    slash = by_name("Slash")
    user, target = make("User", attack=50), make()
    slash.use(user, target)
    assert target.health == 100 - 2 * slash.effects[0].value


def test_heal_applies_to_user_and_clamps():
    user, target = make("User", health=95), make(health=50)
    by_name("Greater Heal").use(user, target)
    assert user.health == user.max_health
    assert target.health == 50


def test_buff_raises_user_stats():
    user, target = make("User", attack=5, defense=5), make()
    by_name("Rage").use(user, target)
    assert (user.attack, user.defense) == (5 + 5, 5 + 5)
    assert (target.attack, target.defense) == (0, 0)


def test_debuff_lowers_target_stats():
    user, target = make("User"), make(attack=10)
    by_name("Intimidating Shout").use(user, target)
    assert target.attack == 10 - 8
    assert user.attack == 0


def test_mixed_effects_apply_in_order():
    user, target = make("User", health=80), make()
    necrotic = by_name("Necrotic Touch")
    necrotic.use(user, target)
    assert target.health == 100 - 10
    assert user.health == 80 + 10


@pytest.mark.parametrize("kind", [AbilityType.BUFF, AbilityType.DEBUFF])
def test_unknown_stat_changes_nothing(kind):
    ability = Ability("Odd", (Effect(kind, 5, "speed"),))
    user, target = make("User", attack=3, defense=4), make(attack=3, defense=4)
    ability.use(user, target)
    for c in (user, target):
        assert (c.attack, c.defense) == (3, 4)


def test_use_prints_damage_message(capsys):
    by_name("Slash").use(make("User"), make("Orc"))
    assert capsys.readouterr().out == "Orc takes 20 damage!\n"