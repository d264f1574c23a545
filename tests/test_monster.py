import random

import pytest

from dungeonrpg.item import Armor, Consumable, Weapon
from dungeonrpg.monster import Dragon, Goblin, Monster, Skeleton


def test_monster_stats_line():
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    assert orc.stats() == "Orc [HP: 50/50]"


def test_monster_rewards():
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    assert orc.experience_reward == 20
    assert orc.gold_reward == 10


def test_monster_takes_damage_reduced_by_defense():
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    orc.take_damage(30)
    assert orc.current_hp == 50 - (30 - 3)
    assert orc.alive


def test_add_loot_ignores_none():
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    orc.add_loot(None)
    assert orc.loot == []


def test_drop_loot_transfers_and_empties():
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    potion = Consumable("Potion", "Heals", 15)
    orc.add_loot(potion)
    dropped = orc.drop_loot()
    assert dropped == [potion]
    assert orc.loot == []
    assert orc.drop_loot() == []


def test_base_attack_message():
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    assert orc.attack_message() == "Orc attacks!"


@pytest.mark.parametrize("seed", range(10))
def test_base_damage_in_range(seed):
    orc = Monster("Orc", 50, 8, 3, 20, 10)
    dmg = orc.calculate_damage(random.Random(seed))
    assert orc.attack <= dmg <= orc.attack + 4


def test_goblin_stats_and_loot():
    goblin = Goblin()
    assert (goblin.name, goblin.max_hp, goblin.attack, goblin.defense) == (
        "Goblin", 30, 5, 2,
    )
    assert (goblin.experience_reward, goblin.gold_reward) == (10, 5)
    [loot] = goblin.loot
    assert isinstance(loot, Consumable)
    assert loot.name == "Small Potion"
    assert loot.healing_amount == 10


def test_goblin_attack_message():
    assert Goblin().attack_message() == (
        "The goblin swipes at you with its rusty dagger!"
    )


def test_skeleton_stats_and_loot():
    skeleton = Skeleton()
    assert (skeleton.max_hp, skeleton.attack, skeleton.defense) == (40, 8, 4)
    assert (skeleton.experience_reward, skeleton.gold_reward) == (20, 10)
    [loot] = skeleton.loot
    assert isinstance(loot, Weapon)
    assert loot.name == "Old Sword"
    assert loot.damage_bonus == 3


def test_skeleton_attack_message():
    assert Skeleton().attack_message() == (
        "The skeleton rattles its bones and slashes with a sword!"
    )


def test_dragon_stats_and_loot():
    dragon = Dragon()
    assert (dragon.max_hp, dragon.attack, dragon.defense) == (150, 20, 10)
    assert (dragon.experience_reward, dragon.gold_reward) == (100, 50)
    names = [item.name for item in dragon.loot]
    assert names == ["Dragon Slayer", "Dragon Scale Armor", "Greater Health Potion"]
    assert isinstance(dragon.loot[1], Armor)
    assert dragon.loot[1].defense_bonus == 8


def test_dragon_attack_message():
    assert Dragon().attack_message() == "The dragon breathes fire at you!"


@pytest.mark.parametrize("seed", range(5))
def test_dragon_damage_is_fixed(seed):
    dragon = Dragon()
    assert dragon.calculate_damage(random.Random(seed)) == 25
    assert dragon.calculate_damage() == 25


def test_polymorphic_stats_lines():
    lines = [m.stats() for m in (Goblin(), Skeleton(), Dragon())]
    assert lines == [
        "Goblin [HP: 30/30]",
        "Skeleton [HP: 40/40]",
        "Dragon [HP: 150/150]",
    ]