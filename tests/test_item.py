import pytest

from dungeonrpg.item import Armor, Consumable, Item, ItemError, Weapon


def test_item_info_format():
    item = Item("Small Potion", "Restores 5 HP", "Food", 5)
    assert item.info() == "[ITEM] Small Potion\n  Restores 5 HP\n  Value: 5"


def test_item_brief_format():
    item = Item("Iron Sword", "A sturdy sword", "Weapon", 2)
    assert item.brief() == "Iron Sword (Weapon)"


def test_plain_item_use_has_no_effect():
    item = Item("Chain Mail", "Armor that protects you", "Armor", 3)
    assert item.use() is None
    assert item.value == 3


def test_weapon_fields_and_info():
    sword = Weapon("Iron Sword", "A sturdy blade", 5)
    assert sword.kind == "Weapon"
    assert sword.damage_bonus == sword.value == 5
    assert sword.info() == "[WEAPON] Iron Sword\n  A sturdy blade\n  Damage Bonus: +5"


def test_armor_fields_and_info():
    mail = Armor("Chain Mail", "Protective armor", 3)
    assert mail.kind == "Armor"
    assert mail.defense_bonus == mail.value == 3
    assert mail.info() == "[ARMOR] Chain Mail\n  Protective armor\n  Defense Bonus: +3"


def test_consumable_fields_and_info():
    potion = Consumable("Health Potion", "Restores HP", 20)
    assert potion.kind == "Consumable"
    assert potion.healing_amount == potion.value == 20
    assert potion.used is False
    assert potion.info() == "[CONSUMABLE] Health Potion\n  Restores HP\n  Restores: 20 HP"


def test_consumable_use_once():
    potion = Consumable("Health Potion", "Restores HP", 20)
    assert potion.use() == "Used Health Potion! Restored 20 HP."
    assert potion.used is True


def test_consumable_second_use_raises():
    potion = Consumable("Health Potion", "Restores HP", 20)
    potion.use()
    with pytest.raises(ItemError, match="Health Potion has already been used."):
        potion.use()
    assert potion.used is True


@pytest.mark.parametrize(
    "item",
    [
        Weapon("Sword", "Sharp blade", 5),
        Armor("Shield", "Wooden shield", 2),
        Consumable("Potion", "Heals", 20),
    ],
)
def test_brief_uses_kind(item):
    assert item.brief() == f"{item.name} ({item.kind})"
    assert item.info().splitlines()[0].endswith(item.name)