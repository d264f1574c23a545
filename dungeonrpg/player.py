"""The player character: levels, inventory, equipment and gold."""

from __future__ import annotations

import random
from typing import List, Optional

from .character import Character
from .item import Armor, Consumable, Item, ItemError, Weapon

_RULE = "=" * 28

START_HP = 100
START_ATTACK = 10
START_DEFENSE = 5
EXP_PER_LEVEL = 100


class Player(Character):
    """The hero controlled by the user."""

    def __init__(self, name: str) -> None:
        super().__init__(name, START_HP, START_ATTACK, START_DEFENSE)
        self.level = 1
        self.experience = 0
        self.gold = 0
        self.inventory: List[Item] = []
        self.equipped_weapon: Optional[Item] = None
        self.equipped_armor: Optional[Item] = None

    def stats(self) -> str:
        """Return the full stat sheet, including equipment bonuses."""
        weapon = self.equipped_weapon
        if isinstance(weapon, Weapon):
            attack_line = (
                f"Attack: {self.attack + weapon.damage_bonus} "
                f"(+{weapon.damage_bonus} from {weapon.name})"
            )
        else:
            attack_line = f"Attack: {self.attack}"

        armor = self.equipped_armor
        if isinstance(armor, Armor):
            defense_line = (
                f"Defense: {self.defense + armor.defense_bonus} "
                f"(+{armor.defense_bonus} from {armor.name})"
            )
        else:
            defense_line = f"Defense: {self.defense}"

        return "\n".join(
            [
                _RULE,
                "     PLAYER STATS",
                _RULE,
                f"Name: {self.name}",
                f"Level: {self.level}",
                f"HP: {self.current_hp}/{self.max_hp}",
                attack_line,
                defense_line,
                f"Gold: {self.gold}",
                f"EXP: {self.experience}",
                _RULE,
            ]
        )

    def calculate_damage(self, rng: Optional[random.Random] = None) -> int:
        """Return the attack stat plus the equipped weapon's bonus."""
        weapon = self.equipped_weapon
        bonus = weapon.damage_bonus if isinstance(weapon, Weapon) else 0
        return self.attack + bonus

    def add_item(self, item: Item) -> str:
        """Put an item in the inventory and return the pickup message."""
        self.inventory.append(item)
        return f"Picked up: {item.name}"

    def remove_item(self, item_name: str) -> str:
        """Discard the first item with that name (any case), unequipping it."""
        item = self.get_item(item_name)
        if item is None:
            raise ItemError(f"Item '{item_name}' not found.")
        if item is self.equipped_weapon:
            self.equipped_weapon = None
        if item is self.equipped_armor:
            self.equipped_armor = None
        self.inventory.remove(item)
        return f"Removed item: {item_name}"

    def inventory_text(self) -> str:
        """Return the inventory listing with header and footer."""
        lines = ["----- Inventory -----"]
        if self.inventory:
            lines += [f"- {item.name} ({item.kind})" for item in self.inventory]
        else:
            lines.append("Empty")
        lines.append("--------------------")
        return "\n".join(lines)

    def has_item(self, item_name: str) -> bool:
        return self.get_item(item_name) is not None

    def get_item(self, item_name: str) -> Optional[Item]:
        """Find an inventory item by name, ignoring case."""
        target = item_name.lower()
        return next(
            (item for item in self.inventory if item.name.lower() == target), None
        )

    def equip_weapon(self, weapon_name: str) -> str:
        """Equip a weapon from the inventory and return the messages."""
        item = self.get_item(weapon_name)
        if item is None:
            raise ItemError("Weapon not found.")
        if item.kind != "Weapon":
            raise ItemError(f"{item.name} is not a weapon.")
        lines = []
        if self.equipped_weapon is not None:
            lines.append(f"Unequipped: {self.equipped_weapon.name}")
        self.equipped_weapon = item
        lines.append(f"Equipped Weapon: {item.name}")
        return "\n".join(lines)

    def equip_armor(self, armor_name: str) -> str:
        """Equip armor from the inventory and return the messages."""
        item = self.get_item(armor_name)
        if item is None:
            raise ItemError("Armor not found.")
        if item.kind != "Armor":
            raise ItemError(f"{item.name} is not armor.")
        lines = []
        if self.equipped_armor is not None:
            lines.append(f"Unequipped: {self.equipped_armor.name}")
        self.equipped_armor = item
        lines.append(f"Equipped Armor: {item.name}")
        return "\n".join(lines)

    def unequip_weapon(self) -> str:
        if self.equipped_weapon is None:
            raise ItemError("No weapon is equipped.")
        name = self.equipped_weapon.name
        self.equipped_weapon = None
        return f"Unequipped weapon: {name}"

    def unequip_armor(self) -> str:
        if self.equipped_armor is None:
            raise ItemError("No armor is equipped.")
        name = self.equipped_armor.name
        self.equipped_armor = None
        return f"Unequipped armor: {name}"

    def use_item(self, item_name: str) -> str:
        """Consume an item: heal, mark it used and drop it from the inventory."""
        item = self.get_item(item_name)
        if item is None:
            raise ItemError("Item could not be found.")
        if not isinstance(item, Consumable):
            raise ItemError(f"{item.name} is not a consumable.")
        if item.used:
            raise ItemError(f"{item.name} has already been used.")
        lines = [self.heal(item.healing_amount), item.use()]
        lines.append(self.remove_item(item.name))
        return "\n".join(lines)

    def gain_experience(self, exp: int) -> str:
        """Add experience, levelling up when the threshold is reached."""
        self.experience += exp
        lines = [f"Gained {exp} EXP!"]
        if self.experience >= self.level * EXP_PER_LEVEL:
            lines.append(self.level_up())
        return "\n".join(lines)

    def level_up(self) -> str:
        """Raise the level, improve stats, fully heal and return the report."""
        self.level += 1
        self.experience = 0
        self.max_hp += 10
        self.current_hp = self.max_hp
        self.attack += 2
        self.defense += 1
        return (
            f"LEVEL UP! Congrats! You are now level {self.level}!\n"
            + self.stats()
        )

    def add_gold(self, amount: int) -> None:
        self.gold += amount

    def spend_gold(self, amount: int) -> None:
        self.gold -= amount