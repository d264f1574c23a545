"""Enemy creatures and the loot they carry."""

from __future__ import annotations

import random
from typing import List, Optional

from .character import Character
from .item import Armor, Consumable, Item, Weapon


class Monster(Character):
    """A hostile character that rewards experience and gold and drops loot."""

    def __init__(
        self,
        name: str,
        hp: int,
        attack: int,
        defense: int,
        exp_reward: int,
        gold_reward: int,
    ) -> None:
        super().__init__(name, hp, attack, defense)
        self.experience_reward = exp_reward
        self.gold_reward = gold_reward
        self.loot: List[Item] = []

    def stats(self) -> str:
        """Return the monster's stat line."""
        return f"{self.name} [HP: {self.current_hp}/{self.max_hp}]"

    def add_loot(self, item: Optional[Item]) -> None:
        """Add an item to the loot table; ``None`` is ignored."""
        if item is not None:
            self.loot.append(item)

    def drop_loot(self) -> List[Item]:
        """Hand over every loot item and leave the loot table empty."""
        dropped, self.loot = self.loot, []
        return dropped

    def attack_message(self) -> str:
        """Return the flavour text shown when the monster attacks."""
        return f"{self.name} attacks!"


class Goblin(Monster):
    """A weak but common enemy."""

    def __init__(self) -> None:
        super().__init__("Goblin", 30, 5, 2, 10, 5)
        self.add_loot(Consumable("Small Potion", "Restores 10 HP", 10))

    def attack_message(self) -> str:
        return "The goblin swipes at you with its rusty dagger!"


class Skeleton(Monster):
    """An undead warrior."""

    def __init__(self) -> None:
        super().__init__("Skeleton", 40, 8, 4, 20, 10)
        self.add_loot(Weapon("Old Sword", "A rusty old sword", 3))

    def attack_message(self) -> str:
        return "The skeleton rattles its bones and slashes with a sword!"


class Dragon(Monster):
    """The boss enemy, whose fire adds extra damage."""

    FIRE_BONUS = 5

    def __init__(self) -> None:
        super().__init__("Dragon", 150, 20, 10, 100, 50)
        self.add_loot(
            Weapon("Dragon Slayer", "Legendary sword with +10 damage", 10)
        )
        self.add_loot(
            Armor("Dragon Scale Armor", "Legendary armor with +8 defense", 8)
        )
        self.add_loot(Consumable("Greater Health Potion", "Restores 100 HP", 100))

    def attack_message(self) -> str:
        return "The dragon breathes fire at you!"

    def calculate_damage(self, rng: Optional[random.Random] = None) -> int:
        """Return the attack stat plus the fixed fire bonus."""
        return self.attack + self.FIRE_BONUS