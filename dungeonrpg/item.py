"""Items found in the dungeon: weapons, armor and consumables."""

from __future__ import annotations

from typing import Optional


class ItemError(Exception):
    """Raised when an item cannot be used as requested."""


class Item:
    """A generic item with a name, description, kind and value."""

    def __init__(self, name: str, description: str, kind: str, value: int) -> None:
        self.name = name
        self.description = description
        self.kind = kind
        self.value = value

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, kind={self.kind!r})"

    def info(self) -> str:
        """Return the detailed description of the item."""
        return f"[ITEM] {self.name}\n  {self.description}\n  Value: {self.value}"

    def brief(self) -> str:
        """Return the one-line summary 'Name (Kind)'."""
        return f"{self.name} ({self.kind})"

    def use(self) -> Optional[str]:
        """Ordinary items have no effect when used."""
        return None


class Weapon(Item):
    """An item that raises attack damage."""

    def __init__(self, name: str, description: str, damage: int) -> None:
        super().__init__(name, description, "Weapon", damage)
        self.damage_bonus = damage

    def info(self) -> str:
        return (
            f"[WEAPON] {self.name}\n  {self.description}\n"
            f"  Damage Bonus: +{self.damage_bonus}"
        )


class Armor(Item):
    """An item that raises defense."""

    def __init__(self, name: str, description: str, defense: int) -> None:
        super().__init__(name, description, "Armor", defense)
        self.defense_bonus = defense

    def info(self) -> str:
        return (
            f"[ARMOR] {self.name}\n  {self.description}\n"
            f"  Defense Bonus: +{self.defense_bonus}"
        )


class Consumable(Item):
    """A single-use item that restores hit points."""

    def __init__(self, name: str, description: str, healing: int) -> None:
        super().__init__(name, description, "Consumable", healing)
        self.healing_amount = healing
        self.used = False

    def info(self) -> str:
        return (
            f"[CONSUMABLE] {self.name}\n  {self.description}\n"
            f"  Restores: {self.healing_amount} HP"
        )

    def use(self) -> str:
        """Mark the item as used and return the message; fails if already used."""
        if self.used:
            raise ItemError(f"{self.name} has already been used.")
        self.used = True
        return f"Used {self.name}! Restored {self.healing_amount} HP."