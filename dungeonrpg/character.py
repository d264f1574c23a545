"""Shared state and combat behaviour of every creature in the dungeon."""

from __future__ import annotations

import random
from typing import Optional


class Character:
    """A named combatant with hit points, attack and defense."""

    def __init__(self, name: str, hp: int, attack: int, defense: int) -> None:
        self.name = name
        self.max_hp = hp
        self.current_hp = hp
        self.attack = attack
        self.defense = defense
        self.alive = True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self.name!r}, "
            f"hp={self.current_hp}/{self.max_hp}, attack={self.attack}, "
            f"defense={self.defense})"
        )

    def calculate_damage(self, rng: Optional[random.Random] = None) -> int:
        """Return the attack stat plus a random bonus from 0 to 4."""
        source = rng if rng is not None else random
        return self.attack + source.randrange(5)

    def take_damage(self, damage: int) -> str:
        """Apply damage reduced by defense and return the resulting message."""
        actual = max(damage - self.defense, 0)
        self.current_hp -= actual
        if self.current_hp <= 0:
            self.current_hp = 0
            self.alive = False
        return (
            f"{self.name} takes {actual} damage! "
            f"({self.current_hp}/{self.max_hp} HP)"
        )

    def heal(self, amount: int) -> str:
        """Restore hit points, capped at the maximum, and return the message."""
        self.current_hp = min(self.current_hp + amount, self.max_hp)
        return (
            f"{self.name} heals {amount} HP! "
            f"({self.current_hp}/{self.max_hp} HP)"
        )

    def stats(self) -> str:
        """Return the character's stat line."""
        return f"{self.name} [HP: {self.current_hp}/{self.max_hp}]"

    def status(self) -> str:
        """Return the brief status shown during combat."""
        return f"{self.name} [HP: {self.current_hp}/{self.max_hp}]"