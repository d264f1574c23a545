"""Locations in the dungeon, with their contents and exits."""

from __future__ import annotations

from typing import Dict, List, Optional

from .item import Item
from .monster import Monster

_BORDER = "=" * 40


class Room:
    """A place that may hold a monster, items on the ground and exits."""

    def __init__(self, name: str, description: str) -> None:
        self.name = name
        self.description = description
        self.visited = False
        self.monster: Optional[Monster] = None
        self.items: List[Item] = []
        self.exits: Dict[str, Room] = {}

    def __repr__(self) -> str:
        return f"Room(name={self.name!r})"

    def render(self) -> str:
        """Return the full description of the room as shown to the player."""
        lines = [_BORDER, self.name, _BORDER, self.description, ""]
        if self.monster is not None:
            lines += [f"A {self.monster.name} blocks your path!", ""]
        if self.items:
            lines += ["Items here:", self.items_text(), ""]
        lines += [self.exits_text(), _BORDER]
        return "\n".join(lines)

    def exits_text(self) -> str:
        """Return the exit line, directions in alphabetical order."""
        if not self.exits:
            return "Exits: None"
        return "Exits: " + ", ".join(sorted(self.exits))

    def add_exit(self, direction: str, room: Optional[Room]) -> None:
        """Connect this room to another in one direction; ``None`` is ignored."""
        if room is not None:
            self.exits[direction] = room

    def get_exit(self, direction: str) -> Optional[Room]:
        """Return the room in the given direction, or ``None``."""
        return self.exits.get(direction)

    def has_exit(self, direction: str) -> bool:
        return direction in self.exits

    def has_monster(self) -> bool:
        """True when a living monster is in the room."""
        return self.monster is not None and self.monster.alive

    def clear_monster(self) -> None:
        self.monster = None

    def add_item(self, item: Optional[Item]) -> None:
        """Place an item on the ground; ``None`` is ignored."""
        if item is not None:
            self.items.append(item)

    def remove_item(self, item_name: str) -> Optional[Item]:
        """Take the first item with that name (any case) and return it."""
        item = self.get_item(item_name)
        if item is not None:
            self.items.remove(item)
        return item

    def items_text(self) -> str:
        """Return one '  - Name' line per item on the ground."""
        return "\n".join(f"  - {item.name}" for item in self.items)

    def get_item(self, item_name: str) -> Optional[Item]:
        """Find an item on the ground by name, ignoring case."""
        target = item_name.lower()
        return next(
            (item for item in self.items if item.name.lower() == target), None
        )

    def mark_visited(self) -> None:
        self.visited = True