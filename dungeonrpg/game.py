"""The game controller: world building, command dispatch and combat."""

from __future__ import annotations

import re
import sys
from typing import Dict, Optional, TextIO

from .item import Consumable, Item, ItemError, Weapon
from .monster import Dragon, Goblin, Monster, Skeleton
from .player import Player
from .room import Room

_REVERSE_DIRECTION = {
    "north": "south",
    "south": "north",
    "east": "west",
    "west": "east",
}

_HELP_TEXT = (
    "Available commands:\n"
    "  go <direction> - Move\n"
    "  look - Look around\n"
    "  attack - Attack monster\n"
    "  pickup <item> - Pick up item\n"
    "  inventory - Show inventory\n"
    "  use <item> - Use consumable\n"
    "  equip <item> - Equip weapon/armor\n"
    "  stats - Show character stats\n"
    "  help - Show this help\n"
    "  quit - Exit game\n"
)

_COMMAND_RE = re.compile(r"\s*(\S*)(.*)", re.DOTALL)


def _split_command(command: str) -> tuple[str, str]:
    """Split a line into its first word and the rest, minus one leading space."""
    match = _COMMAND_RE.match(command)
    assert match is not None
    verb, rest = match.group(1), match.group(2)
    if rest.startswith(" "):
        rest = rest[1:]
    return verb, rest


class Game:
    """Holds the player, the world and the game state, and runs the game loop."""

    def __init__(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.player: Optional[Player] = None
        self.current_room: Optional[Room] = None
        self.world: Dict[str, Room] = {}
        self.game_over = False
        self.victory = False

    # ------------------------------------------------------------------ I/O

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _say(self, text: str) -> None:
        self._out.write(text + "\n")

    def _read_line(self) -> str:
        line = self._in.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    # --------------------------------------------------------- world setup

    def initialize_world(self) -> None:
        """Create the rooms, link them, and populate them with monsters and items."""
        entrance = Room("Dungeon Entrance", "A dark stone corridor...")
        hallway = Room("Hallway", "A long halLway with flickering lights.")
        armory = Room("Armory", "Room filled with rusty weapons and armor.")
        treasury = Room("Treasury", "A room full of gold and chests.")
        throne = Room("Throne Room", "The Boss's massive room.")

        for room in (entrance, hallway, armory, treasury, throne):
            self.add_room(room)

        self.connect_rooms("Dungeon Entrance", "north", "Hallway")
        self.connect_rooms("Hallway", "west", "Armory")
        self.connect_rooms("Hallway", "east", "Treasury")
        self.connect_rooms("Hallway", "north", "Throne Room")

        hallway.monster = Goblin()
        armory.monster = Skeleton()
        treasury.monster = Skeleton()
        throne.monster = Dragon()

        entrance.add_item(Item("Small Potion", "Restores 5 HP", "Food", 5))
        armory.add_item(Item("Iron Sword", "A sturdy sword", "Weapon", 2))
        armory.add_item(Item("Chain Mail", "Armor that protects you", "Armor", 3))
        treasury.add_item(Item("Health Potion", "Restores 20 HP", "Food", 20))

        self.current_room = entrance

    def create_starting_inventory(self) -> None:
        """Give the player a dagger and some bread, if there is a player."""
        if self.player is None:
            return
        for item in (
            Weapon("Rusty Dagger", "Damages 2 HP", 2),
            Consumable("Bread", "Restores 5 HP", 5),
        ):
            self._say(self.player.add_item(item))

    def add_room(self, room: Optional[Room]) -> None:
        """Register a room in the world under its name; ``None`` is ignored."""
        if room is not None:
            self.world[room.name] = room

    def connect_rooms(self, room1_name: str, direction: str, room2_name: str) -> None:
        """Link two known rooms both ways; unknown names leave the world unchanged."""
        room1 = self.world.get(room1_name)
        room2 = self.world.get(room2_name)
        if room1 is None or room2 is None:
            return
        room1.add_exit(direction, room2)
        room2.add_exit(_REVERSE_DIRECTION.get(direction, ""), room1)

    # ------------------------------------------------------------ game loop

    def run(self) -> None:
        """Ask for a name, build the world and process commands until the end."""
        self._write("Welcome to Dungeon RPG!\n")
        self._write("Enter your name: ")
        try:
            player_name = self._read_line()
        except EOFError:
            player_name = ""

        self.player = Player(player_name)
        self.initialize_world()
        self.create_starting_inventory()

        assert self.current_room is not None
        self._write("\nStarting room:\n")
        self._say(self.current_room.render())
        self.current_room.mark_visited()

        try:
            while not self.game_over:
                self._write("\n> ")
                command = self._read_line().lower()
                self.process_command(command)

                if not self.player.alive:
                    self._say("You died! Game over.")
                    self.game_over = True
                if self.victory:
                    self._say("You defeated the Dragon! You win!")
                    self.game_over = True
        except EOFError:
            self.game_over = True

    def process_command(self, command: str) -> None:
        """Parse one command line and carry it out."""
        verb, target = _split_command(command)
        assert self.player is not None

        if verb in ("go", "move"):
            self._move(target)
        elif verb in ("look", "l"):
            self._look()
        elif verb in ("attack", "fight"):
            self._attack()
        elif verb in ("pickup", "get", "take"):
            self._pickup_item(target)
        elif verb in ("inventory", "i"):
            self._say(self.player.inventory_text())
        elif verb == "use":
            self._use_item(target)
        elif verb in ("equip", "e"):
            self._equip(target)
        elif verb == "stats":
            self._say(self.player.stats())
        elif verb in ("help", "h", "?"):
            self._write(_HELP_TEXT)
        elif verb in ("quit", "exit"):
            self.game_over = True
        else:
            self._say("Unknown command. Type 'help' for a list of commands.")

    # ------------------------------------------------------------- commands

    def _move(self, direction: str) -> None:
        room = self.current_room
        assert room is not None
        if room.monster is not None:
            self._say(f"A {room.monster.name} is blocking your path!")
            return
        destination = room.get_exit(direction)
        if destination is None:
            self._say("You can't go that way!")
            return
        self.current_room = destination
        self._say(destination.render())
        destination.mark_visited()

    def _look(self) -> None:
        assert self.current_room is not None
        self._say(self.current_room.render())

    def _attack(self) -> None:
        assert self.current_room is not None
        monster = self.current_room.monster
        if monster is None:
            self._say("There is no monster here.")
            return
        self._combat(monster)

    def _combat(self, monster: Monster) -> None:
        player = self.player
        room = self.current_room
        assert player is not None and room is not None

        self._say("=== COMBAT BEGINS ===")
        while player.alive and monster.alive:
            self._write("Your action (attack/use <item>/flee): ")
            verb, target = _split_command(self._read_line().lower())

            if verb == "attack":
                damage = player.attack
                self._say(f"You attack {monster.name} for {damage} damage.")
                self._say(monster.take_damage(damage))
                if not monster.alive:
                    self._say(f"You defeated {monster.name}!")
                    self._say(player.gain_experience(monster.gold_reward))
                    player.add_gold(monster.gold_reward)
                    for item in monster.drop_loot():
                        room.add_item(item)
                    if monster.name == "Dragon":
                        self.victory = True
                    room.clear_monster()
                    break
            elif verb == "use":
                self._use_item(target)
            elif verb == "flee":
                self._say("You flee from combat!")
                break
            else:
                self._say("Invalid combat action.")
                continue

            if monster.alive:
                damage = monster.attack
                self._say(f"{monster.name} attacks you for {damage} damage.")
                self._say(player.take_damage(damage))
        self._say("=== COMBAT ENDS ===")

    def _pickup_item(self, item_name: str) -> None:
        assert self.player is not None and self.current_room is not None
        item = self.current_room.remove_item(item_name)
        if item is None:
            self._say("No such item here.")
            return
        self._say(self.player.add_item(item))

    def _use_item(self, item_name: str) -> None:
        assert self.player is not None
        try:
            self._say(self.player.use_item(item_name))
        except ItemError as exc:
            self._say(f"Error: {exc}")

    def _equip(self, item_name: str) -> None:
        player = self.player
        assert player is not None
        item = player.get_item(item_name)
        if item is None:
            self._say("No such item in inventory.")
            return
        if item.kind == "Weapon":
            self._say(player.equip_weapon(item.name))
        elif item.kind == "Armor":
            self._say(player.equip_armor(item.name))
        else:
            self._say("Unable to equip consumable.")