# dungeonrpg

A small text-based dungeon crawler that you play in the terminal. You explore
five connected rooms: the Dungeon Entrance, the Hallway, the Armory, the
Treasury and the Throne Room. You fight a goblin, two skeletons and finally
the dragon, and you pick up the items lying on the floor.

## Installing

```
pip install .
```

## Playing

```
dungeonrpg
```

The game first asks for your name. You start in the Dungeon Entrance, and
your inventory holds a Rusty Dagger and some Bread. Commands are not case
sensitive:

| Command                           | Effect                           |
|-----------------------------------|----------------------------------|
| `go <direction>`, `move`          | Move north, south, east or west  |
| `look`, `l`                       | Describe the current room        |
| `attack`, `fight`                 | Start combat with the monster    |
| `pickup <item>`, `get`, `take`    | Pick up an item from the floor   |
| `inventory`, `i`                  | List what you carry              |
| `use <item>`                      | Use a consumable to heal         |
| `equip <item>`, `e`               | Equip a weapon or armour         |
| `stats`                           | Show your character sheet        |
| `help`, `h`, `?`                  | List the commands                |
| `quit`, `exit`                    | Leave the game                   |

You cannot leave a room while a monster is still in it. In combat you choose
`attack`, `use <item>` or `flee` on each turn. When you attack, you deal damage
equal to your attack stat, and the monster's defense reduces it. The monster
then strikes back with its own attack stat. A defeated monster gives you gold,
and the same amount as experience. It also drops its loot on the floor. With
enough experience you level up, which raises your hit points, attack and
defense and heals you fully.

You win when you defeat the Dragon. The game ends when your hit points reach
zero, when you type `quit`, or when input runs out.

## Using the pieces

The game objects can be used from your own code. Methods return the text they
would show. When an action is not possible, they raise
`dungeonrpg.item.ItemError`.

```python
from dungeonrpg.player import Player
from dungeonrpg.item import Weapon

hero = Player("Alice")
print(hero.add_item(Weapon("Sword", "Sharp", 5)))   # Picked up: Sword
print(hero.equip_weapon("sword"))                   # Equipped Weapon: Sword
print(hero.stats())
```

The modules:

- `dungeonrpg.character` holds `Character`, which has hit points, `take_damage`,
  `heal` and `calculate_damage`.
- `dungeonrpg.item` holds `Item`, `Weapon`, `Armor`, `Consumable` and `ItemError`.
- `dungeonrpg.monster` holds `Monster`, together with `Goblin`, `Skeleton` and
  `Dragon` and their loot.
- `dungeonrpg.room` holds `Room`, which has exits, a monster, items on the floor
  and `render()`.
- `dungeonrpg.player` holds `Player`, which has inventory, equipment,
  experience, levels and gold.
- `dungeonrpg.game` holds `Game`. It builds the world (`initialize_world`) and
  runs the game loop (`run`). You can also drive it one command at a time with
  `process_command`. `Game(stdin=..., stdout=...)` reads and writes the streams
  you pass in instead of the terminal.
- `dungeonrpg.cli` holds `main()`, the function behind the `dungeonrpg` command.

## What it does not do

- There is a single fixed dungeon.
- You cannot save a game or load one.
- Gold can be earned, but there is nowhere to spend it.
- In combat the player's damage is the base attack stat alone. Equipped
  weapons and armour appear on the stats sheet and in
  `Player.calculate_damage`, but the combat turns do not use them.

## Running the tests

```
pip install .[test]
pytest
```