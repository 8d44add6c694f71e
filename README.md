# gridrogue

A small turn-based roguelike on a square grid. The player walks around a walled 32×32 room
while three enemies close in, one step per round. Underneath is a compact
entity-component-system core that can be used on its own.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
gridrogue [BOOT_DIR]
```

`BOOT_DIR` is the directory holding the game's assets; with no argument the current
directory is used. It is searched recursively for `.json` and `.bmp` files, and each asset
is known by its path relative to `BOOT_DIR`, written with `/`.

`BOOT_DIR` must hold a `TilesetInfo.json` at its top level describing the tile sheet. Its
`SourceFile` is the sheet's path relative to `BOOT_DIR`:

```json
{
  "SourceFile": "Tiles.bmp",
  "Tiles": [
    {"Name": "Player", "Rect": {"X": 0, "Y": 0, "W": 16, "H": 16}},
    {"Name": "Enemy",  "Rect": {"X": 16, "Y": 0, "W": 16, "H": 16}}
  ]
}
```

Every `.json` file under `Entities/` is read as an entity template. The room is built from
templates named `Wall` and `Floor`, so both must exist. A template lists its components
and, optionally, other templates it is composed of (`Composites`); templates without an
`Id` or `Components` are skipped:

```json
{
  "Id": "Wall",
  "Components": [
    {"Id": "LocationComponent"},
    {"Id": "CollisionComponent"},
    {"Id": "TextureRendererComponent", "TextureName": "Wall", "Order": "Background"}
  ]
}
```

The component ids understood are `LocationComponent`, `CollisionComponent` and
`TextureRendererComponent` (with optional `TextureName` and `Order` of `Background` or
`Foreground`); other ids are ignored. Every texture name drawn, including `Player` and
`Enemy`, must appear in the tileset. Tiles are drawn 32 pixels square in a 640×480 window,
centred on the player.

Move with `W`/`A`/`S`/`D` or the arrow keys; holding a key repeats the step. A step onto a
free cell starts a round, in which every creature takes one step toward its target: the
player toward the chosen cell, enemies toward the player. Entities with a
`CollisionComponent` (walls and creatures) block movement.

## What it does not do

There is no combat, no win or loss condition, no saving and no level other than the single
room; enemies only follow the player.

## Using the ECS core

```python
from dataclasses import dataclass
from gridrogue.component_manager import Component, ComponentManager

@dataclass
class Health(Component):
    points: int = 10

manager = ComponentManager()
manager.add_component(1, Health)

for (health,) in manager.create_iterator(Health):
    health.points -= 1

manager.create_iterator(Health, with_entity=True).execute(
    lambda entity, health: print(entity, health.points)
)
```

Other building blocks:

- `gridrogue.sparse_set.SparseSet` — dense storage of per-entity values.
- `gridrogue.vector.IntVector2D` / `Vector2D` — 2D vectors with `+`, `-` and `normalized()`.
- `gridrogue.hashed_string.HashedString` — 64-bit djb2 hash of a name, usable as a key.
- `gridrogue.input.Input` with `DiscreteInputAction` and `AxisInputAction` from
  `gridrogue.input_action` — buffered key events mapped to callbacks.
- `gridrogue.gameplay_messages.GameplayMessages` — per-entity message channels.
- `gridrogue.system.System` and `SystemScheduler` — systems run in ascending `priority`,
  created and scheduled by `gridrogue.game.Game.create_system`.
- `gridrogue.entity_factory.EntityFactory` and `parse_template` — entity templates from JSON,
  applied through factories registered with `gridrogue.component_factory.register_factory`.