# formengine

This package holds the state and logic of a small tile-based 2D game engine.
It works out what should be drawn, where it goes, and which matrices apply. It
does not draw anything itself. A renderer reads the values it produces, such
as matrices, positions, sizes and per-cell buffers, and uploads them to
whatever graphics system it uses.

## Modules

- `formengine.camera`: `Camera` holds a position `x`, `y` and a zoom `z`.
  `set_position` and `set_size` update these values and call the optional
  `on_change` callback. `matrix()` returns the row-major 4×4 camera matrix.
- `formengine.textures`: `load_image` reads an image through Pillow as RGBA
  bytes, with the rows optionally flipped. `count_colors` and
  `separate_by_color` split an image into one white mask (`ColorLayer`) per
  distinct opaque colour. This lets a sprite be re-tinted with a palette.
  `TextureManager` caches `TextureSource` objects by the name of their first
  file. `write_layer_files` saves the layers as numbered PNGs (`hero.png` →
  `hero0.png`, `hero1.png`, …). `palette_source` and `write_palette` render a
  texture's colours as a C float array declaration.
- `formengine.anim`: `Anim` is an animation over a sheet of rows of frames,
  built with `make_anim(texture, rows, cols)`. It supports frame speed,
  looping, reversing, an end callback, per-row lengths, scale, offset, axis
  inversion and rotation codes. It also gives the texture, scale, translation
  and rotation matrices a renderer needs. `AnimList` ticks every registered
  animation at once. `DrawLayers` sorts queued animations into back, middle
  and front `AnimOrder` layers.
- `formengine.tiles`: `DrawScreen` is a grid of per-cell float attributes used
  for instanced drawing. It supports editing single values, clearing,
  rotation fills and a text view of visibility. `TileSet` groups its colour,
  translation, rotation and texture screens. `TileRegistry` keeps tile sets in
  the order they were added. `dir_to_rad` maps direction codes 0–3 to angles.
- `formengine.players`: a `Player` binds input names to handlers of the form
  `(character, value)`. `PlayerManager` holds at most one player per number.
  It dispatches `(input, value)` pairs to the active players and skips the
  players marked `pause_player` while the game is paused.
- `formengine.worldview`: `WorldView` works out the visible layout from a
  world size, a centre, a frame size and the screen ratio. The layout is the
  cells drawn per axis, the first cell, the size of one cell and the camera
  offset. `lerp` eases the frame and the centre towards
  `frame_dest`/`cen_dest_x`/`cen_dest_y`. `Follower` centres the view on a
  set of forms and zooms out to fit them. A form is any object with `pos`,
  and optionally `p_mod`. Helpers: `sign`, `clamp`, `distance`.
- `formengine.god`: `GodView` is a free camera over a `WorldView`, driven by
  its own player number `-1`. The player is bound to `K0^`, `K0<`, `K0_`,
  `K0>` (move) and `K0-`, `K0=` (zoom). `place` and `apply_frame` push a
  position and a frame to the view.
- `formengine.ui`: `UIElement` is an animation at a screen position with an
  optional text label. `Button` runs a callback when pressed and switches its
  sprite and label colour when selected. `Menu` selects the button closest to
  a cursor. The cursor can be driven by the mouse (`mouse_move`), the arrow or
  WASD keys (`process_keys`), gamepad axes and buttons, or clicks. `UILayers`
  holds the background, foreground and pause lists and the active menu.
- `formengine.engine`: `Engine` owns a `PlayerManager`, an `AnimList`,
  `UILayers` and an input queue. `run(game, should_close)` calls `game` once
  per frame until `stop()` is called or `should_close()` returns true, and
  returns the number of frames it ran. `toggle_pause` freezes the game while
  input keeps flowing. `attach_anim`, `change_sprites`, `set_offsets`,
  `set_inverts` and `set_rotos` apply a change to every animation in a list.

## Installing

```
pip install .
```

Pillow is the only runtime dependency. The `test` extra adds pytest.

## Example

```python
from formengine.camera import Camera
from formengine.engine import Engine
from formengine.players import Player

cam = Camera()
cam.set_position(0.25, -0.5)
view_matrix = cam.matrix()          # row-major 4x4

engine = Engine()
hero = {"x": 0}

def move_right(character, value):
    if value > 0:
        character["x"] += 1

player = Player(hero, 0)
player.add_control("K0>", move_right)
engine.players.add(player)

engine.inputs.append(("K0>", 1.0))  # queued input, dispatched next frame
seen = []
engine.run(lambda: seen.append(hero["x"]), should_close=lambda: len(seen) >= 3)
# seen == [1, 1, 1]
```

## What this package does not do

- It opens no window and issues no drawing calls. There are no shaders,
  vertex arrays or GPU textures. Textures are kept as raw RGBA bytes.
- It does not read a keyboard, mouse or gamepad. Input has to be fed in as
  `(name, value)` pairs (for example through `Engine.inputs`), and key codes
  have to be passed to `Menu`.
- It has no world model, forms or cell contents of its own. `WorldView` and
  `Follower` are only given the world's size and objects that carry a `pos`.
- It plays no audio and provides no command-line program.