# gdiquest

A small 2D arcade game built on pygame. It opens on a logo screen, moves
to a menu with Start, Edit and Exit buttons, and from Start into a
scrolling stage where you walk an animated player around among five
randomly placed monsters.

## Installing

```
pip install .
```

## Playing

```
gdiquest
```

Controls:

- **Enter** on the logo screen goes to the menu.
- **Left mouse button** over a menu button picks it: Start opens the
  stage, Exit ends the game.
- **Arrow keys** walk the player; the view scrolls to keep the player
  away from the window edges, within the bounds of a 30 by 20 map of
  64-pixel tiles.
- **Space**, when released, makes the player jump.
- **Escape** or closing the window quits.

Images are looked up relative to the working directory under
`../Image/`: `Back.bmp`, `Logo/Logo.bmp`, `Menu/Menu.bmp`,
`Button/Start.bmp`, `Button/Edit.bmp`, `Button/Exit.bmp`,
`Player/Player_*.bmp`, `maja2.bmp`, `Monster/Monster.bmp`, `Ground.bmp`
and `Edit/Tile.bmp`. A missing image stops the game with an error
message.

## Using the pieces

The building blocks can be used on their own:

- `gdiquest.defines`: `Info`, `Rect`, `LinePoint`, `Line`, `Frame` and
  the `Direction`, `ObjId`, `RenderId`, `SceneId` enums.
- `gdiquest.keys`: `KeyManager` with `key_pressing`, `key_down`,
  `key_up` and `update`; it takes an optional probe function in place
  of pygame's live key state.
- `gdiquest.scroll`: `ScrollManager` with `move_x`, `move_y` and `lock`.
- `gdiquest.objects`: the `GameObject` base class, the `Services`
  record that carries the shared managers, and `create_object`.
- `gdiquest.collision`: `check_rect`, `check_sphere`, `collision_rect`,
  `collision_circle`, `collision_rect_ex`.
- `gdiquest.lines`: `parse_lines`, which reads packed little-endian
  float quadruples (`left x, left y, right x, right y`), and
  `LineManager`, whose `collision_line` gives the ground height under
  an x position.
- `gdiquest.bitmaps`: `BitmapManager`, images kept under string keys.
- `gdiquest.bullets`: `Bullet`, `GuideBullet` (homes in on the nearest
  monster), `ScrewBullet` and `Shield`.
- `gdiquest.object_manager`: `ObjectManager` for grouped update, late
  update and y-sorted rendering of game objects.
- `gdiquest.player`, `gdiquest.monster`, `gdiquest.mouse`,
  `gdiquest.tile`, `gdiquest.button`: the individual objects.
- `gdiquest.scenes`: `Logo`, `Menu`, `Stage` and `SceneManager`.
- `gdiquest.game`: `MainGame` and the `main` entry point.

## What it does not do

- There is no tile editor. The menu's Edit button asks `SceneManager`
  for a scene it has none for, and that raises `ValueError`.
- There is no tile map manager: `Tile` exists, but nothing builds,
  saves or loads a map of tiles.
- The stage loads no terrain lines, so a jump there never lands.
  `LineManager.load_data` can load them from a file when used directly.

## Tests

```
pip install .[test]
pytest
```