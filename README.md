# pixelplay

The state and update rules of a collection of small 2D demos, with no window
or graphics library attached. Each module keeps the logic of one demo, so you
can drive it from whatever renderer you like, or step it headless in tests.

| Module | What it holds |
| --- | --- |
| `pixelplay.geometry` | `Vec`, `Rect`, `lerp` and the zero vector `ZERO` |
| `pixelplay.stack` | a bounded `Stack` that drops its bottom item when full |
| `pixelplay.maze` | a recursive-backtracker `Maze` of `Cell`s, `cell_index`, `remove_walls`, `parse_args` |
| `pixelplay.platformer` | `GopherPhys`, `GopherAnim`, `AnimState`, `Platform`, `Goal`, the `LEVEL` layout, `random_nice_color` and sprite-sheet loading |
| `pixelplay.smoke` | a generic `ParticleSystem` and a `SmokeSystem` that feeds it, plus sprite-sheet loading |
| `pixelplay.starfield` | a seeded `Starfield` of perspective-projected `Star`s |
| `pixelplay.pendulum` | a damped `DoublePendulum` |
| `pixelplay.scrolling` | an endless two-half `ScrollingBackground` |
| `pixelplay.sudoku` | a `Sudoku` board with cell selection and input, and `cell_at_position` |
| `pixelplay.tilemap` | tile-coordinate helpers and a panning, zooming `Camera` |
| `pixelplay.typewriter` | a thread-safe `Typewriter`, `shake_offsets`, `scroll_speeds` and a `Dotlight` |
| `pixelplay.lights` | coloured `ColorLight` spotlights and `build_lights` |
| `pixelplay.shaderutil` | `parse_flags` into `SeascapeOptions`, `bind_uniforms`, `center_position`, `load_file_to_string` |

## Requirements

Python 3.10 or later. Pillow is used by `platformer.load_animation_sheet` and
`smoke.load_sprite_sheet` to read sprite-sheet images.

## Examples

Vectors and rectangles:

```python
from pixelplay.geometry import Rect, Vec, lerp

assert Vec(3, 4).length() == 5
assert lerp(Vec(0, 0), Vec(10, 0), 0.5) == Vec(5, 0)
assert Rect(Vec(0, 0), Vec(4, 2)).center() == Vec(2, 1)
```

A bounded stack:

```python
from pixelplay.stack import Stack

stack = Stack(2)
stack.push("a")
stack.push("b")
stack.push("c")   # full, so "a" is dropped from the bottom
assert len(stack) == 2
assert stack.pop() == "c"
```

`pop` and `peek` raise `IndexError` on an empty stack.

Carve a maze one step at a time, as a render loop would:

```python
from pixelplay.maze import Maze

maze = Maze(20, 20)
for _ in range(1000):
    current = maze.step()
```

`Maze.reset()` starts over with a fresh, fully walled grid. `parse_args(argv)`
reads the `-w`, `-h` and `-c` options (width, height and cell size in pixels,
defaulting to 800, 800 and 40) and returns them as a tuple.

Run the platformer physics over the built-in level:

```python
from pixelplay.geometry import Vec
from pixelplay.platformer import LEVEL, GopherPhys, Platform

platforms = [Platform(rect) for rect in LEVEL]
phys = GopherPhys()
phys.update(1 / 60, Vec(1, 0), platforms)   # run right
```

Spawn smoke puffs:

```python
from pixelplay.geometry import Rect, Vec
from pixelplay.smoke import ParticleSystem, SmokeSystem

smoke = SmokeSystem(rects=[Rect(Vec(0, 0), Vec(32, 32))])
system = ParticleSystem(smoke.generate, smoke.update, 0.3, 0.1)
system.update_all(0.1)
for particle in system:        # newest first
    print(particle.pos, particle.scale, particle.mask)
```

A seeded starfield, advanced by one frame; `update` returns one `Projection`
per star with its head, tail, radius and colour:

```python
from pixelplay.starfield import Starfield

field = Starfield(1024, 1024, 512, 4)
field.speed_up()
projections = field.update(1 / 60)
```

A double pendulum and a scrolling background:

```python
from pixelplay.pendulum import DoublePendulum
from pixelplay.scrolling import ScrollingBackground

pendulum = DoublePendulum()
first_bob, second_bob = pendulum.step()

background = ScrollingBackground(600, 450, -60)
left_half, right_half = background.update(1 / 60)   # centres to draw at
```

A sudoku board driven by clicks and key presses:

```python
from pixelplay.sudoku import Sudoku

game = Sudoku()
if game.select(450, 450):   # the cell under the click, on a 900-pixel board
    game.enter(1)
print(game.solved())
```

A typewriter with a light chasing its pen:

```python
from pixelplay.typewriter import Dotlight, Typewriter

tw = Typewriter(advance=10, line_height=20)
style = tw.ribbon("a")      # usually Style.REGULAR, sometimes BOLD or ITALIC
light = Dotlight(tw)
light.update(1 / 60)
```

## What it does not do

pixelplay opens no window, draws nothing and reads no keyboard or mouse. It
loads no fonts, compiles no shaders and reads no tile-map files. It installs
no commands: `maze.parse_args` and `shaderutil.parse_flags` only turn argument
lists into values for your own program to use.

## Running the tests

Install the `test` extra and run `pytest` from the project root.