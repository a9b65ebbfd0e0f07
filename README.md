# bentods

A small game-framework core built around signed 20.12 fixed-point
arithmetic (12 fractional bits, values wrapped to 32 bits).

## What is inside

- `bentods.fixed` – the immutable `Fixed` number type. `Fixed(3)` and
  `Fixed(0.5)` convert ints and floats; `Fixed.raw(n)` builds one from its raw
  32-bit value, readable again as `.value`. `to_int()` floors, `to_float()`
  divides by 4096. Arithmetic and comparisons work against `Fixed`, `int` and
  `float`. The module also has the raw helpers `mulf32`, `divf32`, `sqrtf32`,
  `degrees_to_angle` (a full circle is 32768) and `cos_lerp`, `sin_lerp`,
  `tan_lerp`, which compute the raw fixed-point trigonometric value of a
  binary angle.
- `bentods.vec2` – the `Vec2` dataclass; `x` and `y` are always stored as
  `Fixed`. Multiplying, dividing, adding or subtracting a scalar applies it to
  both coordinates.
- `bentods.rect` – the `Rect` dataclass (`x`, `y`, `width`, `height`) with
  `Rect.sized(width, height)` and the properties `left`, `right`, `top`,
  `bottom`, `min` and `max`.
- `bentods.fxmath` – `fabs`, `mod` (remainder with the sign of the
  numerator), `cos`, `sin`, `tan` taking whole degrees, `sqrt`,
  `distance` (the *squared* distance), `distance_sqrt` and
  `distance_manhattan`.
- `bentods.color` – the frozen `Color` dataclass (`a`, `r`, `g`, `b`, each
  0–255), `Color.rgb`, `Color.from_argb`, `to_rgb255` (0xAARRGGBB) and
  `to_rgb15(alpha_threshold=128)`, plus presets such as `Color.WHITE`,
  `Color.RED`, `Color.SKY_BLUE` and `Color.BLANK`.
- `bentods.counter` – `CircularCounter(max)` counting over `0..max`, with
  `next()` and `prev()` wrapping in both directions.
- `bentods.matrix` – the row-major 3×3 `Matrix` with `zero`, `one`,
  `identity`, `translation`, `scale`, `rotation` and `inverse()`, indexing,
  iteration, `+`, `-`, matrix and scalar `*`, and scalar `/`. `inverse()`
  returns the identity when the determinant is nearly zero. Note that
  `rotation` fills both its cosine and sine slots with the cosine of the
  angle.
- `bentods.camera` – the `Camera` dataclass (`offset`, `target`, `rotation`
  in degrees, `zoom`) with `set`, `matrix`, `camera_to_screen` and
  `screen_to_camera`.
- `bentods.collision` – `point_circle`, `circle_circle`, `point_rect`,
  `rect_rect`, `circle_rect`, `line_point`, `line_circle`, `line_line`,
  `line_rect`, `poly_point`, `poly_circle`, `poly_rect`, `poly_line` and
  `poly_poly`. Polygons are sequences of `Vec2` and are closed automatically.
- `bentods.app` – the abstract `Scene` (`preload`, `update`) and the `App`
  singleton from `App.get()`, with `set_scene`, `update` and the `scene`
  property.
- `bentods.filedata` – `FileData`, which reads a whole file into `data`
  (`length`, `load`, `unload`, `is_valid`) and raises `FileDataError` for an
  empty name, an unreadable file or an empty file.
- `bentods.sillyimage` – the `SillyImage` loader for the `sillyimg` format:
  a 20-byte little-endian `SillyImageMetadata` header (`parse`, `pack`)
  followed by pixel data. `ImageType` lists the pixel layouts; bad files raise
  `SillyImageError`.

## Install

```
pip install bentods
```

## Example

```python
from bentods.fixed import Fixed
from bentods.vec2 import Vec2
from bentods.rect import Rect
from bentods.collision import point_rect, circle_circle

box = Rect(Fixed(0), Fixed(0), Fixed(16), Fixed(16))
print(point_rect(Vec2(Fixed(4), Fixed(8)), box))          # True
print(circle_circle(Vec2(Fixed(0), Fixed(0)), Fixed(2),
                    Vec2(Fixed(3), Fixed(0)), Fixed(2)))  # True
```

Scenes are driven by the application object:

```python
from bentods.app import App, Scene

class Title(Scene):
    def preload(self):
        print("loading title")

    def update(self):
        pass

app = App.get()
app.set_scene(Title())
app.update()   # preloads the scene, then updates it
```

A scene may call `set_scene` from its own `preload`; `update` keeps
switching until no request is pending.

## What it does not do

The package does no rendering and reads no input. There are no drawing
functions, no textures, palettes or texture atlases, and no touch or key
handling: `SillyImage` gives you the decoded header and the raw pixel bytes,
and what you do with them is up to you. There is no command-line tool.

## Tests

```
pip install bentods[test]
pytest
```