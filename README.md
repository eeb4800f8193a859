# quadkit

A small toolkit of building blocks for frame-based games and interactive
programs, in plain Python with no runtime dependencies.

## Modules

- `quadkit.color`: the frozen `Color` dataclass (float RGBA components)
  with `from_rgba`, `from_hex`, `from_bytes`, `to_bytes` and `to_tuple`;
  `color_u8`, `hsl_to_rgb`, `rgb_to_hsl`, and named colors such as `RED`,
  `SKYBLUE`, `WHITE`, `BLACK` and `BLANK`.
- `quadkit.vecmath`: the immutable `Vec2` (arithmetic, `length`,
  `distance`), `polar_to_cartesian`, `cartesian_to_polar` and `clamp`.
- `quadkit.rect`: `Rect` with edges, `center`, `contains`, `overlaps`,
  `combine_with`, `intersect`, `offset`, `move_to` and `scale`; and
  `RectOffset`.
- `quadkit.circle`: `Circle` with `contains`, `overlaps`, `overlaps_rect`,
  `offset`, `move_to` and `scale`.
- `quadkit.generational`: `GenerationalStorage`, a slot store whose
  `GenerationalId`s go stale once their slot is freed and used again
  (`push`, `get`, `replace`, `retain`, `free`, `count`, `clear`).
- `quadkit.animation`: `Animation`, `AnimationFrame` and `AnimatedSprite`
  for sprite sheets with one animation per row of tiles. `update` takes the
  elapsed frame time.
- `quadkit.mouse_camera`: `Camera`, an offset and scale that follow mouse
  drags (`update`) and wheel zoom around a point (`scale_wheel`,
  `scale_mul`, `scale_new`).
- `quadkit.events`: `TouchPhase`, `MouseButton`, `KeyMods`, `EventKind` and
  `InputEvent`. `InputEvent.repeat(handler)` calls the matching
  `*_event` method of the handler, if it has one.
- `quadkit.input`: `InputState`, fed by `*_event` calls, tracks keys,
  mouse buttons, the wheel, touches, typed characters and quit requests.
  `end_frame()` clears per-frame state. Subscribers registered with
  `register_input_subscriber()` get recorded events replayed through
  `repeat_all_input()`.
- `quadkit.storage`: one global value per type (`store`, `get`, `try_get`).
- `quadkit.shaders`: `preprocess_shader` replaces `#include "name"`
  directives with content from a `PreprocessorConfig`.
- `quadkit.files`: `load_file` and `load_string`, resolved against the
  folder set by `set_pc_assets_folder`. Failures raise `FileError`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A taste

```python
from quadkit.color import Color, rgb_to_hsl
from quadkit.rect import Rect
from quadkit.events import KeyMods
from quadkit.input import InputState

sky = Color.from_hex(0x3CA7D5)
print(rgb_to_hsl(sky))

print(Rect(0, 0, 10, 10).intersect(Rect(5, 5, 10, 10)))
# Rect(x=5, y=5, w=5, h=5)

state = InputState(screen_width=640, screen_height=480)
state.key_down_event("space", KeyMods(), False)
assert state.is_key_pressed("space")
state.end_frame()
assert not state.is_key_pressed("space") and state.is_key_down("space")
```

## What it does not do

quadkit opens no window and draws nothing. It plays no sound and reads
no devices. `InputState` only knows the events that your own window
layer passes to it. The package also has no main loop, no coroutine
scheduler, no scene graph of nodes and no state machine. The caller
drives each frame: pass the frame time to `AnimatedSprite.update` and
call `InputState.end_frame()` yourself.