# gaemi

The core services of a small game engine as a plain Python library: logging
and assertions, scalar and matrix math, tagged memory accounting, an event
bus, a service locator, frame timing and keyboard, mouse and controller input
state.

## Install

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Modules

- `gaemi.log`: `LogLevel` runs from `FATAL` (0) to `TRACE` (5). A `Log`
  writes lines of the form `<date> <LABEL>: \t<message>` to a file
  (`game.log` by default) and to a console callable (standard output by
  default). Messages above its `reporting_level` are dropped. `restart()`
  empties the file. `set_logger` and `get_logger` manage the process-wide
  logger, and `log(level, message)` writes through it.
  `gassert(condition, expression, message)` logs a fatal
  "Assertion failure" line and raises `AssertionFailure` when the condition
  is false.
- `gaemi.mathfn`: constants such as `PI`, `TWO_PI` and `SQRT2`, and the
  helpers `to_rad`, `to_deg`, `near_zero`, `clamp`, `lerp`, `cot`,
  `round_to_int` (halves rounded away from zero) and `is_power_of_two`
  (zero is not one).
- `gaemi.linalg`: `Vec2` with `length()`, addition, subtraction, negation and
  scalar multiplication. It also has 4x4 numpy matrix helpers: `identity`,
  `translate`, `rotate`, `scale` and `perspective`. The transform helpers
  post-multiply the matrix they are given. `perspective` maps depth to
  [-1, 1].
- `gaemi.platform`: the abstract `Platform` interface (memory, console, time,
  sleep, date, keyboard, mouse and controller queries). It also has
  `NullPlatform`, which logs a warning on every call and returns neutral
  values. `Window` keeps a caption of the form `"<title> @ fps: <n>"`, and
  `update_fps_counter` refreshes it at most four times a second.
- `gaemi.memory`: `MemoryTag`, `compute_unit_and_amount` (B, kB, MB or GB)
  and `memory_tag_to_string`. `MemoryManager` counts bytes per tag and hands
  the actual work to a platform. Use `allocated(tag)` to read the counts and
  `log_memory_usage()` to log them. `NullMemory` is the placeholder service.
- `gaemi.events`: `EventCode` and `EventContext`, a 16-byte payload readable
  as `i64`, `u32`, `f32`, `u8` and other views. `EventManager.subscribe`
  refuses a listener already subscribed to the same code. `fire` calls the
  callbacks in order and stops at the first that returns true. `NullEvents`
  is the placeholder service.
- `gaemi.locator`: `platform()`, `memory()` and `events()` return the current
  services. `provide_platform`, `provide_memory` and `provide_events` install
  one, and passing `None` restores the placeholder. `reset()` restores all
  three placeholders.
- `gaemi.timer`: `Timer.compute_delta_time` returns the milliseconds since
  the previous frame. `delay_time` sleeps through the platform service for
  the rest of a 60 FPS frame and returns how long it slept.
- `gaemi.input`: `ButtonState`, `ControllerAxis`, `ControllerButton`,
  `KeyboardState`, `MouseState`, `ControllerState` and `InputState`.
  `filter_1d` applies a dead zone to trigger values and `filter_2d` applies a
  circular dead zone to stick values. `InputManager` polls the platform
  service: call `pre_update()`, then `process_event()` for each `QuitEvent`
  or `MouseWheelEvent`, then `update()`. A `QuitEvent` fires
  `EventCode.APPLICATION_QUIT` through the event service. Outside relative
  mode, mouse positions are centred on the window with y pointing up.
- `gaemi.game`: the abstract `Game` base class with `load`, `update`, `draw`
  and `close`. `set_input_state` stores a deep copy of the frame's input.

## Examples

```python
from gaemi.events import EventCode, EventManager

manager = EventManager()
manager.init()

def on_quit(code, sender, listener, context):
    print("quit requested")
    return True

manager.subscribe(EventCode.APPLICATION_QUIT, None, on_quit)
manager.fire(EventCode.APPLICATION_QUIT, None, None)   # True
```

```python
from gaemi.linalg import identity, scale, translate
from gaemi.mathfn import clamp, is_power_of_two

clamp(1.5, -1.0, 1.0)   # 1.0
is_power_of_two(64)     # True

model = scale(translate(identity(), [1.0, 2.0, 3.0]), [2.0, 2.0, 2.0])
point = model @ [1.0, 0.0, 0.0, 1.0]   # array([3., 2., 3., 1.])
```

## What it does not do

There is no engine loop, window, renderer or asset loading here. The only
`Platform` shipped is `NullPlatform`. To get real time, sleep, keyboard,
mouse or controller data, subclass `Platform`, register it with
`gaemi.locator.provide_platform`, and feed your own events to
`InputManager.process_event`.