# pixelboard

A small windowed drawing surface built on `pygame`. It opens a window with a
fixed palette of 22 named colours. It draws a demo board made of a row of
filled swatches, one for each colour, a row of outlined swatches, and an 8×8
checkerboard. A red outline box on the board can be moved with the arrow keys.

## Installing

```
pip install .
```

## Running

```
pixelboard
```

The window is 1280×800 and has the title `Graphics`. These keys work in it:

| Key        | Action                                                                  |
|------------|-------------------------------------------------------------------------|
| Arrow keys | Move the red box one step (a tenth of the window) if it stays inside the window |
| Space      | Clear the window and redraw it                                          |
| Escape     | Quit                                                                    |

Closing the window also ends the program. If the window cannot be opened,
the command prints the reason after `Exception:` and exits with status 1.

## Using it from Python

```python
from pixelboard.base import ColorIdx, Point, Size
from pixelboard.graphics import Graphics
from pixelboard.runner import Runner

with Graphics(800, 500, "My board") as g:
    g.draw_rect(Point(10, 10), Size(100, 50), ColorIdx.BRIGHT_BLUE, True)
    g.draw_text(Point(20, 30), "hello", ColorIdx.WHITE)
    g.draw_line(Point(0, 0), Point(200, 200), ColorIdx.YELLOW)
    g.draw_pixel(Point(300, 300), ColorIdx.GREEN)
    Runner(g).run()
```

- `pixelboard.base` holds the `ColorIdx` palette indices, the `BoundsStatus`
  flag, the `Point` and `Size` tuples, and the abstract `GraphicsBase`.
- `Graphics(width, height, name)` opens the window. Its methods are:
  - `color_value(idx)` returns the packed `0xRRGGBB` value of a colour.
  - `color_name(idx)` returns the name of a colour.
  - `is_valid_color(idx)` and `is_bright_color(idx)` describe a colour index.
  - `is_in_bounds(p)` returns a `BoundsStatus` that says whether a point lies
    outside the window horizontally (`X_OUT`), vertically (`Y_OUT`), or in both
    directions (`BOTH_OUT`).
- The drawing methods are `draw_pixel`, `draw_line`, `draw_rect` and
  `draw_text`. Each returns `True` when it draws. If a point is outside the
  window, the method draws nothing, logs a warning and returns `False`.
- `refresh()` fills the window with the background colour and queues an
  expose event. `demo()` draws the demo board.
- `take_snapshot()` keeps an in-memory copy of the window's contents,
  `show_snapshot()` puts that copy back, and `drop_snapshot()` discards it.
  `show_snapshot()` raises `RuntimeError` if there is no snapshot.
- `close()` shuts the display. A `with` block calls it when the block ends.
- `Runner(graphics)` drives the event loop. `handle_event(event)` acts on a
  single event and returns `False` when the loop should stop. `run()` loops
  until that happens.

## Limitations

Snapshots are kept only in memory. The package cannot save the board to an
image file or load one.

## Tests

```
pip install .[test]
pytest
```