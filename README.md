# astrelis

Building blocks for a layered application engine. Each module can be used on
its own:

- `astrelis.result`: `Result`, holding either an Ok value or an Err value.
  It has `ok`, `err`, `is_ok`, `is_err`, `unwrap`, `unwrap_err`, `map`,
  `expect` and `expect_err`. Unwrapping or expecting the wrong side raises
  `ResultError`.
- `astrelis.geometry`: `Point2D`, `Point3D`, `Dimension2D`, `Dimension3D`,
  `Rect2D` and `Rect3D`. Components must be real numbers. Rectangles have
  `from_coords` and `x`, `y`, `width`, `height` properties, and `Rect3D` also
  has `z` and `depth`.
- `astrelis.timing`: `Seconds` and `Milliseconds` time spans, which convert
  between each other with `to` and support `+`, `-`, `*`, `/` and `==`. It also
  has `TimePoint`, a reading of the monotonic clock, and `Time`, which holds
  frame timings updated by `Time.record_frame`.
- `astrelis.vecmath`: `Vector` and `Matrix`, backed by numpy. A 4x4 `Matrix`
  supports `translate`, `rotate` and `scale`, each with an `_inplace` form.
  Indexing a matrix returns one of its columns.
- `astrelis.config`: `is_debug_mode`, `set_debug_mode` and `version_string`.
  Debug mode starts on when the `ASTRELIS_DEBUG` environment variable is `1`,
  `true`, `yes` or `on`.
- `astrelis.log`: `Log`, which sets up the core (`ASTRELIS`) and client (`APP`)
  loggers and adds or removes extra handlers ("sinks"). `LogMode` selects which
  of the two loggers write to standard output. `verify` and `require` log a
  failed condition; `verify` also raises `AssertionError` in debug mode.
- `astrelis.console`: `ConsoleSink`, a log handler that keeps only the newest
  messages, and `Console`, which attaches a sink to the client logger while it
  is open.
- `astrelis.file`: `File`, a path with existence and permission checks, name
  parts, directory listing, and `read_text` and `read_binary`. The two read
  methods return a `Result` with an error message rather than raising.
- `astrelis.image`: `InMemoryImage`, raw 8-bit pixels. `from_file` loads an
  image and gives three-channel images an opaque alpha channel. `save` writes
  a PNG. Failures raise `ImageError`.
- `astrelis.filetree`: `FileTree`, a snapshot of every entry below a root
  directory, made of `Node` objects. It has `files`, `find` and `Node.walk`.
- `astrelis.layers`: `Layer` and `LayerStack`. Ordinary layers come first in
  the stack and overlays always come after them.
- `astrelis.application`: `ApplicationSpecification`, `ApplicationVersion`,
  `ReleaseType`, `CommandLineArguments` and `CreationStatus`.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Examples

Results:

```python
from astrelis.result import Result

res = Result.ok(5).map(lambda v: v + 5)
assert res.unwrap() == 10

failed = Result.err("File does not exist")
assert failed.is_err()
failed.expect("needed the file")  # raises ResultError
```

Reading a file:

```python
from astrelis.file import File

text = File("resources/shaders/Basic.hlsl").read_text()
if text.is_ok():
    print(text.unwrap())
else:
    print(text.unwrap_err())  # e.g. "File does not exist"
```

Transforms:

```python
import math
from astrelis.vecmath import Matrix, Vector

model = Matrix()  # 4x4 identity
model.translate_inplace(Vector(-0.5, 0.0, 0.0))
model.rotate_inplace(math.pi / 2, Vector(0.0, 0.0, 1.0))
print(model.to_array())
```

Layers:

```python
from astrelis.layers import Layer, LayerStack

stack = LayerStack()
stack.push_overlay(Layer("Overlay"))
stack.push_layer(Layer("Game"))
print([layer.name for layer in stack])  # ['Game', 'Overlay']
```

Capturing log output:

```python
from astrelis.log import Log
from astrelis.console import Console

Log.init()
with Console(max_messages=100) as console:
    Log.client_logger().info("Hello")
    print(console.messages)  # ['Hello']
    print(console.render())  # messages joined by newlines
```

## What this package does not do

The package has no window, renderer, graphics context, event system, user
interface drawing or shader compiler. There is also no application class and
no main loop that runs layers frame by frame. `astrelis.application` only
describes an application. `Layer` and `LayerStack` hold and order layers, but
your own code must call their hooks. `Console.render` returns plain text and
does not draw anything. The package installs no command-line programs.