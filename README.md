# lager

Building blocks for interactive programs that keep their state in immutable
values. The package has three main parts. Values live in a graph of reactive
nodes. Readers and cursors give access to those nodes, and lenses focus on
parts of a value. Changes are applied by pure update functions.

## What is in the package

- `lager.nodes` holds the reactive nodes. A value written into a node with
  `push_down` becomes visible in two phases. First `send_down` makes it the
  node's `last` value and passes it on to derived nodes. Then `notify` calls
  the observers, so observers always see a consistent graph. There are three
  node classes:
  - `RootNode` has no parents. A root created with `Tag.TRANSACTIONAL` (the
    default) keeps written values hidden until `send_down` and `notify` are
    called on it. A root created with `Tag.AUTOMATIC` publishes every written
    value at once.
  - `InnerNode` derives its value from its parents. `current_from` and
    `link_to_parents` help build such nodes.
  - `CursorNode` is the base class for nodes that can also send values back
    up with `send_up`.
- `lager.lens` provides `Lens`, a getter and setter pair. It has `view`,
  `set` and `over`. Two lenses combine with `compose` or with the `|`
  operator. `identity_lens()` focuses on the whole value.
- `lager.lens_nodes` provides `LensReaderNode` and `LensCursorNode`, nodes
  that view their parents through a lens. The cursor variant writes changes
  back through the lens. Build them with `make_lens_reader_node` and
  `make_lens_cursor_node`.
- `lager.setter` provides `SetterNode` and `make_setter_node`. A setter node
  mirrors a parent node and passes every written value to a function.
- `lager.reader` provides the handles to nodes:
  - `Reader` offers `get`, `watch`, `bind`, `zoom`, `setter` and `make`.
    Watchers registered through a reader are disconnected when the reader is
    garbage collected.
  - `Cursor` adds `set` and `update`.
  - `with_(...)` combines one or more readers into a `WithExpr`. With several
    sources, the value is the tuple of their values. `zoom` composes lenses
    without creating nodes. `make()` creates the node and returns a `Cursor`
    when every source is a cursor, and a `Reader` otherwise.
  - `with_setter` attaches a write callback to a reader.
- `lager.enum_names` provides `to_string` and `to_enum`. These convert
  between enum members and their names. They raise `ValueError` for an
  unknown value or name.
- `lager.util` provides:
  - `match`, which dispatches on the type of a value through a mapping of
    types to handlers, and raises `TypeError` when no handler fits;
  - `noop`, `identity` and `unwrap`;
  - `Tag`;
  - the `NoValueError` exception.
- `lager.counter` is a small counter application. It has a `Model`, the
  actions `IncrementAction`, `DecrementAction` and `ResetAction`, and the
  functions `update`, `intent`, `draw` and `main`.

## Installing

```
pip install .
```

## Cursors and lenses

```python
from lager.lens import Lens
from lager.nodes import RootNode
from lager.reader import Cursor
from lager.util import Tag

state = Cursor(RootNode({"a": 1, "b": 2}, Tag.AUTOMATIC))
a = state.zoom(Lens(lambda d: d["a"], lambda d, v: {**d, "a": v})).make()

seen = []
a.watch(seen.append)
a.set(5)

assert a.get() == 5
assert state.get() == {"a": 5, "b": 2}
assert seen == [5]
```

With a transactional root, written values stay hidden until the root sends
them down:

```python
from lager.nodes import RootNode
from lager.reader import Cursor

root = RootNode(0)
cursor = Cursor(root)
cursor.set(3)
assert cursor.get() == 0

root.send_down()
root.notify()
assert cursor.get() == 3
```

## A reducer

```python
from lager.counter import DecrementAction, IncrementAction, Model, ResetAction, update

model = Model()
model = update(model, IncrementAction())
model = update(model, IncrementAction())
model = update(model, DecrementAction())
assert model.value == 1

model = update(model, ResetAction(new_value=10))
assert model.value == 10
```

## The counter command

Installing the package provides a command-line counter:

```
lager-counter
```

It reads characters from standard input and ignores whitespace. It responds
to these characters:

- `+` increments the counter.
- `-` decrements the counter.
- `.` resets the counter to zero.

Any other character is ignored. After every change the command prints
`current value: N`. It ends when its input ends.

```
echo "++-." | lager-counter
```

## What the package does not do

The package has no store object. It has no action dispatching, event loops
or effects, and no time-travel debugger. It has no terminal or graphical
front ends, and it does not serialise models or actions to JSON. The counter
command applies `update` directly to an automatic cursor and prints its
output as plain text.

## Running the tests

```
pip install ".[test]"
pytest
```