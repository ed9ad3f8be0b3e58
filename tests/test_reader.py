import gc

import pytest

from lager.lens import Lens
from lager.nodes import RootNode
from lager.reader import Cursor, Reader, WithExpr, with_, with_setter
from lager.util import Tag


def _commit(*nodes):
    for node in nodes:
        node.send_down()
    for node in nodes:
        node.notify()


def _key(name):
    return Lens(lambda d: d[name], lambda d, v: {**d, name: v})


def test_reader_get_holds_value():
    assert Reader(RootNode(42)).get() == 42
    assert Reader(RootNode("hello")).get() == "hello"


def test_new_values_are_not_visible_until_commit():
    root = RootNode(42)
    cursor = Cursor(root)
    cursor.set(13)
    assert cursor.get() == 42
    cursor.set(16)
    assert cursor.get() == 42
    _commit(root)
    assert cursor.get() == 16


def test_commit_is_idempotent():
    root = RootNode(42)
    cursor = Cursor(root)
    cursor.set(13)
    _commit(root)
    _commit(root)
    assert cursor.get() == 13


def test_automatic_root_is_visible_at_once():
    cursor = Cursor(RootNode(42, Tag.AUTOMATIC))
    cursor.set(13)
    assert cursor.get() == 13
    cursor.set(3)
    assert cursor.get() == 3


def test_watch_notified_on_commit_only():
    root = RootNode(42)
    cursor = Cursor(root)
    seen = []
    cursor.watch(seen.append)
    cursor.set(13)
    assert seen == []
    _commit(root)
    assert seen == [13]


def test_watches_see_consistent_state():
    x_root, y_root = RootNode(42), RootNode(35)
    x, y = Cursor(x_root), Cursor(y_root)
    snapshots = []
    x.watch(lambda v: snapshots.append((v, x.get(), y.get())))
    y.watch(lambda v: snapshots.append((v, x.get(), y.get())))
    x.set(84)
    y.set(70)
    assert snapshots == []
    _commit(x_root, y_root)
    assert snapshots == [(84, 84, 70), (70, 84, 70)]


def test_watch_disconnect():
    root = RootNode(1, Tag.AUTOMATIC)
    cursor = Cursor(root)
    seen = []
    stop = cursor.watch(seen.append)
    cursor.set(2)
    stop()
    cursor.set(3)
    assert seen == [2]
    assert root.observer_count == 0


def test_watchers_dropped_with_reader():
    root = RootNode(42)
    reader = Reader(root)
    reader.watch(lambda v: None)
    assert root.observer_count == 1
    del reader
    gc.collect()
    assert root.observer_count == 0


def test_bind_calls_immediately():
    reader = Reader(RootNode(42))
    seen = []
    reader.bind(seen.append)
    assert seen == [42]


def test_zoom_reader_is_read_only():
    root = RootNode({"a": 1, "b": 2})
    view = Reader(root).zoom(_key("a")).make()
    assert view.get() == 1
    assert not isinstance(view, Cursor)
    root.push_down({"a": 5, "b": 2})
    _commit(root)
    assert view.get() == 5


def test_zoom_cursor_writes_back():
    root = RootNode({"a": 1, "b": 2})
    view = Cursor(root).zoom(_key("a")).make()
    view.set(10)
    _commit(root)
    assert view.get() == 10
    assert root.last == {"a": 10, "b": 2}


def test_zoom_composes_lenses():
    root = RootNode({"outer": {"inner": 3}})
    expr = with_(Cursor(root)).zoom(_key("outer")).zoom(_key("inner"))
    assert isinstance(expr, WithExpr)
    view = expr.make()
    assert view.get() == 3
    view.set(4)
    _commit(root)
    assert root.last == {"outer": {"inner": 4}}


def test_with_combines_several_cursors():
    r1, r2 = RootNode(1), RootNode(2)
    both = with_(Cursor(r1), Cursor(r2)).make()
    assert both.get() == (1, 2)
    both.set((3, 4))
    _commit(r1, r2)
    assert (r1.last, r2.last) == (3, 4)
    assert both.get() == (3, 4)


def test_with_of_mixed_handles_is_reader():
    combined = with_(Reader(RootNode(1)), Cursor(RootNode(2))).make()
    assert combined.get() == (1, 2)
    assert not isinstance(combined, Cursor)


def test_with_requires_arguments():
    with pytest.raises(ValueError):
        with_()
    with pytest.raises(TypeError):
        with_(42)


def test_cursor_update():
    root = RootNode(5, Tag.AUTOMATIC)
    cursor = Cursor(root)
    cursor.update(lambda v: v * 2)
    assert cursor.get() == 10


def test_cursor_requires_cursor_node():
    view = Reader(RootNode({"a": 1})).zoom(_key("a")).make()
    with pytest.raises(TypeError):
        Cursor(view.node)


def test_setter_routes_writes():
    root = RootNode(42)
    written = []
    cursor = Reader(root).setter(written.append)
    cursor.set(7)
    assert written == [7]
    assert cursor.get() == 42


def test_with_setter_automatic():
    root = RootNode(42)
    written = []
    seen = []
    cursor = with_setter(Reader(root), written.append, Tag.AUTOMATIC)
    cursor.watch(seen.append)
    cursor.set(7)
    assert cursor.get() == 7
    assert seen == [7]
    assert root.last == 42


def test_make_returns_same_handle():
    reader = Reader(RootNode(1))
    assert reader.make() is reader
    assert Reader(reader).node is reader.node