# traceui

Small, self-contained building blocks for interactive trace viewers. The
package has no runtime dependencies.

## What is inside

- `traceui.tinylfu.TinyLFU`: a size-bounded cache that uses the TinyLFU
  admission policy. A small LRU window sits in front of a segmented LRU,
  which has a probation and a protected segment. When the window evicts a
  key, that key enters the main cache only if it passes the doorkeeper Bloom
  filter and the count-min sketch rates it at least as frequent as the entry
  it would displace. `get(key)` returns `(value, True)` or `(None, False)`.
  `len()` and `in` are supported.
- `traceui.sketch`: the pieces behind that policy. `CountMinSketch` is a
  four-row sketch of 4-bit saturating counters with `add`, `estimate` and
  `reset`, where `reset` halves every counter. `Doorkeeper` is a Bloom filter
  whose `allow` reports whether a hash was seen before. `NibbleVector` stores
  the counters. `next_power_of_two` does 32-bit rounding up.
- `traceui.linkedlist`: `LinkedList` is a doubly linked list whose
  `Element` handles keep their identity, so elements can be moved or removed
  in O(1). Iterating over it yields the stored values.
- `traceui.future`: `Futures.new_future(fn)` runs `fn` on a background
  thread and passes it a `threading.Event` that is set on cancellation. A
  future that nobody reads between two calls to `sweep()` is cancelled, and
  it restarts the next time it is read. `result()` waits briefly,
  `result_no_wait()` does not wait, `wait()` blocks, and `must_result()`
  raises `FutureNotReady`. `immediate(value)` returns a future that already
  holds its value.
- `traceui.commands`: `NormalCommand.filter()` matches every word of the
  input, ignoring case, against the labels, the category and the aliases.
  `MultiCommandProvider` chains several command sequences into one.
  `CommandPalette` filters the commands and moves the highlight up and down,
  wrapping at the ends.
- `traceui.scrollbar`: `range_is_scrollable` and `ScrollbarStyle`, whose
  `width()` and `indicator_span()` give the size and place of a scrollbar
  and its indicator.
- `traceui.controls`: the state logic of check-box groups (`group_state`,
  `toggle_group`, `checkbox_mark`), of tabs (`TabbedState`), of two-sided
  switches (`switch_min_width`) and of foldable sections (`foldable_label`).

## Example

```python
from traceui.tinylfu import TinyLFU

cache = TinyLFU(100, 10000)
cache.add("foo", "bar")
value, found = cache.get("foo")
assert found and value == "bar"
```

```python
from traceui.commands import CommandPalette, NormalCommand

palette = CommandPalette([
    NormalCommand("Close panel", category="Panel"),
    NormalCommand("Go to previous panel", aliases=["back"]),
])
palette.update_text("back")
assert palette.active_command().primary_label == "Go to previous panel"
```

## What it does not do

Nothing here draws anything. The package has no window, no widget
rendering, no colour theme and no text layout. It holds the state and the
arithmetic such widgets rely on, and leaves drawing and input handling to
the caller.

## Running the tests

```
pip install -e .[test]
pytest
```