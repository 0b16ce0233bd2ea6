# rustdrill

rustdrill is a small library for a course of compiler-checked programming
exercises. It offers three things:

- `rustdrill.ui` – coloured warning and success lines for the terminal;
- `rustdrill.project` – a builder for the `rust-project.json` file that lets
  an editor's language server understand a directory of exercise files;
- `rustdrill.lessons` – worked solutions to many of the exercises, written as
  ordinary Python functions and classes.

It needs Python 3.11 or later and depends on `rich`.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Status lines: `rustdrill.ui`

```python
from rustdrill.ui import warn, success, no_emoji

warn("Compiling of exercises/intro/intro2.rs failed!")   # red line
success("Successfully ran exercises/intro/intro1.rs")    # green line
```

`warn` starts its line with a warning emoji and `success` with a check-mark
emoji. When the `NO_EMOJI` environment variable is set (`no_emoji()` then
returns `True`) they use the plain markers `!` and `✓` instead.

## Language-server project file: `rustdrill.project`

`RustAnalyzerProject` holds a `sysroot_src` string and a list of `Crate`
entries. Each `Crate` has a `root_module`, edition `"2021"`, no `deps`, and
`cfg` set to `["test"]` so code inside test blocks is analysed too.

```python
from rustdrill.project import RustAnalyzerProject

project = RustAnalyzerProject()
project.find_sysroot_src()            # runs `rustc --print sysroot`
project.exercises_to_json("exercises")
project.write_to_disk("rust-project.json")
```

- `find_sysroot_src()` asks `rustc` for its sysroot, prints
  `Determined toolchain: <path>` and records
  `<path>/lib/rustlib/src/rust/library`. `rustc` must be on your `PATH`.
- `exercises_to_json(root)` walks everything below `root` (default
  `exercises`) and calls `add_path` on each path, in sorted order.
- `add_path(path)` adds a crate when the text after the path's first dot is
  exactly `rs`.
- `to_json()` returns the project as compact JSON; `write_to_disk(path)`
  writes it (default `rust-project.json`).

## Worked solutions: `rustdrill.lessons`

```python
from rustdrill.lessons.iterators import divide, factorial, NotDivisibleError
from rustdrill.lessons.errors import parse_pos_nonzero
from rustdrill.lessons.hashmaps import build_scores_table

print(divide(81, 9))                         # 9
print(factorial(4))                          # 24
print(parse_pos_nonzero("42").value)         # 42

try:
    divide(81, 6)
except NotDivisibleError as err:
    print(err.dividend, err.divisor)         # 81 6

table = build_scores_table("England,France,4,2\n")
print(table["England"].goals_scored)         # 4
```

Failures are raised as exceptions: for example `parse_pos_nonzero` raises
`ParsePosNonzeroError`, `divide` raises a `DivisionError`, and constructing a
`Package` with a weight of zero or less raises `ValueError`.

The modules are:

- `basics` – apple prices, `bigger`, `foo_if_fizz`, `is_even`, `sale_price`,
  `square`, `longest`;
- `concurrency` – per-offset sums on threads, a shared `JobStatus` counter,
  two senders on one channel (`send_tx`, `receive_all`);
- `containers` – tuples and lists, the `Cons`/`Nil` list, `abs_all` which
  copies only when an element is negative;
- `errors` – name tags, `total_cost`, `purchase`, `PositiveNonzeroInteger`,
  `parse_pos_nonzero`;
- `hashmaps` – fruit baskets and a football scores table;
- `iterators` – capitalisation, checked division, factorials, progress counts;
- `messages` – messages that update a `State`;
- `options` – `maybe_icecream`;
- `quizzes` – the string `transformer` and `ReportCard`;
- `structs` – `Order` and `Package`;
- `text` – colour words, trimming, composing and replacing;
- `traits` – `append_bar`, licensed software, `Wrapper`.

## What rustdrill does not do

rustdrill installs no command-line program. It does not read an exercise list,
compile, run or test exercises, track which ones are finished, watch files for
changes, show hints or reset exercises; a tool that does those things can use
`rustdrill.ui` and `rustdrill.project` as building blocks. There is no lesson
module for type conversions.