# devcore

Small building blocks for tools that deal with hashes, difficulty targets and
background work. Plain Python, no third-party dependencies.

## Install

```
pip install devcore
pip install "devcore[test]"   # with pytest for the test suite
```

## Modules

### `devcore.common_data`

Hex and big-endian conversions, difficulty/target arithmetic and
human-readable formatting.

```python
from devcore.common_data import (
    from_hex, to_hex, to_big_endian, from_big_endian,
    get_target_from_diff, get_hashes_to_target, get_formatted_hashes,
)

from_hex("0x4169")                  # b"Ai"
to_hex(b"Ai")                       # "4169"
to_big_endian(1, 4)                 # b"\x00\x00\x00\x01"
from_big_endian(b"\x01\x00")        # 256

target = get_target_from_diff(1.0)  # "0x00000000ffff0000...0000"
get_hashes_to_target(target)
get_formatted_hashes(12_500_000)    # "12.50 Mh"
```

Also available: `from_hex_char`, `int_to_hex`, `to_compact_hex`,
`to_compact_big_endian`, `bytes_required`, `setenv`, `get_scaled_size`,
`get_formatted_memory`, `get_formatted_elapsed`, `pad_left` and `pad_right`.

`from_hex` returns an empty result on a bad character, or raises
`BadHexCharacter` when called with `strict=True`. The package's errors
(`BadHexCharacter`, `ExternalFunctionFailure`) derive from `DevError`.

### `devcore.fixed_hash`

`FixedHash` and its sized variants (`H64`, `H128`, `H160`, `H256`, `H512`,
`H520`, `H1024`, `H2048`) hold fixed-length big-endian byte strings. They
support ordering, hashing, `^`, `|`, `&`, `~`, indexing, `int()` and
`bytes()` conversion, in-place `increment()` and `clear()`. Data of another
length can be placed left or right with `Align`.

```python
from devcore.fixed_hash import Align, H256, format_hashes

h = H256.from_int(1)
int(h)                                   # 1
h.hex()                                  # 64 hex characters
h.abridged()                             # first four bytes and an ellipsis
H256.from_bytes(b"\x01", Align.RIGHT)    # equal to H256.from_int(1)
H256.from_hex("00" * 32)                 # bad digits raise BadHexCharacter
format_hashes([h, H256.random()])        # "[ 00000000…, ..., ]"
```

### `devcore.log`

Log lines carry a coloured channel marker (`Channel.LOG`, `Channel.WARN`,
`Channel.NOTE`), the local time and the thread name. `log`, `note` and `warn`
write through `simple_debug_out`, which goes to stderr by default. The
module-level `settings` object (a `LogSettings`) switches colour off
(`no_color`), selects a short syslog-style line (`syslog`) or sends output to
stdout (`stdout`). `strip_colors` removes ANSI escape sequences, and
`format_line` builds a line without writing it.

```python
from devcore import log

log.settings.no_color = True
log.note("pool connected")
log.warn("share rejected")
```

### `devcore.worker`

`Worker` runs `work_loop` on a background thread that survives stop/start
cycles and moves through the `WorkerState` states. Subclass it, override
`work_loop`, and return once `should_stop()` is true:

```python
from devcore.worker import Worker

class Counter(Worker):
    def work_loop(self):
        while not self.should_stop():
            ...

with Counter("counter") as worker:
    worker.start_working()
    worker.stop_working()
```

An exception escaping `work_loop` is logged as a warning; with
`exit_on_error=True` the process is also sent `SIGTERM`.

## What it does not do

This is a library only. It has no command-line program, does no mining, and
talks to no pools or devices.

## Running the tests

```
pytest
```