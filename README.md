# axiomsim

A small, deterministic simulation core: a rectangular grid world that
advances in whole ticks, takes commands that are applied at tick
boundaries, and exposes its state through versioned snapshots. Alongside
it are overflow-safe integer arithmetic helpers for three quantity types
(temperature in milliKelvin as a signed 32-bit value, mass in milligrams
and energy in milliJoules as signed 64-bit values) and a checksum
self-test that shows the arithmetic is reproducible.

No third-party libraries are needed at run time.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## The world

```python
from axiomsim.api import (
    Command, SetCellU8, WorldDesc,
    create_world, read_command_results, read_snapshot, submit_command,
)
from axiomsim.world import Channel, CommandType

world = create_world(WorldDesc(width=64, height=48))
world.step(10)

cmd = Command(
    type=CommandType.DEBUG_SET_CELL_U8,
    payload=SetCellU8(x=3, y=2, channel=Channel.TERRAIN, value=42),
)
command_id = submit_command(world, cmd)

world.step(1)
for result in read_command_results(world):
    print(result.command_id, result.tick_applied, result.accepted, result.reason)

terrain = read_snapshot(world, Channel.TERRAIN)   # bytes, indexed y * width + x
meta = read_snapshot(world, Channel.WORLD_META)   # WorldMetaSnapshot(tick, width, height, ...)
```

`axiomsim.world.World` holds the state: the `tick`, `width`, `height`
and `cell_count` properties, copies of the `terrain` and `occupancy`
byte grids, and `results`, the results of the most recent tick.
`World.step(count)` advances `count` ticks; `step(0)` does nothing and a
negative count raises `ValueError`.

Each tick:

1. clears the previous tick's results,
2. processes the queued commands in submission order, each seeing the
   effects of those before it,
3. advances the tick counter.

A result's `tick_applied` is the tick number before the increment.
Command ids start at 1 and increase with each submission.

A command that fails a state check still yields a result, with
`accepted` false and a `RejectReason`: `INVALID_COORDS` when the cell is
outside the grid, `INVALID_CHANNEL` when the channel is neither
`Channel.TERRAIN` nor `Channel.OCCUPANCY`. A structurally invalid
command, with a version other than 1 or a type other than
`CommandType.DEBUG_SET_CELL_U8`, is refused by `submit_command` with
`InvalidCommandError` and produces no result. A `Command` whose payload
is raw bytes is read with the set-cell layout.

`create_world` raises `ValueError` for a zero width or height, and
`read_snapshot` raises `ValueError` for an unknown channel.

### Binary records

`WorldMetaSnapshot`, `Command` and `CommandResultRecord` each have
`pack()` and a `unpack(data)` class method for fixed little-endian
layouts of 32, 40 and 32 bytes. `unpack` raises `ValueError` when the
data is not exactly that long.

### Versions

`get_abi_version()`, `get_version_packed()` (`0x00MMmmpp`),
`math_get_version()` and `get_build_info()`, a descriptive string fixed
on first call, are in `axiomsim.api`.

## Safe arithmetic

```python
from axiomsim import division, safe
from axiomsim.overflow import OverflowPolicy

safe.temp_add(2**31 - 1, 1, OverflowPolicy.SATURATE)    # 2147483647
division.div_floor_i32(-7, 3, OverflowPolicy.SATURATE)  # -3
division.div_round_i32(8, 3, OverflowPolicy.SATURATE)   # 3
```

`axiomsim.safe` has `add`, `sub`, `mul`, `div` and `clamp` for
`temp_`, `mass_` and `energy_`; division truncates toward zero.
`axiomsim.division` offers truncating, flooring and round-half-away-from-zero
division for 32- and 64-bit operands. `axiomsim.overflow` holds the
bounds, the `would_overflow_*` checks, the `saturate_*` helpers and
`clamp`.

The policy defaults to `OverflowPolicy.SATURATE`: overflow clamps to the
type's bounds and division by zero gives the maximum for a non-negative
dividend and the minimum for a negative one. With `OverflowPolicy.TRAP`
the same cases raise `ArithmeticOverflowError`, or `ZeroDivisionError`
for a zero divisor.

## Determinism self-test

```python
from axiomsim.overflow import OverflowPolicy
from axiomsim.selftest import selftest_checksum

print(hex(selftest_checksum(0, OverflowPolicy.SATURATE)))
```

The same seed always gives the same 64-bit checksum. Values are drawn
from the `Xorshift32` generator. Under the trapping policy the overflow
cases are left out, so its checksum differs from the saturating one.

## Headless validation

```
axiomsim-headless
```

This runs the whole validation sequence: version checks, world creation,
ticks, snapshots, math checksums, the command pipeline, rejections,
structural failures and invalid input. It prints a PASS or FAIL line for
each check and a summary, and exits with status 0 only if every check
passed. From Python, `axiomsim.headless.run_validation(stream)` writes
the same report to `stream` and returns a `ValidationReport` with
`passed`, `failed` and `ok`.

## What it does not do

The package is the simulation state and its rules only. It draws
nothing and has no viewer. Worlds live in memory and are not saved. The
only simulation rule is the set-cell debug command, and there are no
systems that change cells on their own from tick to tick.