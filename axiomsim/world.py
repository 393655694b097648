"""The simulation world: grid channels, tick counter and command pipeline.

A world holds two per-cell byte channels, terrain and occupancy, laid out
row-major with ``index = y * width + x``. Commands are queued by
``submit_command`` and applied in submission order at the next tick
boundary. Each processed command yields exactly one ``CommandResult``,
which stays readable until the following tick clears it.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass

_UINT32_MAX = 2**32 - 1


class Channel(enum.IntEnum):
    """Snapshot channels; terrain and occupancy are the writable cell grids."""

    WORLD_META = 1
    TERRAIN = 2
    OCCUPANCY = 3


class CommandType(enum.IntEnum):
    """Kinds of command. Debug commands start at 1000."""

    NONE = 0
    DEBUG_SET_CELL_U8 = 1000


class RejectReason(enum.IntEnum):
    """Why a queued command was rejected when its tick was processed."""

    NONE = 0
    INVALID_COORDS = 1
    INVALID_CHANNEL = 2


@dataclass(frozen=True)
class PendingCommand:
    """A queued request to set one cell of a channel to a byte value.

    ``id`` is assigned by the world on submission; any value given here is
    replaced.
    """

    type: int
    x: int
    y: int
    channel: int
    value: int
    id: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("cell coordinates must be non-negative")
        if not 0 <= self.channel <= 0xFF:
            raise ValueError("channel must fit in a byte")
        if not 0 <= self.value <= 0xFF:
            raise ValueError("value must fit in a byte")


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one processed command."""

    command_id: int
    tick_applied: int
    type: int
    accepted: bool
    reason: RejectReason


class World:
    """Authoritative simulation state with fixed dimensions."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("world dimensions must be positive")
        if width * height > _UINT32_MAX:
            raise ValueError("world cell count does not fit in 32 bits")
        self._width = width
        self._height = height
        self._cell_count = width * height
        self._tick = 0
        self._terrain = bytearray(self._cell_count)
        self._occupancy = bytearray(self._cell_count)
        self._next_command_id = 1
        self._pending: list[PendingCommand] = []
        self._results: list[CommandResult] = []

    @property
    def tick(self) -> int:
        """Current simulation tick; a new world starts at 0."""
        return self._tick

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_count(self) -> int:
        """Number of cells, ``width * height``."""
        return self._cell_count

    @property
    def terrain(self) -> bytes:
        """Copy of the terrain channel, row-major."""
        return bytes(self._terrain)

    @property
    def occupancy(self) -> bytes:
        """Copy of the occupancy channel, row-major."""
        return bytes(self._occupancy)

    @property
    def results(self) -> tuple[CommandResult, ...]:
        """Results of the commands processed in the most recent tick."""
        return tuple(self._results)

    def submit_command(self, cmd: PendingCommand) -> int:
        """Queue ``cmd`` for the next tick boundary and return its new id."""
        command_id = self._next_command_id
        self._next_command_id += 1
        self._pending.append(dataclasses.replace(cmd, id=command_id))
        return command_id

    def step(self, count: int) -> None:
        """Advance ``count`` ticks, processing queued commands at each boundary."""
        if count < 0:
            raise ValueError("tick count must be non-negative")
        for _ in range(count):
            self._results.clear()
            batch, self._pending = self._pending, []
            for cmd in batch:
                self._results.append(self._process(cmd))
            self._tick += 1

    def _process(self, cmd: PendingCommand) -> CommandResult:
        def result(accepted: bool, reason: RejectReason) -> CommandResult:
            return CommandResult(cmd.id, self._tick, cmd.type, accepted, reason)

        if cmd.x >= self._width or cmd.y >= self._height:
            return result(False, RejectReason.INVALID_COORDS)
        if cmd.channel == Channel.TERRAIN:
            grid = self._terrain
        elif cmd.channel == Channel.OCCUPANCY:
            grid = self._occupancy
        else:
            return result(False, RejectReason.INVALID_CHANNEL)
        grid[cmd.y * self._width + cmd.x] = cmd.value
        return result(True, RejectReason.NONE)