"""Public engine surface: versions, world lifecycle, snapshots and commands.

Snapshots and command records have fixed little-endian binary layouts so
they can be exchanged with other processes or stored. Structural problems
with a submitted command raise ``InvalidCommandError``. Problems that depend
on world state are reported later in that command's result record.
"""

from __future__ import annotations

import functools
import platform
import struct
import time
from dataclasses import dataclass

from axiomsim.selftest import MATH_VERSION, selftest_checksum
from axiomsim.world import (
    Channel,
    CommandType,
    PendingCommand,
    RejectReason,
    World,
)

ABI_VERSION = 1

VERSION_MAJOR = 0
VERSION_MINOR = 0
VERSION_PATCH = 1
VERSION_PACKED = (VERSION_MAJOR << 16) | (VERSION_MINOR << 8) | VERSION_PATCH

WORLD_META_SNAPSHOT_VERSION = 1
COMMAND_VERSION = 1
COMMAND_RESULT_VERSION = 1

_UINT32_MAX = 2**32 - 1

_META = struct.Struct("<IIQIII4x")
_SET_CELL = struct.Struct("<IIBBH")
_COMMAND_HEAD = struct.Struct("<II")
_PAYLOAD_SIZE = 32
_COMMAND_SIZE = _COMMAND_HEAD.size + _PAYLOAD_SIZE
_RESULT = struct.Struct("<IIQQIBBH")


class InvalidCommandError(ValueError):
    """A command failed structural validation and was not queued."""


@dataclass(frozen=True)
class WorldDesc:
    """Parameters for creating a world. ``reserved`` must be 0."""

    width: int
    height: int
    reserved: int = 0


@dataclass(frozen=True)
class WorldMetaSnapshot:
    """Top-level world information: tick and dimensions."""

    tick: int
    width: int
    height: int
    version: int = WORLD_META_SNAPSHOT_VERSION
    size_bytes: int = _META.size
    reserved: int = 0

    def pack(self) -> bytes:
        """Encode in the fixed binary layout."""
        return _META.pack(
            self.version,
            self.size_bytes,
            self.tick,
            self.width,
            self.height,
            self.reserved,
        )

    @classmethod
    def unpack(cls, data: bytes) -> WorldMetaSnapshot:
        """Decode from the fixed binary layout."""
        if len(data) != _META.size:
            raise ValueError(f"world meta snapshot must be {_META.size} bytes, got {len(data)}")
        version, size_bytes, tick, width, height, reserved = _META.unpack(data)
        return cls(
            tick=tick,
            width=width,
            height=height,
            version=version,
            size_bytes=size_bytes,
            reserved=reserved,
        )


@dataclass(frozen=True)
class SetCellU8:
    """Payload for setting a single cell's byte value in a channel."""

    x: int
    y: int
    channel: int
    value: int

    def __post_init__(self) -> None:
        if not (0 <= self.x <= _UINT32_MAX and 0 <= self.y <= _UINT32_MAX):
            raise ValueError("cell coordinates must fit in an unsigned 32-bit integer")
        if not 0 <= self.channel <= 0xFF:
            raise ValueError("channel must fit in a byte")
        if not 0 <= self.value <= 0xFF:
            raise ValueError("value must fit in a byte")


def _pack_set_cell(payload: SetCellU8) -> bytes:
    return _SET_CELL.pack(payload.x, payload.y, payload.channel, payload.value, 0)


def _unpack_set_cell(raw: bytes) -> SetCellU8:
    x, y, channel, value, _pad = _SET_CELL.unpack(raw[: _SET_CELL.size])
    return SetCellU8(x=x, y=y, channel=channel, value=value)


@dataclass(frozen=True)
class Command:
    """A versioned command with a type and a payload of at most 32 bytes.

    The payload is a ``SetCellU8`` for set-cell commands, or raw bytes.
    """

    type: int
    payload: SetCellU8 | bytes = b""
    version: int = COMMAND_VERSION

    def _payload_bytes(self) -> bytes:
        if isinstance(self.payload, SetCellU8):
            raw = _pack_set_cell(self.payload)
        else:
            raw = bytes(self.payload)
        if len(raw) > _PAYLOAD_SIZE:
            raise ValueError(f"command payload exceeds {_PAYLOAD_SIZE} bytes")
        return raw.ljust(_PAYLOAD_SIZE, b"\0")

    def pack(self) -> bytes:
        """Encode in the fixed binary layout."""
        return _COMMAND_HEAD.pack(self.version, self.type) + self._payload_bytes()

    @classmethod
    def unpack(cls, data: bytes) -> Command:
        """Decode from the fixed binary layout."""
        if len(data) != _COMMAND_SIZE:
            raise ValueError(f"command must be {_COMMAND_SIZE} bytes, got {len(data)}")
        version, type_ = _COMMAND_HEAD.unpack(data[: _COMMAND_HEAD.size])
        raw = bytes(data[_COMMAND_HEAD.size :])
        payload: SetCellU8 | bytes
        if type_ == CommandType.DEBUG_SET_CELL_U8:
            payload = _unpack_set_cell(raw)
        else:
            payload = raw
        return cls(type=type_, payload=payload, version=version)


@dataclass(frozen=True)
class CommandResultRecord:
    """Outcome of one command processed at a tick boundary."""

    command_id: int
    tick_applied: int
    type: int
    accepted: bool
    reason: RejectReason
    size_bytes: int = _RESULT.size
    version: int = COMMAND_RESULT_VERSION

    def pack(self) -> bytes:
        """Encode in the fixed binary layout."""
        return _RESULT.pack(
            self.size_bytes,
            self.version,
            self.command_id,
            self.tick_applied,
            self.type,
            1 if self.accepted else 0,
            int(self.reason),
            0,
        )

    @classmethod
    def unpack(cls, data: bytes) -> CommandResultRecord:
        """Decode from the fixed binary layout."""
        if len(data) != _RESULT.size:
            raise ValueError(f"command result must be {_RESULT.size} bytes, got {len(data)}")
        size_bytes, version, command_id, tick, type_, accepted, reason, _pad = _RESULT.unpack(data)
        return cls(
            command_id=command_id,
            tick_applied=tick,
            type=type_,
            accepted=bool(accepted),
            reason=RejectReason(reason),
            size_bytes=size_bytes,
            version=version,
        )


def get_abi_version() -> int:
    """ABI version of this engine."""
    return ABI_VERSION


def get_version_packed() -> int:
    """Engine version packed as ``0x00MMmmpp``."""
    return VERSION_PACKED


@functools.lru_cache(maxsize=None)
def get_build_info() -> str:
    """Human-readable build description, fixed on first call."""
    stamp = time.strftime("%b %d %Y %H:%M:%S")
    return (
        f"Axiom {VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH} (ABI {ABI_VERSION}) "
        f"[Release] compiler={platform.python_implementation()} "
        f"platform={platform.system() or 'Unknown'} built {stamp}"
    )


def math_get_version() -> int:
    """Version of the arithmetic behaviour."""
    return MATH_VERSION


def math_selftest_checksum(seed: int) -> int:
    """Checksum of the deterministic arithmetic battery for ``seed``."""
    return selftest_checksum(seed)


def create_world(desc: WorldDesc) -> World:
    """Create a world from ``desc``; both dimensions must be non-zero."""
    if desc.width == 0 or desc.height == 0:
        raise ValueError("world dimensions must be non-zero")
    return World(desc.width, desc.height)


def read_snapshot(world: World, channel: int) -> WorldMetaSnapshot | bytes:
    """Read a snapshot channel: the meta record, or a copy of a cell grid."""
    try:
        kind = Channel(channel)
    except ValueError:
        raise ValueError(f"unknown snapshot channel {channel}") from None
    if kind is Channel.WORLD_META:
        return WorldMetaSnapshot(tick=world.tick, width=world.width, height=world.height)
    if kind is Channel.TERRAIN:
        return world.terrain
    return world.occupancy


def submit_command(world: World, cmd: Command) -> int:
    """Validate ``cmd`` structurally and queue it; return its command id."""
    if cmd.version != COMMAND_VERSION:
        raise InvalidCommandError(f"unsupported command version {cmd.version}")
    if cmd.type != CommandType.DEBUG_SET_CELL_U8:
        raise InvalidCommandError(f"unknown command type {cmd.type}")
    payload = cmd.payload
    if not isinstance(payload, SetCellU8):
        payload = _unpack_set_cell(cmd._payload_bytes())
    pending = PendingCommand(
        type=cmd.type,
        x=payload.x,
        y=payload.y,
        channel=payload.channel,
        value=payload.value,
    )
    return world.submit_command(pending)


def read_command_results(world: World) -> list[CommandResultRecord]:
    """Results of the commands processed in the most recent tick."""
    return [
        CommandResultRecord(
            command_id=r.command_id,
            tick_applied=r.tick_applied,
            type=r.type,
            accepted=r.accepted,
            reason=r.reason,
        )
        for r in world.results
    ]