"""Headless runner that exercises the engine end to end and reports each check."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import TextIO

from axiomsim import api
from axiomsim.world import Channel, CommandType, RejectReason


@dataclass(frozen=True)
class ValidationReport:
    """Counts of passed and failed checks from one validation run."""

    passed: int
    failed: int

    @property
    def ok(self) -> bool:
        return self.failed == 0


class _Checker:
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.passed = 0
        self.failed = 0

    def say(self, text: str = "") -> None:
        print(text, file=self.stream)

    def section(self, title: str) -> None:
        self.say(f"--- {title} ---")

    def check(self, condition: bool, label: str) -> None:
        if condition:
            self.say(f"  [PASS] {label}")
            self.passed += 1
        else:
            self.say(f"  [FAIL] {label}")
            self.failed += 1

    def raises(self, exc_type: type[BaseException], action, label: str) -> None:
        try:
            action()
        except exc_type:
            self.check(True, label)
        else:
            self.check(False, label)


def _set_cell(x: int, y: int, channel: int, value: int) -> api.Command:
    return api.Command(
        type=CommandType.DEBUG_SET_CELL_U8,
        payload=api.SetCellU8(x=x, y=y, channel=channel, value=value),
    )


def _check_abi(c: _Checker) -> None:
    c.section("ABI Checks")
    c.check(api.get_abi_version() == api.ABI_VERSION, "ABI version matches")
    c.check(api.get_version_packed() == api.VERSION_PACKED, "Packed version matches")
    c.check(bool(api.get_build_info()), "Build info non-empty")
    c.say()


def _check_math(c: _Checker) -> None:
    c.section("Math Utilities")
    c.check(api.math_get_version() == 1, "math_get_version() == MATH_VERSION")

    checksum0 = api.math_selftest_checksum(0)
    c.check(checksum0 != 0, "selftest checksum(0) non-zero")
    c.say(f"       checksum(0) = 0x{checksum0:016X}")
    c.check(checksum0 == api.math_selftest_checksum(0), "selftest checksum(0) deterministic")

    others = {seed: api.math_selftest_checksum(seed) for seed in (1, 2, 42, 1000)}
    c.check(others[1] != checksum0, "checksum(1) != checksum(0)")
    c.check(others[2] != checksum0, "checksum(2) != checksum(0)")
    c.check(others[2] != others[1], "checksum(2) != checksum(1)")
    c.check(others[42] != checksum0, "checksum(42) != checksum(0)")
    c.check(others[1000] != checksum0, "checksum(1000) != checksum(0)")
    for seed, value in others.items():
        c.say(f"       checksum({seed}){' ' * (4 - len(str(seed)))} = 0x{value:016X}")
    c.say()


def run_validation(stream: TextIO | None = None) -> ValidationReport:
    """Run every engine check, writing a line per check to ``stream``."""
    c = _Checker(sys.stdout if stream is None else stream)
    c.say("=== Axiom Headless -- Validation ===")
    c.say()

    _check_abi(c)

    c.section("World Creation")
    world = api.create_world(api.WorldDesc(width=64, height=48))
    c.check(world.width == 64, "width == 64")
    c.check(world.height == 48, "height == 48")
    c.check(world.tick == 0, "initial tick == 0")
    c.say()

    c.section("Cell Count")
    c.check(world.cell_count == 64 * 48, "cell count == 64 * 48")
    c.say()

    c.section("Tick Advancement")
    world.step(1)
    c.check(world.tick == 1, "step(1) -> tick == 1")
    world.step(9)
    c.check(world.tick == 10, "step(9) -> tick == 10")
    c.say()

    c.section("Snapshot (World Meta)")
    snap = api.read_snapshot(world, Channel.WORLD_META)
    packed = snap.pack()
    c.check(len(packed) == snap.size_bytes, "packed size matches sizeBytes")
    c.check(snap.version == api.WORLD_META_SNAPSHOT_VERSION, "snapshot version correct")
    c.check(snap.tick == 10, "snapshot tick == 10")
    c.check(snap.width == 64, "snapshot width == 64")
    c.check(snap.height == 48, "snapshot height == 48")
    c.check(snap.reserved == 0, "snapshot reserved == 0")
    c.check(api.WorldMetaSnapshot.unpack(packed) == snap, "snapshot round-trips")
    c.raises(ValueError, lambda: api.WorldMetaSnapshot.unpack(packed[:1]),
             "undersized snapshot data rejected")
    c.say()

    _check_math(c)

    c.section("Snapshot (Terrain & Occupancy)")
    cell_count = world.cell_count
    terrain = api.read_snapshot(world, Channel.TERRAIN)
    c.check(len(terrain) == cell_count, "terrain size == cellCount")
    c.check(not any(terrain), "terrain all zeros initially")
    occupancy = api.read_snapshot(world, Channel.OCCUPANCY)
    c.check(len(occupancy) == cell_count, "occupancy size == cellCount")
    c.check(not any(occupancy), "occupancy all zeros initially")
    c.say()

    c.section("Command Pipeline")
    id1 = api.submit_command(world, _set_cell(3, 2, Channel.TERRAIN, 42))
    c.check(id1 != 0, "valid command -> non-zero ID")
    world.step(1)
    c.check(world.tick == 11, "tick == 11 after step")

    results = api.read_command_results(world)
    c.check(len(results) == 1, "one result after step")
    result = results[0]
    c.check(result.command_id == id1, "result commandId matches submitted ID")
    c.check(result.tick_applied == 10, "tickApplied == 10")
    c.check(result.type == CommandType.DEBUG_SET_CELL_U8, "result type correct")
    c.check(result.accepted, "command accepted")
    c.check(result.reason == RejectReason.NONE, "no reject reason")

    target = 2 * 64 + 3
    terrain = api.read_snapshot(world, Channel.TERRAIN)
    c.check(terrain[target] == 42, "terrain(3,2) == 42 after command")
    c.check(
        all(v == 0 for i, v in enumerate(terrain) if i != target),
        "other terrain cells still zero",
    )

    reread = api.read_command_results(world)
    c.check(len(reread) == 1, "results re-read returns same count")
    c.check(reread[0].command_id == id1, "re-read commandId still matches")

    world.step(1)
    c.check(api.read_command_results(world) == [], "results cleared after next step")
    c.say()

    c.section("Command Rejections")
    id2 = api.submit_command(world, _set_cell(999, 2, Channel.TERRAIN, 7))
    c.check(id2 != 0, "OOB command -> non-zero ID (queued)")
    c.check(id2 > id1, "command IDs monotonic (id2 > id1)")
    world.step(1)
    result = api.read_command_results(world)[0]
    c.check(not result.accepted, "OOB command rejected")
    c.check(result.reason == RejectReason.INVALID_COORDS, "reject reason: INVALID_COORDS")
    terrain = api.read_snapshot(world, Channel.TERRAIN)
    c.check(terrain[target] == 42, "terrain(3,2) unchanged after OOB reject")

    id3 = api.submit_command(world, _set_cell(0, 0, 99, 7))
    c.check(id3 != 0, "invalid-channel command -> non-zero ID")
    c.check(id3 > id2, "command IDs monotonic (id3 > id2)")
    world.step(1)
    result = api.read_command_results(world)[0]
    c.check(not result.accepted, "invalid-channel rejected")
    c.check(result.reason == RejectReason.INVALID_CHANNEL, "reject reason: INVALID_CHANNEL")
    c.say()

    c.section("Structural Failures")
    c.raises(api.InvalidCommandError,
             lambda: api.submit_command(world, api.Command(type=9999)),
             "unknown type -> submission rejected")
    c.raises(api.InvalidCommandError,
             lambda: api.submit_command(
                 world, api.Command(type=CommandType.DEBUG_SET_CELL_U8, version=99)),
             "bad version -> submission rejected")
    world.step(1)
    c.check(api.read_command_results(world) == [], "no results from structural failures")
    c.say()

    c.section("Invalid Input")
    c.raises(ValueError, lambda: api.create_world(api.WorldDesc(width=0, height=48)),
             "create_world(0x48) rejected")
    c.raises(ValueError, lambda: api.create_world(api.WorldDesc(width=64, height=0)),
             "create_world(64x0) rejected")
    tick_before = world.tick
    world.step(0)
    c.check(world.tick == tick_before, "step(0) is a no-op")
    c.raises(ValueError, lambda: api.read_snapshot(world, 999),
             "read_snapshot(unknown channel) rejected")
    c.say()

    c.say(f"=== Results: {c.passed} passed, {c.failed} failed ===")
    return ValidationReport(passed=c.passed, failed=c.failed)


def main(argv: list[str] | None = None) -> int:
    """Run the validation and return 0 when every check passed, else 1."""
    parser = argparse.ArgumentParser(
        prog="axiomsim-headless",
        description="Run the engine validation checks and print a report.",
    )
    parser.parse_args(argv)
    report = run_validation(sys.stdout)
    return 0 if report.ok else 1