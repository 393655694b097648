import io
import re

import pytest

from axiomsim import api
from axiomsim.headless import main, run_validation


@pytest.fixture
def run():
    stream = io.StringIO()
    report = run_validation(stream)
    return report, stream.getvalue()


def test_all_checks_pass(run):
    report, _ = run
    assert report.failed == 0
    assert report.passed > 0
    assert report.ok is True


def test_no_failure_lines(run):
    _, text = run
    assert "[FAIL]" not in text


def test_pass_line_count_matches_report(run):
    report, text = run
    assert text.count("[PASS]") == report.passed


def test_summary_line(run):
    report, text = run
    assert f"=== Results: {report.passed} passed, 0 failed ===" in text


def test_abi_check_reported(run):
    _, text = run
    assert "  [PASS] ABI version matches" in text


def test_checksums_printed_match_engine(run):
    _, text = run
    printed = dict(
        (int(seed), int(value, 16))
        for seed, value in re.findall(r"checksum\((\d+)\)\s*= 0x([0-9A-F]{16})", text)
    )
    assert set(printed) == {0, 1, 2, 42, 1000}
    for seed, value in printed.items():
        assert value == api.math_selftest_checksum(seed)


def test_command_checks_reported(run):
    _, text = run
    assert "  [PASS] terrain(3,2) == 42 after command" in text
    assert "  [PASS] reject reason: INVALID_COORDS" in text
    assert "  [PASS] reject reason: INVALID_CHANNEL" in text


def test_main_returns_zero(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "failed ===" in out
    assert "[FAIL]" not in out


def test_main_rejects_unknown_argument(capsys):
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2


def test_runs_are_repeatable():
    first = run_validation(io.StringIO())
    second = run_validation(io.StringIO())
    assert first == second