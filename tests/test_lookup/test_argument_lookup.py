import dataclasses
import sys

import pytest

from flagscan import ArgumentLookup
from flagscan.exceptions import (
    IntegerOutOfRange,
    MissingArgument,
    UnrecognizedArgument,
    UnrecognizedEnumValue,
)

ARGV = ["prog", "--shots=10", "--out", "result.txt", "--fast", "--", "--shots=99", "in.txt"]


def test_argument_lookup_binds_tuple():
    lookup = ArgumentLookup(ARGV)
    assert lookup.args == tuple(ARGV)
    assert lookup.program == "prog"


def test_argument_lookup_is_frozen():
    lookup = ArgumentLookup(ARGV)
    with pytest.raises(dataclasses.FrozenInstanceError):
        lookup.args = ("other",)


def test_argument_lookup_equality_ignores_exit_mode():
    assert ArgumentLookup(ARGV) == ArgumentLookup(tuple(ARGV), exit_on_error=True)


def test_argument_lookup_from_argv_defaults_to_sys_argv(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["tool", "--x=1"])
    lookup = ArgumentLookup.from_argv()
    assert lookup.args == ("tool", "--x=1")
    assert lookup.find("--x") == "1"


def test_argument_lookup_methods():
    lookup = ArgumentLookup(ARGV)
    assert lookup.boundary() == 5
    assert lookup.positional() == ("--shots=99", "in.txt")
    assert lookup.find("--out") == "result.txt"
    assert lookup.find("--missing") is None
    assert lookup.require("--out") == "result.txt"
    assert lookup.find_bool("--fast") is True
    assert lookup.find_int("--shots", 1, 1, 1000) == 10
    assert lookup.find_float("--rate", 0.5, 0.0, 1.0) == 0.5
    assert lookup.find_enum("--format", 2, ["01", "b8", "hits"]) == 2
    lookup.check_unknown(["--shots", "--out", "--fast"])


def test_argument_lookup_positional_without_terminator():
    lookup = ArgumentLookup(["prog", "--a"])
    assert lookup.positional() == ()


def test_argument_lookup_raises_by_default():
    lookup = ArgumentLookup(ARGV)
    with pytest.raises(IntegerOutOfRange):
        lookup.find_int("--shots", 1, 1, 5)
    with pytest.raises(MissingArgument):
        lookup.require("--missing")
    with pytest.raises(UnrecognizedArgument):
        lookup.check_unknown(["--shots"], "sample")
    with pytest.raises(UnrecognizedEnumValue):
        ArgumentLookup(["prog", "--format=x"]).find_enum("--format", 0, ["01"])


def test_argument_lookup_exit_on_error(capsys):
    lookup = ArgumentLookup(ARGV, exit_on_error=True)
    with pytest.raises(SystemExit) as exc_info:
        lookup.check_unknown(["--shots", "--out"], "sample")
    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "Unrecognized command line argument --fast for mode sample." in captured.err
    assert "    --out" in captured.err
    assert captured.out == ""


def test_argument_lookup_exit_on_error_returns_valid_values():
    lookup = ArgumentLookup(ARGV, exit_on_error=True)
    assert lookup.find_int("--shots", 1, 1, 1000) == 10
    assert lookup.require("--out") == "result.txt"
