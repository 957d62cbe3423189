import pytest

from flagscan.argument_lookup import check_unknown_arguments
from flagscan.exceptions import UnrecognizedArgument


@pytest.mark.parametrize(
    "args",
    [
        ["prog"],
        ["prog", "--flag"],
        ["prog", "--flag=3"],
        ["prog", "--flag", "value"],
        ["prog", "--flag", "value", "--other=1"],
        ["prog", "--", "--junk", "stray"],
        ["prog", "--flag", "--", "stray"],
    ],
)
def test_check_unknown_arguments_accepts(args):
    check_unknown_arguments(["--flag", "--other"], None, args)


def test_check_unknown_arguments_rejects_unknown_flag():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--flag"], None, ["prog", "--other"])
    message = str(excinfo.value)
    assert excinfo.value.flag == "--other"
    assert message.splitlines() == [
        "Unrecognized command line argument --other.",
        "Recognized command line arguments:",
        "    --flag",
    ]


def test_check_unknown_arguments_mentions_mode():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--a", "--b"], "sample", ["prog", "--c"])
    assert excinfo.value.message.splitlines() == [
        "Unrecognized command line argument --c for mode sample.",
        "Recognized command line arguments for mode sample:",
        "    --a",
        "    --b",
    ]


def test_check_unknown_arguments_prefix_is_not_a_match():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--flag"], None, ["prog", "--flagx"])
    assert excinfo.value.flag == "--flagx"


def test_check_unknown_arguments_dash_token_is_not_a_value():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--flag"], None, ["prog", "--flag", "-v"])
    assert excinfo.value.flag == "-v"


def test_check_unknown_arguments_consumes_only_one_value():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--flag"], None, ["prog", "--flag", "value", "stray"])
    assert excinfo.value.flag == "stray"


def test_check_unknown_arguments_inline_value_does_not_consume_next():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--flag"], None, ["prog", "--flag=1", "stray"])
    assert excinfo.value.flag == "stray"


def test_check_unknown_arguments_reports_first_offender():
    with pytest.raises(UnrecognizedArgument) as excinfo:
        check_unknown_arguments(["--a"], None, ["prog", "--b", "--c"])
    assert excinfo.value.flag == "--b"


def test_check_unknown_arguments_ignores_program_name():
    check_unknown_arguments(["--a"], None, ["--not-known", "--a"])
