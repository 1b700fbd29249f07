import io

import pytest

from dynbitset.bitvector import BitVector
from dynbitset.cli import apply, iter_vectors, main, parse_args, run, summarize


def test_parse_args_keeps_operation_order() -> None:
    args = parse_args(["101", "--shift-left", "2", "--flip", "0", "--set", "1"])
    assert args.tokens == ["101"]
    assert args.operations == [("shift_left", 2), ("flip", 0), ("set", 1)]
    assert args.tablefmt == "simple"
    assert not args.verbose


def test_parse_args_without_operations() -> None:
    args = parse_args([])
    assert args.tokens == []
    assert args.operations is None


def test_apply() -> None:
    bv = apply(BitVector("0110"), [("shift_right", 1), ("flip", 3), ("reset", 0)])
    assert bv.to_string() == "1010"


def test_iter_vectors() -> None:
    vectors = list(iter_vectors(["1", "10"], io.StringIO("111")))
    assert vectors == [BitVector("1"), BitVector("10")]

    vectors = list(iter_vectors([], io.StringIO(" 111\n0 \n")))
    assert vectors == [BitVector("111"), BitVector("0")]


def test_summarize() -> None:
    row = summarize(BitVector("0011"))
    assert row == ["0011", 4, 1, 2, True, False, False, 3]


def test_main(capsys: pytest.CaptureFixture) -> None:
    status = main(
        tokens=["10110", "0001"],
        operations=[("shift_left", 2)],
        tablefmt="plain",
    )
    assert status == 0
    out = capsys.readouterr().out
    assert "11000" in out
    assert "0100" in out


def test_main_stdin(capsys: pytest.CaptureFixture) -> None:
    status = main(
        tokens=[], operations=[], tablefmt="simple", stream=io.StringIO("101 0011\n")
    )
    assert status == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split()[0] == "value"
    assert len(lines) == 4
    assert lines[2].split()[0] == "101"
    assert lines[3].split()[0] == "0011"


def test_main_error(capsys: pytest.CaptureFixture) -> None:
    status = main(tokens=["12"], operations=[], tablefmt="plain")
    assert status == 1
    assert "unknown character" in capsys.readouterr().err


def test_main_out_of_range(capsys: pytest.CaptureFixture) -> None:
    status = main(tokens=["1"], operations=[("set", 5)], tablefmt="plain")
    assert status == 1
    assert "out of range" in capsys.readouterr().err


def test_run_exits(capsys: pytest.CaptureFixture) -> None:
    with pytest.raises(SystemExit) as excinfo:
        run(["1", "--flip", "0"])
    assert excinfo.value.code == 0
    assert "0" in capsys.readouterr().out
