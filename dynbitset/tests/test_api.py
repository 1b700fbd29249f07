import io

import pytest

import dynbitset
from dynbitset.api import dump, dumps, load, loads
from dynbitset.bitvector import BitVector
from dynbitset.exceptions import InvalidSize, UnknownCharacter


def test_public_names() -> None:
    assert {"dump", "dumps", "load", "loads"} <= set(dynbitset.api.__all__)
    assert dynbitset.loads is loads


def test_load() -> None:
    stream = io.StringIO("101 0011\n\n  1\n")
    assert load(stream) == BitVector("101")
    assert load(stream) == BitVector("0011")
    assert load(stream) == BitVector("1")
    with pytest.raises(InvalidSize):
        load(stream)


def test_load_unknown_character() -> None:
    with pytest.raises(UnknownCharacter):
        load(io.StringIO("10x1"))


def test_loads() -> None:
    assert loads("  110 1").to_string() == "110"
    with pytest.raises(InvalidSize):
        loads("   ")


def test_dump(wide: BitVector) -> None:
    stream = io.StringIO()
    dump(wide, stream)
    dump(BitVector("01"), stream)
    assert stream.getvalue() == "0" * 6 + "1" * 64 + "01"


def test_dumps_round_trip(vector: BitVector) -> None:
    assert loads(dumps(vector)) == vector


def test_read_from_replaces_size() -> None:
    bv = BitVector(100).set()
    stream = io.StringIO("0110 1")
    assert bv.read_from(stream) is bv
    assert bv.size == 4
    assert bv.to_string() == "0110"

    bv.read_from(stream)
    assert bv == BitVector("1")


@pytest.mark.parametrize(
    ("text", "exception"), [("12", UnknownCharacter), ("", InvalidSize)]
)
def test_read_from_failure_leaves_vector(text: str, exception) -> None:
    bv = BitVector("11")
    with pytest.raises(exception):
        bv.read_from(io.StringIO(text))
    assert bv == BitVector("11")
