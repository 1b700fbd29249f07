import pytest

from dynbitset.exceptions import (
    BitVectorError,
    ErrorKind,
    InvalidSize,
    OutOfRange,
    SizeMismatch,
    UnknownCharacter,
)


@pytest.mark.parametrize(
    ("error", "kind", "base"),
    [
        (InvalidSize(0), ErrorKind.INVALID_SIZE, ValueError),
        (OutOfRange(70, 70), ErrorKind.OUT_OF_RANGE, IndexError),
        (SizeMismatch(3, 5), ErrorKind.SIZE_MISMATCH, ValueError),
        (UnknownCharacter("x", 2), ErrorKind.UNKNOWN_CHARACTER, ValueError),
    ],
)
def test_taxonomy(error: BitVectorError, kind: ErrorKind, base: type) -> None:
    assert isinstance(error, BitVectorError)
    assert isinstance(error, base)
    assert error.kind is kind


def test_messages() -> None:
    assert str(InvalidSize(0)) == "invalid bit vector size, must be >= 1: size == 0"
    assert str(OutOfRange(70, 70)) == "position out of range: position == 70, size == 70"
    assert str(SizeMismatch(3, 5)) == "bit vector sizes differ: 3 != 5"
    assert str(UnknownCharacter("x", 2)) == (
        "unknown character 'x' at offset 2, expected '0' or '1'"
    )
