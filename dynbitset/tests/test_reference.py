import io

import pytest

from dynbitset.bitvector import BitVector
from dynbitset.exceptions import OutOfRange
from dynbitset.reference import BitReference


@pytest.fixture  # type: ignore[misc]
def bv() -> BitVector:
    return BitVector(10)


def test_read_through(bv: BitVector) -> None:
    ref = bv.reference(3)
    assert isinstance(ref, BitReference)
    assert not ref
    assert ref.value is False

    bv.set(3)
    assert ref
    assert ref.value is True


def test_write_through(bv: BitVector) -> None:
    ref = bv.reference(3)
    ref.value = True
    assert bv.test(3)

    assert ref.assign(False) is ref
    assert not bv.test(3)

    ref.assign(1)
    assert bv.test(3)
    assert bv.count() == 1


def test_invert_does_not_mutate(bv: BitVector) -> None:
    ref = bv.reference(3)
    assert ~ref is True
    assert not bv.test(3)


def test_flip(bv: BitVector) -> None:
    ref = bv.reference(9)
    assert ref.flip() is ref
    assert bv.test(9)
    ref.flip()
    assert not bv.test(9)


def test_equality(bv: BitVector) -> None:
    ref = bv.reference(0)
    assert ref == False  # noqa: E712
    ref.flip()
    assert ref == True  # noqa: E712
    assert ref == bv.reference(0)
    assert ref != bv.reference(1)
    with pytest.raises(TypeError):
        hash(ref)


def test_repr(bv: BitVector) -> None:
    ref = bv.reference(2)
    assert repr(ref) == "BitReference(position=2, value=False)"


def test_acquisition_out_of_range(bv: BitVector) -> None:
    with pytest.raises(OutOfRange):
        bv.reference(10)


def test_owner_rebuilt_smaller(bv: BitVector) -> None:
    ref = bv.reference(5)
    bv.read_from(io.StringIO("1"))
    with pytest.raises(OutOfRange):
        bool(ref)


def test_multiword_reference() -> None:
    bv = BitVector(70, ~0)
    ref = bv.reference(15)
    ref.flip()
    assert not ref
    bv.reference(10).value = False

    expected = ((1 << 64) - 1) & ~(1 << 15) & ~(1 << 10)
    assert bv.to_string() == format(expected, "070b")
