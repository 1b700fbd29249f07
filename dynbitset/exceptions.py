"""Errors raised by :class:`~dynbitset.bitvector.BitVector` operations."""

import enum
from typing import ClassVar


class ErrorKind(enum.Enum):
    """The kind of failure signaled by a :class:`BitVectorError`."""

    INVALID_SIZE = "invalid size"
    OUT_OF_RANGE = "out of range"
    SIZE_MISMATCH = "size mismatch"
    UNKNOWN_CHARACTER = "unknown character"


class BitVectorError(Exception):
    """Base class of every bit vector error.

    Attributes
    ----------
    kind
        The :class:`ErrorKind` of this error, for callers that would rather
        dispatch on a value than on the exception type.

    """

    kind: ClassVar[ErrorKind]


class InvalidSize(BitVectorError, ValueError):
    """The requested bit width is less than one."""

    kind = ErrorKind.INVALID_SIZE

    def __init__(self, size: int) -> None:
        super().__init__(f"invalid bit vector size, must be >= 1: size == {size}")
        self.size = size


class OutOfRange(BitVectorError, IndexError):
    """A bit position is not less than the size of the vector."""

    kind = ErrorKind.OUT_OF_RANGE

    def __init__(self, position: int, size: int) -> None:
        super().__init__(
            f"position out of range: position == {position}, size == {size}"
        )
        self.position = position
        self.size = size


class SizeMismatch(BitVectorError, ValueError):
    """The operands of a binary logic operation differ in size."""

    kind = ErrorKind.SIZE_MISMATCH

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"bit vector sizes differ: {left} != {right}")
        self.left = left
        self.right = right


class UnknownCharacter(BitVectorError, ValueError):
    """A string contains something other than ``'0'`` and ``'1'``."""

    kind = ErrorKind.UNKNOWN_CHARACTER

    def __init__(self, character: str, offset: int) -> None:
        super().__init__(
            f"unknown character {character!r} at offset {offset:d}, "
            "expected '0' or '1'"
        )
        self.character = character
        self.offset = offset
