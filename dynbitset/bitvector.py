"""A bit vector whose width is chosen at runtime.

:class:`BitVector` offers the interface of a fixed-width bit register, bitwise
logic, shifts, single bit access, population count and conversion to and from
binary digit strings, for a number of bits that is only known once the program
runs.

>>> bv = BitVector(5, 0b10110)
>>> bv
BitVector('10110')
>>> bv[1], bv.count()
(True, 3)
>>> str(bv << 2)
'11000'

Vectors are not safe for concurrent mutation, callers sharing one between
threads must serialize access themselves.

"""

from __future__ import annotations

import logging
import operator
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    Optional,
    TextIO,
    Tuple,
    Union,
)

from .addressing import locate
from .conversion import parse, read_token, to_string
from .exceptions import SizeMismatch
from .protocols import WordSource
from .reference import BitReference
from .shift import shift_left, shift_right
from .words import WORD_MASK, WORD_WIDTH, WordStorage

logger = logging.getLogger(__name__)

UINT32_MASK = (1 << 32) - 1


def combine(
    left: WordSource, right: WordSource, op: Callable[[int, int], int]
) -> BitVector:
    """Combine `left` and `right` word by word with the binary function `op`.

    Parameters
    ----------
    left
        The left operand.
    right
        The right operand.
    op
        A function of two words returning a word, such as
        :func:`operator.and_`.

    Raises
    ------
    SizeMismatch
        If the operands do not have the same size.

    """
    if left.size != right.size:
        raise SizeMismatch(left.size, right.size)
    words = (
        op(left.masked_word(index), right.masked_word(index))
        for index in range(left.word_count)
    )
    return BitVector.from_words(left.size, words)


class BitVector:
    """A fixed size sequence of bits, with the size chosen at construction.

    Bit 0 is the least significant bit. Positions are checked against the
    size of the vector, there is no negative indexing.

    """

    __slots__ = ("_storage",)

    def __init__(self, size: Union[int, str] = WORD_WIDTH, seed: int = 0) -> None:
        """Construct a :class:`BitVector`.

        Parameters
        ----------
        size
            The number of bits, or a string of binary digits, most significant
            bit first, whose length becomes the size.
        seed
            The initial value of the low :data:`~dynbitset.words.WORD_WIDTH`
            bits. Higher bits of `seed` are dropped.

        Raises
        ------
        InvalidSize
            If `size` is less than one or an empty string.
        UnknownCharacter
            If `size` is a string holding anything but ``'0'`` and ``'1'``.

        """
        if isinstance(size, str):
            if seed:
                raise TypeError("seed cannot be combined with a string of digits")
            self._storage = parse(size)
        else:
            self._storage = WordStorage(size, seed)

    @classmethod
    def _from_storage(cls, storage: WordStorage) -> BitVector:
        vector = cls.__new__(cls)
        vector._storage = storage
        return vector

    @classmethod
    def from_string(cls, text: str) -> BitVector:
        """Construct a vector from binary digits, most significant bit first."""
        return cls._from_storage(parse(text))

    @classmethod
    def from_words(cls, size: int, words: Iterable[int]) -> BitVector:
        """Construct a `size` bit vector from little-endian words.

        Each word is truncated to :data:`~dynbitset.words.WORD_WIDTH` bits.
        Missing words are zero and words beyond the last one are ignored.

        """
        storage = WordStorage(size)
        for index, word in zip(range(storage.word_count), words):
            storage.bits[index] = operator.index(word) & WORD_MASK
        return cls._from_storage(storage)

    @classmethod
    def move(cls, source: BitVector) -> BitVector:
        """Transfer the bits of `source` into a new vector.

        `source` is left holding a fresh single zero bit.

        """
        storage = source._storage
        source._storage = WordStorage(1)
        logger.debug("moved %d bits out of vector %#x", storage.size, id(source))
        return cls._from_storage(storage)

    def copy(self) -> BitVector:
        """Return a copy of this vector that shares no storage with it."""
        return self._from_storage(self._storage.copy())

    def __copy__(self) -> BitVector:
        return self.copy()

    def __deepcopy__(self, memo: Dict[int, Any]) -> BitVector:
        return self.copy()

    def read_from(self, stream: TextIO) -> BitVector:
        """Replace this vector with the next binary digit token of `stream`.

        The size of the vector becomes the length of the token. If the token
        is not a valid vector this vector is left unchanged.

        Raises
        ------
        InvalidSize
            If `stream` holds no token.
        UnknownCharacter
            If the token holds anything but ``'0'`` and ``'1'``.

        """
        storage = parse(read_token(stream))
        previous, self._storage = self._storage, storage
        previous.release()
        logger.debug("rebuilt vector %#x with %d bits", id(self), storage.size)
        return self

    # Capacity and word access

    @property
    def size(self) -> int:
        """Return the number of bits in the vector."""
        return self._storage.size

    @property
    def word_count(self) -> int:
        """Return the number of storage words."""
        return self._storage.word_count

    def masked_word(self, index: int) -> int:
        """Return storage word `index` with its padding bits cleared."""
        return self._storage.masked(index)

    @property
    def words(self) -> Tuple[int, ...]:
        """Return every storage word with its padding bits cleared."""
        return tuple(self._storage.masked_words())

    def __len__(self) -> int:
        """Return the number of bits in the vector."""
        return self._storage.size

    # Single bit access

    def test(self, position: int) -> bool:
        """Return whether the bit at `position` is set.

        Raises
        ------
        OutOfRange
            If `position` is not a valid bit position.

        """
        index, bit = locate(position, self._storage.size)
        return bool(self._storage.bits[index] & bit)

    def __getitem__(self, position: int) -> bool:
        return self.test(position)

    def __setitem__(self, position: int, value: bool) -> None:
        self.set(position, value)

    def reference(self, position: int) -> BitReference:
        """Return a handle that reads and writes the bit at `position`.

        Raises
        ------
        OutOfRange
            If `position` is not a valid bit position.

        """
        locate(position, self._storage.size)
        return BitReference(self, operator.index(position))

    def __iter__(self) -> Iterator[bool]:
        """Iterate over the bits, least significant first."""
        return map(self.test, range(self._storage.size))

    # Modifiers

    def set(self, position: Optional[int] = None, value: bool = True) -> BitVector:
        """Set the bit at `position`, or every bit if `position` is None.

        Parameters
        ----------
        position
            The bit to modify.
        value
            Clear instead of setting when falsy.

        Raises
        ------
        OutOfRange
            If `position` is not a valid bit position.

        """
        storage = self._storage
        if position is None:
            storage.fill(WORD_MASK if value else 0)
            return self
        index, bit = locate(position, storage.size)
        if value:
            storage.bits[index] |= bit
        else:
            storage.bits[index] &= ~bit
        return self

    def reset(self, position: Optional[int] = None) -> BitVector:
        """Clear the bit at `position`, or every bit if `position` is None."""
        return self.set(position, False)

    def flip(self, position: Optional[int] = None) -> BitVector:
        """Toggle the bit at `position`, or every bit if `position` is None."""
        storage = self._storage
        if position is None:
            bits = storage.bits
            for index in range(storage.word_count):
                bits[index] ^= WORD_MASK
            return self
        index, bit = locate(position, storage.size)
        storage.bits[index] ^= bit
        return self

    # Queries

    def all(self) -> bool:
        """Return whether every bit is set."""
        storage = self._storage
        return all(map(operator.eq, storage.masked_words(), storage.mask))

    def any(self) -> bool:
        """Return whether at least one bit is set."""
        return any(self._storage.masked_words())

    def none(self) -> bool:
        """Return whether no bit is set."""
        return not self.any()

    def count(self) -> int:
        """Return the number of set bits."""
        return sum(bin(word).count("1") for word in self._storage.masked_words())

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BitVector):
            return NotImplemented
        return self.size == other.size and self.words == other.words

    def __ne__(self, other: Any) -> bool:
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None  # type: ignore[assignment]

    # Bitwise logic

    def __and__(self, other: Any) -> BitVector:
        if not isinstance(other, WordSource):
            return NotImplemented
        return combine(self, other, operator.and_)

    def __or__(self, other: Any) -> BitVector:
        if not isinstance(other, WordSource):
            return NotImplemented
        return combine(self, other, operator.or_)

    def __xor__(self, other: Any) -> BitVector:
        if not isinstance(other, WordSource):
            return NotImplemented
        return combine(self, other, operator.xor)

    __rand__ = __and__
    __ror__ = __or__
    __rxor__ = __xor__

    def _assign(self, other: BitVector) -> BitVector:
        previous, self._storage = self._storage, other._storage
        previous.release()
        return self

    def __iand__(self, other: Any) -> BitVector:
        if not isinstance(other, WordSource):
            return NotImplemented
        return self._assign(combine(self, other, operator.and_))

    def __ior__(self, other: Any) -> BitVector:
        if not isinstance(other, WordSource):
            return NotImplemented
        return self._assign(combine(self, other, operator.or_))

    def __ixor__(self, other: Any) -> BitVector:
        if not isinstance(other, WordSource):
            return NotImplemented
        return self._assign(combine(self, other, operator.xor))

    def __invert__(self) -> BitVector:
        """Return a copy of this vector with every bit toggled."""
        return self.copy().flip()

    # Shifts

    def shift_left(self, amount: int) -> BitVector:
        """Shift towards the most significant end by `amount` bits, in place.

        Bits shifted past the top are lost, zeros are shifted in.

        Raises
        ------
        ValueError
            If `amount` is negative.

        """
        shift_left(self._storage, operator.index(amount))
        return self

    def shift_right(self, amount: int) -> BitVector:
        """Shift towards bit 0 by `amount` bits, in place.

        Raises
        ------
        ValueError
            If `amount` is negative.

        """
        shift_right(self._storage, operator.index(amount))
        return self

    def __lshift__(self, amount: int) -> BitVector:
        return self.copy().shift_left(amount)

    def __rshift__(self, amount: int) -> BitVector:
        return self.copy().shift_right(amount)

    def __ilshift__(self, amount: int) -> BitVector:
        return self.shift_left(amount)

    def __irshift__(self, amount: int) -> BitVector:
        return self.shift_right(amount)

    # Conversion

    def to_string(self) -> str:
        """Return the bits as binary digits, most significant bit first."""
        return to_string(self._storage)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_string()!r})"

    def to_uint32(self) -> int:
        """Return the low 32 bits of the least significant word."""
        return self._storage.masked(0) & UINT32_MASK

    def to_uint64(self) -> int:
        """Return the low 64 bits of the least significant word."""
        return self._storage.masked(0)

    def debug_info(self) -> Dict[str, int]:
        """Return the size, word count and population count of the vector."""
        return dict(size=self.size, word_count=self.word_count, count=self.count())
