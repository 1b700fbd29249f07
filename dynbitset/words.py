"""Fixed-width word storage backing a bit vector.

A vector of ``size`` bits is stored in ``word_count`` unsigned words of
:data:`WORD_WIDTH` bits each. Word 0 holds the least significant bits. A
parallel array of mask words marks which bits of each word belong to the
vector: every mask word is all ones except the last one, which only has the
low ``size - (word_count - 1) * WORD_WIDTH`` bits set. The remaining bits of
the last word are padding, they may hold garbage (e.g. after a complement)
and must be masked off by anything that looks at more than a single bit.

"""

import operator
from array import array
from typing import Iterator

from .exceptions import InvalidSize

#: The number of bits in a storage word.
WORD_WIDTH = 64

#: A word with every bit set.
WORD_MASK = (1 << WORD_WIDTH) - 1

#: The :mod:`array` typecode of an unsigned 64 bit integer.
TYPECODE = "Q"


def word_count(size: int) -> int:
    """Return the number of words needed to store `size` bits."""
    return -(-size // WORD_WIDTH)


def last_mask(size: int) -> int:
    """Return the mask of the most significant word of a `size` bit vector.

    Parameters
    ----------
    size
        The number of bits in the vector, at least one.

    """
    assert size >= 1, f"size < 1: size == {size}"
    remainder = size % WORD_WIDTH
    return WORD_MASK >> (WORD_WIDTH - remainder) if remainder else WORD_MASK


def make_mask(size: int) -> array:
    """Return the mask words of a `size` bit vector."""
    mask = array(TYPECODE, [WORD_MASK]) * word_count(size)
    mask[-1] = last_mask(size)
    return mask


class WordStorage:
    """Two parallel arrays of words: the payload and its significance mask.

    Attributes
    ----------
    size
        The number of bits in the vector.
    word_count
        The number of words in `bits` and `mask`.
    bits
        The payload words, least significant word first.
    mask
        The mask words, one per payload word.

    """

    __slots__ = "size", "word_count", "bits", "mask"

    def __init__(self, size: int, seed: int = 0) -> None:
        """Construct zero filled storage for `size` bits.

        Parameters
        ----------
        size
            The number of bits to store.
        seed
            A value written to word 0 after truncation to one word. Bits of
            `seed` beyond the first word are dropped, they are never spread
            over the following words.

        Raises
        ------
        InvalidSize
            If `size` is less than one.

        """
        size = operator.index(size)
        if size < 1:
            raise InvalidSize(size)
        self.size = size
        self.word_count = word_count(size)
        self.bits = array(TYPECODE, [0]) * self.word_count
        self.mask = make_mask(size)
        self.bits[0] = operator.index(seed) & WORD_MASK

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, words={list(self.bits)})"

    def release(self) -> None:
        """Drop both word arrays. Releasing twice is harmless."""
        self.bits = array(TYPECODE)
        self.mask = array(TYPECODE)
        self.size = 0
        self.word_count = 0

    @property
    def released(self) -> bool:
        """Return whether :meth:`release` has been called."""
        return not self.word_count

    def copy(self) -> "WordStorage":
        """Return a deep copy of this storage, padding bits included."""
        duplicate = type(self)(self.size)
        for index, word in enumerate(self.bits):
            duplicate.bits[index] = word
        return duplicate

    def masked(self, index: int) -> int:
        """Return word `index` with its padding bits cleared."""
        return self.bits[index] & self.mask[index]

    def masked_words(self) -> Iterator[int]:
        """Iterate over every word with its padding bits cleared."""
        return map(operator.and_, self.bits, self.mask)

    def fill(self, word: int) -> None:
        """Overwrite every payload word with `word`."""
        bits = self.bits
        for index in range(self.word_count):
            bits[index] = word
