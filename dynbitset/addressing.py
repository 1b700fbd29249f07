"""Map a logical bit position to a storage word and an in-word mask."""

import operator
from typing import Tuple

from .exceptions import OutOfRange
from .words import WORD_WIDTH


def locate(position: int, size: int) -> Tuple[int, int]:
    """Return the word index and the single bit mask of `position`.

    Parameters
    ----------
    position
        A logical bit position, bit 0 being the least significant.
    size
        The number of bits in the vector being addressed.

    Raises
    ------
    OutOfRange
        If `position` is negative or not less than `size`.

    """
    position = operator.index(position)
    if not 0 <= position < size:
        raise OutOfRange(position, size)
    word_index, offset = divmod(position, WORD_WIDTH)
    return word_index, 1 << offset
