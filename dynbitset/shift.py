r"""In place shifts of word storage by an arbitrary number of bits.

A shift by ``n`` bits is split into a move of ``n // WORD_WIDTH`` whole words
followed by a shift of every word by the remaining ``n % WORD_WIDTH`` bits,
carrying the bits that fall off one word into its neighbor. Both steps read
words through the mask, so padding bits never travel into the significant
part of the vector.

Here's a left shift by 4 of two 8 bit words, the high word is processed
first so that it already holds its own shifted value when the carry of the
low word arrives::

    high 00110000  low 10110100
    low spill      00001011
    high           00000000 | 00001011 -> 00001011
    low            01000000

Shifting by at least the size of the vector clears it.

"""

from .words import WORD_MASK, WORD_WIDTH, WordStorage


def _check_amount(amount: int) -> None:
    if amount < 0:
        raise ValueError(f"negative shift count: {amount}")


def move_words_left(storage: WordStorage, count: int) -> None:
    """Move every word `count` words towards the most significant end."""
    bits, mask, nwords = storage.bits, storage.mask, storage.word_count
    for index in reversed(range(nwords)):
        target = index + count
        if target < nwords:
            bits[target] = bits[index] & mask[index]
        bits[index] = 0


def move_words_right(storage: WordStorage, count: int) -> None:
    """Move every word `count` words towards the least significant end."""
    bits, mask = storage.bits, storage.mask
    for index in range(storage.word_count):
        target = index - count
        if target >= 0:
            bits[target] = bits[index] & mask[index]
        bits[index] = 0


def shift_left(storage: WordStorage, amount: int) -> None:
    """Shift `storage` left by `amount` bits in place.

    Parameters
    ----------
    storage
        The words to shift.
    amount
        The number of bit positions to shift by.

    Raises
    ------
    ValueError
        If `amount` is negative.

    """
    _check_amount(amount)
    whole, remainder = divmod(amount, WORD_WIDTH)
    if whole:
        move_words_left(storage, whole)

    bits, mask, nwords = storage.bits, storage.mask, storage.word_count
    for index in reversed(range(nwords)):
        word = bits[index] & mask[index]
        spill = word >> (WORD_WIDTH - remainder) if remainder else 0
        bits[index] = (word << remainder) & WORD_MASK
        if index + 1 < nwords:
            bits[index + 1] |= spill


def shift_right(storage: WordStorage, amount: int) -> None:
    """Shift `storage` right by `amount` bits in place.

    Parameters
    ----------
    storage
        The words to shift.
    amount
        The number of bit positions to shift by.

    Raises
    ------
    ValueError
        If `amount` is negative.

    """
    _check_amount(amount)
    whole, remainder = divmod(amount, WORD_WIDTH)
    if whole:
        move_words_right(storage, whole)

    bits, mask = storage.bits, storage.mask
    for index in range(storage.word_count):
        word = bits[index] & mask[index]
        spill = (word << (WORD_WIDTH - remainder)) & WORD_MASK if remainder else 0
        bits[index] = word >> remainder
        if index:
            bits[index - 1] |= spill
