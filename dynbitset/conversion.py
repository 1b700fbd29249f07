"""Conversion between word storage and binary digit strings."""

import functools
import itertools
from typing import TextIO

import toolz

from .exceptions import UnknownCharacter
from .words import WORD_WIDTH, WordStorage

DIGITS = frozenset("01")


def read_token(stream: TextIO) -> str:
    """Read one whitespace delimited token from `stream`.

    Leading whitespace is skipped and the whitespace character ending the
    token is consumed. Return the empty string if `stream` is exhausted.

    """
    characters = iter(functools.partial(stream.read, 1), "")
    characters = itertools.dropwhile(str.isspace, characters)
    return "".join(itertools.takewhile(toolz.complement(str.isspace), characters))


def format_word(word: int, width: int) -> str:
    """Return `word` as `width` binary digits, most significant bit first.

    `word` must already be masked to its low `width` bits.

    """
    return format(word, f"0{width}b")


def to_string(storage: WordStorage) -> str:
    """Render `storage` as ``storage.size`` binary digits, MSB first.

    The highest word is rendered first; only its significant bits are
    rendered, every other word contributes :data:`WORD_WIDTH` digits.

    """
    top = storage.word_count - 1
    top_width = storage.size - top * WORD_WIDTH
    widths = [WORD_WIDTH] * top + [top_width]
    words = storage.masked_words()
    return "".join(reversed(list(map(format_word, words, widths))))


def parse(text: str) -> WordStorage:
    """Build word storage from the binary digit string `text`.

    The character at offset ``i`` becomes logical bit ``len(text) - 1 - i``.

    Raises
    ------
    InvalidSize
        If `text` is empty.
    UnknownCharacter
        If `text` contains something other than ``'0'`` and ``'1'``.

    """
    for offset, character in enumerate(text):
        if character not in DIGITS:
            raise UnknownCharacter(character, offset)

    storage = WordStorage(len(text))
    # walk the digits from the least significant end, one word at a time
    chunks = toolz.partition_all(WORD_WIDTH, reversed(text))
    for index, chunk in enumerate(chunks):
        storage.bits[index] = int("".join(reversed(chunk)), 2)
    return storage
