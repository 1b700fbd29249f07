"""Reading and writing bit vectors as binary digit text.

A vector is written as exactly :meth:`~dynbitset.bitvector.BitVector.to_string`
and read back as one whitespace delimited token, so several vectors can share
a stream:

>>> import io
>>> stream = io.StringIO("101 0011\\n")
>>> load(stream), load(stream)
(BitVector('101'), BitVector('0011'))

"""

from __future__ import annotations

import io
import logging
from typing import TextIO

from public import public

from .bitvector import BitVector
from .conversion import read_token

logger = logging.getLogger(__name__)


@public
def load(stream: TextIO) -> BitVector:
    """Read the next vector from `stream`.

    Parameters
    ----------
    stream
        A text stream positioned before a token of ``'0'`` and ``'1'``
        characters, optionally preceded by whitespace.

    Raises
    ------
    InvalidSize
        If `stream` is exhausted before a token starts.
    UnknownCharacter
        If the token holds anything but ``'0'`` and ``'1'``.

    """
    token = read_token(stream)
    logger.debug("read %d character token", len(token))
    return BitVector.from_string(token)


@public
def loads(text: str) -> BitVector:
    """Read the first vector of `text`."""
    return load(io.StringIO(text))


@public
def dump(vector: BitVector, stream: TextIO) -> None:
    """Write `vector` to `stream` as binary digits, most significant first."""
    stream.write(vector.to_string())


@public
def dumps(vector: BitVector) -> str:
    """Return `vector` as binary digits, most significant first."""
    return vector.to_string()
