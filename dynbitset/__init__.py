"""Top-level package for dynbitset."""

from dynbitset.api import *  # noqa: F401,F403
from dynbitset.bitvector import BitVector  # noqa: F401
from dynbitset.exceptions import (  # noqa: F401
    BitVectorError,
    ErrorKind,
    InvalidSize,
    OutOfRange,
    SizeMismatch,
    UnknownCharacter,
)
from dynbitset.reference import BitReference  # noqa: F401
from dynbitset.words import WORD_WIDTH  # noqa: F401

import importlib.metadata as importlib_metadata

__version__ = importlib_metadata.version(__name__)
