"""Protocol classes describing what bitwise logic needs from its operands."""

import abc

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class WordSource(Protocol):
    """An object exposing its bits as masked little-endian words."""

    @property
    @abc.abstractmethod
    def size(self) -> int:
        """Return the number of bits."""

    @property
    @abc.abstractmethod
    def word_count(self) -> int:
        """Return the number of words."""

    @abc.abstractmethod
    def masked_word(self, index: int) -> int:
        """Return word `index` with its padding bits cleared."""
