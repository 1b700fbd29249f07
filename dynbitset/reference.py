"""A handle to a single bit of a :class:`~dynbitset.bitvector.BitVector`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:  # pragma: no cover
    from .bitvector import BitVector


class BitReference:
    """Read and write one bit of a vector through a handle.

    Instances are returned by :meth:`~dynbitset.bitvector.BitVector.reference`,
    which has already checked the position. A reference does not own the
    vector, it is only meaningful while the vector keeps at least
    ``position + 1`` bits; after a smaller rebuild (e.g. through
    :meth:`~dynbitset.bitvector.BitVector.read_from`) using it is a caller
    error.

    Attributes
    ----------
    owner
        The vector whose bit this reference reads and writes.
    position
        The logical position of the bit.

    """

    __slots__ = "owner", "position"

    def __init__(self, owner: BitVector, position: int) -> None:
        self.owner = owner
        self.position = position

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position}, value={self.value})"

    def __bool__(self) -> bool:
        return self.owner.test(self.position)

    def __invert__(self) -> bool:
        """Return the negation of the current value, without mutating it."""
        return not self

    def __eq__(self, other: Any) -> bool:
        return bool(self) == other

    def __ne__(self, other: Any) -> bool:
        return not (self == other)

    __hash__ = None  # type: ignore[assignment]

    @property
    def value(self) -> bool:
        """Return the current value of the bit."""
        return bool(self)

    @value.setter
    def value(self, value: bool) -> None:
        self.assign(value)

    def assign(self, value: bool) -> BitReference:
        """Set the bit when `value` is truthy, clear it otherwise."""
        self.owner.set(self.position, value)
        return self

    def flip(self) -> BitReference:
        """Toggle the bit in the owning vector."""
        self.owner.flip(self.position)
        return self
