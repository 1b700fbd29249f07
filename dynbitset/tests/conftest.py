from __future__ import annotations

import pytest

from dynbitset.bitvector import BitVector

SIZES = [1, 5, 63, 64, 65, 70, 128, 130]


def pattern(size: int) -> str:
    """Return a deterministic, irregular string of `size` binary digits."""
    return "".join("1011001"[(i * 3) % 7] for i in range(size))


def as_int(vector: BitVector) -> int:
    return int(vector.to_string(), 2)


@pytest.fixture(params=SIZES)  # type: ignore[misc]
def size(request: pytest.FixtureRequest) -> int:
    return request.param


@pytest.fixture  # type: ignore[misc]
def vector(size: int) -> BitVector:
    return BitVector.from_string(pattern(size))


@pytest.fixture  # type: ignore[misc]
def wide() -> BitVector:
    return BitVector(70, ~0)
