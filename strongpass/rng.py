"""
strongpass.rng
Bounded integers and shuffling on top of the OS CSPRNG (Python's secrets module).

The default source can be swapped for a deterministic one in tests.
"""

import secrets
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def randbits32(self) -> int:
        """Return an unsigned 32-bit integer."""
        ...


class SystemRandomSource:
    """Production source: secrets.randbits reads os.urandom and is thread-safe."""

    def randbits32(self) -> int:
        return secrets.randbits(32)


_default_source: RandomSource = SystemRandomSource()


def get_default_source() -> RandomSource:
    return _default_source


def set_default_source(source: Optional[RandomSource]) -> RandomSource:
    """
    Replace the process-wide source and return the previous one.
    Passing None restores the system source.
    """
    global _default_source
    previous = _default_source
    _default_source = source if source is not None else SystemRandomSource()
    return previous


def secure_random_int(upper: int, source: Optional[RandomSource] = None) -> int:
    """
    Return an integer in [0, upper).

    One 32-bit word reduced modulo upper. For the pool sizes used here
    (upper <= 88) the modulo bias is below 2**-25 and is kept as is.
    """
    if upper <= 0:
        raise ValueError("upper must be > 0")
    src = source or _default_source
    return src.randbits32() % upper


def secure_choice(pool: Sequence[T], source: Optional[RandomSource] = None) -> T:
    return pool[secure_random_int(len(pool), source)]


def secure_shuffle(sequence: Sequence[T], source: Optional[RandomSource] = None) -> List[T]:
    """
    Fisher-Yates shuffle over a copy of sequence. The input is never mutated.
    """
    shuffled = list(sequence)
    for i in range(len(shuffled) - 1, 0, -1):
        j = secure_random_int(i + 1, source)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
