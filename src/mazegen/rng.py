from dataclasses import dataclass
from typing import Sequence, TypeVar

A = 16807
M = 0x7FFFFFFF  # 2^31-1

T = TypeVar("T")


def pm_next(state: int) -> int:
    return (state * A) % M


@dataclass
class PMRandom:
    """Park-Miller minimal standard generator.

    Every draw made by the generator goes through one of the helpers below,
    so a given seed yields the same dungeon on any platform or Python build.
    """
    state: int

    @classmethod
    def seeded(cls, seed: int) -> "PMRandom":
        # 0 and multiples of M are fixed points of the recurrence.
        s = seed % M
        return cls(s if s else 1)

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def below(self, n: int) -> int:
        """Uniform-ish integer in [0, n)."""
        if n <= 0:
            raise ValueError(f"below() needs a positive bound, got {n}")
        return self.next32() % n

    def between(self, lo: int, hi: int) -> int:
        """Integer in [lo, hi], both ends inclusive."""
        if hi < lo:
            raise ValueError(f"empty range [{lo}, {hi}]")
        return lo + self.below(hi - lo + 1)

    def chance(self, percent: int) -> bool:
        return self.below(100) < percent

    def choice(self, seq: Sequence[T]) -> T:
        if not seq:
            raise IndexError("choice from an empty sequence")
        return seq[self.below(len(seq))]
