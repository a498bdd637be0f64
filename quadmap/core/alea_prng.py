"""
Alea pseudo-random generator used by the mesh pipeline.

Based on Johannes Baagøe's Alea algorithm. One instance is created per
generation run and drives both randomized stages (triangle pair shuffling
and the per-iteration relaxation order), so a seed fully determines the
generated mesh.
"""

from typing import Any, MutableSequence


def _uint32(n):
    """Convert to unsigned 32-bit integer."""
    return int(n) & 0xFFFFFFFF


class AleaPRNG:
    """
    Seeded Alea generator with the shuffling helpers the pipeline needs.

    The state is three fractional registers and a carry; seeds are mashed
    as strings so ``AleaPRNG(7)`` and ``AleaPRNG("7")`` are equivalent.
    """

    def __init__(self, seed):
        """Initialize with a seed string, number or iterable of them."""
        self.call_count = 0
        self.seed = seed

        if hasattr(seed, "__iter__") and not isinstance(seed, str):
            args = list(seed)
        else:
            args = [seed]

        mash_n = 0xEFC8249D

        def mash(data):
            nonlocal mash_n
            for char in str(data):
                mash_n = mash_n + ord(char)
                h = 0.02519603282416938 * mash_n
                mash_n = _uint32(h)
                h -= mash_n
                h *= mash_n
                mash_n = _uint32(h)
                h -= mash_n
                mash_n += h * 0x100000000  # 2^32
            return _uint32(mash_n) * 2.3283064365386963e-10  # 2^-32

        self.s0 = mash(" ")
        self.s1 = mash(" ")
        self.s2 = mash(" ")
        self.c = 1

        for arg in args:
            self.s0 -= mash(arg)
            if self.s0 < 0:
                self.s0 += 1
            self.s1 -= mash(arg)
            if self.s1 < 0:
                self.s1 += 1
            self.s2 -= mash(arg)
            if self.s2 < 0:
                self.s2 += 1

    def random(self) -> float:
        """Generate next random number in [0, 1)."""
        self.call_count += 1
        t = 2091639 * self.s0 + self.c * 2.3283064365386963e-10  # 2^-32
        self.s0 = self.s1
        self.s1 = self.s2
        self.c = int(t)
        self.s2 = t - self.c
        return self.s2

    def randint(self, upper: int) -> int:
        """Random integer in [0, upper)."""
        return int(self.random() * upper)

    def shuffle(self, seq: MutableSequence[Any]) -> MutableSequence[Any]:
        """
        Shuffle a sequence in place (Fisher-Yates, from the tail).

        Consumes exactly ``len(seq) - 1`` draws. Returns the same sequence
        for convenience.
        """
        for i in range(len(seq) - 1, 0, -1):
            j = self.randint(i + 1)
            seq[i], seq[j] = seq[j], seq[i]
        return seq
