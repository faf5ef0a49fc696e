"""Bias-free samplers layered on the PRNG engines."""

from typing import Optional, Sequence

from .prng import MASK32, Prng


def bounded(rng: Prng, range_: int) -> int:
    """Unbiased integer in ``[0, range_)`` via Lemire's multiply-high rejection.

    ``range_`` must satisfy ``1 <= range_ < 2**32``. Draws are rejected only
    while the low word falls under ``2**32 mod range_``, so the result is
    exactly uniform without a division on the fast path.
    """
    m = rng.rand32() * range_
    low = m & MASK32
    if low < range_:
        threshold = ((1 << 32) - range_) % range_
        while low < threshold:
            m = rng.rand32() * range_
            low = m & MASK32
    return m >> 32


def sample_cdf(rng: Prng, m: int, cdf: Optional[Sequence[float]] = None) -> int:
    """Bucket index in ``[0, m)``; uniform when ``cdf`` is None.

    ``cdf`` carries ``m - 1`` non-decreasing cumulative probabilities, the
    last bucket taking whatever mass remains.
    """
    if cdf is None:
        return bounded(rng, m)

    r = rng.frand()
    for i, edge in enumerate(cdf):
        if r < edge:
            return i
    return m - 1


def nth_set_bit(mask: int, k: int) -> int:
    """Single-bit mask of the ``k``-th (0-indexed) set bit, scanning from bit 0."""
    while mask:
        lowest = mask & -mask
        if k == 0:
            return lowest
        k -= 1
        mask ^= lowest
    return 0


def pick_from_mask(
    rng: Prng,
    mask: int,
    population: int,
    cdf: Optional[Sequence[float]] = None,
) -> int:
    # population must equal popcount(mask); callers guarantee it
    return nth_set_bit(mask, sample_cdf(rng, population, cdf))


def popcount(mask: int) -> int:
    return bin(mask).count("1")
