# 64-bit PRNG engines for deterministic sims (no external deps)
# MCG128 plus two SFC variants; all of them are statistical-quality only.
import struct
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple, Type

MASK32 = (1 << 32) - 1
MASK64 = (1 << 64) - 1

MCG128_MULTIPLIER = 15750249268501108917  # 0xDA942042E4DD58B5
PCG_MULTIPLIER = 6364136223846793005
PCG_INCREMENT = 1442695040888963407

MCG128_WARMUP = 20
SFC_WARMUP = 12


def rotl64(x: int, r: int) -> int:
    r &= 63
    return ((x << r) | (x >> ((64 - r) & 63))) & MASK64


def rotr64(x: int, r: int) -> int:
    r &= 63
    return ((x >> r) | (x << ((64 - r) & 63))) & MASK64


def _mul128(a_hi: int, a_lo: int, b_hi: int, b_lo: int) -> Tuple[int, int]:
    """Low 128 bits of a 128x128 product, as (hi, lo) 64-bit halves.

    The low 64x64 product is assembled from four 32x32->64 partial products
    with explicit carries; the cross terms only reach the high half.
    """
    a0, a1 = a_lo & MASK32, a_lo >> 32
    b0, b1 = b_lo & MASK32, b_lo >> 32

    p00 = a0 * b0
    p01 = a0 * b1
    p10 = a1 * b0
    p11 = a1 * b1

    mid = (p00 >> 32) + (p01 & MASK32) + (p10 & MASK32)
    lo = ((mid & MASK32) << 32) | (p00 & MASK32)
    hi = p11 + (p01 >> 32) + (p10 >> 32) + (mid >> 32)

    hi = (hi + a_lo * b_hi + a_hi * b_lo) & MASK64
    return hi, lo


def double_from_bits(bits: int) -> float:
    """Reinterpret a raw 64-bit pattern as an IEEE-754 binary64 value."""
    return struct.unpack("<d", struct.pack("<Q", bits & MASK64))[0]


class RngId(str, Enum):
    MCG128 = "mcg128"
    SFC_COUNTER = "sfc64"
    SFC_PCG_COUNTER = "sfc64-pcg"


class Prng:
    """Common surface for the engines: subclasses provide ``next_u64``."""

    def next_u64(self) -> int:
        raise NotImplementedError

    def rand32(self) -> int:
        # top half; the low bits are the weaker ones for these generators
        return self.next_u64() >> 32

    def rand52(self) -> int:
        return self.next_u64() >> 12

    def frand(self) -> float:
        """Uniform double in [0, 1) with all 52 mantissa bits random."""
        return double_from_bits((0x3FF << 52) | self.rand52()) - 1.0


@dataclass
class MCG128(Prng):
    seed: int
    hi: int = field(init=False, default=0)
    lo: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        s = self.seed & MASK64
        self.hi = s
        self.lo = s | 1  # multiplicative generators need an odd state
        for _ in range(MCG128_WARMUP):
            self.next_u64()

    def next_u64(self) -> int:
        self.hi, self.lo = _mul128(self.hi, self.lo, 0, MCG128_MULTIPLIER)
        return rotr64(self.hi ^ self.lo, self.hi >> 58)


@dataclass
class SFCCounter(Prng):
    seed: int
    a: int = field(init=False, default=0)
    b: int = field(init=False, default=0)
    c: int = field(init=False, default=0)
    counter: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        s = self.seed & MASK64
        self.a = self.b = self.c = s
        self.counter = self._initial_counter(s)
        for _ in range(SFC_WARMUP):
            self.next_u64()

    def _initial_counter(self, seed: int) -> int:
        return 1

    def _counter_feed(self) -> int:
        value = self.counter
        self.counter = (self.counter + 1) & MASK64
        return value

    def next_u64(self) -> int:
        tmp = (self.a + self.b + self._counter_feed()) & MASK64
        self.a = self.b ^ (self.b >> 11)
        self.b = (self.c + (self.c << 3)) & MASK64
        self.c = (rotl64(self.c, 24) + tmp) & MASK64
        return tmp


@dataclass
class SFCPCGCounter(SFCCounter):
    """SFC with the monotonic counter swapped for a permuted LCG stream."""

    def _initial_counter(self, seed: int) -> int:
        return seed

    def _counter_feed(self) -> int:
        value = rotr64(self.counter, self.counter >> 58)
        self.counter = (self.counter * PCG_MULTIPLIER + PCG_INCREMENT) & MASK64
        return value


RNG_ENGINES: Dict[RngId, Type[Prng]] = {
    RngId.MCG128: MCG128,
    RngId.SFC_COUNTER: SFCCounter,
    RngId.SFC_PCG_COUNTER: SFCPCGCounter,
}

RNG_CHOICES = [rng_id.value for rng_id in RngId]


def make_rng(rng_id: RngId, seed: int) -> Prng:
    """Seed a fresh engine for ``rng_id``."""
    return RNG_ENGINES[rng_id](seed)
