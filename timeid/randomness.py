"""Random symbol suffixes drawn from the SFC32 generator."""

import math

from timeid.alphabet import ALPHABET, PAIR_TABLE
from timeid.prng import get_prng

DEFAULT_LENGTH = 12
MIN_LENGTH = 12
MAX_LENGTH = 1024


def clamp_length(length):
    """Coerce a requested suffix length into [MIN_LENGTH, MAX_LENGTH]."""
    if length is None or (isinstance(length, float) and math.isnan(length)):
        return DEFAULT_LENGTH
    if length < MIN_LENGTH:
        return MIN_LENGTH
    if length > MAX_LENGTH:
        return MAX_LENGTH
    return int(length)


def new_random_suffix(length=DEFAULT_LENGTH, prng=None):
    """Random string of clamp_length(length) symbols.

    Each draw yields two 12-bit pair lookups (four symbols); an odd
    final symbol comes from the low 6 bits of one more draw.
    """
    length = clamp_length(length)
    draw = (prng or get_prng()).next_uint32
    pairs, odd = divmod(length, 2)

    parts = []
    for _ in range(pairs // 2):
        r = draw()
        parts.append(PAIR_TABLE[r & 0xFFF])
        parts.append(PAIR_TABLE[(r >> 12) & 0xFFF])
    if pairs % 2:
        parts.append(PAIR_TABLE[draw() & 0xFFF])
    if odd:
        parts.append(ALPHABET[draw() & 0x3F])
    return "".join(parts)
