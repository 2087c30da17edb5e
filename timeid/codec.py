"""
Timestamp codec.

A millisecond timestamp is written as 8 symbols of 6 bits each,
most significant first: 48 bits in total, good until roughly year 10889.
Larger values wrap modulo 2**48 and are not rejected.
"""

import math
from datetime import datetime

from core.errors import InvalidInputError
from timeid.alphabet import ALPHABET, symbol_index
from utils.timestamp import from_millis, now_millis, to_millis

TIMESTAMP_LENGTH = 8
TIMESTAMP_BITS = 48
TIMESTAMP_MASK = (1 << TIMESTAMP_BITS) - 1

# datetime stops at 9999-12-31, the codec does not
MAX_DATE_MILLIS = 253402300799999


class EncodedTimestamp:
    """A timestamp together with its 8-symbol encoding."""

    __slots__ = ("time", "encoded")

    def __init__(self, time, encoded):
        self.time = time
        self.encoded = encoded

    @property
    def date(self):
        """UTC datetime, or None past the range datetime can hold."""
        if self.time > MAX_DATE_MILLIS:
            return None
        return from_millis(self.time)

    def __str__(self):
        return self.encoded

    def __repr__(self):
        return f"EncodedTimestamp(time={self.time}, encoded={self.encoded!r})"

    def __eq__(self, other):
        if not isinstance(other, EncodedTimestamp):
            return NotImplemented
        return self.time == other.time and self.encoded == other.encoded

    def __hash__(self):
        return hash((self.time, self.encoded))


def to_epoch_millis(time):
    """Validate a time value and return it as integer milliseconds."""
    if isinstance(time, datetime):
        millis = to_millis(time)
    elif isinstance(time, bool) or not isinstance(time, (int, float)):
        raise InvalidInputError(f"Expected int, float or datetime, received: {type(time).__name__}", value=time)
    elif isinstance(time, float):
        if not math.isfinite(time) or not time.is_integer():
            raise InvalidInputError(f"Expected a whole number of milliseconds, received: {time!r}", value=time)
        millis = int(time)
    else:
        millis = time

    if millis < 0:
        raise InvalidInputError(f"Expected a non-negative timestamp, received: {millis}", value=time)
    return millis


def encode_timestamp(time):
    """Encode milliseconds (or a datetime) as 8 sortable symbols."""
    value = to_epoch_millis(time) & TIMESTAMP_MASK
    return "".join(ALPHABET[(value >> shift) & 0x3F] for shift in range(42, -1, -6))


def encode_timestamp_now(time=None):
    return encode_timestamp(now_millis() if time is None else time)


def decode_timestamp(text):
    """Decode the first 8 symbols of text. None if they are not a timestamp.

    Trailing characters are ignored, so a full identifier decodes to
    its timestamp without knowing the suffix length.
    """
    if not isinstance(text, str) or len(text) < TIMESTAMP_LENGTH:
        return None
    value = 0
    for char in text[:TIMESTAMP_LENGTH]:
        index = symbol_index(char)
        if index < 0:
            return None
        value = value * 64 + index
    return value


def new_encoded_timestamp(time=None):
    millis = now_millis() if time is None else to_epoch_millis(time)
    return EncodedTimestamp(millis, encode_timestamp(millis))


def decode_encoded_timestamp(text):
    value = decode_timestamp(text)
    if value is None:
        return None
    return EncodedTimestamp(value, text[:TIMESTAMP_LENGTH])
