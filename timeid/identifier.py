"""Composite identifiers: encoded timestamp + delimiter + random suffix."""

from core.errors import InvalidInputError
from timeid.codec import TIMESTAMP_LENGTH, decode_encoded_timestamp, new_encoded_timestamp
from timeid.randomness import DEFAULT_LENGTH, new_random_suffix


class CompositeIdentifier:
    """Encoded timestamp, random suffix and the delimiter joining them."""

    __slots__ = ("timestamp", "randomness", "delimiter")

    def __init__(self, timestamp, randomness, delimiter=""):
        self.timestamp = timestamp
        self.randomness = randomness
        self.delimiter = delimiter

    @property
    def time(self):
        return self.timestamp.time

    @property
    def date(self):
        return self.timestamp.date

    @property
    def tid(self):
        return self.timestamp.encoded

    @property
    def value(self):
        return self.timestamp.encoded + self.delimiter + self.randomness

    def __str__(self):
        return self.value

    def __repr__(self):
        return f"CompositeIdentifier({self.value!r})"

    def __eq__(self, other):
        if not isinstance(other, CompositeIdentifier):
            return NotImplemented
        return self.value == other.value and self.delimiter == other.delimiter

    def __hash__(self):
        return hash((self.value, self.delimiter))

    def __lt__(self, other):
        if not isinstance(other, CompositeIdentifier):
            return NotImplemented
        return (self.tid, self.randomness) < (other.tid, other.randomness)

    def to_dict(self):
        date = self.date
        return {"id": self.value,
                "time": self.time,
                "date": date.isoformat() if date else None,
                "randomness": self.randomness,
                "delimiter": self.delimiter}


def _check_delimiter(delimiter):
    if not isinstance(delimiter, str):
        raise InvalidInputError(f"Expected str delimiter, received: {type(delimiter).__name__}", value=delimiter)


def new_composite(time=None, suffix_length=DEFAULT_LENGTH, delimiter="", prng=None):
    """Build a CompositeIdentifier for time (now when omitted)."""
    _check_delimiter(delimiter)
    timestamp = new_encoded_timestamp(time)
    return CompositeIdentifier(timestamp, new_random_suffix(suffix_length, prng), delimiter)


def new_identifier(time=None, suffix_length=DEFAULT_LENGTH, delimiter="", prng=None):
    """Generate an identifier string for time (now when omitted)."""
    return new_composite(time, suffix_length, delimiter, prng).value


def decode_identifier(text, delimiter=""):
    """Split an identifier into its parts. None if it does not parse.

    The delimiter must match exactly when given, which keeps ids made
    with a different delimiter from decoding. The suffix is returned
    as-is, without checking it against the alphabet.
    """
    if not isinstance(text, str) or not isinstance(delimiter, str):
        return None
    timestamp = decode_encoded_timestamp(text)
    if timestamp is None:
        return None
    start = TIMESTAMP_LENGTH + len(delimiter)
    if delimiter and text[TIMESTAMP_LENGTH:start] != delimiter:
        return None
    return CompositeIdentifier(timestamp, text[start:], delimiter)
