from timeid.alphabet import ALPHABET, CHAR_MAP
from timeid.codec import (
    EncodedTimestamp,
    decode_encoded_timestamp,
    decode_timestamp,
    encode_timestamp,
    encode_timestamp_now,
    new_encoded_timestamp,
)
from timeid.identifier import CompositeIdentifier, decode_identifier, new_composite, new_identifier
from timeid.prng import Sfc32, get_prng
from timeid.randomness import clamp_length, new_random_suffix

__all__ = [
    "ALPHABET",
    "CHAR_MAP",
    "CompositeIdentifier",
    "EncodedTimestamp",
    "Sfc32",
    "clamp_length",
    "decode_encoded_timestamp",
    "decode_identifier",
    "decode_timestamp",
    "encode_timestamp",
    "encode_timestamp_now",
    "get_prng",
    "new_composite",
    "new_encoded_timestamp",
    "new_identifier",
    "new_random_suffix",
]
