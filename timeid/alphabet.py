"""
Sort-preserving 64-symbol alphabet.

Symbols are in ascending byte order, so comparing encoded strings
compares the numbers they encode.
"""

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz~"

# symbol -> index
CHAR_MAP = {char: index for index, char in enumerate(ALPHABET)}

# byte value -> index, -1 outside the alphabet
ASCII_LOOKUP = tuple(CHAR_MAP.get(chr(code), -1) for code in range(128))

# 12-bit value -> two symbols, low 6 bits first
PAIR_TABLE = tuple(ALPHABET[i & 0x3F] + ALPHABET[(i >> 6) & 0x3F] for i in range(4096))


def symbol_index(char):
    """Index of a single character, or -1 if it is not a symbol."""
    code = ord(char)
    if code > 127:
        return -1
    return ASCII_LOOKUP[code]
