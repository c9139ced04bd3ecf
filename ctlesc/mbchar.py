# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
mbchar.py - Character boundaries in UTF-8 byte strings.

Every scan in the quoting passes copies whole characters, so that a CTLESC
is never inserted between the bytes of one character.  Unlike the strict
decoders used for ${#s} and slicing, these functions never fail: a byte that
doesn't begin a complete, well-formed sequence is a character of width 1.

All valid lead bytes are >= 0xC2 and all continuation bytes are >= 0x80, so
the sentinel bytes are always characters of their own.
"""


def Utf8CharLen(starting_byte):
    # type: (int) -> int
    """Length implied by a lead byte, or 0 if it can't start a character."""
    if (starting_byte >> 7) == 0b0:
        return 1
    elif 0xC2 <= starting_byte <= 0xDF:
        return 2
    elif (starting_byte >> 4) == 0b1110:
        return 3
    elif 0xF0 <= starting_byte <= 0xF4:
        return 4
    else:
        # Continuation byte, overlong lead (C0, C1), or out of range.
        return 0


# Narrower ranges for the byte after these leads.  They rule out overlong
# forms, surrogates, and code points above U+10FFFF.
_SECOND_BYTE_RANGE = {
    0xE0: (0xA0, 0xBF),
    0xED: (0x80, 0x9F),
    0xF0: (0x90, 0xBF),
    0xF4: (0x80, 0x8F),
}


def _IsContinuation(byte):
    # type: (int) -> bool
    return (byte >> 6) == 0b10


def CharWidth(s, i):
    # type: (bytes, int) -> int
    """Returns the byte length of the character starting at s[i].

    Precondition: 0 <= i < len(s).
    """
    n = Utf8CharLen(s[i])
    if n <= 1:
        return 1
    if i + n > len(s):
        return 1  # truncated

    lo, hi = _SECOND_BYTE_RANGE.get(s[i], (0x80, 0xBF))
    if not (lo <= s[i + 1] <= hi):
        return 1
    for j in range(i + 2, i + n):
        if not _IsContinuation(s[j]):
            return 1
    return n


def NextChar(s, i):
    # type: (bytes, int) -> int
    """Byte position after the character at s[i]."""
    return i + CharWidth(s, i)
