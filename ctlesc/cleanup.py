# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
cleanup.py - Remove protection that's no longer needed.

Ordering is up to the caller, and nothing here checks it:

  - RemoveQuotedIfs runs only after it's decided that no splitting happens.
  - RemoveQuotedNulls runs only after every substitution that could produce
    a quoted null is done.

Running them too early gives wrong words, not an exception.
"""

import re

from ctlesc import mbchar
from ctlesc import quote
from ctlesc.consts import CTLESC, CTLNUL
from ctlesc.word import word_f

from typing import List, TYPE_CHECKING
if TYPE_CHECKING:
    from ctlesc.ifs import SeparatorSet
    from ctlesc.word import Word

_SENTINEL_RE = re.compile(b'[\x01\x7f]')


def RemoveQuotedIfs(s, ifs):
    # type: (bytes, SeparatorSet) -> bytes
    """Remove the CTLESC in front of IFS characters.

    They protect the characters from word splitting, so they have to go when
    no splitting takes place.  A CTLESC in front of anything else is still
    protecting it from a later pass, and stays.
    """
    result = bytearray()
    n = len(s)
    i = 0
    while i < n:
        if s[i] == CTLESC:
            i += 1
            if i == n or not ifs.Contains(s[i]):
                result.append(CTLESC)
            if i == n:
                break
        end = mbchar.NextChar(s, i)
        result.extend(s[i:end])
        i = end
    return bytes(result)


def RemoveQuotedNulls(buf):
    # type: (bytearray) -> bytearray
    """Remove unescaped CTLNUL bytes from buf, in place.

    Two indices: i scans the original bytes and j is where the next kept byte
    goes.  Once something has been removed, j < i, and the bytes between them
    have already been moved down.  Everything is read at i or later, so
    nothing is read after it has been overwritten.

    A stretch of bytes up to the next CTLESC or CTLNUL is moved with one
    slice assignment.  No multibyte character contains either sentinel, so
    such a stretch always ends on a character boundary.

    Returns buf.
    """
    assert isinstance(buf, bytearray), buf

    if CTLNUL not in buf:
        return buf

    n = len(buf)
    i = 0
    j = 0
    while i < n:
        if buf[i] == CTLNUL:
            i += 1
            continue

        start = i
        if buf[i] == CTLESC:
            # Keep the CTLESC and the whole character after it, which may be
            # a CTLNUL.
            i += 1
            if i < n:
                i = mbchar.NextChar(buf, i)
        else:
            m = _SENTINEL_RE.search(buf, i)
            i = m.start() if m else n

        if j < start:
            buf[j:j + i - start] = buf[start:i]
        j += i - start

    del buf[j:]
    return buf


def RemoveQuotedEscapes(buf, ifs):
    # type: (bytearray, SeparatorSet) -> bytearray
    """Remove the CTLESC protecting CTLESC or CTLNUL, in place.

    Returns buf.
    """
    assert isinstance(buf, bytearray), buf
    buf[:] = quote.DequoteEscapes(buf, ifs)
    return buf


def WordListRemoveQuotedNulls(words):
    # type: (List[Word]) -> None
    """RemoveQuotedNulls on each word.

    HasQuotedNull is cleared on every word, whether or not anything was
    removed.
    """
    for i in range(len(words)):
        w = words[i]
        w.text = bytes(RemoveQuotedNulls(bytearray(w.text)))
        w.ClearFlag(word_f.HasQuotedNull)
