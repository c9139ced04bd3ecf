# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
quote.py - Protecting bytes from later expansion passes.

Conventions:

  A string consisting of exactly CTLNUL is a quoted null string, i.e. ""
  after quoting.  The lexer passes a literal CTLNUL as CTLESC CTLNUL, and a
  literal CTLESC as CTLESC CTLESC.

There are two encodings:

  QuoteEscapes / DequoteEscapes - Only CTLESC, CTLNUL and (when IFS is empty)
  space are escaped.  For unquoted variable values that still go through
  splitting and globbing.

  QuoteString / DequoteString - Every character is escaped.  For values that
  must stay one field no matter what, e.g. the words of "$@".

Escaping is per character, not per byte: a multibyte character gets one
CTLESC in front of it and is copied as a unit.
"""

from ctlesc import mbchar
from ctlesc import util
from ctlesc.consts import (CTLESC, CTLNUL, CTLESC_S, QUOTED_NULL, SPACE_CH,
                           IsQuotedNull)

from typing import TYPE_CHECKING
if TYPE_CHECKING:
    from ctlesc.ifs import SeparatorSet

_NULL_DEBUG = util.NullDebugFile()


def _QuoteEscapes(s, ifs, nosplit):
    # type: (bytes, SeparatorSet, bool) -> bytes
    """
    Args:
      nosplit: True if the result won't be split.  Then a CTLESC or CTLNUL in
        IFS must still be escaped, or dequoting would remove it.
    """
    quote_spaces = ifs.IsEmpty()
    skip_ctlesc = not nosplit and ifs.Contains(CTLESC)
    skip_ctlnul = not nosplit and ifs.Contains(CTLNUL)

    # Worst case is every byte escaped: 2 * len(s)
    result = bytearray()
    n = len(s)
    i = 0
    while i < n:
        byte = s[i]
        if ((not skip_ctlesc and byte == CTLESC) or
                (not skip_ctlnul and byte == CTLNUL) or
                (quote_spaces and byte == SPACE_CH)):
            result.append(CTLESC)
        end = mbchar.NextChar(s, i)
        result.extend(s[i:end])
        i = end
    return bytes(result)


def QuoteEscapes(s, ifs):
    # type: (bytes, SeparatorSet) -> bytes
    """Escape CTLESC and CTLNUL in a variable value, but nothing else.

    This protects them from word splitting and globbing after the variable is
    expanded.  If IFS is empty, spaces are escaped too, because unquoted $@
    is eventually split on spaces.  Escaping a space that never gets split
    is harmless.

    Don't call this on a single- or double-quoted string, or a here doc.
    """
    return _QuoteEscapes(s, ifs, False)


def QuoteRhs(s, ifs):
    # type: (bytes, SeparatorSet) -> bytes
    """Like QuoteEscapes, for the right-hand side of an assignment."""
    return _QuoteEscapes(s, ifs, True)


def DequoteEscapes(s, ifs):
    # type: (bytes, SeparatorSet) -> bytes
    """Inverse of QuoteEscapes.

    Removes a CTLESC that protects CTLESC, CTLNUL, or (when IFS is empty) a
    space.  Any other CTLESC is left alone, including one at the end.

    Also used to remove doubled CTLESC inside quoted strings before quoting
    the whole string, so the number of CTLESC isn't doubled.
    """
    if CTLESC not in s:
        return bytes(s)

    quote_spaces = ifs.IsEmpty()

    result = bytearray()
    n = len(s)
    i = 0
    while i < n:
        if s[i] == CTLESC and i + 1 < n:
            next_byte = s[i + 1]
            if (next_byte == CTLESC or next_byte == CTLNUL or
                    (quote_spaces and next_byte == SPACE_CH)):
                i += 1
        end = mbchar.NextChar(s, i)
        result.extend(s[i:end])
        i = end
    return bytes(result)


def MakeQuotedChar(c):
    # type: (int) -> bytes
    """Quote a single byte.

    0 turns into QUOTED_NULL, so the caller should set word_f.HasQuotedNull
    on a word whose text is the result.
    """
    assert 0 <= c < 256, c
    if c == 0:
        return QUOTED_NULL
    return bytes(bytearray([CTLESC, c]))


def QuoteString(s):
    # type: (bytes) -> bytes
    """Escape every character of s.

    "" turns into QUOTED_NULL, so the caller should set word_f.HasQuotedNull
    on a word whose text is the result.
    """
    if len(s) == 0:
        return QUOTED_NULL

    result = bytearray()
    n = len(s)
    i = 0
    while i < n:
        result.append(CTLESC)
        end = mbchar.NextChar(s, i)
        result.extend(s[i:end])
        i = end
    return bytes(result)


def DequoteString(s, debug_f=_NULL_DEBUG):
    # type: (bytes, util._DebugFile) -> bytes
    """Inverse of QuoteString.

    A lone CTLESC is passed through unchanged.  Nothing should produce one,
    so it's reported to debug_f.
    """
    if s == CTLESC_S:
        debug_f.writeln('DequoteString: string with bare CTLESC')
        return bytes(s)

    if IsQuotedNull(s):
        return b''

    if CTLESC not in s:
        return bytes(s)

    result = bytearray()
    n = len(s)
    i = 0
    while i < n:
        if s[i] == CTLESC:
            i += 1
            if i == n:
                break  # trailing CTLESC escapes nothing
        end = mbchar.NextChar(s, i)
        result.extend(s[i:end])
        i = end
    return bytes(result)
