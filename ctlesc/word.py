# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
word.py - Words, and the quoting passes applied to lists of them.

A word list is an ordinary Python list.  The passes here replace each word's
text and adjust its flags, but they never add, remove, reorder, or replace
Word objects, because argv order and the identity of each word matter to the
caller.
"""

from ctlesc import quote
from ctlesc import util
from ctlesc.consts import IsQuotedNull

from typing import List, TYPE_CHECKING
if TYPE_CHECKING:
    from ctlesc.ifs import SeparatorSet

_NULL_DEBUG = util.NullDebugFile()


class word_f(object):
    """Bit flags for Word.flags."""
    Quoted = 1 << 0
    # The text is exactly QUOTED_NULL.  Whoever changes Word.text directly
    # has to keep this in sync.
    HasQuotedNull = 1 << 1


class Word(object):

    def __init__(self, text, flags=0):
        # type: (bytes, int) -> None
        self.text = text
        self.flags = flags

    def HasFlag(self, flag):
        # type: (int) -> bool
        return bool(self.flags & flag)

    def SetFlag(self, flag):
        # type: (int) -> None
        self.flags |= flag

    def ClearFlag(self, flag):
        # type: (int) -> None
        self.flags &= ~flag

    def __repr__(self):
        # type: () -> str
        return '<Word %r flags=%d>' % (self.text, self.flags)


def _ClearStaleQuotedNull(w):
    # type: (Word) -> None
    if not IsQuotedNull(w.text):
        w.ClearFlag(word_f.HasQuotedNull)


def QuoteList(words):
    # type: (List[Word]) -> List[Word]
    """Quote every character of every word, e.g. for "$@"."""
    for i in range(len(words)):
        w = words[i]
        orig = w.text
        w.text = quote.QuoteString(orig)
        if len(orig) == 0:
            w.SetFlag(word_f.HasQuotedNull)
        else:
            w.ClearFlag(word_f.HasQuotedNull)
        w.SetFlag(word_f.Quoted)
    return words


def DequoteWord(w, debug_f=_NULL_DEBUG):
    # type: (Word, util._DebugFile) -> Word
    orig = w.text
    w.text = quote.DequoteString(orig, debug_f=debug_f)
    if IsQuotedNull(orig):
        w.ClearFlag(word_f.HasQuotedNull)
    return w


def DequoteList(words, debug_f=_NULL_DEBUG):
    # type: (List[Word], util._DebugFile) -> List[Word]
    """Inverse of QuoteList."""
    for i in range(len(words)):
        DequoteWord(words[i], debug_f=debug_f)
    return words


def ListQuoteEscapes(words, ifs):
    # type: (List[Word], SeparatorSet) -> List[Word]
    """QuoteEscapes on every word, e.g. for unquoted $* before joining."""
    for i in range(len(words)):
        w = words[i]
        w.text = quote.QuoteEscapes(w.text, ifs)
        _ClearStaleQuotedNull(w)
    return words


def ListDequoteEscapes(words, ifs):
    # type: (List[Word], SeparatorSet) -> List[Word]
    for i in range(len(words)):
        w = words[i]
        w.text = quote.DequoteEscapes(w.text, ifs)
        _ClearStaleQuotedNull(w)
    return words
