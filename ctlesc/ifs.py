# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
ifs.py - Snapshots of $IFS for the quoting passes.

Whether CTLESC, CTLNUL and space get protected depends on the current IFS.
Instead of looking it up in the middle of a pass, callers take a snapshot
once and hand it to every function:

    ifs_set = ifs_ctx.Current()
    s = quote.QuoteEscapes(val, ifs_set)
    ...
    s = cleanup.RemoveQuotedIfs(s, ifs_set)
"""

from ctlesc.consts import DEFAULT_IFS

from typing import Callable, Dict, FrozenSet, Optional


class SeparatorSet(object):
    """The bytes of one IFS value.  Never mutated after construction."""

    def __init__(self, ifs):
        # type: (Optional[bytes]) -> None
        """
        Args:
          ifs: the value of $IFS, or None if it's unset
        """
        if ifs is None:
            ifs = DEFAULT_IFS
        self.ifs = bytes(ifs)
        self.chars = frozenset(bytearray(self.ifs))  # type: FrozenSet[int]

    def IsEmpty(self):
        # type: () -> bool
        """IFS='' means no splitting.

        But unquoted $@ still splits on spaces later, so the passes protect
        spaces in that case.
        """
        return len(self.ifs) == 0

    def Contains(self, byte):
        # type: (int) -> bool
        return byte in self.chars

    def __repr__(self):
        # type: () -> str
        return '<SeparatorSet %r>' % self.ifs


class IfsContext(object):
    """Hands out SeparatorSet instances for the current value of $IFS.

    The value has dynamic scope, e.g. IFS=: myfunc, so it's fetched on each
    call.  Snapshots are cached by value.
    """

    def __init__(self, lookup):
        # type: (Callable[[], Optional[bytes]]) -> None
        """
        Args:
          lookup: returns the current $IFS, or None if it's unset
        """
        self.lookup = lookup
        self.cache = {}  # type: Dict[Optional[bytes], SeparatorSet]

    def Current(self):
        # type: () -> SeparatorSet
        ifs = self.lookup()
        if ifs is not None:
            ifs = bytes(ifs)

        sp = self.cache.get(ifs)  # cache lookup
        if sp is None:
            sp = SeparatorSet(ifs)
            self.cache[ifs] = sp
        return sp
