# Copyright 2016 Andy Chu. All rights reserved.
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
"""
consts.py - Sentinel bytes shared by the quoting passes.

The word evaluator marks "this byte is protected" with CTLESC and "an empty
string was here" with CTLNUL.  Neither byte appears in text the lexer lets
through unescaped, so they can ride along with the data.
"""

CTLESC = 0x01
CTLNUL = 0x7f

CTLESC_S = b'\x01'
CTLNUL_S = b'\x7f'

# "" after quoting.  Distinct from a word that doesn't exist.
QUOTED_NULL = CTLNUL_S

SPACE_CH = 0x20

# What IFS means when it's unset.
DEFAULT_IFS = b' \t\n'


def IsQuotedNull(s):
    # type: (bytes) -> bool
    return len(s) == 1 and s[0] == CTLNUL
