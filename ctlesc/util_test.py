#!/usr/bin/env python3
"""
util_test.py: Tests for util.py
"""

import io
import unittest

from ctlesc import util  # module under test


class DebugFileTest(unittest.TestCase):

  def testDebugFile(self):
    f = io.StringIO()
    debug_f = util.DebugFile(f)
    debug_f.write('a')
    debug_f.writeln('b')
    self.assertEqual('ab\n', f.getvalue())
    self.assertFalse(debug_f.isatty())

  def testNullDebugFile(self):
    debug_f = util.NullDebugFile()
    debug_f.write('a')
    debug_f.writeln('b')
    self.assertFalse(debug_f.isatty())


if __name__ == '__main__':
  unittest.main()
