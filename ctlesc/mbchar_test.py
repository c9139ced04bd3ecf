#!/usr/bin/env python3
"""
mbchar_test.py: Tests for mbchar.py
"""

import unittest

from ctlesc import mbchar  # module under test


class Utf8CharLenTest(unittest.TestCase):

  def testLeadBytes(self):
    CASES = [
        (1, 0x00),
        (1, 0x01),
        (1, 0x41),
        (1, 0x7f),
        (2, 0xc3),
        (3, 0xe2),
        (4, 0xf0),
        (0, 0x80),  # continuation
        (0, 0xbf),
        (0, 0xc0),  # overlong
        (0, 0xc1),
        (0, 0xf5),  # > U+10FFFF
        (0, 0xff),
    ]
    for expected, byte in CASES:
      self.assertEqual(expected, mbchar.Utf8CharLen(byte), hex(byte))


class CharWidthTest(unittest.TestCase):

  def testValid(self):
    s = b'a' + u'é€\U0001f600'.encode('utf-8')
    self.assertEqual(1, mbchar.CharWidth(s, 0))
    self.assertEqual(2, mbchar.CharWidth(s, 1))
    self.assertEqual(3, mbchar.CharWidth(s, 3))
    self.assertEqual(4, mbchar.CharWidth(s, 6))

  def testInvalid(self):
    CASES = [
        b'\xc3',  # truncated
        b'\xe2\x82',
        b'\xa9',  # stray continuation
        b'\xc3\x01',  # CTLESC isn't a continuation byte
        b'\xc3\x7f',  # neither is CTLNUL
        b'\xe2\x82\x01',
        b'\xff\x80',
        b'\xe0\x80\x80',  # overlong
        b'\xe0\x9f\xbf',
        b'\xed\xa0\x80',  # surrogates
        b'\xed\xbf\xbf',
        b'\xf0\x80\x80\x80',  # overlong
        b'\xf0\x8f\xbf\xbf',
        b'\xf4\x90\x80\x80',  # > U+10FFFF
    ]
    for s in CASES:
      self.assertEqual(1, mbchar.CharWidth(s, 0), s)

  def testSecondByteBoundaries(self):
    CASES = [
        (3, b'\xe0\xa0\x80'),  # U+0800
        (3, b'\xed\x9f\xbf'),  # U+D7FF
        (3, b'\xee\x80\x80'),  # U+E000
        (4, b'\xf0\x90\x80\x80'),  # U+10000
        (4, b'\xf4\x8f\xbf\xbf'),  # U+10FFFF
    ]
    for expected, s in CASES:
      self.assertEqual(expected, mbchar.CharWidth(s, 0), s)
      # Python agrees these are valid
      s.decode('utf-8')

  def testNextChar(self):
    s = u'xé'.encode('utf-8') + b'\xff'
    positions = []
    i = 0
    while i < len(s):
      positions.append(i)
      i = mbchar.NextChar(s, i)
    self.assertEqual([0, 1, 3], positions)
    self.assertEqual(len(s), i)


if __name__ == '__main__':
  unittest.main()
