#!/usr/bin/env python
# vim:fileencoding=utf8

# Copyright (c) 2014 Florian Brucker
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files (the
# "Software"), to deal in the Software without restriction, including
# without limitation the rights to use, copy, modify, merge, publish,
# distribute, sublicense, and/or sell copies of the Software, and to
# permit persons to whom the Software is furnished to do so, subject to
# the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Test support for code that uses ``snowballword``.
"""

import unittest


class TestCase(unittest.TestCase):

	# Note: Violates PEP8 to comply with ``unittest.TestCase`` style.

	def assertWord(self, word, expected, r1start=None, r2start=None):
		"""
		Test the state of a ``Word``.

		``expected`` is the expected text of the word. ``r1start`` and
		``r2start`` are the expected region starts; they are only checked if
		they are not ``None``.
		"""
		def msg(s):
			return s + "\n\nWord: %r" % (word,)

		self.assertEqual(str(word), expected, msg(
				"Wrong text: Expected '%s', got '%s'." % (expected, word)))
		self.assertLessEqual(word.r1start, len(word.chars), msg(
				"R1 starts past the end of the word."))
		self.assertLessEqual(word.r2start, len(word.chars), msg(
				"R2 starts past the end of the word."))
		for attr, exp_value in (('r1start', r1start), ('r2start', r2start)):
			if exp_value is None:
				continue
			value = getattr(word, attr)
			self.assertEqual(value, exp_value, msg(
					"Wrong value for '%s': Expected %d, got %d." % (attr,
					exp_value, value)))
