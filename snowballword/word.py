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
Mutable words with Snowball regions.

Snowball stemmers do most of their work on the end of a word: they look for
a suffix, check that it lies inside one of the regions R1 or R2 and replace
it. ``Word`` keeps the state that this needs (the characters of the word and
the start indices of both regions) and provides the matching and replacement
primitives that are shared by all languages.
"""

import logging


log = logging.getLogger(__name__)


class Word(object):
	"""
	A word that is going to be stemmed.

	The characters are stored as a list of code points in ``chars``. The
	regions R1 and R2 are given by their start indices ``r1start`` and
	``r2start``. Both regions extend to the end of the word and are empty
	after construction. It is up to the caller to set the start indices
	according to the rules of the language at hand.
	"""

	def __init__(self, text):
		self.chars = list(text)  # Lists are mutable, strings are not
		self.r1start = len(self.chars)
		self.r2start = len(self.chars)

	def __len__(self):
		return len(self.chars)

	def __str__(self):
		return ''.join(self.chars)

	def __repr__(self):
		return '<Word %r r1start=%d r2start=%d>' % (str(self), self.r1start,
				self.r2start)

	def replace_suffix(self, suffix, replacement, force=False):
		"""
		Replace a suffix and adjust the region starts.

		Unless ``force`` is true the suffix must be present at the end of the
		word. If it is not then the word is left unchanged and ``False`` is
		returned. Otherwise the last ``len(suffix)`` characters are replaced by
		``replacement`` and ``True`` is returned.

		Region starts that lie beyond the end of the modified word are moved
		back to its end. Starts that are still inside the word are left alone,
		even if they now point into the replacement.

		Forcing the removal of a suffix that is longer than the word raises
		``ValueError``.
		"""
		if not (force or suffix == self.first_suffix(suffix)):
			log.debug("Suffix '%s' not found in '%s'", suffix, self)
			return False
		n = len(suffix)
		if n > len(self.chars):
			raise ValueError("Suffix '%s' is longer than the word '%s'." % (
					suffix, self))
		self.chars[len(self.chars) - n:] = list(replacement)
		self._reset_r1r2()
		log.debug("Replaced suffix '%s' by '%s', word is now '%s'", suffix,
				replacement, self)
		return True

	def _reset_r1r2(self):
		"""
		Move region starts that lie past the end of the word back to its end.
		"""
		length = len(self.chars)
		if self.r1start > length:
			self.r1start = length
		if self.r2start > length:
			self.r2start = length

	def _slice(self, start, stop):
		"""
		Return a sub-list of the characters without failing on bad indices.

		``start`` is clamped to ``[0, len - 1]`` and ``stop`` to at most
		``len - 1``. A ``stop`` before ``start`` gives an empty list.
		"""
		if start < 0:
			start = 0
		max_index = len(self.chars) - 1
		if start > max_index:
			start = max_index
		if stop > max_index:
			stop = max_index
		if stop < start:
			return []
		return self.chars[start:stop]

	def r1(self):
		"""
		Return the region R1 as a list of characters.
		"""
		return self.chars[self.r1start:]

	def r1_string(self):
		"""
		Return the region R1 as a string.
		"""
		return ''.join(self.r1())

	def r2(self):
		"""
		Return the region R2 as a list of characters.
		"""
		return self.chars[self.r2start:]

	def r2_string(self):
		"""
		Return the region R2 as a string.
		"""
		return ''.join(self.r2())

	def first_prefix(self, *prefixes):
		"""
		Return the first of the given prefixes that the word starts with.

		The prefixes are tried in the given order, so more specific ones
		should come first. Returns the empty string if none matches.
		"""
		length = len(self.chars)
		for prefix in prefixes:
			if len(prefix) > length:
				continue
			for i, c in enumerate(prefix):
				if self.chars[i] != c:
					break
			else:
				return prefix
		return ''

	def first_suffix(self, *suffixes):
		"""
		Return the first of the given suffixes that the word ends with.

		The suffixes are tried in the given order, so more specific ones
		should come first. Returns the empty string if none matches.
		"""
		length = len(self.chars)
		for suffix in suffixes:
			n = len(suffix)
			matching = 0
			# Compare from the end of the word inward
			for i in range(min(length, n)):
				if self.chars[length - i - 1] != suffix[n - i - 1]:
					break
				matching += 1
			if matching == n:
				return suffix
		return ''
