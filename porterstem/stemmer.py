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
Public interface of the Porter stemmer.
"""

import string

from porterstem.buffer import WordBuffer
from porterstem.steps import STEPS


__all__ = ['stem', 'trace', 'PorterStemmer', 'InvalidWordError']


letters = frozenset(string.ascii_lowercase)


class InvalidWordError(ValueError):
    """
    Raised for words that contain characters other than ``a`` to ``z``.
    """

    def __init__(self, word, char):
        super().__init__(
                'Invalid character %r in word %r: only lowercase letters a-z '
                'can be stemmed.' % (char, word))
        self.word = word
        self.char = char


def _check(word):
    if not isinstance(word, str):
        raise TypeError('Expected a string, got %s.' % type(word).__name__)
    for char in word:
        if char not in letters:
            raise InvalidWordError(word, char)


def stem(word):
    """
    Reduce a word to its stem.

    ``word`` must consist of lowercase letters ``a`` to ``z`` only,
    otherwise ``InvalidWordError`` is raised. Words with less than three
    letters are returned unchanged.
    """
    _check(word)
    buf = WordBuffer(word)
    if buf.k > 1:
        for step in STEPS:
            step(buf)
    return str(buf)


def trace(word):
    """
    Stem a word and record the intermediate results.

    Returns a list of ``(stage, text)`` tuples. The first one is
    ``('input', word)``, followed by one tuple per step. Short words that
    are not stemmed only yield the input stage.
    """
    _check(word)
    buf = WordBuffer(word)
    stages = [('input', word)]
    if buf.k > 1:
        for step in STEPS:
            step(buf)
            stages.append((step.__name__, str(buf)))
    return stages


class PorterStemmer:
    """
    Incremental interface to the stemmer.

    Characters are added one at a time using ``add``. ``stem`` then stems
    the collected word and resets the stemmer, so the same instance can be
    used for the next word right away.
    """

    def __init__(self):
        self._chars = []

    def __len__(self):
        return len(self._chars)

    def add(self, ch):
        """
        Add a character to the word being stemmed.
        """
        if not isinstance(ch, str) or len(ch) != 1:
            raise TypeError('Expected a single character, got %r.' % (ch,))
        if ch not in letters:
            raise InvalidWordError(''.join(self._chars) + ch, ch)
        self._chars.append(ch)

    def reset(self):
        """
        Discard the characters added so far.
        """
        del self._chars[:]

    def stem(self):
        """
        Stem the word built by ``add`` and reset the stemmer.
        """
        word = ''.join(self._chars)
        self.reset()
        return stem(word)

    def stem_word(self, word):
        """
        Stem a complete word without touching the added characters.
        """
        return stem(word)
