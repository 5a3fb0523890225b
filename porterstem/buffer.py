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
Working buffer of the Porter stemmer.

A ``WordBuffer`` holds the characters of the word being stemmed together
with the two cursors the algorithm operates on: ``k`` is the index of the
last character that still belongs to the word and ``j`` is the boundary
in front of the suffix matched by the most recent successful ``ends``.

The method names follow Porter's own description of the algorithm so
that the steps in ``porterstem.steps`` read like the published rules.
"""

__all__ = ['WordBuffer', 'VOWELS']


VOWELS = frozenset('aeiou')


class WordBuffer:

    def __init__(self, word):
        self.chars = list(word)  # Lists are mutable, strings are not
        self.k = len(self.chars) - 1
        self.j = self.k

    def __len__(self):
        return self.k + 1

    def __str__(self):
        return ''.join(self.chars[:self.k + 1])

    def __repr__(self):
        return 'WordBuffer(%r, k=%d, j=%d)' % (''.join(self.chars), self.k,
                                               self.j)

    def cons(self, i):
        """
        Return ``True`` if the character at ``i`` is a consonant.

        ``y`` is a consonant at the start of the word and after a vowel,
        and a vowel after a consonant. For a run of ``y`` the class
        therefore alternates, starting from whatever precedes the run.
        """
        chars = self.chars
        ch = chars[i]
        if ch in VOWELS:
            return False
        if ch != 'y':
            return True
        start = i
        while start > 0 and chars[start - 1] == 'y':
            start -= 1
        if start == 0:
            first = True
        else:
            first = chars[start - 1] in VOWELS
        if (i - start) % 2:
            return not first
        return first

    def m(self):
        """
        Measure the number of consonant sequences in ``0 ... j``.

        If ``c`` is a consonant sequence and ``v`` a vowel sequence, and
        ``<..>`` indicates arbitrary presence::

            <c><v>       gives 0
            <c>vc<v>     gives 1
            <c>vcvc<v>   gives 2
            <c>vcvcvc<v> gives 3
        """
        n = 0
        i = 0
        j = self.j
        while True:
            if i > j:
                return n
            if not self.cons(i):
                break
            i += 1
        i += 1
        while True:
            while True:
                if i > j:
                    return n
                if self.cons(i):
                    break
                i += 1
            i += 1
            n += 1
            while True:
                if i > j:
                    return n
                if not self.cons(i):
                    break
                i += 1
            i += 1

    def vowelinstem(self):
        """
        Return ``True`` if ``0 ... j`` contains a vowel.
        """
        for i in range(self.j + 1):
            if not self.cons(i):
                return True
        return False

    def doublec(self, i):
        """
        Return ``True`` if ``i - 1`` and ``i`` hold the same consonant.
        """
        if i < 1:
            return False
        if self.chars[i] != self.chars[i - 1]:
            return False
        return self.cons(i)

    def cvc(self, i):
        """
        Return ``True`` if ``i - 2, i - 1, i`` is consonant-vowel-consonant.

        The second consonant must not be ``w``, ``x`` or ``y``. This is
        used when restoring an ``e`` at the end of a short word, e.g.
        ``cav(e)``, ``lov(e)``, ``hop(e)``, ``crim(e)`` but ``snow``,
        ``box``, ``tray``.
        """
        if i < 2 or not self.cons(i) or self.cons(i - 1) or not self.cons(i - 2):
            return False
        return self.chars[i] not in 'wxy'

    def ends(self, s):
        """
        Return ``True`` if ``0 ... k`` ends with ``s``.

        On success ``j`` is moved in front of the suffix. On failure it is
        left alone.
        """
        length = len(s)
        offset = self.k - length + 1
        if offset < 0:
            return False
        if self.chars[offset:self.k + 1] != list(s):
            return False
        self.j = self.k - length
        return True

    def setto(self, s):
        """
        Set ``j + 1 ... k`` to the characters of ``s``, readjusting ``k``.
        """
        start = self.j + 1
        assert 0 <= start <= len(self.chars), 'Boundary out of range: %r' % self
        self.chars[start:start + len(s)] = s
        self.k = self.j + len(s)

    def r(self, s):
        """
        Replace the suffix after ``j`` by ``s`` if ``m() > 0``.
        """
        if self.m() > 0:
            self.setto(s)
