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
Suffix tables for the table-driven steps of the Porter stemmer.

Steps 3, 4 and 5 share one shape: a single character near the end of the
word selects a branch, the branch lists candidate suffixes in order, and
the first candidate that matches is replaced if the measure of what
precedes it is large enough. ``SuffixTable`` implements that shape; the
actual tables are written in the notation parsed by ``porterstem.grammar``.
"""

__all__ = ['Rule', 'SuffixTable', 'POSITIONS']


# Offset of the dispatch character from ``k``
POSITIONS = {
    'last': 0,
    'penultimate': 1,
}


class Rule:
    """
    A single suffix rule.
    """

    def __init__(self, suffix, replacement='', preceding=None):
        """
        Constructor.

        ``suffix`` is the suffix to match and ``replacement`` the string it
        is replaced by. ``preceding`` is either ``None`` or a string of the
        characters one of which must directly precede the suffix.
        """
        self.suffix = suffix
        self.replacement = replacement
        self.preceding = preceding

    def __repr__(self):
        s = 'Rule(%r -> %r' % (self.suffix, self.replacement)
        if self.preceding is not None:
            s += ' after %r' % self.preceding
        return s + ')'

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return ((self.suffix, self.replacement, self.preceding) ==
                (other.suffix, other.replacement, other.preceding))

    __hash__ = None

    def matches(self, word):
        """
        Check whether the rule's suffix ends ``word``.

        ``word`` is a ``WordBuffer``. Like ``WordBuffer.ends`` this moves
        ``j`` in front of the suffix if the suffix itself matches, even if
        the preceding character is not acceptable.
        """
        if not word.ends(self.suffix):
            return False
        if self.preceding is None:
            return True
        return word.j >= 0 and word.chars[word.j] in self.preceding


class SuffixTable:
    """
    An ordered set of suffix rules, dispatched on one character.
    """

    def __init__(self, name, position, threshold, branches):
        """
        Constructor.

        ``name`` identifies the table. ``position`` is a key of
        ``POSITIONS`` and selects the character the table dispatches on.
        ``threshold`` is the measure that the stem in front of a matched
        suffix must exceed for the replacement to happen. ``branches`` maps
        dispatch characters to lists of ``Rule`` instances.
        """
        if position not in POSITIONS:
            raise ValueError('Unknown position "%s".' % position)
        self.name = name
        self.position = position
        self.offset = POSITIONS[position]
        self.threshold = threshold
        self.branches = dict(branches)

    def __repr__(self):
        return 'SuffixTable(%r, %r, m > %d, %d branches)' % (
                self.name, self.position, self.threshold, len(self.branches))

    def apply(self, word):
        """
        Apply the table to a ``WordBuffer``.

        Only the first matching rule of the selected branch is considered.
        Returns ``True`` if the word was changed.
        """
        if word.k < self.offset:
            return False
        rules = self.branches.get(word.chars[word.k - self.offset])
        if not rules:
            return False
        for rule in rules:
            if rule.matches(word):
                if word.m() > self.threshold:
                    word.setto(rule.replacement)
                    return True
                return False
        return False
