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
Checking the stemmer against a reference vocabulary.

Martin Porter distributes a vocabulary together with the expected output
of the stemmer, one word per line. The functions in this module compare
the stemmer with such lists.
"""

import codecs
import logging

from porterstem.stemmer import stem
from porterstem.utils import read_words


__all__ = ['compare_stems', 'check_vocabulary', 'check_files']


logger = logging.getLogger(__name__)


def compare_stems(words, stems, expected):
    """
    Compare computed stems with the expected ones.

    ``words`` and ``stems`` are parallel sequences, ``expected`` holds the
    reference stems in the same order. The return value is a list of
    ``(word, expected, actual)`` tuples for every position where the two
    disagree. Words without an expected stem are reported with ``None`` as
    expected stem, and expected stems without a word are reported with
    ``None`` as word and result.
    """
    words = list(words)
    stems = list(stems)
    expected = list(expected)
    failures = []
    for index in range(max(len(words), len(expected))):
        word = words[index] if index < len(words) else None
        result = stems[index] if index < len(words) else None
        exp = expected[index] if index < len(expected) else None
        if exp is None:
            logger.warning("'%s': No expected stem.", word)
        elif word is None:
            logger.warning("'%s': Expected stem without input word.", exp)
        elif result == exp:
            continue
        else:
            logger.warning("'%s': Expected '%s', got '%s'.", word, exp, result)
        failures.append((word, exp, result))
    return failures


def check_vocabulary(words, expected):
    """
    Stem words and compare the results with the expected stems.

    ``words`` and ``expected`` are sequences of the same length. The return
    value is a list of ``(word, expected, actual)`` tuples, one for each
    word whose stem differs from the expected one.
    """
    words = list(words)
    expected = list(expected)
    if len(words) != len(expected):
        raise ValueError('Got %d words but %d expected stems.' % (len(words),
                         len(expected)))
    return compare_stems(words, [stem(word) for word in words], expected)


def check_files(input_filename, output_filename):
    """
    Check the stemmer using test cases from files.

    ``input_filename`` contains the words and ``output_filename`` the
    expected stems, one per line. Returns the failures as described for
    ``check_vocabulary``.
    """
    with codecs.open(input_filename, 'r', 'utf8') as f:
        inputs = list(read_words(f))
    with codecs.open(output_filename, 'r', 'utf8') as f:
        expected = list(read_words(f))
    return check_vocabulary(inputs, expected)
