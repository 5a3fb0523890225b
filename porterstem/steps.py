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
The six steps of the Porter stemmer.

Each step takes a ``WordBuffer`` and modifies it in place. ``STEPS`` lists
them in the order in which they have to run.
"""

from porterstem.rules import TABLES


__all__ = ['step1', 'step2', 'step3', 'step4', 'step5', 'step6', 'STEPS']


def step1(word):
    """
    Remove plurals and -ed or -ing.

    ::

        caresses  ->  caress
        ponies    ->  poni
        ties      ->  ti
        caress    ->  caress
        cats      ->  cat

        feed      ->  feed
        agreed    ->  agree
        disabled  ->  disable

        matting   ->  mat
        mating    ->  mate
        meeting   ->  meet
        milling   ->  mill
        messing   ->  mess

        meetings  ->  meet
    """
    chars = word.chars
    if chars[word.k] == 's':
        if word.ends('sses'):
            word.k -= 2
        elif word.ends('ies'):
            word.setto('i')
        elif chars[word.k - 1] != 's':
            word.k -= 1
    if word.ends('eed'):
        if word.m() > 0:
            word.k -= 1
    elif (word.ends('ed') or word.ends('ing')) and word.vowelinstem():
        word.k = word.j
        if word.ends('at'):
            word.setto('ate')
        elif word.ends('bl'):
            word.setto('ble')
        elif word.ends('iz'):
            word.setto('ize')
        elif word.doublec(word.k):
            if chars[word.k] not in 'lsz':
                word.k -= 1
        elif word.m() == 1 and word.cvc(word.k):
            word.setto('e')


def step2(word):
    """
    Turn terminal y to i when there is another vowel in the stem.
    """
    if word.ends('y') and word.vowelinstem():
        word.chars[word.k] = 'i'


def step3(word):
    """
    Map double suffixes to single ones, e.g. -ization to -ize.
    """
    TABLES['step3'].apply(word)


def step4(word):
    """
    Deal with -ic-, -full, -ness etc.
    """
    TABLES['step4'].apply(word)


def step5(word):
    """
    Take off -ant, -ence etc. in context <c>vcvc<v>.
    """
    TABLES['step5'].apply(word)


def step6(word):
    """
    Remove a final -e if m() > 1, and change -ll to -l if m() > 1.
    """
    chars = word.chars
    word.j = word.k
    if chars[word.k] == 'e':
        a = word.m()
        if a > 1 or (a == 1 and not word.cvc(word.k - 1)):
            word.k -= 1
    if chars[word.k] == 'l' and word.doublec(word.k) and word.m() > 1:
        word.k -= 1


STEPS = (step1, step2, step3, step4, step5, step6)
