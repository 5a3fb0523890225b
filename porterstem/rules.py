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
Suffix tables of the Porter stemmer.

The tables are parsed once, on import. ``TABLES`` maps each table name to
its ``SuffixTable``.
"""

from porterstem.grammar import parse_string


__all__ = ['PORTER_RULES', 'TABLES']


PORTER_RULES = """
/*
 * Double suffixes are mapped to single ones: -ization (= -ize plus
 * -ation) becomes -ize etc. The stem in front of the suffix must have
 * m > 0.
 */
table step3 (penultimate, m > 0) {
    'a': 'ational' -> 'ate'  'tional' -> 'tion'
    'c': 'enci' -> 'ence'  'anci' -> 'ance'
    'e': 'izer' -> 'ize'
    'l': 'bli' -> 'ble'  'alli' -> 'al'  'entli' -> 'ent'  'eli' -> 'e'
         'ousli' -> 'ous'
    'o': 'ization' -> 'ize'  'ation' -> 'ate'  'ator' -> 'ate'
    's': 'alism' -> 'al'  'iveness' -> 'ive'  'fulness' -> 'ful'
         'ousness' -> 'ous'
    't': 'aliti' -> 'al'  'iviti' -> 'ive'  'biliti' -> 'ble'
    'g': 'logi' -> 'log'
}

/*
 * -ic-, -full, -ness etc.
 */
table step4 (last, m > 0) {
    'e': 'icate' -> 'ic'  'ative' -> ''  'alize' -> 'al'
    'i': 'iciti' -> 'ic'
    'l': 'ical' -> 'ic'  'ful' -> ''
    's': 'ness' -> ''
}

/*
 * -ant, -ence etc. are removed in context <c>vcvc<v>.
 */
table step5 (penultimate, m > 1) {
    'a': 'al'
    'c': 'ance'  'ence'
    'e': 'er'
    'i': 'ic'
    'l': 'able'  'ible'
    'n': 'ant'  'ement'  'ment'  'ent'  // element etc. not stripped before the m
    'o': 'ion' after 's' 't'  'ou'     // -ou takes care of -ous
    's': 'ism'
    't': 'ate'  'iti'
    'u': 'ous'
    'v': 'ive'
    'z': 'ize'
}
"""

TABLES = parse_string(PORTER_RULES)
