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
Various utilities.
"""

import math


def add_line_numbers(text, margin="  "):
    """
    Add line numbers to a text.
    """
    lines = text.splitlines()
    if not lines:
        return ''
    num_digits = int(math.floor(math.log10(len(lines)))) + 1
    format_str = '%%%dd%s%%s' % (num_digits, margin)
    nums = range(1, len(lines) + 1)
    return '\n'.join(format_str % (n, line) for (n, line) in zip(nums, lines))

def read_words(f):
    """
    Read one word per line from an open file.

    Surrounding whitespace is stripped and empty lines are skipped.
    """
    for line in f:
        word = line.strip()
        if word:
            yield word

def format_trace(stages, margin="  "):
    """
    Format the output of ``porterstem.trace`` as aligned columns.

    Each line holds the word after a stage followed by the stage name.
    Stages that did not change the word are marked with ``=``.
    """
    if not stages:
        return ''
    width = max(len(text) for (_, text) in stages)
    lines = []
    previous = None
    for name, text in stages:
        marker = '=' if text == previous else ' '
        lines.append('%s%s%s %s' % (text.ljust(width), margin, marker, name))
        previous = text
    return '\n'.join(lines)
