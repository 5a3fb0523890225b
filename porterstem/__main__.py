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

import argparse
import logging
import sys

from porterstem import stem, trace, InvalidWordError
from porterstem.utils import format_trace, read_words
from porterstem.vocabulary import compare_stems


logger = logging.getLogger('porterstem')


def run(args):
    """
    Stem the words of ``args.infile`` and compare them if requested.

    Returns the exit code.
    """
    words = []
    stems = []
    for word in read_words(args.infile):
        try:
            if args.debug:
                stages = trace(word)
                logger.debug('\n' + format_trace(stages))
                result = stages[-1][1]
            else:
                result = stem(word)
        except InvalidWordError as e:
            logger.warning('%s', e)
            result = word
        args.outfile.write(result + "\n")
        words.append(word)
        stems.append(result)
    args.outfile.flush()

    if args.expected is None:
        return 0
    expected = list(read_words(args.expected))
    failed = len(compare_stems(words, stems, expected))
    passed = max(len(words), len(expected)) - failed
    sys.stderr.write("%d passed, %d failed.\n" % (passed, failed))
    return 1 if failed else 0


def main(argv=None):
    parser = argparse.ArgumentParser(
            description='Reduce English words to their Porter stems')
    parser.add_argument('infile', help='Input file, one word per line (default STDIN)',
            nargs='?', type=argparse.FileType('r'), default=sys.stdin)
    parser.add_argument('outfile', help='Output file (default STDOUT)', nargs='?',
            type=argparse.FileType('w'), default=sys.stdout)
    parser.add_argument('-d', '--debug', help='Log the word after each step',
            action="store_true")
    parser.add_argument('-e', '--expected', help='File with the expected stems, '
            'one per line', type=argparse.FileType('r'))
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING,
                        format='%(levelname)s: %(message)s')

    try:
        return run(args)
    finally:
        for f in (args.infile, args.outfile, args.expected):
            if f is not None and f not in (sys.stdin, sys.stdout):
                f.close()

if __name__ == '__main__':
    sys.exit(main())
