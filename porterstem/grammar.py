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
Grammar and parser for the suffix rule notation.

The suffix tables of the Porter stemmer are written in a small notation
that resembles the ``among`` command of Snowball::

    table step4 (last, m > 0) {
        'e': 'icate' -> 'ic'  'ative' -> ''  'alize' -> 'al'
        'l': 'ical' -> 'ic'  'ful' -> ''
    }

Each table names the character it dispatches on (``last`` or
``penultimate``) and the measure the stem must exceed. Each branch starts
with the dispatch character followed by a colon and lists its rules in
order. A rule without ``->`` deletes the suffix, and ``after`` restricts a
rule to suffixes preceded by one of the given characters.
"""

import string

from pyparsing import (Group, Keyword, MatchFirst, OneOrMore, Optional,
                       ParseBaseException, ParserElement, QuotedString,
                       StringEnd, Suppress, Word, ZeroOrMore, alphanums,
                       alphas, c_style_comment, dbl_slash_comment, nums)

from porterstem.tables import Rule, SuffixTable
from porterstem.utils import add_line_numbers


__all__ = ['parse_string', 'RuleSyntaxError']


# Grammar elements are in all-caps.


ParserElement.enable_packrat()


class RuleSyntaxError(ValueError):
    """
    Raised for malformed suffix rule notation.
    """

    def __init__(self, msg, code):
        super().__init__(
                msg + "\n\nSuffix rules:\n\n" + add_line_numbers(code))
        self.msg = msg
        self.code = code


#
# PUNCTUATION
#

LPAREN = Suppress('(')
RPAREN = Suppress(')')
LBRACE = Suppress('{')
RBRACE = Suppress('}')
COLON = Suppress(':')
COMMA = Suppress(',')
ARROW = Suppress('->')
GREATER = Suppress('>')


#
# KEYWORDS
#

keywords = []

def make_keyword(s):
    kw = Keyword(s)
    keywords.append(kw)
    return kw

TABLE, AFTER, LAST, PENULTIMATE, M = map(make_keyword,
                                         'table after last penultimate m'.split())

KEYWORD = MatchFirst(keywords)


#
# NAMES AND LITERALS
#

NAME = ~KEYWORD + Word(alphas, alphanums + '_')

INT = Word(nums)
INT.set_parse_action(lambda t: int(t[0]))

letters = set(string.ascii_lowercase)

# Replacements may be empty, suffixes may not
STRING = QuotedString("'")
STRING.add_condition(lambda t: set(t[0]) <= letters,
                     message='Only lowercase letters are allowed',
                     call_during_try=True)
SUFFIX = STRING.copy().add_condition(lambda t: len(t[0]) > 0,
                                     message='Empty suffix',
                                     call_during_try=True)
CHAR = STRING.copy().add_condition(lambda t: len(t[0]) == 1,
                                   message='Expected a single character',
                                   call_during_try=True)


#
# RULES
#

def rule_action(tokens):
    suffix, replacement, preceding = tokens
    if replacement is None:
        replacement = ''
    if preceding is not None:
        preceding = ''.join(preceding)
    return Rule(suffix, replacement, preceding)

# The start of the next branch must not be taken for a rule.
BRANCH_START = CHAR + COLON

PRECEDING = Suppress(AFTER) + Group(OneOrMore(CHAR + ~COLON))

RULE = (~BRANCH_START + SUFFIX + Optional(ARROW + STRING, default=None) +
        Optional(PRECEDING, default=None))
RULE.set_parse_action(rule_action)


#
# BRANCHES
#

def branch_action(tokens):
    return [(tokens[0], list(tokens[1]))]

BRANCH = CHAR + COLON + Group(OneOrMore(RULE))
BRANCH.set_parse_action(branch_action)


#
# TABLES
#

def table_action(s, loc, tokens):
    name, position, threshold, branches = tokens
    seen = set()
    for key, rules in branches:
        if key in seen:
            raise RuleSyntaxError('Duplicate branch "%s" in table "%s".' % (
                                  key, name), s)
        seen.add(key)
    return SuffixTable(name, position, threshold, list(branches))

POSITION = LAST | PENULTIMATE

TABLE_DEF = (Suppress(TABLE) + NAME + LPAREN + POSITION + COMMA + Suppress(M) +
             GREATER + INT + RPAREN + LBRACE + Group(ZeroOrMore(BRANCH)) +
             RBRACE)
TABLE_DEF.set_parse_action(table_action)


#
# PROGRAM
#

PROGRAM = ZeroOrMore(TABLE_DEF) + StringEnd()
PROGRAM.ignore(c_style_comment | dbl_slash_comment)


#
# PUBLIC INTERFACE
#

def parse_string(s):
    """
    Parse a string containing suffix rules.

    Returns a dict that maps table names to ``SuffixTable`` instances.
    Raises ``RuleSyntaxError`` if the rules are malformed.
    """
    try:
        tables = PROGRAM.parse_string(s, parse_all=True)
    except ParseBaseException as e:
        raise RuleSyntaxError('Line %d, column %d: %s' % (e.lineno, e.col,
                              e.msg), s)
    result = {}
    for table in tables:
        if table.name in result:
            raise RuleSyntaxError('Duplicate table "%s".' % table.name, s)
        result[table.name] = table
    return result
