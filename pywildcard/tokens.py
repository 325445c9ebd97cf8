#!/usr/bin/env python3

# The compiled form of a glob pattern is a tuple of these tokens.
#
#   Literal(char) - Exactly 1 character. Must be 'char'.
#   AnyChar() - Exactly 1 character. Any character.
#   Star() - Zero or more characters. Any characters.
#   BracketSet(chars, negate) - Exactly 1 character. One of 'chars'
#       (a frozenset), or, if 'negate' is True, none of 'chars'.
#
# An empty pattern compiles to EMPTY_PATTERN instead of a tuple. It
# only matches the empty string.

import collections

class _Token(object):
    # Tokens of different kinds are never equal, even though Star() and
    # AnyChar() are both empty tuples.
    __slots__ = ()

    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__

class Literal(_Token, collections.namedtuple('Literal', ('char',))):
    __slots__ = ()

class AnyChar(_Token, collections.namedtuple('AnyChar', ())):
    __slots__ = ()

class Star(_Token, collections.namedtuple('Star', ())):
    __slots__ = ()

class BracketSet(_Token, collections.namedtuple(
        'BracketSet', ('chars', 'negate'))):
    __slots__ = ()

EMPTY_PATTERN = None

# These lose their special meaning when preceded by a backslash. So does
# the backslash itself.
SPECIAL_CHARS = frozenset('[]*-!?')
ESCAPE = '\\'

def is_escapable(c):
    return c in SPECIAL_CHARS or c == ESCAPE

def bracket_set_matches(token, c):
    if token.negate:
        return c not in token.chars
    return c in token.chars
