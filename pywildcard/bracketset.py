#!/usr/bin/env python3

# Parses the <chars> part of a [<chars>] pattern into a BracketSet.
#
#   [<chars>] - Exactly 1 character. One of <chars>.
#   [!<chars>] - Exactly 1 character. None of <chars>.
#
# <m>-<n> inside <chars> includes <m>, <n> and every character with a
# code point between them. Ranges can be chained: [a-d-i] is the same
# as [a-i]. A '-' first or last in <chars> is a literal '-'.
#
# A special character can be included by escaping it with a backslash:
# [\]\[] matches ']' or '['. Unescaped special characters other than
# '-' are ignored, and so is the character following them. Thus [[-]
# matches nothing at all, while [[\-] matches '-'.

from . import config
from . import logger
from . import tokens
from .errors import InvalidRangeError, MalformedPatternError

def parse_bracket_set(content, services=None):
    parser = BracketSetParser(content, services)
    return parser.parse()

class BracketSetParser(object):
    def __init__(self, content, services=None):
        self.content = content
        self.logger = logger.get_logger(services)
        self.config = config.get_config(services)
        self.negate = False
        self.chars = set()

    def parse(self):
        content = self.content
        if content.startswith('!'):
            self.negate = True
            content = content[1:]
        done = 0
        while done < len(content):
            c = content[done]
            if c == tokens.ESCAPE:
                done = self._parse_escape(content, done)
            elif c in tokens.SPECIAL_CHARS and c != '-':
                self.logger.log_notice(
                    'Special character ignored', self.content,
                    repr(c) + ' at ' + str(done) +
                    ' (and the character after it)')
                done += 2
            elif c == '-' and done != 0 and done + 1 != len(content):
                done = self._parse_range(content, done)
            else:
                self.chars.add(c)
                done += 1
        return tokens.BracketSet(frozenset(self.chars), self.negate)

    def _parse_escape(self, content, done):
        if done + 1 < len(content) and tokens.is_escapable(content[done+1]):
            self.chars.add(content[done+1])
            return done + 2
        if self.config.strict_escapes:
            raise MalformedPatternError(
                'Invalid escape in [' + self.content + '] at ' + str(done))
        self.logger.log_notice(
            'Unknown escape dropped', self.content, 'at ' + str(done))
        return done + 1

    def _parse_range(self, content, done):
        first = content[done-1]
        last = content[done+1]
        # An escaped upper bound: use the character after the backslash.
        if (last == tokens.ESCAPE and done + 2 != len(content) and
                content[done+2] != tokens.ESCAPE):
            last = content[done+2]
        if ord(first) > ord(last):
            raise InvalidRangeError(
                'Invalid range: ' + repr(first) + ' comes after ' +
                repr(last) + ' in [' + self.content + ']')
        for code in range(ord(first), ord(last) + 1):
            self.chars.add(chr(code))
        return done + 2
