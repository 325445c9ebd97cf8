#!/usr/bin/env python3

# The globs of this module supports these special patterns:
#  * - Zero or more of characters. Any characters.
#  ? - Exactly 1 character. Any character.
#  [<chars>] - Exactly 1 character. One of <chars>.
#  [!<chars>] - Exactly 1 character. None of <chars>.
#
# See bracketset.py for the details of <chars>.
#
# A backslash makes the following special character (one of []*-!?\)
# match itself. A backslash before any other character is dropped, as
# is a backslash at the end of the pattern. '!' and '-' have no special
# meaning outside of brackets, and neither has '/'.

from . import bracketset
from . import config
from . import logger
from . import tokens
from .errors import MalformedPatternError

def tokenize(pattern, services=None):
    '''Compile 'pattern' into a tuple of tokens (or EMPTY_PATTERN).

    Raises MalformedPatternError if a '[' has no closing ']', and
    InvalidRangeError if a bracket set holds a range like 'z-a'.
    '''
    if not pattern:
        return tokens.EMPTY_PATTERN
    log = logger.get_logger(services)
    strict = config.get_config(services).strict_escapes
    result = []
    done = 0
    while done < len(pattern):
        c = pattern[done]
        if c == tokens.ESCAPE:
            if done + 1 < len(pattern):
                c2 = pattern[done+1]
                if tokens.is_escapable(c2):
                    result.append(tokens.Literal(c2))
                    done += 2
                    continue
                if strict:
                    raise MalformedPatternError(
                        'Invalid escape of ' + repr(c2) + ' at ' + str(done))
                log.log_notice(
                    'Unknown escape dropped', pattern,
                    repr(c2) + ' at ' + str(done))
            else:
                if strict:
                    raise MalformedPatternError(
                        'Backslash at end of pattern: ' + pattern)
                log.log_notice(
                    'Trailing backslash dropped', pattern, 'at ' + str(done))
            done += 1
        elif c == '*':
            result.append(tokens.Star())
            done += 1
        elif c == '?':
            result.append(tokens.AnyChar())
            done += 1
        elif c == '[':
            end = find_closing_bracket(pattern, done)
            if end < 0:
                raise MalformedPatternError(
                    "Unbalanced '[' at " + str(done) + ' in ' + pattern)
            result.append(
                bracketset.parse_bracket_set(pattern[done+1:end], services))
            done = end + 1
        else:
            result.append(tokens.Literal(c))
            done += 1
    log.log(
        logger.Logger.LOG_DEBUG, 'Pattern compiled', pattern,
        str(len(result)) + ' tokens')
    return tuple(result)

def find_closing_bracket(pattern, start):
    '''Return the index of the first unescaped ']' after 'start', or -1.

    A ']' is escaped when it is preceded by an odd number of
    backslashes.
    '''
    end = pattern.find(']', start + 1)
    while end >= 0:
        escapes = 0
        while pattern[end-1-escapes] == tokens.ESCAPE:
            escapes += 1
        if escapes % 2 == 0:
            return end
        end = pattern.find(']', end + 1)
    return -1
