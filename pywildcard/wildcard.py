#!/usr/bin/env python3

# Glob-style matching of whole strings.
#
#   match('*.[!abc]', 'main.d') -> True
#   match('Letter[0-9]', 'Letter10') -> False
#
# See tokenizer.py for the pattern syntax. Unlike shell globs, '/' is
# an ordinary character.
#
# 'services' is an optional dict. 'logger' is something like
# logger.Logger, and 'config' is a config.Config.

from . import config
from . import logger
from . import matcher
from . import tokenizer
from .errors import PatternError

def sanitize(string):
    '''Replace every NUL character by U+FFFD, keeping the length.'''
    return string.replace('\u0000', '\ufffd')

def match(pattern, text, services=None):
    '''Return True if all of 'text' matches the glob 'pattern'.

    Raises MalformedPatternError or InvalidRangeError if 'pattern' is
    not valid.
    '''
    pattern = sanitize(pattern)
    text = sanitize(text)
    compiled = tokenizer.tokenize(pattern, services)
    result = matcher.is_match(compiled, text, services)
    logger.get_logger(services).log(
        logger.Logger.LOG_DEBUG2, 'Match result', pattern,
        config.get_config(services).matcher + ': ' + repr(text) +
        (' matches' if result else ' does not match'))
    return result

def is_valid_pattern(pattern, services=None):
    try:
        tokenizer.tokenize(sanitize(pattern), services)
    except PatternError:
        return False
    return True
