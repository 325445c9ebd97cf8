#!/usr/bin/env python3

from . import config
from . import tokens

def is_match(compiled, text, services=None):
    '''Assumes 'compiled' comes from tokenizer.tokenize(). Never raises
    for a valid 'matcher' setting.
    '''
    strategy = config.get_config(services).matcher
    matcher = make_matcher(strategy, compiled, text)
    return matcher.is_match()

def make_matcher(strategy, compiled, text):
    if strategy == 'backtrack':
        return GlobMatcher(compiled, text)
    if strategy == 'memoize':
        return MemoGlobMatcher(compiled, text)
    raise config.InvalidDataError('Unknown matcher: ' + str(strategy))

def collapse_stars(compiled):
    '''Replace each run of adjacent Star tokens by a single Star.'''
    if compiled is tokens.EMPTY_PATTERN:
        return compiled
    result = []
    for token in compiled:
        if (isinstance(token, tokens.Star) and result and
                isinstance(result[-1], tokens.Star)):
            continue
        result.append(token)
    return tuple(result)

def token_matches(token, c):
    '''Whether a token other than Star accepts the single character c.'''
    if isinstance(token, tokens.Literal):
        return token.char == c
    if isinstance(token, tokens.BracketSet):
        return tokens.bracket_set_matches(token, c)
    if isinstance(token, tokens.AnyChar):
        return True
    raise AssertionError('Unexpected token: ' + repr(token))

class GlobMatcher(object):
    '''Tries every split for each '*', one at a time.

    The splits that have not been tried yet are kept in a list rather
    than on the call stack, so the number of '*' in a pattern is not
    limited by the recursion limit. Time is still exponential in the
    worst case.
    '''
    def __init__(self, compiled, text):
        self.tokens = collapse_stars(compiled)
        self.text = text

    def is_match(self):
        if self.tokens is tokens.EMPTY_PATTERN:
            return not self.text
        pending = [(0, 0)]
        while pending:
            tokensdone, textdone = pending.pop()
            if self._is_tail_match(tokensdone, textdone, pending):
                return True
        return False

    def _is_tail_match(self, tokensdone, textdone, pending):
        while tokensdone < len(self.tokens) and textdone < len(self.text):
            token = self.tokens[tokensdone]
            if isinstance(token, tokens.Star):
                # First let '*' match nothing. Letting it swallow one
                # more character is left for later.
                pending.append((tokensdone, textdone + 1))
                tokensdone += 1
                continue
            if not token_matches(token, self.text[textdone]):
                return False
            tokensdone += 1
            textdone += 1
        if textdone < len(self.text):
            return False
        # Any number of trailing '*' match the empty rest of the text.
        while (tokensdone < len(self.tokens) and
                isinstance(self.tokens[tokensdone], tokens.Star)):
            tokensdone += 1
        return tokensdone == len(self.tokens)

class MemoGlobMatcher(GlobMatcher):
    '''Same results as GlobMatcher, in O(tokens * text) time.

    Fills in, from the end of the pattern backwards, whether
    tokens[i:] matches text[j:] for every i and j. Only the row for
    i + 1 is needed to compute the row for i.
    '''
    def is_match(self):
        if self.tokens is tokens.EMPTY_PATTERN:
            return not self.text
        text = self.text
        end = len(text)
        # No tokens left: only the empty rest of the text matches.
        matched = [False] * end + [True]
        for token in reversed(self.tokens):
            row = [False] * (end + 1)
            if isinstance(token, tokens.Star):
                row[end] = matched[end]
                for j in range(end - 1, -1, -1):
                    row[j] = matched[j] or row[j + 1]
            else:
                for j in range(end):
                    row[j] = matched[j + 1] and token_matches(token, text[j])
            matched = row
        return matched[0]
