#!/usr/bin/env python3

import io
import unittest

import pywildcard.config as config
import pywildcard.logger as logger
import pywildcard.tokenizer as tokenizer
from pywildcard.errors import InvalidRangeError, MalformedPatternError
from pywildcard.tokens import AnyChar, BracketSet, Literal, Star

class TestTokenize(unittest.TestCase):

    def test_empty_pattern(self):
        self.assertIsNone(tokenizer.tokenize(''))

    def test_literals(self):
        self.assertEqual(
            (Literal('a'), Literal('!'), Literal('-'), Literal(']')),
            tokenizer.tokenize('a!-]'))

    def test_wildcards(self):
        self.assertEqual(
            (Star(), Literal('.'), AnyChar(), Star()),
            tokenizer.tokenize('*.?*'))

    def test_escapes(self):
        self.assertEqual(
            (Literal('?'), Literal('*'), Literal('['), Literal(']'),
             Literal('\\'), Literal('-'), Literal('!')),
            tokenizer.tokenize('\\?\\*\\[\\]\\\\\\-\\!'))

    def test_unknown_escape_is_dropped(self):
        self.assertEqual(
            (Literal('a'), Literal('q')), tokenizer.tokenize('a\\q'))

    def test_trailing_backslash_is_dropped(self):
        self.assertEqual((Literal('a'),), tokenizer.tokenize('a\\'))
        self.assertEqual((), tokenizer.tokenize('\\'))

    def test_bracket(self):
        self.assertEqual(
            (Literal('x'), BracketSet(frozenset('ab'), False), Star()),
            tokenizer.tokenize('x[ab]*'))
        self.assertEqual(
            (BracketSet(frozenset('0123'), True),),
            tokenizer.tokenize('[!0-3]'))

    def test_bracket_tokens_are_immutable(self):
        token = tokenizer.tokenize('[ab]')[0]
        self.assertIsInstance(token.chars, frozenset)
        self.assertRaises(AttributeError, setattr, token, 'negate', True)

    def test_escaped_closing_bracket_does_not_close(self):
        self.assertEqual(
            (BracketSet(frozenset(']a'), False),),
            tokenizer.tokenize('[\\]a]'))

    def test_escaped_backslash_before_closing_bracket(self):
        self.assertEqual(
            (BracketSet(frozenset('\\'), False), Literal('x')),
            tokenizer.tokenize('[\\\\]x'))

    def test_unbalanced_bracket(self):
        self.assertRaisesRegex(
            MalformedPatternError, "Unbalanced '\\[' at 1",
            tokenizer.tokenize, '*[Qqueen')
        self.assertRaises(MalformedPatternError, tokenizer.tokenize, '[')
        self.assertRaises(MalformedPatternError, tokenizer.tokenize, '[a\\]')

    def test_invalid_range(self):
        self.assertRaises(InvalidRangeError, tokenizer.tokenize, 'a[z-a]')

    def test_strict_escapes(self):
        conf = config.Config()
        conf.strict_escapes = True
        services = {'config': conf}
        self.assertEqual(
            (Literal('*'),), tokenizer.tokenize('\\*', services))
        self.assertRaisesRegex(
            MalformedPatternError, "Invalid escape of 'q' at 1",
            tokenizer.tokenize, 'a\\q', services)
        self.assertRaises(
            MalformedPatternError, tokenizer.tokenize, 'a\\', services)

class TestFindClosingBracket(unittest.TestCase):

    def test_plain(self):
        self.assertEqual(3, tokenizer.find_closing_bracket('[ab]', 0))
        self.assertEqual(5, tokenizer.find_closing_bracket('xy[ab]]', 2))

    def test_escapes(self):
        self.assertEqual(-1, tokenizer.find_closing_bracket('[a\\]', 0))
        self.assertEqual(4, tokenizer.find_closing_bracket('[a\\\\]', 0))
        self.assertEqual(6, tokenizer.find_closing_bracket('[a\\\\\\]]', 0))

    def test_missing(self):
        self.assertEqual(-1, tokenizer.find_closing_bracket('[abc', 0))

class TestTokenizeLogging(unittest.TestCase):

    def setUp(self):
        self.logger = logger.Logger({'utcnow': lambda: 'now'})
        self.out = io.StringIO()
        self.logger.set_outfile(self.out)
        self.services = {'logger': self.logger}

    def test_compiled_pattern_is_logged(self):
        tokenizer.tokenize('a*[bc]', self.services)
        self.assertEqual(1, len(self.logger.raw_log))
        item = self.logger.raw_log[0]
        self.assertEqual(logger.Logger.LOG_DEBUG, item.severity)
        self.assertEqual('Pattern compiled', item.what)
        self.assertEqual('a*[bc]', item.which)
        self.assertEqual('3 tokens', item.comment)
        self.assertEqual('', self.out.getvalue())

    def test_dropped_escapes_are_noticed(self):
        tokenizer.tokenize('a\\qb\\', self.services)
        notices = self.logger.items_with_severity(logger.Logger.LOG_NOTICE)
        self.assertEqual(
            ['Unknown escape dropped', 'Trailing backslash dropped'],
            [x.what for x in notices])
        self.assertEqual(
            "now NOTICE: Unknown escape dropped - 'a\\\\qb\\\\': "
            "'q' at 1\n"
            "now NOTICE: Trailing backslash dropped - 'a\\\\qb\\\\': "
            "at 4\n",
            self.out.getvalue())

class TestTokens(unittest.TestCase):

    def test_kinds_are_distinct(self):
        self.assertNotEqual(Star(), AnyChar())
        self.assertNotEqual(Literal('a'), ('a',))
        self.assertEqual(Literal('a'), Literal('a'))
        self.assertEqual(1, len({Star(), Star()}))
