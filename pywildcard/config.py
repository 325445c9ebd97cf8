#!/usr/bin/env python3

import re

class InvalidDataError(Exception): pass

MATCHERS = ('backtrack', 'memoize')

_booleans = {
    'yes': True, 'true': True, 'on': True,
    'no': False, 'false': False, 'off': False,
    }

class Config(object):
    '''Settings that change how patterns are compiled and matched.

    'strict_escapes': if True, a backslash followed by a character that
        is not special (or a backslash at the end of the pattern) is an
        error. Otherwise the backslash is silently dropped.
    'matcher': 'backtrack' walks every possible split for each '*'.
        'memoize' gives the same results, but remembers which
        (token, text position) pairs have already failed.
    '''
    def __init__(self, services=None):
        self.services = services
        self.strict_escapes = False
        self.matcher = 'memoize'

    def read_config_data(self, data):
        for lineno, line in enumerate(data.splitlines(), start=1):
            self._read_config_line(lineno, line)

    re_config_line = re.compile(r' *([^ #]+) *([^#]*?) *(?:#.*)?$')
    def _read_config_line(self, lineno, line):
        if not line.strip() or line.lstrip().startswith('#'):
            return
        match = self.re_config_line.match(line)
        if not match:
            raise InvalidDataError(
                'Unparsable config line ' + str(lineno) + ': ' + line)
        key = match.group(1)
        value = match.group(2)
        if not value:
            raise InvalidDataError(
                'Missing value for "' + key + '" on line ' + str(lineno))
        if key == 'strict_escapes':
            if value.lower() not in _booleans:
                raise InvalidDataError(
                    'Not a boolean on line ' + str(lineno) + ': ' + value)
            self.strict_escapes = _booleans[value.lower()]
        elif key == 'matcher':
            if value not in MATCHERS:
                raise InvalidDataError(
                    'Unknown matcher on line ' + str(lineno) + ': ' + value)
            self.matcher = value
        else:
            raise InvalidDataError(
                'Unknown setting on line ' + str(lineno) + ': ' + key)

def get_config(services):
    if services is not None and 'config' in services:
        return services['config']
    return Config(services)
