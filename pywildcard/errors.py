#!/usr/bin/env python3

# All errors are raised while compiling a pattern. Matching a compiled
# pattern never fails.

class PatternError(ValueError): pass

class MalformedPatternError(PatternError):
    '''The pattern can not be compiled, e.g. because a '[' has no
    matching unescaped ']'.
    '''

class InvalidRangeError(PatternError):
    '''A range in a bracket set, like [z-a], has a start character that
    comes after its end character.
    '''
