from functools import reduce
import operator

import regex

from .buttons import Button, ALIASES
from .util import CalcError


class Lexer:
    '''
    Lexer for button presses typed out as text, e.g., "12 + 3 =".

    For consistency with Machine, needs to be instantiated, despite holding no
    internal state.
    '''
    # One press per digit; 12 is two presses.
    DIGIT = r'[0-9]'

    # Every other label and alias. Longest first, so that -/+ isn't lexed as
    # -, then /, then +, and x² isn't lexed as x followed by garbage.
    LABELS = sorted({button.value
                     for button
                     in Button
                     if not button.isdigit} | ALIASES.keys(),
                    key=len,
                    reverse=True)
    BUTTON = r'(?:' + r'|'.join(map(regex.escape, LABELS)) + r')'
    SPACE = r'\s+'

    # All possible lexemes.
    LEXEME = r'(?<digit>' + DIGIT + r')|' \
             r'(?<button>' + BUTTON + r')|' \
             r'(?<space>' + SPACE + r')'
    # Default regex flags for matching lexemes
    FLAGS = reduce(operator.__or__,
                   {regex.POSIX,
                    regex.VERSION1},
                   0)

    def lex(self, line):
        '''
        Take a line and return all lexemes.

        Doesn't yield incomplete or incorrect lexemes, stopping on first bad.
        '''
        while line:
            match = regex.match(type(self).LEXEME, line,
                                flags=type(self).FLAGS)
            if match is None:
                break
            yield match
            line = line[len(match.group(0)):]
        if line:
            raise CalcError("Couldn't lex {0}".format(line.strip()))

    def isfeedable(self, match):
        '''
        Return True if lexeme can be fed to machine.
        '''
        return 'space' not in self.matchedgroups(match).keys()

    def matchedgroups(self, match):
        '''
        Named groups the lexeme matched.
        '''
        return {key: value
                for key, value
                in match.groupdict().items()
                if value}
