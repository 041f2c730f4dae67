'''
Keypad calculator.

A pocket calculator for the terminal: integer entry, the four binary
operators, and squares, square roots and base-10 logarithms of whatever is on
display. Operators wait for "=", and stay pending after it, so pressing "="
again applies them once more.

Runs as a full-screen keypad, or reads button presses typed out as text,
e.g., "12 + 3 =", from the command line, stdin or a prompt.

Not intended to be a scientific calculator! No decimals, no precedence, no
memory.
'''

from .cli import CLI
from .lexer import Lexer
from .machine import Machine, State
from .app import Keypad


__all__ = 'Machine', 'State', 'Lexer', 'Keypad', 'CLI'
