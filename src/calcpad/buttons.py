'''
The keypad: every button a calculator has, and how it is laid out.
'''

from enum import Enum

from . import operators
from .util import wrap_user_errors


class Button(Enum):
    '''
    A button, identified by its label.
    '''
    ZERO = '0'
    ONE = '1'
    TWO = '2'
    THREE = '3'
    FOUR = '4'
    FIVE = '5'
    SIX = '6'
    SEVEN = '7'
    EIGHT = '8'
    NINE = '9'

    ADD = '+'
    SUBTRACT = '-'
    MULTIPLY = 'x'
    DIVIDE = '/'
    EQUAL = '='
    CLEAR = 'AC'

    DECIMAL = '.'
    NEGATE = '-/+'
    PERCENT = '%'

    SQUARE = 'x²'
    SQUARE_ROOT = '√'
    LOG = 'log'

    @classmethod
    @wrap_user_errors('No such button {1!r}')
    def lookup(cls, label):
        '''
        Button for a label or one of its keyboard friendly aliases.
        '''
        return cls(ALIASES.get(label, label))

    @property
    def isdigit(self):
        return self.value in DIGITS

    @property
    def operator(self):
        '''
        The operator this button makes pending, if any.
        '''
        return OPERATORS.get(self)

    @property
    def style(self):
        '''
        prompt_toolkit style class to draw the button with.
        '''
        if self in OPERATORS or self is Button.EQUAL:
            return 'class:button.operator'
        elif self in (Button.CLEAR, Button.NEGATE, Button.PERCENT):
            return 'class:button.function'
        else:
            return 'class:button.digit'


DIGITS = frozenset('0123456789')

OPERATORS = {
    Button.ADD: operators.ADD,
    Button.SUBTRACT: operators.SUBTRACT,
    Button.MULTIPLY: operators.MULTIPLY,
    Button.DIVIDE: operators.DIVIDE,
    Button.SQUARE: operators.SQUARE,
    Button.SQUARE_ROOT: operators.SQUARE_ROOT,
    Button.LOG: operators.LOG,
}

# Easier to type than the real labels.
ALIASES = {
    '*': Button.MULTIPLY.value,
    '×': Button.MULTIPLY.value,
    '÷': Button.DIVIDE.value,
    'x^2': Button.SQUARE.value,
    'sqrt': Button.SQUARE_ROOT.value,
    'C': Button.CLEAR.value,
}

# Top to bottom, left to right.
LAYOUT = (
    (Button.CLEAR, Button.NEGATE, Button.PERCENT, Button.DIVIDE),
    (Button.SEVEN, Button.EIGHT, Button.NINE, Button.MULTIPLY),
    (Button.FOUR, Button.FIVE, Button.SIX, Button.SUBTRACT),
    (Button.ONE, Button.TWO, Button.THREE, Button.ADD),
    (Button.ZERO, Button.DECIMAL, Button.EQUAL),
    (Button.SQUARE, Button.SQUARE_ROOT, Button.LOG),
)

# Drawn twice as wide as the rest.
WIDE = frozenset({Button.ZERO})
