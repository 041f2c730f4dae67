from functools import wraps

import regex

from . import operators
from .buttons import Button
from .util import get_logger


log = get_logger(__name__)

# What the display must look like to count as a number.
INTEGER = regex.compile(r'[+-]?[0-9]+')


def parse_int(text):
    '''
    Integer shown on a display, or 0 if it isn't one (e.g., "Error").
    '''
    if INTEGER.fullmatch(text) is None:
        return 0
    return int(text)


class State:
    '''
    Everything a calculator remembers between button presses.
    '''

    INITIAL_DISPLAY = '0'

    def __init__(self, display=INITIAL_DISPLAY, operator=operators.NONE,
                 operand=0):
        '''
        :param display: Text on the display.
        :param operator: Pending operator, applied on next "=".
        :param operand: Stored left operand of binary operators.
        '''
        self.display = display
        self.operator = operator
        self.operand = operand

    def reset(self):
        '''
        Go back to how a freshly started calculator looks.
        '''
        self.display = type(self).INITIAL_DISPLAY
        self.operator = operators.NONE
        self.operand = 0

    def _astuple(self):
        return self.display, self.operator, self.operand

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self._astuple() == other._astuple()

    def __repr__(self):
        return 'State(display={!r}, operator={!r}, operand={!r})'.format(
            *self._astuple())


def notifying(f):
    '''
    Tell the machine's subscribers about the state once f has run.
    '''
    @wraps(f)
    def wrapper(self, *args, **kwargs):
        res = f(self, *args, **kwargs)
        self._notify()
        return res
    return wrapper


class Machine:
    '''
    Button-press calculator.

    Holds a single pending operator and the operand stored with it. Takes
    button presses, one at a time, and updates the display text.
    '''

    # Shown instead of a result when arithmetic can't be done.
    ERROR = 'Error'

    def __init__(self, state=None, verbose=None):
        '''
        Create calculator showing 0, or continuing from state.

        :param state: State to own and mutate. A new one by default.
        :param verbose: Log every button press.
        '''
        self.state = State() if state is None else state
        self.verbose = verbose
        self.subscribers = []

    @property
    def display(self):
        return self.state.display

    def subscribe(self, callback):
        '''
        Call callback with the state after every button press.

        Returns callback, so can be used as a decorator.
        '''
        self.subscribers.append(callback)
        return callback

    def unsubscribe(self, callback):
        self.subscribers.remove(callback)

    def _notify(self):
        for callback in list(self.subscribers):
            callback(self.state)

    def parse(self, groups):
        '''
        Button for a lexeme.

        :param groups: Matched groups of a lexeme, as from Lexer.matchedgroups.
        '''
        if 'digit' in groups:
            return Button(groups['digit'])
        elif 'button' in groups:
            return Button.lookup(groups['button'])

    def feed(self, groups):
        '''
        Press the button a lexeme stands for.
        '''
        self.press(self.parse(groups))

    def press(self, button):
        '''
        Press a button, whichever it is.
        '''
        if self.verbose:
            log.debug('press %s on %r', button.value, self.state)
        if button.isdigit:
            self.press_digit(button.value)
        elif button.operator is None:
            type(self).FUNCTIONS[button](self)
        elif button.operator.arity == 2:
            self.press_binary_operator(button.operator)
        else:
            self.press_unary_operator(button.operator)

    @notifying
    def press_digit(self, digit):
        '''
        Append digit to the display, replacing a lone 0.

        Anything else on display, including "Error", gets the digit appended.
        '''
        if self.state.display == State.INITIAL_DISPLAY:
            self.state.display = str(digit)
        else:
            self.state.display += str(digit)

    @notifying
    def press_binary_operator(self, operator):
        '''
        Make operator pending, store displayed number, and start a new one.
        '''
        self.state.operator = operator
        self.state.operand = parse_int(self.state.display)
        self.state.display = State.INITIAL_DISPLAY

    @notifying
    def press_unary_operator(self, operator):
        '''
        Make operator pending. Applies to whatever is on display at "=".
        '''
        self.state.operator = operator

    @notifying
    def press_equals(self):
        '''
        Apply pending operator to stored and displayed numbers.

        Leaves the operator pending, so pressing again reapplies it to the
        stored operand and the new result.
        '''
        left = self.state.operand
        right = parse_int(self.state.display)
        try:
            res = self.state.operator.apply(left, right)
        except (ArithmeticError, ValueError) as e:
            log.debug('%r on %r and %r: %s', self.state.operator, left,
                      right, e)
            self.state.display = type(self).ERROR
            return
        if res is not None:
            self.state.display = str(res)

    @notifying
    def press_clear(self):
        self.state.reset()

    # Placeholders. Only integers are entered, and there's no sign toggle or
    # percentage yet.
    @notifying
    def press_decimal(self):
        pass

    @notifying
    def press_negate(self):
        pass

    @notifying
    def press_percent(self):
        pass

    # Buttons that neither enter digits nor select operators.
    FUNCTIONS = {
        Button.EQUAL: press_equals,
        Button.CLEAR: press_clear,
        Button.DECIMAL: press_decimal,
        Button.NEGATE: press_negate,
        Button.PERCENT: press_percent,
    }
