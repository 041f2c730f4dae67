'''
Button and keypad layout tests
'''

import regex

from calcpad import operators
from calcpad.buttons import Button, LAYOUT, WIDE
from calcpad.util import CalcError

from pytest import mark, raises


@mark.parametrize('label, button', [
    ('7', Button.SEVEN),
    ('x', Button.MULTIPLY),
    ('*', Button.MULTIPLY),
    ('×', Button.MULTIPLY),
    ('÷', Button.DIVIDE),
    ('x²', Button.SQUARE),
    ('x^2', Button.SQUARE),
    ('√', Button.SQUARE_ROOT),
    ('sqrt', Button.SQUARE_ROOT),
    ('AC', Button.CLEAR),
    ('C', Button.CLEAR),
    ('-/+', Button.NEGATE),
])
def test_lookup(label, button):
    assert Button.lookup(label) is button


def test_lookup_unknown():
    with raises(CalcError, match=regex.escape("No such button 'ln'")):
        Button.lookup('ln')


def test_layout_has_every_button_once():
    laid_out = [button for row in LAYOUT for button in row]
    assert len(laid_out) == len(set(laid_out))
    assert set(laid_out) == set(Button)


def test_layout_rows():
    assert [[button.value for button in row] for row in LAYOUT] == [
        ['AC', '-/+', '%', '/'],
        ['7', '8', '9', 'x'],
        ['4', '5', '6', '-'],
        ['1', '2', '3', '+'],
        ['0', '.', '='],
        ['x²', '√', 'log'],
    ]
    assert WIDE == {Button.ZERO}


def test_isdigit():
    assert {button for button in Button if button.isdigit} == {
        Button(str(digit)) for digit in range(10)
    }


@mark.parametrize('button, operator', [
    (Button.ADD, operators.ADD),
    (Button.DIVIDE, operators.DIVIDE),
    (Button.LOG, operators.LOG),
    (Button.EQUAL, None),
    (Button.CLEAR, None),
    (Button.FIVE, None),
])
def test_operator(button, operator):
    assert button.operator is operator


@mark.parametrize('button, style', [
    (Button.ADD, 'class:button.operator'),
    (Button.EQUAL, 'class:button.operator'),
    (Button.SQUARE_ROOT, 'class:button.operator'),
    (Button.CLEAR, 'class:button.function'),
    (Button.PERCENT, 'class:button.function'),
    (Button.ZERO, 'class:button.digit'),
    (Button.DECIMAL, 'class:button.digit'),
])
def test_style(button, style):
    assert button.style == style
