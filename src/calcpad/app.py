'''
Full-screen terminal keypad.

A display above a grid of buttons, all prompt_toolkit widgets. Buttons can be
clicked, focused and activated with space/enter, or pressed straight from the
keyboard.
'''

from functools import partial

from prompt_toolkit.application import Application, get_app
from prompt_toolkit.key_binding import KeyBindings, merge_key_bindings
from prompt_toolkit.key_binding.bindings.focus import (focus_next,
                                                       focus_previous)
from prompt_toolkit.key_binding.defaults import load_key_bindings
from prompt_toolkit.layout import HSplit, Layout, VSplit, WindowAlign
from prompt_toolkit.styles import Style
from prompt_toolkit.widgets import Box, Frame, Label
from prompt_toolkit.widgets import Button as ButtonWidget

from .buttons import Button, LAYOUT, WIDE
from .machine import Machine


class Keypad:
    '''
    Calculator display and keypad, bound to a machine.
    '''

    BUTTON_WIDTH = 7
    SPACING = 1

    STYLE = Style.from_dict({
        'display': 'bold',
        'button.operator': 'bg:ansiyellow fg:ansiwhite',
        'button.function': 'bg:ansigray fg:ansiblack',
        'button.digit': 'bg:#373737 fg:ansiwhite',
        'button.focused': 'reverse',
    })

    # Keyboard shortcuts on top of the button labels themselves.
    KEYS = {
        '*': Button.MULTIPLY,
        'n': Button.NEGATE,
        's': Button.SQUARE,
        'r': Button.SQUARE_ROOT,
        'l': Button.LOG,
        'c': Button.CLEAR,
        'escape': Button.CLEAR,
    }

    def __init__(self, machine=None):
        self.machine = Machine() if machine is None else machine
        self.display = Label(self.machine.display,
                             style='class:display',
                             align=WindowAlign.RIGHT)
        self.buttons = {button: self._button(button)
                        for row
                        in LAYOUT
                        for button
                        in row}
        self.container = HSplit([
            Frame(self.display),
            Box(HSplit([VSplit([self.buttons[button] for button in row],
                               padding=self.SPACING)
                        for row
                        in LAYOUT],
                       padding=self.SPACING),
                padding=0),
        ])
        self.key_bindings = self._key_bindings()
        self.machine.subscribe(self.refresh)

    def __pt_container__(self):
        return self.container

    def _button(self, button):
        width = self.BUTTON_WIDTH
        if button in WIDE:
            width = 2 * width + self.SPACING
        widget = ButtonWidget(button.value,
                              handler=partial(self.machine.press, button),
                              width=width)

        def get_style():
            if get_app().layout.has_focus(widget):
                return button.style + ' class:button.focused'
            return button.style

        widget.window.style = get_style
        return widget

    def _key_bindings(self):
        kb = KeyBindings()
        keys = {button.value: button
                for button
                in Button
                if len(button.value) == 1}
        keys.update(self.KEYS)
        for key, button in keys.items():
            kb.add(key)(partial(self._press, button))
        kb.add('tab')(focus_next)
        kb.add('s-tab')(focus_previous)

        @kb.add('q')
        @kb.add('c-c')
        def _(event):
            event.app.exit()

        return kb

    def _press(self, button, event):
        self.machine.press(button)

    def refresh(self, state):
        '''
        Show the state's display, redrawing if running.
        '''
        self.display.text = state.display
        get_app().invalidate()

    def application(self, **kwargs):
        '''
        Full-screen application running this keypad.
        '''
        return Application(
            layout=Layout(self.container,
                          focused_element=self.buttons[Button.EQUAL]),
            key_bindings=merge_key_bindings([load_key_bindings(),
                                             self.key_bindings]),
            style=self.STYLE,
            full_screen=True,
            mouse_support=True,
            **kwargs)
