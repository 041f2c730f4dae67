from os import isatty
from sys import stdin, stdout, exit
from argparse import ArgumentParser, REMAINDER, OPTIONAL
import logging
import sys

from prompt_toolkit import PromptSession

from .util import CalcError, get_logger
from .machine import Machine
from .lexer import Lexer
from .app import Keypad


log = get_logger(__name__)


class InteractiveInput:
    def __init__(self, prompt, machine):
        self.prompt = prompt
        self.machine = machine

    def rprompt(self):
        '''
        Pending operator, if there is one.
        '''
        operator = self.machine.state.operator
        return '' if operator.arity == 0 else operator.name

    def __iter__(self):
        try:
            session = PromptSession(message=self.prompt,
                                    vi_mode=True,
                                    enable_suspend=True,
                                    enable_open_in_editor=True,
                                    # Not persisted between sessions
                                    history=None,
                                    rprompt=self.rprompt,
                                    bottom_toolbar=None,
                                    prompt_continuation=' ' * len(self.prompt),
                                    # Certainly not! But be explicit.
                                    erase_when_done=False)
            while True:
                yield session.prompt()
        except EOFError:
            return


class CLI:
    '''
    Command line interface to the calculator.
    '''

    DEFAULT_PROMPT = '> '

    def dumper(self):
        '''
        Dump all lexemes matches, and the button each presses.
        '''
        machine = Machine()
        lexer = Lexer()
        print('[groups]\t<repr(lexeme)>\t<button>')
        for line in self.args.expressions:
            for match in lexer.lex(line):
                matched = match.group(0)  # the lexeme text itself
                groups = lexer.matchedgroups(match)
                button = machine.parse(groups)
                print(*groups.keys(),
                      repr(matched),
                      button.name if button else None,
                      sep='\t')

    def executor(self):
        '''
        Run machine (calculator), showing the display after every line.
        '''
        lexer = Lexer()
        for line in self.args.expressions:
            try:
                for match in lexer.lex(line):
                    if lexer.isfeedable(match):
                        self.machine.feed(lexer.matchedgroups(match))
            # Abort entire rest of line, makes sense anyway
            except CalcError as e:
                log.debug('Bad line %r', line, exc_info=True)
                print(e.args[0], file=sys.stderr)
            print(self.machine.display, flush=True)

    def keypad(self):
        '''
        Run full-screen keypad.
        '''
        Keypad(self.machine).application().run()

    def raw_grammar(self):
        '''
        Print current internally defined grammar.
        '''
        lexer = Lexer()
        print(lexer.LEXEME)

    def _prompting_input(self):
        '''
        Interactive prompt if one was asked for, plain stdin otherwise.
        '''
        if self.args.prompt:
            return InteractiveInput(prompt=self.args.prompt,
                                    machine=self.machine)
        else:
            return stdin

    def _isatty(self):
        return isatty(stdin.fileno()) and isatty(stdout.fileno())

    def __init__(self):
        '''
        Create ready to run CLI.

        Does not run or parse command line arguments.
        '''
        self.argument_parser = ArgumentParser(description='Keypad calculator')
        self.argument_parser.add_argument('-v', '--verbose',
                                          action='store_true')
        int_nonint_groups = self.argument_parser.add_mutually_exclusive_group()
        int_nonint_groups.add_argument('-e', '--expression',
                                       nargs=REMAINDER,
                                       dest='expressions')
        int_nonint_groups.add_argument('-p', '--prompt',
                                       nargs=OPTIONAL,
                                       const=self.DEFAULT_PROMPT)
        main_groups = self.argument_parser.add_mutually_exclusive_group()
        for short_, long_, action in [('-k', '--keypad', self.keypad),
                                      ('-G', '--raw-grammar',
                                       self.raw_grammar),
                                      ('-D', '--dump', self.dumper)]:
            main_groups.add_argument(short_, long_,
                                     action='store_const',
                                     const=action,
                                     dest='action')
        self.argument_parser.set_defaults(action=None,
                                          expressions=stdin)

    def _default_action(self):
        '''
        Keypad if nothing to read but a terminal, otherwise line by line.
        '''
        if self.args.expressions is stdin and not self.args.prompt \
           and self._isatty():
            return self.keypad
        return self.executor

    def run(self, *, args=None):
        '''
        Run CLI, given these args, or previously passed CLI args.
        '''
        self.args = self.argument_parser.parse_args(args)
        if self.args.verbose:
            logging.getLogger(__package__).setLevel(logging.DEBUG)
        self.machine = Machine(verbose=self.args.verbose)
        if self.args.action is None:
            self.args.action = self._default_action()
        if self.args.expressions is stdin:
            self.args.expressions = self._prompting_input()
        try:
            self.args.action()
        except KeyboardInterrupt:
            exit(1)
