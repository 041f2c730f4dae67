from pytest import Item, fixture

from calcpad.lexer import Lexer
from calcpad.machine import Machine


def pytest_assertion_pass(item: Item,
                          lineno: int,
                          orig: str,
                          expl: str) -> None:
    '''
    Log every assertion, in case we later need to audit a run.

    Excessive in most cases.

    Use with pytest -rP -o enable_assertion_pass_hook=true.
    '''
    print('given', item.name + ':' + str(lineno), str(orig))  # no repr()!
    print('actual', item.name + ':' + str(lineno),
          # Get rid of full-diff, -vv for full diff, etc.
          '\n'.join(str(expl).splitlines()[:-2]))


@fixture
def machine():
    return Machine()


@fixture
def type_out(machine):
    '''
    Press buttons typed out as text, e.g., "7 + 3 =", and return the display.
    '''
    lexer = Lexer()

    def type_out(line):
        for match in lexer.lex(line):
            if lexer.isfeedable(match):
                machine.feed(lexer.matchedgroups(match))
        return machine.display
    return type_out
