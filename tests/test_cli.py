'''
Command line interface tests
'''

from calcpad.cli import CLI
from calcpad.lexer import Lexer

from pytest import raises


def run(*args):
    cli = CLI()
    cli.run(args=list(args))
    return cli


def test_expression(capsys):
    run('-e', '7 + 3 =')
    assert capsys.readouterr().out == '10\n'


def test_expressions_share_machine(capsys):
    cli = run('-e', '7 + 3 =', '=', 'AC')
    assert capsys.readouterr().out == '10\n17\n0\n'
    assert cli.machine.display == '0'


def test_error_display(capsys):
    run('-e', '1 0 / 0 =')
    assert capsys.readouterr().out == 'Error\n'


def test_bad_line_keeps_going(capsys):
    run('-e', '1 ? 2', '+ 4 =')
    captured = capsys.readouterr()
    # 1 was pressed before the bad lexeme; the rest of the line wasn't.
    assert captured.out == '1\n5\n'
    assert captured.err == "Couldn't lex ? 2\n"


def test_dump(capsys):
    run('-D', '-e', '+ 1')
    assert capsys.readouterr().out.splitlines() == [
        '[groups]\t<repr(lexeme)>\t<button>',
        "button\t'+'\tADD",
        "space\t' '\tNone",
        "digit\t'1'\tONE",
    ]


def test_raw_grammar(capsys):
    run('-G')
    assert capsys.readouterr().out == Lexer.LEXEME + '\n'


def test_exclusive_actions():
    with raises(SystemExit):
        run('-G', '-D')
