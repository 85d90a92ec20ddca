import io

import pytest

from fringetree.greetings import add, greeting, hello, main


def test_add_value():
    assert add(2000, 20) == 2020


@pytest.mark.parametrize("first, second", [(0, 0), (-3, 8), (2000, 20), (7, -7)])
def test_add_is_commutative(first, second):
    assert add(first, second) == add(second, first)


def test_add_zero_is_identity():
    assert add(41, 0) == 41


def test_greeting_writes_line():
    buf = io.StringIO()
    greeting("Steve", buf)
    assert buf.getvalue() == "Hello, Steve!\n"


def test_hello_writes_line_with_trailing_space():
    buf = io.StringIO()
    hello("Steve", buf)
    assert buf.getvalue() == "Hello, Steve! \n"


def test_greeting_defaults_to_stdout(capsys):
    greeting("Ann")
    assert capsys.readouterr().out == "Hello, Ann!\n"


def test_main_default(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Hello, Steve!\n"


def test_main_hello_form(capsys):
    assert main(["--hello", "Ann"]) == 0
    assert capsys.readouterr().out == "Hello, Ann! \n"


def test_main_named(capsys):
    assert main(["Ann"]) == 0
    assert capsys.readouterr().out == "Hello, Ann!\n"