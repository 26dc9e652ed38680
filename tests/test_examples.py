from pathlib import Path

import pytest

from bfvm.errors import TapeBoundsError, UnmatchedLoopClose
from bfvm.interpreter import run_program
from bfvm.parser import parse
from bfvm.tape import CircularTape

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


def read_example(name):
    with open(EXAMPLES / name, 'r', encoding='utf-8') as f:
        return f.read()


def test_hello_world_example():
    assert run_program(read_example('hello_world.bf')) == b'Hello World!\n'


def test_cat_example():
    source = read_example('cat.bf')
    assert run_program(source, stdin=b'copy me\n') == b'copy me\n'
    assert run_program(source, stdin=b'') == b''


def test_reverse_example():
    assert run_program(read_example('reverse.bf'), stdin=b'stressed') == b'desserts'


def test_runaway_example_hits_edge():
    with pytest.raises(TapeBoundsError):
        run_program(read_example('runaway.bf'))


def test_runaway_example_terminates_on_circular_tape():
    # Every cell is bumped once per lap and cell 0 starts one ahead, so it wraps to 0 first
    tape = CircularTape(4)
    assert run_program(read_example('runaway.bf'), tape=tape) == b''
    assert tape.cursor == 0


def test_unbalanced_example():
    with pytest.raises(UnmatchedLoopClose) as exc:
        parse(read_example('unbalanced.bf'))
    assert exc.value.position == 8
