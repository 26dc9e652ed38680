import json

import pytest

from bfvm.instructions import Increment, LoopClose, LoopOpen, Program
from bfvm.parser import parse
from bfvm.program_json import program_from_obj, program_to_obj


def test_program_to_obj_shape():
    obj = program_to_obj(parse('+[-]'))
    assert obj == {
        "type": "Program",
        "instructions": [
            {"op": "Increment"},
            {"op": "LoopOpen", "target": 3},
            {"op": "Decrement"},
            {"op": "LoopClose", "target": 1},
        ],
    }


def test_program_survives_json_encoding():
    program = parse('>,[>,]<[.<]')
    text = json.dumps(program_to_obj(program))
    assert program_from_obj(json.loads(text)) == program


def test_unknown_op_rejected():
    with pytest.raises(ValueError, match="Unknown instruction op"):
        program_from_obj({"type": "Program", "instructions": [{"op": "Halt"}]})


def test_loop_target_must_be_integer():
    with pytest.raises(ValueError):
        program_from_obj({"type": "Program", "instructions": [{"op": "LoopOpen", "target": "1"}]})


def test_mismatched_loop_targets_rejected():
    obj = {
        "type": "Program",
        "instructions": [
            {"op": "LoopOpen", "target": 1},
            {"op": "LoopClose", "target": 1},
        ],
    }
    with pytest.raises(ValueError):
        program_from_obj(obj)


def test_target_outside_program_rejected():
    with pytest.raises(ValueError, match="outside the program"):
        Program([LoopOpen(5)]).validate()


def test_validate_accepts_resolved_loops():
    Program([Increment(), LoopOpen(2), LoopClose(1)]).validate()


def test_not_a_program_object():
    with pytest.raises(ValueError):
        program_from_obj({"type": "Block"})
