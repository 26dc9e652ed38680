"""JSON serialization/deserialization for resolved programs.

This module converts between `Program` objects and plain Python
dict/list structures suitable for JSON encoding. Loop targets are
stored as resolved, so a loaded program runs without re-parsing; the
loop pairing is validated on load.
"""

from __future__ import annotations

from typing import Any, Dict, List

from .instructions import (
    Instruction,
    Increment,
    Decrement,
    MoveLeft,
    MoveRight,
    ReadByte,
    WriteByte,
    LoopOpen,
    LoopClose,
    Program,
)

SIMPLE_OPS = {
    "Increment": Increment,
    "Decrement": Decrement,
    "MoveLeft": MoveLeft,
    "MoveRight": MoveRight,
    "ReadByte": ReadByte,
    "WriteByte": WriteByte,
}

LOOP_OPS = {
    "LoopOpen": LoopOpen,
    "LoopClose": LoopClose,
}


def instruction_to_obj(instr: Instruction) -> Dict[str, Any]:
    if isinstance(instr, (LoopOpen, LoopClose)):
        return {"op": type(instr).__name__, "target": instr.target}
    return {"op": type(instr).__name__}


def instruction_from_obj(obj: Dict[str, Any]) -> Instruction:
    if not isinstance(obj, dict):
        raise ValueError(f"Instruction must be an object, got {obj!r}")
    op = obj.get("op")
    if op in SIMPLE_OPS:
        return SIMPLE_OPS[op]()
    if op in LOOP_OPS:
        target = obj.get("target")
        if isinstance(target, bool) or not isinstance(target, int):
            raise ValueError(f"{op} needs an integer target, got {target!r}")
        return LOOP_OPS[op](target)
    raise ValueError(f"Unknown instruction op: {op}")


def program_to_obj(program: Program) -> Dict[str, Any]:
    return {"type": "Program", "instructions": [instruction_to_obj(i) for i in program]}


def program_from_obj(obj: Dict[str, Any]) -> Program:
    if not isinstance(obj, dict) or obj.get("type") != "Program":
        raise ValueError("Expected a Program object")
    items: List[Any] = obj.get("instructions", [])
    if not isinstance(items, list):
        raise ValueError("Program instructions must be a list")
    program = Program(instruction_from_obj(item) for item in items)
    program.validate()
    return program
