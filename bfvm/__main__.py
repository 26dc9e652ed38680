"""CLI entry point for the bfvm interpreter.

Usage:
    python -m bfvm [-v|-vv|-vvv|-vvvv] [--tape-size N] [--circular] <program_file>
    python -m bfvm [-v...] --emit-json <program_file>
    python -m bfvm [-v...] --json <program_json_file>

Options:
  -v            Increase debug verbosity (can be repeated)
  --tape-size   Number of tape cells (default 1024)
  --circular    Wrap the cursor around the tape edges instead of failing
  --emit-json   Parse the given program file and emit its resolved
                instructions as a JSON file
  --json        Execute a previously emitted JSON file

The program reads bytes from stdin and writes bytes to stdout. Debug
information is written to `debug.txt` in the current directory when
verbosity is greater than zero.
"""

import argparse
import json
import sys
from pathlib import Path

from .errors import BfError, ParseError
from .interpreter import Interpreter
from .parser import parse
from .program_json import program_from_obj, program_to_obj
from .std.io import stdio_streams
from .tape import DEFAULT_CAPACITY, make_tape


def read_text(path: Path) -> str:
    if not path.exists():
        print(f"Error: file {path} not found", file=sys.stderr)
        sys.exit(1)
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def parse_or_exit(path: Path):
    source = read_text(path)
    try:
        return parse(source)
    except ParseError as e:
        line, column = e.location(source)
        print(f"Error: {path}:{line}:{column}: {e.kind}", file=sys.stderr)
        sys.exit(1)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='bfvm', description="bfvm byte-tape interpreter")
    parser.add_argument('-v', action='count', default=0, help='increase debug verbosity (can be repeated)')
    parser.add_argument('--tape-size', type=int, default=DEFAULT_CAPACITY, metavar='N',
                        help=f'number of tape cells (default {DEFAULT_CAPACITY})')
    parser.add_argument('--circular', action='store_true', help='wrap the cursor around the tape edges')
    group = parser.add_mutually_exclusive_group()
    group.add_argument('--emit-json', metavar='PROGRAM_FILE', help='emit resolved instructions as JSON for the given file')
    group.add_argument('--json', metavar='JSON_FILE', help='execute a program from a JSON file')
    parser.add_argument('program', nargs='?', help='program file to execute')
    args = parser.parse_args(argv)

    if args.tape_size <= 0:
        parser.error('--tape-size must be positive')

    # Emit JSON mode
    if args.emit_json:
        program_file = Path(args.emit_json)
        program = parse_or_exit(program_file)
        out_path = program_file.with_name(program_file.name + '.json')
        with open(out_path, 'w', encoding='utf-8') as out:
            json.dump(program_to_obj(program), out, indent=2)
        print(str(out_path))
        return

    if args.json:
        json_path = Path(args.json)
        try:
            program = program_from_obj(json.loads(read_text(json_path)))
        except ValueError as e:
            print(f"Error: {json_path}: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        if not args.program:
            parser.error('missing program file; or use --emit-json/--json')
        program = parse_or_exit(Path(args.program))

    tape = make_tape(args.tape_size, circular=args.circular)
    reader, writer = stdio_streams()
    interpreter = Interpreter(debug_level=args.v)
    try:
        interpreter.run(program, tape, reader, writer)
        writer.flush()
    except BfError as e:
        print(f"Runtime error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
