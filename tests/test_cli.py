import io
import json
import sys
from pathlib import Path

import pytest

from bfvm.__main__ import main

EXAMPLES = Path(__file__).resolve().parent.parent / 'examples'


class FakeStdio:
    """Text stream stand-in exposing a binary `buffer`, like sys.stdin/stdout."""
    def __init__(self, data=b''):
        self.buffer = io.BytesIO(data)


@pytest.fixture
def stdio(monkeypatch):
    def install(data=b''):
        stdin, stdout = FakeStdio(data), FakeStdio()
        monkeypatch.setattr(sys, 'stdin', stdin)
        monkeypatch.setattr(sys, 'stdout', stdout)
        return stdout.buffer
    return install


def test_cli_runs_program(stdio):
    out = stdio()
    main([str(EXAMPLES / 'hello_world.bf')])
    assert out.getvalue() == b'Hello World!\n'


def test_cli_reads_stdin(stdio):
    out = stdio(b'stressed')
    main([str(EXAMPLES / 'reverse.bf')])
    assert out.getvalue() == b'desserts'


def test_cli_missing_file(capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / 'nope.bf')])
    assert exc.value.code == 1
    assert 'not found' in capsys.readouterr().err


def test_cli_reports_parse_error_location(capsys):
    with pytest.raises(SystemExit) as exc:
        main([str(EXAMPLES / 'unbalanced.bf')])
    assert exc.value.code == 1
    assert "unbalanced.bf:1:9: unmatched ']'" in capsys.readouterr().err


def test_cli_reports_runtime_error(stdio, capsys):
    stdio()
    with pytest.raises(SystemExit) as exc:
        main(['--tape-size', '8', str(EXAMPLES / 'runaway.bf')])
    assert exc.value.code == 1
    assert 'Runtime error: cannot move right' in capsys.readouterr().err


def test_cli_circular_tape(stdio):
    stdio()
    main(['--circular', '--tape-size', '4', str(EXAMPLES / 'runaway.bf')])


def test_cli_rejects_bad_tape_size(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--tape-size', '0', str(EXAMPLES / 'hello_world.bf')])
    assert exc.value.code == 2


def test_cli_emit_and_run_json(tmp_path, capsys, stdio):
    program_file = tmp_path / 'hello.bf'
    program_file.write_text((EXAMPLES / 'hello_world.bf').read_text(encoding='utf-8'), encoding='utf-8')
    main(['--emit-json', str(program_file)])
    json_path = tmp_path / 'hello.bf.json'
    assert capsys.readouterr().out.strip() == str(json_path)
    data = json.loads(json_path.read_text(encoding='utf-8'))
    assert data['type'] == 'Program'

    out = stdio()
    main(['--json', str(json_path)])
    assert out.getvalue() == b'Hello World!\n'


def test_cli_rejects_broken_json(tmp_path, capsys):
    json_path = tmp_path / 'broken.json'
    json_path.write_text('{"type": "Program", "instructions": [{"op": "LoopOpen", "target": 0}]}', encoding='utf-8')
    with pytest.raises(SystemExit) as exc:
        main(['--json', str(json_path)])
    assert exc.value.code == 1
    assert 'broken.json' in capsys.readouterr().err
