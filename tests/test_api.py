#!/usr/bin/env python3
"""
End-to-end tests: parse, optimize and run through the public API.
"""

import io
import random
from pathlib import Path

import pytest

from bftree import (
    BoundsPolicy,
    RunOptions,
    UnmatchedLoopClose,
    UnmatchedLoopOpen,
    compile_string,
    run_file,
    run_string,
)
from bftree.nodes import ClearVal, IncVal, Write

HELLO = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]"
    ">>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def execute(source, data=b"", options=None):
    out = io.BytesIO()
    result = run_string(source, io.BytesIO(data), out, options=options)
    return out.getvalue(), result


def test_scenarios():
    assert execute('+++.')[0] == bytes([3])
    assert execute(',.', b'\x41')[0] == bytes([65])
    assert execute('+[-]. ')[0] == bytes([0])
    assert execute('+' * 256 + '.')[0] == bytes([0])


def test_clear_loop_is_collapsed():
    _, result = execute('+[-]. ')
    assert result.program == [IncVal(), ClearVal(), Write()]


def test_comment_only_program():
    out, result = execute('This program does nothing at all\n')
    assert out == b''
    assert result.program == []
    assert result.ptr == 0


def test_parse_errors():
    with pytest.raises(UnmatchedLoopClose):
        execute(']')
    with pytest.raises(UnmatchedLoopOpen):
        execute('[+')


def test_parse_error_stops_before_running():
    out = io.BytesIO()
    with pytest.raises(UnmatchedLoopClose):
        run_string('+.]', io.BytesIO(), out)
    assert out.getvalue() == b''


def test_cancel_to_empty():
    assert compile_string('><') == []
    assert compile_string('><', options=RunOptions(optimize=False)) != []


def test_hello_world():
    for optimize in (True, False):
        out, _ = execute(HELLO, options=RunOptions(optimize=optimize))
        assert out == b'Hello World!\n'


def test_result_tape():
    _, result = execute('++>+++>')
    assert result.ptr == 2
    assert result.tape[:3] == bytes([2, 3, 0])
    assert len(result.tape) == 64


def _random_program(rng):
    pieces = ['+', '-', '>', '<', '.', ',', '[-]', '[+]', '[>+<-]', '><', '+-']
    return ''.join(rng.choice(pieces) for _ in range(rng.randint(0, 40)))


def test_optimized_matches_unoptimized():
    rng = random.Random(1234)
    for _ in range(200):
        src = _random_program(rng)
        data = bytes(rng.randrange(256) for _ in range(src.count(',')))
        plain = execute(src, data, RunOptions(optimize=False, bounds=BoundsPolicy.WRAP))
        opt = execute(src, data, RunOptions(optimize=True, bounds=BoundsPolicy.WRAP))
        assert plain[0] == opt[0], src
        assert plain[1].tape == opt[1].tape, src


def test_run_file(tmp_path):
    path = tmp_path / 'three.bf'
    path.write_text('+++ put three in cell zero\n.', encoding='utf-8')
    out = io.BytesIO()
    run_file(path, io.BytesIO(), out)
    assert out.getvalue() == bytes([3])


def test_example_programs():
    root = Path(__file__).resolve().parent.parent / 'examples'
    out = io.BytesIO()
    run_file(root / 'hello.bf', io.BytesIO(), out)
    assert out.getvalue() == b'Hello World!\n'

    out = io.BytesIO()
    run_file(root / 'echo.bf', io.BytesIO(b'echo\x00ignored'), out)
    assert out.getvalue() == b'echo'
