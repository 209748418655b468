import os
import subprocess
import sys

import pytest

isowrap_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
isowrap_exe = os.path.join(isowrap_root, 'tools', 'isowrap')


def run_process(cmdline, cwd):
    process = subprocess.Popen([sys.executable, isowrap_exe] + cmdline,
                               cwd=cwd,
                               env={
                                   'PATH': os.environ['PATH'],
                                   'PYTHONPATH': isowrap_root,
                               },
                               stdout=subprocess.PIPE,
                               stderr=subprocess.PIPE)

    out, err = process.communicate()

    ret = process.wait()

    return ret, out, err


def test_isowrap_tool_default_output(tmpdir):
    infile = tmpdir.join('setup.sh')
    infile.write_binary(b'echo hello')

    ret, out, err = run_process([str(infile)], str(tmpdir))

    assert(ret == 0)
    outfile = tmpdir.join('setup.sh.iso')
    data = outfile.read_binary()
    assert(len(data) == 22 * 2048)
    assert(data[16 * 2048 + 40:16 * 2048 + 72] == b'SETUP.SH' + b' ' * 24)
    assert(data[21 * 2048:21 * 2048 + 10] == b'echo hello')


def test_isowrap_tool_output(tmpdir):
    first = tmpdir.join('a.txt')
    first.write_binary(b'a')
    second = tmpdir.join('b.txt')
    second.write_binary(b'b' * 2049)
    outfile = tmpdir.join('both.iso')

    ret, out, err = run_process(['-o', str(outfile), str(first), str(second)],
                                str(tmpdir))

    assert(ret == 0)
    assert(len(outfile.read_binary()) == 24 * 2048)


def test_isowrap_tool_verbose(tmpdir):
    infile = tmpdir.join('setup.sh')
    infile.write_binary(b'echo hello')

    ret, out, err = run_process(['-v', str(infile)], str(tmpdir))

    assert(ret == 0)
    assert(b'Wrote ISO with 1 file(s): 22 sectors, 45056 bytes' in err)


def test_isowrap_tool_bad_name(tmpdir):
    infile = tmpdir.join('bad-name')
    infile.write_binary(b'abc')

    ret, out, err = run_process([str(infile)], str(tmpdir))

    assert(ret == 1)
    assert(err.startswith(b'isowrap: The name BAD-NAME does not satisfy'))
    assert(not tmpdir.join('bad-name.iso').check())


def test_isowrap_tool_output_exists(tmpdir):
    infile = tmpdir.join('setup.sh')
    infile.write_binary(b'echo hello')
    outfile = tmpdir.join('setup.sh.iso')
    outfile.write_binary(b'precious')

    ret, out, err = run_process([str(infile)], str(tmpdir))

    assert(ret == 1)
    assert(b'already exists' in err)
    assert(outfile.read_binary() == b'precious')


def test_isowrap_tool_multiple_needs_output(tmpdir):
    first = tmpdir.join('a.txt')
    first.write_binary(b'a')
    second = tmpdir.join('b.txt')
    second.write_binary(b'b')

    ret, out, err = run_process([str(first), str(second)], str(tmpdir))

    assert(ret == 2)
    assert(b'-o/--output is required' in err)


def test_isowrap_tool_no_inputs(tmpdir):
    ret, out, err = run_process([], str(tmpdir))

    assert(ret == 2)
