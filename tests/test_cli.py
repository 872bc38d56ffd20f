import math
import sys

import pytest

from mpi_cpi import ThreadTeam
from mpi_cpi.cli import main, build_parser, DEFAULT_STEPS


def test_default_steps():
    assert build_parser().parse_args([]).steps == DEFAULT_STEPS


def test_root_prints_two_lines(capsys):
    codes = ThreadTeam(3).run(lambda g: main(['10000'], group=g))
    assert codes == [0, 0, 0]
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith('PI is ')
    pi = float(lines[0][len('PI is '):])
    assert abs(pi - math.pi) < 1e-6
    assert len(lines[0].split('.')[1]) == 15
    assert lines[1].startswith('Elapsed time = ') and lines[1].endswith(' nanoseconds')


def test_debug_reports_every_rank(capsys):
    ThreadTeam(2).run(lambda g: main(['100', '--debug'], group=g))
    out = capsys.readouterr().out
    assert 'rank:0,start:0,count:50' in out
    assert 'rank:1,start:50,count:50' in out


@pytest.mark.parametrize('steps', ['0', '-5'])
def test_non_positive_steps_abort_run(steps, capsys):
    with pytest.raises(SystemExit) as exc:
        ThreadTeam(3).run(lambda g: main([steps], group=g))
    assert exc.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ''
    assert captured.err.count('Error: number of steps must be positive.') == 1


def test_runs_on_mpi_world(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'excepthook', sys.excepthook)
    assert main(['1000']) == 0
    assert capsys.readouterr().out.startswith('PI is 3.14')
