import subprocess
import sys
from pathlib import Path

import pytest

import graphio
from graph import Graph
from kruskal import main


@pytest.fixture
def dimacs_file(tmp_path) -> str:
    path = tmp_path / 'graph.gr'
    path.write_text('c example\n'
                    'p sp 4 5\n'
                    'a 0 1 1\n'
                    'a 1 2 2\n'
                    'a 2 3 3\n'
                    'a 0 3 4\n'
                    'a 0 2 5\n')
    return str(path)


def test_summary(dimacs_file, capsys):
    assert main([dimacs_file]) == 0
    out = capsys.readouterr().out

    assert 'Execution time: ' in out
    assert 'Number of vertices: 4' in out
    assert 'Number of edges: 5' in out
    assert 'MST weight: 6' in out
    assert out.rstrip().splitlines()[-3:] == [
        'Vertex 0 - Vertex 1 com peso 1',
        'Vertex 1 - Vertex 2 com peso 2',
        'Vertex 2 - Vertex 3 com peso 3',
    ]


def test_quiet_and_reps(dimacs_file, capsys):
    assert main([dimacs_file, '-q', '-r', '3']) == 0
    out = capsys.readouterr().out
    assert 'MST weight: 6' in out
    assert 'com peso' not in out


@pytest.mark.parametrize('fmt', ['edgelist', 'bin'])
def test_other_formats(tmp_path, capsys, fmt):
    fname = str(tmp_path / 'graph')
    graphio.save_graph(Graph(3, [(0, 1, 2), (1, 2, 2), (0, 2, 1)]), fname, fmt)

    assert main([fname, '--format', fmt]) == 0
    assert 'MST weight: 3' in capsys.readouterr().out


def test_no_argument(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert 'usage:' in out
    assert 'Please provide the path of a graph file.' in out


def test_missing_file(tmp_path, capsys):
    missing = str(tmp_path / 'nope.gr')
    assert main([missing]) == 1
    assert capsys.readouterr().out.strip() == f'File not found: {missing}'


def test_malformed_file(tmp_path, capsys):
    path = tmp_path / 'bad.gr'
    path.write_text('p sp 2 1\na 1 two 3\n')
    assert main([str(path)]) == 1
    assert capsys.readouterr().out.startswith(f'Error: {path}:2:')


def test_vertex_out_of_range(tmp_path, capsys):
    path = tmp_path / 'bad.gr'
    path.write_text('p sp 2 1\na 1 9 3\n')
    assert main([str(path)]) == 1
    assert 'Error: vertex 9 out of range' in capsys.readouterr().out


def test_bad_reps(dimacs_file, capsys):
    assert main([dimacs_file, '-r', '0']) == 1
    assert 'Error: --reps must be positive' in capsys.readouterr().out


def test_invalid_utf8(tmp_path, capsys):
    path = tmp_path / 'bad.gr'
    path.write_bytes(b'p sp 2 1\na 0 1 \xff\n')
    assert main([str(path)]) == 1
    out = capsys.readouterr().out
    assert out.startswith(f'Error: {path}:2: not UTF-8 text')


def test_binary_file_without_format(tmp_path, capsys):
    fname = str(tmp_path / 'graph.bin')
    graphio.save_graph(Graph(3, [(0, 1, 200), (1, 2, 255)]), fname, 'bin')
    assert main([fname]) == 1
    assert capsys.readouterr().out.startswith(f'Error: {fname}:')


def test_run_as_script(dimacs_file):
    # graphio must load the same Graph class the script works with
    root = Path(__file__).resolve().parent.parent
    proc = subprocess.run([sys.executable, str(root / 'kruskal.py'), dimacs_file, '-q'],
                          capture_output=True, text=True, cwd=root)
    assert proc.returncode == 0
    assert 'MST weight: 6' in proc.stdout


def test_graph_class_shared():
    import graph
    import kruskal

    assert kruskal.Graph is graph.Graph
    assert graphio.Graph is graph.Graph
