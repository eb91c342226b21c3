'''
Readers and writers for the graph file formats.

dimacs:                     edgelist:               bin (little-endian int32):

c <comment>                 <nvertices> <nedges>    <nvertices> <nedges>
p sp <nvertices> <nedges>   <v1> <v2> <w>           <v1> <v2> <w>
a <v1> <v2> <w>             <v1> <v2> <w>           ...
a <v1> <v2> <w>             ...
...
'''

from typing import Iterator

import numpy as np

from graph import Graph

FORMATS = ('dimacs', 'edgelist', 'bin')

BIN_DTYPE = np.dtype('<i4')
BIN_MIN, BIN_MAX = int(np.iinfo(BIN_DTYPE).min), int(np.iinfo(BIN_DTYPE).max)


class GraphFormatError(ValueError):
    def __init__(self, fname: str, lineno: int, msg: str) -> None:
        super().__init__(f'{fname}:{lineno}: {msg}')
        self.fname = fname
        self.lineno = lineno


def _parse_ints(tokens: list[str], fname: str, lineno: int) -> list[int]:
    try:
        return [int(token) for token in tokens]
    except ValueError:
        raise GraphFormatError(fname, lineno, f'expected integers, got {" ".join(tokens)!r}') from None


def _decoded_lines(f, fname: str) -> Iterator[tuple[int, str]]:
    # decode per line so that errors point at the right line number
    for lineno, raw in enumerate(f, start=1):
        try:
            yield lineno, raw.decode('utf-8')
        except UnicodeDecodeError as e:
            raise GraphFormatError(fname, lineno, f'not UTF-8 text ({e.reason} at byte {e.start})') from None


def read_dimacs(fname: str) -> Graph:
    graph = Graph(0)
    header_seen = False
    max_label = 0

    with open(fname, 'rb') as f:
        for lineno, line in _decoded_lines(f, fname):
            parts = line.split()
            if not parts:
                continue

            if parts[0] == 'p' and len(parts) > 1 and parts[1] == 'sp':
                if len(parts) != 4:
                    raise GraphFormatError(fname, lineno, 'expected "p sp <nvertices> <nedges>"')
                # the edge count is advisory only
                nvertices, _ = _parse_ints(parts[2:], fname, lineno)
                graph = Graph(nvertices)
                header_seen = True
            elif parts[0] == 'a':
                if len(parts) != 4:
                    raise GraphFormatError(fname, lineno, 'expected "a <v1> <v2> <w>"')
                u, v, w = _parse_ints(parts[1:], fname, lineno)
                max_label = max(max_label, u, v)
                graph.add_edge(u, v, w)

    # no "p sp" line: size the graph from the labels that were used
    if not header_seen:
        graph.n_vertices = max_label

    return graph


def read_edgelist(fname: str) -> Graph:
    with open(fname, 'rb') as f:
        lines = _decoded_lines(f, fname)
        _, header = next(lines, (1, ''))
        header = header.split()
        if len(header) != 2:
            raise GraphFormatError(fname, 1, 'expected "<nvertices> <nedges>"')
        nvertices, _ = _parse_ints(header, fname, 1)
        graph = Graph(nvertices)

        for lineno, line in lines:
            parts = line.split()
            if not parts:
                continue
            if len(parts) != 3:
                raise GraphFormatError(fname, lineno, 'expected "<v1> <v2> <w>"')
            graph.add_edge(*_parse_ints(parts, fname, lineno))

    return graph


def read_binary(fname: str) -> Graph:
    with open(fname, 'rb') as f:
        payload = f.read()

    if len(payload) % BIN_DTYPE.itemsize:
        raise GraphFormatError(fname, 0, f'size {len(payload)} is not a multiple of {BIN_DTYPE.itemsize} bytes')
    data = np.frombuffer(payload, dtype=BIN_DTYPE)

    if len(data) < 2:
        raise GraphFormatError(fname, 0, 'missing header')

    nvertices, nedges = int(data[0]), int(data[1])
    body = data[2:]
    if len(body) != 3 * nedges:
        raise GraphFormatError(fname, 0, f'expected {nedges} edges, found {len(body) / 3:g}')

    graph = Graph(nvertices)
    for u, v, w in body.reshape(-1, 3).tolist():
        graph.add_edge(u, v, w)
    return graph


def write_dimacs(graph: Graph, fname: str) -> None:
    with open(fname, 'w') as f:
        f.write(f'p sp {graph.n_vertices} {graph.n_edges}\n')
        for edge in graph.edges:
            f.write(f'a {edge.u} {edge.v} {edge.weight}\n')


def write_edgelist(graph: Graph, fname: str) -> None:
    with open(fname, 'w') as f:
        f.write(f'{graph.n_vertices} {graph.n_edges}\n')
        for edge in graph.edges:
            f.write(f'{edge.u} {edge.v} {edge.weight}\n')


def write_binary(graph: Graph, fname: str) -> None:
    values = [graph.n_vertices, graph.n_edges] + [x for edge in graph.edges for x in edge]
    for x in values:
        if not BIN_MIN <= x <= BIN_MAX:
            raise ValueError(f'{x} does not fit in a 32-bit binary graph file')

    header = np.array([graph.n_vertices, graph.n_edges], dtype=BIN_DTYPE)
    body = np.array(graph.edges, dtype=BIN_DTYPE).reshape(-1, 3)
    with open(fname, 'wb') as f:
        f.write(header.tobytes())
        f.write(body.tobytes())


_READERS = {
    'dimacs': read_dimacs,
    'edgelist': read_edgelist,
    'bin': read_binary,
}

_WRITERS = {
    'dimacs': write_dimacs,
    'edgelist': write_edgelist,
    'bin': write_binary,
}


def load_graph(fname: str, fmt: str='dimacs') -> Graph:
    if fmt not in _READERS:
        raise ValueError(f'unknown graph format {fmt!r}, expected one of {FORMATS}')
    return _READERS[fmt](fname)


def save_graph(graph: Graph, fname: str, fmt: str='dimacs') -> None:
    if fmt not in _WRITERS:
        raise ValueError(f'unknown graph format {fmt!r}, expected one of {FORMATS}')
    _WRITERS[fmt](graph, fname)
