import argparse
import os
import sys
import time

from typing import Iterable, NamedTuple, Optional

import graphio
from graph import Edge, Graph


class VertexIndexError(IndexError):
    pass


class UnionFind:
    """Disjoint sets over the vertices 0..n_verts-1.

    find() compresses paths and union() merges by rank, so a sequence of
    operations runs in near-constant amortized time per operation.
    """

    def __init__(self, n_verts: int) -> None:
        self.parent = [i for i in range(n_verts)]
        self.rank = [0] * n_verts

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self.parent):
            raise VertexIndexError(f'vertex {index} out of range [0, {len(self.parent) - 1}]')

    def find(self, index: int) -> int:
        self._check(index)

        root = index
        while self.parent[root] != root:
            root = self.parent[root]

        # relink the whole walked path straight to the root
        while self.parent[index] != root:
            nxt = self.parent[index]
            self.parent[index] = root
            index = nxt

        return root

    def union(self, i: int, j: int) -> None:
        i = self.find(i)
        j = self.find(j)
        if i == j:
            return

        if self.rank[i] > self.rank[j]:
            self.parent[j] = i
        elif self.rank[i] < self.rank[j]:
            self.parent[i] = j
        else:
            self.parent[j] = i
            self.rank[i] += 1

    def get_top_level(self, verts: Iterable[int]) -> list[int]:
        return [x for x in verts if self.find(x) == x]

    def n_sets(self) -> int:
        return len(self.get_top_level(range(len(self.parent))))


class MSTResult(NamedTuple):
    total_weight: int
    edges: tuple[Edge, ...]


def run_kruskal(graph: Graph) -> MSTResult:
    # sorted() is stable, equal weights keep their input order
    edges = sorted(graph.edges, key=lambda e: e.weight)

    # one extra slot so that both 0-based and 1-based labels fit
    uf = UnionFind(graph.n_vertices + 1)
    mst = []
    total = 0

    for edge in edges:
        if uf.find(edge.u) != uf.find(edge.v):
            uf.union(edge.u, edge.v)
            mst.append(edge)
            total += edge.weight

    return MSTResult(total, tuple(mst))


def print_summary(graph: Graph, result: MSTResult, elapsed_ms: float, show_edges: bool=True) -> None:
    print('=================   Summary   =====================')
    print(f'Execution time: {elapsed_ms:0.3f} ms')
    print(f'Number of vertices: {graph.n_vertices}')
    print(f'Number of edges: {graph.n_edges}')
    print(f'MST weight: {result.total_weight}')

    if show_edges:
        print()
        print('MST edges:')
        for edge in result.edges:
            # edge line wording is fixed by the output format consumers expect
            print(f'Vertex {edge.u} - Vertex {edge.v} com peso {edge.weight}')


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='kruskal',
                                     description="Compute a minimum spanning tree with Kruskal's algorithm")
    parser.add_argument('filename', nargs='?',
                        help='the graph file to read')
    parser.add_argument('-f', '--format',
                        default='dimacs',
                        choices=graphio.FORMATS,
                        help='the format of the graph file')
    parser.add_argument('-r', '--reps',
                        default=1,
                        help='the number of times to repeat the computation',
                        type=int)
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='only print the summary, not the MST edges')

    args = parser.parse_args(argv)

    if args.filename is None:
        parser.print_usage()
        print('Please provide the path of a graph file.')
        return 1

    if not os.path.isfile(args.filename):
        print(f'File not found: {args.filename}')
        return 1

    if args.reps < 1:
        print(f'Error: --reps must be positive, got {args.reps}')
        return 1

    try:
        graph = graphio.load_graph(args.filename, args.format)

        times = []
        for _ in range(args.reps):
            start = time.perf_counter()
            result = run_kruskal(graph)
            times.append(time.perf_counter() - start)
    except (graphio.GraphFormatError, VertexIndexError) as e:
        print(f'Error: {e}')
        return 1

    print_summary(graph, result, 1000 * sum(times) / len(times), show_edges=not args.quiet)
    return 0


if __name__ == '__main__':
    sys.exit(main())
