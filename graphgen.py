import argparse
import random

import numpy as np

import graphio
from graph import Graph


def generate(nvertices: int,
             density: float=0.5,
             min_weight: int=1,
             max_weight: int=100,
             seed: int=0) -> Graph:
    if not 0 <= density <= 1:
        raise ValueError(f'density must lie in [0, 1], got {density}')

    rng = random.Random(seed)
    total_edges = int(density * nvertices * (nvertices-1) / 2)

    adj_matrix = np.zeros((nvertices, nvertices), dtype=int)
    # separate from adj_matrix so that zero weights still mark a spot as taken
    occupied = np.zeros((nvertices, nvertices), dtype=bool)

    for _ in range(total_edges):
        # keep trying until an unoccupied spot is found
        while True:
            i = rng.randint(0, nvertices-2)
            j = rng.randint(i+1, nvertices-1) # ensure no self-loops
            if not occupied[i, j]:
                break

        # Only bother filling upper triangle for undirected graphs
        occupied[i, j] = True
        adj_matrix[i, j] = rng.randint(min_weight, max_weight)

    graph = Graph(nvertices)
    for (i, j) in zip(*np.nonzero(occupied)):
        graph.add_edge(int(i), int(j), int(adj_matrix[i, j]))
    return graph


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='GraphGen',
                                     description='Generate graphs for benchmarking')
    parser.add_argument('nvertices', type=int)
    parser.add_argument('-o', '--outfile', default='graph.txt')
    parser.add_argument('-f', '--format', default='dimacs', choices=graphio.FORMATS)
    parser.add_argument('-d', '--density', default=0.5, type=float)
    parser.add_argument('-s', '--seed', default=0, type=int)
    parser.add_argument('--min-weight', default=1, type=int)
    parser.add_argument('--max-weight', default=100, type=int)
    parser.add_argument('-v', '--verbose', action='store_true')
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if not args.quiet:
        total_edges = int(args.density * args.nvertices * (args.nvertices-1) / 2)
        print(f'Generating a graph on {args.nvertices} vertices...')
        print(f'  Density: {args.density} ({total_edges} edges)')
        print(f'  Edge weights between: [{args.min_weight}, {args.max_weight}]')

    try:
        graph = generate(args.nvertices, args.density, args.min_weight, args.max_weight, args.seed)
    except ValueError as e:
        parser.error(str(e))

    if args.verbose:
        print()
        print('Graph edges:')
        for edge in graph.edges:
            print(f'  {edge}')

    graphio.save_graph(graph, args.outfile, args.format)
