import networkx as nx
import random

from typing import Any, Callable

import graphio
from graph import Graph

def arbitrary_weight(low: int, high: int, seed: int=0) -> Callable[[Any, Any], int]:
    rng = random.Random(seed)
    return lambda _a, _b: rng.randint(low, high)

def to_graph(g: nx.Graph,
             decide_weight: Callable[[Any, Any], int],
             nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Graph:
    graph = Graph(g.number_of_nodes())

    for edge in g.edges:
        # Convert edge names to index
        u = nodename_to_idx(edge[0])
        v = nodename_to_idx(edge[1])
        graph.add_edge(u, v, decide_weight(edge[0], edge[1]))

    return graph

def to_networkx(graph: Graph) -> nx.MultiGraph:
    # MultiGraph so that duplicate edges survive the conversion
    g = nx.MultiGraph()
    g.add_nodes_from(range(graph.n_vertices))
    for (u, v, w) in graph.edges:
        g.add_edge(u, v, weight=w)
    return g

def reference_mst_weight(graph: Graph, algorithm: str='prim') -> int:
    mst = nx.minimum_spanning_tree(to_networkx(graph), weight='weight', algorithm=algorithm)
    return sum(w for (_, _, w) in mst.edges(data='weight'))

def to_output_file(g: nx.Graph,
                   decide_weight: Callable[[Any, Any], int],
                   fname: str,
                   fmt: str='dimacs',
                   nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> None:
    graphio.save_graph(to_graph(g, decide_weight, nodename_to_idx), fname, fmt)


def hypercube_idx(node: tuple[int, ...]) -> int:
    return sum(node[-i-1] * 2**i for i in range(len(node)))


if __name__ == '__main__':
    import os

    OUTDIR = 'testfiles'
    os.makedirs(OUTDIR, exist_ok=True)

    ## Generate Circulant Graphs

    circulant_n10000 = nx.circulant_graph(10000, [1, 2])
    to_output_file(circulant_n10000, arbitrary_weight(1, 500), f'{OUTDIR}/circulant_n10000.txt')

    ## Generate Hypercube Graphs

    hypercube_n1024 = nx.hypercube_graph(10)
    to_output_file(hypercube_n1024, arbitrary_weight(1, 500), f'{OUTDIR}/hypercube_n1024.txt', nodename_to_idx=hypercube_idx)

    ## Generate Connected Caveman Graphs

    caveman_1000 = nx.connected_caveman_graph(100, 10)
    to_output_file(caveman_1000, arbitrary_weight(1, 500), f'{OUTDIR}/conn_caveman_n1000.txt')

    ## Generated (Disconnected) Caveman Graphs

    caveman_1000 = nx.caveman_graph(100, 10)
    to_output_file(caveman_1000, arbitrary_weight(1, 500), f'{OUTDIR}/caveman_n1000.txt')
