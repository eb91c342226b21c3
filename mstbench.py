## Benchmark for the Kruskal implementation, checked against networkx

import time

from typing import Any, Callable

import networkx as nx

import nx_utils
from graph import Graph
from kruskal import run_kruskal

def time_kruskal(graph: Graph, nreps: int) -> dict[str, Any]:
    if nreps < 1:
        raise ValueError(f'nreps must be positive, got {nreps}')

    compute_times = []
    weights = []
    for _ in range(nreps):
        start = time.perf_counter()
        result = run_kruskal(graph)
        compute_times.append(time.perf_counter() - start)
        weights.append(result.total_weight)

    start = time.perf_counter()
    reference_weight = nx_utils.reference_mst_weight(graph)
    reference_time = time.perf_counter() - start

    return {
        'compute_times': compute_times,
        'avg_compute_time': sum(compute_times)/len(compute_times),
        'weights': weights,
        'reference_weight': reference_weight,
        'reference_time': reference_time,
    }

def check_weights(metrics: dict[str, Any]) -> bool:
    return all(w == metrics['reference_weight'] for w in metrics['weights'])

def print_stats(all_metrics: dict[str, dict[str, Any]]) -> None:
    speedups = []
    for (test, metrics) in all_metrics.items():
        print(f'  {test} ({len(metrics["compute_times"])} runs):')

        if not check_weights(metrics):
            print('Inconsistent result on this test')
            continue

        compute_time = metrics['avg_compute_time']
        reference_time = metrics['reference_time']
        speedup = reference_time / compute_time

        speedups.append(speedup)

        print(f'    Compute time = {compute_time:0.4f}s,  Reference (networkx) time = {reference_time:0.4f}s')
        print(f'    Total weight = {metrics["reference_weight"]},  Speedup over networkx = {speedup:0.2f}x')
        print()

    if speedups:
        print(f'Average speedup over networkx: {sum(speedups)/len(speedups):0.2f}')
    print()

def build_tests(min_weight: int, max_weight: int, seed: int) -> dict[str, Callable[[], Graph]]:
    def create_arb_weight_test(g_fxn: Callable[..., nx.Graph],
                               g_args: tuple[Any, ...],
                               nodename_to_idx: Callable[[Any], int]= lambda x: int(x)) -> Callable[[], Graph]:
        def inner():
            g = g_fxn(*g_args)
            return nx_utils.to_graph(g,
                                     nx_utils.arbitrary_weight(min_weight, max_weight, seed),
                                     nodename_to_idx=nodename_to_idx)

        return inner

    return {
        '2-degree Circulant n=50000':
            create_arb_weight_test(nx.circulant_graph,
                                   (50000, [1, 2]),
            ),

        'Hypercube d=12, n=4096':
            create_arb_weight_test(nx.hypercube_graph,
                                   (12,),
                                   nx_utils.hypercube_idx,
            ),

        'Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.caveman_graph,
                                   (500, 20),
            ),

        'Connected Caveman Graph, 500 groups of size k=20, n=10000':
            create_arb_weight_test(nx.connected_caveman_graph,
                                   (500, 20),
            ),

        'Binomial Graph, p=8e-4 n=20000':
            create_arb_weight_test(nx.fast_gnp_random_graph,
                                   (20000, 8e-4, seed),
            ),
    }

if __name__ == '__main__':
    import argparse

    parser = argparse.ArgumentParser(prog='mstbench',
                                     description='Benchmark the Kruskal MST implementation')
    parser.add_argument('-r', '--reps',
                        default=3,
                        help='the number of times to repeat each experiment',
                        type=int)
    parser.add_argument('-s', '--seed',
                        default=0,
                        help='the seed value to use for generating random graphs',
                        type=int)
    parser.add_argument('--min-weight',
                        default=1,
                        help='the minimum edge weight in random graphs',
                        type=int)
    parser.add_argument('--max-weight',
                        default=1000,
                        help='the maximum edge weight in random graphs',
                        type=int)
    parser.add_argument('-q', '--quiet', action='store_true')

    args = parser.parse_args()

    if args.reps < 1:
        parser.error(f'--reps must be positive, got {args.reps}')

    tests = build_tests(args.min_weight, args.max_weight, args.seed)
    all_metrics = {}

    for (test_name, test_gen) in tests.items():
        if not args.quiet:
            print(f'Generating graph for test "{test_name}"...')
        graph = test_gen()

        if not args.quiet:
            print(f'  Running Kruskal on test "{test_name}"...')
        metrics = time_kruskal(graph, args.reps)

        if not check_weights(metrics):
            print(f'!!! Error on "{test_name}": weights {metrics["weights"]} != reference {metrics["reference_weight"]}')

        all_metrics[test_name] = metrics

    print('Performance of Kruskal:')
    print_stats(all_metrics)
