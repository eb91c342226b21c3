from typing import Iterable, NamedTuple, Optional


class Edge(NamedTuple):
    u: int
    v: int
    weight: int

    def __repr__(self):
        return f'({self.u}, {self.v}, {self.weight})'

    __str__ = __repr__


class Graph:
    def __init__(self, n_vertices: int, edges: Optional[Iterable[Edge]] = None) -> None:
        self.n_vertices = n_vertices
        self.edges: list[Edge] = []
        for edge in edges or ():
            self.add_edge(*edge)

    def add_edge(self, u: int, v: int, weight: int) -> None:
        self.edges.append(Edge(u, v, weight))

    @property
    def n_edges(self) -> int:
        return len(self.edges)

    def __repr__(self):
        return f'Graph(n_vertices={self.n_vertices}, n_edges={self.n_edges})'
