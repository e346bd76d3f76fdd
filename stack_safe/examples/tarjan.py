"""Tarjan's strongly connected components.

The depth-first search mutates state shared by all activations between its
recursive calls; a chain of n nodes nests n calls deep.
"""
from typing import List, Sequence, Set
from stack_safe import recurse

Graph = Sequence[Sequence[int]]


def strongly_connected_components(graph: Graph) -> List[List[int]]:
    """Components in reverse topological order, each listed from the node
    closing it back to its root.
    """
    n = len(graph)
    index = 0
    indices = n * [-1]  # type: List[int]
    lowlinks = n * [-1]  # type: List[int]
    components = []  # type: List[List[int]]
    stack = []  # type: List[int]
    on_stack = set()  # type: Set[int]

    @recurse
    def dfs(v: int):
        nonlocal index
        indices[v] = index
        lowlinks[v] = index
        index += 1
        stack.append(v)
        on_stack.add(v)

        for w in graph[v]:
            if indices[w] < 0:
                yield w
                lowlinks[v] = min(lowlinks[v], lowlinks[w])
            elif w in on_stack:
                lowlinks[v] = min(lowlinks[v], indices[w])

        if lowlinks[v] == indices[v]:
            component = []
            w = -1
            while w != v:
                w = stack.pop()
                on_stack.remove(w)
                component.append(w)
            components.append(component)

    for v in range(n):
        if indices[v] < 0:
            dfs(v)

    return components


def chain(n: int) -> List[List[int]]:
    """0 -> 1 -> ... -> n - 1"""
    return [[i + 1] for i in range(n - 1)] + [[]] if n else []
