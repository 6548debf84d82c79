"""Topological ordering of a directed graph with vertices numbered from 1."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class CycleError(ValueError):
    """Raised when the graph has a cycle and so no topological order."""

    def __init__(self, remaining: Iterable[int]) -> None:
        self.remaining = tuple(sorted(remaining))
        super().__init__(f"graph contains a cycle among vertices {self.remaining}")


def topological_sort(vertex_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Order vertices 1..vertex_count so every edge points forward.

    Uses Kahn's algorithm with a FIFO queue; ties go to the lower vertex
    number. Raises ValueError for an edge outside the vertex range and
    CycleError when the graph is cyclic.
    """
    if vertex_count < 0:
        raise ValueError("vertex count must be non-negative")
    vertices = range(1, vertex_count + 1)
    successors: dict[int, set[int]] = {v: set() for v in vertices}
    for origin, destination in edges:
        if origin not in successors or destination not in successors:
            raise ValueError(f"invalid edge ({origin}, {destination})")
        successors[origin].add(destination)

    indegree = {v: 0 for v in vertices}
    for targets in successors.values():
        for target in targets:
            indegree[target] += 1

    queue = deque(v for v in vertices if indegree[v] == 0)
    order: list[int] = []
    while queue:
        vertex = queue.popleft()
        order.append(vertex)
        for target in sorted(successors[vertex]):
            indegree[target] -= 1
            if indegree[target] == 0:
                queue.append(target)

    if len(order) != vertex_count:
        raise CycleError(v for v in vertices if indegree[v] > 0)
    return order