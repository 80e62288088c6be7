"""
Breadth-first and depth-first traversals over index-based adjacency lists.

Every function takes the adjacency as a list of neighbour lists indexed by
vertex and allocates its own scratch state, so callers can pass either the
forward graph or its transpose. Depth-first searches keep an explicit stack
of neighbour iterators instead of recursing, so long link chains do not hit
the interpreter's recursion limit.
"""

from __future__ import annotations

import logging
from collections import deque

import numpy as np

from pagegraph.config import UNREACHABLE

logger = logging.getLogger(__name__)


def bfs_distances(adjacency: list[list[int]], start: int) -> np.ndarray:
    """
    Compute edge-count distances from start to every vertex.

    Args:
        adjacency: Outgoing neighbour indices per vertex
        start: Source vertex index

    Returns:
        int64 array of length n; unreachable vertices hold UNREACHABLE
    """
    distances = np.full(len(adjacency), UNREACHABLE, dtype=np.int64)
    distances[start] = 0

    queue = deque([start])
    while queue:
        current = queue.popleft()
        next_distance = distances[current] + 1
        for neighbor in adjacency[current]:
            if distances[neighbor] == UNREACHABLE:
                distances[neighbor] = next_distance
                queue.append(neighbor)

    return distances


def eccentricity(distances: np.ndarray) -> int:
    """
    Largest finite distance in a BFS distance vector.

    Unreachable entries are ignored rather than treated as infinite, so a
    vertex that reaches nothing but itself has eccentricity 0.
    """
    reached = distances[distances != UNREACHABLE]
    return int(reached.max())


def finish_order(adjacency: list[list[int]]) -> list[int]:
    """
    Depth-first post-order over the whole graph.

    Roots are tried in index order and neighbours in adjacency order; a
    vertex is appended once all of its descendants have finished.
    """
    n = len(adjacency)
    visited = [False] * n
    order: list[int] = []

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(adjacency[root]))]
        while stack:
            vertex, neighbors = stack[-1]
            for neighbor in neighbors:
                if not visited[neighbor]:
                    visited[neighbor] = True
                    stack.append((neighbor, iter(adjacency[neighbor])))
                    break
            else:
                stack.pop()
                order.append(vertex)

    return order


def collect_reachable(
    adjacency: list[list[int]], start: int, visited: list[bool]
) -> list[int]:
    """
    Collect every unvisited vertex reachable from start, in DFS pre-order.

    Marks collected vertices in visited, which is shared between calls so
    that successive collections never overlap.
    """
    visited[start] = True
    collected = [start]
    stack = [iter(adjacency[start])]

    while stack:
        for neighbor in stack[-1]:
            if not visited[neighbor]:
                visited[neighbor] = True
                collected.append(neighbor)
                stack.append(iter(adjacency[neighbor]))
                break
        else:
            stack.pop()

    return collected
