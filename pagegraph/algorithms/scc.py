"""
Strongly connected components via Kosaraju's two-pass algorithm.
"""

from __future__ import annotations

import logging

from pagegraph.algorithms.traversal import collect_reachable, finish_order

logger = logging.getLogger(__name__)


def kosaraju(forward: list[list[int]], transpose: list[list[int]]) -> list[list[int]]:
    """
    Group vertex indices into strongly connected components.

    The first pass records depth-first finish order over the forward graph.
    The second pass walks that order backwards and, for each vertex not yet
    assigned, collects everything it reaches in the transpose graph.

    Args:
        forward: Outgoing neighbour indices per vertex
        transpose: Incoming neighbour indices per vertex (same length)

    Returns:
        Components in reverse finish order of their representative; each
        component lists its vertices in transpose DFS order, representative first.
    """
    order = finish_order(forward)

    visited = [False] * len(transpose)
    components: list[list[int]] = []
    for vertex in reversed(order):
        if not visited[vertex]:
            components.append(collect_reachable(transpose, vertex, visited))

    logger.debug(f"Kosaraju found {len(components)} components over {len(order)} vertices")
    return components
