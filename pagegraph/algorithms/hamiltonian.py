"""
Minimum-cost Hamiltonian path by dynamic programming over vertex subsets.

A move between consecutive vertices costs nothing when the forward graph has
a direct link and a fixed penalty otherwise. The cheapest ordering of all
vertices therefore has cost 0 exactly when a true Hamiltonian path exists,
and otherwise is the ordering with the fewest missing links.

Runs in O(n^2 * 2^n) time and O(n * 2^n) memory, so it is only practical for
small graphs.
"""

from __future__ import annotations

import logging

import numpy as np

from pagegraph.config import (
    HAMILTONIAN_MAX_VERTICES,
    HAMILTONIAN_WARN_VERTICES,
    NO_LINK_PENALTY,
)

logger = logging.getLogger(__name__)

# Marks subset/end-vertex states that cannot occur (end vertex not in subset)
_IMPOSSIBLE = np.iinfo(np.int64).max // 4


def link_costs(forward: list[list[int]], penalty: int = NO_LINK_PENALTY) -> np.ndarray:
    """Build the n x n move-cost matrix: 0 where k -> v is a link, else penalty."""
    n = len(forward)
    costs = np.full((n, n), penalty, dtype=np.int64)
    for source, neighbors in enumerate(forward):
        if neighbors:
            costs[source, neighbors] = 0
    return costs


def solve(forward: list[list[int]], penalty: int = NO_LINK_PENALTY) -> tuple[list[int], int]:
    """
    Find the cheapest ordering that visits every vertex exactly once.

    best[S, v] is the minimum cost of a path that visits exactly the vertex
    set S (a bitmask) and ends at v; parent[S, v] is the vertex visited just
    before v on that path. Ties go to the lowest vertex index.

    The tables hold n * 2^n int64 cells each, so graphs with more than
    HAMILTONIAN_MAX_VERTICES vertices are not searched: an error is logged
    and an empty ordering returned.

    Args:
        forward: Outgoing neighbour indices per vertex
        penalty: Cost charged for each consecutive pair with no link

    Returns:
        Tuple of (vertex indices in visiting order, total cost). Both are
        empty/zero for an empty graph or one above the size limit.
    """
    n = len(forward)
    if n == 0:
        return [], 0

    if n > HAMILTONIAN_MAX_VERTICES:
        logger.error(
            f"Hamiltonian search over {n} vertices exceeds the limit of "
            f"{HAMILTONIAN_MAX_VERTICES}; skipping"
        )
        return [], 0

    if n > HAMILTONIAN_WARN_VERTICES:
        logger.warning(
            f"Hamiltonian search over {n} vertices needs {n * (1 << n):,} DP cells; "
            f"this may be very slow"
        )

    costs = link_costs(forward, penalty)
    full = (1 << n) - 1
    vertices = np.arange(n)

    best = np.full((1 << n, n), _IMPOSSIBLE, dtype=np.int64)
    parent = np.full((1 << n, n), -1, dtype=np.int64)
    best[1 << vertices, vertices] = 0

    # Every proper subset of S is numerically smaller than S
    for subset in range(1, full + 1):
        if subset & (subset - 1) == 0:
            continue

        ends = vertices[(subset >> vertices) & 1 == 1]
        without_end = subset ^ (1 << ends)
        # Row i: cost of reaching ends[i] from each possible predecessor
        candidates = best[without_end] + costs[:, ends].T
        choice = np.argmin(candidates, axis=1)
        best[subset, ends] = candidates[np.arange(len(ends)), choice]
        parent[subset, ends] = choice

    end = int(np.argmin(best[full]))
    total = int(best[full, end])

    order: list[int] = []
    subset = full
    vertex = end
    while vertex != -1:
        order.append(vertex)
        previous = int(parent[subset, vertex])
        subset ^= 1 << vertex
        vertex = previous
    order.reverse()

    logger.debug(f"Hamiltonian DP over {n} vertices: cost {total}, order {order}")
    return order, total
