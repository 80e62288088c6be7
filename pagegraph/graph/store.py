"""
PageGraph: a directed page-link graph and its transpose, with analytical queries.

Usage:
    from pagegraph import PageGraph

    graph = PageGraph()
    graph.add_edge("/wiki/Physics", "/wiki/Mathematics")
    graph.shortest_path("/wiki/Physics", "/wiki/Mathematics")
    graph.centers()
    graph.strongly_connected_components()
    graph.hamiltonian_path()

Every query recomputes from the current graph and allocates its own scratch
state, so queries never modify the graph. Mutations are not safe to run
concurrently with queries or with each other.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pagegraph.algorithms import hamiltonian
from pagegraph.algorithms.scc import kosaraju
from pagegraph.algorithms.traversal import bfs_distances, eccentricity
from pagegraph.config import NO_LINK_PENALTY, UNREACHABLE
from pagegraph.graph.registry import LabelRegistry
from pagegraph.graph.state import HamiltonianResult

logger = logging.getLogger(__name__)


class PageGraph:
    """
    Directed graph over page labels, stored as parallel adjacency lists.

    Vertex indices are assigned by the label registry in first-insertion
    order and are direct offsets into both adjacency lists.

    Attributes:
        registry: Label <-> index mapping
        forward: Outgoing neighbour indices per vertex, in link insertion order
        transpose: Incoming neighbour indices per vertex
    """

    def __init__(self) -> None:
        self.registry = LabelRegistry()
        self.forward: list[list[int]] = []
        self.transpose: list[list[int]] = []
        self._edge_count = 0

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[str, str]]) -> PageGraph:
        """Build a graph from (from_label, to_label) pairs."""
        graph = cls()
        for from_label, to_label in edges:
            graph.add_edge(from_label, to_label)
        logger.info(
            f"Built graph with {graph.vertex_count():,} vertices "
            f"and {graph.edge_count():,} edges"
        )
        return graph

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, label: str) -> None:
        """Add a page to the graph, if it does not already exist."""
        self._ensure_vertex(label)

    def add_edge(self, from_label: str, to_label: str) -> None:
        """
        Add a link from one page to another.

        Both pages are added if missing. Self-links and repeated links are kept.
        """
        from_idx = self._ensure_vertex(from_label)
        to_idx = self._ensure_vertex(to_label)
        self.forward[from_idx].append(to_idx)
        self.transpose[to_idx].append(from_idx)
        self._edge_count += 1

    def _ensure_vertex(self, label: str) -> int:
        idx = self.registry.add(label)
        if idx == len(self.forward):
            self.forward.append([])
            self.transpose.append([])
        return idx

    # =========================================================================
    # Core Accessors
    # =========================================================================

    def has_vertex(self, label: str) -> bool:
        return label in self.registry

    def vertex_count(self) -> int:
        return len(self.registry)

    def edge_count(self) -> int:
        """Number of links added, counting repeats."""
        return self._edge_count

    def get_links(self, label: str) -> list[str]:
        """Get outgoing links from a page as labels."""
        idx = self.registry.index_of(label)
        if idx is None:
            return []
        return [self.registry.label_of(i) for i in self.forward[idx]]

    def get_inbound_links(self, label: str) -> list[str]:
        """Get all pages that link to this page."""
        idx = self.registry.index_of(label)
        if idx is None:
            return []
        return [self.registry.label_of(i) for i in self.transpose[idx]]

    # =========================================================================
    # Queries
    # =========================================================================

    def shortest_path(self, from_label: str, to_label: str) -> int:
        """
        Minimum number of links to follow from one page to another.

        Returns:
            Edge count of a shortest path, or -1 if either page is unknown
            or the target cannot be reached.
        """
        from_idx = self.registry.index_of(from_label)
        to_idx = self.registry.index_of(to_label)
        if from_idx is None or to_idx is None:
            logger.debug(f"Unknown page in shortest_path({from_label!r}, {to_label!r})")
            return UNREACHABLE

        distances = bfs_distances(self.forward, from_idx)
        return int(distances[to_idx])

    def centers(self) -> list[str]:
        """
        Pages of minimum eccentricity, in insertion order.

        Eccentricity only counts pages a vertex can actually reach, so on a
        disconnected graph a sink page (eccentricity 0) is always a center.
        """
        centers: list[str] = []
        min_eccentricity: int | None = None

        for idx in range(self.vertex_count()):
            ecc = eccentricity(bfs_distances(self.forward, idx))
            if min_eccentricity is None or ecc < min_eccentricity:
                min_eccentricity = ecc
                centers = [self.registry.label_of(idx)]
            elif ecc == min_eccentricity:
                centers.append(self.registry.label_of(idx))

        logger.info(f"Found {len(centers)} center(s) with eccentricity {min_eccentricity}")
        return centers

    def strongly_connected_components(self) -> list[list[str]]:
        """
        Partition the pages into strongly connected components.

        Components come out in reverse depth-first finish order of their first
        page; pages within a component are in transpose depth-first order.
        """
        components = kosaraju(self.forward, self.transpose)
        logger.info(f"Found {len(components)} strongly connected component(s)")
        return [[self.registry.label_of(i) for i in component] for component in components]

    def solve_hamiltonian(self) -> HamiltonianResult:
        """
        Find the ordering of all pages with the fewest missing links.

        The result's cost is 0 (and is_hamiltonian True) exactly when the
        ordering is a genuine Hamiltonian path.
        """
        order, cost = hamiltonian.solve(self.forward, NO_LINK_PENALTY)
        result = HamiltonianResult(
            path=[self.registry.label_of(i) for i in order],
            cost=cost,
            penalty=NO_LINK_PENALTY,
        )
        if order and not result.is_hamiltonian:
            logger.warning(
                f"No Hamiltonian path exists; best ordering has "
                f"{result.missing_links} missing link(s)"
            )
        return result

    def hamiltonian_path(self) -> list[str]:
        """
        Pages in the order of a path that follows links and visits each exactly once.

        Returns an empty list if no such path exists (or the graph is empty);
        solve_hamiltonian() still gives the ordering with the fewest missing links.
        """
        result = self.solve_hamiltonian()
        if not result.is_hamiltonian:
            return []
        return result.path

    # =========================================================================
    # Utility Methods
    # =========================================================================

    def validate(self) -> dict[str, bool]:
        """Run consistency checks on the graph structures."""
        n = len(self.registry)
        forward_pairs = sorted(
            (source, target)
            for source, targets in enumerate(self.forward)
            for target in targets
        )
        transpose_pairs = sorted(
            (source, target)
            for target, sources in enumerate(self.transpose)
            for source in sources
        )
        return {
            "registry_consistent": self.registry.is_consistent(),
            "forward_size_matches": len(self.forward) == n,
            "transpose_size_matches": len(self.transpose) == n,
            "transpose_mirrors_forward": forward_pairs == transpose_pairs,
            "edge_count_matches": len(forward_pairs) == self._edge_count,
            "indices_in_range": all(0 <= s < n and 0 <= t < n for s, t in forward_pairs),
        }

    def stats(self) -> dict:
        """Get statistics about the graph."""
        return {
            "vertices": self.vertex_count(),
            "edges": self.edge_count(),
            "self_loops": sum(
                targets.count(source) for source, targets in enumerate(self.forward)
            ),
            "sinks": sum(1 for targets in self.forward if not targets),
            "sources": sum(1 for sources in self.transpose if not sources),
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={self.vertex_count()}, "
            f"edges={self.edge_count()})"
        )
