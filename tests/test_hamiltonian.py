"""
Tests for the Hamiltonian path solver and its PageGraph entry points.
"""

import itertools
import logging
import random

import pytest

from pagegraph import HamiltonianResult, PageGraph
from pagegraph.algorithms import hamiltonian
from pagegraph.config import NO_LINK_PENALTY
from tests.conftest import A, B, C, D


def _path_cost(graph: PageGraph, path: list[str]) -> int:
    return sum(
        0 if target in graph.get_links(source) else NO_LINK_PENALTY
        for source, target in itertools.pairwise(path)
    )


class TestLinkCosts:
    """Test the move-cost matrix."""

    def test_links_are_free(self):
        costs = hamiltonian.link_costs([[1, 1], [], [0]], penalty=5)
        assert costs.tolist() == [
            [5, 0, 5],
            [5, 5, 5],
            [0, 5, 5],
        ]


class TestSolve:
    """Test the index-level DP."""

    def test_empty(self):
        assert hamiltonian.solve([]) == ([], 0)

    def test_single_vertex(self):
        assert hamiltonian.solve([[]]) == ([0], 0)

    def test_chain_unique_path(self):
        order, cost = hamiltonian.solve([[1], [2], [3], []])
        assert order == [0, 1, 2, 3]
        assert cost == 0

    def test_reverse_chain(self):
        """Indices need not follow visiting order."""
        order, cost = hamiltonian.solve([[], [0], [1]])
        assert order == [2, 1, 0]
        assert cost == 0

    def test_no_links(self):
        """Every permutation costs (n - 1) penalties."""
        order, cost = hamiltonian.solve([[], [], []], penalty=7)
        assert sorted(order) == [0, 1, 2]
        assert cost == 14

    def test_large_enough_to_warn(self, monkeypatch, caplog):
        monkeypatch.setattr(hamiltonian, "HAMILTONIAN_WARN_VERTICES", 2)
        with caplog.at_level(logging.WARNING, logger="pagegraph.algorithms.hamiltonian"):
            order, cost = hamiltonian.solve([[1], [2], []])
        assert order == [0, 1, 2]
        assert cost == 0
        assert "DP cells" in caplog.text

    @pytest.mark.parametrize("seed", range(5))
    def test_matches_brute_force(self, seed):
        """The DP minimum equals the best of all permutations."""
        rng = random.Random(seed)
        n = 6
        forward = [[j for j in range(n) if j != i and rng.random() < 0.3] for i in range(n)]
        costs = hamiltonian.link_costs(forward)

        best = min(
            sum(int(costs[a, b]) for a, b in itertools.pairwise(perm))
            for perm in itertools.permutations(range(n))
        )
        order, cost = hamiltonian.solve(forward)

        assert sorted(order) == list(range(n))
        assert cost == best
        assert cost == sum(int(costs[a, b]) for a, b in itertools.pairwise(order))


class TestHamiltonianPath:
    """Test the label-level query."""

    def test_empty(self, empty_graph):
        assert empty_graph.hamiltonian_path() == []
        result = empty_graph.solve_hamiltonian()
        assert result.path == []
        assert result.is_hamiltonian is False

    def test_cycle(self, cycle_graph):
        """A 3-cycle has a zero-cost path through all pages."""
        path = cycle_graph.hamiltonian_path()
        assert sorted(path) == sorted([A, B, C])
        assert _path_cost(cycle_graph, path) == 0
        assert path == [B, C, A]

    def test_chain_with_shortcut(self, chain_graph):
        assert chain_graph.hamiltonian_path() == [A, B, C, D]
        assert chain_graph.solve_hamiltonian().is_hamiltonian is True

    def test_no_hamiltonian_path_returns_empty(self, disconnected_graph):
        """A one-way link plus an isolated page has no Hamiltonian path."""
        assert disconnected_graph.hamiltonian_path() == []

    def test_solve_keeps_least_penalty_ordering(self, disconnected_graph):
        """solve_hamiltonian still exposes the best ordering it found."""
        result = disconnected_graph.solve_hamiltonian()
        assert result.path == [C, A, B]
        assert len(result.path) == disconnected_graph.vertex_count()

    def test_unlinked_pair_returns_empty(self):
        graph = PageGraph()
        graph.add_vertex(A)
        graph.add_vertex(B)
        assert graph.hamiltonian_path() == []

    def test_single_page(self):
        graph = PageGraph()
        graph.add_vertex(A)
        assert graph.hamiltonian_path() == [A]

    def test_too_many_pages_skipped(self, monkeypatch, caplog):
        """Graphs above the size limit return an empty path instead of allocating."""
        monkeypatch.setattr(hamiltonian, "HAMILTONIAN_MAX_VERTICES", 3)
        graph = PageGraph.from_edges([(A, B), (B, C), (C, D)])
        with caplog.at_level(logging.ERROR, logger="pagegraph.algorithms.hamiltonian"):
            result = graph.solve_hamiltonian()
        assert result.path == []
        assert result.is_hamiltonian is False
        assert graph.hamiltonian_path() == []
        assert "exceeds the limit" in caplog.text

    def test_solve_reports_missing_links(self, disconnected_graph, caplog):
        with caplog.at_level(logging.WARNING, logger="pagegraph.graph.store"):
            result = disconnected_graph.solve_hamiltonian()
        assert result.cost == NO_LINK_PENALTY
        assert result.missing_links == 1
        assert result.is_hamiltonian is False
        assert "No Hamiltonian path exists" in caplog.text

    def test_duplicate_edges_and_self_loops(self):
        graph = PageGraph.from_edges([(A, A), (A, B), (A, B), (B, B)])
        result = graph.solve_hamiltonian()
        assert result.path == [A, B]
        assert result.is_hamiltonian is True


class TestHamiltonianResult:
    """Test result dataclass properties."""

    def test_defaults(self):
        result = HamiltonianResult()
        assert result.path == []
        assert result.cost == 0
        assert result.missing_links == 0
        assert result.is_hamiltonian is False

    def test_missing_links_uses_penalty(self):
        result = HamiltonianResult(path=["x", "y", "z"], cost=6, penalty=3)
        assert result.missing_links == 2
