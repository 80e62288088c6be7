"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pagegraph import PageGraph

A = "https://en.wikipedia.org/wiki/Albert_Einstein"
B = "https://en.wikipedia.org/wiki/Physics"
C = "https://en.wikipedia.org/wiki/Mathematics"
D = "https://en.wikipedia.org/wiki/Pizza"


@pytest.fixture
def pages() -> tuple[str, str, str, str]:
    """Return four page URLs used as vertex labels."""
    return (A, B, C, D)


@pytest.fixture
def empty_graph() -> PageGraph:
    return PageGraph()


@pytest.fixture
def cycle_graph() -> PageGraph:
    """A -> B -> C -> A."""
    return PageGraph.from_edges([(A, B), (B, C), (C, A)])


@pytest.fixture
def disconnected_graph() -> PageGraph:
    """A -> B, with C isolated."""
    graph = PageGraph()
    graph.add_edge(A, B)
    graph.add_vertex(C)
    return graph


@pytest.fixture
def chain_graph() -> PageGraph:
    """A -> B -> C -> D with a shortcut A -> C."""
    return PageGraph.from_edges([(A, B), (B, C), (C, D), (A, C)])
