"""
pagegraph: analysis of directed page-link graphs.

Answers shortest path, graph center, strongly connected component and
Hamiltonian path queries over pages identified by URL.
"""

from pagegraph.graph import HamiltonianResult, LabelRegistry, PageGraph

__version__ = "0.1.0"

__all__ = ["HamiltonianResult", "LabelRegistry", "PageGraph"]
