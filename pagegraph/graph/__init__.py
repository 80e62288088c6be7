"""
Graph module.

Provides the page-link graph store and its label registry:
- LabelRegistry: label <-> dense vertex index mapping
- PageGraph: forward and transpose adjacency with query methods
- HamiltonianResult: Hamiltonian search outcome
"""

from pagegraph.graph.registry import LabelRegistry
from pagegraph.graph.state import HamiltonianResult
from pagegraph.graph.store import PageGraph

__all__ = ["HamiltonianResult", "LabelRegistry", "PageGraph"]
