"""
Result dataclasses returned by graph queries.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pagegraph.config import NO_LINK_PENALTY


@dataclass
class HamiltonianResult:
    """
    Outcome of the Hamiltonian path search.

    Attributes:
        path: Labels in visiting order (every vertex exactly once)
        cost: Total move cost; 0 means every consecutive pair is linked
        penalty: Cost charged per consecutive pair with no link
    """

    path: list[str] = field(default_factory=list)
    cost: int = 0
    penalty: int = NO_LINK_PENALTY

    @property
    def is_hamiltonian(self) -> bool:
        """Whether path is a genuine Hamiltonian path of the graph."""
        return bool(self.path) and self.cost == 0

    @property
    def missing_links(self) -> int:
        """Number of consecutive pairs in path with no direct link."""
        return self.cost // self.penalty
