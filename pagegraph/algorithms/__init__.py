"""
Graph algorithms module.

Index-level algorithms on adjacency lists:
- traversal: BFS distances, eccentricity, iterative DFS
- scc: Kosaraju strongly connected components
- hamiltonian: bitmask DP minimum-cost Hamiltonian path
"""
