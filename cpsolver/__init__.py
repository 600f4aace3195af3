"""Solvers for classic competitive-programming problems, one function per problem."""

__version__ = "0.1.0"
__all__ = [
    "connectivity",
    "dp_counting",
    "dp_optimization",
    "graph_cycles",
    "grid_search",
    "intro_basic",
    "intro_search",
    "number_theory",
    "shortest_paths",
]