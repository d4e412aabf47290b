"""
Pure algorithms with no domain-specific dependencies.

Modules:
    graph - Depth-first discovery and constrained path search on cyclic graphs
"""
