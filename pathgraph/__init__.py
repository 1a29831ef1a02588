"""
pathgraph: named graphs and steppable A* search.

A generic in-memory graph keyed by arbitrary node names, with symmetric
weighted edges, plus an incremental A* search that a host can drive one
step at a time.
"""

__version__ = "0.1.0"
