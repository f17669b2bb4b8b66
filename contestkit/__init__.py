"""Contest algorithms: windows, subarrays, range queries, strings, graphs,
dynamic programming, greedy methods and searching."""

__version__ = "0.1.0"