"""Hill climbing, simulated annealing, A* search, coin change and sequence consensus."""

__version__ = "0.1.0"