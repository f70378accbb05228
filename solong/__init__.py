"""Map loading, checking and reachability for a tile-based collect-and-exit puzzle game."""

__version__ = "0.1.0"