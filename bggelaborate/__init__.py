"""Look up board game details on BoardGameGeek and fill them into a CSV."""

__version__ = "0.1.0"