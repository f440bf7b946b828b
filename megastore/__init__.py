"""Product catalogue loading, accent-insensitive search, recommendations and a Tk window."""

__version__ = "0.1.0"