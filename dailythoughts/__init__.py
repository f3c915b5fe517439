"""Daily Thoughts: a small server for a blog of dated markdown entries."""

__version__ = "0.1.0"
