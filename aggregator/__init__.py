"""Concurrent posts/comments/authors aggregator"""

__version__ = "1.0.0"
