"""Classic algorithms: graphs, matrices, convex hulls, search and sorting."""

__version__ = "0.1.0"
__all__ = ["graphs", "matrices", "hull", "search", "sorting"]