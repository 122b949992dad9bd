"""Classic algorithms and data structures: lists, queues, heaps, graphs, trees, sorting and puzzles."""

__version__ = "0.1.0"