"""Stacks, queues, linked lists and graph algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "adjacency",
    "doubly_linked",
    "errors",
    "queues",
    "singly_linked",
    "stacks",
    "topological",
    "traversal",
]