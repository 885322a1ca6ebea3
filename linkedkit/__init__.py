"""Linked-list algorithms and list-backed data structures: caches, a text editor, a key counter and a doubly linked list."""

__version__ = "0.1.0"