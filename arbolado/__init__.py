"""Binary, binary search and AVL trees with in-order iteration, a text format for trees, and list helpers."""

__version__ = "0.1.0"