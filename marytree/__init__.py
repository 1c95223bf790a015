"""Lockable complete m-ary tree with lock, unlock and upgrade operations, and a query-running command."""

__version__ = "0.1.0"
__all__ = ["tree", "cli"]