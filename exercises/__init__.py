"""Recursion, memoisation and data-structure exercises."""
