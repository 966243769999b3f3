"""fuzzyrank Shared Module.

This package contains shared constants, error handling, and logging used across fuzzyrank.
"""

__all__ = ["constants", "errors", "logging"]
