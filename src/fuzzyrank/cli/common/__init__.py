"""Shared building blocks for fuzzyrank CLI commands."""
