"""Command-line interface for fuzzyrank."""
